"""Draft editing and invoice finalization services."""

from invoicing.services.draft_service import DraftService, renumber, validate_draft
from invoicing.services.invoice_service import InvoiceService

__all__ = ["DraftService", "InvoiceService", "renumber", "validate_draft"]

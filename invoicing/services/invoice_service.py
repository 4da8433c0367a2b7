"""
Invoice service for finalizing drafts.

Turns a validated draft into an immutable Invoice carrying its totals and the
grand total in words. Rendering and storage are left to subscribers of
InvoiceFinalized.
"""

import logging

from invoicing.calculator import compute_totals
from invoicing.config import InvoicingConfig
from invoicing.event_bus import EventBus
from invoicing.events import InvoiceFinalized
from invoicing.exceptions import DraftValidationError
from invoicing.models import Invoice, InvoiceDraft, InvoiceStatus, InvoiceTotals
from invoicing.services.draft_service import renumber, validate_draft
from invoicing.words import number_to_words_indian
from utils.timezone import now_utc

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice operations."""

    def __init__(self, config: InvoicingConfig, event_bus: EventBus):
        self.config = config
        self.event_bus = event_bus

    def format_invoice_number(self, financial_year: str, invoice_number: str) -> str:
        """
        Displayed invoice number.

        Format: PREFIX/FY/NUMBER, e.g. AS/24-25/022. The number keeps its
        leading zeros as entered.
        """
        return f"{self.config.invoice_number_prefix}/{financial_year}/{invoice_number.strip()}"

    def compute(self, draft: InvoiceDraft) -> tuple[InvoiceTotals, str]:
        """
        Totals and amount in words for a draft, without validating it.

        Returns:
            (totals, grand total in words)
        """
        totals = compute_totals(
            draft.line_items,
            draft.tax.cgst_percentage,
            draft.tax.sgst_percentage,
        )
        return totals, number_to_words_indian(totals.grand_total)

    def finalize(self, draft: InvoiceDraft) -> Invoice:
        """
        Create an invoice from a draft.

        Args:
            draft: Draft to finalize; it is not modified

        Returns:
            Invoice in GENERATED status

        Raises:
            DraftValidationError: If the draft is incomplete
        """
        problems = validate_draft(draft)
        if problems:
            raise DraftValidationError(problems)

        totals, words = self.compute(draft)

        invoice = Invoice(
            invoice_number=draft.invoice_number.strip(),
            invoice_number_prefix=self.config.invoice_number_prefix,
            financial_year=draft.financial_year,
            invoice_date=draft.invoice_date,
            work_order_reference=draft.work_order_reference.strip(),
            work_order_date=draft.work_order_date,
            customer=draft.customer.model_copy(),
            line_items=tuple(renumber(list(draft.line_items))),
            tax=draft.tax.model_copy(),
            totals=totals,
            amount_in_words=words,
            status=InvoiceStatus.GENERATED,
            finalized_at=now_utc(),
        )

        logger.info(
            "Finalized invoice %s: %d item(s), grand total %s",
            invoice.formatted_number,
            len(invoice.line_items),
            totals.grand_total,
        )

        self.event_bus.publish(InvoiceFinalized.create(invoice=invoice))

        return invoice

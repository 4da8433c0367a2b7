"""Invoicing domain models."""

from invoicing.models.customer import CustomerDetails, CustomerUpdate
from invoicing.models.line_item import LineItem, LineItemUpdate
from invoicing.models.invoice import (
    Invoice, InvoiceDraft, InvoiceStatus, InvoiceTotals, TaxConfiguration,
)

__all__ = [
    # Customer
    "CustomerDetails", "CustomerUpdate",
    # LineItem
    "LineItem", "LineItemUpdate",
    # Invoice
    "Invoice", "InvoiceDraft", "InvoiceStatus", "InvoiceTotals", "TaxConfiguration",
]

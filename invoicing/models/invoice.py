"""Invoice domain models.

All amounts are carried in paise (integer) to avoid floating point issues.
Rs. 10.00 = 1000 paise. Rupee values are exposed as two-place Decimals.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from invoicing.models.customer import CustomerDetails
from invoicing.models.line_item import LineItem
from utils.money import from_paise


class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""

    DRAFT = "draft"
    GENERATED = "generated"


class TaxConfiguration(BaseModel):
    """CGST and SGST percentages (9 means 9%). Not capped at 100."""

    cgst_percentage: Decimal = Field(Decimal("9"), ge=0)
    sgst_percentage: Decimal = Field(Decimal("9"), ge=0)


class InvoiceTotals(BaseModel):
    """Financial summary derived from line items and tax percentages."""

    model_config = ConfigDict(frozen=True)

    total_basic_paise: int = 0
    cgst_paise: int = 0
    sgst_paise: int = 0
    grand_total_paise: int = 0

    @computed_field
    @property
    def total_basic_amount(self) -> Decimal:
        return from_paise(self.total_basic_paise)

    @computed_field
    @property
    def cgst_amount(self) -> Decimal:
        return from_paise(self.cgst_paise)

    @computed_field
    @property
    def sgst_amount(self) -> Decimal:
        return from_paise(self.sgst_paise)

    @computed_field
    @property
    def grand_total(self) -> Decimal:
        return from_paise(self.grand_total_paise)


class InvoiceDraft(BaseModel):
    """Invoice being composed. Totals are recomputed on every read."""

    invoice_number: str = Field("", max_length=20)
    financial_year: str = Field(..., pattern=r"^\d{2}-\d{2}$")
    invoice_date: date
    work_order_reference: str = Field("", max_length=255)
    work_order_date: date | None = None
    customer: CustomerDetails = Field(default_factory=CustomerDetails)
    line_items: list[LineItem] = Field(default_factory=list)
    tax: TaxConfiguration = Field(default_factory=TaxConfiguration)

    @property
    def totals(self) -> InvoiceTotals:
        from invoicing.calculator import compute_totals

        return compute_totals(
            self.line_items,
            self.tax.cgst_percentage,
            self.tax.sgst_percentage,
        )


class Invoice(BaseModel):
    """Finalized invoice, handed to PDF rendering and storage."""

    model_config = ConfigDict(frozen=True)

    invoice_number: str
    invoice_number_prefix: str
    financial_year: str
    invoice_date: date
    work_order_reference: str
    work_order_date: date | None
    customer: CustomerDetails
    line_items: tuple[LineItem, ...]
    tax: TaxConfiguration
    totals: InvoiceTotals
    amount_in_words: str
    status: InvoiceStatus = InvoiceStatus.GENERATED
    finalized_at: datetime

    @property
    def formatted_number(self) -> str:
        """Displayed invoice number, e.g. AS/24-25/022."""
        return f"{self.invoice_number_prefix}/{self.financial_year}/{self.invoice_number}"

    @property
    def grand_total(self) -> Decimal:
        return self.totals.grand_total

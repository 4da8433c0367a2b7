"""Line item domain models.

Rates are quoted per kWp; the billed amount is derived from rate and
quantity and is never set directly.
"""

from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field


class LineItemUpdate(BaseModel):
    """Fields a user can edit on a line item. All fields optional."""

    model_config = ConfigDict(extra="forbid")

    description: str | None = Field(None, max_length=500)
    hsn_sac_code: str | None = Field(None, max_length=20)
    rate: Decimal | None = Field(None, ge=0)
    quantity: Decimal | None = Field(None, ge=0, decimal_places=3)
    unit: str | None = Field(None, max_length=20)


class LineItem(BaseModel):
    """One billed row of an invoice."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    serial_number: int = Field(1, ge=1)
    description: str = Field("", max_length=500)
    hsn_sac_code: str = Field("", max_length=20)
    rate: Decimal = Field(Decimal("0"), ge=0)
    quantity: Decimal = Field(Decimal("0"), ge=0, decimal_places=3)
    unit: str = Field("kWp", max_length=20)

    @computed_field
    @property
    def amount(self) -> Decimal:
        """Billed amount in rupees, recomputed from rate and quantity."""
        from invoicing.calculator import compute_line_amount

        return compute_line_amount(self.rate, self.quantity)

    @property
    def amount_paise(self) -> int:
        from invoicing.calculator import line_amount_paise

        return line_amount_paise(self.rate, self.quantity)

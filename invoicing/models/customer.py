"""Customer (billed party) details as printed on an invoice."""

from pydantic import BaseModel, Field


class CustomerUpdate(BaseModel):
    """Customer fields that can be edited on a draft. All fields optional."""

    company_name: str | None = Field(None, max_length=255)
    address_line1: str | None = Field(None, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    address_line3: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    pincode: str | None = Field(None, max_length=10)
    gst_number: str | None = Field(None, max_length=15)
    pan_number: str | None = Field(None, max_length=10)


class CustomerDetails(BaseModel):
    """Billed customer. Fields may be blank until the draft is validated."""

    id: str | None = None
    company_name: str = Field("", max_length=255)
    address_line1: str = Field("", max_length=255)
    address_line2: str = Field("", max_length=255)
    address_line3: str = Field("", max_length=255)
    city: str = Field("", max_length=100)
    state: str = Field("", max_length=100)
    pincode: str = Field("", max_length=10)
    gst_number: str = Field("", max_length=15)
    pan_number: str = Field("", max_length=10)

    @property
    def display_address(self) -> str:
        """Single-line address, skipping blank parts."""
        parts = [
            self.address_line1, self.address_line2, self.address_line3,
            self.city, self.state,
        ]
        address = ", ".join(p.strip() for p in parts if p and p.strip())
        if self.pincode.strip():
            address = f"{address} - {self.pincode.strip()}" if address else self.pincode.strip()
        return address

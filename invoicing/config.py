"""Invoicing configuration."""

import os
from decimal import Decimal
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "INVOICING_"


class InvoicingConfig(BaseModel):
    """
    Defaults applied to new invoice drafts.

    Tax percentages are plain percentages (9 means 9%), not basis points.
    """

    default_cgst_percentage: Decimal = Field(
        default=Decimal("9"),
        description="CGST percentage for new drafts",
        ge=0,
    )
    default_sgst_percentage: Decimal = Field(
        default=Decimal("9"),
        description="SGST percentage for new drafts",
        ge=0,
    )
    default_unit: str = Field(
        default="kWp",
        description="Unit label for new line items",
        min_length=1,
        max_length=20,
    )
    invoice_number_prefix: str = Field(
        default="AS",
        description="Prefix of the displayed invoice number (PREFIX/FY/NUMBER)",
        min_length=1,
        max_length=10,
    )
    timezone: str = Field(
        default="Asia/Kolkata",
        description="IANA timezone used for invoice dates and financial year",
    )

    @field_validator("timezone")
    @classmethod
    def must_be_known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (KeyError, ValueError, ZoneInfoNotFoundError):
            raise ValueError(f"Unknown timezone: {value}")
        return value


def load_config(env_file: str | Path | None = None) -> InvoicingConfig:
    """
    Build configuration from INVOICING_* environment variables.

    A .env file is loaded first when present; variables already set in the
    environment win. Unset variables fall back to the model defaults.

    Example:
        INVOICING_DEFAULT_CGST_PERCENTAGE=6
        INVOICING_INVOICE_NUMBER_PREFIX=APX
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    values = {}
    for name in InvoicingConfig.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw.strip()

    return InvoicingConfig.model_validate(values)

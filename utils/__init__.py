"""Utility modules for cross-cutting concerns."""

from utils.timezone import now_utc, to_local, today_local
from utils.financial_year import financial_year_for, current_financial_year
from utils.money import (
    PAISE_PER_RUPEE,
    to_decimal,
    to_fraction,
    to_paise,
    from_paise,
    round_paise,
    format_indian_currency,
)

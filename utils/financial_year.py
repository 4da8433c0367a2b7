"""Indian financial year labels (April 1 - March 31)."""

from datetime import date

from utils.timezone import today_local

FINANCIAL_YEAR_START_MONTH = 4


def financial_year_for(day: date) -> str:
    """
    Financial year label for a date, as two-digit years joined by a dash.

    2024-04-01 -> "24-25", 2025-03-31 -> "24-25", 2025-04-01 -> "25-26".
    """
    start = day.year if day.month >= FINANCIAL_YEAR_START_MONTH else day.year - 1
    return f"{start % 100:02d}-{(start + 1) % 100:02d}"


def current_financial_year(tz_name: str) -> str:
    """Financial year label for today in the given timezone."""
    return financial_year_for(today_local(tz_name))

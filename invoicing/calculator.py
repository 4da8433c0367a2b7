"""
Invoice totals calculator.

Line amounts, the basic total, CGST, SGST and the grand total are all
computed in integer paise. Each rounding step happens exactly once, on a
paise value, so the basic total always equals the sum of its rounded parts.
Intermediate products are exact, so there is no upper bound on inputs.
"""

from decimal import Decimal
from typing import Iterable

from invoicing.models.invoice import InvoiceTotals
from utils.money import PAISE_PER_RUPEE, to_fraction, to_paise, from_paise, round_paise

# Rates are quoted per kWp but billed per watt.
KWP_TO_WATT_FACTOR = 1000


def line_amount_paise(rate: Decimal | int | float | str, quantity: Decimal | int | float | str) -> int:
    """Line amount in whole paise: rate * quantity * 1000, rounded half away from zero."""
    raw = to_fraction(rate) * to_fraction(quantity) * KWP_TO_WATT_FACTOR
    return round_paise(raw * PAISE_PER_RUPEE)


def compute_line_amount(rate: Decimal | int | float | str, quantity: Decimal | int | float | str) -> Decimal:
    """
    Billing amount for one line item.

    Args:
        rate: Unit price per kWp
        quantity: Quantity, up to 3 fractional digits

    Returns:
        Amount in rupees with exactly two decimal places.

    Inputs are not validated here; a negative rate or quantity yields a
    negative amount. Reject such values before calling.
    """
    return from_paise(line_amount_paise(rate, quantity))


def tax_paise(total_basic_paise: int, percentage: Decimal | int | float | str) -> int:
    """Tax on a paise total, rounded to whole paise."""
    return round_paise(total_basic_paise * to_fraction(percentage) / 100)


def compute_totals(
    line_items: Iterable,
    cgst_percentage: Decimal | int | float | str,
    sgst_percentage: Decimal | int | float | str,
) -> InvoiceTotals:
    """
    Derive the invoice summary from line items and tax percentages.

    CGST and SGST are rounded independently, so with equal percentages
    they are still computed separately from the basic total.

    Args:
        line_items: Objects exposing an ``amount`` in rupees
        cgst_percentage: CGST percentage (9 means 9%)
        sgst_percentage: SGST percentage

    Returns:
        InvoiceTotals; all zeros for an empty list.
    """
    total_basic = sum((to_paise(item.amount) for item in line_items), 0)
    cgst = tax_paise(total_basic, cgst_percentage)
    sgst = tax_paise(total_basic, sgst_percentage)

    return InvoiceTotals(
        total_basic_paise=total_basic,
        cgst_paise=cgst,
        sgst_paise=sgst,
        grand_total_paise=total_basic + cgst + sgst,
    )

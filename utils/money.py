"""
Paise-based money handling.

All monetary arithmetic happens on integer paise (1 rupee = 100 paise) so that
sums of rounded amounts never drift. Rupee values crossing a boundary are
Decimals quantized to exactly two places.

Products and rounding go through Fraction, so results are exact at any
magnitude instead of being cut to the Decimal context's 28 digits.
"""

from decimal import Decimal
from fractions import Fraction

PAISE_PER_RUPEE = 100


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a numeric value to Decimal.

    Floats go through str() so 1.5 becomes Decimal("1.5") rather than the
    binary expansion of the float.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def to_fraction(value: Decimal | int | float | str | Fraction) -> Fraction:
    """Exact rational value of a number, with floats read via to_decimal()."""
    if isinstance(value, Fraction):
        return value
    return Fraction(to_decimal(value))


def round_paise(value: Decimal | int | float | str | Fraction) -> int:
    """Round a paise-denominated value to a whole number of paise (half away from zero)."""
    exact = to_fraction(value)
    magnitude = (2 * abs(exact.numerator) + exact.denominator) // (2 * exact.denominator)
    return -magnitude if exact < 0 else magnitude


def to_paise(amount: Decimal | int | float | str | Fraction) -> int:
    """Convert a rupee amount to whole paise."""
    return round_paise(to_fraction(amount) * PAISE_PER_RUPEE)


def from_paise(paise: int) -> Decimal:
    """Convert whole paise back to a rupee Decimal with exactly two places."""
    # Built from digits so no context precision applies.
    digits = tuple(int(d) for d in str(abs(paise)))
    return Decimal((1 if paise < 0 else 0, digits, -2))


def format_indian_currency(amount: Decimal | int | float | str) -> str:
    """
    Format a rupee amount for display with Indian digit grouping.

    The last three digits form one group, every group above that has two
    digits: 1234567.8 -> "₹ 12,34,567.80".
    """
    paise = to_paise(amount)
    sign = "-" if paise < 0 else ""
    rupees, fraction = divmod(abs(paise), PAISE_PER_RUPEE)

    digits = str(rupees)
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    groups.append(tail)

    return f"₹ {sign}{','.join(groups)}.{fraction:02d}"

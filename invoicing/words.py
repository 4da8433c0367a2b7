"""
Rupee amounts in Indian-English words.

Uses the Indian grouping: Thousand (10^3), Lakh (10^5), Crore (10^7),
Arab (10^9), Kharab (10^11).

    number_to_words_indian(1234567)
    -> "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees Only"
"""

from decimal import Decimal

from invoicing.exceptions import AmountTooLargeError, NegativeAmountError
from utils.money import PAISE_PER_RUPEE, to_decimal, to_paise

ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

# Largest first.
DENOMINATIONS = [
    (10**11, "Kharab"),
    (10**9, "Arab"),
    (10**7, "Crore"),
    (10**5, "Lakh"),
    (10**3, "Thousand"),
]

# A quotient at the largest denomination can use the hundreds rule, so the
# table names every whole amount below 1000 Kharab.
MAX_RUPEES = 1000 * DENOMINATIONS[0][0]


def two_digit_words(num: int) -> str:
    """Words for 0-99; zero is the empty string."""
    if num == 0:
        return ""
    if num < 10:
        return ONES[num]
    if num < 20:
        return TEENS[num - 10]
    tens, ones = divmod(num, 10)
    return TENS[tens] + (f" {ONES[ones]}" if ones else "")


def three_digit_words(num: int) -> str:
    """Words for 0-999."""
    hundreds, remainder = divmod(num, 100)
    parts = []
    if hundreds:
        parts.append(f"{ONES[hundreds]} Hundred")
    if remainder:
        parts.append(two_digit_words(remainder))
    return " ".join(parts)


def below_thousand_words(num: int) -> str:
    if num < 100:
        return two_digit_words(num)
    return three_digit_words(num)


def rupee_words(rupees: int) -> str:
    """Whole rupees as grouped words, without the currency name."""
    parts = []
    remainder = rupees
    for value, name in DENOMINATIONS:
        quotient, remainder = divmod(remainder, value)
        if quotient:
            parts.append(f"{below_thousand_words(quotient)} {name}")
    if remainder:
        parts.append(below_thousand_words(remainder))
    return " ".join(parts)


def number_to_words_indian(amount: Decimal | int | float | str) -> str:
    """
    Express a rupee amount in words, Indian numbering.

    The amount is rounded to whole paise first.

    Args:
        amount: Non-negative rupee amount, up to two decimal places

    Returns:
        "Zero Rupees Only" for zero, "<paise> Paise Only" when there are no
        whole rupees, otherwise "<rupees> Rupees[ and <paise> Paise] Only".

    Raises:
        NegativeAmountError: If amount is negative
        AmountTooLargeError: If amount is 1000 Kharab (10^14) or more
    """
    # Before to_paise, which would build an integer as large as the input.
    if to_decimal(amount) >= MAX_RUPEES:
        raise AmountTooLargeError(amount, MAX_RUPEES)

    paise = to_paise(amount)
    if paise < 0:
        raise NegativeAmountError(amount)

    rupees, fraction = divmod(paise, PAISE_PER_RUPEE)
    if rupees >= MAX_RUPEES:
        raise AmountTooLargeError(amount, MAX_RUPEES)

    if rupees == 0 and fraction == 0:
        return "Zero Rupees Only"
    if rupees == 0:
        return f"{two_digit_words(fraction)} Paise Only"

    result = f"{rupee_words(rupees)} Rupees"
    if fraction:
        result += f" and {two_digit_words(fraction)} Paise"
    return f"{result} Only"

"""GST invoice computation: line amounts, tax totals and amounts in words."""

from invoicing.calculator import compute_line_amount, compute_totals, line_amount_paise
from invoicing.words import number_to_words_indian

__all__ = [
    "compute_line_amount",
    "compute_totals",
    "line_amount_paise",
    "number_to_words_indian",
]

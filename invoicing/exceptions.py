"""Typed exceptions for invoice computation and drafting."""


class InvoicingError(Exception):
    """Base class for invoicing errors."""


class NegativeAmountError(InvoicingError, ValueError):
    """A monetary amount was negative where only non-negative values are defined."""

    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Amount must not be negative, got {amount}")


class AmountTooLargeError(InvoicingError, ValueError):
    """
    Amount exceeds what the Indian denomination table can name.

    The largest named denomination is Kharab (10^11); quotients up to 999
    Kharab are spelled with the hundreds rule.
    """

    def __init__(self, amount, limit):
        self.amount = amount
        self.limit = limit
        super().__init__(f"Amount {amount} is too large to express in words (limit {limit})")


class LineItemNotFoundError(InvoicingError, LookupError):
    """No line item with the given id exists on the draft."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Line item {item_id} not found")


class DraftValidationError(InvoicingError, ValueError):
    """Draft is incomplete and cannot be finalized into an invoice."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))

"""
Draft service for the invoice being composed.

Owns one in-progress InvoiceDraft and applies the edits a form makes to it:
line items are added, edited (amount follows rate and quantity), and removed
with serial numbers kept dense. Every change publishes DraftUpdated so a
subscriber can autosave the draft.
"""

import logging
import re
from datetime import date

from invoicing.config import InvoicingConfig
from invoicing.event_bus import EventBus
from invoicing.events import DraftDiscarded, DraftUpdated
from invoicing.exceptions import LineItemNotFoundError
from invoicing.models import (
    CustomerDetails,
    CustomerUpdate,
    InvoiceDraft,
    InvoiceTotals,
    LineItem,
    LineItemUpdate,
    TaxConfiguration,
)
from utils.financial_year import financial_year_for
from utils.timezone import today_local

logger = logging.getLogger(__name__)

_INVOICE_NUMBER = re.compile(r"^\d+$")


class _Unset:
    """Marker for a header field the caller did not pass."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


def renumber(items: list[LineItem]) -> list[LineItem]:
    """Reassign serial numbers 1..N in list order."""
    return [
        item if item.serial_number == index else item.model_copy(update={"serial_number": index})
        for index, item in enumerate(items, start=1)
    ]


def validate_draft(draft: InvoiceDraft) -> list[str]:
    """
    Check a draft is complete enough to become an invoice.

    Returns:
        Human-readable problems in form order; empty when the draft is valid.
    """
    problems = []

    number = draft.invoice_number.strip()
    if not number:
        problems.append("Please enter invoice number")
    elif not _INVOICE_NUMBER.match(number):
        problems.append("Invoice number should contain only digits (e.g., 022)")

    if not draft.customer.company_name.strip():
        problems.append("Please enter customer company name")
    if not draft.customer.address_line1.strip():
        problems.append("Please enter customer address")

    if not draft.line_items:
        problems.append("Please add at least one line item")

    for item in draft.line_items:
        if not item.description.strip():
            problems.append(f"Please enter description for item {item.serial_number}")
        if item.rate <= 0:
            problems.append(f"Please enter valid rate for item {item.serial_number}")
        if item.quantity <= 0:
            problems.append(f"Please enter valid quantity for item {item.serial_number}")

    return problems


class DraftService:
    """Service for editing the current invoice draft."""

    def __init__(self, config: InvoicingConfig, event_bus: EventBus):
        self.config = config
        self.event_bus = event_bus
        self._draft = self.new_draft()

    def new_draft(self) -> InvoiceDraft:
        """Blank draft: one empty line item, default taxes, today's date."""
        today = today_local(self.config.timezone)
        return InvoiceDraft(
            financial_year=financial_year_for(today),
            invoice_date=today,
            line_items=[self._blank_item(1)],
            tax=TaxConfiguration(
                cgst_percentage=self.config.default_cgst_percentage,
                sgst_percentage=self.config.default_sgst_percentage,
            ),
        )

    def _blank_item(self, serial_number: int) -> LineItem:
        return LineItem(serial_number=serial_number, unit=self.config.default_unit)

    def _changed(self, change: str) -> None:
        logger.debug("Draft changed: %s", change)
        # Snapshot; later edits mutate self._draft in place.
        snapshot = self._draft.model_copy(deep=True)
        self.event_bus.publish(DraftUpdated.create(draft=snapshot, change=change))

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._draft.line_items):
            if item.id == item_id:
                return index
        raise LineItemNotFoundError(item_id)

    @property
    def draft(self) -> InvoiceDraft:
        return self._draft

    @property
    def totals(self) -> InvoiceTotals:
        """Totals for the current draft, recomputed on every access."""
        return self._draft.totals

    def load(self, draft: InvoiceDraft) -> InvoiceDraft:
        """
        Replace the current draft, e.g. with one restored from autosave.

        Line items are renumbered; a draft with no items gets one blank item.
        """
        items = renumber(list(draft.line_items)) or [self._blank_item(1)]
        self._draft = draft.model_copy(update={"line_items": items})
        self._changed("load")
        return self._draft

    def add_line_item(self) -> LineItem:
        """
        Append a blank line item.

        Returns:
            The new item, numbered after the existing ones
        """
        item = self._blank_item(len(self._draft.line_items) + 1)
        self._draft.line_items = [*self._draft.line_items, item]
        self._changed("add_line_item")
        return item

    def update_line_item(self, item_id: str, data: LineItemUpdate) -> LineItem:
        """
        Update editable fields of a line item.

        Args:
            item_id: Line item id
            data: Fields to change

        Returns:
            Updated line item; its amount reflects the new rate and quantity

        Raises:
            LineItemNotFoundError: If no item has this id
        """
        index = self._index_of(item_id)
        current = self._draft.line_items[index]

        updates = data.model_dump(exclude_none=True)
        if not updates:
            return current

        updated = LineItem.model_validate({
            **current.model_dump(exclude={"amount"}),
            **updates,
        })

        items = list(self._draft.line_items)
        items[index] = updated
        self._draft.line_items = items
        self._changed("update_line_item")
        return updated

    def remove_line_item(self, item_id: str) -> bool:
        """
        Remove a line item and renumber the rest 1..N.

        The last remaining item is kept so the form always has a row.

        Returns:
            True if removed, False if it was the only item

        Raises:
            LineItemNotFoundError: If no item has this id
        """
        index = self._index_of(item_id)
        if len(self._draft.line_items) == 1:
            logger.debug("Not removing line item %s: it is the only one", item_id)
            return False

        items = list(self._draft.line_items)
        del items[index]
        self._draft.line_items = renumber(items)
        self._changed("remove_line_item")
        return True

    def set_tax(self, cgst_percentage=None, sgst_percentage=None) -> TaxConfiguration:
        """Change either tax percentage; the other is left as is."""
        updates = {}
        if cgst_percentage is not None:
            updates["cgst_percentage"] = cgst_percentage
        if sgst_percentage is not None:
            updates["sgst_percentage"] = sgst_percentage
        if not updates:
            return self._draft.tax

        self._draft.tax = TaxConfiguration.model_validate({
            **self._draft.tax.model_dump(),
            **updates,
        })
        self._changed("set_tax")
        return self._draft.tax

    def set_header(
        self,
        invoice_number: str | _Unset = UNSET,
        invoice_date: date | _Unset = UNSET,
        work_order_reference: str | _Unset = UNSET,
        work_order_date: date | None | _Unset = UNSET,
    ) -> InvoiceDraft:
        """
        Update invoice header fields.

        Changing the invoice date moves the draft into that date's
        financial year. Fields not passed are left as they are;
        work_order_date=None clears the work order date.
        """
        updates = {
            "invoice_number": invoice_number,
            "invoice_date": invoice_date,
            "work_order_reference": work_order_reference,
            "work_order_date": work_order_date,
        }
        updates = {k: v for k, v in updates.items() if v is not UNSET}
        if not updates:
            return self._draft

        if "invoice_date" in updates:
            updates["financial_year"] = financial_year_for(updates["invoice_date"])

        self._draft = InvoiceDraft.model_validate({
            **self._draft.model_dump(exclude={"line_items"}),
            **updates,
            "line_items": self._draft.line_items,
        })
        self._changed("set_header")
        return self._draft

    def select_customer(self, customer: CustomerDetails) -> CustomerDetails:
        """Fill the draft's customer from a saved customer record."""
        self._draft.customer = customer.model_copy()
        self._changed("select_customer")
        return self._draft.customer

    def update_customer(self, data: CustomerUpdate) -> CustomerDetails:
        """Edit individual customer fields on the draft."""
        updates = data.model_dump(exclude_none=True)
        if not updates:
            return self._draft.customer

        self._draft.customer = CustomerDetails.model_validate({
            **self._draft.customer.model_dump(),
            **updates,
        })
        self._changed("update_customer")
        return self._draft.customer

    def validate(self) -> list[str]:
        """Problems preventing the current draft from being finalized."""
        return validate_draft(self._draft)

    def reset(self) -> InvoiceDraft:
        """Discard the current draft and start a blank one."""
        self._draft = self.new_draft()
        self.event_bus.publish(DraftDiscarded.create())
        return self._draft

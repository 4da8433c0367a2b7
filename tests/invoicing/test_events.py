"""Tests for domain event models."""

from dataclasses import FrozenInstanceError
from datetime import timezone

import pytest

from invoicing.events import (
    InvoicingEvent,
    DraftEvent, DraftUpdated, DraftDiscarded,
    InvoiceEvent, InvoiceFinalized,
)


class TestEventBase:

    def test_event_ids_are_unique(self):
        assert DraftDiscarded.create().event_id != DraftDiscarded.create().event_id

    def test_occurred_at_is_utc(self):
        assert DraftDiscarded.create().occurred_at.tzinfo == timezone.utc

    def test_events_are_frozen(self):
        event = DraftUpdated.create(draft=None, change="add_line_item")
        with pytest.raises(FrozenInstanceError):
            event.change = "other"


class TestHierarchy:

    @pytest.mark.parametrize("event_cls,parent", [
        (DraftUpdated, DraftEvent),
        (DraftDiscarded, DraftEvent),
        (InvoiceFinalized, InvoiceEvent),
    ])
    def test_categories(self, event_cls, parent):
        assert issubclass(event_cls, parent)
        assert issubclass(event_cls, InvoicingEvent)


class TestCreate:

    def test_draft_updated_carries_draft_and_change(self, complete_draft):
        event = DraftUpdated.create(draft=complete_draft, change="set_tax")

        assert event.draft is complete_draft
        assert event.change == "set_tax"

    def test_invoice_finalized_carries_invoice(self):
        sentinel = object()
        assert InvoiceFinalized.create(invoice=sentinel).invoice is sentinel

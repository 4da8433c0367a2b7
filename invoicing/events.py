"""
Domain events for invoice drafting.

Immutable event objects describing what happened to a draft or invoice.
A service publishes the event; handlers such as draft autosave react
without the service knowing who is listening.

Event Categories:
- DraftEvent: Draft lifecycle (updated, discarded)
- InvoiceEvent: Invoice lifecycle (finalized)

Events carry the full domain object so handlers don't need to re-fetch state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from utils.timezone import now_utc


@dataclass(frozen=True, kw_only=True)
class InvoicingEvent:
    """Base class for all invoicing domain events."""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=now_utc)


# =============================================================================
# DRAFT EVENTS
# =============================================================================


@dataclass(frozen=True)
class DraftEvent(InvoicingEvent):
    """Events related to the draft being edited."""
    pass


@dataclass(frozen=True)
class DraftUpdated(DraftEvent):
    """A field, line item or tax percentage on the draft changed."""
    draft: Any = None  # InvoiceDraft
    change: str = ""

    @classmethod
    def create(cls, draft: Any, change: str) -> "DraftUpdated":
        return cls(draft=draft, change=change)


@dataclass(frozen=True)
class DraftDiscarded(DraftEvent):
    """The draft was reset to a blank one."""

    @classmethod
    def create(cls) -> "DraftDiscarded":
        return cls()


# =============================================================================
# INVOICE EVENTS
# =============================================================================


@dataclass(frozen=True)
class InvoiceEvent(InvoicingEvent):
    """Events related to invoice lifecycle."""
    pass


@dataclass(frozen=True)
class InvoiceFinalized(InvoiceEvent):
    """A draft passed validation and became an invoice."""
    invoice: Any = None  # Invoice

    @classmethod
    def create(cls, invoice: Any) -> "InvoiceFinalized":
        return cls(invoice=invoice)

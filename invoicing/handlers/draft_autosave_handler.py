"""
Handlers that keep a saved copy of the draft in sync.

On DraftUpdated the draft is serialized and handed to the draft store; on
DraftDiscarded the saved draft is cleared. The store is any object with
save_draft(data: dict) and clear_draft() methods.
"""

import logging
from typing import Callable

from invoicing.events import DraftDiscarded, DraftUpdated

logger = logging.getLogger(__name__)


def handle_draft_updated(draft_store) -> Callable:
    """
    Factory that returns a DraftUpdated handler.

    Args:
        draft_store: Object exposing save_draft(data)

    Returns:
        Handler callable that saves the draft as JSON-compatible data
    """

    def handler(event: DraftUpdated):
        draft_store.save_draft(event.draft.model_dump(mode="json"))
        logger.debug("Autosaved draft after %s", event.change)

    return handler


def handle_draft_discarded(draft_store) -> Callable:
    """Factory that returns a DraftDiscarded handler clearing the saved draft."""

    def handler(event: DraftDiscarded):
        draft_store.clear_draft()

    return handler

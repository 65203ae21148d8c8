"""Fire-and-forget event emission shared by the command handlers."""

from __future__ import annotations

import logging

from orderflow.domain.model.events import Event
from orderflow.domain.notification import EventPublisher

logger = logging.getLogger(__name__)


def emit(publisher: EventPublisher, event: Event) -> None:
    """Publish *event*; a failure is logged, never raised.

    By the time this runs the state change is committed, so the caller
    must see success regardless of what happens to the notification.
    """
    try:
        publisher.publish(event)
    except Exception:
        logger.exception("failed to publish event", extra={"event": event.name})

"""Outbound port for domain events.

The fulfillment engine hands events to an ``EventPublisher`` once the
state change is committed.  Publishing is fire-and-forget: it must not
block on delivery and the engine never depends on its outcome.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.events import Event


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: Event) -> None:
        """Queue *event* for delivery to the currently connected observers."""

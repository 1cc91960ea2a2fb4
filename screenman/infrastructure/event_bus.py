"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus used as the session list's change-notification channel
- Supports async subscription handlers
- Created at startup, disposed once at shutdown
"""

import logging
from typing import Callable, Awaitable
from screenman.domain.events.event_base import DomainEvent

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[DomainEvent], Awaitable[None]]]] = {}
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    async def publish(self, events: list[DomainEvent]) -> None:
        if self._disposed:
            logger.debug("Dropping %d event(s) published after dispose", len(events))
            return
        for event in events:
            event_type = type(event)
            logger.debug("Publishing %s (occurred %s)", event_type.__name__, event.occurred_at)
            if event_type in self._handlers:
                # copy: handlers may unsubscribe while being notified
                for handler in list(self._handlers[event_type]):
                    await handler(event)

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], Awaitable[None]]
    ) -> Callable[[], None]:
        if self._disposed:
            raise RuntimeError("Event bus has been disposed")
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def dispose(self) -> None:
        self._handlers.clear()
        self._disposed = True

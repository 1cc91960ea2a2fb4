"""
Event Bus Port

Architectural Intent:
- Abstract interface for publishing domain events
- Allows decoupling of event producers from consumers
"""

from typing import Protocol, Callable, Awaitable, runtime_checkable
from screenman.domain.events.event_base import DomainEvent

Unsubscribe = Callable[[], None]


@runtime_checkable
class EventBusPort(Protocol):
    async def publish(self, events: list[DomainEvent]) -> None: ...

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], Awaitable[None]]
    ) -> Unsubscribe: ...

    def dispose(self) -> None: ...

    @property
    def disposed(self) -> bool: ...

"""
Sessions Changed Event

Architectural Intent:
- Signals that previously listed sessions are stale and must be re-fetched
- Carries no payload; subscribers re-query the tree source themselves
"""

from dataclasses import dataclass

from screenman.domain.events.event_base import DomainEvent


@dataclass(frozen=True)
class SessionsChangedEvent(DomainEvent):
    pass

"""
Domain Events Package

Architectural Intent:
- Contains domain events dispatched over the change-notification channel
"""

from screenman.domain.events.event_base import DomainEvent
from screenman.domain.events.sessions_changed import SessionsChangedEvent

__all__ = [
    "DomainEvent",
    "SessionsChangedEvent",
]

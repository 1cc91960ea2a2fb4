"""
Domain Events Module

Architectural Intent:
- Base class for domain events
- Events are immutable and dispatched through the event bus
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC


@dataclass(frozen=True)
class DomainEvent:
    occurred_at: str = field(
        default_factory=lambda: datetime.now(UTC).isoformat(), init=False, repr=False
    )

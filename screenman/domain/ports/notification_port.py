"""
Notification Port

Architectural Intent:
- Abstract interface for user-visible notifications
- Decouples actions from the front end showing them (TUI toasts, console)

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Fire-and-forget: methods return nothing and must not raise
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotificationPort(Protocol):
    """Port for showing informational and error messages to the user."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

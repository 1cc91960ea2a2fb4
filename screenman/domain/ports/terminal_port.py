"""
Terminal Port

Architectural Intent:
- Port interface for host-managed terminals that display attached sessions
- Terminals are correlated to sessions by name only (string equality)
"""

from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Terminal(Protocol):
    name: str

    def show(self) -> None: ...

    def dispose(self) -> None: ...


@runtime_checkable
class TerminalPort(Protocol):
    def find(self, name: str) -> Optional[Terminal]:
        """Return an open terminal with exactly this name, if any."""
        ...

    def create(self, name: str, argv: List[str]) -> Terminal:
        """Create a terminal that will run argv once shown."""
        ...

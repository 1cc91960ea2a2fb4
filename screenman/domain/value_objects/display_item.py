"""
Display Items

Architectural Intent:
- Tagged variant of everything the session tree view can render
- SessionItem wraps a real SessionRecord and is actionable
- UnsupportedItem is the single "screen not installed" sentinel and is not

Design Decisions:
- Plain frozen dataclasses sharing a capability set
  (label, key, icon, default_action) instead of a UI toolkit base class
- Callers dispatch on `kind` or isinstance, never on the label text
"""

from dataclasses import dataclass
from typing import Optional, Union

from screenman.domain.value_objects.session_record import SessionRecord

ICON_ATTACHED = "issue-opened"
ICON_DETACHED = "issue-closed"

UNSUPPORTED_KEY = "screen_no_support"
UNSUPPORTED_LABEL = "The system doesn't support screen"


@dataclass(frozen=True)
class SessionItem:
    record: SessionRecord
    kind: str = "session"

    @property
    def label(self) -> str:
        return self.record.display_name

    @property
    def key(self) -> str:
        return self.record.identifier

    @property
    def icon(self) -> Optional[str]:
        return ICON_ATTACHED if self.record.attached else ICON_DETACHED

    @property
    def default_action(self) -> Optional[str]:
        return "open"


@dataclass(frozen=True)
class UnsupportedItem:
    kind: str = "unsupported"
    label: str = UNSUPPORTED_LABEL
    key: str = UNSUPPORTED_KEY
    icon: Optional[str] = None
    default_action: Optional[str] = None
    record: Optional[SessionRecord] = None


DisplayItem = Union[SessionItem, UnsupportedItem]


def is_actionable(item: object) -> bool:
    """True only for items that address a real session."""
    return isinstance(item, SessionItem)

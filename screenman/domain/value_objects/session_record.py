"""
Session Record

Architectural Intent:
- Immutable value object for one live screen session as seen in a listing
- Rebuilt from scratch on every listing; only identifier/name carry meaning
  across queries
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionRecord:
    """
    A screen session parsed from `screen -ls`.

    identifier is the "<pid>.<name>" token screen accepts back in -S,
    display_name is the human-assigned name and the terminal matching key.
    """
    identifier: str
    display_name: str
    attached: bool = False

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("Session identifier cannot be empty")

    def __str__(self):
        return self.identifier

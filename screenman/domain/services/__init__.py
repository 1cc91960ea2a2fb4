"""
Domain Services Package

Architectural Intent:
- Stateless domain logic with no infrastructure dependencies
"""

from screenman.domain.services.screen_listing_parser import (
    NO_SESSIONS_MARKER,
    parse_screen_listing,
)

__all__ = [
    "NO_SESSIONS_MARKER",
    "parse_screen_listing",
]

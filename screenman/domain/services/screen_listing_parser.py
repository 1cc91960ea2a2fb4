"""
Screen Listing Parser

Architectural Intent:
- Pure domain service converting `screen -ls` text into SessionRecords
- No I/O; the command runner supplies the text

Format:
    There are screens on:
    \t1234.mysession\t(01/01/2024 10:00:00 AM)\t(Detached)
    \t5678.other-one\t(Attached)
    2 Sockets in /run/screen/S-user.

Session rows start with a tab; header, footer and blank lines do not.
"""

import logging
import re
from typing import List

from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)

NO_SESSIONS_MARKER = "There is no screen to be resumed"
ATTACHED_MARKER = "Attached"

# first "." only; the rest of the column is the name, dots included
_ID_NAME_RE = re.compile(r"(\d+)\.(.+)")


def parse_screen_listing(output: str) -> List[SessionRecord]:
    """Parse a screen listing into session records.

    Args:
        output: Raw stdout of `screen -ls`.

    Returns:
        One record per tab-indented session row, in listing order. Empty when
        the text reports no sessions or holds no session rows.
    """
    if NO_SESSIONS_MARKER in output:
        return []

    records: List[SessionRecord] = []
    for line in output.split("\n"):
        if not line.startswith("\t"):
            continue

        columns = line.split("\t")[1:]
        first = columns[0].strip()
        match = _ID_NAME_RE.match(first)
        if not match:
            logger.debug("Skipping unrecognised listing row: %r", line)
            continue

        status = columns[-1]
        records.append(
            SessionRecord(
                identifier=first,
                display_name=match.group(2).strip(),
                attached=ATTACHED_MARKER in status,
            )
        )

    return records

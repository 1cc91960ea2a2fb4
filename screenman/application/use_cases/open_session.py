"""
Open Session Use Case

Architectural Intent:
- Shows the terminal attached to a session, creating it when none is open
- Terminals are matched by the session's display name
- Listing state is unaffected, so no refresh is triggered
"""

import logging
from typing import Optional

from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.terminal_port import TerminalPort
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)


class OpenSession:
    def __init__(
        self,
        terminals: TerminalPort,
        commands: ScreenCommands,
        notifier: NotificationPort,
    ):
        self.terminals = terminals
        self.commands = commands
        self.notifier = notifier

    async def execute(self, session: Optional[SessionRecord]) -> bool:
        if session is None:
            self.notifier.error("No session ID provided.")
            return False

        self.notifier.info(f"Opening Screen session {session.identifier}")

        terminal = self.terminals.find(session.display_name)
        try:
            if terminal is None:
                terminal = self.terminals.create(
                    session.display_name,
                    self.commands.reattach_argv(session.identifier),
                )
            terminal.show()
        except OSError as e:
            logger.warning("Could not open terminal for %s: %s", session, e)
            self.notifier.error(f"Failed to open session {session.identifier}: {e}")
            return False
        return True

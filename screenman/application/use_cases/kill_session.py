"""
Kill Session Use Case

Architectural Intent:
- Quits a screen session and closes the terminal showing it
- The terminal is looked up before the quit command is issued and disposed
  only once the command has succeeded
"""

import logging
from typing import Optional

from screenman.application.session_tree_source import SessionTreeSource
from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.terminal_port import TerminalPort
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)


class KillSession:
    def __init__(
        self,
        runner: CommandRunnerPort,
        commands: ScreenCommands,
        terminals: TerminalPort,
        tree_source: SessionTreeSource,
        notifier: NotificationPort,
    ):
        self.runner = runner
        self.commands = commands
        self.terminals = terminals
        self.tree_source = tree_source
        self.notifier = notifier

    async def execute(self, session: Optional[SessionRecord]) -> bool:
        if session is None:
            self.notifier.error("No session ID provided.")
            return False

        self.notifier.info(f"Killing Screen session {session.identifier}")
        terminal = self.terminals.find(session.display_name)

        result = await self.runner.execute(self.commands.quit(session.identifier))
        if not result.ok:
            self.notifier.error(
                f"Failed to kill session {session.identifier}: {result.detail}"
            )
            return False

        self.notifier.info(f"Screen session {session.identifier} has been killed.")
        if terminal is not None:
            terminal.dispose()
        await self.tree_source.refresh()
        return True

"""
Remove All Sessions Use Case

Architectural Intent:
- Quits every listed screen session after an explicit confirmation
- Surfaces the literal failure detail of any quit that fails
- Closes the terminals of removed sessions, as KillSession does
"""

import logging

from screenman.application.session_tree_source import SessionTreeSource
from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.prompt_port import PromptPort
from screenman.domain.ports.terminal_port import TerminalPort
from screenman.domain.value_objects.screen_commands import ScreenCommands

logger = logging.getLogger(__name__)

CONFIRM_MESSAGE = "Are you sure you want to remove all screen sessions?"


class RemoveAllSessions:
    def __init__(
        self,
        runner: CommandRunnerPort,
        commands: ScreenCommands,
        terminals: TerminalPort,
        tree_source: SessionTreeSource,
        notifier: NotificationPort,
        prompts: PromptPort,
    ):
        self.runner = runner
        self.commands = commands
        self.terminals = terminals
        self.tree_source = tree_source
        self.notifier = notifier
        self.prompts = prompts

    async def execute(self) -> bool:
        if not await self.prompts.confirm(CONFIRM_MESSAGE):
            return False

        sessions = await self.tree_source.list_sessions()
        removed = 0
        failures: list[str] = []

        for session in sessions:
            terminal = self.terminals.find(session.display_name)
            result = await self.runner.execute(self.commands.quit(session.identifier))
            if not result.ok:
                failures.append(f"{session.identifier}: {result.detail}")
                continue
            removed += 1
            if terminal is not None:
                terminal.dispose()

        logger.info("Removed %d of %d screen session(s)", removed, len(sessions))
        if failures:
            self.notifier.error(
                f"Failed to remove all screen sessions: {'; '.join(failures)}"
            )
        else:
            self.notifier.info("All screen sessions have been removed.")

        if removed:
            await self.tree_source.refresh()
        return not failures

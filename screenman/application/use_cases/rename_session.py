"""
Rename Session Use Case

Architectural Intent:
- Asks for a new name and renames the session through screen
- Uses the strict runner so the failure detail reaches the user
"""

import logging
from typing import Optional

from screenman.application.session_tree_source import SessionTreeSource
from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.prompt_port import PromptPort
from screenman.domain.value_objects.command_result import CommandFailedError
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)

RENAME_PROMPT = "Enter the new name for the screen session"
EMPTY_NAME_MESSAGE = "Session name cannot be empty"


def validate_session_name(name: str) -> Optional[str]:
    return EMPTY_NAME_MESSAGE if name.strip() == "" else None


class RenameSession:
    def __init__(
        self,
        runner: CommandRunnerPort,
        commands: ScreenCommands,
        tree_source: SessionTreeSource,
        notifier: NotificationPort,
        prompts: PromptPort,
    ):
        self.runner = runner
        self.commands = commands
        self.tree_source = tree_source
        self.notifier = notifier
        self.prompts = prompts

    async def execute(self, session: Optional[SessionRecord]) -> bool:
        if session is None:
            self.notifier.error("No session ID provided.")
            return False

        new_name = await self.prompts.ask_text(
            RENAME_PROMPT,
            value=session.display_name,
            validate=validate_session_name,
        )
        if not new_name or not new_name.strip() or new_name == session.display_name:
            logger.debug("Rename of %s skipped", session)
            return False

        try:
            await self.runner.run_strict(
                self.commands.rename(session.identifier, new_name)
            )
        except CommandFailedError as e:
            self.notifier.error(f"Failed to rename session: {e.detail}")
            return False

        await self.tree_source.refresh()
        return True

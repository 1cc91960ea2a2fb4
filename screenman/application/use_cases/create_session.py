"""
Create Session Use Case

Architectural Intent:
- Starts a detached screen session and opens a terminal on it
- The terminal is opened with the requested name as identifier, before the
  tool-assigned "<pid>.<name>" is known
"""

import logging
from typing import Optional

from screenman.application.session_tree_source import SessionTreeSource
from screenman.application.use_cases.open_session import OpenSession
from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.prompt_port import PromptPort
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)

NAME_PROMPT = "Enter a name for the new screen session"
NAME_PLACEHOLDER = "screen-session-name"


class CreateSession:
    def __init__(
        self,
        runner: CommandRunnerPort,
        commands: ScreenCommands,
        open_session: OpenSession,
        tree_source: SessionTreeSource,
        notifier: NotificationPort,
        prompts: PromptPort,
    ):
        self.runner = runner
        self.commands = commands
        self.open_session = open_session
        self.tree_source = tree_source
        self.notifier = notifier
        self.prompts = prompts

    async def prompt_and_execute(self) -> bool:
        name = await self.prompts.ask_text(NAME_PROMPT, placeholder=NAME_PLACEHOLDER)
        if not name:
            return False
        return await self.execute(name)

    async def execute(self, name: Optional[str]) -> bool:
        if not name or not name.strip():
            logger.debug("Create cancelled: no session name")
            return False

        result = await self.runner.execute(self.commands.create_detached(name))
        if not result.ok:
            self.notifier.error(f"Error creating screen session: {result.detail}")
            return False

        # TODO: re-list and open the "<pid>.<name>" identifier once screen
        # reports it, instead of the bare name
        await self.open_session.execute(SessionRecord(name, name))
        self.notifier.info(f"Screen session '{name}' created.")
        await self.tree_source.refresh()
        return True

"""
Textual Adapters

Architectural Intent:
- NotificationPort backed by Textual toast notifications
- PromptPort backed by the modal screens; must be awaited from a worker
"""

import logging
from typing import Optional

from textual.app import App

from screenman.domain.ports.prompt_port import Validator
from screenman.presentation.tui.screens import ConfirmScreen, TextPromptScreen

logger = logging.getLogger(__name__)


class TextualNotifier:
    def __init__(self, app: App):
        self.app = app

    def info(self, message: str) -> None:
        logger.info(message)
        self.app.notify(message)

    def error(self, message: str) -> None:
        logger.warning(message)
        self.app.notify(message, title="Error", severity="error")


class TextualPrompt:
    def __init__(self, app: App):
        self.app = app

    async def ask_text(
        self,
        prompt: str,
        value: str = "",
        placeholder: str = "",
        validate: Optional[Validator] = None,
    ) -> Optional[str]:
        return await self.app.push_screen_wait(
            TextPromptScreen(prompt, value, placeholder, validate)
        )

    async def confirm(self, message: str) -> bool:
        return bool(await self.app.push_screen_wait(ConfirmScreen(message)))

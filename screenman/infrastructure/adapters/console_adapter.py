"""
Console Adapters

Architectural Intent:
- NotificationPort and PromptPort for the command-line front end
- Messages use the CLI's "[*]/[-]" prefixes
- Prompts accept preset answers from CLI arguments and fall back to stdin
"""

import asyncio
import logging
from typing import Optional

from screenman.domain.ports.prompt_port import Validator

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    def __init__(self) -> None:
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        print(f"[*] {message}")

    def error(self, message: str) -> None:
        logger.debug("Error shown to user: %s", message)
        self.errors.append(message)
        print(f"[-] {message}")


class ConsolePrompt:
    """Answers prompts from presets, asking on stdin only when none is given.

    Args:
        answer: Preset answer returned by ask_text (still validated)
        assume_yes: Answer every confirmation with yes
    """

    def __init__(self, answer: Optional[str] = None, assume_yes: bool = False) -> None:
        self.answer = answer
        self.assume_yes = assume_yes

    async def _input(self, text: str) -> Optional[str]:
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(None, input, text)
        except EOFError:
            return None

    async def ask_text(
        self,
        prompt: str,
        value: str = "",
        placeholder: str = "",
        validate: Optional[Validator] = None,
    ) -> Optional[str]:
        if self.answer is not None:
            text = self.answer
        else:
            hint = value or placeholder
            text = await self._input(f"{prompt} [{hint}]: " if hint else f"{prompt}: ")
            if text is None:
                return None
            if not text and value:
                text = value

        if validate is not None:
            message = validate(text)
            if message:
                print(f"[-] {message}")
                return None
        return text

    async def confirm(self, message: str) -> bool:
        if self.assume_yes:
            return True
        answer = await self._input(f"{message} [y/N]: ")
        return (answer or "").strip().lower() in ("y", "yes")

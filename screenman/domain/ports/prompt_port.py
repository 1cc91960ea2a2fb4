"""
Prompt Port

Architectural Intent:
- Abstract interface for collecting input from the user
- Text prompts with optional validation, and blocking yes/no confirmations
"""

from typing import Callable, Optional, Protocol, runtime_checkable

# Returns an error message for invalid input, None when the input is valid
Validator = Callable[[str], Optional[str]]


@runtime_checkable
class PromptPort(Protocol):
    async def ask_text(
        self,
        prompt: str,
        value: str = "",
        placeholder: str = "",
        validate: Optional[Validator] = None,
    ) -> Optional[str]:
        """Ask for a line of text.

        Args:
            prompt: Question shown to the user
            value: Pre-filled answer
            placeholder: Hint shown while the answer is empty
            validate: Rejects an answer by returning a message

        Returns:
            The accepted answer, or None when the user cancelled
        """
        ...

    async def confirm(self, message: str) -> bool:
        """Ask a yes/no question. Only an explicit yes returns True."""
        ...

"""
Modal Screens

Architectural Intent:
- Text prompt with inline validation (input box)
- Blocking yes/no confirmation dialog
- Both are dismissed with their answer so callers can await them
"""

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from screenman.domain.ports.prompt_port import Validator

DIALOG_CSS = """
ModalScreen {
    align: center middle;
}
#dialog {
    width: 60;
    height: auto;
    border: thick $accent;
    background: $surface;
    padding: 1 2;
}
#validation {
    color: $error;
    height: auto;
}
#buttons {
    height: auto;
    align: center middle;
}
#buttons Button {
    margin: 1 2 0 2;
}
"""


class TextPromptScreen(ModalScreen[Optional[str]]):
    """Ask for one line of text; Escape cancels with None."""

    DEFAULT_CSS = DIALOG_CSS

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(
        self,
        prompt: str,
        value: str = "",
        placeholder: str = "",
        validate: Optional[Validator] = None,
    ):
        super().__init__()
        self.prompt_text = prompt
        self.initial_value = value
        self.placeholder_text = placeholder
        self.validator = validate

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.prompt_text, id="prompt")
            yield Input(
                value=self.initial_value,
                placeholder=self.placeholder_text,
                id="answer",
            )
            yield Static("", id="validation")

    def _check(self, value: str) -> Optional[str]:
        message = self.validator(value) if self.validator else None
        self.query_one("#validation", Static).update(message or "")
        return message

    def on_input_changed(self, event: Input.Changed) -> None:
        self._check(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self._check(event.value):
            return
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    """Yes/No dialog. Anything but Yes answers False."""

    DEFAULT_CSS = DIALOG_CSS

    BINDINGS = [
        Binding("y", "answer(True)", "Yes"),
        Binding("n", "answer(False)", "No"),
        Binding("escape", "answer(False)", "Cancel"),
    ]

    def __init__(self, message: str):
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.message, id="message")
            with Horizontal(id="buttons"):
                yield Button("Yes", variant="error", id="yes")
                yield Button("No", variant="primary", id="no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_answer(self, answer: bool) -> None:
        self.dismiss(answer)

"""Global test configuration.

Recording fakes for the front-end ports (notifications, prompts, terminals)
shared by the application and presentation tests.
"""

from typing import List, Optional
from unittest.mock import AsyncMock

import pytest

from screenman.domain.value_objects.command_result import CommandResult
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord


class RecordingNotifier:
    def __init__(self):
        self.infos: List[str] = []
        self.errors: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


class ScriptedPrompt:
    def __init__(self, answer: Optional[str] = None, confirmed: bool = False):
        self.answer = answer
        self.confirmed = confirmed
        self.asked: List[dict] = []
        self.confirmations: List[str] = []

    async def ask_text(self, prompt, value="", placeholder="", validate=None):
        self.asked.append(
            {"prompt": prompt, "value": value, "placeholder": placeholder,
             "validate": validate}
        )
        return self.answer

    async def confirm(self, message):
        self.confirmations.append(message)
        return self.confirmed


class FakeTerminal:
    def __init__(self, name, argv, events):
        self.name = name
        self.argv = argv
        self.events = events
        self.shown = 0
        self.disposed = False

    def show(self):
        self.shown += 1
        self.events.append(("show", self.name))

    def dispose(self):
        self.disposed = True
        self.events.append(("dispose", self.name))


class FakeTerminals:
    def __init__(self):
        self.events: list = []
        self.open: dict = {}

    def add(self, name: str) -> FakeTerminal:
        terminal = FakeTerminal(name, [], self.events)
        self.open[name] = terminal
        return terminal

    def find(self, name):
        self.events.append(("find", name))
        return self.open.get(name)

    def create(self, name, argv):
        self.events.append(("create", name))
        terminal = FakeTerminal(name, argv, self.events)
        self.open[name] = terminal
        return terminal


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def terminals():
    return FakeTerminals()


@pytest.fixture
def commands():
    return ScreenCommands()


@pytest.fixture
def runner():
    runner = AsyncMock()
    runner.execute = AsyncMock(return_value=CommandResult.success(""))
    runner.run = AsyncMock(return_value="")
    runner.run_strict = AsyncMock(return_value="")
    runner.is_available = AsyncMock(return_value=True)
    return runner


@pytest.fixture
def tree_source():
    source = AsyncMock()
    source.refresh = AsyncMock(return_value=None)
    source.list_sessions = AsyncMock(return_value=[])
    return source


@pytest.fixture
def session():
    return SessionRecord("1234.mysession", "mysession", attached=False)


@pytest.fixture
def make_prompt():
    return ScriptedPrompt

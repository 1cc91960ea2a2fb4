"""Tests for domain value objects."""

import pytest

from screenman.domain.value_objects.command_result import (
    CommandFailedError,
    CommandResult,
)
from screenman.domain.value_objects.display_item import (
    ICON_ATTACHED,
    ICON_DETACHED,
    UNSUPPORTED_KEY,
    SessionItem,
    UnsupportedItem,
    is_actionable,
)
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord


class TestSessionRecord:
    def test_valid(self):
        record = SessionRecord("1.a", "a", attached=True)
        assert str(record) == "1.a"
        assert record.attached is True

    def test_default_detached(self):
        assert SessionRecord("1.a", "a").attached is False

    def test_empty_identifier(self):
        with pytest.raises(ValueError):
            SessionRecord("", "a")

    def test_immutable(self):
        record = SessionRecord("1.a", "a")
        with pytest.raises(AttributeError):
            record.display_name = "b"


class TestDisplayItems:
    def test_session_item_capabilities(self):
        item = SessionItem(SessionRecord("1234.web", "web", attached=True))

        assert item.kind == "session"
        assert item.label == "web"
        assert item.key == "1234.web"
        assert item.icon == ICON_ATTACHED
        assert item.default_action == "open"
        assert is_actionable(item)

    def test_detached_icon(self):
        item = SessionItem(SessionRecord("1234.web", "web"))
        assert item.icon == ICON_DETACHED

    def test_unsupported_sentinel_is_not_actionable(self):
        item = UnsupportedItem()

        assert item.kind == "unsupported"
        assert item.key == UNSUPPORTED_KEY
        assert item.label == "The system doesn't support screen"
        assert item.default_action is None
        assert item.record is None
        assert not is_actionable(item)


class TestCommandResult:
    def test_success(self):
        result = CommandResult.success("out\n")
        assert result.ok is True
        assert result.output == "out\n"
        assert result.detail == ""

    def test_failure(self):
        result = CommandResult.failure("boom", output="partial")
        assert result.ok is False
        assert result.detail == "boom"
        assert result.output == "partial"

    def test_failed_error_carries_detail(self):
        error = CommandFailedError("No screen session found.")
        assert error.detail == "No screen session found."
        assert str(error) == "No screen session found."


class TestScreenCommands:
    def test_list_sessions_ignores_exit_status(self):
        assert ScreenCommands().list_sessions() == "screen -ls || true"

    def test_create_detached(self):
        assert ScreenCommands().create_detached("dev") == "screen -S dev -d -m"

    def test_quit(self):
        assert ScreenCommands().quit("1234.dev") == "screen -S 1234.dev -X quit"

    def test_rename(self):
        assert (
            ScreenCommands().rename("1234.dev", "prod")
            == "screen -S 1234.dev -X sessionname prod"
        )

    def test_arguments_are_quoted(self):
        command = ScreenCommands().create_detached("a b; rm -rf ~")
        assert command == "screen -S 'a b; rm -rf ~' -d -m"

    def test_reattach_argv(self):
        assert ScreenCommands().reattach_argv("1234.dev") == [
            "screen", "-d", "-r", "1234.dev"
        ]

    def test_custom_binary(self):
        commands = ScreenCommands("/opt/bin/screen")
        assert commands.quit("1.a").startswith("/opt/bin/screen ")
        assert commands.reattach_argv("1.a")[0] == "/opt/bin/screen"

    def test_empty_binary(self):
        with pytest.raises(ValueError):
            ScreenCommands("")

"""Tests for configuration module."""

import json
import os
import pytest
from unittest.mock import patch

from screenman.infrastructure.config import (
    ScreenConfig,
    ScreenmanConfig,
    TerminalConfig,
    TuiConfig,
    load_config,
)


class TestDefaultConfig:
    def test_defaults(self):
        config = load_config(path="/nonexistent/screenman.json")
        assert config.log_level == "WARNING"
        assert config.log_file == ""
        assert config.screen.binary == "screen"
        assert config.terminal.command == ()
        assert config.tui.refresh_interval == 0

    def test_all_sections_present(self):
        config = load_config(path="/nonexistent/screenman.json")
        assert isinstance(config, ScreenmanConfig)
        assert isinstance(config.screen, ScreenConfig)
        assert isinstance(config.terminal, TerminalConfig)
        assert isinstance(config.tui, TuiConfig)


class TestFileConfig:
    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({
            "log_level": "DEBUG",
            "log_file": "/tmp/screenman.log",
            "screen": {"binary": "/usr/local/bin/screen"},
            "terminal": {"command": ["xterm", "-T", "{name}", "-e"]},
            "tui": {"refresh_interval": 5},
        }))

        config = load_config(path=str(config_file))
        assert config.log_level == "DEBUG"
        assert config.log_file == "/tmp/screenman.log"
        assert config.screen.binary == "/usr/local/bin/screen"
        assert config.terminal.command == ("xterm", "-T", "{name}", "-e")
        assert config.tui.refresh_interval == 5

    def test_partial_config(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({"tui": {"refresh_interval": 3}}))

        config = load_config(path=str(config_file))
        assert config.tui.refresh_interval == 3
        assert config.screen.binary == "screen"  # default preserved

    def test_invalid_json_returns_defaults(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text("not valid json{{{")

        config = load_config(path=str(config_file))
        assert config.screen.binary == "screen"

    def test_non_object_returns_defaults(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text("[1, 2, 3]")

        config = load_config(path=str(config_file))
        assert config.log_level == "WARNING"

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({
            "screen": {"binary": "screen-4", "unknown_key": "ignored"},
        }))

        config = load_config(path=str(config_file))
        assert config.screen.binary == "screen-4"

    @pytest.mark.parametrize("content", [
        {"tui": None},
        {"screen": "screen"},
        {"terminal": [1, 2]},
    ])
    def test_non_object_section_uses_defaults(self, tmp_path, content):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps(content))

        config = load_config(path=str(config_file))
        assert config == ScreenmanConfig()

    def test_wrongly_typed_values_use_defaults(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({
            "log_level": 10,
            "screen": {"binary": 3},
            "terminal": {"command": ["xterm", 5]},
            "tui": {"refresh_interval": "soon"},
        }))

        config = load_config(path=str(config_file))
        assert config == ScreenmanConfig()

    def test_bad_value_keeps_sibling_values(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({
            "tui": {"refresh_interval": None},
            "screen": {"binary": "screen-4"},
        }))

        config = load_config(path=str(config_file))
        assert config.tui.refresh_interval == 0
        assert config.screen.binary == "screen-4"

    def test_unreadable_file_uses_defaults(self, tmp_path):
        config = load_config(path=str(tmp_path))
        assert config == ScreenmanConfig()


class TestEnvOverride:
    def test_env_overrides_file(self, tmp_path):
        config_file = tmp_path / "screenman.json"
        config_file.write_text(json.dumps({"screen": {"binary": "a"}}))

        with patch.dict(os.environ, {"SCREENMAN_SCREEN_BINARY": "b"}):
            config = load_config(path=str(config_file))

        assert config.screen.binary == "b"

    def test_env_int_conversion(self):
        with patch.dict(os.environ, {"SCREENMAN_TUI_REFRESH_INTERVAL": "10"}):
            config = load_config(path="/nonexistent/screenman.json")

        assert config.tui.refresh_interval == 10

    def test_env_invalid_int_uses_default(self):
        with patch.dict(os.environ, {"SCREENMAN_TUI_REFRESH_INTERVAL": "soon"}):
            config = load_config(path="/nonexistent/screenman.json")

        assert config.tui.refresh_interval == 0

    def test_env_section_without_key_uses_defaults(self):
        with patch.dict(os.environ, {"SCREENMAN_SCREEN": "x"}):
            config = load_config(path="/nonexistent/screenman.json")

        assert config.screen == ScreenConfig()

    def test_env_terminal_command_comma_separated(self):
        with patch.dict(
            os.environ, {"SCREENMAN_TERMINAL_COMMAND": "xterm,-T,{name},-e"}
        ):
            config = load_config(path="/nonexistent/screenman.json")

        assert config.terminal.command == ("xterm", "-T", "{name}", "-e")

    def test_env_top_level_keys(self):
        with patch.dict(os.environ, {
            "SCREENMAN_LOG_LEVEL": "INFO",
            "SCREENMAN_LOG_FILE": "/tmp/x.log",
        }):
            config = load_config(path="/nonexistent/screenman.json")

        assert config.log_level == "INFO"
        assert config.log_file == "/tmp/x.log"

    def test_custom_prefix(self):
        with patch.dict(os.environ, {"MYAPP_SCREEN_BINARY": "myscreen"}):
            config = load_config(
                path="/nonexistent/screenman.json", env_prefix="MYAPP"
            )

        assert config.screen.binary == "myscreen"


class TestConfigImmutability:
    def test_frozen(self):
        config = load_config(path="/nonexistent/screenman.json")
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"

    def test_sub_config_frozen(self):
        config = load_config(path="/nonexistent/screenman.json")
        with pytest.raises(AttributeError):
            config.screen.binary = "other"

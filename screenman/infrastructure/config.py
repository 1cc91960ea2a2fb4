"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to all screenman settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScreenConfig:
    """GNU screen executable."""
    binary: str = "screen"


@dataclass(frozen=True)
class TerminalConfig:
    """Terminal emulator used to host attached sessions.

    Empty command attaches inline in the current terminal.
    """
    command: tuple[str, ...] = ()


@dataclass(frozen=True)
class TuiConfig:
    """Textual front end settings."""
    refresh_interval: int = 0  # seconds, 0 disables auto refresh


@dataclass(frozen=True)
class ScreenmanConfig:
    """Root configuration for the screenman application."""
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    tui: TuiConfig = field(default_factory=TuiConfig)
    log_level: str = "WARNING"
    log_file: str = ""


def _env_override(data: dict, prefix: str = "SCREENMAN") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern SCREENMAN_SECTION_KEY.
    For example: SCREENMAN_SCREEN_BINARY=/usr/bin/screen,
    SCREENMAN_TERMINAL_COMMAND=xterm,-T,{name},-e
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name in ("log_level", "log_file"):
            data[name] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        else:
            data[parts[0]] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except (OSError, ValueError) as e:
        # unreadable file, bad encoding or bad JSON
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Invalid config file %s: top level must be an object", path)
        return {}
    return data


def _convert(value, type_name: str):
    """Coerce a file or env value to a field type. Raises ValueError."""
    if type_name == "tuple[str, ...]":
        # comma-separated in env vars, a list in the file
        if isinstance(value, str):
            return tuple(v.strip() for v in value.split(",") if v.strip())
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return tuple(value)
    elif type_name == "int":
        if isinstance(value, str):
            return int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif type_name == "str":
        if isinstance(value, str):
            return value
    raise ValueError(f"expected {type_name}, got {value!r}")


def _build_sub_config(cls, data):
    """Build a sub-config dataclass from a dict, ignoring unknown keys.

    A section that is not an object, or a value of the wrong type, falls
    back to the defaults.
    """
    if not isinstance(data, dict):
        logger.warning("Ignoring config section %s: not an object", cls.__name__)
        return cls()

    values = {}
    for f in dataclasses.fields(cls):
        if f.name not in data:
            continue
        try:
            values[f.name] = _convert(data[f.name], f.type)
        except ValueError as e:
            logger.warning("Ignoring %s.%s: %s", cls.__name__, f.name, e)

    return cls(**values)


def _top_level(data: dict, key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        logger.warning("Ignoring %s: expected str, got %r", key, value)
        return default
    return value


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "SCREENMAN",
) -> ScreenmanConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (SCREENMAN_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to screenman.json in CWD.
        env_prefix: Environment variable prefix. Defaults to SCREENMAN.
    """
    config_path = Path(path) if path else Path("screenman.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return ScreenmanConfig(
        screen=_build_sub_config(ScreenConfig, data.get("screen", {})),
        terminal=_build_sub_config(TerminalConfig, data.get("terminal", {})),
        tui=_build_sub_config(TuiConfig, data.get("tui", {})),
        log_level=_top_level(data, "log_level", "WARNING"),
        log_file=_top_level(data, "log_file", ""),
    )

"""
Composition Root

Architectural Intent:
- Dependency injection composition root for the screenman application
- Single place where all adapters and use cases are wired together
- Front ends pass in their own notifier, prompt and terminal adapters

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Terminal adapter defaults from config: emulator windows when a terminal
  command is configured, inline attach otherwise
"""

from dataclasses import dataclass
from typing import Optional

from screenman.application.session_tree_source import SessionTreeSource
from screenman.application.use_cases.create_session import CreateSession
from screenman.application.use_cases.kill_session import KillSession
from screenman.application.use_cases.open_session import OpenSession
from screenman.application.use_cases.remove_all_sessions import RemoveAllSessions
from screenman.application.use_cases.rename_session import RenameSession
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.prompt_port import PromptPort
from screenman.domain.ports.terminal_port import TerminalPort
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.infrastructure.adapters.shell_command_runner import ShellCommandRunner
from screenman.infrastructure.adapters.terminal_adapter import (
    EmulatorTerminalAdapter,
    InlineTerminalAdapter,
)
from screenman.infrastructure.config import ScreenmanConfig
from screenman.infrastructure.event_bus import EventBus


@dataclass
class ScreenmanContainer:
    """DI container holding all wired dependencies."""

    config: ScreenmanConfig
    commands: ScreenCommands
    runner: ShellCommandRunner
    terminals: TerminalPort
    event_bus: EventBus
    tree_source: SessionTreeSource
    open_session: OpenSession
    create_session: CreateSession
    kill_session: KillSession
    rename_session: RenameSession
    remove_all: RemoveAllSessions


def create_terminal_adapter(config: ScreenmanConfig) -> TerminalPort:
    if config.terminal.command:
        return EmulatorTerminalAdapter(config.terminal.command)
    return InlineTerminalAdapter()


def create_container(
    config: ScreenmanConfig,
    notifier: NotificationPort,
    prompts: PromptPort,
    terminals: Optional[TerminalPort] = None,
) -> ScreenmanContainer:
    """Create and wire all dependencies."""
    commands = ScreenCommands(config.screen.binary)
    runner = ShellCommandRunner(notifier)
    if terminals is None:
        terminals = create_terminal_adapter(config)
    event_bus = EventBus()

    tree_source = SessionTreeSource(runner, commands, event_bus)
    open_session = OpenSession(terminals, commands, notifier)
    create_session = CreateSession(
        runner, commands, open_session, tree_source, notifier, prompts
    )
    kill_session = KillSession(runner, commands, terminals, tree_source, notifier)
    rename_session = RenameSession(runner, commands, tree_source, notifier, prompts)
    remove_all = RemoveAllSessions(
        runner, commands, terminals, tree_source, notifier, prompts
    )

    return ScreenmanContainer(
        config=config,
        commands=commands,
        runner=runner,
        terminals=terminals,
        event_bus=event_bus,
        tree_source=tree_source,
        open_session=open_session,
        create_session=create_session,
        kill_session=kill_session,
        rename_session=rename_session,
        remove_all=remove_all,
    )

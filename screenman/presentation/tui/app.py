"""
Session Browser TUI

Architectural Intent:
- Textual-based sidebar listing screen sessions, one flat level of items
- Enter opens the highlighted session; key bindings create, kill, rename,
  refresh and remove all sessions
- Reloads whenever the tree source publishes a change, when an emulator
  window opens or exits, and optionally on a configurable interval
"""

import logging
from typing import Awaitable, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Label, ListItem, ListView

from screenman.composition_root import (
    ScreenmanContainer,
    create_container,
    create_terminal_adapter,
)
from screenman.domain.events.event_base import DomainEvent
from screenman.domain.value_objects.display_item import (
    ICON_ATTACHED,
    ICON_DETACHED,
    DisplayItem,
)
from screenman.domain.value_objects.session_record import SessionRecord
from screenman.infrastructure.adapters.terminal_adapter import (
    EmulatorTerminalAdapter,
    InlineTerminalAdapter,
)
from screenman.infrastructure.config import ScreenmanConfig
from screenman.presentation.tui.adapters import TextualNotifier, TextualPrompt

logger = logging.getLogger(__name__)

TERMINAL_POLL_INTERVAL = 1.0  # seconds

ICON_GLYPHS = {
    ICON_ATTACHED: ("●", "green"),
    ICON_DETACHED: ("○", "dim"),
}


class SessionListItem(ListItem):
    def __init__(self, item: DisplayItem):
        glyph = ICON_GLYPHS.get(item.icon, ("!", "red"))
        # session names are not markup
        super().__init__(Label(Text.assemble(glyph, " ", item.label)))
        self.item = item


class ScreenSessionsApp(App):
    """A Textual app to browse and manage GNU screen sessions."""

    TITLE = "screenman"

    CSS = """
    ListView {
        height: 1fr;
        border: solid green;
    }
    """

    BINDINGS = [
        ("n", "create", "New"),
        ("k", "kill", "Kill"),
        ("e", "rename", "Rename"),
        ("r", "refresh", "Refresh"),
        ("x", "remove_all", "Remove All"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: ScreenmanConfig,
        services: Optional[ScreenmanContainer] = None,
    ):
        super().__init__()
        self.screenman_config = config
        self.notifier = TextualNotifier(self)
        self.prompts = TextualPrompt(self)
        if services is None:
            terminals = create_terminal_adapter(config)
            if isinstance(terminals, InlineTerminalAdapter):
                terminals.suspend = self.suspend
            services = create_container(config, self.notifier, self.prompts, terminals)
        self.services = services
        self._unsubscribe = None
        self._poll_timers = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield ListView(id="sessions")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.services.tree_source.subscribe(
            self._on_sessions_changed
        )
        self.request_reload()

        interval = self.screenman_config.tui.refresh_interval
        if interval > 0:
            self._poll_timers.append(self.set_interval(interval, self.request_reload))

        if isinstance(self.services.terminals, EmulatorTerminalAdapter):
            self._poll_timers.append(
                self.set_interval(TERMINAL_POLL_INTERVAL, self.check_terminals)
            )

    def on_unmount(self) -> None:
        for timer in self._poll_timers:
            timer.stop()
        if self._unsubscribe:
            self._unsubscribe()
        self.services.tree_source.dispose()

    async def _on_sessions_changed(self, event: DomainEvent) -> None:
        self.request_reload()

    def check_terminals(self) -> None:
        # attach state follows the emulator windows
        if self.services.terminals.poll_changes():
            self._run_action(self.services.tree_source.refresh())

    def request_reload(self) -> None:
        # a newer reload supersedes one still waiting on screen -ls
        self.run_worker(self.reload(), group="reload", exclusive=True)

    async def reload(self) -> None:
        try:
            items = await self.services.tree_source.list_children()
        except Exception as e:
            logger.exception("Listing sessions failed")
            self.notifier.error(f"Error listing sessions: {e}")
            return

        view = self.query_one("#sessions", ListView)
        index = view.index
        await view.clear()
        await view.extend([SessionListItem(item) for item in items])
        if items:
            view.index = min(index or 0, len(items) - 1)

    def _selected_record(self) -> Optional[SessionRecord]:
        child = self.query_one("#sessions", ListView).highlighted_child
        if isinstance(child, SessionListItem):
            return child.item.record
        return None

    def _run_action(self, action: Awaitable) -> None:
        self.run_worker(self._guarded(action), group="actions")

    async def _guarded(self, action: Awaitable) -> None:
        try:
            await action
        except Exception as e:
            logger.exception("Session action failed")
            self.notifier.error(f"Unexpected error: {e}")

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if not isinstance(event.item, SessionListItem):
            return
        if event.item.item.default_action == "open":
            self._run_action(self.services.open_session.execute(event.item.item.record))

    def action_create(self) -> None:
        self._run_action(self.services.create_session.prompt_and_execute())

    def action_kill(self) -> None:
        self._run_action(self.services.kill_session.execute(self._selected_record()))

    def action_rename(self) -> None:
        self._run_action(self.services.rename_session.execute(self._selected_record()))

    def action_refresh(self) -> None:
        self._run_action(self.services.tree_source.refresh())

    def action_remove_all(self) -> None:
        self._run_action(self.services.remove_all.execute())

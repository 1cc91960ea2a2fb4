"""
Session Tree Source

Architectural Intent:
- Supplies the session tree view with one flat level of display items
- Queries screen on every call; the external tool is the only source of truth
- Owns the change-notification channel the front ends subscribe to

Design Decisions:
- No cache: refresh() only tells subscribers the last listing is stale,
  recomputation happens on the next list_children() call
- dispose() is for shutdown only
"""

import logging
from typing import Awaitable, Callable, List

from screenman.domain.events.event_base import DomainEvent
from screenman.domain.events.sessions_changed import SessionsChangedEvent
from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.event_bus_port import EventBusPort
from screenman.domain.services.screen_listing_parser import parse_screen_listing
from screenman.domain.value_objects.display_item import (
    DisplayItem,
    SessionItem,
    UnsupportedItem,
)
from screenman.domain.value_objects.screen_commands import ScreenCommands
from screenman.domain.value_objects.session_record import SessionRecord

logger = logging.getLogger(__name__)


class SessionTreeSource:
    def __init__(
        self,
        runner: CommandRunnerPort,
        commands: ScreenCommands,
        event_bus: EventBusPort,
    ):
        self.runner = runner
        self.commands = commands
        self.event_bus = event_bus

    async def list_children(self) -> List[DisplayItem]:
        if not await self.runner.is_available(self.commands.binary):
            logger.info("%s is not available on PATH", self.commands.binary)
            return [UnsupportedItem()]

        records = await self._query()
        return [SessionItem(record) for record in records]

    async def list_sessions(self) -> List[SessionRecord]:
        """Live sessions only; empty when screen is not installed."""
        if not await self.runner.is_available(self.commands.binary):
            return []
        return await self._query()

    async def _query(self) -> List[SessionRecord]:
        output = await self.runner.run(self.commands.list_sessions())
        records = parse_screen_listing(output)
        logger.debug("Listed %d screen session(s)", len(records))
        return records

    async def refresh(self) -> None:
        await self.event_bus.publish([SessionsChangedEvent()])

    def subscribe(
        self, handler: Callable[[DomainEvent], Awaitable[None]]
    ) -> Callable[[], None]:
        return self.event_bus.subscribe(SessionsChangedEvent, handler)

    def dispose(self) -> None:
        if not self.event_bus.disposed:
            self.event_bus.dispose()

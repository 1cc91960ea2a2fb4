"""
Shell Command Runner

Architectural Intent:
- Infrastructure adapter implementing CommandRunnerPort
- Runs one command through the shell, wrapped in async
- Converts every failure into a CommandResult; only run_strict raises

Design Decisions:
- subprocess.run in the default executor keeps the event loop free
- No locking, no timeout: concurrent calls may complete in any order
"""

import asyncio
import logging
import shlex
import subprocess

from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.value_objects.command_result import (
    CommandFailedError,
    CommandResult,
)

logger = logging.getLogger(__name__)


class ShellCommandRunner(CommandRunnerPort):
    def __init__(self, notifier: NotificationPort):
        self.notifier = notifier

    async def execute(self, command: str) -> CommandResult:
        def _execute():
            logger.debug("Running: %s", command)
            try:
                result = subprocess.run(
                    command,
                    shell=True,
                    capture_output=True,
                    text=True,
                    check=True,
                )
                return CommandResult.success(result.stdout)
            except subprocess.CalledProcessError as e:
                detail = (e.stderr or "").strip() or (
                    f"Command failed with exit status {e.returncode}: {command}"
                )
                logger.warning("Command failed: %s (%s)", command, detail)
                return CommandResult.failure(detail, output=e.stdout or "")
            except OSError as e:
                logger.warning("Command could not be started: %s (%s)", command, e)
                return CommandResult.failure(str(e))

        return await asyncio.get_event_loop().run_in_executor(None, _execute)

    async def run(self, command: str) -> str:
        result = await self.execute(command)
        if not result.ok:
            self.notifier.error(f"Error executing command: {result.detail}")
            return ""
        return result.output

    async def run_strict(self, command: str) -> str:
        result = await self.execute(command)
        if not result.ok:
            raise CommandFailedError(result.detail)
        return result.output

    async def is_available(self, executable: str) -> bool:
        result = await self.execute(f"command -v {shlex.quote(executable)}")
        return result.ok

"""
Terminal Adapters

Architectural Intent:
- Infrastructure adapters implementing TerminalPort
- EmulatorTerminalAdapter hosts each attached session in its own terminal
  emulator window and tracks windows by name
- InlineTerminalAdapter attaches in the foreground of the current terminal
  (the TUI suspends itself while the user is attached)

Design Decisions:
- Terminal names are the only correlation key back to sessions
- Closed emulator windows drop out of the registry, so find() only ever
  returns terminals that are still open or not yet shown
- Windows opening or exiting are recorded so the TUI can poll for them and
  refresh session state
"""

import contextlib
import logging
import subprocess
from typing import Callable, ContextManager, List, Optional, Sequence

logger = logging.getLogger(__name__)

CLOSE_TIMEOUT = 3  # seconds before a terminated window is killed


class EmulatorTerminal:
    def __init__(
        self,
        name: str,
        argv: List[str],
        on_dispose: Callable[[str], None],
        on_spawn: Callable[[str], None],
    ) -> None:
        self.name = name
        self.argv = argv
        self._on_dispose = on_dispose
        self._on_spawn = on_spawn
        self._process: Optional[subprocess.Popen] = None

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    @property
    def closed(self) -> bool:
        """True once a shown window has exited."""
        return self._process is not None and self._process.poll() is not None

    def show(self) -> None:
        if self.running:
            logger.info("Terminal %r is already open", self.name)
            return
        logger.debug("Spawning terminal %r: %s", self.name, self.argv)
        self._process = subprocess.Popen(
            self.argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        self._on_spawn(self.name)

    def dispose(self) -> None:
        if self.running:
            logger.debug("Closing terminal %r", self.name)
            self._process.terminate()
            try:
                self._process.wait(timeout=CLOSE_TIMEOUT)
            except subprocess.TimeoutExpired:
                logger.warning("Terminal %r did not exit, killing it", self.name)
                self._process.kill()
                self._process.wait()
        self._on_dispose(self.name)


class EmulatorTerminalAdapter:
    """Opens sessions in external terminal emulator windows.

    Args:
        command_template: Emulator command prefix; "{name}" in any part is
            replaced by the terminal name. The screen argv is appended.
            Example: ("x-terminal-emulator", "-T", "{name}", "-e")
    """

    def __init__(self, command_template: Sequence[str]) -> None:
        if not command_template:
            raise ValueError("Terminal command template cannot be empty")
        self.command_template = tuple(command_template)
        self._terminals: dict[str, EmulatorTerminal] = {}
        self._changed = False

    def find(self, name: str) -> Optional[EmulatorTerminal]:
        self._prune()
        return self._terminals.get(name)

    def create(self, name: str, argv: List[str]) -> EmulatorTerminal:
        prefix = [part.format(name=name) for part in self.command_template]
        terminal = EmulatorTerminal(
            name, prefix + list(argv), self._forget, self._mark_changed
        )
        self._terminals[name] = terminal
        return terminal

    def poll_changes(self) -> bool:
        """Return True if a window was opened or has exited since the last call."""
        self._prune()
        changed, self._changed = self._changed, False
        return changed

    def _mark_changed(self, name: str) -> None:
        self._changed = True

    def _forget(self, name: str) -> None:
        self._terminals.pop(name, None)

    def _prune(self) -> None:
        for name, terminal in list(self._terminals.items()):
            if terminal.closed:
                logger.debug("Terminal %r exited", name)
                del self._terminals[name]
                self._changed = True


class InlineTerminal:
    def __init__(
        self, name: str, argv: List[str], suspend: Callable[[], ContextManager]
    ) -> None:
        self.name = name
        self.argv = argv
        self._suspend = suspend

    def show(self) -> None:
        logger.debug("Attaching inline %r: %s", self.name, self.argv)
        with self._suspend():
            subprocess.run(self.argv)

    def dispose(self) -> None:
        pass


class InlineTerminalAdapter:
    """Runs the session in the foreground; returns when the user detaches."""

    def __init__(
        self, suspend: Callable[[], ContextManager] = contextlib.nullcontext
    ) -> None:
        self.suspend = suspend

    def find(self, name: str) -> Optional[InlineTerminal]:
        # nothing stays open once show() has returned
        return None

    def create(self, name: str, argv: List[str]) -> InlineTerminal:
        return InlineTerminal(name, list(argv), self.suspend)

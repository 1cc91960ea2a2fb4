"""
Screen Commands

Architectural Intent:
- Single place that knows the GNU screen command-line surface
- Produces shell command strings for the command runner and argv lists for
  terminals

Security:
- Every session name and identifier is quoted via shlex.quote() so user input
  never reaches the shell unescaped
"""

import shlex
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ScreenCommands:
    binary: str = "screen"

    def __post_init__(self):
        if not self.binary:
            raise ValueError("Screen binary cannot be empty")

    @property
    def _bin(self) -> str:
        return shlex.quote(self.binary)

    def list_sessions(self) -> str:
        # screen -ls exits non-zero even when it prints sessions
        return f"{self._bin} -ls || true"

    def create_detached(self, name: str) -> str:
        return f"{self._bin} -S {shlex.quote(name)} -d -m"

    def quit(self, identifier: str) -> str:
        return f"{self._bin} -S {shlex.quote(identifier)} -X quit"

    def rename(self, identifier: str, new_name: str) -> str:
        return (
            f"{self._bin} -S {shlex.quote(identifier)} "
            f"-X sessionname {shlex.quote(new_name)}"
        )

    def reattach_argv(self, identifier: str) -> List[str]:
        """Detach the session elsewhere and reattach it here."""
        return [self.binary, "-d", "-r", identifier]

"""
Command Runner Port

Architectural Intent:
- Port interface for executing one external shell command
- Two explicitly named variants: `run` swallows failures, `run_strict`
  surfaces them
- Implemented by ShellCommandRunner
"""

from abc import ABC, abstractmethod
from screenman.domain.value_objects.command_result import CommandResult


class CommandRunnerPort(ABC):
    """
    Port interface for running commands against the local shell.
    """

    @abstractmethod
    async def execute(self, command: str) -> CommandResult:
        """
        Runs a command and reports the outcome. Never raises.
        """
        pass

    @abstractmethod
    async def run(self, command: str) -> str:
        """
        Returns stdout verbatim, or "" after notifying the user of a failure.
        Never raises.
        """
        pass

    @abstractmethod
    async def run_strict(self, command: str) -> str:
        """
        Returns stdout verbatim; raises CommandFailedError on failure.
        """
        pass

    @abstractmethod
    async def is_available(self, executable: str) -> bool:
        """
        Checks whether an executable resolves on the search path.
        """
        pass

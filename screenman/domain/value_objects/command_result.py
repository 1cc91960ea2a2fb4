"""
Command Result

Architectural Intent:
- Uniform outcome of one external command: {ok: output} | {error: detail}
- Lets adapters report failures without raising; callers choose to swallow
  or surface them
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    output: str = ""
    detail: str = ""

    @staticmethod
    def success(output: str) -> "CommandResult":
        return CommandResult(ok=True, output=output)

    @staticmethod
    def failure(detail: str, output: str = "") -> "CommandResult":
        return CommandResult(ok=False, output=output, detail=detail)


class CommandFailedError(Exception):
    """Raised by the strict runner variant; carries the raw failure detail."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

"""
Use Cases Package

Architectural Intent:
- Session actions composing the command runner, terminals and the tree
  source's refresh signal
"""

from screenman.application.use_cases.open_session import OpenSession
from screenman.application.use_cases.create_session import CreateSession
from screenman.application.use_cases.kill_session import KillSession
from screenman.application.use_cases.rename_session import RenameSession
from screenman.application.use_cases.remove_all_sessions import RemoveAllSessions

__all__ = [
    "OpenSession",
    "CreateSession",
    "KillSession",
    "RenameSession",
    "RemoveAllSessions",
]

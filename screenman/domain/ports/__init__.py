"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from screenman.domain.ports.command_runner_port import CommandRunnerPort
from screenman.domain.ports.notification_port import NotificationPort
from screenman.domain.ports.prompt_port import PromptPort, Validator
from screenman.domain.ports.terminal_port import Terminal, TerminalPort
from screenman.domain.ports.event_bus_port import EventBusPort

__all__ = [
    "CommandRunnerPort",
    "NotificationPort",
    "PromptPort",
    "Validator",
    "Terminal",
    "TerminalPort",
    "EventBusPort",
]

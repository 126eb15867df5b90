"""Event handlers for infrastructure side effects."""

from src.infrastructure.events.handlers.console_log_handlers import (
    AddressChangedConsoleLogHandler,
    FirstConsoleLogHandler,
    SecondConsoleLogHandler,
)

__all__ = [
    "AddressChangedConsoleLogHandler",
    "FirstConsoleLogHandler",
    "SecondConsoleLogHandler",
]

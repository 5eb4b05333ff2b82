"""Manager systems coordinating cross-cutting concerns.

This package contains managers that observe scenario construction through
the event-driven architecture.
"""

from .log_manager import LogManager, LogLevel, LogCategory, LogMessage

__all__ = [
    "LogManager",
    "LogLevel",
    "LogCategory",
    "LogMessage",
]

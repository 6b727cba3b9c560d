"""Service layer handlers."""

from collections.abc import Callable

from .log_priority_handlers import COMMAND_HANDLERS as LOG_PRIORITY_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    **LOG_PRIORITY_COMMAND_HANDLERS,
}

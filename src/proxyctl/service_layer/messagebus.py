"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    Routes each command to the handler registered for its type and logs the
    dispatch. Handler exceptions are logged and re-raised unchanged.

    Args:
        command_handlers: A mapping of command types to their handlers.
            Handlers accept a single command argument; their dependencies
            (e.g. control API clients) are injected beforehand.

    Note:
        Dispatch is synchronous: `handle` returns only after the handler, and
        every request it made, has completed.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                handler(cmd)
            except Exception:  # pylint: disable=broad-except
                logger.debug(
                    "Exception handling command %s with handler %s",
                    cmd,
                    handler_name,
                    exc_info=True,
                )
                raise
        else:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)

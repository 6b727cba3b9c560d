"""Instance lifecycle interface.

An `Instance` is the system under test: something that can be started,
stopped, and reached through its REST control API while running. Used as a
context manager it guarantees `stop()` on every exit path, including failed
assertions in the enclosed block.
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from proxyctl.interfaces.admin_api import AdminApi

logger = logging.getLogger(__name__)


class InstanceError(Exception):
    """Base class for instance lifecycle errors."""


class InstanceStartError(InstanceError):
    """Raised when an instance fails to start or never becomes ready."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Instance failed to start: {reason}")
        self.reason = reason


class InstanceStopError(InstanceError):
    """Raised when an instance cannot be stopped cleanly."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Instance failed to stop: {reason}")
        self.reason = reason


class Instance(abc.ABC):
    """Interface for starting and stopping the system under test."""

    @property
    @abc.abstractmethod
    def is_running(self) -> bool:
        """Whether the instance has been started and not yet stopped."""

    @abc.abstractmethod
    def start(self) -> None:
        """Start the instance and return once its control API answers.

        Raises:
            InstanceStartError: If the instance cannot be started.
        """

    @abc.abstractmethod
    def stop(self) -> None:
        """Stop the instance. Does nothing if it is not running.

        Raises:
            InstanceStopError: If the instance cannot be stopped cleanly.
        """

    @abc.abstractmethod
    def admin_api(self) -> AdminApi:
        """Return a control API client bound to this instance."""

    def __enter__(self) -> Instance:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.stop()
            return
        # the error leaving the block wins over a failed stop
        try:
            self.stop()
        except InstanceError:
            logger.warning("Stopping instance after an error failed", exc_info=True)

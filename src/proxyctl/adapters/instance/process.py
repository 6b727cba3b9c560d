"""Instance backed by a real server started and stopped with shell commands.

`ProcessInstance` runs a start command (e.g. a script that launches the
server), then polls the control API until it answers. The stop command is
run on `stop()`. Both commands run through the shell and must exit 0; a
failing stop command raises `InstanceStopError`.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import TYPE_CHECKING

from proxyctl.interfaces.instance import (
    Instance,
    InstanceError,
    InstanceStartError,
    InstanceStopError,
)

if TYPE_CHECKING:
    from proxyctl.interfaces.admin_api import AdminApi

logger = logging.getLogger(__name__)

DEFAULT_READY_TIMEOUT_S = 30.0
DEFAULT_POLL_INTERVAL_S = 0.5


class ProcessInstance(Instance):
    """Start/stop a real instance through shell commands.

    Args:
        start_command: Shell command that launches the instance.
        stop_command: Shell command that shuts it down.
        admin_api: Client for the instance's control API, used for readiness checks
            and handed to callers of `admin_api()`.
        ready_timeout: Seconds to wait for the API to answer after starting.
        poll_interval: Seconds between readiness checks.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        start_command: str,
        stop_command: str,
        admin_api: AdminApi,
        ready_timeout: float = DEFAULT_READY_TIMEOUT_S,
        poll_interval: float = DEFAULT_POLL_INTERVAL_S,
    ) -> None:
        self._start_command = start_command
        self._stop_command = stop_command
        self._api = admin_api
        self._ready_timeout = ready_timeout
        self._poll_interval = poll_interval
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        logger.info("Starting instance: %s", self._start_command)
        try:
            subprocess.run(self._start_command, shell=True, check=True)
        except subprocess.CalledProcessError as e:
            raise InstanceStartError(
                f"start command exited with status {e.returncode}"
            ) from e
        self._running = True

        deadline = time.monotonic() + self._ready_timeout
        while not self._api.ping():
            if time.monotonic() >= deadline:
                try:
                    self.stop()
                except InstanceError:
                    logger.warning("Stopping unready instance failed", exc_info=True)
                raise InstanceStartError(
                    f"control API at {self._api.host} not ready after {self._ready_timeout}s"
                )
            time.sleep(self._poll_interval)
        logger.info("Instance ready at %s", self._api.host)

    def stop(self) -> None:
        if not self._running:
            return
        logger.info("Stopping instance: %s", self._stop_command)
        self._running = False
        try:
            subprocess.run(self._stop_command, shell=True, check=True)
        except subprocess.CalledProcessError as e:
            raise InstanceStopError(
                f"stop command exited with status {e.returncode}"
            ) from e

    def admin_api(self) -> AdminApi:
        return self._api

"""Handlers that toggle log priorities on the logs resource."""

import logging
from collections.abc import Callable, Iterable, Sequence

from proxyctl.domain import log_priorities
from proxyctl.domain.resources import LOGS_RESOURCE_PATH, LogsConfiguration
from proxyctl.interfaces.admin_api import AdminApi
from proxyctl.service_layer import commands

logger = logging.getLogger(__name__)


def _update_priorities(
    admin_apis: Sequence[AdminApi],
    change: Callable[[Iterable[str], str], tuple[str, ...]],
    priority: str,
) -> None:
    """Read-modify-write the logs resource on each host, in order.

    Stops at the first host that fails; hosts after it are left untouched.
    """
    for api in admin_apis:
        current = LogsConfiguration.from_representation(
            api.get_resource(LOGS_RESOURCE_PATH)
        )
        updated = LogsConfiguration(change(current.log_priorities, priority))
        logger.info(
            "%s: log priorities %s -> %s",
            api.host,
            list(current.log_priorities),
            list(updated.log_priorities),
        )
        api.patch_resource(LOGS_RESOURCE_PATH, updated.to_patch_document())


def enable_log_priority(
    cmd: commands.EnableLogPriority, admin_apis: Sequence[AdminApi]
) -> None:
    """Add ``cmd.priority`` to the active log priorities."""
    _update_priorities(admin_apis, log_priorities.enable, cmd.priority)


def disable_log_priority(
    cmd: commands.DisableLogPriority, admin_apis: Sequence[AdminApi]
) -> None:
    """Remove ``cmd.priority`` from the active log priorities."""
    _update_priorities(admin_apis, log_priorities.disable, cmd.priority)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.EnableLogPriority: enable_log_priority,
    commands.DisableLogPriority: disable_log_priority,
}

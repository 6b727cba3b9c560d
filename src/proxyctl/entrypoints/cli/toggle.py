"""PROXYCTL ``enable`` / ``disable`` command groups.

Each group toggles a runtime setting on every configured host. Currently
available targets:

- ``log-priority <priority>``: add or remove a priority from the instance's
  active log priorities (``maxscale/logs`` resource).

Examples
    $ proxyctl enable log-priority info
    $ proxyctl --hosts 10.0.0.1:8989,10.0.0.2:8989 disable log-priority debug

Failure modes
- Unknown priority -> usage error (exit 2); no request is sent.
- Control API refuses the update, the resource is missing, or the host is
  unreachable -> error with the server's reason (exit 1).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from proxyctl.domain.errors import DomainError
from proxyctl.domain.log_priorities import KNOWN_LOG_PRIORITIES, is_known_priority
from proxyctl.interfaces.admin_api import AdminApiError
from proxyctl.service_layer import commands

from .helpers import error, success

if TYPE_CHECKING:
    from proxyctl.bootstrap import AppContainer

PRIORITY_METAVAR = "[" + "|".join(KNOWN_LOG_PRIORITIES) + "]"


class CommandFailed(click.ClickException):
    """A command reached the control API but could not be carried out."""

    def show(self, file=None) -> None:  # pylint: disable=unused-argument
        error(self.format_message())


def _validate_priority(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str,
) -> str:
    if not is_known_priority(value):
        raise click.BadParameter(f"Invalid log priority: {value}")
    return value


def _dispatch(container: AppContainer, cmd: commands.Command) -> None:
    try:
        container.message_bus.handle(cmd)
    except (AdminApiError, DomainError) as e:
        raise CommandFailed(str(e)) from e


def _hosts(container: AppContainer) -> str:
    return ", ".join(api.host for api in container.admin_apis)


@click.group(cls=clickx.ExtraGroup)
def enable() -> None:
    """Enable runtime settings on the instance."""


@click.group(cls=clickx.ExtraGroup)
def disable() -> None:
    """Disable runtime settings on the instance."""


@enable.command("log-priority")
@click.argument("priority", metavar=PRIORITY_METAVAR, callback=_validate_priority)
@click.pass_obj
def enable_log_priority(container: AppContainer, priority: str) -> None:
    """Enable a log priority."""
    _dispatch(container, commands.EnableLogPriority(priority))
    success(f"Enabled log priority '{priority}' on {_hosts(container)}.")


@disable.command("log-priority")
@click.argument("priority", metavar=PRIORITY_METAVAR, callback=_validate_priority)
@click.pass_obj
def disable_log_priority(container: AppContainer, priority: str) -> None:
    """Disable a log priority."""
    _dispatch(container, commands.DisableLogPriority(priority))
    success(f"Disabled log priority '{priority}' on {_hosts(container)}.")

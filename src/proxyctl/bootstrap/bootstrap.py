"""Bootstrap the message bus with handlers and control API clients."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from proxyctl import config
from proxyctl.adapters.admin_api import HttpAdminApi
from proxyctl.service_layer.handlers import COMMAND_HANDLERS
from proxyctl.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from proxyctl.interfaces.admin_api import AdminApi
    from proxyctl.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    admin_apis: tuple[AdminApi, ...]

    def close(self) -> None:
        """Close every control API client."""
        for api in self.admin_apis:
            api.close()


def build_admin_apis(settings: config.ConnectionSettings) -> tuple[AdminApi, ...]:
    """Build one HTTP control API client per configured host."""
    return tuple(
        HttpAdminApi(
            host,
            user=settings.user,
            password=settings.password,
            timeout=settings.timeout_seconds,
            secure=settings.secure,
        )
        for host in settings.hosts
    )


def build_message_bus(
    admin_apis: Sequence[AdminApi],
    command_handlers: dict[type[Command], Callable[..., None]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"admin_apis": tuple(admin_apis)}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(
    settings: config.ConnectionSettings | None = None,
    admin_apis: Sequence[AdminApi] | None = None,
) -> AppContainer:
    """Wire handlers to control API clients.

    Args:
        settings: Connection settings; read from the environment when omitted.
            Ignored if ``admin_apis`` is given.
        admin_apis: Pre-built clients, e.g. bound to an in-memory instance.

    Returns:
        AppContainer: The message bus and the clients it uses.
    """
    if admin_apis is None:
        admin_apis = build_admin_apis(settings or config.settings_from_env())
    apis = tuple(admin_apis)
    return AppContainer(
        message_bus=build_message_bus(apis, COMMAND_HANDLERS),
        admin_apis=apis,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return lambda message: handler(message, **deps)

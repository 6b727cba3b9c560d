"""Configuration utilities for PROXYCTL.

This module centralizes the connection defaults used to reach an instance's
REST control API and the helpers that resolve them from the environment.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HOSTS = ("127.0.0.1:8989",)
DEFAULT_USER = "admin"
DEFAULT_PASSWORD = "mariadb"
DEFAULT_TIMEOUT_MS = 10_000

HOSTS_ENVVAR = "PROXYCTL_HOSTS"
USER_ENVVAR = "PROXYCTL_USER"
PASSWORD_ENVVAR = "PROXYCTL_PASSWORD"
TIMEOUT_ENVVAR = "PROXYCTL_TIMEOUT"
SECURE_ENVVAR = "PROXYCTL_SECURE"

API_VERSION_PREFIX = "v1"

_FALSY = {"", "0", "false", "no", "off"}


class InvalidSettingError(ValueError):
    """Raised when a connection setting cannot be interpreted."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class ConnectionSettings:
    """Where and how to reach the REST control API.

    Attributes:
        hosts: One or more ``host:port`` pairs. Commands run against each in order.
        user: Basic-auth user name.
        password: Basic-auth password.
        timeout_ms: Upper bound for a single request/response round trip.
        secure: Use HTTPS instead of HTTP.
    """

    hosts: tuple[str, ...] = DEFAULT_HOSTS
    user: str = DEFAULT_USER
    password: str = DEFAULT_PASSWORD
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    secure: bool = False

    @property
    def timeout_seconds(self) -> float:
        """The round-trip timeout in seconds, as httpx expects it."""
        return self.timeout_ms / 1000


def parse_hosts(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma/space separated host list into individual hosts.

    Args:
        value: A single string (e.g. from an env var) or a sequence of strings
            (e.g. from a repeatable option), each possibly holding several hosts.

    Returns:
        The non-empty host entries in the order given.

    Raises:
        InvalidSettingError: If no host remains after splitting.
    """
    raw = value if isinstance(value, (list, tuple)) else [value]
    hosts = tuple(h for item in raw for h in re.split(r"[,\s]+", item) if h)
    if not hosts:
        raise InvalidSettingError("hosts", str(value), "at least one host is required")
    return hosts


def parse_timeout(value: str | int) -> int:
    """Parse a timeout in milliseconds, rejecting non-positive values."""
    try:
        timeout = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidSettingError("timeout", str(value), "not an integer") from e
    if timeout <= 0:
        raise InvalidSettingError("timeout", str(value), "must be positive")
    return timeout


def settings_from_env(environ: Mapping[str, str] | None = None) -> ConnectionSettings:
    """Build connection settings from ``PROXYCTL_*`` environment variables.

    Unset variables fall back to the defaults.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The resolved settings.

    Raises:
        InvalidSettingError: If a variable is set to an unusable value.
    """
    env = os.environ if environ is None else environ
    return ConnectionSettings(
        hosts=parse_hosts(env[HOSTS_ENVVAR]) if env.get(HOSTS_ENVVAR) else DEFAULT_HOSTS,
        user=env.get(USER_ENVVAR, DEFAULT_USER),
        password=env.get(PASSWORD_ENVVAR, DEFAULT_PASSWORD),
        timeout_ms=(
            parse_timeout(env[TIMEOUT_ENVVAR])
            if env.get(TIMEOUT_ENVVAR)
            else DEFAULT_TIMEOUT_MS
        ),
        secure=env.get(SECURE_ENVVAR, "").strip().lower() not in _FALSY,
    )

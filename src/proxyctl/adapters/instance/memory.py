"""In-memory instance serving the logs resource of the REST control API.

`InMemoryInstance` answers HTTP requests through an ``httpx.MockTransport``,
so `HttpAdminApi` talks to it exactly as it would to a real instance, minus
the network. It serves only what the log-priority commands touch:

- ``GET   /v1/maxscale``       instance root (used for readiness checks)
- ``GET   /v1/maxscale/logs``  logs resource with ``log_priorities``
- ``PATCH /v1/maxscale/logs``  update ``log_priorities``

Priorities are validated on PATCH the same way a real server does, so
rejection of unknown values does not depend on the client. While stopped,
every request fails with a connection error.
"""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Iterable
from typing import Any

import httpx

from proxyctl import __version__, config
from proxyctl.adapters.admin_api.http import HttpAdminApi
from proxyctl.domain.resources import LOGS_RESOURCE_PATH
from proxyctl.interfaces.instance import Instance

logger = logging.getLogger(__name__)

SERVER_LOG_PRIORITIES = ("alert", "error", "warning", "notice", "info", "debug")
DEFAULT_ACTIVE_PRIORITIES = ("alert", "error", "warning", "notice")

_ROOT_PATH = "maxscale"


def _error_response(status: int, detail: str) -> httpx.Response:
    return httpx.Response(status, json={"errors": [{"detail": detail}]})


class InMemoryInstance(Instance):
    """A non-durable stand-in for a running instance.

    Args:
        log_priorities: Priorities active when the instance starts.
        host: ``host:port`` clients should address. Only used to build URLs.
        user: Accepted basic-auth user name.
        password: Accepted basic-auth password.

    Attributes:
        requests: ``(method, path)`` of every request received, in order.
            Useful for asserting that a request did or did not happen.
    """

    def __init__(
        self,
        log_priorities: Iterable[str] = DEFAULT_ACTIVE_PRIORITIES,
        host: str = config.DEFAULT_HOSTS[0],
        user: str = config.DEFAULT_USER,
        password: str = config.DEFAULT_PASSWORD,
    ) -> None:
        self.host = host
        self._initial_priorities = list(log_priorities)
        self._log_priorities = list(self._initial_priorities)
        self._expected_auth = "Basic " + base64.b64encode(
            f"{user}:{password}".encode()
        ).decode("ascii")
        self._user = user
        self._password = password
        self._running = False
        self.requests: list[tuple[str, str]] = []
        self.transport = httpx.MockTransport(self._handle)

    # --- Lifecycle ---

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start with the initial priorities. Restarting resets state."""
        self._log_priorities = list(self._initial_priorities)
        self._running = True
        logger.debug("In-memory instance started at %s", self.host)

    def stop(self) -> None:
        if self._running:
            logger.debug("In-memory instance at %s stopped", self.host)
        self._running = False

    def admin_api(self) -> HttpAdminApi:
        return HttpAdminApi(
            self.host,
            user=self._user,
            password=self._password,
            transport=self.transport,
        )

    @property
    def log_priorities(self) -> tuple[str, ...]:
        """Currently active priorities, read directly from server state."""
        return tuple(self._log_priorities)

    # --- HTTP ---

    def _handle(self, request: httpx.Request) -> httpx.Response:
        if not self._running:
            raise httpx.ConnectError("Connection refused", request=request)

        prefix = f"/{config.API_VERSION_PREFIX}/"
        path = request.url.path
        path = path[len(prefix) :] if path.startswith(prefix) else path.lstrip("/")
        path = path.strip("/")
        self.requests.append((request.method, path))

        if request.headers.get("Authorization") != self._expected_auth:
            return _error_response(401, "Access denied")

        if path == _ROOT_PATH:
            if request.method != "GET":
                return _error_response(405, f"Method {request.method} not allowed")
            return httpx.Response(200, json=self._root_document())
        if path == LOGS_RESOURCE_PATH:
            if request.method == "GET":
                return httpx.Response(200, json=self._logs_document())
            if request.method == "PATCH":
                return self._patch_logs(request)
            return _error_response(405, f"Method {request.method} not allowed")
        return _error_response(404, f"Resource '{path}' not found")

    def _root_document(self) -> dict[str, Any]:
        return {
            "links": {"self": f"http://{self.host}/{config.API_VERSION_PREFIX}/maxscale/"},
            "data": {
                "id": "maxscale",
                "type": "maxscale",
                "attributes": {"version": __version__},
            },
        }

    def _logs_document(self) -> dict[str, Any]:
        return {
            "links": {
                "self": f"http://{self.host}/{config.API_VERSION_PREFIX}/{LOGS_RESOURCE_PATH}/"
            },
            "data": {
                "id": "logs",
                "type": "logs",
                "attributes": {"log_priorities": list(self._log_priorities)},
            },
        }

    def _patch_logs(self, request: httpx.Request) -> httpx.Response:
        try:
            body = json.loads(request.content or b"null")
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error_response(400, "Request body is not valid JSON")

        data = body.get("data") if isinstance(body, dict) else None
        attributes = data.get("attributes") if isinstance(data, dict) else None
        if not isinstance(attributes, dict):
            return _error_response(400, "Missing '/data/attributes' object")

        unknown = sorted(set(attributes) - {"log_priorities"})
        if unknown:
            return _error_response(400, f"Unknown attribute: {', '.join(unknown)}")

        priorities = attributes.get("log_priorities", self._log_priorities)
        if not isinstance(priorities, list) or not all(
            isinstance(p, str) for p in priorities
        ):
            return _error_response(400, "'log_priorities' must be a list of strings")
        invalid = [p for p in priorities if p not in SERVER_LOG_PRIORITIES]
        if invalid:
            return _error_response(
                400, "\n".join(f"Invalid log priority: {p}" for p in invalid)
            )

        self._log_priorities = list(priorities)
        logger.debug("In-memory instance log priorities now %s", self._log_priorities)
        return httpx.Response(204)

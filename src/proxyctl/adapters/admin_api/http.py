"""httpx-based implementation of the REST control API.

Requests go to ``http[s]://<host>/v1/<path>`` with HTTP basic auth. Each
round trip is bounded by the configured timeout. Error responses follow the
JSON:API convention of an ``errors`` array whose ``detail`` members carry
human-readable reasons; those are surfaced in `RequestRejectedError`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from proxyctl import config
from proxyctl.domain.resources import ResourceRepresentation, normalize_path
from proxyctl.interfaces.admin_api import (
    AdminApi,
    ApiTransportError,
    RequestRejectedError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

# pylint: disable=too-many-arguments


def base_url(host: str, secure: bool = False) -> str:
    """Return the API root URL for ``host``."""
    scheme = "https" if secure else "http"
    return f"{scheme}://{host}/{config.API_VERSION_PREFIX}/"


def error_detail(response: httpx.Response) -> str:
    """Extract a human-readable reason from an error response.

    Joins the ``detail`` members of a JSON:API ``errors`` array with newlines.
    Falls back to the raw body text, then to the status reason phrase.
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None
    if isinstance(body, Mapping) and isinstance(body.get("errors"), list):
        details = [
            str(err["detail"])
            for err in body["errors"]
            if isinstance(err, Mapping) and "detail" in err
        ]
        if details:
            return "\n".join(details)
    return response.text.strip() or response.reason_phrase


class HttpAdminApi(AdminApi):
    """Control API client for a single host.

    Args:
        host: ``host:port`` of the instance's REST listener.
        user: Basic-auth user name.
        password: Basic-auth password.
        timeout: Per round-trip timeout in seconds.
        secure: Use HTTPS.
        transport: Optional httpx transport, e.g. an in-memory instance's
            ``MockTransport``. Defaults to real network I/O.
    """

    def __init__(
        self,
        host: str,
        user: str = config.DEFAULT_USER,
        password: str = config.DEFAULT_PASSWORD,
        timeout: float = config.DEFAULT_TIMEOUT_MS / 1000,
        secure: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._host = host
        self._client = httpx.Client(
            base_url=base_url(host, secure),
            auth=httpx.BasicAuth(user, password),
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def host(self) -> str:
        return self._host

    def get_resource(self, path: str) -> ResourceRepresentation:
        path = normalize_path(path)
        response = self._send("GET", path)
        try:
            document = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ApiTransportError(path, "response body is not valid JSON") from e
        if not isinstance(document, Mapping):
            raise ApiTransportError(path, "response body is not a JSON object")
        return ResourceRepresentation(path=path, document=document)

    def patch_resource(self, path: str, document: Mapping[str, Any]) -> None:
        self._send("PATCH", normalize_path(path), json=dict(document))

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s%s", method, self._client.base_url, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise ApiTransportError(path, f"timed out talking to {self._host}") from e
        except httpx.TransportError as e:
            raise ApiTransportError(path, f"cannot reach {self._host}: {e}") from e
        logger.debug("%s %s -> %s", method, path, response.status_code)

        if response.status_code == httpx.codes.NOT_FOUND:
            raise ResourceNotFoundError(path)
        if response.is_error:
            raise RequestRejectedError(path, response.status_code, error_detail(response))
        return response

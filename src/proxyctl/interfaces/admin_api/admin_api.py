"""Abstract REST control API.

Implementations talk to one instance. Paths are relative to the API root
(e.g. ``maxscale/logs``); a leading ``/`` is tolerated.
"""

import abc
from collections.abc import Mapping
from typing import Any

from proxyctl.domain.resources import ResourceRepresentation

from .errors import AdminApiError


class AdminApi(abc.ABC):
    """Interface for reading and updating resources on a running instance."""

    @property
    @abc.abstractmethod
    def host(self) -> str:
        """The ``host:port`` this API talks to."""

    @abc.abstractmethod
    def get_resource(self, path: str) -> ResourceRepresentation:
        """Fetch and decode a resource.

        Args:
            path: Resource path relative to the API root.

        Returns:
            ResourceRepresentation: The decoded document.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
            RequestRejectedError: If the API answers with another error status.
            ApiTransportError: If the round trip fails or the body is not JSON.
        """

    @abc.abstractmethod
    def patch_resource(self, path: str, document: Mapping[str, Any]) -> None:
        """Apply a partial update to a resource.

        Returns only once the API has acknowledged the update.

        Args:
            path: Resource path relative to the API root.
            document: JSON:API-style body, e.g.
                ``{"data": {"attributes": {"log_priorities": ["info"]}}}``.

        Raises:
            ResourceNotFoundError: If the resource does not exist.
            RequestRejectedError: If the API refuses the update.
            ApiTransportError: If the round trip fails.
        """

    def ping(self) -> bool:
        """Whether the API currently answers a request for the root resource."""
        try:
            self.get_resource("maxscale")
        except AdminApiError:
            return False
        return True

    def close(self) -> None:
        """Release any held connections. The default does nothing."""

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

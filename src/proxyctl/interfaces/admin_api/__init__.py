"""REST control API interface."""

from .admin_api import AdminApi
from .errors import (
    AdminApiError,
    ApiTransportError,
    RequestRejectedError,
    ResourceNotFoundError,
)

__all__ = [
    "AdminApi",
    "AdminApiError",
    "ApiTransportError",
    "RequestRejectedError",
    "ResourceNotFoundError",
]

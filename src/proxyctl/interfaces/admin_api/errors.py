"""Errors related to the REST control API interface."""


class AdminApiError(Exception):
    """Base class for all control API errors."""

    def __init__(self, path: str, message: str | None = None) -> None:
        if message is None:
            message = f"Request for resource '{path}' failed"
        super().__init__(message)
        self.path = path


class ResourceNotFoundError(AdminApiError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Resource '{path}' not found")


class RequestRejectedError(AdminApiError):
    """Raised when the API answers with an error status other than 404."""

    def __init__(self, path: str, status: int, detail: str) -> None:
        super().__init__(
            path, f"Request for resource '{path}' rejected ({status}): {detail}"
        )
        self.status = status
        self.detail = detail


class ApiTransportError(AdminApiError):
    """Raised when the request could not complete (connect error, timeout, bad body)."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"Request for resource '{path}' failed: {reason}")
        self.reason = reason

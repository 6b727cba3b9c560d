"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class MalformedResourceError(DomainError):
    """Raised when a fetched resource lacks an expected attribute or has the wrong shape."""

    def __init__(self, path: str, pointer: str, reason: str) -> None:
        super().__init__(f"Resource {path!r} is malformed at {pointer!r}: {reason}")
        self.path = path
        self.pointer = pointer
        self.reason = reason


class InvalidPointerError(DomainError):
    """Raised when a JSON pointer string is not syntactically valid."""

    def __init__(self, pointer: str) -> None:
        super().__init__(f"Invalid JSON pointer {pointer!r}: must be empty or start with '/'")
        self.pointer = pointer

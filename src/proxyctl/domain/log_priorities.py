"""Log-priority sequence arithmetic.

The logs resource reports its active priorities as an ordered list of
names. Enabling a priority appends it unless it is already present;
disabling removes every occurrence. Both are pure functions over tuples.
"""

from collections.abc import Iterable

KNOWN_LOG_PRIORITIES = ("debug", "info", "notice", "warning")


def is_known_priority(priority: str) -> bool:
    """Whether ``priority`` is one the client accepts for enable/disable."""
    return priority in KNOWN_LOG_PRIORITIES


def enable(current: Iterable[str], priority: str) -> tuple[str, ...]:
    """Return ``current`` with ``priority`` present exactly once.

    Existing order is kept; duplicates already in ``current`` are collapsed.
    """
    result = tuple(dict.fromkeys(current))
    if priority in result:
        return result
    return (*result, priority)


def disable(current: Iterable[str], priority: str) -> tuple[str, ...]:
    """Return ``current`` without any occurrence of ``priority``."""
    return tuple(p for p in current if p != priority)

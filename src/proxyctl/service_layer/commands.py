"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class EnableLogPriority(Command):
    """Command to add a priority to the instance's active log priorities."""

    priority: str


@dataclass(frozen=True)
class DisableLogPriority(Command):
    """Command to remove a priority from the instance's active log priorities."""

    priority: str

"""REST control API adapters."""

from .http import HttpAdminApi

__all__ = ["HttpAdminApi"]

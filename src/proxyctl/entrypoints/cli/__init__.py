"""PROXYCTL command-line interface."""

from .main import proxyctl

__all__ = ["proxyctl"]

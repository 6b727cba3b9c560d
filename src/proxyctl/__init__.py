"""PROXYCTL

A command-line administration client for the REST control API of a running
database-proxy instance. It toggles runtime settings such as log priorities
and ships a command-and-verify harness that checks each command's effect by
re-reading REST state.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

"""Service layer for PROXYCTL.

Commands describe what the user asked for; handlers carry them out against
one or more control APIs; the message bus routes commands to handlers.
"""

"""Entrypoints (inbound adapters) for PROXYCTL.

Expose the application to the outside world through the command line: parse
and validate inputs, hand commands to the message bus, and present results.

Dependency rule: may import `proxyctl.bootstrap` and `proxyctl.service_layer`;
avoid importing `proxyctl.adapters` directly.
"""

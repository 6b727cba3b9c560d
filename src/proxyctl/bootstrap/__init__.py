"""Bootstrap (composition root) for PROXYCTL.

Assembles the application at runtime: builds control API clients from the
connection settings, injects them into the service-layer handlers and wraps
the result in a message bus.

Import rules:
- Entry points and the harness import *this* package, not adapters directly.
- This package may import: `proxyctl.adapters`, `proxyctl.service_layer`,
  `proxyctl.interfaces`, `proxyctl.domain`, and `proxyctl.config`.
- Inner layers must not import `proxyctl.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_admin_apis, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_admin_apis", "build_message_bus"]

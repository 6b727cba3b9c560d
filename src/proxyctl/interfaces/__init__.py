"""Ports (abstract interfaces) for PROXYCTL.

Describe what the service layer and the harness need from the outside world,
the instance's REST control API and the instance's process lifecycle, without
committing to a transport. Concrete implementations live in
`proxyctl.adapters`.
"""

"""Adapters (outbound implementations) for PROXYCTL.

Concrete implementations of the ports in `proxyctl.interfaces`: an httpx
client for the REST control API, plus in-memory and process-backed
instances for running commands against.
"""

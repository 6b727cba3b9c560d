"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No network, subprocesses or wall-clock waits; fake the control API or
  serve it through ``httpx.MockTransport``.
- Assert on returned values and raised errors, not on call sequences.
"""

"""Integration tests.

Purpose
- Exercise real subprocesses and, when configured, a live instance's REST
  control API.

Guidelines
- Tests needing a live instance use the ``live_instance``/``live_harness``
  fixtures, which skip unless PROXYCTL_IT_START and PROXYCTL_IT_STOP are set.
- Restore any setting a test changes so the instance is left as found.
"""

"""Pytest fixtures for Instance contract tests.

Provided fixtures
-----------------
- **instance**: Parametrized factory returning a **fresh, stopped**
  `Instance` per test.

  - ``"memory"``: `InMemoryInstance`.
  - ``"process"``: `ProcessInstance` whose start/stop commands are ``true``,
    with readiness checked against an in-memory control API that is already
    up. This exercises the shell-command lifecycle without a real server.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from proxyctl.adapters.instance import InMemoryInstance, ProcessInstance
from proxyctl.interfaces.instance import Instance


@pytest.fixture(params=["memory", "process"])
def instance(request: pytest.FixtureRequest) -> Iterator[Instance]:
    """Yield a stopped instance of the requested kind; stop it on teardown."""

    match request.param:
        case "memory":
            inst: Instance = InMemoryInstance()
            yield inst
            inst.stop()
        case "process":
            with InMemoryInstance() as backend:
                inst = ProcessInstance(
                    "true", "true", backend.admin_api(), ready_timeout=1.0
                )
                yield inst
                inst.stop()
        case _:
            raise ValueError(f"unknown instance type: {request.param}")

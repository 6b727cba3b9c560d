"""Global pytest fixtures for PROXYCTL."""

pytest_plugins = [
    "tests.fixtures.instances",
]

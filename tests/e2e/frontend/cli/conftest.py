"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, plus fixtures to register that command, obtain a CliRunner, run
tests within an isolated filesystem, and hand the CLI a container bound to an
in-memory instance.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from proxyctl.bootstrap import bootstrap
from proxyctl.entrypoints.cli.main import proxyctl

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'proxyctl.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("proxyctl.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `proxyctl` for the duration of a test."""
    proxyctl.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(proxyctl, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side effects (log files) to a temporary directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def container(memory_instance):
    """An application container whose single client targets ``memory_instance``."""
    app = bootstrap(admin_apis=[memory_instance.admin_api()])
    try:
        yield app
    finally:
        app.close()

"""Unit tests for the command-and-verify harness.

A small stand-in Click command replaces the real CLI so each outcome the
harness distinguishes (accepted, usage error, failed command, non-zero exit,
abort) can be produced directly. Fetches go to a `FakeAdminApi`.
"""

import click
import pytest

from proxyctl.testing import CommandHarness, CommandRejected, FetchFailed, HarnessError
from tests.helpers.fakes import FakeAdminApi, fake_with_logs

# pylint: disable=magic-value-comparison


@click.command()
@click.argument("word")
@click.option("--code", type=int, default=None)
@click.pass_obj
def fake_cli(calls: list, word: str, code: int | None) -> None:
    """Record ``word``; fail in the way ``word`` names."""
    calls.append(word)
    if word == "fail":
        raise click.ClickException("it failed")
    if word == "abort":
        raise click.Abort()
    if code is not None:
        click.get_current_context().exit(code)


def _harness(api=None, base_args=()):
    calls: list[str] = []
    harness = CommandHarness(
        fake_cli,
        api if api is not None else fake_with_logs("error"),
        context_obj=calls,
        base_args=base_args,
    )
    return harness, calls


class TestExecuteOnly:
    """Tests for CommandHarness.execute_only."""

    @staticmethod
    def test_accepted_command_returns_none():
        """An accepted command runs once with the context object."""
        harness, calls = _harness()
        assert harness.execute_only("hello") is None
        assert calls == ["hello"]

    @staticmethod
    def test_shell_style_splitting():
        """Quoted arguments stay together."""
        harness, calls = _harness()
        harness.execute_only("'two words'")
        assert calls == ["two words"]

    @staticmethod
    def test_base_args_apply_to_every_command():
        """base_args are passed along with each command."""
        harness, calls = _harness(base_args=("--code", "3"))
        with pytest.raises(CommandRejected, match="exited with status 3"):
            harness.execute_only("hello")
        assert calls == ["hello"]

    @staticmethod
    @pytest.mark.parametrize(
        ("command", "reason"),
        [
            ("--code 0", "Missing argument"),
            ("one two", "Got unexpected extra argument (two)"),
            ("hello --code x", "'x' is not a valid integer"),
            ("fail", "it failed"),
            ("abort", "aborted"),
            ("hello --code 3", "exited with status 3"),
        ],
        ids=["missing-arg", "extra-arg", "bad-option", "click-exception", "abort", "exit-code"],
    )
    def test_rejections(command, reason):
        """Usage errors, failed commands, aborts and non-zero exits are rejections."""
        harness, _ = _harness()
        with pytest.raises(CommandRejected) as excinfo:
            harness.execute_only(command)
        assert excinfo.value.command == command
        assert reason in excinfo.value.reason

    @staticmethod
    def test_zero_exit_is_accepted():
        """An explicit exit with status 0 is not a rejection."""
        harness, calls = _harness(base_args=())
        harness.execute_only("hello --code 0")
        assert calls == ["hello"]

    @staticmethod
    @pytest.mark.parametrize("command", ["", "   "])
    def test_empty_command_is_invalid(command):
        """An empty command is a caller error, not a rejection."""
        harness, calls = _harness()
        with pytest.raises(ValueError, match="command must be a non-empty string"):
            harness.execute_only(command)
        assert calls == []


class TestExecuteAndVerify:
    """Tests for CommandHarness.execute_and_verify."""

    @staticmethod
    def test_returns_fetched_resource():
        """After an accepted command the resource is fetched and returned."""
        api = fake_with_logs("error", "info")
        harness, _ = _harness(api)
        rep = harness.execute_and_verify("hello", "/maxscale/logs")
        assert rep.path == "maxscale/logs"
        assert rep.pointer("/data/attributes/log_priorities") == ["error", "info"]
        assert api.calls == [("GET", "maxscale/logs")]

    @staticmethod
    def test_rejected_command_fetches_nothing():
        """When the command is rejected no fetch is made."""
        api = fake_with_logs("error")
        harness, _ = _harness(api)
        with pytest.raises(CommandRejected):
            harness.execute_and_verify("fail", "maxscale/logs")
        assert api.calls == []

    @staticmethod
    def test_missing_resource_is_fetch_failed():
        """A resource that cannot be fetched raises FetchFailed."""
        harness, _ = _harness(FakeAdminApi())
        with pytest.raises(FetchFailed) as excinfo:
            harness.execute_and_verify("hello", "maxscale/nope")
        assert excinfo.value.resource_path == "maxscale/nope"
        assert "not found" in excinfo.value.reason

    @staticmethod
    def test_empty_resource_path_runs_nothing():
        """An empty resource path is refused before the command runs."""
        harness, calls = _harness()
        with pytest.raises(ValueError, match="resource_path must be a non-empty string"):
            harness.execute_and_verify("hello", "")
        assert calls == []


class TestClose:
    """Tests for releasing the harness client."""

    @staticmethod
    def test_close_closes_client():
        """close() closes the client used for fetches."""
        api = fake_with_logs("error")
        harness, _ = _harness(api)
        harness.close()
        assert api.closed is True

    @staticmethod
    def test_context_manager_closes_client_on_error():
        """Leaving the with-block closes the client even when a command fails."""
        api = fake_with_logs("error")
        harness, _ = _harness(api)
        with pytest.raises(CommandRejected):
            with harness as bound:
                assert bound is harness
                bound.execute_only("fail")
        assert api.closed is True


def test_outcomes_share_base_class():
    """Both failure outcomes can be caught as HarnessError."""
    assert issubclass(CommandRejected, HarnessError)
    assert issubclass(FetchFailed, HarnessError)
    assert str(CommandRejected("enable x", "bad")) == "Command 'enable x' rejected: bad"
    assert str(FetchFailed("maxscale/logs", "gone")) == (
        "Fetching 'maxscale/logs' failed: gone"
    )

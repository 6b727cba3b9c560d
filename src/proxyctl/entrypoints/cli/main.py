"""PROXYCTL CLI entry point.

Defines the top-level ``proxyctl`` command (via Click-Extra) and registers
subcommands exposed by the project.

Currently available groups
- ``proxyctl enable``  - enable runtime settings (``log-priority``).
- ``proxyctl disable`` - disable runtime settings (``log-priority``).

Notes
- The CLI version is sourced from `proxyctl.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Connection options (``--hosts``, ``--user``, ``--password``, ``--timeout``,
  ``--secure``) build the application container. In-process callers may pass
  a ready `AppContainer` as ``obj`` instead; it is then used unchanged.

Examples
    $ proxyctl --version
    $ proxyctl -u admin -p mariadb enable log-priority info
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from proxyctl import __version__, config
from proxyctl.bootstrap import AppContainer, bootstrap
from proxyctl.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .toggle import disable, enable

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """PROXYCTL command-line interface.

    PROXYCTL administers a running database-proxy instance through its REST
    control API. Commands are sent to every host given with --hosts, in order,
    and stop at the first host that fails.
    """


def _parse_hosts(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str,
) -> tuple[str, ...]:
    try:
        return config.parse_hosts(value)
    except config.InvalidSettingError as e:
        raise click.BadParameter(str(e)) from e


def _parse_timeout(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | int,
) -> int:
    try:
        return config.parse_timeout(value)
    except config.InvalidSettingError as e:
        raise click.BadParameter(str(e)) from e


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--hosts",
    "-H",
    "hosts",
    callback=_parse_hosts,
    default=",".join(config.DEFAULT_HOSTS),
    envvar=config.HOSTS_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Comma/space separated list of host:port pairs of REST control APIs.",
)
@click.option(
    "--user",
    "-u",
    default=config.DEFAULT_USER,
    envvar=config.USER_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Username for the REST control API.",
)
@click.option(
    "--password",
    "-p",
    default=config.DEFAULT_PASSWORD,
    envvar=config.PASSWORD_ENVVAR,
    show_envvar=True,
    help="Password for the REST control API.",
)
@click.option(
    "--timeout",
    "-t",
    "timeout_ms",
    callback=_parse_timeout,
    default=config.DEFAULT_TIMEOUT_MS,
    envvar=config.TIMEOUT_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Request timeout in milliseconds, applied to every round trip.",
)
@click.option(
    "--secure/--no-secure",
    default=False,
    envvar=config.SECURE_ENVVAR,
    show_envvar=True,
    help="Use HTTPS for requests to the REST control API.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("proxyctl", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PROXYCTL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PROXYCTL_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records (PROXYCTL_FLIGHT_RECORDER_CAPACITY) at DEBUG "
        "granularity, unaffected by -v/-q, and write them to --log-path when a "
        "WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=True,
    envvar="PROXYCTL_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit even without a WARNING.",
    default=False,
    envvar="PROXYCTL_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L httpx=INFO) or via "
        "PROXYCTL_LOGGER_LEVEL (comma/space list)."
    ),
    default=("httpx=WARNING", "httpcore=WARNING"),
    envvar="PROXYCTL_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def proxyctl(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    hosts: tuple[str, ...],
    user: str,
    password: str,
    timeout_ms: int,
    secure: bool,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PROXYCTL command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) application container, unless the caller supplied one
    if not isinstance(ctx.obj, AppContainer):
        settings = config.ConnectionSettings(
            hosts=hosts,
            user=user,
            password=password,
            timeout_ms=timeout_ms,
            secure=secure,
        )
        ctx.obj = bootstrap(settings)
        ctx.call_on_close(ctx.obj.close)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        hosts=tuple(api.host for api in ctx.obj.admin_apis),
    )

    # 6) shut logging down after the subcommand returns
    ctx.call_on_close(logging.shutdown)


proxyctl.add_command(enable)
proxyctl.add_command(disable)

"""QUITANDA CLI entry point.

Defines the top-level ``quitanda`` command (via Click-Extra). The root group
configures logging for every subcommand: Rich console output whose verbosity
follows ``-v``/``-q``, and a flight recorder that dumps recent DEBUG records to
``--log-path`` when a warning or error is logged.

Registered groups
- ``quitanda db``: forward-only database management (current/heads/upgrade/status).

Examples
    $ quitanda --version
    $ quitanda -vv db status
    $ quitanda -L sqlalchemy.engine=INFO db upgrade --force
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from quitanda import __version__
from quitanda.logging import (
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
)

from .db import db as db_group
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

HELP = """QUITANDA command-line interface.

    QUITANDA keeps the category catalog of a sales application: public and
    administrative listings, lookups, creation, updates and soft deletion.
    This tool manages its database and logging setup.
    """

BASE_LEVEL = logging.WARNING


def effective_level(verbose_count: int, quiet_count: int) -> int:
    """Shift WARNING one level per ``-v`` (down) or ``-q`` (up), clamped."""
    level = BASE_LEVEL - (10 * verbose_count) + (10 * quiet_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


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
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the console threshold (WARNING by default) one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the console threshold (WARNING by default) one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Debug mode: DEBUG console output with timestamps, logger names and paths.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder dumps to.",
    default=Path(user_log_dir("quitanda", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="QUITANDA_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="QUITANDA_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (independent of -v/-q) "
        "and write them to --log-path when a WARNING or ERROR is logged."
    ),
    default=True,
    envvar="QUITANDA_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="QUITANDA_FORCE_FLUSH_FLIGHT_RECORDER",
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
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to "
        "console and flight recorder alike. Repeatable (e.g. -L sqlalchemy=INFO) "
        "or via QUITANDA_LOGGER_LEVELS as a comma/space separated list."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="QUITANDA_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def quitanda(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """QUITANDA command-line interface."""
    level = effective_level(verbose_count, quiet_count)
    use_color = ctx.color is not False  # None or True => allow color

    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    configure_logging(handlers, logger_levels)

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
    )

    ctx.call_on_close(logging.shutdown)


quitanda.add_command(db_group)

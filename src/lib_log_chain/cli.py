"""Click command line interface for inspecting and trying the logging chain.

Commands
--------
``info``
    Print the package metadata banner (also the default without a command).
``levels``
    Show the severity table with ranks.
``threshold VALUE``
    Show which severities a threshold setting selects.
``logdemo``
    Log one message per severity through the console handler and print the
    resulting debug cache.

Global options ``--traceback/--no-traceback`` and ``--use-dotenv/--no-use-dotenv``
apply to every command. :func:`main` runs the group through
:func:`lib_cli_exit_tools.run_cli` and restores traceback preferences after
the run.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .application.use_cases.dump import dump_cache
from .domain.dump import DumpFormat
from .domain.levels import Severity
from .domain.thresholds import parse_threshold, resolve_threshold
from .errors import ConfigurationError
from .runtime import LoggerConfig, create_logger, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

DEMO_MESSAGES: dict[Severity, str] = {
    Severity.EMERGENCY: "{service} is unusable",
    Severity.ALERT: "database for {service} is unavailable",
    Severity.CRITICAL: "component {component} stopped responding",
    Severity.ERROR: "request {request_id} failed",
    Severity.WARNING: "deprecated call to {component}",
    Severity.NOTICE: "{service} restarted in {env}",
    Severity.INFO: "user {user} logged in",
    Severity.DEBUG: "cache {missing} lookup took 3 ms",
}
"""Sample messages emitted by ``logdemo``; ``{missing}`` shows unmatched tokens."""

DEMO_CONTEXT = {
    "service": "checkout",
    "component": "payments",
    "request_id": "req-42",
    "user": "alice",
}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also enabled by {log_config.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Leveled logging with placeholder interpolation and chained handlers."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """Show every severity with its threshold rank."""

    table = Table(title="Severities")
    table.add_column("Rank", justify="right")
    table.add_column("Severity")
    table.add_column("Python level")
    for severity in Severity:
        table.add_row(str(severity.rank), severity.label, str(severity.to_python_level()))
    Console(width=80).print(table)


@cli.command("threshold", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
def cli_threshold(value: str) -> None:
    """Show the severities selected by VALUE (``5`` or ``1,2,8``)."""

    try:
        selected = resolve_threshold(parse_threshold(value))
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), param_hint="VALUE") from exc
    for severity in sorted(selected, key=lambda level: level.rank):
        click.echo(f"{severity.rank} {severity.label}")
    if not selected:
        click.echo("(nothing is logged)")


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--threshold", "threshold", default="8", show_default=True, help="Ceiling or comma separated ranks.")
@click.option("--date-format", default="Y-m-d H:i:s", show_default=True, help="PHP-style date pattern.")
@click.option("--dump-format", type=click.Choice([fmt.value for fmt in DumpFormat]), default=DumpFormat.TEXT.value, show_default=True)
@click.option("--no-color", is_flag=True, default=False, help="Disable colours in console output.")
def cli_logdemo(threshold: str, date_format: str, dump_format: str, no_color: bool) -> None:
    """Log a sample message at every severity and dump the cache."""

    try:
        threshold_value = parse_threshold(threshold)
    except ConfigurationError as exc:
        raise click.BadParameter(str(exc), param_hint="--threshold") from exc

    console = Console(no_color=no_color, width=120)
    logger = create_logger(
        LoggerConfig(
            handlers={"console": {"console": console, "no_color": no_color}},
            threshold=threshold_value,
            date_format=date_format,
            debug=True,
        ),
    )

    emitted = sum(1 for severity, message in DEMO_MESSAGES.items() if logger.log(severity, message, DEMO_CONTEXT))
    click.echo(f"emitted {emitted} of {len(DEMO_MESSAGES)} messages")
    cache = logger.log_cache
    if cache is not None:
        click.echo(dump_cache(cache.snapshot(), dump_format=DumpFormat.from_name(dump_format)))


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so embedding applications keep their own settings.
    """

    previous = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous


__all__ = ["cli", "main"]

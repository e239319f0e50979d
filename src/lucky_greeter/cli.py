"""Click command line for ``lucky-greeter``.

Purpose
-------
Run the greeter from a shell. A bare invocation reads no arguments and prints
exactly the greeting (and lucky number, when enabled); the global options only
control ancillary concerns such as ``.env`` loading, diagnostics, and
tracebacks.

Contents
--------
* :func:`cli` - root group; runs :func:`greet` when no subcommand is given.
* :func:`greet`, :func:`info` - subcommands.
* :func:`main` - entry point that delegates exit-code handling to
  :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters import install_rich_logging
from .lucky_greeter import run as _run
from .lucky_greeter import summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before resolving features.",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Threshold for diagnostics written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, log_level: str) -> None:
    """Greet, then print a lucky number when the feature is enabled."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    install_rich_logging(log_level)

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        ctx.invoke(greet)


@cli.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
def greet() -> None:
    """Print the greeting line and, if enabled, the lucky number."""

    _run()


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print package metadata and the resolved features."""

    click.echo(summary_info(), nl=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards so
    embedding hosts keep their own settings.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "greet", "info", "main"]

# topmark:header:start
#
#   project      : APIStub
#   file         : main.py
#   file_relpath : src/apistub/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub Click entry point.

Group-level options are initialized once and placed into ``ctx.obj``. Running
``apistub`` with no subcommand performs a default ``build`` from the
well-known paths.
"""

from __future__ import annotations

import click

from apistub.cli.commands.build import build_command
from apistub.cli.commands.version import version_command
from apistub.cli.console import ClickConsole
from apistub.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color,
    resolve_verbosity,
)
from apistub.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, color, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color = resolve_color(no_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="APIStub: compile an API manifest into a bridged content script.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the APIStub CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given; running default build")
        ctx.invoke(build_command)


cli.add_command(build_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : APIStub
#   file         : cmd_common.py
#   file_relpath : src/apistub/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by commands: console lookup, effective
verbosity, and diagnostic reporting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apistub.cli.console import ClickConsole
from apistub.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apistub.core.diagnostics import Diagnostic


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if not isinstance(console, ClickConsole):
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` positive, ``-q`` negative, 0 default)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def echo_diagnostics(
    console: ClickConsole,
    diagnostics: Sequence[Diagnostic],
    *,
    verbosity: int,
) -> None:
    """Report diagnostics on stderr.

    Errors and warnings are shown unless ``-q``; info entries need ``-v``.
    """
    for diag in diagnostics:
        if diag.level is DiagnosticLevel.INFO and verbosity <= 0:
            continue
        if diag.level is not DiagnosticLevel.ERROR and verbosity < 0:
            continue
        console.warn(diag.render(color=False))

# topmark:header:start
#
#   project      : APIStub
#   file         : version.py
#   file_relpath : src/apistub/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub `version` command.

Prints the current APIStub version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from apistub.cli.cmd_common import get_console, get_effective_verbosity
from apistub.constants import APISTUB_VERSION


@click.command(
    name="version",
    help="Show the current version of APIStub.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of APIStub."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if as_json:
        console.print(json.dumps({"version": APISTUB_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("APIStub version:", bold=True, underline=True))
        console.print(f"    {console.styled(APISTUB_VERSION, bold=True)}")
    else:
        console.print(console.styled(APISTUB_VERSION, bold=True))

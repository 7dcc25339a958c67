# topmark:header:start
#
#   project      : APIStub
#   file         : build.py
#   file_relpath : src/apistub/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub `build` command.

Compiles the API manifest into the content script and writes it atomically.
This is also what a bare ``apistub`` invocation runs.

Input:
  - The JSON manifest (``definitions/stubs.json`` by default).
  - Auxiliary ``*.js`` fragments (``scripts/chrome-api-child/`` by default),
    appended in file-name order; hidden files are skipped.

Examples:
  Regenerate the script from the well-known paths:

    $ apistub

  Fail in CI when the committed script is stale, and show why:

    $ apistub build --check --diff

  Print the script instead of writing it:

    $ apistub build --stdout
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from apistub import api
from apistub.cli.cmd_common import echo_diagnostics, get_console, get_effective_verbosity
from apistub.cli.config_resolver import resolve_config_from_click
from apistub.cli.errors import ApistubUsageError, to_cli_error
from apistub.cli.exit_codes import ExitCode
from apistub.cli.options import common_source_options
from apistub.config.logging import get_logger
from apistub.core.errors import ApistubError
from apistub.utils.diff import render_patch, unified_diff
from apistub.utils.file import display_path
from apistub.writer import StdoutSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apistub.cli.console_api import ConsoleLike
    from apistub.config import Config

logger = get_logger(__name__)


def _print_diff(console: ConsoleLike, result: api.GenerationResult, *, color: bool) -> None:
    label = display_path(result.config.output_path, result.config.root)
    patch: list[str] = unified_diff(result.previous, result.text, path=label)
    if not patch:
        return
    if color:
        console.print(render_patch(patch), nl=False)
    else:
        console.print("".join(patch), nl=False)


@click.command(
    name="build",
    help="Generate the content script from the API manifest.",
)
@common_source_options
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the generated script instead of writing the output file.",
)
@click.option(
    "--check",
    "check_only",
    is_flag=True,
    default=False,
    help="Do not write; exit 2 if the output file is missing or out of date.",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    default=False,
    help="Show a unified diff between the output file and the generated script.",
)
def build_command(
    *,
    root: str | None = None,
    config_files: Sequence[str] = (),
    no_config: bool = False,
    manifest: str | None = None,
    fragments_dir: str | None = None,
    output: str | None = None,
    strict_identifiers: bool | None = None,
    to_stdout: bool = False,
    check_only: bool = False,
    show_diff: bool = False,
) -> None:
    """Generate the content script and write it (or check / print it)."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if to_stdout and (check_only or show_diff):
        raise ApistubUsageError("'--stdout' cannot be combined with '--check' or '--diff'.")

    # Only an explicit flag overrides the configured value
    if ctx.get_parameter_source("strict_identifiers") is not ParameterSource.COMMANDLINE:
        strict_identifiers = None

    config: Config = resolve_config_from_click(
        root=root,
        config_files=config_files,
        no_config=no_config,
        manifest=manifest,
        fragments_dir=fragments_dir,
        output=output,
        strict_identifiers=strict_identifiers,
    )

    try:
        if check_only:
            result = api.check(config)
        elif to_stdout:
            result = api.build(config, sink=StdoutSink(console.out))
        else:
            result = api.build(config, keep_previous=show_diff)
    except (ApistubError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Generation failed", exc_info=exc)
        raise to_cli_error(exc) from exc

    echo_diagnostics(console, result.diagnostics, verbosity=vlevel)

    if show_diff:
        _print_diff(console, result, color=console.enable_color)

    if to_stdout:
        return

    output_path = result.config.output_path
    if result.outcome is api.Outcome.WOULD_CHANGE:
        if vlevel >= 0:
            console.warn(f"{output_path} is out of date; run 'apistub build' to regenerate it.")
        ctx.exit(ExitCode.WOULD_CHANGE)

    if vlevel >= 0:
        if result.outcome is api.Outcome.UNCHANGED:
            console.print(console.styled(f"{output_path} is up to date.", fg="green"))
        else:
            console.print(
                console.styled(f"Wrote {output_path}", fg="green", bold=True)
                + f" ({len(result.manifest)} namespaces, {result.manifest.method_count} methods,"
                f" {len(result.fragments)} fragments)"
            )
    if vlevel > 0:
        for fragment in result.fragments:
            console.print(f"  + {fragment.name}")

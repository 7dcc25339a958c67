# topmark:header:start
#
#   project      : APIStub
#   file         : options.py
#   file_relpath : src/apistub/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config sources)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, ParamSpec, TypeVar

import click

from apistub.cli.errors import ApistubUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: Positive for verbose output, negative for quiet, 0 by default.

    Raises:
        ApistubUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ApistubUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def resolve_color(no_color: bool) -> bool:
    """Return whether to emit ANSI colors.

    Disabled by ``--no-color``, by the ``NO_COLOR`` environment variable, or when
    stdout is not a terminal.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in output.",
    )(f)
    return f


def common_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add project root, config file and input/output path overrides."""
    f = click.option(
        "--output",
        "output",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Generated script path (default: data/chrome-api-child.js).",
    )(f)
    f = click.option(
        "--fragments-dir",
        "fragments_dir",
        type=click.Path(file_okay=False, path_type=str),
        default=None,
        help="Directory of auxiliary script fragments (default: scripts/chrome-api-child).",
    )(f)
    f = click.option(
        "--manifest",
        "manifest",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="JSON API manifest (default: definitions/stubs.json).",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        multiple=True,
        help="Extra TOML config file(s), merged after apistub.toml / pyproject.toml.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore apistub.toml and [tool.apistub] in pyproject.toml.",
    )(f)
    f = click.option(
        "--root",
        "root",
        type=click.Path(exists=True, file_okay=False, path_type=str),
        default=None,
        help="Project root; relative config paths resolve against it (default: CWD).",
    )(f)
    f = click.option(
        "--strict-identifiers/--no-strict-identifiers",
        "strict_identifiers",
        default=None,
        help="Fail when two namespace paths flatten to the same identifier (default: on).",
    )(f)
    return f

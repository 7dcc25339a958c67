# topmark:header:start
#
#   project      : APIStub
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""CLI test helpers for running APIStub in a controlled working directory.

`run_cli_in()` changes the process working directory to the given project root
before invoking the Click CLI, so the well-known relative paths
(``definitions/stubs.json`` and friends) resolve inside the test project.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from apistub.cli.exit_codes import ExitCode
from apistub.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(root: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``root`` as the working directory.

    Args:
        root (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["build", "--check"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(project, ["build", "--check"])
        assert res.exit_code == ExitCode.WOULD_CHANGE
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(root)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that do not touch the file system (``--help``,
    ``version``) or when every path passed is absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click reports its own usage errors with code 2 as well; those carry an
    exception, a stale output file does not.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, (result.exit_code, result.output)

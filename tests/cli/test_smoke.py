# topmark:header:start
#
#   project      : APIStub
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Smoke tests for help and version output."""

from __future__ import annotations

import json

from apistub.constants import APISTUB_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
@parametrize("argv", [["--help"], ["-h"], ["build", "--help"], ["version", "--help"]])
def test_help(argv: list[str]) -> None:
    result = run_cli(argv)

    assert_SUCCESS(result)
    assert "Usage:" in result.output


@mark_cli
def test_build_help_lists_options() -> None:
    result = run_cli(["build", "--help"])

    for opt in ("--check", "--diff", "--stdout", "--manifest", "--strict-identifiers"):
        assert opt in result.output


@mark_cli
def test_version() -> None:
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == APISTUB_VERSION


@mark_cli
def test_version_json() -> None:
    result = run_cli(["version", "--json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": APISTUB_VERSION}

# topmark:header:start
#
#   project      : APIStub
#   file         : diff.py
#   file_relpath : src/apistub/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Unified diff generation and colorized preview for the generated script."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from apistub.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def unified_diff(old: str | None, new: str, *, path: str) -> list[str]:
    """Return the unified diff from ``old`` to ``new`` as lines (keepends).

    A missing old file (``None``) diffs as empty content.
    """
    patch = list(
        difflib.unified_diff(
            (old or "").splitlines(keepends=True),
            new.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (generated)",
        )
    )
    logger.debug("Diff for %s: %d lines", path, len(patch))
    # A final line without newline would run into the next hunk line
    return [line if line.endswith("\n") else f"{line}\n" for line in patch]


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)

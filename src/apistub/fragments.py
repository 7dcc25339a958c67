# topmark:header:start
#
#   project      : APIStub
#   file         : fragments.py
#   file_relpath : src/apistub/fragments.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Auxiliary script fragments appended after the generated blocks.

A fragment is any regular file in the fragment directory whose name ends with
the script extension and does not start with ``.`` (hidden files, editor swap
files). Fragments are returned in sorted name order so the output does not
depend on the order the OS lists directory entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apistub.config.logging import get_logger
from apistub.constants import DEFAULT_FRAGMENT_EXTENSION, HIDDEN_FILE_PREFIX

if TYPE_CHECKING:
    from pathlib import Path

    from apistub.config.logging import ApistubLogger

logger: ApistubLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Fragment:
    """A hand-written script fragment and its content."""

    path: Path
    text: str

    @property
    def name(self) -> str:
        """Return the fragment's file name."""
        return self.path.name


def is_fragment_name(name: str, extension: str = DEFAULT_FRAGMENT_EXTENSION) -> bool:
    """Return True if ``name`` is a visible file name carrying ``extension``."""
    return name.endswith(extension) and not name.startswith(HIDDEN_FILE_PREFIX)


def discover_fragments(
    directory: Path,
    *,
    extension: str = DEFAULT_FRAGMENT_EXTENSION,
) -> list[Path]:
    """Return fragment paths in ``directory``, sorted by file name.

    Raises:
        FileNotFoundError: If ``directory`` does not exist.
        NotADirectoryError: If ``directory`` is not a directory.
    """
    candidates = sorted(directory.iterdir(), key=lambda p: p.name)
    selected = [p for p in candidates if is_fragment_name(p.name, extension) and p.is_file()]
    logger.debug(
        "Fragments in %s: %s (skipped %d entries)",
        directory,
        [p.name for p in selected],
        len(candidates) - len(selected),
    )
    return selected


def read_fragments(
    directory: Path,
    *,
    extension: str = DEFAULT_FRAGMENT_EXTENSION,
) -> list[Fragment]:
    """Discover and read every fragment in ``directory`` (UTF-8, verbatim)."""
    fragments: list[Fragment] = []
    for path in discover_fragments(directory, extension=extension):
        # newline="" keeps the fragment's own line endings
        with path.open(encoding="utf-8", newline="") as fh:
            fragments.append(Fragment(path=path, text=fh.read()))
    return fragments

# topmark:header:start
#
#   project      : APIStub
#   file         : file.py
#   file_relpath : src/apistub/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Path helpers for user-facing messages."""

from pathlib import Path


def display_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form, or unchanged if outside it."""
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)

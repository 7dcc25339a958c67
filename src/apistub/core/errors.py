# topmark:header:start
#
#   project      : APIStub
#   file         : errors.py
#   file_relpath : src/apistub/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Library-level exceptions.

These carry no exit codes and no styling; the CLI maps them onto
`apistub.cli.errors` in one place.
"""

from __future__ import annotations

from collections.abc import Sequence


class ApistubError(Exception):
    """Base class for all APIStub library errors."""


class ConfigError(ApistubError):
    """Raised when an explicitly requested configuration source cannot be used."""


class ManifestError(ApistubError, ValueError):
    """Raised when the manifest is structurally unusable for generation."""


class IdentifierCollisionError(ApistubError):
    """Raised when two distinct namespace paths flatten to the same identifier.

    Attributes:
        identifier (str): The flattened identifier both paths produce.
        first (tuple[str, ...]): Segments of the path registered first, or a
            single ``<label>`` for a name the script binds or calls itself.
        second (tuple[str, ...]): Segments of the conflicting path.
    """

    def __init__(self, identifier: str, first: Sequence[str], second: Sequence[str]) -> None:
        self.identifier = identifier
        self.first = tuple(first)
        self.second = tuple(second)
        super().__init__(
            f"Namespace paths '{'.'.join(self.first)}' and '{'.'.join(self.second)}' "
            f"both flatten to identifier '{identifier}'"
        )

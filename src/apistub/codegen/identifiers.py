# topmark:header:start
#
#   project      : APIStub
#   file         : identifiers.py
#   file_relpath : src/apistub/codegen/identifiers.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Identifier flattening for namespace paths.

A namespace path such as ``experimental.devtools.audit`` is bound in the
generated script to a single variable, ``experimentaldevtoolsaudit``. Segments
listed in the reserved-name table are substituted first, so ``debugger``
becomes ``_debugger``. The substitution never affects the externally visible
property name, only the variable.

Plain concatenation is not injective (``a.bc`` and ``ab.c`` both give
``abc``), so `IdentifierRegistry` records which path owns each identifier and
reports collisions before anything is emitted.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from apistub.config.logging import get_logger
from apistub.constants import DEFAULT_RESERVED_NAMES
from apistub.core.errors import IdentifierCollisionError

logger = get_logger(__name__)


def flatten(
    segments: Sequence[str],
    index: int | None = None,
    reserved_names: Mapping[str, str] = DEFAULT_RESERVED_NAMES,
) -> str:
    """Concatenate path segments into a single identifier.

    Args:
        segments (Sequence[str]): Namespace path segments, root first.
        index (int | None): Last segment position to include; all segments when ``None``.
        reserved_names (Mapping[str, str]): Exact-match segment substitutions.

    Returns:
        str: The flattened identifier.

    Examples:
        >>> flatten(["devtools", "inspectedWindow"])
        'devtoolsinspectedWindow'
        >>> flatten(["devtools", "inspectedWindow"], 0)
        'devtools'
        >>> flatten(["debugger"])
        '_debugger'
    """
    stop = len(segments) if index is None else index + 1
    return "".join(reserved_names.get(segment, segment) for segment in segments[:stop])


class IdentifierRegistry:
    """Track which namespace path prefix owns each flattened identifier.

    Registering the same prefix twice is fine (shared ancestors are re-emitted
    for every namespace); registering a *different* prefix under an existing
    identifier is a collision.

    Args:
        reserved_names (Mapping[str, str]): Substitutions used for flattening.
        strict (bool): Raise on collision when True, log a warning otherwise.
    """

    def __init__(
        self,
        reserved_names: Mapping[str, str] = DEFAULT_RESERVED_NAMES,
        *,
        strict: bool = True,
    ) -> None:
        self.reserved_names = reserved_names
        self.strict = strict
        self._owners: dict[str, tuple[str, ...]] = {}
        self.collisions: list[IdentifierCollisionError] = []

    def reserve(self, identifier: str, label: str) -> None:
        """Claim ``identifier`` for a non-namespace binding (root object, counter)."""
        self._owners.setdefault(identifier, (f"<{label}>",))

    def register(self, segments: Sequence[str]) -> None:
        """Register every prefix of ``segments``.

        Raises:
            IdentifierCollisionError: In strict mode, if a prefix flattens to an
                identifier already owned by a different prefix.
        """
        path = tuple(segments)
        for depth in range(len(path)):
            prefix = path[: depth + 1]
            identifier = flatten(prefix, reserved_names=self.reserved_names)
            owner = self._owners.setdefault(identifier, prefix)
            if owner == prefix:
                continue
            error = IdentifierCollisionError(identifier, owner, prefix)
            if self.strict:
                raise error
            logger.warning("%s; the later binding overwrites the earlier one", error)
            self.collisions.append(error)

    def register_all(self, paths: Sequence[Sequence[str]]) -> None:
        """Register several namespace paths in order."""
        for segments in paths:
            self.register(segments)

    def owner_of(self, identifier: str) -> tuple[str, ...] | None:
        """Return the path prefix that first claimed ``identifier``."""
        return self._owners.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._owners

    def __len__(self) -> int:
        return len(self._owners)

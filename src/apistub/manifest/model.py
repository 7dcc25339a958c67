# topmark:header:start
#
#   project      : APIStub
#   file         : model.py
#   file_relpath : src/apistub/manifest/model.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Immutable manifest records.

A `Manifest` is an ordered tuple of `NamespaceDefinition` records; the order is
the order of the keys in the source document and drives emission order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class MethodDefinition:
    """A method exposed under a namespace.

    Attributes:
        name (str): Method name, unique within its namespace.
        success_callback_index (int | None): Position of the success callback argument.
        failure_callback_index (int | None): Position of the failure callback argument.
    """

    name: str
    success_callback_index: int | None = None
    failure_callback_index: int | None = None


@dataclass(frozen=True, slots=True)
class NamespaceDefinition:
    """A namespace path and the methods declared on it."""

    path: str
    functions: tuple[MethodDefinition, ...] = ()

    @property
    def segments(self) -> tuple[str, ...]:
        """Return the dot-separated path segments, root first."""
        return tuple(self.path.split("."))

    @property
    def depth(self) -> int:
        """Return the number of path segments."""
        return len(self.segments)


@dataclass(frozen=True, slots=True)
class Manifest:
    """Ordered collection of namespace definitions."""

    namespaces: tuple[NamespaceDefinition, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[NamespaceDefinition]:
        return iter(self.namespaces)

    def __len__(self) -> int:
        return len(self.namespaces)

    @property
    def method_count(self) -> int:
        """Return the total number of methods across all namespaces."""
        return sum(len(ns.functions) for ns in self.namespaces)

# topmark:header:start
#
#   project      : APIStub
#   file         : namespaces.py
#   file_relpath : src/apistub/codegen/namespaces.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Namespace object emission.

For ``devtools.inspectedWindow`` under root ``chrome`` this yields::

    var devtools = createObjectIn(chrome, { defineAs: "devtools" });
    var devtoolsinspectedWindow = createObjectIn(devtools, { defineAs: "inspectedWindow" });

Every ancestor is emitted before its child, so a namespace block is
self-contained regardless of manifest key order. Shared ancestors are emitted
again for each namespace; ``createObjectIn`` must tolerate re-creation.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from apistub.codegen.identifiers import flatten
from apistub.constants import CREATE_OBJECT_FN, DEFAULT_RESERVED_NAMES, DEFAULT_ROOT_OBJECT


def create_object_statement(identifier: str, owner: str, name: str) -> str:
    """Return one ``createObjectIn`` declaration, newline-terminated."""
    return f"var {identifier} = {CREATE_OBJECT_FN}({owner}, {{ defineAs: {json.dumps(name)} }});\n"


def emit_namespace_objects(
    segments: Sequence[str],
    *,
    root: str = DEFAULT_ROOT_OBJECT,
    reserved_names: Mapping[str, str] = DEFAULT_RESERVED_NAMES,
) -> list[str]:
    """Return one object-creation statement per path segment, root first.

    Args:
        segments (Sequence[str]): Namespace path segments.
        root (str): Identifier of the root object owning depth 0.
        reserved_names (Mapping[str, str]): Substitutions applied to identifiers only.

    Returns:
        list[str]: ``len(segments)`` statements in ascending depth order.
    """
    statements: list[str] = []
    for depth, name in enumerate(segments):
        identifier = flatten(segments, depth, reserved_names)
        owner = root if depth == 0 else flatten(segments, depth - 1, reserved_names)
        statements.append(create_object_statement(identifier, owner, name))
    return statements

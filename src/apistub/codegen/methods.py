# topmark:header:start
#
#   project      : APIStub
#   file         : methods.py
#   file_relpath : src/apistub/codegen/methods.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Method proxy emission.

Each method becomes a bridge call partially applied to its routing metadata
and exported under the namespace object::

    exportFunction(chromeAPIBridge.bind(null,{...}),tabs,{ defineAs:"create"});

Calling the exported ``create(a0, ..., aK)`` therefore invokes
``chromeAPIBridge(metadata, a0, ..., aK)``. The metadata record always has the
four keys ``namespace``, ``method``, ``success``, ``failure`` in that order;
absent callback indices are serialized as ``null``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from apistub.codegen.identifiers import flatten
from apistub.constants import DEFAULT_BRIDGE, DEFAULT_RESERVED_NAMES, EXPORT_FUNCTION_FN
from apistub.manifest.model import MethodDefinition, NamespaceDefinition


def method_metadata(namespace: str, method: MethodDefinition) -> dict[str, Any]:
    """Return the routing record forwarded as the bridge's first argument."""
    return {
        "namespace": namespace,
        "method": method.name,
        "success": method.success_callback_index,
        "failure": method.failure_callback_index,
    }


def encode_metadata(metadata: Mapping[str, Any]) -> str:
    """Serialize a metadata record as a compact object literal."""
    return json.dumps(metadata, separators=(",", ":"))


def proxy_binding_statement(
    metadata: Mapping[str, Any],
    owner: str,
    name: str,
    *,
    bridge: str = DEFAULT_BRIDGE,
) -> str:
    """Return one ``exportFunction`` statement, newline-terminated."""
    return (
        f"{EXPORT_FUNCTION_FN}({bridge}.bind(null,{encode_metadata(metadata)}),"
        f"{owner},{{ defineAs:{json.dumps(name)}}});\n"
    )


def emit_method_bindings(
    namespace: NamespaceDefinition,
    *,
    bridge: str = DEFAULT_BRIDGE,
    reserved_names: Mapping[str, str] = DEFAULT_RESERVED_NAMES,
) -> list[str]:
    """Return one proxy-binding statement per method, in declaration order.

    The owner is the namespace's flattened identifier; the exposed name is the
    raw method name.
    """
    owner = flatten(namespace.segments, reserved_names=reserved_names)
    return [
        proxy_binding_statement(
            method_metadata(namespace.path, method), owner, method.name, bridge=bridge
        )
        for method in namespace.functions
    ]

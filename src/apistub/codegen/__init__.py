# topmark:header:start
#
#   project      : APIStub
#   file         : __init__.py
#   file_relpath : src/apistub/codegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Manifest-to-statement compiler.

- `identifiers`: flatten namespace paths into single identifiers.
- `namespaces`: emit the object-creation statements for a namespace path.
- `methods`: emit the bridge-bound proxy for every method.
- `assembler`: concatenate header, bootstrap, blocks and fragments.
"""

from __future__ import annotations

from apistub.codegen.assembler import assemble, emit_bootstrap, emit_namespace_block
from apistub.codegen.identifiers import IdentifierRegistry, flatten
from apistub.codegen.methods import emit_method_bindings, method_metadata
from apistub.codegen.namespaces import emit_namespace_objects

__all__ = [
    "IdentifierRegistry",
    "assemble",
    "emit_bootstrap",
    "emit_method_bindings",
    "emit_namespace_block",
    "emit_namespace_objects",
    "flatten",
    "method_metadata",
]

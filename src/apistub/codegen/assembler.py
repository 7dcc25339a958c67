# topmark:header:start
#
#   project      : APIStub
#   file         : assembler.py
#   file_relpath : src/apistub/codegen/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Assemble the generated content script.

Output order:
    1. generated-file header comment;
    2. root object bootstrap and request counter;
    3. for each namespace in manifest order: its object statements, then its
       method proxies;
    4. auxiliary fragments, verbatim, in the order given.

Assembly is pure: it performs no I/O and returns the full text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apistub.codegen.identifiers import IdentifierRegistry
from apistub.codegen.methods import emit_method_bindings
from apistub.codegen.namespaces import create_object_statement, emit_namespace_objects
from apistub.config.logging import get_logger
from apistub.constants import CREATE_OBJECT_FN, EXPORT_FUNCTION_FN, GENERATED_HEADER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apistub.config import Config
    from apistub.fragments import Fragment
    from apistub.manifest.model import Manifest, NamespaceDefinition

logger = get_logger(__name__)


def emit_bootstrap(config: Config) -> list[str]:
    """Return the root object creation and the counter declaration."""
    return [
        create_object_statement(config.root_object, config.global_object, config.root_object),
        f"var {config.counter} = 0;\n",
    ]


def emit_namespace_block(namespace: NamespaceDefinition, config: Config) -> list[str]:
    """Return the object statements followed by the method proxies of one namespace."""
    statements = emit_namespace_objects(
        namespace.segments,
        root=config.root_object,
        reserved_names=config.reserved_names,
    )
    statements.extend(
        emit_method_bindings(
            namespace,
            bridge=config.bridge,
            reserved_names=config.reserved_names,
        )
    )
    logger.trace("%s: %d statements", namespace.path, len(statements))
    return statements


def check_identifiers(manifest: Manifest, config: Config) -> IdentifierRegistry:
    """Register every namespace prefix and return the registry.

    Raises:
        IdentifierCollisionError: If ``config.strict_identifiers`` is set and two
            distinct paths flatten alike, or a path flattens to a name the
            script itself binds or calls.
    """
    registry = IdentifierRegistry(config.reserved_names, strict=config.strict_identifiers)
    # A namespace variable named like any of these would shadow it (var hoisting)
    registry.reserve(config.root_object, "root object")
    registry.reserve(config.counter, "request counter")
    registry.reserve(config.global_object, "global object")
    registry.reserve(config.bridge, "bridge")
    registry.reserve(CREATE_OBJECT_FN, "intrinsic")
    registry.reserve(EXPORT_FUNCTION_FN, "intrinsic")
    registry.register_all([ns.segments for ns in manifest])
    logger.debug("Registered %d identifiers", len(registry))
    return registry


def assemble(
    manifest: Manifest,
    fragments: Sequence[Fragment],
    *,
    config: Config,
) -> str:
    """Return the complete generated script.

    Args:
        manifest (Manifest): Namespaces in emission order.
        fragments (Sequence[Fragment]): Auxiliary scripts appended verbatim.
        config (Config): Emission names and reserved-name table.

    Returns:
        str: The script text.

    Raises:
        IdentifierCollisionError: See `check_identifiers`.
    """
    check_identifiers(manifest, config)

    parts: list[str] = [GENERATED_HEADER]
    parts.extend(emit_bootstrap(config))
    for namespace in manifest:
        parts.extend(emit_namespace_block(namespace, config))
    parts.extend(fragment.text for fragment in fragments)
    return "".join(parts)

# topmark:header:start
#
#   project      : APIStub
#   file         : loader.py
#   file_relpath : src/apistub/manifest/loader.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Load the JSON API manifest into immutable records.

The manifest maps dotted namespace paths to ``{"functions": [...]}`` objects.
Only the structure the generator relies on is checked here:

- the document and every namespace entry are JSON objects;
- namespace paths are non-empty and have no empty segments;
- ``functions`` is a list (a missing or ``null`` value means "no methods");
- every method entry is an object with a non-empty string ``name``.

Callback indices are forwarded verbatim and never checked against an arity.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from apistub.config.logging import get_logger
from apistub.core.diagnostics import DiagnosticLog
from apistub.core.errors import ManifestError
from apistub.manifest.model import Manifest, MethodDefinition, NamespaceDefinition

if TYPE_CHECKING:
    from pathlib import Path

    from apistub.config.logging import ApistubLogger

logger: ApistubLogger = get_logger(__name__)

KEY_FUNCTIONS = "functions"
KEY_NAME = "name"
KEY_SUCCESS_INDEX = "successCallbackIndex"
KEY_FAILURE_INDEX = "failureCallbackIndex"


def _parse_method(namespace: str, position: int, raw: Any) -> MethodDefinition:
    if not isinstance(raw, Mapping):
        raise ManifestError(
            f"{namespace}: functions[{position}] must be an object, got {type(raw).__name__}"
        )
    name: Any = raw.get(KEY_NAME)
    if not isinstance(name, str) or not name:
        raise ManifestError(f"{namespace}: functions[{position}] has no valid '{KEY_NAME}'")
    return MethodDefinition(
        name=name,
        success_callback_index=raw.get(KEY_SUCCESS_INDEX),
        failure_callback_index=raw.get(KEY_FAILURE_INDEX),
    )


def _parse_namespace(path: str, raw: Any, diagnostics: DiagnosticLog) -> NamespaceDefinition:
    if not path or any(not segment for segment in path.split(".")):
        raise ManifestError(f"Invalid namespace path {path!r}: empty path segment")
    if not isinstance(raw, Mapping):
        raise ManifestError(f"{path}: namespace entry must be an object, got {type(raw).__name__}")

    functions_raw: Any = raw.get(KEY_FUNCTIONS)
    if functions_raw is None:
        logger.debug("Namespace %s declares no '%s'", path, KEY_FUNCTIONS)
        diagnostics.add_info(f"{path}: no '{KEY_FUNCTIONS}' declared; no methods emitted")
        return NamespaceDefinition(path=path)
    if not isinstance(functions_raw, list):
        raise ManifestError(f"{path}: '{KEY_FUNCTIONS}' must be a list")

    methods: list[MethodDefinition] = []
    seen: set[str] = set()
    for position, entry in enumerate(functions_raw):
        method = _parse_method(path, position, entry)
        if method.name in seen:
            logger.warning("Duplicate method %s.%s", path, method.name)
            diagnostics.add_warning(f"{path}: method '{method.name}' is declared more than once")
        seen.add(method.name)
        methods.append(method)
    return NamespaceDefinition(path=path, functions=tuple(methods))


def parse_manifest(data: Any, diagnostics: DiagnosticLog | None = None) -> Manifest:
    """Convert a decoded manifest document into a `Manifest`.

    Args:
        data (Any): The decoded JSON document (a mapping in insertion order).
        diagnostics (DiagnosticLog | None): Optional log receiving non-fatal findings.

    Returns:
        Manifest: Namespace records in document order.

    Raises:
        ManifestError: If the document structure cannot be generated from.
    """
    diags = diagnostics if diagnostics is not None else DiagnosticLog()
    if not isinstance(data, Mapping):
        raise ManifestError(f"Manifest must be a JSON object, got {type(data).__name__}")

    namespaces = tuple(_parse_namespace(str(path), raw, diags) for path, raw in data.items())
    manifest = Manifest(namespaces=namespaces)
    logger.info(
        "Parsed manifest: %d namespaces, %d methods", len(manifest), manifest.method_count
    )
    return manifest


def _pairs_hook(diagnostics: DiagnosticLog) -> Any:
    def hook(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in pairs:
            if key in result:
                logger.warning("Duplicate JSON key %r; the last value wins", key)
                diagnostics.add_warning(f"Duplicate key '{key}' in manifest; the last value wins")
            result[key] = value
        return result

    return hook


def loads_manifest(text: str, diagnostics: DiagnosticLog | None = None) -> Manifest:
    """Parse manifest JSON text.

    Raises:
        ManifestError: If ``text`` is not valid JSON or has an unusable structure.
    """
    diags = diagnostics if diagnostics is not None else DiagnosticLog()
    try:
        data: Any = json.loads(text, object_pairs_hook=_pairs_hook(diags))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest is not valid JSON: {exc}") from exc
    return parse_manifest(data, diags)


def load_manifest(path: Path, diagnostics: DiagnosticLog | None = None) -> Manifest:
    """Read and parse the manifest at ``path``.

    Raises:
        OSError: If the file cannot be read.
        ManifestError: If the content is not a usable manifest.
    """
    logger.debug("Loading manifest from %s", path)
    text: str = path.read_text(encoding="utf-8")
    try:
        return loads_manifest(text, diagnostics)
    except ManifestError as exc:
        raise ManifestError(f"{path}: {exc}") from exc

# topmark:header:start
#
#   project      : APIStub
#   file         : __init__.py
#   file_relpath : src/apistub/manifest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Manifest model and loader."""

from __future__ import annotations

from apistub.manifest.loader import load_manifest, parse_manifest
from apistub.manifest.model import Manifest, MethodDefinition, NamespaceDefinition

__all__ = [
    "Manifest",
    "MethodDefinition",
    "NamespaceDefinition",
    "load_manifest",
    "parse_manifest",
]

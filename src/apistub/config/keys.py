# topmark:header:start
#
#   project      : APIStub
#   file         : keys.py
#   file_relpath : src/apistub/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Canonical TOML section and key names for APIStub configuration.

These constants are the external configuration API, as it appears in
``apistub.toml`` and in ``[tool.apistub]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by APIStub configuration."""

    # Top-level paths and switches
    KEY_MANIFEST: Final[str] = "manifest"
    KEY_FRAGMENTS_DIR: Final[str] = "fragments_dir"
    KEY_OUTPUT: Final[str] = "output"
    KEY_FRAGMENT_EXTENSION: Final[str] = "fragment_extension"
    KEY_STRICT_IDENTIFIERS: Final[str] = "strict_identifiers"

    # [emit]
    SECTION_EMIT: Final[str] = "emit"

    KEY_ROOT_OBJECT: Final[str] = "root_object"
    KEY_GLOBAL_OBJECT: Final[str] = "global_object"
    KEY_BRIDGE: Final[str] = "bridge"
    KEY_COUNTER: Final[str] = "counter"

    # [reserved_names] (arbitrary segment -> identifier fragment pairs)
    SECTION_RESERVED_NAMES: Final[str] = "reserved_names"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_MANIFEST,
            KEY_FRAGMENTS_DIR,
            KEY_OUTPUT,
            KEY_FRAGMENT_EXTENSION,
            KEY_STRICT_IDENTIFIERS,
            SECTION_EMIT,
            SECTION_RESERVED_NAMES,
        }
    )

    ALLOWED_EMIT_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT_OBJECT,
            KEY_GLOBAL_OBJECT,
            KEY_BRIDGE,
            KEY_COUNTER,
        }
    )


class ArgKey:
    """Keys of the CLI/API override mapping accepted by `MutableConfig.apply_args`."""

    MANIFEST: Final[str] = "manifest"
    FRAGMENTS_DIR: Final[str] = "fragments_dir"
    OUTPUT: Final[str] = "output"
    STRICT_IDENTIFIERS: Final[str] = "strict_identifiers"

# topmark:header:start
#
#   project      : APIStub
#   file         : io.py
#   file_relpath : src/apistub/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading APIStub configuration from
``apistub.toml`` and from ``[tool.apistub]`` in ``pyproject.toml``, plus small
typed getters that report malformed values as diagnostics instead of raising.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from apistub.config.logging import get_logger
from apistub.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from apistub.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from apistub.config.logging import ApistubLogger
    from apistub.core.diagnostics import DiagnosticLog

TomlTable = dict[str, Any]

logger: ApistubLogger = get_logger(__name__)


# --- Type guards ---


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(obj, dict)


# --- Checked getters ---


def get_table_value(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict when absent or malformed."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if is_toml_table(value):
        return value
    loc = f"{where}.{key}"
    logger.warning("Expected table in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected table in {loc}, got {type(value).__name__}: {value}")
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc = f"{where}.{key}"
    logger.warning("Expected boolean in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected boolean in {loc}, got {type(value).__name__}: {value}")
    return None


def get_string_map_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> dict[str, str]:
    """Return a ``str -> str`` sub-table, dropping (and reporting) non-string values."""
    result: dict[str, str] = {}
    for k, v in get_table_value(table, key, where=where, diagnostics=diagnostics).items():
        if isinstance(v, str) and v:
            result[k] = v
            continue
        loc = f"{where}.{key}.{k}"
        logger.warning("Expected non-empty string in %s, got %r", loc, v)
        diagnostics.add_warning(f"Expected non-empty string in {loc}, got {v!r}")
    return result


# --- TOML file I/O ---


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        TomlkitParseError: If ``text`` is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``apistub.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        return parse_toml_text(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_config_table(path: Path) -> TomlTable:
    """Return the APIStub settings table from a config file.

    For ``pyproject.toml`` this is the ``[tool.apistub]`` table (empty when
    absent); for any other file it is the whole document.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION, {}) if is_toml_table(tool) else {}
    if not is_toml_table(section):
        logger.warning("[tool.%s] in %s is not a table; ignored", PYPROJECT_TOOL_SECTION, path)
        return {}
    return section

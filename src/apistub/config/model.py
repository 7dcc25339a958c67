# topmark:header:start
#
#   project      : APIStub
#   file         : model.py
#   file_relpath : src/apistub/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the generator.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.apistub]`` in ``<root>/pyproject.toml``
    3) ``<root>/apistub.toml``
    4) An explicit ``--config`` file
    5) CLI / API overrides (`MutableConfig.apply_args`)

Path semantics:
    Relative paths (manifest, fragments directory, output) are kept as
    declared and resolved against the project ``root`` on freeze.

Reserved names:
    The reserved-name table is merged key-wise over the built-in defaults, so
    a config file can add substitutions without repeating ``debugger``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from apistub.config.io import (
    get_bool_value_or_none_checked,
    get_string_map_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_config_table,
)
from apistub.config.keys import ArgKey, Toml
from apistub.config.logging import get_logger
from apistub.constants import (
    APISTUB_TOML_NAME,
    DEFAULT_BRIDGE,
    DEFAULT_COUNTER,
    DEFAULT_FRAGMENT_EXTENSION,
    DEFAULT_FRAGMENTS_DIR,
    DEFAULT_GLOBAL_OBJECT,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_RESERVED_NAMES,
    DEFAULT_ROOT_OBJECT,
    PYPROJECT_TOML_NAME,
)
from apistub.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from apistub.config.io import TomlTable
    from apistub.config.logging import ApistubLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: ApistubLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for APIStub.

    Attributes:
        root (Path): Absolute project root; relative paths resolve against it.
        manifest_path (Path): Absolute path of the JSON manifest.
        fragments_dir (Path): Absolute path of the auxiliary fragment directory.
        output_path (Path): Absolute path of the generated script.
        fragment_extension (str): File-name suffix a fragment must carry.
        strict_identifiers (bool): Fail fast on flattened-identifier collisions.
        root_object (str): Name of the generated root namespace object.
        global_object (str): Owner of the root object in the target runtime.
        bridge (str): Bridge entry point every method proxy forwards to.
        counter (str): Name of the request counter declared after the bootstrap.
        reserved_names (Mapping[str, str]): Segment → identifier substitutions.
        config_files (tuple[Path | str, ...]): Config sources merged, in order.
        diagnostics (tuple[Diagnostic, ...]): Findings collected while loading.
    """

    root: Path
    manifest_path: Path
    fragments_dir: Path
    output_path: Path
    fragment_extension: str
    strict_identifiers: bool

    root_object: str
    global_object: str
    bridge: str
    counter: str

    reserved_names: Mapping[str, str]

    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict (export only)."""
        return {
            Toml.KEY_MANIFEST: str(self.manifest_path),
            Toml.KEY_FRAGMENTS_DIR: str(self.fragments_dir),
            Toml.KEY_OUTPUT: str(self.output_path),
            Toml.KEY_FRAGMENT_EXTENSION: self.fragment_extension,
            Toml.KEY_STRICT_IDENTIFIERS: self.strict_identifiers,
            Toml.SECTION_EMIT: {
                Toml.KEY_ROOT_OBJECT: self.root_object,
                Toml.KEY_GLOBAL_OBJECT: self.global_object,
                Toml.KEY_BRIDGE: self.bridge,
                Toml.KEY_COUNTER: self.counter,
            },
            Toml.SECTION_RESERVED_NAMES: dict(self.reserved_names),
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            root=self.root,
            manifest=str(self.manifest_path),
            fragments_dir=str(self.fragments_dir),
            output=str(self.output_path),
            fragment_extension=self.fragment_extension,
            strict_identifiers=self.strict_identifiers,
            root_object=self.root_object,
            global_object=self.global_object,
            bridge=self.bridge,
            counter=self.counter,
            reserved_names=dict(self.reserved_names),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left at ``None`` are "unset" and inherit from the layer below when
    merged; `freeze` fills any remaining gaps with the built-in defaults.
    """

    root: Path | None = None
    manifest: str | None = None
    fragments_dir: str | None = None
    output: str | None = None
    fragment_extension: str | None = None
    strict_identifiers: bool | None = None

    root_object: str | None = None
    global_object: str | None = None
    bridge: str | None = None
    counter: str | None = None

    reserved_names: dict[str, str] = field(default_factory=lambda: {})

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ------------------------------ Builders ------------------------------

    @classmethod
    def from_defaults(cls, root: Path | None = None) -> MutableConfig:
        """Return a draft holding the built-in defaults.

        Args:
            root (Path | None): Project root; defaults to the current directory.
        """
        return cls(
            root=(root or Path.cwd()).resolve(),
            manifest=DEFAULT_MANIFEST_PATH,
            fragments_dir=DEFAULT_FRAGMENTS_DIR,
            output=DEFAULT_OUTPUT_PATH,
            fragment_extension=DEFAULT_FRAGMENT_EXTENSION,
            strict_identifiers=True,
            root_object=DEFAULT_ROOT_OBJECT,
            global_object=DEFAULT_GLOBAL_OBJECT,
            bridge=DEFAULT_BRIDGE,
            counter=DEFAULT_COUNTER,
            reserved_names=dict(DEFAULT_RESERVED_NAMES),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | str = "<dict>") -> MutableConfig:
        """Build a partial draft from an APIStub settings table.

        Unknown keys and malformed values are reported as warnings and ignored.

        Args:
            data (TomlTable): The ``[tool.apistub]`` table or ``apistub.toml`` document.
            source (Path | str): Where ``data`` came from (for provenance and messages).

        Returns:
            MutableConfig: A draft with only the keys present in ``data`` set.
        """
        diags = DiagnosticLog()
        where = str(source)

        for key in data:
            if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
                logger.warning("Unknown config key '%s' in %s", key, where)
                diags.add_warning(f"Unknown config key '{key}' in {where}")

        emit: TomlTable = get_table_value(data, Toml.SECTION_EMIT, where=where, diagnostics=diags)
        for key in emit:
            if key not in Toml.ALLOWED_EMIT_KEYS:
                logger.warning("Unknown config key '%s.%s' in %s", Toml.SECTION_EMIT, key, where)
                diags.add_warning(f"Unknown config key '{Toml.SECTION_EMIT}.{key}' in {where}")
        emit_where = f"{where}:{Toml.SECTION_EMIT}"

        def _str(table: TomlTable, key: str, loc: str) -> str | None:
            return get_string_value_or_none_checked(table, key, where=loc, diagnostics=diags)

        draft = cls(
            manifest=_str(data, Toml.KEY_MANIFEST, where),
            fragments_dir=_str(data, Toml.KEY_FRAGMENTS_DIR, where),
            output=_str(data, Toml.KEY_OUTPUT, where),
            fragment_extension=_str(data, Toml.KEY_FRAGMENT_EXTENSION, where),
            strict_identifiers=get_bool_value_or_none_checked(
                data, Toml.KEY_STRICT_IDENTIFIERS, where=where, diagnostics=diags
            ),
            root_object=_str(emit, Toml.KEY_ROOT_OBJECT, emit_where),
            global_object=_str(emit, Toml.KEY_GLOBAL_OBJECT, emit_where),
            bridge=_str(emit, Toml.KEY_BRIDGE, emit_where),
            counter=_str(emit, Toml.KEY_COUNTER, emit_where),
            reserved_names=get_string_map_checked(
                data, Toml.SECTION_RESERVED_NAMES, where=where, diagnostics=diags
            ),
            config_files=[source],
            diagnostics=diags,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig:
        """Load a draft from ``apistub.toml``, ``pyproject.toml`` or an explicit file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config from %s", path)
        return cls.from_toml_dict(load_config_table(path), source=path)

    @classmethod
    def discover_config_files(cls, root: Path) -> list[Path]:
        """Return project config files under ``root``, lowest precedence first."""
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, APISTUB_TOML_NAME):
            candidate = root / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", root, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            root (Path | None): Project root; defaults to the current directory.
            extra_config_files (list[Path] | None): Explicit files merged after discovery.
            no_config (bool): If True, skip discovery of project config files.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen.
        """
        draft: MutableConfig = cls.from_defaults(root)
        assert draft.root is not None

        if not no_config:
            for cfg_path in cls.discover_config_files(draft.root):
                draft = draft.merge_with(cls.from_toml_file(cfg_path))

        for extra in extra_config_files or []:
            draft = draft.merge_with(cls.from_toml_file(Path(extra)))

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Scalars are last-wins when set; ``reserved_names`` merges key-wise.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        diagnostics = DiagnosticLog.from_iterable(self.diagnostics.items)
        diagnostics.extend(other.diagnostics.items)

        return MutableConfig(
            root=pick(self.root, other.root),
            manifest=pick(self.manifest, other.manifest),
            fragments_dir=pick(self.fragments_dir, other.fragments_dir),
            output=pick(self.output, other.output),
            fragment_extension=pick(self.fragment_extension, other.fragment_extension),
            strict_identifiers=pick(self.strict_identifiers, other.strict_identifiers),
            root_object=pick(self.root_object, other.root_object),
            global_object=pick(self.global_object, other.global_object),
            bridge=pick(self.bridge, other.bridge),
            counter=pick(self.counter, other.counter),
            reserved_names={**self.reserved_names, **other.reserved_names},
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys present with a non-``None`` value override the draft; path
        values given on the command line are anchored to the current directory.

        Args:
            args (ArgsLike): Parsed arguments mapping (see `apistub.config.keys.ArgKey`).

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        applied = False

        for key in (ArgKey.MANIFEST, ArgKey.FRAGMENTS_DIR, ArgKey.OUTPUT):
            raw = args.get(key)
            if raw is None:
                continue
            setattr(self, key, str(Path(raw).resolve()))
            applied = True

        strict = args.get(ArgKey.STRICT_IDENTIFIERS)
        if strict is not None:
            self.strict_identifiers = bool(strict)
            applied = True

        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self

    # ------------------------------- Freezing -------------------------------

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset fields with defaults."""
        defaults = MutableConfig.from_defaults(self.root)
        merged = defaults.merge_with(self)
        root: Path = (merged.root or Path.cwd()).resolve()

        def resolve(raw: str | None, fallback: str) -> Path:
            p = Path(raw or fallback)
            return p if p.is_absolute() else (root / p).resolve()

        return Config(
            root=root,
            manifest_path=resolve(merged.manifest, DEFAULT_MANIFEST_PATH),
            fragments_dir=resolve(merged.fragments_dir, DEFAULT_FRAGMENTS_DIR),
            output_path=resolve(merged.output, DEFAULT_OUTPUT_PATH),
            fragment_extension=merged.fragment_extension or DEFAULT_FRAGMENT_EXTENSION,
            strict_identifiers=bool(merged.strict_identifiers),
            root_object=merged.root_object or DEFAULT_ROOT_OBJECT,
            global_object=merged.global_object or DEFAULT_GLOBAL_OBJECT,
            bridge=merged.bridge or DEFAULT_BRIDGE,
            counter=merged.counter or DEFAULT_COUNTER,
            reserved_names=MappingProxyType(dict(merged.reserved_names)),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

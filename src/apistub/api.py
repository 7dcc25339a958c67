# topmark:header:start
#
#   project      : APIStub
#   file         : api.py
#   file_relpath : src/apistub/api.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Public APIStub API (stable surface).

Thin, typed entry points for running the generator without the CLI:

- `generate`: read the manifest and fragments, return the script text.
- `build`: `generate`, then commit the text to the output file atomically.
- `check`: `generate`, then compare with the output file without writing.

Every function accepts either a frozen `apistub.config.Config`, a plain
mapping mirroring the TOML shape (merged over discovered config), or ``None``
(discovered config for the current directory).

Errors propagate: `OSError` for file-system failures, `ManifestError` for an
unusable manifest, `IdentifierCollisionError` for colliding identifiers. No
output is written unless generation completed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from apistub.codegen.assembler import assemble
from apistub.config.logging import get_logger
from apistub.config.model import Config, MutableConfig
from apistub.constants import APISTUB_VERSION
from apistub.core.diagnostics import Diagnostic, DiagnosticLog
from apistub.fragments import Fragment, read_fragments
from apistub.manifest.loader import load_manifest
from apistub.writer import FileSystemSink, WriteStatus, read_existing

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from apistub.config.logging import ApistubLogger
    from apistub.manifest.model import Manifest
    from apistub.writer import WriteResult, WriteSink

logger: ApistubLogger = get_logger(__name__)


class Outcome(str, Enum):
    """How the generated text relates to the output file."""

    UNCHANGED = "unchanged"
    WOULD_CHANGE = "would change"
    WRITTEN = "written"
    EMITTED = "emitted"


@dataclass(frozen=True)
class GenerationResult:
    """Result of a generator run.

    Attributes:
        config (Config): The configuration the run used.
        text (str): The complete generated script.
        manifest (Manifest): The parsed manifest.
        fragments (tuple[Fragment, ...]): Fragments appended, in order.
        previous (str | None): Output file content before the run; only read by
            `check` and `build(keep_previous=True)`, None if missing or undecodable.
        outcome (Outcome | None): Set by `build` / `check`; None for `generate`.
        diagnostics (tuple[Diagnostic, ...]): Config and manifest findings.
    """

    config: Config
    text: str
    manifest: Manifest
    fragments: tuple[Fragment, ...]
    previous: str | None = None
    outcome: Outcome | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def up_to_date(self) -> bool:
        """Return True if the output file already holds exactly ``text``."""
        return self.previous == self.text


def resolve_config(
    config: Config | Mapping[str, Any] | None = None,
    root: Path | None = None,
) -> Config:
    """Return a frozen `Config` from a Config, a TOML-shaped mapping, or discovery."""
    if isinstance(config, Config):
        return config
    draft = MutableConfig.load_merged(root=root)
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config), source="<api>"))
    return draft.freeze()


def generate(config: Config | Mapping[str, Any] | None = None) -> GenerationResult:
    """Generate the script text without writing it.

    Raises:
        OSError: If the manifest, the fragment directory or a fragment cannot be read.
        ManifestError: If the manifest is unusable.
        IdentifierCollisionError: If two namespace paths flatten alike in strict mode.
    """
    cfg = resolve_config(config)
    diagnostics = DiagnosticLog.from_iterable(cfg.diagnostics)

    manifest = load_manifest(cfg.manifest_path, diagnostics)
    fragments = read_fragments(cfg.fragments_dir, extension=cfg.fragment_extension)
    text = assemble(manifest, fragments, config=cfg)
    logger.info(
        "Generated %d bytes from %d namespaces and %d fragments",
        len(text.encode("utf-8")),
        len(manifest),
        len(fragments),
    )
    return GenerationResult(
        config=cfg,
        text=text,
        manifest=manifest,
        fragments=tuple(fragments),
        diagnostics=diagnostics.freeze(),
    )


def check(config: Config | Mapping[str, Any] | None = None) -> GenerationResult:
    """Generate and compare with the output file; never writes.

    An output file that is missing or not valid UTF-8 counts as out of date.
    """
    result = generate(config)
    result = replace(result, previous=read_existing(result.config.output_path))
    outcome = Outcome.UNCHANGED if result.up_to_date else Outcome.WOULD_CHANGE
    return replace(result, outcome=outcome)


def build(
    config: Config | Mapping[str, Any] | None = None,
    *,
    sink: WriteSink | None = None,
    keep_previous: bool = False,
) -> GenerationResult:
    """Generate and commit the script to ``sink`` (the output file by default).

    Generation completes fully before the sink is touched.

    Args:
        config (Config | Mapping[str, Any] | None): See `resolve_config`.
        sink (WriteSink | None): Destination; the output file when None.
        keep_previous (bool): Capture the output file's prior content in
            ``previous`` (for diffing) before writing.
    """
    result = generate(config)
    if keep_previous:
        result = replace(result, previous=read_existing(result.config.output_path))
    target: WriteSink = sink or FileSystemSink(result.config.output_path)
    written: WriteResult = target.write(result.text)
    if written.status == WriteStatus.UNCHANGED:
        outcome = Outcome.UNCHANGED
    elif isinstance(target, FileSystemSink):
        outcome = Outcome.WRITTEN
    else:
        outcome = Outcome.EMITTED
    return replace(result, outcome=outcome)


def version() -> str:
    """Return the installed APIStub version."""
    return APISTUB_VERSION


__all__ = [
    "GenerationResult",
    "Outcome",
    "build",
    "check",
    "generate",
    "resolve_config",
    "version",
]

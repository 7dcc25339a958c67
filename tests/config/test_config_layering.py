# topmark:header:start
#
#   project      : APIStub
#   file         : test_config_layering.py
#   file_relpath : tests/config/test_config_layering.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Config discovery, merge precedence and value checking."""

from __future__ import annotations

from pathlib import Path

import pytest

from apistub.config import Config, MutableConfig
from apistub.config.keys import ArgKey
from apistub.config.model import CLI_OVERRIDE_STR
from apistub.constants import DEFAULT_RESERVED_NAMES
from apistub.core.diagnostics import DiagnosticLevel
from apistub.core.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_resolve_against_root(tmp_path: Path) -> None:
    cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.root == tmp_path.resolve()
    assert cfg.manifest_path == tmp_path.resolve() / "definitions" / "stubs.json"
    assert cfg.fragments_dir == tmp_path.resolve() / "scripts" / "chrome-api-child"
    assert cfg.output_path == tmp_path.resolve() / "data" / "chrome-api-child.js"
    assert cfg.fragment_extension == ".js"
    assert cfg.strict_identifiers is True
    assert (cfg.root_object, cfg.global_object, cfg.bridge, cfg.counter) == (
        "chrome",
        "unsafeWindow",
        "chromeAPIBridge",
        "INC_ID",
    )
    assert dict(cfg.reserved_names) == DEFAULT_RESERVED_NAMES
    assert cfg.config_files == ()


def test_pyproject_tool_section_is_read(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.apistub]\noutput = "build/out.js"\n',
    )

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.output_path == tmp_path.resolve() / "build" / "out.js"
    assert [Path(p).name for p in cfg.config_files] == ["pyproject.toml"]


def test_pyproject_without_tool_section_contributes_nothing(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.output_path.name == "chrome-api-child.js"
    assert cfg.diagnostics == ()


def test_apistub_toml_overrides_pyproject(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        '[tool.apistub]\noutput = "a.js"\nmanifest = "m.json"\n',
    )
    _write(tmp_path / "apistub.toml", 'output = "b.js"\n')

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.output_path.name == "b.js"
    assert cfg.manifest_path.name == "m.json"
    assert [Path(p).name for p in cfg.config_files] == ["pyproject.toml", "apistub.toml"]


def test_explicit_config_overrides_discovered(tmp_path: Path) -> None:
    _write(tmp_path / "apistub.toml", "strict_identifiers = true\n")
    extra = _write(tmp_path / "ci.toml", "strict_identifiers = false\n")

    cfg = MutableConfig.load_merged(root=tmp_path, extra_config_files=[extra]).freeze()

    assert cfg.strict_identifiers is False


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "apistub.toml", 'output = "b.js"\n')

    cfg = MutableConfig.load_merged(root=tmp_path, no_config=True).freeze()

    assert cfg.output_path.name == "chrome-api-child.js"


def test_emit_section_and_reserved_names_merge(tmp_path: Path) -> None:
    _write(
        tmp_path / "apistub.toml",
        "[emit]\n"
        'root_object = "browser"\n'
        'bridge = "bridgeCall"\n'
        "\n"
        "[reserved_names]\n"
        'class = "_class"\n',
    )

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.root_object == "browser"
    assert cfg.bridge == "bridgeCall"
    assert cfg.global_object == "unsafeWindow"
    assert dict(cfg.reserved_names) == {"debugger": "_debugger", "class": "_class"}


def test_reserved_names_can_override_default(tmp_path: Path) -> None:
    _write(tmp_path / "apistub.toml", '[reserved_names]\ndebugger = "dbg_"\n')

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    assert cfg.reserved_names["debugger"] == "dbg_"


def test_unknown_and_malformed_values_become_warnings(tmp_path: Path) -> None:
    _write(
        tmp_path / "apistub.toml",
        'outptu = "typo.js"\n'
        "output = 3\n"
        'strict_identifiers = "yes"\n'
        "[emit]\n"
        'rooot = "x"\n'
        "[reserved_names]\n"
        "debugger = 1\n",
    )

    cfg = MutableConfig.load_merged(root=tmp_path).freeze()
    messages = [d.message for d in cfg.diagnostics]

    assert all(d.level is DiagnosticLevel.WARNING for d in cfg.diagnostics)
    assert any("outptu" in m for m in messages)
    assert any("emit.rooot" in m for m in messages)
    assert any("Expected string" in m and "output" in m for m in messages)
    assert any("Expected boolean" in m for m in messages)
    assert any("reserved_names.debugger" in m for m in messages)
    # Malformed values fall back to defaults
    assert cfg.output_path.name == "chrome-api-child.js"
    assert cfg.strict_identifiers is True
    assert cfg.reserved_names["debugger"] == "_debugger"


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    _write(tmp_path / "apistub.toml", "output = \n")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        MutableConfig.load_merged(root=tmp_path)


def test_apply_args_overrides_and_anchors_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path / "apistub.toml", 'output = "b.js"\n')
    elsewhere = tmp_path / "cwd"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    draft = MutableConfig.load_merged(root=tmp_path)
    draft.apply_args({ArgKey.OUTPUT: "out.js", ArgKey.STRICT_IDENTIFIERS: False})
    cfg = draft.freeze()

    assert cfg.output_path == elsewhere.resolve() / "out.js"
    assert cfg.strict_identifiers is False
    assert cfg.config_files[-1] == CLI_OVERRIDE_STR


def test_apply_args_ignores_none_values(tmp_path: Path) -> None:
    draft = MutableConfig.from_defaults(tmp_path)
    draft.apply_args({ArgKey.OUTPUT: None, ArgKey.STRICT_IDENTIFIERS: None})

    assert CLI_OVERRIDE_STR not in draft.config_files


def test_thaw_freeze_roundtrip_preserves_values(tmp_path: Path) -> None:
    _write(tmp_path / "apistub.toml", '[emit]\ncounter = "REQ"\n')
    cfg = MutableConfig.load_merged(root=tmp_path).freeze()

    again = cfg.thaw().freeze()

    assert again.to_toml_dict() == cfg.to_toml_dict()
    assert again.counter == "REQ"


def test_frozen_config_is_immutable(tmp_path: Path) -> None:
    cfg = MutableConfig.from_defaults(tmp_path).freeze()

    with pytest.raises(AttributeError):
        cfg.output_path = tmp_path  # type: ignore[misc]
    with pytest.raises(TypeError):
        cfg.reserved_names["x"] = "y"  # type: ignore[index]

# topmark:header:start
#
#   project      : APIStub
#   file         : test_api_build.py
#   file_relpath : tests/api/test_api_build.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Public API: generate / build / check against a project on disk."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from apistub import api
from apistub.constants import GENERATED_HEADER
from apistub.core.errors import IdentifierCollisionError, ManifestError
from apistub.writer import StdoutSink
from tests.conftest import make_config, mark_integration, write_project

if TYPE_CHECKING:
    from pathlib import Path


@mark_integration
def test_generate_does_not_write(project: Path) -> None:
    result = api.generate(make_config(project))

    assert result.outcome is None
    assert result.previous is None
    assert result.text.startswith(GENERATED_HEADER)
    assert result.text.endswith("// init\n")
    assert not (project / "data" / "chrome-api-child.js").exists()
    assert [f.name for f in result.fragments] == ["init.js"]
    assert len(result.manifest) == 4


@mark_integration
def test_build_writes_then_reports_unchanged(project: Path) -> None:
    config = make_config(project)
    out = project / "data" / "chrome-api-child.js"

    first = api.build(config)
    content = out.read_bytes()
    second = api.build(config)

    assert first.outcome is api.Outcome.WRITTEN
    assert second.outcome is api.Outcome.UNCHANGED
    assert out.read_bytes() == content == first.text.encode("utf-8")


@mark_integration
def test_rebuild_is_byte_identical(project: Path, tmp_path: Path) -> None:
    other = tmp_path / "copy"
    other.mkdir()
    write_project(other, fragments={"init.js": "// init\n"})

    a = api.generate(make_config(project)).text
    b = api.generate(make_config(other)).text

    assert a == b


@mark_integration
def test_fragment_inclusion_skips_hidden_and_foreign_files(tmp_path: Path) -> None:
    write_project(
        tmp_path,
        manifest={"tabs": {"functions": [{"name": "create"}]}},
        fragments={".hidden.js": "HIDDEN\n", "init.js": "INIT\n", "notes.txt": "NOTES\n"},
    )

    text = api.generate(make_config(tmp_path)).text

    assert text.endswith('defineAs:"create"});\nINIT\n')
    assert "HIDDEN" not in text and "NOTES" not in text


@mark_integration
def test_check_reports_would_change_then_unchanged(project: Path) -> None:
    config = make_config(project)

    stale = api.check(config)
    api.build(config)
    fresh = api.check(config)

    assert stale.outcome is api.Outcome.WOULD_CHANGE
    assert not stale.up_to_date
    assert fresh.outcome is api.Outcome.UNCHANGED
    assert fresh.up_to_date


@mark_integration
def test_build_to_stream_sink(project: Path) -> None:
    buf = io.StringIO()

    result = api.build(make_config(project), sink=StdoutSink(buf))

    assert result.outcome is api.Outcome.EMITTED
    assert buf.getvalue() == result.text
    assert not (project / "data" / "chrome-api-child.js").exists()


@mark_integration
def test_build_regenerates_undecodable_output(project: Path) -> None:
    out = project / "data" / "chrome-api-child.js"
    out.write_bytes(b"\xff\xfe garbage")

    stale = api.check(make_config(project))
    result = api.build(make_config(project))

    assert stale.outcome is api.Outcome.WOULD_CHANGE
    assert stale.previous is None
    assert result.outcome is api.Outcome.WRITTEN
    assert out.read_bytes() == result.text.encode("utf-8")


@mark_integration
def test_build_captures_previous_only_on_request(project: Path) -> None:
    out = project / "data" / "chrome-api-child.js"
    out.write_text("old\n", encoding="utf-8")

    plain = api.build(make_config(project))
    out.write_text("old\n", encoding="utf-8")
    kept = api.build(make_config(project), keep_previous=True)

    assert plain.previous is None
    assert kept.previous == "old\n"
    assert kept.outcome is api.Outcome.WRITTEN


@mark_integration
def test_collision_leaves_previous_output_untouched(tmp_path: Path) -> None:
    write_project(tmp_path, manifest={"a.bc": {}, "ab.c": {}})
    out = tmp_path / "data" / "chrome-api-child.js"
    out.parent.mkdir()
    out.write_text("previous", encoding="utf-8")

    with pytest.raises(IdentifierCollisionError):
        api.build(make_config(tmp_path))

    assert out.read_text(encoding="utf-8") == "previous"


@mark_integration
def test_missing_manifest_raises_before_writing(tmp_path: Path) -> None:
    (tmp_path / "scripts" / "chrome-api-child").mkdir(parents=True)

    with pytest.raises(FileNotFoundError):
        api.build(make_config(tmp_path))


@mark_integration
def test_missing_fragments_dir_raises(tmp_path: Path) -> None:
    write_project(tmp_path)
    (tmp_path / "scripts" / "chrome-api-child").rmdir()

    with pytest.raises(FileNotFoundError):
        api.generate(make_config(tmp_path))


@mark_integration
def test_invalid_manifest_raises(tmp_path: Path) -> None:
    write_project(tmp_path, manifest="[1, 2]")

    with pytest.raises(ManifestError):
        api.generate(make_config(tmp_path))


@mark_integration
def test_manifest_diagnostics_are_reported(project: Path) -> None:
    result = api.generate(make_config(project))

    # "runtime" in the sample manifest has no functions
    assert any("runtime" in d.message for d in result.diagnostics)


@mark_integration
def test_mapping_config_merges_over_discovery(
    project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(project)

    result = api.generate({"emit": {"bridge": "bridgeCall"}})

    assert "exportFunction(bridgeCall.bind(null," in result.text
    assert result.config.root == project.resolve()


def test_version_is_a_string() -> None:
    assert isinstance(api.version(), str) and api.version()

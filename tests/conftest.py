# topmark:header:start
#
#   project      : APIStub
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Pytest configuration for the APIStub test suite.

This file sets up global fixtures, typed mark wrappers, and a small project
builder that lays out a manifest and fragment directory on disk.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `apistub.config.MutableConfig` (mutable), then
      `freeze()` into a `apistub.config.Config` for **public API** calls
      (``apistub.api.generate/build/check``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from apistub.config import MutableConfig, logging
from apistub.constants import DEFAULT_FRAGMENTS_DIR, DEFAULT_MANIFEST_PATH

if TYPE_CHECKING:
    from pathlib import Path

    from apistub.config import Config

F = TypeVar("F", bound=Callable[..., object])

# A decorator that takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_apistub_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure APIStub's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    APISTUB_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so trace paths are exercised in every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# A small, representative manifest: nested namespaces, a reserved segment,
# callback indices present and absent, and a namespace without functions.
SAMPLE_MANIFEST: dict[str, Any] = {
    "tabs": {
        "functions": [
            {"name": "create", "successCallbackIndex": 1},
            {"name": "remove", "successCallbackIndex": 1, "failureCallbackIndex": 2},
        ]
    },
    "devtools.inspectedWindow": {"functions": [{"name": "eval"}]},
    "debugger": {"functions": [{"name": "attach", "successCallbackIndex": 2}]},
    "runtime": {},
}


def write_project(
    root: Path,
    manifest: Mapping[str, Any] | str | None = None,
    fragments: Mapping[str, str] | None = None,
    *,
    manifest_path: str = DEFAULT_MANIFEST_PATH,
    fragments_dir: str = DEFAULT_FRAGMENTS_DIR,
) -> Path:
    """Lay out a manifest and a fragment directory under ``root``.

    Args:
        root (Path): Project root to populate.
        manifest (Mapping[str, Any] | str | None): Manifest document, or raw JSON
            text; defaults to `SAMPLE_MANIFEST`.
        fragments (Mapping[str, str] | None): File name → content for the
            fragment directory (created empty when None).
        manifest_path (str): Manifest location relative to ``root``.
        fragments_dir (str): Fragment directory relative to ``root``.

    Returns:
        Path: ``root``, for chaining.
    """
    doc = SAMPLE_MANIFEST if manifest is None else manifest
    text = doc if isinstance(doc, str) else json.dumps(doc, indent=2)

    mpath: Path = root / manifest_path
    mpath.parent.mkdir(parents=True, exist_ok=True)
    mpath.write_text(text, encoding="utf-8")

    fdir: Path = root / fragments_dir
    fdir.mkdir(parents=True, exist_ok=True)
    for name, content in (fragments or {}).items():
        (fdir / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a project root holding `SAMPLE_MANIFEST`, one fragment, and an output dir."""
    root: Path = tmp_path / "proj"
    root.mkdir()
    write_project(root, fragments={"init.js": "// init\n"})
    (root / "data").mkdir()
    return root


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` rooted at ``root`` with attribute overrides.

    Args:
        root (Path): Project root; relative paths resolve against it.
        **overrides (Any): `MutableConfig` attribute overrides.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(root, **overrides).freeze()


def make_mutable_config(root: Path, **overrides: Any) -> MutableConfig:
    """Return a defaults-only builder (no discovery) for staged edits.

    Args:
        root (Path): Project root.
        **overrides (Any): Attribute overrides applied verbatim.

    Returns:
        MutableConfig: A mutable configuration ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults(root)
    for k, v in overrides.items():
        setattr(m, k, v)
    return m

# topmark:header:start
#
#   project      : APIStub
#   file         : config_resolver.py
#   file_relpath : src/apistub/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Build the effective `Config` from Click options.

Discovery runs from ``--root`` (or the CWD); ``--config`` files merge on top;
explicit path options and ``--[no-]strict-identifiers`` override last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from apistub.cli.errors import to_cli_error
from apistub.config.keys import ArgKey
from apistub.config.logging import get_logger
from apistub.config.model import MutableConfig
from apistub.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apistub.config import Config

logger = get_logger(__name__)


def resolve_config_from_click(
    *,
    root: str | None,
    config_files: Sequence[str],
    no_config: bool,
    manifest: str | None,
    fragments_dir: str | None,
    output: str | None,
    strict_identifiers: bool | None,
) -> Config:
    """Return the frozen configuration for a CLI invocation.

    Raises:
        ApistubConfigError: If an explicit config file cannot be loaded.
    """
    try:
        draft = MutableConfig.load_merged(
            root=Path(root) if root else None,
            extra_config_files=[Path(p) for p in config_files],
            no_config=no_config,
        )
    except ConfigError as exc:
        raise to_cli_error(exc) from exc

    draft.apply_args(
        {
            ArgKey.MANIFEST: manifest,
            ArgKey.FRAGMENTS_DIR: fragments_dir,
            ArgKey.OUTPUT: output,
            ArgKey.STRICT_IDENTIFIERS: strict_identifiers,
        }
    )
    config = draft.freeze()
    logger.debug("Effective config: %s", config.to_toml_dict())
    return config

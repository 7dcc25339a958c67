# topmark:header:start
#
#   project      : APIStub
#   file         : __init__.py
#   file_relpath : src/apistub/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Configuration for APIStub.

Re-exports the configuration model so callers can write
``from apistub.config import Config, MutableConfig``.
"""

from __future__ import annotations

from apistub.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]

# topmark:header:start
#
#   project      : APIStub
#   file         : constants.py
#   file_relpath : src/apistub/constants.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""APIStub Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

APISTUB_VERSION: str = get_version("apistub")

# Config file names looked up in the project root:
APISTUB_TOML_NAME: Final[str] = "apistub.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "apistub"

# Well-known project-relative locations:
DEFAULT_MANIFEST_PATH: Final[str] = "definitions/stubs.json"
DEFAULT_FRAGMENTS_DIR: Final[str] = "scripts/chrome-api-child"
DEFAULT_OUTPUT_PATH: Final[str] = "data/chrome-api-child.js"
DEFAULT_FRAGMENT_EXTENSION: Final[str] = ".js"

# Names referenced (never defined) by the generated script:
DEFAULT_ROOT_OBJECT: Final[str] = "chrome"
DEFAULT_GLOBAL_OBJECT: Final[str] = "unsafeWindow"
DEFAULT_BRIDGE: Final[str] = "chromeAPIBridge"
DEFAULT_COUNTER: Final[str] = "INC_ID"

# Host intrinsics called by every generated statement:
CREATE_OBJECT_FN: Final[str] = "createObjectIn"
EXPORT_FUNCTION_FN: Final[str] = "exportFunction"

# Path segments that collide with reserved words in the target runtime:
DEFAULT_RESERVED_NAMES: Final[dict[str, str]] = {
    "debugger": "_debugger",
}

HIDDEN_FILE_PREFIX: Final[str] = "."

GENERATED_HEADER: Final[str] = (
    "/**\n * THIS FILE GENERATED BY apistub\n * DO NOT EDIT MANUALLY.\n */\n\n"
)

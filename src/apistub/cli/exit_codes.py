# topmark:header:start
#
#   project      : APIStub
#   file         : exit_codes.py
#   file_relpath : src/apistub/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Exit codes for APIStub CLI.

APIStub aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one divergence is
`WOULD_CHANGE=2`, returned by ``build --check`` when the output file is stale;
tests must assert `result.exception is None` to tell it apart from Click's own
usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for APIStub CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: ``--check``: the output file is missing or out of date.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        MANIFEST_ERROR: Unusable manifest content. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Manifest, fragment directory or output directory missing.
            Mirrors BSD ``EX_NOINPUT (66)``.
        GENERATION_ERROR: Flattened identifier collision. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: Other I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid config file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    MANIFEST_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    GENERATION_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255

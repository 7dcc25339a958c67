# topmark:header:start
#
#   project      : APIStub
#   file         : errors.py
#   file_relpath : src/apistub/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Exceptions for APIStub CLI.

Usage:
    Commands call `to_cli_error` on library exceptions and raise the result,
    so every failure ends the process with a standardized message and exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from apistub.cli.exit_codes import ExitCode
from apistub.core.errors import ConfigError, IdentifierCollisionError, ManifestError


class ApistubCliError(click.ClickException):
    """Base class for all APIStub CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ApistubUsageError(ApistubCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ApistubManifestError(ApistubCliError):
    """Error for an unusable manifest."""

    exit_code = ExitCode.MANIFEST_ERROR


class ApistubFileNotFoundError(ApistubCliError):
    """Error when an input path or the output directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ApistubGenerationError(ApistubCliError):
    """Error for identifier collisions detected before emission."""

    exit_code = ExitCode.GENERATION_ERROR


class ApistubIOError(ApistubCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ApistubPermissionDeniedError(ApistubCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class ApistubConfigError(ApistubCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ApistubUnexpectedError(ApistubCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def to_cli_error(exc: Exception) -> ApistubCliError:
    """Map a library or OS exception onto the matching CLI error."""
    if isinstance(exc, ManifestError):
        return ApistubManifestError(str(exc))
    if isinstance(exc, IdentifierCollisionError):
        return ApistubGenerationError(str(exc))
    if isinstance(exc, ConfigError):
        return ApistubConfigError(str(exc))
    if isinstance(exc, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return ApistubFileNotFoundError(f"{exc.strerror}: {exc.filename}")
    if isinstance(exc, PermissionError):
        return ApistubPermissionDeniedError(f"{exc.strerror}: {exc.filename}")
    if isinstance(exc, UnicodeDecodeError):
        return ApistubIOError(f"Cannot decode input as UTF-8: {exc}")
    if isinstance(exc, OSError):
        return ApistubIOError(str(exc))
    return ApistubUnexpectedError(f"{type(exc).__name__}: {exc}")

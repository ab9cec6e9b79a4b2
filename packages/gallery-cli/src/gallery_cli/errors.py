"""CLI error handling for gallery-cli.

Wraps gallery-core exceptions in user-friendly messages with exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from gallery_cli.output import error

if TYPE_CHECKING:
    from gallery_core import ConfigurationError, GalleryValidationError


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (validation, bad option)
EXIT_SYSTEM_ERROR = 2  # System error (missing file, permissions, write failure)


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting.

        Args:
            file: Output file (unused, for Click compatibility).
        """
        error(self.format_message())


def format_validation_error(err: GalleryValidationError, file_path: str) -> str:
    """Format a gallery validation error into a user-friendly message.

    Example:
        >>> format_validation_error(err, "gallery.yaml")
        "Invalid gallery in gallery.yaml:\\n  - images[0]: Image source is missing or empty (entry 0)"
    """
    location = f"images[{err.index}]" if err.index is not None else "images"
    return f"Invalid gallery in {file_path}:\n  - {location}: {err.user_message}"


def handle_validation_error(err: GalleryValidationError, file_path: str) -> NoReturn:
    """Raise a CLIError for a gallery validation failure.

    Raises:
        CLIError: Always, with exit code 1.
    """
    raise CLIError(format_validation_error(err, file_path))


def handle_document_error(err: ConfigurationError) -> NoReturn:
    """Raise a CLIError for a gallery document that could not be loaded.

    A missing or unreadable file is a system error (exit 2); bad content or
    configuration is a user error (exit 1).

    Raises:
        CLIError: Always.
    """
    from gallery_core import GalleryDocumentNotFoundError, GalleryDocumentReadError

    if isinstance(err, GalleryDocumentNotFoundError):
        raise CLIError(
            f"{err.user_message}\n\nUse --file to specify the path to your gallery.yaml.",
            exit_code=EXIT_SYSTEM_ERROR,
        )
    if isinstance(err, GalleryDocumentReadError):
        raise CLIError(err.user_message, exit_code=EXIT_SYSTEM_ERROR)
    raise CLIError(err.user_message)


def handle_permission_error(path: str, operation: str = "access") -> NoReturn:
    """Raise a CLIError for a permission failure.

    Raises:
        CLIError: Always, with exit code 2.
    """
    raise CLIError(
        f"Permission denied: Cannot {operation} {path}",
        exit_code=EXIT_SYSTEM_ERROR,
    )


def handle_write_error(path: str, err: OSError) -> NoReturn:
    """Raise a CLIError for a failed output write.

    Permission failures keep the permission message; other OS errors (for
    example an output path that is an existing file) report the OS reason.

    Raises:
        CLIError: Always, with exit code 2.
    """
    if isinstance(err, PermissionError):
        handle_permission_error(path, "write to")
    raise CLIError(
        f"Cannot write to {path}: {err.strerror or err}",
        exit_code=EXIT_SYSTEM_ERROR,
    )

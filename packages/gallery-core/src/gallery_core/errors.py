"""Custom exception hierarchy for gallery-core.

This module defines the exception classes used throughout gallery-runtime:
- GalleryError: Base exception for all gallery-related errors
- GalleryValidationError: Raised when a raw gallery entry list is invalid
- ConfigurationError: Raised when configuration or a gallery document is unusable
- UnsupportedTargetError: Raised when no adapter exists for a requested target

User-facing messages are safe to display. Technical details are logged
internally via structlog and never shown to the user.
"""

from __future__ import annotations

from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


class GalleryError(Exception):
    """Base exception for gallery-runtime.

    All gallery exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but NEVER exposed to the user.

    Example:
        >>> raise GalleryError(
        ...     "Gallery document invalid",
        ...     internal_details="images[3] is a list, expected mapping",
        ... )
    """

    # Level used when logging internal_details
    log_level = "error"

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            getattr(logger, self.log_level)(
                "gallery_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ValidationErrorKind(str, Enum):
    """Variants of gallery validation failure."""

    EMPTY_SEQUENCE = "empty_sequence"
    MISSING_SOURCE = "missing_source"
    INVALID_DIMENSION = "invalid_dimension"
    INVALID_ENTRY = "invalid_entry"


_KIND_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.EMPTY_SEQUENCE: "Gallery must contain at least one image",
    ValidationErrorKind.MISSING_SOURCE: "Image source is missing or empty",
    ValidationErrorKind.INVALID_DIMENSION: "Image dimension must be a positive integer",
    ValidationErrorKind.INVALID_ENTRY: "Image entry is malformed",
}


class GalleryValidationError(GalleryError):
    """Raised when a raw gallery entry list fails validation.

    The compiler returns this error as a value instead of raising it, so
    callers can render a fallback. The validator itself raises it.
    Internal details are logged at debug level.

    Attributes:
        kind: Which validation rule failed.
        index: Position of the offending entry, or None for sequence-level
            failures.
        field: Name of the offending field (e.g. "width"), if known.

    Example:
        >>> err = GalleryValidationError(ValidationErrorKind.MISSING_SOURCE, index=0)
        >>> str(err)
        'Image source is missing or empty (entry 0)'
    """

    log_level = "debug"

    def __init__(
        self,
        kind: ValidationErrorKind,
        *,
        index: int | None = None,
        field: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if index is not None:
            context_parts.append(f"entry {index}")
        if field:
            context_parts.append(f"field '{field}'")

        message = _KIND_MESSAGES[kind]
        if context_parts:
            message = f"{message} ({', '.join(context_parts)})"

        super().__init__(message, internal_details=internal_details)

        self.kind = kind
        self.index = index
        self.field = field

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GalleryValidationError):
            return NotImplemented
        return (self.kind, self.index, self.field) == (other.kind, other.index, other.field)

    def __hash__(self) -> int:
        return hash((self.kind, self.index, self.field))

    def to_dict(self) -> dict[str, str | int | None]:
        """Return a JSON-ready description of the failure."""
        return {
            "kind": self.kind.value,
            "index": self.index,
            "field": self.field,
            "message": self.user_message,
        }


class ConfigurationError(GalleryError):
    """Raised when configuration or an input file cannot be used.

    Provides file path and field context for actionable error messages.

    Attributes:
        file_path: Path to the offending file (if known).
        field_path: Dot-separated path to the invalid field, or the name of
            the offending environment variable.

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid column count",
        ...     field_path="GALLERY_NATIVE_COLUMNS",
        ...     internal_details="int('three') failed",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path


class GalleryDocumentError(ConfigurationError):
    """Raised when a gallery.yaml / gallery.json document cannot be loaded.

    Covers file-level problems only: missing file, unparsable content, or a
    top-level shape that is neither a list of records nor a mapping with an
    ``images`` list. Record-level problems are GalleryValidationError.
    """

    pass


class GalleryDocumentNotFoundError(GalleryDocumentError):
    """Raised when the gallery document does not exist."""

    pass


class GalleryDocumentReadError(GalleryDocumentError):
    """Raised when the gallery document exists but cannot be read.

    Covers permission failures, directories, and other OS-level errors.
    """

    pass


class UnsupportedTargetError(GalleryError):
    """Raised when a render target has no registered adapter.

    Attributes:
        target: The requested target name.
        supported: Names of the supported targets.

    Example:
        >>> raise UnsupportedTargetError("tv", ["native", "web"])
        # User sees: "Unsupported render target: 'tv'. Supported targets: native, web"
    """

    def __init__(self, target: str, supported: list[str]) -> None:
        user_message = (
            f"Unsupported render target: '{target}'. Supported targets: {', '.join(supported)}"
        )
        super().__init__(user_message)

        self.target = target
        self.supported = supported

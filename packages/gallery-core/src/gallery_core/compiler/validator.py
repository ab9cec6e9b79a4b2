"""GallerySpec validator.

Normalizes an ordered sequence of untyped records into a GallerySpec. Each
record is checked in order and the first failure is raised as a
GalleryValidationError carrying the offending index.

Precedence within one record: source, then width, then height, then caption.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from gallery_core.errors import GalleryValidationError, ValidationErrorKind
from gallery_core.schemas.gallery_spec import IMAGE_ENTRY_FIELDS, GallerySpec, ImageEntry

logger = structlog.get_logger(__name__)

# Field -> failure kind, in precedence order
_FIELD_KINDS: tuple[tuple[str, ValidationErrorKind], ...] = (
    ("src", ValidationErrorKind.MISSING_SOURCE),
    ("width", ValidationErrorKind.INVALID_DIMENSION),
    ("height", ValidationErrorKind.INVALID_DIMENSION),
    ("caption", ValidationErrorKind.INVALID_ENTRY),
)


def validate(raw_entries: Sequence[Any] | Iterator[Any]) -> GallerySpec:
    """Validate raw gallery records and build a GallerySpec.

    Args:
        raw_entries: Ordered records, each a mapping with ``src``, ``width``,
            ``height`` and optional ``caption``. Unknown keys are ignored.
            Only ordered inputs are accepted: sequences such as lists and
            tuples, or iterators such as generators. Sets and mappings are
            rejected because their order is not the gallery order.

    Returns:
        Immutable GallerySpec with one ImageEntry per record, same order.

    Raises:
        GalleryValidationError: On the first invalid record, or when the
            sequence is empty or not a sequence at all.

    Example:
        >>> spec = validate([{"src": "/a.jpg", "width": 200, "height": 150}])
        >>> spec.entries[0].caption is None
        True
    """
    if isinstance(raw_entries, (str, bytes)) or not isinstance(raw_entries, (Sequence, Iterator)):
        raise GalleryValidationError(
            ValidationErrorKind.INVALID_ENTRY,
            internal_details=(
                f"expected an ordered sequence of records, got {type(raw_entries).__name__}"
            ),
        )

    records = list(raw_entries)
    if not records:
        raise GalleryValidationError(ValidationErrorKind.EMPTY_SEQUENCE)

    entries = tuple(_validate_entry(index, record) for index, record in enumerate(records))

    logger.debug("gallery_validated", entries=len(entries))
    return GallerySpec(entries=entries)


def _validate_entry(index: int, record: Any) -> ImageEntry:
    """Validate a single raw record.

    Args:
        index: Position of the record in the raw sequence.
        record: The raw record.

    Returns:
        Validated ImageEntry.

    Raises:
        GalleryValidationError: If the record is invalid.
    """
    if not isinstance(record, Mapping):
        raise GalleryValidationError(
            ValidationErrorKind.INVALID_ENTRY,
            index=index,
            internal_details=f"expected a mapping, got {type(record).__name__}",
        )

    ignored = sorted(str(key) for key in record if key not in IMAGE_ENTRY_FIELDS)
    if ignored:
        logger.warning("gallery_entry_fields_ignored", index=index, fields=ignored)

    data = {name: record[name] for name in IMAGE_ENTRY_FIELDS if name in record}

    try:
        return ImageEntry.model_validate(data)
    except PydanticValidationError as e:
        raise _to_gallery_error(index, e) from None


def _to_gallery_error(index: int, err: PydanticValidationError) -> GalleryValidationError:
    """Map a pydantic error on one record to a GalleryValidationError.

    Args:
        index: Position of the failing record.
        err: Pydantic validation error raised for that record.

    Returns:
        GalleryValidationError for the highest-precedence failing field.
    """
    failures = {str(e["loc"][0]): e["msg"] for e in err.errors() if e["loc"]}

    for field, kind in _FIELD_KINDS:
        if field in failures:
            return GalleryValidationError(
                kind,
                index=index,
                field=None if kind is ValidationErrorKind.MISSING_SOURCE else field,
                internal_details=f"{field}: {failures[field]}",
            )

    return GalleryValidationError(
        ValidationErrorKind.INVALID_ENTRY,
        index=index,
        internal_details=str(err),
    )

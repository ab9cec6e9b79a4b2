"""Gallery document loading.

Reads the raw entry list from gallery.yaml or gallery.json. Two top-level
shapes are accepted:

    # bare list
    - src: /a.jpg
      width: 200
      height: 150

    # mapping with an images list
    images:
      - src: /a.jpg
        width: 200
        height: 150

Only file-level problems are reported here. Records are passed through
untouched for the validator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml

from gallery_core.errors import (
    GalleryDocumentError,
    GalleryDocumentNotFoundError,
    GalleryDocumentReadError,
)

logger = structlog.get_logger(__name__)

# Standard gallery document file name
GALLERY_FILE_NAME = "gallery.yaml"

# Key holding the entry list in mapping-shaped documents
IMAGES_KEY = "images"


def load_gallery_document(path: Path | str) -> list[Any]:
    """Load raw gallery records from a YAML or JSON file.

    JSON is parsed through the YAML loader, which accepts it as a subset.

    Args:
        path: Path to the gallery document.

    Returns:
        The raw, unvalidated list of records.

    Raises:
        GalleryDocumentNotFoundError: If the file does not exist.
        GalleryDocumentReadError: If the file exists but cannot be read.
        GalleryDocumentError: If the file is not UTF-8, not valid YAML/JSON,
            or has an unsupported top-level shape.

    Example:
        >>> records = load_gallery_document("gallery.yaml")
        >>> records[0]["src"]
        '/a.jpg'
    """
    path = Path(path)

    if not path.exists():
        raise GalleryDocumentNotFoundError("Gallery file not found", file_path=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GalleryDocumentError(
            "Gallery file is not valid UTF-8 text",
            file_path=str(path),
            internal_details=str(e),
        ) from None
    except OSError as e:
        raise GalleryDocumentReadError(
            "Gallery file could not be read",
            file_path=str(path),
            internal_details=f"{type(e).__name__}: {e}",
        ) from None

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise GalleryDocumentError(
            "Gallery file is not valid YAML or JSON",
            file_path=str(path),
            internal_details=str(e),
        ) from None

    if isinstance(data, dict):
        if IMAGES_KEY not in data:
            raise GalleryDocumentError(
                f"Gallery document must define an '{IMAGES_KEY}' list",
                file_path=str(path),
            )
        data = data[IMAGES_KEY]

    if data is None:
        data = []

    if not isinstance(data, list):
        raise GalleryDocumentError(
            "Gallery document must contain a list of images",
            file_path=str(path),
            internal_details=f"top-level value is {type(data).__name__}",
        )

    logger.debug("gallery_document_loaded", path=str(path), records=len(data))
    return data

"""JSON Schema export functions for gallery-runtime.

This module provides functions to export JSON Schema Draft 2020-12 schemas
from the Pydantic models, for IDE autocomplete on gallery.yaml and for
validating render output in other languages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from gallery_core.document import IMAGES_KEY
from gallery_core.schemas import ImageEntry, NativeAdapterDescriptor, WebRenderInstructions

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID_BASE = "https://gallery-runtime.dev/schemas"


def export_gallery_document_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the gallery.yaml JSON Schema for IDE autocomplete.

    The document is a mapping with an ``images`` list of ImageEntry records.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_gallery_document_schema()
        >>> schema["properties"]["images"]["minItems"]
        1
    """
    entry_schema = ImageEntry.model_json_schema()

    schema: dict[str, Any] = {
        "$schema": JSON_SCHEMA_DIALECT,
        "$id": f"{SCHEMA_ID_BASE}/gallery.schema.json",
        "title": "GalleryDocument",
        "type": "object",
        "properties": {
            IMAGES_KEY: {
                "type": "array",
                "minItems": 1,
                "items": {"$ref": "#/$defs/ImageEntry"},
                "description": "Ordered image entries",
            },
        },
        "required": [IMAGES_KEY],
        "additionalProperties": False,
        "$defs": {"ImageEntry": entry_schema},
    }

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def export_web_output_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the WebRenderInstructions JSON Schema.

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    schema = _model_schema(WebRenderInstructions, "web-output.schema.json")

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def export_native_output_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the NativeAdapterDescriptor JSON Schema (serialised by alias).

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    schema = _model_schema(NativeAdapterDescriptor, "native-output.schema.json")

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _model_schema(model: type[BaseModel], file_name: str) -> dict[str, Any]:
    schema = model.model_json_schema(by_alias=True, mode="serialization")

    # Add JSON Schema Draft 2020-12 metadata
    schema["$schema"] = JSON_SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_ID_BASE}/{file_name}"

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2))

"""Unit tests for JSON Schema export."""

from __future__ import annotations

import json
from pathlib import Path

from gallery_core.export import (
    JSON_SCHEMA_DIALECT,
    export_gallery_document_schema,
    export_native_output_schema,
    export_web_output_schema,
)


class TestExportGalleryDocumentSchema:
    """Tests for export_gallery_document_schema()."""

    def test_schema_metadata(self) -> None:
        """The schema declares Draft 2020-12 and a stable $id."""
        schema = export_gallery_document_schema()

        assert schema["$schema"] == JSON_SCHEMA_DIALECT
        assert schema["$id"].endswith("/gallery.schema.json")

    def test_images_array(self) -> None:
        """images is a required, non-empty array of ImageEntry."""
        schema = export_gallery_document_schema()
        images = schema["properties"]["images"]

        assert schema["required"] == ["images"]
        assert images["type"] == "array"
        assert images["minItems"] == 1
        assert images["items"] == {"$ref": "#/$defs/ImageEntry"}

    def test_image_entry_definition(self) -> None:
        """ImageEntry requires src, width, and height with positive sizes."""
        entry = export_gallery_document_schema()["$defs"]["ImageEntry"]

        assert set(entry["required"]) == {"src", "width", "height"}
        assert entry["properties"]["width"]["exclusiveMinimum"] == 0
        assert entry["properties"]["height"]["exclusiveMinimum"] == 0
        assert entry["properties"]["src"]["minLength"] == 1

    def test_writes_file(self, tmp_path: Path) -> None:
        """Passing a path writes the schema, creating parent directories."""
        output = tmp_path / "schemas" / "gallery.schema.json"

        schema = export_gallery_document_schema(output)

        assert output.exists()
        assert json.loads(output.read_text()) == schema


class TestExportOutputSchemas:
    """Tests for the render output schemas."""

    def test_web_schema(self) -> None:
        """The web schema describes a nodes array."""
        schema = export_web_output_schema()

        assert schema["$id"].endswith("/web-output.schema.json")
        assert "nodes" in schema["properties"]

    def test_native_schema_uses_alias(self) -> None:
        """The native schema uses the columnCount wire name."""
        schema = export_native_output_schema()

        assert schema["$id"].endswith("/native-output.schema.json")
        assert "columnCount" in schema["properties"]
        assert "column_count" not in schema["properties"]

    def test_writes_output_schema(self, tmp_path: Path) -> None:
        """Output schemas can be written to disk."""
        output = tmp_path / "native.schema.json"

        export_native_output_schema(output)

        assert json.loads(output.read_text())["$schema"] == JSON_SCHEMA_DIALECT

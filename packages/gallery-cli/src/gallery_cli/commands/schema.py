"""gallery schema command - Export JSON Schema."""

from __future__ import annotations

from pathlib import Path

import click

from gallery_cli.errors import handle_write_error
from gallery_cli.output import success


@click.group()
def schema() -> None:
    """Manage JSON Schema for IDE support.

    **Commands:**

    - `gallery schema export` - Export gallery.yaml JSON Schema
    - `gallery schema export-output` - Export a render target's output JSON Schema
    """
    pass


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/gallery.schema.json",
    help="Output path [default: ./schemas/gallery.schema.json]",
)
def export_schema(output_path: str) -> None:
    """Export the gallery.yaml JSON Schema.

    Examples:

        gallery schema export

        gallery schema export --output custom/path/schema.json
    """
    # Import here to avoid heavy imports at CLI startup
    from gallery_core import export_gallery_document_schema

    try:
        export_gallery_document_schema(output_path)
    except OSError as e:
        handle_write_error(output_path, e)

    success(f"Schema exported to {Path(output_path)}")


@schema.command("export-output")
@click.option(
    "-t",
    "--target",
    "target",
    type=click.Choice(["web", "native"], case_sensitive=False),
    default="web",
    help="Render target [default: web]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default=None,
    help="Output path [default: ./schemas/<target>-output.schema.json]",
)
def export_output_schema(target: str, output_path: str | None) -> None:
    """Export the JSON Schema of a render target's output.

    Examples:

        gallery schema export-output --target native
    """
    from gallery_core import export_native_output_schema, export_web_output_schema

    target = target.lower()
    output = Path(output_path or f"./schemas/{target}-output.schema.json")
    exporter = export_web_output_schema if target == "web" else export_native_output_schema

    try:
        exporter(output)
    except OSError as e:
        handle_write_error(str(output), e)

    success(f"{target.capitalize()} output schema exported to {output}")

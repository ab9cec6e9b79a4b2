"""gallery compile command - Generate render instructions for one target."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from gallery_cli.errors import EXIT_USER_ERROR, CLIError, handle_write_error
from gallery_cli.output import print_html, print_json, success

if TYPE_CHECKING:
    from gallery_core import TargetOutput


@click.command("compile")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./gallery.yaml",
    help="Path to gallery.yaml [default: ./gallery.yaml]",
)
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
    help="Output directory. Prints to stdout when omitted.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "html"], case_sensitive=False),
    default="json",
    help="Output format; html is only available for the web target [default: json]",
)
@click.option(
    "--columns",
    type=click.IntRange(min=1, max=12),
    default=None,
    help="Native grid column count (overrides GALLERY_NATIVE_COLUMNS)",
)
def compile_cmd(
    file_path: str,
    target: str,
    output_path: str | None,
    output_format: str,
    columns: int | None,
) -> None:
    """Compile gallery.yaml to render instructions.

    The web target produces DOM node descriptors (or an HTML fragment with
    --format html). The native target produces a column count plus an
    ordered data source for a grid adapter.

    Examples:

        gallery compile

        gallery compile --target native --columns 3

        gallery compile --target web --format html --output build/
    """
    target = target.lower()
    output_format = output_format.lower()

    if output_format == "html" and target != "web":
        raise CLIError("--format html is only supported for the web target")

    # Import here to avoid heavy imports at CLI startup
    from gallery_core import (
        CompilerConfig,
        ConfigurationError,
        GalleryCompiler,
        GalleryValidationError,
    )

    from gallery_cli.errors import handle_document_error, handle_validation_error

    try:
        config = CompilerConfig.from_env()
        if columns is not None:
            config = config.with_column_count(columns)
        result = GalleryCompiler(config).compile_file(file_path, target)
    except ConfigurationError as e:
        handle_document_error(e)

    if isinstance(result, GalleryValidationError):
        handle_validation_error(result, file_path)

    rendered = _render(result, output_format)

    if output_path is None:
        if output_format == "html":
            print_html(rendered)
        else:
            print_json(json.loads(rendered))
        return

    output = Path(output_path)
    artifact = output / _artifact_name(target, output_format)
    try:
        output.mkdir(parents=True, exist_ok=True)
        artifact.write_text(rendered)
    except OSError as e:
        handle_write_error(str(output), e)

    success(f"Compiled {target} gallery to {artifact}")


def _render(result: TargetOutput, output_format: str) -> str:
    """Serialise compile output at the CLI boundary.

    Web JSON drops ``text`` on nodes without text. Native JSON keeps
    ``caption: null`` so absent and empty captions stay distinguishable.
    """
    from gallery_core import NativeAdapterDescriptor, WebRenderInstructions

    if isinstance(result, WebRenderInstructions):
        if output_format == "html":
            return result.to_html() + "\n"
        data: Any = result.model_dump(mode="json", exclude_none=True)["nodes"]
    elif isinstance(result, NativeAdapterDescriptor):
        data = result.model_dump(mode="json", by_alias=True)
    else:
        raise CLIError(f"Unexpected compile output: {type(result).__name__}", EXIT_USER_ERROR)

    return json.dumps(data, indent=2)


def _artifact_name(target: str, output_format: str) -> str:
    if output_format == "html":
        return "gallery.html"
    return f"gallery.{target}.json"

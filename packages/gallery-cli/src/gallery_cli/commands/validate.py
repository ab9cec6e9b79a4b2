"""gallery validate command - Validate gallery.yaml."""

from __future__ import annotations

import click

from gallery_cli.output import print_gallery_table, success


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./gallery.yaml",
    help="Path to gallery.yaml [default: ./gallery.yaml]",
)
@click.option(
    "--show/--no-show",
    default=False,
    help="Print a table of the validated images.",
)
def validate(file_path: str, show: bool) -> None:
    """Validate gallery.yaml.

    Checks every image entry for a source and positive integer dimensions.
    Reports the first invalid entry by position.

    Examples:

        gallery validate

        gallery validate --file path/to/gallery.yaml --show
    """
    # Import here to avoid heavy imports at CLI startup
    from gallery_core import ConfigurationError, GalleryValidationError
    from gallery_core import validate as validate_entries
    from gallery_core.document import load_gallery_document

    from gallery_cli.errors import handle_document_error, handle_validation_error

    try:
        spec = validate_entries(load_gallery_document(file_path))
    except GalleryValidationError as e:
        handle_validation_error(e, file_path)
    except ConfigurationError as e:
        handle_document_error(e)

    if show:
        print_gallery_table(spec.entries)

    count = len(spec.entries)
    success(f"Gallery valid ({count} image{'s' if count != 1 else ''})")

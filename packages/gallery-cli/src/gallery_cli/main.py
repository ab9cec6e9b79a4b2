"""CLI entry point for gallery-runtime.

Defines the ``gallery`` command group. Subcommands are imported lazily so
``gallery --help`` does not pay for pydantic model construction.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from gallery_cli import __version__
from gallery_cli.logging_config import DEFAULT_LOG_LEVEL, LOG_LEVELS, configure_logging
from gallery_cli.output import set_no_color

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


class LazyGroup(rclick.RichGroup):
    """Click group that loads commands lazily.

    Commands are only imported when actually invoked, not at import time.

    Attributes:
        lazy_subcommands: Mapping of command names to "module.attribute" paths.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands: dict[str, str] = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return sorted names of registered and lazy commands."""
        commands = set(super().list_commands(ctx))
        commands.update(self.lazy_subcommands.keys())
        return sorted(commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, importing its module on first use.

        Args:
            ctx: Click context.
            cmd_name: Name of the command to get.

        Returns:
            Click Command instance, or None if not found.
        """
        cmd = super().get_command(ctx, cmd_name)  # type: ignore[arg-type]
        if cmd is not None:
            return cmd

        if cmd_name not in self.lazy_subcommands:
            return None

        module_name, attr_name = self.lazy_subcommands[cmd_name].rsplit(".", 1)
        mod = importlib.import_module(module_name)
        return getattr(mod, attr_name)  # type: ignore[no-any-return]


LAZY_COMMANDS = {
    "validate": "gallery_cli.commands.validate.validate",
    "compile": "gallery_cli.commands.compile.compile_cmd",
    "schema": "gallery_cli.commands.schema.schema",
}


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="gallery")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    help="Minimum level for log lines written to stderr [default: WARNING]",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Write log lines as JSON.",
)
def cli(log_level: str, log_json: bool) -> None:
    """Gallery Runtime - compile one gallery definition for web and native.

    Write the gallery once in gallery.yaml, then compile it to DOM node
    descriptors or to a native grid adapter descriptor.

    **Getting Started:**

    - `gallery validate` - Check your gallery.yaml
    - `gallery compile --target web` - Generate DOM node descriptors
    - `gallery compile --target native` - Generate a native adapter descriptor
    - `gallery schema export` - Export JSON Schema for IDE support
    """
    configure_logging(log_level=log_level, json_format=log_json)


if __name__ == "__main__":
    cli()

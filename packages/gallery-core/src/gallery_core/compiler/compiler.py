"""Gallery compiler for gallery-runtime.

This module implements the GalleryCompiler class that transforms raw gallery
records into target-specific render instructions:

    raw records -> GallerySpec -> RenderPlan -> TargetOutput

Validation failures are returned as values, never raised, so callers can
render a fallback UI.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import structlog

from gallery_core.adapters.factory import AdapterFactory
from gallery_core.compiler.plan_builder import build_plan
from gallery_core.compiler.validator import validate
from gallery_core.config import CompilerConfig
from gallery_core.document import load_gallery_document
from gallery_core.errors import GalleryValidationError
from gallery_core.schemas.target_output import Target, TargetOutput

logger = structlog.get_logger(__name__)


class GalleryCompiler:
    """Compile raw gallery records to render instructions for one target.

    Compilation includes:
    - Validating raw records into a GallerySpec (fail fast, no partial plan)
    - Building the RenderPlan once
    - Dispatching to exactly the adapter registered for the target

    The compiler holds only its configuration. Repeated calls with the same
    input and target produce structurally equal output.

    Example:
        >>> compiler = GalleryCompiler()
        >>> result = compiler.compile(
        ...     [{"src": "/a.jpg", "caption": "Cap A", "width": 200, "height": 150}],
        ...     "web",
        ... )
        >>> isinstance(result, WebRenderInstructions)
        True
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        """Initialize the GalleryCompiler.

        Args:
            config: Compiler configuration. Defaults to CompilerConfig().
        """
        self.config = config or CompilerConfig()

    def compile(
        self,
        raw_entries: Sequence[Any] | Iterator[Any],
        target: Target | str,
    ) -> TargetOutput | GalleryValidationError:
        """Compile raw records to the requested target.

        Args:
            raw_entries: Ordered untyped records (a sequence or an iterator).
            target: Render target ("web" or "native").

        Returns:
            WebRenderInstructions or NativeAdapterDescriptor on success, or
            the GalleryValidationError unchanged when validation fails.

        Raises:
            UnsupportedTargetError: If target has no registered adapter.
        """
        resolved = AdapterFactory.resolve_target(target)

        try:
            spec = validate(raw_entries)
        except GalleryValidationError as e:
            logger.info(
                "gallery_validation_failed",
                target=resolved.value,
                kind=e.kind.value,
                index=e.index,
            )
            return e

        plan = build_plan(spec)
        output = AdapterFactory.create(resolved, self.config).render(plan)

        logger.debug("gallery_compiled", target=resolved.value, slots=len(plan))
        return output

    def compile_file(
        self,
        path: Path | str,
        target: Target | str,
    ) -> TargetOutput | GalleryValidationError:
        """Load a gallery document and compile it.

        Args:
            path: Path to gallery.yaml or gallery.json.
            target: Render target.

        Returns:
            Same as compile().

        Raises:
            GalleryDocumentError: If the document cannot be loaded.
            UnsupportedTargetError: If target has no registered adapter.
        """
        return self.compile(load_gallery_document(path), target)


def compile_gallery(
    raw_entries: Sequence[Any] | Iterator[Any],
    target: Target | str,
    config: CompilerConfig | None = None,
) -> TargetOutput | GalleryValidationError:
    """Compile raw records with a one-off GalleryCompiler.

    Example:
        >>> descriptor = compile_gallery(records, Target.native)
        >>> len(descriptor.items) == len(records)
        True
    """
    return GalleryCompiler(config).compile(raw_entries, target)

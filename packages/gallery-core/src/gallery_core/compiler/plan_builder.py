"""Render plan builder.

Projects a validated GallerySpec onto a RenderPlan. This is the single
source-of-truth transformation: adapters read only the plan.
"""

from __future__ import annotations

from gallery_core.compiler.models import RenderPlan, Slot
from gallery_core.schemas.gallery_spec import GallerySpec, ImageEntry


def build_plan(spec: GallerySpec) -> RenderPlan:
    """Build the render plan for a validated gallery.

    Deterministic, order-preserving projection: one slot per entry, slot
    ``i`` taken from entry ``i``. No field is added or dropped, and caption
    absence (None) stays distinct from an empty caption.

    Args:
        spec: Validated gallery definition.

    Returns:
        New RenderPlan.

    Example:
        >>> plan = build_plan(spec)
        >>> plan.slots[0].src
        '/a.jpg'
    """
    return RenderPlan(
        slots=tuple(_to_slot(index, entry) for index, entry in enumerate(spec.entries)),
    )


def _to_slot(index: int, entry: ImageEntry) -> Slot:
    return Slot(
        index=index,
        src=entry.src,
        width=entry.width,
        height=entry.height,
        caption=entry.caption,
    )

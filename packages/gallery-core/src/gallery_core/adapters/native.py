"""Native (list/grid adapter) platform adapter.

Describes what a native grid adapter needs to bind views later. No image
decoding, fetching, or view instantiation happens here.
"""

from __future__ import annotations

from gallery_core.compiler.models import RenderPlan
from gallery_core.config import NativeAdapterConfig
from gallery_core.schemas.target_output import NativeAdapterDescriptor, NativeItem


class NativeAdapter:
    """Render a plan as a native adapter descriptor.

    Descriptor Fields:
        - columnCount: fixed grid column count from NativeAdapterConfig
        - items: one (src, width, height, caption) entry per slot, slot order

    Example:
        >>> descriptor = NativeAdapter(NativeAdapterConfig(column_count=3)).render(plan)
        >>> descriptor.model_dump(by_alias=True)["columnCount"]
        3
    """

    def __init__(self, config: NativeAdapterConfig | None = None) -> None:
        self.config = config or NativeAdapterConfig()

    def render(self, plan: RenderPlan) -> NativeAdapterDescriptor:
        """Generate the native adapter descriptor.

        Args:
            plan: Platform-neutral render plan.

        Returns:
            NativeAdapterDescriptor whose items align 1:1 with plan slots.
        """
        return NativeAdapterDescriptor(
            column_count=self.config.column_count,
            items=tuple(
                NativeItem(
                    src=slot.src,
                    width=slot.width,
                    height=slot.height,
                    caption=slot.caption,
                )
                for slot in plan.slots
            ),
        )

"""Render plan models for gallery-runtime.

The RenderPlan is the platform-neutral intermediate form derived once from a
GallerySpec. Every platform adapter reads only from the plan, never from the
raw entries, so no image data is typed twice for two platforms.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Slot(BaseModel):
    """One position in the render plan.

    Attributes:
        index: Zero-based position, equal to the entry's position in the GallerySpec.
        src: Image path or URI.
        width: Width in logical pixels.
        height: Height in logical pixels.
        caption: Caption text, or None when absent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: int = Field(..., ge=0, description="Zero-based slot position")
    src: str = Field(..., min_length=1, description="Image path or URI")
    width: int = Field(..., gt=0, description="Width in logical pixels")
    height: int = Field(..., gt=0, description="Height in logical pixels")
    caption: str | None = Field(default=None, description="Caption or None when absent")

    @property
    def has_caption(self) -> bool:
        """True when a caption node should be rendered, including an empty one."""
        return self.caption is not None


class RenderPlan(BaseModel):
    """Ordered, target-agnostic list of render slots.

    Contract Rules:
    - Model is immutable (frozen=True)
    - One slot per image entry, in entry order
    - ``slots[i].index == i``

    Example:
        >>> plan = build_plan(spec)
        >>> [slot.index for slot in plan.slots]
        [0, 1]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    slots: tuple[Slot, ...] = Field(
        ...,
        min_length=1,
        description="Render slots in entry order",
    )

    @model_validator(mode="after")
    def validate_slot_order(self) -> Self:
        """Ensure slot indices are contiguous and match their position.

        Returns:
            Self, unchanged.

        Raises:
            ValueError: If any slot index differs from its position.
        """
        for position, slot in enumerate(self.slots):
            if slot.index != position:
                raise ValueError(f"Slot at position {position} has index {slot.index}")
        return self

    def __len__(self) -> int:
        return len(self.slots)

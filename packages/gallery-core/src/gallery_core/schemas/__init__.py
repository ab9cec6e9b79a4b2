"""Schema models for gallery-runtime.

Input contract:
- ImageEntry, GallerySpec

Output contract:
- Target
- WebNode, WebRenderInstructions
- NativeItem, NativeAdapterDescriptor
- TargetOutput
"""

from __future__ import annotations

from gallery_core.schemas.gallery_spec import IMAGE_ENTRY_FIELDS, GallerySpec, ImageEntry
from gallery_core.schemas.target_output import (
    NativeAdapterDescriptor,
    NativeItem,
    Target,
    TargetOutput,
    WebNode,
    WebRenderInstructions,
)

__all__: list[str] = [
    # Input
    "IMAGE_ENTRY_FIELDS",
    "ImageEntry",
    "GallerySpec",
    # Output
    "Target",
    "TargetOutput",
    "WebNode",
    "WebRenderInstructions",
    "NativeItem",
    "NativeAdapterDescriptor",
]

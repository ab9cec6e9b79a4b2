"""Compiler module for gallery-runtime.

This module exports the compiler pipeline stages and models:
- validate: raw records -> GallerySpec
- build_plan: GallerySpec -> RenderPlan
- GalleryCompiler / compile_gallery: raw records -> TargetOutput
- RenderPlan, Slot: intermediate plan models
"""

from __future__ import annotations

from gallery_core.compiler.compiler import GalleryCompiler, compile_gallery
from gallery_core.compiler.models import RenderPlan, Slot
from gallery_core.compiler.plan_builder import build_plan
from gallery_core.compiler.validator import validate

__all__: list[str] = [
    # Compiler
    "GalleryCompiler",
    "compile_gallery",
    # Pipeline stages
    "validate",
    "build_plan",
    # Plan models
    "RenderPlan",
    "Slot",
]

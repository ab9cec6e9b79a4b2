"""gallery-core: Declarative gallery render compiler.

This package provides:
- GallerySpec: validated, platform-neutral gallery input
- RenderPlan: the single intermediate form every adapter reads
- WebAdapter / NativeAdapter: target-specific render instructions
- GalleryCompiler: raw records -> render instructions for one target
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Compiler and plan models
from gallery_core.compiler import (
    GalleryCompiler,
    RenderPlan,
    Slot,
    build_plan,
    compile_gallery,
    validate,
)

# Adapters
from gallery_core.adapters import (
    AdapterFactory,
    NativeAdapter,
    PlatformAdapter,
    WebAdapter,
)

# Configuration
from gallery_core.config import CompilerConfig, NativeAdapterConfig

# Document loading
from gallery_core.document import load_gallery_document

# Error types
from gallery_core.errors import (
    ConfigurationError,
    GalleryDocumentError,
    GalleryDocumentNotFoundError,
    GalleryDocumentReadError,
    GalleryError,
    GalleryValidationError,
    UnsupportedTargetError,
    ValidationErrorKind,
)

# JSON Schema export functions
from gallery_core.export import (
    export_gallery_document_schema,
    export_native_output_schema,
    export_web_output_schema,
)

# Schema models
from gallery_core.schemas import (
    GallerySpec,
    ImageEntry,
    NativeAdapterDescriptor,
    NativeItem,
    Target,
    TargetOutput,
    WebNode,
    WebRenderInstructions,
)

__all__ = [
    "__version__",
    # Compiler
    "GalleryCompiler",
    "compile_gallery",
    "validate",
    "build_plan",
    "RenderPlan",
    "Slot",
    # Adapters
    "AdapterFactory",
    "PlatformAdapter",
    "WebAdapter",
    "NativeAdapter",
    # Configuration
    "CompilerConfig",
    "NativeAdapterConfig",
    # Documents
    "load_gallery_document",
    # Errors
    "GalleryError",
    "GalleryValidationError",
    "ValidationErrorKind",
    "ConfigurationError",
    "GalleryDocumentError",
    "GalleryDocumentNotFoundError",
    "GalleryDocumentReadError",
    "UnsupportedTargetError",
    # JSON Schema exports
    "export_gallery_document_schema",
    "export_web_output_schema",
    "export_native_output_schema",
    # Schema models
    "GallerySpec",
    "ImageEntry",
    "Target",
    "TargetOutput",
    "WebNode",
    "WebRenderInstructions",
    "NativeItem",
    "NativeAdapterDescriptor",
]

"""Platform adapters for gallery-runtime.

Each adapter implements the PlatformAdapter protocol from base.py and reads
only from a RenderPlan.

Supported Targets:
    - Web: DOM node descriptors (div / img / span)
    - Native: column-count layout hint plus ordered data source

Example:
    >>> from gallery_core.adapters import AdapterFactory
    >>> adapter = AdapterFactory.create("web")
    >>> instructions = adapter.render(plan)
"""

from __future__ import annotations

from gallery_core.adapters.base import PlatformAdapter
from gallery_core.adapters.factory import AdapterFactory
from gallery_core.adapters.native import NativeAdapter
from gallery_core.adapters.web import WebAdapter

__all__ = [
    "AdapterFactory",
    "PlatformAdapter",
    "NativeAdapter",
    "WebAdapter",
]

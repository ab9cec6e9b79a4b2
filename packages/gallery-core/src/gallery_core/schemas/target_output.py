"""Target output models for gallery-runtime.

These are the descriptors handed to caller-owned rendering code:
- WebRenderInstructions: DOM node descriptors (tag, attributes, children)
- NativeAdapterDescriptor: column-count layout hint plus an ordered data source

Both are produced fresh per compile call. The compiler keeps no reference.
"""

from __future__ import annotations

from enum import Enum
from html import escape
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Target(str, Enum):
    """Supported render targets."""

    web = "web"
    native = "native"


class WebNode(BaseModel):
    """A single DOM node descriptor.

    Attributes:
        tag: Element tag name.
        attributes: Element attributes, all string valued.
        children: Ordered child descriptors.
        text: Text content, used by caption nodes. None means no text node.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["div", "img", "span"] = Field(
        ...,
        description="Element tag name",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Element attributes",
    )
    children: tuple[WebNode, ...] = Field(
        default=(),
        description="Ordered child node descriptors",
    )
    text: str | None = Field(
        default=None,
        description="Text content of the node",
    )

    def to_html(self) -> str:
        """Serialise this node and its children to an HTML fragment."""
        attrs = "".join(
            f' {name}="{escape(value, quote=True)}"' for name, value in self.attributes.items()
        )
        if self.tag == "img":
            return f"<img{attrs}>"

        inner = escape(self.text, quote=False) if self.text is not None else ""
        inner += "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


class WebRenderInstructions(BaseModel):
    """Ordered DOM node descriptors, one container per render slot.

    Realising these against a live document is the caller's job.

    Example:
        >>> instructions.to_html()
        '<div data-index="0"><img src="/a.jpg" width="200" height="150"></div>'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nodes: tuple[WebNode, ...] = Field(
        ...,
        description="Container node descriptors in slot order",
    )

    def to_html(self, separator: str = "\n") -> str:
        """Serialise all container nodes to an HTML fragment.

        Args:
            separator: String placed between top-level containers.

        Returns:
            HTML markup with attribute and text values escaped.
        """
        return separator.join(node.to_html() for node in self.nodes)


class NativeItem(BaseModel):
    """One data-source entry for a native list/grid adapter.

    ``caption=None`` marks the caption as absent, which is distinct from an
    empty caption ``""``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    src: str = Field(..., min_length=1, description="Image path or URI")
    width: int = Field(..., gt=0, description="Width in logical pixels")
    height: int = Field(..., gt=0, description="Height in logical pixels")
    caption: str | None = Field(default=None, description="Caption or None when absent")


class NativeAdapterDescriptor(BaseModel):
    """Layout hint plus ordered data source for native view binding.

    Serialise with ``model_dump(by_alias=True)`` to get the ``columnCount``
    key expected by native binding code.

    Attributes:
        column_count: Fixed grid column count.
        items: Data source aligned 1:1 with render slots.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    column_count: int = Field(
        ...,
        gt=0,
        alias="columnCount",
        description="Grid column count",
    )
    items: tuple[NativeItem, ...] = Field(
        ...,
        description="Data source entries in slot order",
    )


TargetOutput = WebRenderInstructions | NativeAdapterDescriptor

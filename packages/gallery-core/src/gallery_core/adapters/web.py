"""Web (DOM) platform adapter."""

from __future__ import annotations

from gallery_core.compiler.models import RenderPlan, Slot
from gallery_core.schemas.target_output import WebNode, WebRenderInstructions


class WebAdapter:
    """Render a plan as DOM node descriptors.

    Each slot becomes one ``div`` container holding an ``img`` descriptor and,
    when the slot has a caption (including an empty one), a ``span`` caption
    descriptor with that exact text. Logical pixels map 1:1 to the HTML
    ``width``/``height`` attributes, which are CSS pixels.

    Example:
        >>> instructions = WebAdapter().render(plan)
        >>> instructions.nodes[0].children[0].attributes["src"]
        '/a.jpg'
    """

    def render(self, plan: RenderPlan) -> WebRenderInstructions:
        """Generate web render instructions.

        Args:
            plan: Platform-neutral render plan.

        Returns:
            WebRenderInstructions with one container per slot.
        """
        return WebRenderInstructions(nodes=tuple(self._container(slot) for slot in plan.slots))

    def _container(self, slot: Slot) -> WebNode:
        children = [
            WebNode(
                tag="img",
                attributes={
                    "src": slot.src,
                    "width": str(slot.width),
                    "height": str(slot.height),
                },
            )
        ]
        if slot.has_caption:
            children.append(WebNode(tag="span", text=slot.caption))

        return WebNode(
            tag="div",
            attributes={"data-index": str(slot.index)},
            children=tuple(children),
        )

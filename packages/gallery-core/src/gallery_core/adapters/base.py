"""Base platform adapter contract for gallery-runtime.

Each render target (web, native) implements this protocol to turn a
RenderPlan into target-specific instructions.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from gallery_core.compiler.models import RenderPlan
from gallery_core.schemas.target_output import TargetOutput


@runtime_checkable
class PlatformAdapter(Protocol):
    """Protocol defining the interface for platform adapters.

    Adapters read only from the RenderPlan. They never see raw entries, and
    they never touch a live document, view hierarchy, or network.

    Example implementation:
        >>> class ListAdapter:
        ...     def render(self, plan: RenderPlan) -> TargetOutput:
        ...         ...
    """

    @abstractmethod
    def render(self, plan: RenderPlan) -> TargetOutput:
        """Render a plan to target-specific instructions.

        Args:
            plan: Platform-neutral render plan.

        Returns:
            New output value; one item per slot, in slot order.
        """
        ...

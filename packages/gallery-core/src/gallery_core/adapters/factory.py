"""Adapter factory for creating target-specific platform adapters."""

from __future__ import annotations

from collections.abc import Callable

from gallery_core.adapters.base import PlatformAdapter
from gallery_core.adapters.native import NativeAdapter
from gallery_core.adapters.web import WebAdapter
from gallery_core.config import CompilerConfig
from gallery_core.errors import UnsupportedTargetError
from gallery_core.schemas.target_output import Target


class AdapterFactory:
    """Factory for creating platform adapters.

    Provides a registry of the supported render targets and creates a new
    adapter instance per call.

    Supported Targets:
        - web: DOM node descriptors
        - native: list/grid adapter descriptor

    Example:
        >>> adapter = AdapterFactory.create("native", CompilerConfig())
        >>> descriptor = adapter.render(plan)
    """

    # Registry mapping targets to adapter constructors
    _ADAPTERS: dict[Target, Callable[[CompilerConfig], PlatformAdapter]] = {
        Target.web: lambda config: WebAdapter(),
        Target.native: lambda config: NativeAdapter(config.native),
    }

    @classmethod
    def resolve_target(cls, target: Target | str) -> Target:
        """Normalize a target name or enum member.

        Args:
            target: Target enum member or name (case-insensitive).

        Returns:
            Matching Target.

        Raises:
            UnsupportedTargetError: If no adapter is registered for target.
        """
        if isinstance(target, Target):
            return target

        try:
            return Target(str(target).strip().lower())
        except ValueError:
            raise UnsupportedTargetError(str(target), cls.supported_targets()) from None

    @classmethod
    def create(cls, target: Target | str, config: CompilerConfig | None = None) -> PlatformAdapter:
        """Create an adapter for the specified target.

        Args:
            target: Render target (e.g., "web", Target.native).
            config: Compiler configuration. Defaults to CompilerConfig().

        Returns:
            PlatformAdapter instance for the target.

        Raises:
            UnsupportedTargetError: If target is not supported.
        """
        resolved = cls.resolve_target(target)
        return cls._ADAPTERS[resolved](config or CompilerConfig())

    @classmethod
    def supported_targets(cls) -> list[str]:
        """Get list of supported target names."""
        return sorted(target.value for target in cls._ADAPTERS)

    @classmethod
    def is_supported(cls, target: Target | str) -> bool:
        """Check if a target is supported."""
        if isinstance(target, Target):
            return target in cls._ADAPTERS
        return str(target).strip().lower() in cls.supported_targets()

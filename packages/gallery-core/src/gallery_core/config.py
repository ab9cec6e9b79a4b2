"""Compiler configuration for gallery-runtime.

Holds the per-target knobs that are not part of the gallery itself, such as
the native grid column count. Values come from code, the environment
(GALLERY_NATIVE_COLUMNS), or CLI options.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from gallery_core.errors import ConfigurationError

# Environment variable overriding the native grid column count
NATIVE_COLUMNS_ENV_VAR = "GALLERY_NATIVE_COLUMNS"

DEFAULT_NATIVE_COLUMNS = 2
MAX_NATIVE_COLUMNS = 12


class NativeAdapterConfig(BaseModel):
    """Configuration for the native list/grid adapter.

    Attributes:
        column_count: Fixed number of grid columns.

    Example:
        >>> NativeAdapterConfig(column_count=3).column_count
        3
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    column_count: int = Field(
        default=DEFAULT_NATIVE_COLUMNS,
        ge=1,
        le=MAX_NATIVE_COLUMNS,
        description="Grid column count",
    )


class CompilerConfig(BaseModel):
    """Configuration for GalleryCompiler.

    Attributes:
        native: Native adapter configuration.

    Example:
        >>> config = CompilerConfig.from_env({"GALLERY_NATIVE_COLUMNS": "3"})
        >>> config.native.column_count
        3
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    native: NativeAdapterConfig = Field(
        default_factory=NativeAdapterConfig,
        description="Native adapter configuration",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CompilerConfig:
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            CompilerConfig with environment overrides applied.

        Raises:
            ConfigurationError: If GALLERY_NATIVE_COLUMNS is not a valid count.
        """
        if environ is None:
            environ = os.environ

        raw_columns = environ.get(NATIVE_COLUMNS_ENV_VAR)
        if raw_columns is None or not raw_columns.strip():
            return cls()

        try:
            native = NativeAdapterConfig(column_count=int(raw_columns))
        except (ValueError, PydanticValidationError) as e:
            raise ConfigurationError(
                f"Column count must be an integer between 1 and {MAX_NATIVE_COLUMNS}",
                field_path=NATIVE_COLUMNS_ENV_VAR,
                internal_details=f"{NATIVE_COLUMNS_ENV_VAR}={raw_columns!r}: {e}",
            ) from None

        return cls(native=native)

    def with_column_count(self, column_count: int) -> CompilerConfig:
        """Return a copy with a different native column count.

        Raises:
            pydantic.ValidationError: If the count is out of range.
        """
        return self.model_copy(update={"native": NativeAdapterConfig(column_count=column_count)})

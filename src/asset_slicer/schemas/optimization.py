"""Optimization configuration for asset slice generation.

The configuration is built once per run, either directly, from a YAML file,
or from environment variables, and passed explicitly to the generator.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_slicer.errors import ConfigurationError
from asset_slicer.schemas.targeting import OptimizationDimension

DIMENSIONS_ENV_VAR = "ASSET_SLICER_OPTIMIZATION_DIMENSIONS"
"""Comma separated optimization dimensions (e.g. "language,device_tier")."""

MAX_WORKERS_ENV_VAR = "ASSET_SLICER_MAX_WORKERS"
"""Number of modules sliced concurrently."""


class OptimizationConfig(BaseModel):
    """Which dimensions to split asset modules on, and how to run.

    Attributes:
        optimization_dimensions: Dimensions the caller wants asset modules
            split on. A dimension only has effect on modules whose
            directories declare at least one value for it.
        asset_modules_version_override: Version code stamped on every slice.
        max_workers: Number of modules sliced concurrently (1 = sequential).

    Example:
        >>> config = OptimizationConfig(optimization_dimensions=["language"])
        >>> OptimizationDimension.LANGUAGE in config.optimization_dimensions
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    optimization_dimensions: frozenset[OptimizationDimension] = Field(
        default=frozenset(),
        description="Dimensions to split asset modules on",
    )
    asset_modules_version_override: int | None = Field(
        default=None,
        ge=1,
        description="Version code override applied to every asset slice",
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Number of modules sliced concurrently",
    )

    @field_validator("optimization_dimensions", mode="before")
    @classmethod
    def normalize_dimensions(cls, v: Any) -> Any:
        """Accept dimension names case-insensitively."""
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(
                item.strip().lower() if isinstance(item, str) else item for item in v
            )
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> OptimizationConfig:
        """Load and validate OptimizationConfig from a YAML file.

        An empty file yields the default configuration.

        Args:
            path: Path to the configuration file.

        Returns:
            Validated OptimizationConfig instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            ConfigurationError: If the document is not a mapping.
            pydantic.ValidationError: If schema validation fails.

        Example:
            >>> config = OptimizationConfig.from_yaml("slicing.yaml")
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Optimization configuration must be a mapping",
                internal_details=f"{path} contains {type(data).__name__}",
            )
        return cls.model_validate(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> OptimizationConfig:
        """Build OptimizationConfig from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ).

        Returns:
            Validated OptimizationConfig instance.
        """
        if environ is None:
            environ = os.environ

        data: dict[str, Any] = {}

        raw_dimensions = environ.get(DIMENSIONS_ENV_VAR, "")
        dimensions = [name for name in raw_dimensions.split(",") if name.strip()]
        if dimensions:
            data["optimization_dimensions"] = dimensions

        raw_workers = environ.get(MAX_WORKERS_ENV_VAR)
        if raw_workers:
            data["max_workers"] = raw_workers

        return cls.model_validate(data)

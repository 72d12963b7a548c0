"""Pydantic schemas for asset-slicer.

This module exports the input descriptors, configuration and output contract:
- BundleModule and its parts: module descriptors read by the generator
- OptimizationConfig: dimensions to split on
- DirectoryTargeting / SliceTargeting: targeting models
- AssetSlice: output artifact
"""

from __future__ import annotations

from asset_slicer.schemas.asset_slice import AssetSlice, SplitType
from asset_slicer.schemas.module import (
    AssetsConfig,
    BundleModule,
    DeliveryType,
    ModuleEntry,
    ModuleManifest,
    ModuleType,
    TargetedAssetsDirectory,
)
from asset_slicer.schemas.optimization import (
    DIMENSIONS_ENV_VAR,
    MAX_WORKERS_ENV_VAR,
    OptimizationConfig,
)
from asset_slicer.schemas.targeting import (
    SUFFIX_KEYS,
    TARGETING_MODELS,
    CountrySetTargeting,
    DeviceTierTargeting,
    DimensionTargeting,
    DirectoryTargeting,
    LanguageTargeting,
    OptimizationDimension,
    SliceTargeting,
    TextureCompressionFormat,
    TextureCompressionFormatTargeting,
    parse_directory_targeting,
    strip_targeting_suffixes,
)

__all__: list[str] = [
    # Module descriptors
    "BundleModule",
    "ModuleManifest",
    "ModuleEntry",
    "ModuleType",
    "DeliveryType",
    "AssetsConfig",
    "TargetedAssetsDirectory",
    # Configuration
    "OptimizationConfig",
    "DIMENSIONS_ENV_VAR",
    "MAX_WORKERS_ENV_VAR",
    # Targeting
    "OptimizationDimension",
    "TextureCompressionFormat",
    "DirectoryTargeting",
    "SliceTargeting",
    "DimensionTargeting",
    "LanguageTargeting",
    "TextureCompressionFormatTargeting",
    "DeviceTierTargeting",
    "CountrySetTargeting",
    "TARGETING_MODELS",
    "SUFFIX_KEYS",
    "parse_directory_targeting",
    "strip_targeting_suffixes",
    # Output
    "AssetSlice",
    "SplitType",
]

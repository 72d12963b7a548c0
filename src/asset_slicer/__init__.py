"""asset-slicer: Asset slice generation for remote asset modules.

This package provides:
- BundleModule: Descriptor of a module and its asset directories
- OptimizationConfig: Dimensions to split asset modules on
- AssetSliceGenerator: Transform modules -> AssetSlices
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Error types
from asset_slicer.errors import (
    ConfigurationError,
    InvariantViolationError,
    SlicerError,
)

# JSON Schema export functions
from asset_slicer.export import (
    export_asset_slice_schema,
    export_optimization_config_schema,
)

# Schema models
from asset_slicer.schemas import (
    AssetsConfig,
    AssetSlice,
    BundleModule,
    DeliveryType,
    DirectoryTargeting,
    ModuleEntry,
    ModuleManifest,
    OptimizationConfig,
    OptimizationDimension,
    SliceTargeting,
    SplitType,
    TargetedAssetsDirectory,
    TextureCompressionFormat,
)

# Generator
from asset_slicer.slicer import AssetSliceGenerator, generate

__all__ = [
    "__version__",
    # Generator
    "AssetSliceGenerator",
    "generate",
    # Errors
    "SlicerError",
    "ConfigurationError",
    "InvariantViolationError",
    # JSON Schema exports
    "export_asset_slice_schema",
    "export_optimization_config_schema",
    # Schema models
    "BundleModule",
    "ModuleManifest",
    "ModuleEntry",
    "DeliveryType",
    "AssetsConfig",
    "TargetedAssetsDirectory",
    "DirectoryTargeting",
    "OptimizationDimension",
    "TextureCompressionFormat",
    "OptimizationConfig",
    "SliceTargeting",
    "AssetSlice",
    "SplitType",
]

"""Asset slicing pipeline.

This module exports the generator and its pipeline stages:
- AssetSliceGenerator / generate: slice every remote asset module
- filter_asset_modules: select remote asset modules
- build_directory_index: map directories to targeting
- select_split_dimensions: choose the dimensions to split on
- partition_directories: group directories by targeting value
- build_asset_slice: build one slice per partition
"""

from __future__ import annotations

from asset_slicer.slicer.dimension_selector import select_split_dimensions
from asset_slicer.slicer.directory_index import build_directory_index, targeted_dimensions
from asset_slicer.slicer.generator import AssetSliceGenerator, generate
from asset_slicer.slicer.module_filter import filter_asset_modules, is_remote_asset_module
from asset_slicer.slicer.partitioner import (
    DirectoryPartition,
    ModulePartitioning,
    partition_directories,
)
from asset_slicer.slicer.slice_builder import build_asset_slice, build_slice_targeting

__all__: list[str] = [
    # Generator
    "AssetSliceGenerator",
    "generate",
    # Pipeline stages
    "filter_asset_modules",
    "is_remote_asset_module",
    "build_directory_index",
    "targeted_dimensions",
    "select_split_dimensions",
    "partition_directories",
    "DirectoryPartition",
    "ModulePartitioning",
    "build_asset_slice",
    "build_slice_targeting",
]

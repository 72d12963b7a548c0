"""Asset slice generation for remote asset modules.

Runs the slicing pipeline for every remote asset module:

1. Filter modules to remote asset packs
2. Index each module's asset directories and their targeting
3. Select the dimensions to split on
4. Partition directories by targeting value
5. Build one AssetSlice per partition

Modules are independent and may be sliced concurrently; the output always
follows input module order.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

import structlog

from asset_slicer.schemas.asset_slice import AssetSlice
from asset_slicer.schemas.module import BundleModule
from asset_slicer.schemas.optimization import OptimizationConfig
from asset_slicer.slicer.dimension_selector import select_split_dimensions
from asset_slicer.slicer.directory_index import build_directory_index, targeted_dimensions
from asset_slicer.slicer.module_filter import filter_asset_modules
from asset_slicer.slicer.partitioner import partition_directories
from asset_slicer.slicer.slice_builder import build_asset_slice

logger = structlog.get_logger(__name__)


class AssetSliceGenerator:
    """Generate asset slices for the remote asset modules of a bundle.

    Attributes:
        modules: All modules of the bundle, in order.
        config: Optimization configuration for this run.

    Example:
        >>> generator = AssetSliceGenerator(
        ...     modules,
        ...     OptimizationConfig(optimization_dimensions=["language"]),
        ... )
        >>> slices = generator.generate_asset_slices()
    """

    def __init__(self, modules: Sequence[BundleModule], config: OptimizationConfig) -> None:
        """Initialize the generator.

        Args:
            modules: All modules of the bundle. Modules that are not remote
                asset packs are ignored.
            config: Optimization configuration.
        """
        self.modules = tuple(modules)
        self.config = config
        self._log = logger.bind(component="asset_slice_generator")

    def generate_asset_slices(self) -> list[AssetSlice]:
        """Generate the asset slices of every remote asset module.

        Returns:
            Slices of each qualifying module in partition order, concatenated
            in input module order.

        Raises:
            ConfigurationError: If a qualifying module cannot be sliced as declared.
            InvariantViolationError: If slicing a module would overwrite an entry.
        """
        asset_modules = filter_asset_modules(self.modules)

        self._log.info(
            "asset_slicing_started",
            modules=len(self.modules),
            asset_modules=len(asset_modules),
            dimensions=sorted(dimension.value for dimension in self.config.optimization_dimensions),
            max_workers=self.config.max_workers,
        )

        if self.config.max_workers > 1 and len(asset_modules) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                per_module = list(executor.map(self.slice_module, asset_modules))
        else:
            per_module = [self.slice_module(module) for module in asset_modules]

        slices = [asset_slice for module_slices in per_module for asset_slice in module_slices]

        self._log.info("asset_slicing_completed", slices=len(slices))
        return slices

    def slice_module(self, module: BundleModule) -> list[AssetSlice]:
        """Generate the slices of one asset module.

        Args:
            module: A remote asset module.

        Returns:
            One slice per directory partition, in partition order.
        """
        index = build_directory_index(module)
        split_dimensions = select_split_dimensions(
            self.config.optimization_dimensions,
            targeted_dimensions(index),
        )
        partitioning = partition_directories(index, split_dimensions)

        slices = [
            build_asset_slice(
                module,
                partition,
                partitioning,
                version_code=self.config.asset_modules_version_override,
            )
            for partition in partitioning.partitions
        ]

        self._log.debug(
            "module_sliced",
            module=module.name,
            split_dimensions=[dimension.value for dimension in split_dimensions],
            slices=len(slices),
        )
        return slices


def generate(
    modules: Sequence[BundleModule],
    config: OptimizationConfig | None = None,
) -> list[AssetSlice]:
    """Generate asset slices for a bundle's modules.

    Convenience wrapper around AssetSliceGenerator.

    Args:
        modules: All modules of the bundle.
        config: Optimization configuration (defaults to no split dimensions).

    Returns:
        The generated asset slices.
    """
    if config is None:
        config = OptimizationConfig()
    return AssetSliceGenerator(modules, config).generate_asset_slices()

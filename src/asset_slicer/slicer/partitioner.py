"""Grouping of a module's asset directories into slices.

Directories with equal values across the split dimensions land in the same
partition. A directory without a value for a split dimension is grouped under
"untargeted" (None) for it, a partition distinct from every concrete value.

Partitions are ordered by key with None first, so identical input always
yields identical slice order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from asset_slicer.schemas.targeting import DirectoryTargeting, OptimizationDimension

logger = logging.getLogger(__name__)

PartitionKey = tuple[Any, ...]
"""Per split dimension, the concrete value or None for untargeted."""


@dataclass(frozen=True)
class DirectoryPartition:
    """Directories sharing one partition key.

    Attributes:
        key: One value (or None) per split dimension, in split order.
        directories: Directory paths of the partition, sorted.
    """

    key: PartitionKey
    directories: tuple[str, ...]

    def value_for(
        self,
        dimension: OptimizationDimension,
        split_dimensions: tuple[OptimizationDimension, ...],
    ) -> Any:
        """Return the partition's value for a split dimension."""
        return self.key[split_dimensions.index(dimension)]


@dataclass(frozen=True)
class ModulePartitioning:
    """Result of partitioning one module.

    Attributes:
        split_dimensions: Dimensions the module is split on.
        partitions: Partitions in deterministic order.
        observed_values: Per split dimension, every concrete value declared by
            some directory of the module, sorted.
    """

    split_dimensions: tuple[OptimizationDimension, ...]
    partitions: tuple[DirectoryPartition, ...]
    observed_values: dict[OptimizationDimension, tuple[Any, ...]]

    @property
    def is_split(self) -> bool:
        """Whether the module is split on any dimension."""
        return bool(self.split_dimensions)


def partition_directories(
    index: dict[str, DirectoryTargeting],
    split_dimensions: tuple[OptimizationDimension, ...],
) -> ModulePartitioning:
    """Group directories by their values across the split dimensions.

    The whole index is read before any partition is built, since the
    observed values of a dimension depend on every directory.

    Args:
        index: Directory path to targeting, for one module.
        split_dimensions: Dimensions to split on, in canonical order.

    Returns:
        ModulePartitioning with one partition per distinct key. With no split
        dimensions there is exactly one partition holding every directory.
    """
    groups: dict[PartitionKey, list[str]] = {}
    observed: dict[OptimizationDimension, set[Any]] = {
        dimension: set() for dimension in split_dimensions
    }

    for path, targeting in index.items():
        key = tuple(targeting.value_for(dimension) for dimension in split_dimensions)
        groups.setdefault(key, []).append(path)

        for dimension, value in zip(split_dimensions, key):
            if value is not None:
                observed[dimension].add(value)

    partitions = tuple(
        DirectoryPartition(key=key, directories=tuple(sorted(groups[key])))
        for key in sorted(groups, key=_sort_key)
    )

    logger.debug(
        f"Partitioned {len(index)} directories into {len(partitions)} partitions "
        f"over {[dimension.value for dimension in split_dimensions]}"
    )

    return ModulePartitioning(
        split_dimensions=split_dimensions,
        partitions=partitions,
        observed_values={
            dimension: tuple(sorted(values)) for dimension, values in observed.items()
        },
    )


def _sort_key(key: PartitionKey) -> tuple[tuple[int, Any], ...]:
    """Order untargeted (None) before concrete values, per dimension."""
    return tuple((0, "") if value is None else (1, value) for value in key)

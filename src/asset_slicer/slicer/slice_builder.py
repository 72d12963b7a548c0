"""Construction of one AssetSlice from one directory partition."""

from __future__ import annotations

import posixpath

from asset_slicer.errors import InvariantViolationError
from asset_slicer.schemas.asset_slice import AssetSlice, SplitType
from asset_slicer.schemas.module import BundleModule, ModuleEntry
from asset_slicer.schemas.targeting import (
    TARGETING_MODELS,
    SliceTargeting,
    strip_targeting_suffixes,
)
from asset_slicer.slicer.partitioner import DirectoryPartition, ModulePartitioning


def build_asset_slice(
    module: BundleModule,
    partition: DirectoryPartition,
    partitioning: ModulePartitioning,
    *,
    version_code: int | None = None,
) -> AssetSlice:
    """Build the slice holding the entries of one partition.

    Entry paths lose the suffixes of the split dimensions, so
    ``assets/img#lang_en/a.png`` ships as ``assets/img/a.png``. Suffixes of
    dimensions the module is not split on are kept, as their variants ship
    side by side in the same slice.

    Args:
        module: The module being sliced.
        partition: The partition to build a slice for.
        partitioning: The module's full partitioning (split dimensions and
            observed values).
        version_code: Optional version code override.

    Returns:
        The AssetSlice. It is the master slice iff the module is not split.

    Raises:
        InvariantViolationError: If two entries end up at the same final path.
    """
    return AssetSlice(
        module_name=module.name,
        split_type=SplitType.ASSET_SLICE,
        master_split=not partitioning.is_split,
        targeting=build_slice_targeting(partition, partitioning),
        entries=_collect_entries(module, partition, partitioning),
        version_code=version_code,
    )


def build_slice_targeting(
    partition: DirectoryPartition,
    partitioning: ModulePartitioning,
) -> SliceTargeting:
    """Build the targeting metadata of a partition.

    Alternatives list every value of the dimension observed in the module,
    except the partition's own.
    """
    records = {}
    for dimension in partitioning.split_dimensions:
        value = partition.value_for(dimension, partitioning.split_dimensions)
        alternatives = tuple(
            observed for observed in partitioning.observed_values[dimension] if observed != value
        )
        records[dimension.value] = TARGETING_MODELS[dimension](
            value=value,
            alternatives=alternatives,
        )
    return SliceTargeting(**records)


def _collect_entries(
    module: BundleModule,
    partition: DirectoryPartition,
    partitioning: ModulePartitioning,
) -> tuple[ModuleEntry, ...]:
    """Collect and rewrite the entries under the partition's directories."""
    directories = set(partition.directories)
    stripped_dimensions = frozenset(partitioning.split_dimensions)

    final_entries: dict[str, ModuleEntry] = {}
    for entry in sorted(module.entries, key=lambda e: e.path):
        if entry.directory not in directories:
            continue

        directory = strip_targeting_suffixes(entry.directory, stripped_dimensions)
        final_path = posixpath.join(directory, posixpath.basename(entry.path))

        existing = final_entries.get(final_path)
        if existing is not None:
            raise InvariantViolationError(
                "Asset entries collide after suffix stripping",
                module_name=module.name,
                path=final_path,
                internal_details=f"'{existing.content_ref}' and '{entry.content_ref}'",
            )
        final_entries[final_path] = ModuleEntry(path=final_path, content_ref=entry.content_ref)

    return tuple(final_entries.values())

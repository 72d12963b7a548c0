"""Per-module index of asset directories and their targeting.

Directories come from two places: the module's assets config, and the parent
directory of every entry. A directory's targeting is what the assets config
declares for it and for its declared ancestors, merged with what its path
suffixes encode; all of these must agree.
"""

from __future__ import annotations

import logging
from typing import Any

from asset_slicer.errors import ConfigurationError
from asset_slicer.schemas.module import BundleModule
from asset_slicer.schemas.targeting import (
    DirectoryTargeting,
    OptimizationDimension,
    parse_directory_targeting,
)

logger = logging.getLogger(__name__)


def build_directory_index(module: BundleModule) -> dict[str, DirectoryTargeting]:
    """Map every asset directory of a module to its targeting.

    Targeting declared for a directory also applies to every directory below
    it, so ``assets/voice/sub`` inherits what ``assets/voice`` declares.

    Args:
        module: A module that passed the asset module filter.

    Returns:
        Dictionary from directory path to DirectoryTargeting, ordered by path.

    Raises:
        ConfigurationError: If the module has no directories, a directory
            suffix is malformed, or declared targeting contradicts a suffix
            or an ancestor's declaration.

    Example:
        >>> index = build_directory_index(module)
        >>> index["assets/images#lang_en"].language
        'en'
    """
    declared: dict[str, DirectoryTargeting] = {}
    if module.assets_config is not None:
        declared = {
            directory.path: directory.targeting for directory in module.assets_config.directories
        }

    paths = set(declared) | {entry.directory for entry in module.entries}
    if not paths:
        raise ConfigurationError(
            "Asset module declares no asset directories",
            module_name=module.name,
        )

    index: dict[str, DirectoryTargeting] = {}
    for path in sorted(paths):
        try:
            encoded = parse_directory_targeting(path)
        except ConfigurationError as e:
            raise ConfigurationError(e.reason, module_name=module.name, directory=path) from e

        index[path] = _merge_targeting(
            module.name,
            path,
            _inherited_targeting(module.name, path, declared),
            encoded,
            source="the directory suffix",
        )

    logger.debug(f"Indexed {len(index)} asset directories for module '{module.name}'")
    return index


def targeted_dimensions(index: dict[str, DirectoryTargeting]) -> frozenset[OptimizationDimension]:
    """Return the dimensions with at least one non-default value in the index."""
    dimensions: set[OptimizationDimension] = set()
    for targeting in index.values():
        dimensions.update(targeting.targeted_dimensions())
    return frozenset(dimensions)


def _inherited_targeting(
    module_name: str,
    path: str,
    declared: dict[str, DirectoryTargeting],
) -> DirectoryTargeting:
    """Merge the declared targeting of a directory and of its declared ancestors."""
    targeting = DirectoryTargeting()
    segments = path.split("/")
    for depth in range(1, len(segments) + 1):
        ancestor = "/".join(segments[:depth])
        if ancestor in declared:
            targeting = _merge_targeting(
                module_name,
                path,
                declared[ancestor],
                targeting,
                source="the declaration of an ancestor directory",
            )
    return targeting


def _merge_targeting(
    module_name: str,
    path: str,
    declared: DirectoryTargeting,
    other: DirectoryTargeting,
    *,
    source: str,
) -> DirectoryTargeting:
    """Combine declared targeting of one directory with targeting from another source."""
    values: dict[str, Any] = {}
    for dimension in OptimizationDimension:
        declared_value = declared.value_for(dimension)
        other_value = other.value_for(dimension)

        if declared_value is not None and other_value is not None and declared_value != other_value:
            raise ConfigurationError(
                f"Declared {dimension.value} targeting contradicts {source}",
                module_name=module_name,
                directory=path,
                internal_details=f"declared={declared_value!r}, other={other_value!r}",
            )

        value = declared_value if declared_value is not None else other_value
        if value is not None:
            values[dimension.value] = value

    return DirectoryTargeting(**values)

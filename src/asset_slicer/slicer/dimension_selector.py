"""Choice of the dimensions a module is actually split on."""

from __future__ import annotations

from collections.abc import Iterable

from asset_slicer.schemas.targeting import OptimizationDimension


def select_split_dimensions(
    requested: Iterable[OptimizationDimension],
    present: Iterable[OptimizationDimension],
) -> tuple[OptimizationDimension, ...]:
    """Intersect requested dimensions with those the module's directories use.

    Splitting on a dimension nobody asked for, or one without any value in the
    module, would produce spurious slices. An empty result means the module is
    not split.

    Args:
        requested: Dimensions from the optimization configuration.
        present: Dimensions with at least one non-default directory value.

    Returns:
        The split dimensions in canonical (enum) order.

    Example:
        >>> select_split_dimensions(
        ...     {OptimizationDimension.LANGUAGE},
        ...     {OptimizationDimension.LANGUAGE, OptimizationDimension.DEVICE_TIER},
        ... )
        (<OptimizationDimension.LANGUAGE: 'language'>,)
    """
    selected = set(requested) & set(present)
    return tuple(dimension for dimension in OptimizationDimension if dimension in selected)

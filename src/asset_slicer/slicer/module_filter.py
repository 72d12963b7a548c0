"""Selection of modules eligible for asset slicing."""

from __future__ import annotations

from collections.abc import Iterable

from asset_slicer.schemas.module import BundleModule, DeliveryType, ModuleType

_REMOTE_ASSET_TYPE_ATTRIBUTE = "remote-asset"

_REMOTE_DELIVERY_TYPES = frozenset({DeliveryType.FAST_FOLLOW, DeliveryType.ON_DEMAND})


def is_remote_asset_module(module: BundleModule) -> bool:
    """Whether a module is an asset pack delivered outside the base install.

    Asset packs without a declared delivery type are installed with the base
    artifacts, like install-time packs, and are left to other generators.
    """
    manifest = module.manifest
    if manifest.module_type is not ModuleType.ASSET_MODULE:
        return False
    if manifest.type_attribute == _REMOTE_ASSET_TYPE_ATTRIBUTE:
        return True
    return manifest.delivery_type in _REMOTE_DELIVERY_TYPES


def filter_asset_modules(modules: Iterable[BundleModule]) -> list[BundleModule]:
    """Return the remote asset modules, in input order."""
    return [module for module in modules if is_remote_asset_module(module)]

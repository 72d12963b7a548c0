"""Bundle module descriptors consumed by the asset slice generator.

Modules are produced by the module-loading stage of the packaging tool. This
module only models the parts the generator reads: the manifest's module type
and delivery attributes, the assets config, and the entry listing.
"""

from __future__ import annotations

import posixpath
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from asset_slicer.schemas.targeting import DirectoryTargeting

MODULE_NAME_PATTERN = r"^[a-zA-Z][a-zA-Z0-9_]*$"
"""Regex pattern for module names."""


class ModuleType(str, Enum):
    """Kind of module, derived from the manifest type attribute."""

    FEATURE = "feature"
    ASSET_MODULE = "asset_module"


class DeliveryType(str, Enum):
    """How a module reaches the device."""

    INSTALL_TIME = "install_time"
    FAST_FOLLOW = "fast_follow"
    ON_DEMAND = "on_demand"


_ASSET_MODULE_TYPE_ATTRIBUTES = frozenset({"asset-pack", "remote-asset"})


class ModuleEntry(BaseModel):
    """A file entry of a module.

    Attributes:
        path: Relative POSIX path of the file within the module.
        content_ref: Opaque reference to the stored content. Never read by
            the generator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., min_length=1, description="Relative POSIX entry path")
    content_ref: str = Field(default="", description="Reference to stored content")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Reject absolute paths, directories and empty segments."""
        if v.startswith("/") or v.endswith("/") or "//" in v:
            msg = f"Entry path must be a relative file path, got '{v}'"
            raise ValueError(msg)
        return v

    @property
    def directory(self) -> str:
        """Directory holding this entry ('' for entries at the module root)."""
        return posixpath.dirname(self.path)


class TargetedAssetsDirectory(BaseModel):
    """An asset directory and its declared targeting."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., min_length=1, description="Asset directory path")
    targeting: DirectoryTargeting = Field(
        default_factory=DirectoryTargeting,
        description="Declared per-dimension targeting",
    )


class AssetsConfig(BaseModel):
    """Targeted asset directories declared by a module."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    directories: tuple[TargetedAssetsDirectory, ...] = Field(default=())

    @field_validator("directories")
    @classmethod
    def validate_unique_paths(
        cls, v: tuple[TargetedAssetsDirectory, ...]
    ) -> tuple[TargetedAssetsDirectory, ...]:
        """Each directory may be declared only once."""
        paths = [directory.path for directory in v]
        if len(set(paths)) != len(paths):
            msg = "Asset directory paths must be unique"
            raise ValueError(msg)
        return v


class ModuleManifest(BaseModel):
    """Manifest attributes read by the generator.

    Attributes:
        package_name: Application package name.
        type_attribute: Module type attribute (e.g. "asset-pack", "feature").
        delivery_type: Declared delivery, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_name: str = Field(..., min_length=1)
    type_attribute: str | None = Field(default=None)
    delivery_type: DeliveryType | None = Field(default=None)

    @property
    def module_type(self) -> ModuleType:
        """Module type implied by the type attribute (feature when absent)."""
        if self.type_attribute in _ASSET_MODULE_TYPE_ATTRIBUTES:
            return ModuleType.ASSET_MODULE
        return ModuleType.FEATURE


class BundleModule(BaseModel):
    """An immutable module descriptor.

    Example:
        >>> module = BundleModule(
        ...     name="asset_module",
        ...     manifest=ModuleManifest(package_name="com.test.app", type_attribute="remote-asset"),
        ...     entries=(ModuleEntry(path="assets/some_asset.txt"),),
        ... )
        >>> module.entry_paths()
        ['assets/some_asset.txt']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., pattern=MODULE_NAME_PATTERN, description="Unique module name")
    manifest: ModuleManifest
    entries: tuple[ModuleEntry, ...] = Field(default=())
    assets_config: AssetsConfig | None = Field(default=None)

    @model_validator(mode="after")
    def validate_unique_entries(self) -> BundleModule:
        """Entry paths must be unique within a module."""
        paths = self.entry_paths()
        if len(set(paths)) != len(paths):
            msg = f"Module '{self.name}' contains duplicate entry paths"
            raise ValueError(msg)
        return self

    def entry_paths(self) -> list[str]:
        """Return the entry paths in declaration order."""
        return [entry.path for entry in self.entries]

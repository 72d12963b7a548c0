"""Asset slice output contract.

AssetSlice is the artifact handed to the packaging stage and to device
targeting assembly. One is produced per partition of a module's asset
directories.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_slicer.schemas.module import ModuleEntry
from asset_slicer.schemas.targeting import SliceTargeting


class SplitType(str, Enum):
    """Kind of artifact produced."""

    ASSET_SLICE = "asset_slice"


class AssetSlice(BaseModel):
    """One installable artifact cut from an asset module.

    Attributes:
        module_name: Name of the module the slice was cut from.
        split_type: Always SplitType.ASSET_SLICE.
        master_split: True for the single slice of a module that was not split.
        targeting: Per-dimension value and alternatives of this slice.
        entries: Final entries, paths already stripped of split suffixes.
        version_code: Version code override for asset modules, if configured.

    Example:
        >>> asset_slice = AssetSlice(
        ...     module_name="asset_module",
        ...     master_split=True,
        ...     entries=(ModuleEntry(path="assets/some_asset.txt"),),
        ... )
        >>> asset_slice.entry_paths()
        ['assets/some_asset.txt']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    module_name: str = Field(..., min_length=1, description="Source module name")
    split_type: SplitType = Field(
        default=SplitType.ASSET_SLICE,
        description="Artifact kind",
    )
    master_split: bool = Field(
        default=False,
        description="Whether this is the module's only, untargeted slice",
    )
    targeting: SliceTargeting = Field(
        default_factory=SliceTargeting,
        description="Targeting metadata for device matching",
    )
    entries: tuple[ModuleEntry, ...] = Field(
        default=(),
        description="Final entries of the slice",
    )
    version_code: int | None = Field(
        default=None,
        ge=1,
        description="Asset modules version code override",
    )

    @field_validator("entries")
    @classmethod
    def validate_unique_entry_paths(cls, v: tuple[ModuleEntry, ...]) -> tuple[ModuleEntry, ...]:
        """Entry paths must be unique within a slice."""
        paths = [entry.path for entry in v]
        if len(set(paths)) != len(paths):
            msg = "Asset slice entry paths must be unique"
            raise ValueError(msg)
        return v

    def entry_paths(self) -> list[str]:
        """Return the final entry paths in order."""
        return [entry.path for entry in self.entries]

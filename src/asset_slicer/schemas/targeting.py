"""Targeting models for asset-slicer.

This module defines the targeting dimensions asset directories can vary on,
the per-directory targeting declared by a module, and the targeting metadata
attached to every generated asset slice.

Asset directories encode their targeting in path suffixes, one per segment:

    assets/textures#tcf_astc/lang#lang_en

The suffix codec in this module parses such paths into DirectoryTargeting and
strips suffixes back out of final entry paths.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from asset_slicer.errors import ConfigurationError

LANGUAGE_PATTERN = r"^[a-zA-Z]{2,3}(-[a-zA-Z0-9]{2,8})*$"
"""Regex pattern for language codes (e.g. en, fil, pt-BR)."""

COUNTRY_SET_PATTERN = r"^[a-zA-Z][a-zA-Z0-9_]*$"
"""Regex pattern for country set names."""

SUFFIX_SEPARATOR = "#"
"""Separator between a directory name and its targeting suffix."""


class OptimizationDimension(str, Enum):
    """Axes of device variation asset directories can be split on.

    Member order is the canonical dimension order used for partition keys.
    Each value matches the corresponding DirectoryTargeting field name.
    """

    LANGUAGE = "language"
    TEXTURE_COMPRESSION_FORMAT = "texture_compression_format"
    DEVICE_TIER = "device_tier"
    COUNTRY_SET = "country_set"


class TextureCompressionFormat(str, Enum):
    """Texture compression formats usable as directory targeting."""

    etc1_rgb8 = "etc1_rgb8"
    paletted = "paletted"
    three_dc = "3dc"
    atc = "atc"
    latc = "latc"
    dxt1 = "dxt1"
    s3tc = "s3tc"
    pvrtc = "pvrtc"
    astc = "astc"
    etc2 = "etc2"


SUFFIX_KEYS: dict[OptimizationDimension, str] = {
    OptimizationDimension.LANGUAGE: "lang",
    OptimizationDimension.TEXTURE_COMPRESSION_FORMAT: "tcf",
    OptimizationDimension.DEVICE_TIER: "tier",
    OptimizationDimension.COUNTRY_SET: "countries",
}
"""Directory suffix key for each dimension (``name#<key>_<value>``)."""

_DIMENSIONS_BY_SUFFIX_KEY = {key: dimension for dimension, key in SUFFIX_KEYS.items()}


class DirectoryTargeting(BaseModel):
    """Targeting declared for one asset directory.

    Each dimension is optional; an absent value means the directory is
    untargeted for that dimension.

    Attributes:
        language: Language code.
        texture_compression_format: Texture compression format.
        device_tier: Device tier (0 is the lowest tier).
        country_set: Country set name.

    Example:
        >>> targeting = DirectoryTargeting(language="en")
        >>> targeting.targeted_dimensions()
        frozenset({<OptimizationDimension.LANGUAGE: 'language'>})
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: str | None = Field(
        default=None,
        pattern=LANGUAGE_PATTERN,
        description="Language code (e.g. en, pt-BR)",
    )
    texture_compression_format: TextureCompressionFormat | None = Field(
        default=None,
        description="Texture compression format",
    )
    device_tier: int | None = Field(
        default=None,
        ge=0,
        description="Device tier",
    )
    country_set: str | None = Field(
        default=None,
        pattern=COUNTRY_SET_PATTERN,
        description="Country set name",
    )

    def value_for(self, dimension: OptimizationDimension) -> Any:
        """Return this directory's value for a dimension, or None if untargeted."""
        return getattr(self, dimension.value)

    def targeted_dimensions(self) -> frozenset[OptimizationDimension]:
        """Return the dimensions this directory declares a value for."""
        return frozenset(
            dimension
            for dimension in OptimizationDimension
            if self.value_for(dimension) is not None
        )


class LanguageTargeting(BaseModel):
    """Language targeting of an asset slice.

    A ``value`` of None marks the fallback slice for directories without a
    language; it then lists every observed language as an alternative.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str | None = Field(default=None, description="Targeted language")
    alternatives: tuple[str, ...] = Field(
        default=(),
        description="Languages served by sibling slices of the same module",
    )


class TextureCompressionFormatTargeting(BaseModel):
    """Texture compression format targeting of an asset slice."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: TextureCompressionFormat | None = Field(default=None, description="Targeted format")
    alternatives: tuple[TextureCompressionFormat, ...] = Field(
        default=(),
        description="Formats served by sibling slices of the same module",
    )


class DeviceTierTargeting(BaseModel):
    """Device tier targeting of an asset slice."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: int | None = Field(default=None, ge=0, description="Targeted device tier")
    alternatives: tuple[int, ...] = Field(
        default=(),
        description="Device tiers served by sibling slices of the same module",
    )


class CountrySetTargeting(BaseModel):
    """Country set targeting of an asset slice."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str | None = Field(default=None, description="Targeted country set")
    alternatives: tuple[str, ...] = Field(
        default=(),
        description="Country sets served by sibling slices of the same module",
    )


DimensionTargeting = (
    LanguageTargeting
    | TextureCompressionFormatTargeting
    | DeviceTierTargeting
    | CountrySetTargeting
)

TARGETING_MODELS: dict[OptimizationDimension, type[DimensionTargeting]] = {
    OptimizationDimension.LANGUAGE: LanguageTargeting,
    OptimizationDimension.TEXTURE_COMPRESSION_FORMAT: TextureCompressionFormatTargeting,
    OptimizationDimension.DEVICE_TIER: DeviceTierTargeting,
    OptimizationDimension.COUNTRY_SET: CountrySetTargeting,
}
"""Targeting record model for each dimension."""


class SliceTargeting(BaseModel):
    """Targeting metadata attached to an asset slice.

    Holds one record per dimension the module was split on. Dimensions the
    module was not split on stay None, so an unsplit module's master slice
    carries ``SliceTargeting()``.

    Example:
        >>> targeting = SliceTargeting(
        ...     language=LanguageTargeting(value="en", alternatives=("es",)),
        ... )
        >>> targeting.is_default
        False
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    language: LanguageTargeting | None = Field(default=None)
    texture_compression_format: TextureCompressionFormatTargeting | None = Field(default=None)
    device_tier: DeviceTierTargeting | None = Field(default=None)
    country_set: CountrySetTargeting | None = Field(default=None)

    def for_dimension(self, dimension: OptimizationDimension) -> DimensionTargeting | None:
        """Return the targeting record for a dimension, or None if not split on it."""
        return getattr(self, dimension.value)

    @property
    def is_default(self) -> bool:
        """Whether no dimension carries targeting."""
        return all(self.for_dimension(dimension) is None for dimension in OptimizationDimension)


def parse_directory_targeting(path: str) -> DirectoryTargeting:
    """Parse the targeting encoded in a directory path's suffixes.

    Args:
        path: Asset directory path (e.g. ``assets/img#lang_en``).

    Returns:
        DirectoryTargeting with one value per suffix found. A path without
        suffixes yields the default (untargeted) DirectoryTargeting.

    Raises:
        ConfigurationError: If a suffix is unknown, malformed, or a dimension
            is encoded more than once.

    Example:
        >>> parse_directory_targeting("assets/img#tier_1").device_tier
        1
    """
    values: dict[str, str] = {}

    for segment in path.split("/"):
        if SUFFIX_SEPARATOR not in segment:
            continue

        dimension, raw_value = _parse_suffix(segment, path)
        if dimension.value in values:
            raise ConfigurationError(
                f"Dimension '{dimension.value}' is encoded more than once",
                directory=path,
            )
        values[dimension.value] = raw_value

    try:
        return DirectoryTargeting.model_validate(values)
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Malformed targeting value in directory suffix",
            directory=path,
            internal_details=str(e),
        ) from e


def strip_targeting_suffixes(path: str, dimensions: frozenset[OptimizationDimension]) -> str:
    """Remove the suffixes of the given dimensions from a directory path.

    Suffixes of other dimensions are kept.

    Example:
        >>> strip_targeting_suffixes(
        ...     "assets/img#lang_en", frozenset({OptimizationDimension.LANGUAGE})
        ... )
        'assets/img'
    """
    segments: list[str] = []
    for segment in path.split("/"):
        if SUFFIX_SEPARATOR in segment:
            dimension, _ = _parse_suffix(segment, path)
            if dimension in dimensions:
                segment = segment.split(SUFFIX_SEPARATOR, 1)[0]
        segments.append(segment)
    return "/".join(segments)


def _parse_suffix(segment: str, path: str) -> tuple[OptimizationDimension, str]:
    """Split one ``name#key_value`` segment into its dimension and raw value."""
    name, _, suffix = segment.partition(SUFFIX_SEPARATOR)
    key, _, raw_value = suffix.partition("_")

    if not name or SUFFIX_SEPARATOR in suffix or not raw_value:
        raise ConfigurationError(
            "Malformed directory targeting suffix",
            directory=path,
            internal_details=f"segment '{segment}' does not match name#key_value",
        )

    dimension = _DIMENSIONS_BY_SUFFIX_KEY.get(key)
    if dimension is None:
        raise ConfigurationError(
            f"Unknown directory targeting key '{key}'",
            directory=path,
        )
    return dimension, raw_value

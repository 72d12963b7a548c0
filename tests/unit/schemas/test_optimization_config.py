"""Unit tests for OptimizationConfig."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from asset_slicer.errors import ConfigurationError
from asset_slicer.schemas.optimization import (
    DIMENSIONS_ENV_VAR,
    MAX_WORKERS_ENV_VAR,
    OptimizationConfig,
)
from asset_slicer.schemas.targeting import OptimizationDimension


class TestOptimizationConfig:
    """Tests for OptimizationConfig validation."""

    def test_defaults(self) -> None:
        """The default configuration requests no dimensions."""
        config = OptimizationConfig()

        assert config.optimization_dimensions == frozenset()
        assert config.asset_modules_version_override is None
        assert config.max_workers == 1

    def test_accepts_enum_members(self) -> None:
        """Dimensions can be given as enum members."""
        config = OptimizationConfig(
            optimization_dimensions={OptimizationDimension.LANGUAGE},
        )

        assert config.optimization_dimensions == frozenset({OptimizationDimension.LANGUAGE})

    def test_accepts_names_case_insensitively(self) -> None:
        """Dimension names are normalized before validation."""
        config = OptimizationConfig(optimization_dimensions=["LANGUAGE", " Device_Tier "])

        assert config.optimization_dimensions == frozenset(
            {OptimizationDimension.LANGUAGE, OptimizationDimension.DEVICE_TIER}
        )

    def test_accepts_single_name(self) -> None:
        """A single dimension name is accepted."""
        config = OptimizationConfig(optimization_dimensions="country_set")

        assert config.optimization_dimensions == frozenset({OptimizationDimension.COUNTRY_SET})

    def test_rejects_unknown_dimension(self) -> None:
        """Only known dimensions are accepted."""
        with pytest.raises(ValidationError) as exc_info:
            OptimizationConfig(optimization_dimensions=["abi"])

        assert "optimization_dimensions" in str(exc_info.value)

    def test_rejects_unknown_fields(self) -> None:
        """Unknown configuration keys are rejected."""
        with pytest.raises(ValidationError):
            OptimizationConfig(split_everything=True)  # type: ignore[call-arg]

    @pytest.mark.parametrize("max_workers", [0, 65])
    def test_max_workers_bounds(self, max_workers: int) -> None:
        """max_workers must be between 1 and 64."""
        with pytest.raises(ValidationError):
            OptimizationConfig(max_workers=max_workers)

    def test_version_override_must_be_positive(self) -> None:
        """Version code overrides start at 1."""
        with pytest.raises(ValidationError):
            OptimizationConfig(asset_modules_version_override=0)


class TestOptimizationConfigFromYaml:
    """Tests for OptimizationConfig.from_yaml."""

    def test_loads_yaml(self, tmp_path: Path, sample_optimization_yaml: dict[str, Any]) -> None:
        """A valid YAML document is loaded."""
        path = tmp_path / "slicing.yaml"
        path.write_text(yaml.safe_dump(sample_optimization_yaml))

        config = OptimizationConfig.from_yaml(path)

        assert config.optimization_dimensions == frozenset(
            {OptimizationDimension.LANGUAGE, OptimizationDimension.TEXTURE_COMPRESSION_FORMAT}
        )
        assert config.asset_modules_version_override == 42
        assert config.max_workers == 4

    def test_empty_file_is_default(self, tmp_path: Path) -> None:
        """An empty file yields the default configuration."""
        path = tmp_path / "slicing.yaml"
        path.write_text("")

        assert OptimizationConfig.from_yaml(path) == OptimizationConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            OptimizationConfig.from_yaml(tmp_path / "missing.yaml")

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        """A document that is not a mapping is a configuration error."""
        path = tmp_path / "slicing.yaml"
        path.write_text("- language\n- device_tier\n")

        with pytest.raises(ConfigurationError) as exc_info:
            OptimizationConfig.from_yaml(path)

        assert "must be a mapping" in str(exc_info.value)


class TestOptimizationConfigFromEnv:
    """Tests for OptimizationConfig.from_env."""

    def test_reads_dimensions_and_workers(self) -> None:
        """Environment variables populate the configuration."""
        config = OptimizationConfig.from_env(
            {DIMENSIONS_ENV_VAR: "language, device_tier", MAX_WORKERS_ENV_VAR: "8"}
        )

        assert config.optimization_dimensions == frozenset(
            {OptimizationDimension.LANGUAGE, OptimizationDimension.DEVICE_TIER}
        )
        assert config.max_workers == 8

    def test_empty_environment_is_default(self) -> None:
        """Without variables the default configuration is returned."""
        assert OptimizationConfig.from_env({}) == OptimizationConfig()

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """os.environ is used when no mapping is given."""
        monkeypatch.setenv(DIMENSIONS_ENV_VAR, "texture_compression_format")
        monkeypatch.delenv(MAX_WORKERS_ENV_VAR, raising=False)

        config = OptimizationConfig.from_env()

        assert config.optimization_dimensions == frozenset(
            {OptimizationDimension.TEXTURE_COMPRESSION_FORMAT}
        )

"""Unit tests for the directory targeting index."""

from __future__ import annotations

import pytest

from asset_slicer.errors import ConfigurationError
from asset_slicer.schemas.targeting import DirectoryTargeting, OptimizationDimension
from asset_slicer.slicer.directory_index import build_directory_index, targeted_dimensions


class TestBuildDirectoryIndex:
    """Tests for build_directory_index."""

    def test_untargeted_directory_from_entries(self, make_module) -> None:
        """Entry directories without assets config are untargeted."""
        module = make_module(files=["assets/some_asset.txt"])

        assert build_directory_index(module) == {"assets": DirectoryTargeting()}

    def test_declared_targeting(self, make_module) -> None:
        """Declared directories carry their declared targeting."""
        module = make_module(
            files=["assets/images#lang_en/image.jpg", "assets/images#lang_es/image.jpg"],
            directories={
                "assets/images#lang_es": {"language": "es"},
                "assets/images#lang_en": {"language": "en"},
            },
        )

        index = build_directory_index(module)

        assert list(index) == ["assets/images#lang_en", "assets/images#lang_es"]
        assert index["assets/images#lang_en"].language == "en"
        assert index["assets/images#lang_es"].language == "es"

    def test_targeting_from_suffix(self, make_module) -> None:
        """Undeclared directories take their targeting from path suffixes."""
        module = make_module(files=["assets/models#tier_2/model.bin"])

        assert build_directory_index(module) == {
            "assets/models#tier_2": DirectoryTargeting(device_tier=2)
        }

    def test_declared_and_suffix_merge(self, make_module) -> None:
        """Declared values and suffix values for other dimensions are combined."""
        module = make_module(
            files=["assets/voice#lang_fr/line.ogg"],
            directories={"assets/voice#lang_fr": {"country_set": "europe"}},
        )

        assert build_directory_index(module)["assets/voice#lang_fr"] == DirectoryTargeting(
            language="fr", country_set="europe"
        )

    def test_declared_directory_without_entries(self, make_module) -> None:
        """Declared directories are indexed even when empty."""
        module = make_module(
            files=["assets/a.txt"],
            directories={"assets/empty#lang_de": {"language": "de"}},
        )

        assert set(build_directory_index(module)) == {"assets", "assets/empty#lang_de"}

    def test_contradicting_declaration(self, make_module) -> None:
        """Declared targeting must agree with the suffix."""
        module = make_module(
            files=["assets/images#lang_en/image.jpg"],
            directories={"assets/images#lang_en": {"language": "es"}},
        )

        with pytest.raises(ConfigurationError) as exc_info:
            build_directory_index(module)

        assert exc_info.value.module_name == "asset_module"
        assert exc_info.value.directory == "assets/images#lang_en"
        assert "contradicts" in str(exc_info.value)

    def test_nested_directory_inherits_declared_targeting(self, make_module) -> None:
        """Subdirectories of a declared directory carry its targeting."""
        module = make_module(
            files=["assets/voice_en/a.ogg", "assets/voice_en/sub/deeper/b.ogg"],
            directories={"assets/voice_en": {"language": "en"}},
        )

        assert build_directory_index(module) == {
            "assets/voice_en": DirectoryTargeting(language="en"),
            "assets/voice_en/sub/deeper": DirectoryTargeting(language="en"),
        }

    def test_nested_declarations_combine(self, make_module) -> None:
        """A subdirectory adds its own declared dimensions to its ancestor's."""
        module = make_module(
            files=["assets/voice/hq/a.ogg"],
            directories={
                "assets/voice": {"language": "en"},
                "assets/voice/hq": {"device_tier": 2},
            },
        )

        assert build_directory_index(module)["assets/voice/hq"] == DirectoryTargeting(
            language="en", device_tier=2
        )

    def test_nested_declaration_contradicts_ancestor(self, make_module) -> None:
        """A subdirectory may not redeclare a dimension its ancestor sets differently."""
        module = make_module(
            files=["assets/voice/fr/a.ogg"],
            directories={
                "assets/voice": {"language": "en"},
                "assets/voice/fr": {"language": "fr"},
            },
        )

        with pytest.raises(ConfigurationError) as exc_info:
            build_directory_index(module)

        assert exc_info.value.directory == "assets/voice/fr"
        assert "ancestor" in exc_info.value.reason

    def test_ancestor_declaration_contradicts_nested_suffix(self, make_module) -> None:
        """Inherited declared targeting must agree with a nested suffix."""
        module = make_module(
            files=["assets/voice/lines#lang_fr/a.ogg"],
            directories={"assets/voice": {"language": "en"}},
        )

        with pytest.raises(ConfigurationError) as exc_info:
            build_directory_index(module)

        assert exc_info.value.directory == "assets/voice/lines#lang_fr"
        assert "suffix" in exc_info.value.reason

    def test_nested_suffix_directory(self, make_module) -> None:
        """Directories below a suffixed segment keep the suffix targeting."""
        module = make_module(files=["assets/voice#lang_en/greetings/hi.ogg"])

        assert build_directory_index(module) == {
            "assets/voice#lang_en/greetings": DirectoryTargeting(language="en")
        }

    def test_malformed_suffix_reports_module(self, make_module) -> None:
        """Suffix errors carry the module name."""
        module = make_module(files=["assets/lib#abi_x86/lib.so"])

        with pytest.raises(ConfigurationError) as exc_info:
            build_directory_index(module)

        assert exc_info.value.module_name == "asset_module"
        assert exc_info.value.directory == "assets/lib#abi_x86"
        assert exc_info.value.reason == "Unknown directory targeting key 'abi'"

    def test_module_without_directories(self, make_module) -> None:
        """A module without any directory is a configuration error."""
        module = make_module(files=[])

        with pytest.raises(ConfigurationError) as exc_info:
            build_directory_index(module)

        assert "no asset directories" in str(exc_info.value)
        assert exc_info.value.module_name == "asset_module"


class TestTargetedDimensions:
    """Tests for targeted_dimensions."""

    def test_collects_dimensions_with_values(self) -> None:
        """Only dimensions with a non-default value are reported."""
        index = {
            "assets": DirectoryTargeting(),
            "assets/a#lang_en": DirectoryTargeting(language="en"),
            "assets/b#tier_1": DirectoryTargeting(device_tier=1),
        }

        assert targeted_dimensions(index) == frozenset(
            {OptimizationDimension.LANGUAGE, OptimizationDimension.DEVICE_TIER}
        )

    def test_untargeted_index(self) -> None:
        """An index of untargeted directories has no dimensions."""
        assert targeted_dimensions({"assets": DirectoryTargeting()}) == frozenset()

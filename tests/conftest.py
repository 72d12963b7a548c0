"""Shared pytest fixtures for asset-slicer tests.

This module provides structlog configuration and module builders used
across unit and contract tests.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

import pytest
import structlog

from asset_slicer.schemas import (
    AssetsConfig,
    BundleModule,
    DeliveryType,
    DirectoryTargeting,
    ModuleEntry,
    ModuleManifest,
    TargetedAssetsDirectory,
)

ModuleFactory = Callable[..., BundleModule]


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, structlog may use different processors depending on
    test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def make_module() -> ModuleFactory:
    """Return a builder for BundleModule test descriptors.

    Example:
        >>> module = make_module(
        ...     files=["assets/images#lang_en/image.jpg"],
        ...     directories={"assets/images#lang_en": {"language": "en"}},
        ... )
    """

    def _make_module(
        name: str = "asset_module",
        *,
        files: list[str] | None = None,
        directories: dict[str, dict[str, Any]] | None = None,
        type_attribute: str | None = "remote-asset",
        delivery_type: DeliveryType | None = None,
    ) -> BundleModule:
        assets_config = None
        if directories is not None:
            assets_config = AssetsConfig(
                directories=tuple(
                    TargetedAssetsDirectory(path=path, targeting=DirectoryTargeting(**targeting))
                    for path, targeting in directories.items()
                )
            )

        return BundleModule(
            name=name,
            manifest=ModuleManifest(
                package_name="com.test.app",
                type_attribute=type_attribute,
                delivery_type=delivery_type,
            ),
            entries=tuple(
                ModuleEntry(path=path, content_ref=f"blob://{name}/{path}")
                for path in (files or [])
            ),
            assets_config=assets_config,
        )

    return _make_module


@pytest.fixture
def sample_optimization_yaml() -> dict[str, Any]:
    """Return a valid optimization configuration document."""
    return {
        "optimization_dimensions": ["language", "texture_compression_format"],
        "asset_modules_version_override": 42,
        "max_workers": 4,
    }

"""JSON Schema export functions for asset-slicer.

This module exports JSON Schema Draft 2020-12 documents from the Pydantic
models, so the packaging stage and configuration editors can validate
slices and configuration files without importing Python code.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from asset_slicer.schemas import AssetSlice, OptimizationConfig

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID_BASE = "https://asset-slicer.dev/schemas"


def export_asset_slice_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export AssetSlice JSON Schema for downstream validation.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_asset_slice_schema()
        >>> schema["title"]
        'AssetSlice'
    """
    return _export_schema(AssetSlice, "asset-slice.schema.json", output_path)


def export_optimization_config_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export OptimizationConfig JSON Schema for configuration file editing.

    Args:
        output_path: Optional path to write schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    return _export_schema(OptimizationConfig, "optimization-config.schema.json", output_path)


def _export_schema(
    model: type[BaseModel],
    file_name: str,
    output_path: Path | str | None,
) -> dict[str, Any]:
    schema = model.model_json_schema()

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_ID_BASE}/{file_name}"

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to JSON file, creating parent directories."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2))

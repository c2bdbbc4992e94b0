"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DIRECTORY_TYPE_NAME = "CustomDirectusTypes"


@dataclass(frozen=True)
class ComputedField:
    """Extra member appended to a collection's record type."""

    name: str
    type_expression: str
    optional: bool = False


@dataclass(frozen=True)
class GenerationOptions:
    """Switches that shape the emitted type definitions."""

    use_intersection_types: bool = False
    legacy_singular_mode: bool = False
    treat_required_as_non_null: bool = False
    directory_type_name: str = DEFAULT_DIRECTORY_TYPE_NAME
    computed_fields: Mapping[str, tuple[ComputedField, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class SnapshotSource:
    """Normalized schema snapshot settings."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class TypegenConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SnapshotSource
    output_path: Path | None
    generation: GenerationOptions

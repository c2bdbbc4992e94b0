"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_DIRECTORY_TYPE_NAME,
    ComputedField,
    GenerationOptions,
    SnapshotSource,
    TypegenConfiguration,
)

_TYPE_NAME_PATTERN = re.compile(r"[A-Za-z_$][0-9A-Za-z_$]*")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> TypegenConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    output_path = _parse_output_section(parsed.get("output"), path.parent)
    computed_fields = _parse_computed_fields_section(parsed.get("computed_fields"))
    generation = _parse_generation_section(parsed.get("generation"), computed_fields)

    return TypegenConfiguration(
        path=path,
        schema=schema,
        output_path=output_path,
        generation=generation,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SnapshotSource:
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    source_path: Path | None = None
    if inline and path_value:
        raise ConfigurationError("Schema section must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("schema.inline must be a string.")
        text = inline
    elif path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("schema.path must be a string.")
        source_path = _resolve_path(base_path, path_value)
        if not source_path.exists():
            raise ConfigurationError(f"Schema snapshot file not found: {source_path}")
        text = source_path.read_text(encoding="utf-8")
    else:
        raise ConfigurationError("Schema section requires either inline or path.")

    if not text.strip():
        raise ConfigurationError("Schema snapshot text cannot be empty.")
    return SnapshotSource(text=text, source_path=source_path)


def _parse_output_section(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    section = _require_mapping(value, "output")
    path_value = _optional_string(section.get("path"), "output.path")
    if path_value is None:
        return None
    return _resolve_path(base_path, path_value)


def _parse_generation_section(
    value: Any, computed_fields: Mapping[str, tuple[ComputedField, ...]]
) -> GenerationOptions:
    section = {} if value is None else _require_mapping(value, "generation")
    directory_type_name = (
        _optional_string(section.get("directory_type_name"), "generation.directory_type_name")
        or DEFAULT_DIRECTORY_TYPE_NAME
    )
    if not _TYPE_NAME_PATTERN.fullmatch(directory_type_name):
        raise ConfigurationError(
            f"generation.directory_type_name '{directory_type_name}' is not a valid type name."
        )
    return GenerationOptions(
        use_intersection_types=_flag(section, "use_intersection_types"),
        legacy_singular_mode=_flag(section, "legacy_singular_mode"),
        treat_required_as_non_null=_flag(section, "treat_required_as_non_null"),
        directory_type_name=directory_type_name,
        computed_fields=computed_fields,
    )


def _parse_computed_fields_section(value: Any) -> dict[str, tuple[ComputedField, ...]]:
    if value is None:
        return {}
    section = _require_mapping(value, "computed_fields")
    computed: dict[str, tuple[ComputedField, ...]] = {}
    for collection, entries in section.items():
        label = f"computed_fields.{collection}"
        if not isinstance(entries, Sequence) or isinstance(entries, str):
            raise ConfigurationError(f"{label} must be a list.")
        computed[str(collection)] = tuple(
            _parse_computed_field(entry, f"{label}[{index}]") for index, entry in enumerate(entries)
        )
    return computed


def _parse_computed_field(value: Any, label: str) -> ComputedField:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")
    return ComputedField(
        name=_require_non_empty_string(value.get("name"), f"{label}.name"),
        type_expression=_require_non_empty_string(value.get("type"), f"{label}.type"),
        optional=_optional_bool(value.get("optional"), f"{label}.optional"),
    )


def _flag(section: Mapping[str, Any], name: str) -> bool:
    return _optional_bool(section.get(name), f"generation.{name}")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value

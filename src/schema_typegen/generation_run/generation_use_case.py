"""Generation run use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from schema_typegen.configuration import ConfigurationError, GenerationOptions, load_configuration
from schema_typegen.output_writing import write_type_definitions
from schema_typegen.schema_management import SchemaError, load_schema_snapshot
from schema_typegen.type_generation import SchemaInconsistencyError, generate_type_definitions

from .generation_contracts import GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Load configuration and snapshot, emit type definitions and write them if configured."""
    try:
        configuration = load_configuration(request.config_path)
        schema = load_schema_snapshot(configuration.schema.text)
    except (ConfigurationError, SchemaError, OSError) as exc:
        raise GenerationRunError(str(exc)) from exc

    options = _apply_overrides(configuration.generation, request)
    _LOGGER.info("Generating type definitions for %d collections", len(schema))
    try:
        text = generate_type_definitions(schema, options)
    except SchemaInconsistencyError as exc:
        raise GenerationRunError(f"Schema is inconsistent: {exc}") from exc

    output_path = Path(request.output_path) if request.output_path else configuration.output_path
    written_path = None
    if output_path is not None:
        try:
            written_path = write_type_definitions(text, output_path)
        except OSError as exc:
            raise GenerationRunError(f"Failed to write type definitions: {exc}") from exc

    return GenerationOutcome(output_path=written_path, text=text, collection_count=len(schema))


def _apply_overrides(options: GenerationOptions, request: GenerationRequest) -> GenerationOptions:
    overrides = {
        name: value
        for name, value in (
            ("use_intersection_types", request.use_intersection_types),
            ("legacy_singular_mode", request.legacy_singular_mode),
            ("treat_required_as_non_null", request.treat_required_as_non_null),
        )
        if value is not None
    }
    if not overrides:
        return options
    return dataclasses.replace(options, **overrides)

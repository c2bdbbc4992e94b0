"""Tests for generation run entities."""

from __future__ import annotations

from pathlib import Path

from schema_typegen.generation_run.generation_contracts import GenerationOutcome, GenerationRequest


def test_generation_request_defaults_keep_configured_flags() -> None:
    request = GenerationRequest(config_path="typegen.yaml")

    assert request.output_path is None
    assert request.use_intersection_types is None
    assert request.legacy_singular_mode is None
    assert request.treat_required_as_non_null is None


def test_generation_outcome_carries_text_and_counts() -> None:
    outcome = GenerationOutcome(
        output_path=Path("/tmp/types.ts"),
        text="export type A = {};\n",
        collection_count=1,
    )

    assert outcome.output_path is not None
    assert outcome.output_path.name == "types.ts"
    assert outcome.collection_count == 1

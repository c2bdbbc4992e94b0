"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run.

    Flags left as None keep the value from the configuration file.
    """

    config_path: str
    output_path: str | None = None
    use_intersection_types: bool | None = None
    legacy_singular_mode: bool | None = None
    treat_required_as_non_null: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_path: Path | None
    text: str
    collection_count: int

"""Generation run domain exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest
from .generation_use_case import GenerationRunError, execute_generation_run

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationRunError",
    "execute_generation_run",
]

"""Static type definitions generated from content schema snapshots."""

import logging

from .configuration import GenerationOptions
from .schema_management import SchemaModel, load_schema_snapshot
from .type_generation import generate_type_definitions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GenerationOptions",
    "SchemaModel",
    "generate_type_definitions",
    "load_schema_snapshot",
]

"""Type generation exports."""

from .declaration_emitter import generate_type_definitions
from .naming import member_identifier, pascal_case
from .primitive_types import MAX_LIST_DEPTH, primitive_type
from .type_resolver import ResolvedField, SchemaInconsistencyError, TypeResolver

__all__ = [
    "MAX_LIST_DEPTH",
    "ResolvedField",
    "SchemaInconsistencyError",
    "TypeResolver",
    "generate_type_definitions",
    "member_identifier",
    "pascal_case",
    "primitive_type",
]

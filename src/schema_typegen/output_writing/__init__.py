"""Output writing domain exports."""

from .type_definition_writer import write_type_definitions

__all__ = ["write_type_definitions"]

"""Field type resolution against the whole schema model."""

from __future__ import annotations

from dataclasses import dataclass

from schema_typegen.configuration.runtime_settings import GenerationOptions
from schema_typegen.schema_management.schema_models import (
    AnyRelation,
    AnyTypeRelation,
    Field,
    ManyRelation,
    OneRelation,
    SchemaModel,
)

from .naming import literal_union, pascal_case
from .primitive_types import primitive_type


class SchemaInconsistencyError(Exception):
    """Raised when a relation points at a collection or key missing from the model."""

    def __init__(self, collection: str, field: str, message: str) -> None:
        super().__init__(f"{collection}.{field}: {message}")
        self.collection = collection
        self.field = field


@dataclass(frozen=True)
class ResolvedField:
    """Member ready to be emitted into a record type."""

    name: str
    type_expression: str
    optional: bool


class TypeResolver:
    """Resolves field type expressions, following relations into other collections."""

    def __init__(self, schema: SchemaModel, options: GenerationOptions) -> None:
        self._schema = schema
        self._options = options

    def resolve(self, collection: str, field: Field) -> ResolvedField | None:
        """Resolve one field, or return None when the field is presentational."""
        if field.is_presentational:
            return None

        relation = field.relation
        type_expression = self._base_type(collection, field)
        if relation is not None and not isinstance(relation, AnyTypeRelation):
            related = self._related_type(field)
            type_expression = f"{type_expression}{self._combinator(field)}{related}"

        optional = field.nullable and not (
            self._options.treat_required_as_non_null and field.required
        )
        if optional:
            if relation is not None and self._options.use_intersection_types:
                type_expression = f"({type_expression}) | null"
            else:
                type_expression += " | null"

        return ResolvedField(name=field.name, type_expression=type_expression, optional=optional)

    def _base_type(self, collection: str, field: Field) -> str:
        relation = field.relation
        if relation is None:
            return primitive_type(field)
        if isinstance(relation, OneRelation):
            self._require_collection(collection, field, relation.collection)
            return primitive_type(field)
        if isinstance(relation, ManyRelation):
            key_field = self._primary_key(collection, field, relation.collection)
            return f"{primitive_type(key_field)}[]"
        if isinstance(relation, AnyRelation):
            # Candidate collections may disagree on key types.
            return "string"
        if isinstance(relation, AnyTypeRelation):
            return literal_union([pascal_case(name) for name in relation.collections]) or "string"
        raise TypeError(f"Unsupported relation: {relation!r}")

    def _combinator(self, field: Field) -> str:
        if isinstance(field.relation, AnyRelation) or not self._options.use_intersection_types:
            return " | "
        return " & "

    def _related_type(self, field: Field) -> str:
        relation = field.relation
        if isinstance(relation, OneRelation):
            return pascal_case(relation.collection)
        if isinstance(relation, ManyRelation):
            return f"{pascal_case(relation.collection)}[]"
        if isinstance(relation, AnyRelation):
            return " | ".join(pascal_case(name) for name in relation.collections) or "never"
        raise TypeError(f"Relation has no related record type: {relation!r}")

    def _require_collection(self, collection: str, field: Field, target: str) -> None:
        if target not in self._schema:
            raise SchemaInconsistencyError(
                collection, field.name, f"related collection '{target}' is not in the schema"
            )

    def _primary_key(self, collection: str, field: Field, target: str) -> Field:
        self._require_collection(collection, field, target)
        key_field = self._schema[target].primary_key_field()
        if key_field is None:
            raise SchemaInconsistencyError(
                collection, field.name, f"related collection '{target}' has no primary key field"
            )
        return key_field

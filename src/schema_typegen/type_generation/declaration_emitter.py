"""Record and directory type declaration emitter."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from schema_typegen.configuration.runtime_settings import ComputedField, GenerationOptions
from schema_typegen.schema_management.schema_models import Collection, SchemaModel

from .naming import member_identifier, pascal_case
from .type_resolver import ResolvedField, SchemaInconsistencyError, TypeResolver

_LOGGER = logging.getLogger(__name__)


def generate_type_definitions(
    schema: SchemaModel, options: GenerationOptions | None = None
) -> str:
    """Return record declarations for every collection followed by the directory type.

    Collections are emitted in schema order and fields in collection order, so
    the same schema and options always produce the same text. Relation targets
    that are missing from the schema raise `SchemaInconsistencyError` before
    anything is returned.
    """
    resolved_options = options or GenerationOptions()
    _check_computed_fields(schema, resolved_options)
    resolver = TypeResolver(schema, resolved_options)

    declarations: list[str] = []
    directory_entries: list[str] = []
    for name, collection in schema.items():
        type_name = pascal_case(name)
        members = _collection_members(collection, resolver, resolved_options)
        _LOGGER.debug("Emitting %s with %d members", type_name, len(members))
        declarations.append(_declaration(type_name, members))
        suffix = _directory_suffix(collection, resolved_options)
        directory_entries.append(f"{member_identifier(name)}: {type_name}{suffix};")

    declarations.append(_declaration(resolved_options.directory_type_name, directory_entries))
    return "\n".join(declarations)


def _collection_members(
    collection: Collection, resolver: TypeResolver, options: GenerationOptions
) -> list[str]:
    members: list[str] = []
    for field in collection.fields:
        resolved = resolver.resolve(collection.name, field)
        if resolved is None:
            continue
        members.append(_member(resolved))
    for computed in options.computed_fields.get(collection.name, ()):
        members.append(_member(_from_computed(computed)))
    return members


def _from_computed(computed: ComputedField) -> ResolvedField:
    return ResolvedField(
        name=computed.name,
        type_expression=computed.type_expression,
        optional=computed.optional,
    )


def _member(resolved: ResolvedField) -> str:
    marker = "?" if resolved.optional else ""
    return f"{member_identifier(resolved.name)}{marker}: {resolved.type_expression};"


def _directory_suffix(collection: Collection, options: GenerationOptions) -> str:
    if collection.singleton or options.legacy_singular_mode:
        return ""
    return "[]"


def _declaration(type_name: str, members: Sequence[str]) -> str:
    if not members:
        return f"export type {type_name} = {{}};\n"
    body = "\n".join(f"  {member}" for member in members)
    return f"export type {type_name} = {{\n{body}\n}};\n"


def _check_computed_fields(schema: SchemaModel, options: GenerationOptions) -> None:
    for collection, computed_fields in options.computed_fields.items():
        if collection not in schema:
            field = computed_fields[0].name if computed_fields else ""
            raise SchemaInconsistencyError(
                collection, field, "computed fields target a collection that is not in the schema"
            )

"""Primitive and interface-aware type mapping."""

from __future__ import annotations

from collections.abc import Iterator

from schema_typegen.schema_management.schema_models import Choice, Field

from .naming import literal_union, member_identifier

MAX_LIST_DEPTH = 8

UNKNOWN_TYPE = "unknown"

GEOMETRY_TYPES = {
    "geometry.Point": '{ type: "Point", coordinates: [number, number] }',
    "geometry.MultiPoint": '{ type: "MultiPoint", coordinates: [number, number][] }',
    "geometry.LineString": '{ type: "LineString", coordinates: [number, number][] }',
    "geometry.MultiLineString": '{ type: "MultiLineString", coordinates: [number, number][][] }',
    "geometry.Polygon": '{ type: "Polygon", coordinates: [number, number][][] }',
    "geometry.MultiPolygon": '{ type: "MultiPolygon", coordinates: [number, number][][][] }',
}

_SCALAR_TYPES = {
    "integer": "number",
    "bigInteger": "number",
    "float": "number",
    "decimal": "number",
    "boolean": "boolean",
}

_STRUCTURED_TYPES = frozenset({"json", "csv"})
_MULTI_CHOICE_INTERFACES = frozenset(
    {"tags", "select-multiple-dropdown", "select-multiple-checkbox"}
)
_TREE_CHOICE_INTERFACE = "select-multiple-checkbox-tree"
_SINGLE_CHOICE_INTERFACES = frozenset({"select-dropdown", "select-radio"})
_LIST_INTERFACE = "list"


def primitive_type(field: Field, depth: int = 0) -> str:
    """Return the base type expression for a field's stored value."""
    if field.type in GEOMETRY_TYPES:
        return GEOMETRY_TYPES[field.type]
    if field.type in _STRUCTURED_TYPES:
        return _structured_type(field, depth)

    scalar = _SCALAR_TYPES.get(field.type, "string")
    if field.interface in _SINGLE_CHOICE_INTERFACES:
        return _choice_type(field.options.choices, field.options.allow_other, fallback=scalar)
    return scalar


def _structured_type(field: Field, depth: int) -> str:
    interface = field.interface
    if interface == _LIST_INTERFACE:
        return _list_type(field, depth)
    if interface in _MULTI_CHOICE_INTERFACES:
        return _array_of(
            _choice_type(field.options.choices, field.options.allow_other, fallback="string")
        )
    if interface == _TREE_CHOICE_INTERFACE:
        values = tuple(_flatten_choice_tree(field.options.choices))
        return _array_of(_literals_or(values, field.options.allow_other, fallback="string"))
    return UNKNOWN_TYPE


def _list_type(field: Field, depth: int) -> str:
    if depth >= MAX_LIST_DEPTH:
        return UNKNOWN_TYPE
    sub_fields = [item for item in field.options.sub_fields if not item.is_presentational]
    if not sub_fields:
        return "Record<string, unknown>[]"
    members = "; ".join(_sub_field_member(item, depth + 1) for item in sub_fields)
    return f"{{ {members} }}[]"


def _sub_field_member(field: Field, depth: int) -> str:
    # List items may omit keys that are not required.
    marker = "" if field.required else "?"
    type_expression = primitive_type(field, depth)
    if field.nullable:
        type_expression += " | null"
    return f"{member_identifier(field.name)}{marker}: {type_expression}"


def _choice_type(choices: tuple[Choice, ...], allow_other: bool, *, fallback: str) -> str:
    return _literals_or(tuple(choice.value for choice in choices), allow_other, fallback=fallback)


def _literals_or(values: tuple[object, ...], allow_other: bool, *, fallback: str) -> str:
    if allow_other or not values:
        return fallback
    return literal_union(values)


def _flatten_choice_tree(choices: tuple[Choice, ...]) -> Iterator[object]:
    for choice in choices:
        yield choice.value
        yield from _flatten_choice_tree(choice.children)


def _array_of(element: str) -> str:
    if " | " in element:
        return f"({element})[]"
    return f"{element}[]"

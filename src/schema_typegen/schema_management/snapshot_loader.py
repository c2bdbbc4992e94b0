"""Schema snapshot loading service."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

from .schema_models import (
    AnyRelation,
    AnyTypeRelation,
    Choice,
    Collection,
    Field,
    InterfaceOptions,
    ManyRelation,
    OneRelation,
    Relation,
    SchemaModel,
)

_ALLOW_OTHER_KEYS = ("allowOther", "allowCustom", "allow_other")


class SchemaError(Exception):
    """Raised for schema snapshot parsing failures."""


def load_schema_snapshot(text: str) -> SchemaModel:
    """Parse snapshot JSON text into a schema model."""
    try:
        raw = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid schema snapshot: {exc}") from exc
    return build_schema_model(raw)


def _reject_constant(token: str) -> Any:
    raise SchemaError(f"Invalid schema snapshot: non-finite number '{token}' is not JSON.")


def build_schema_model(raw: Any) -> SchemaModel:
    """Build a schema model from decoded snapshot data.

    Accepts either a mapping of collection name to collection object or a
    list of collection objects. Collection order is preserved.
    """
    entries: list[tuple[str | None, Any]]
    if isinstance(raw, Mapping):
        entries = list(raw.items())
    elif isinstance(raw, Sequence) and not isinstance(raw, str):
        entries = [(None, value) for value in raw]
    else:
        raise SchemaError("Schema snapshot root must be an object or a list of collections.")

    collections: dict[str, Collection] = {}
    for key, value in entries:
        collection = _parse_collection(value, key)
        if collection.name in collections:
            raise SchemaError(f"Duplicate collection detected: {collection.name}")
        collections[collection.name] = collection
    return SchemaModel(collections)


def _parse_collection(value: Any, key: str | None) -> Collection:
    if not isinstance(value, Mapping):
        raise SchemaError(f"Collection '{key}' must be an object.")
    name = value.get("collection", key)
    if not isinstance(name, str) or not name:
        raise SchemaError("Collection objects require a non-empty 'collection' name.")
    if key is not None and key != name:
        raise SchemaError(f"Collection key '{key}' does not match collection name '{name}'.")

    meta = value.get("meta") or {}
    if not isinstance(meta, Mapping):
        raise SchemaError(f"Collection '{name}' meta must be an object.")

    raw_fields = value.get("fields") or []
    if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
        raise SchemaError(f"Collection '{name}' fields must be a list.")

    fields: list[Field] = []
    seen: set[str] = set()
    for raw_field in raw_fields:
        parsed = _parse_field(raw_field, name)
        if parsed.name in seen:
            raise SchemaError(f"Duplicate field detected: {name}.{parsed.name}")
        seen.add(parsed.name)
        fields.append(parsed)

    return Collection(name=name, singleton=meta.get("singleton") is True, fields=tuple(fields))


def _parse_field(value: Any, collection: str) -> Field:
    if not isinstance(value, Mapping):
        raise SchemaError(f"Field definitions in '{collection}' must be objects.")
    name = value.get("field")
    if not isinstance(name, str) or not name:
        raise SchemaError(f"Field definitions in '{collection}' require a 'field' name.")
    field_type = value.get("type") or "string"
    if not isinstance(field_type, str):
        raise SchemaError(f"Field '{collection}.{name}' type must be a string.")

    schema = value.get("schema") or {}
    meta = value.get("meta") or {}
    if not isinstance(schema, Mapping) or not isinstance(meta, Mapping):
        raise SchemaError(f"Field '{collection}.{name}' schema/meta must be objects.")

    interface = meta.get("interface")
    if interface is not None and not isinstance(interface, str):
        raise SchemaError(f"Field '{collection}.{name}' interface must be a string.")

    return Field(
        name=name,
        type=field_type,
        nullable=schema.get("is_nullable") is True,
        required=meta.get("required") is True,
        primary_key=schema.get("is_primary_key") is True,
        interface=interface,
        options=_parse_options(meta.get("options"), f"{collection}.{name}"),
        relation=_parse_relation(value.get("relation"), f"{collection}.{name}"),
    )


def _parse_options(value: Any, label: str) -> InterfaceOptions:
    if value is None:
        return InterfaceOptions()
    if not isinstance(value, Mapping):
        raise SchemaError(f"Field '{label}' interface options must be an object.")

    choices = _parse_choices(value.get("choices"), label)
    if not choices:
        choices = _parse_choices(value.get("presets"), label)
    allow_other = any(value.get(key) is True for key in _ALLOW_OTHER_KEYS)

    raw_sub_fields = value.get("fields") or []
    if not isinstance(raw_sub_fields, Sequence) or isinstance(raw_sub_fields, str):
        raise SchemaError(f"Field '{label}' list sub-fields must be a list.")
    sub_fields = tuple(_parse_field(item, label) for item in raw_sub_fields)

    return InterfaceOptions(choices=choices, allow_other=allow_other, sub_fields=sub_fields)


def _parse_choices(value: Any, label: str) -> tuple[Choice, ...]:
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise SchemaError(f"Field '{label}' choices must be a list.")
    choices: list[Choice] = []
    for item in value:
        if isinstance(item, Mapping):
            if "value" not in item:
                raise SchemaError(f"Field '{label}' choice objects require a value.")
            children = _parse_choices(item.get("children"), label)
            choices.append(Choice(value=_choice_value(item["value"], label), children=children))
        else:
            choices.append(Choice(value=_choice_value(item, label)))
    return tuple(choices)


def _choice_value(value: Any, label: str) -> Any:
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    raise SchemaError(
        f"Field '{label}' choice value {value!r} is not a string, number or boolean."
    )


def _parse_relation(value: Any, label: str) -> Relation | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise SchemaError(f"Field '{label}' relation must be an object.")
    relation_type = value.get("type")
    if relation_type in ("one", "many"):
        target = value.get("collection")
        if not isinstance(target, str) or not target:
            raise SchemaError(f"Field '{label}' {relation_type} relation requires a collection.")
        return OneRelation(target) if relation_type == "one" else ManyRelation(target)
    if relation_type in ("any", "any_type"):
        targets = value.get("collections")
        if (
            not isinstance(targets, Sequence)
            or isinstance(targets, str)
            or not all(isinstance(item, str) for item in targets)
        ):
            raise SchemaError(
                f"Field '{label}' {relation_type} relation requires a list of collections."
            )
        if relation_type == "any":
            return AnyRelation(tuple(targets))
        return AnyTypeRelation(tuple(targets))
    raise SchemaError(f"Field '{label}' has unsupported relation type: {relation_type}")

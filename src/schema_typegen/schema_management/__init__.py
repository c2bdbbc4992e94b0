"""Schema management exports."""

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
from .snapshot_loader import SchemaError, build_schema_model, load_schema_snapshot

__all__ = [
    "AnyRelation",
    "AnyTypeRelation",
    "Choice",
    "Collection",
    "Field",
    "InterfaceOptions",
    "ManyRelation",
    "OneRelation",
    "Relation",
    "SchemaModel",
    "SchemaError",
    "build_schema_model",
    "load_schema_snapshot",
]

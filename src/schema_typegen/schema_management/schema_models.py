"""Schema model entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_PRESENTATIONAL_PREFIXES = ("presentation-", "group-")


@dataclass(frozen=True)
class OneRelation:
    """Field holds a single reference into another collection."""

    collection: str


@dataclass(frozen=True)
class ManyRelation:
    """Field holds a list of references into another collection."""

    collection: str


@dataclass(frozen=True)
class AnyRelation:
    """Polymorphic reference into one of several collections."""

    collections: tuple[str, ...]


@dataclass(frozen=True)
class AnyTypeRelation:
    """Discriminator naming which collection a sibling polymorphic reference points to."""

    collections: tuple[str, ...]


Relation = OneRelation | ManyRelation | AnyRelation | AnyTypeRelation


@dataclass(frozen=True)
class Choice:
    """One declared interface choice; children are only used by tree interfaces."""

    value: object
    children: tuple[Choice, ...] = ()


@dataclass(frozen=True)
class InterfaceOptions:
    """Interface-specific metadata relevant to typing."""

    choices: tuple[Choice, ...] = ()
    allow_other: bool = False
    sub_fields: tuple[Field, ...] = ()


@dataclass(frozen=True)
class Field:  # pylint: disable=too-many-instance-attributes
    """One named, typed member of a collection."""

    name: str
    type: str
    nullable: bool = False
    required: bool = False
    primary_key: bool = False
    interface: str | None = None
    options: InterfaceOptions = field(default_factory=InterfaceOptions)
    relation: Relation | None = None

    @property
    def is_presentational(self) -> bool:
        """Return True for UI-only fields that store no value."""
        if self.interface is None:
            return False
        return self.interface.startswith(_PRESENTATIONAL_PREFIXES)


@dataclass(frozen=True)
class Collection:
    """Named record type in the content schema."""

    name: str
    singleton: bool = False
    fields: tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for member in self.fields:
            if member.name in seen:
                raise ValueError(f"Duplicate field '{member.name}' in collection '{self.name}'.")
            seen.add(member.name)

    def primary_key_field(self) -> Field | None:
        """Return the primary key field, falling back to a field named `id`."""
        fallback = None
        for member in self.fields:
            if member.primary_key:
                return member
            if member.name == "id" and fallback is None:
                fallback = member
        return fallback


class SchemaModel(Mapping[str, Collection]):
    """Read-only, insertion-ordered mapping of collection name to collection."""

    def __init__(self, collections: Mapping[str, Collection]) -> None:
        for name, collection in collections.items():
            if name != collection.name:
                raise ValueError(
                    f"Collection key '{name}' does not match collection name '{collection.name}'."
                )
        self._collections = MappingProxyType(dict(collections))

    @classmethod
    def from_collections(cls, collections: Iterable[Collection]) -> SchemaModel:
        """Build a model keyed by each collection's name, keeping the given order."""
        keyed: dict[str, Collection] = {}
        for collection in collections:
            if collection.name in keyed:
                raise ValueError(f"Duplicate collection '{collection.name}'.")
            keyed[collection.name] = collection
        return cls(keyed)

    def __getitem__(self, name: str) -> Collection:
        return self._collections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._collections)

    def __len__(self) -> int:
        return len(self._collections)

    def __repr__(self) -> str:
        return f"SchemaModel({list(self._collections)!r})"

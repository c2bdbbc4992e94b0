"""Record and directory declaration emitter tests."""

from __future__ import annotations

import pytest
from schema_typegen.configuration.runtime_settings import ComputedField, GenerationOptions
from schema_typegen.schema_management.schema_models import (
    AnyRelation,
    Choice,
    Collection,
    Field,
    InterfaceOptions,
    ManyRelation,
    OneRelation,
    SchemaModel,
)
from schema_typegen.type_generation.declaration_emitter import generate_type_definitions
from schema_typegen.type_generation.type_resolver import SchemaInconsistencyError


def _blog_schema() -> SchemaModel:
    return SchemaModel.from_collections(
        [
            Collection(
                name="blog_posts",
                fields=(
                    Field(name="id", type="integer", primary_key=True),
                    Field(
                        name="author",
                        type="integer",
                        nullable=True,
                        relation=OneRelation("authors"),
                    ),
                ),
            ),
            Collection(
                name="authors",
                fields=(Field(name="id", type="integer", primary_key=True),),
            ),
        ]
    )


def test_emits_records_then_directory_in_schema_order() -> None:
    output = generate_type_definitions(_blog_schema())

    assert output == (
        "export type BlogPosts = {\n"
        "  id: number;\n"
        "  author?: number | Authors | null;\n"
        "};\n"
        "\n"
        "export type Authors = {\n"
        "  id: number;\n"
        "};\n"
        "\n"
        "export type CustomDirectusTypes = {\n"
        "  blog_posts: BlogPosts[];\n"
        "  authors: Authors[];\n"
        "};\n"
    )


def test_output_order_follows_schema_order_not_alphabetical() -> None:
    schema = SchemaModel.from_collections(
        [Collection(name="zebra"), Collection(name="apple")]
    )

    output = generate_type_definitions(schema)

    assert output.index("export type Zebra") < output.index("export type Apple")
    assert output.index("zebra: Zebra[];") < output.index("apple: Apple[];")


def test_singleton_collections_are_not_array_wrapped() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(name="settings", singleton=True, fields=(Field(name="id", type="integer"),)),
            Collection(name="pages", fields=(Field(name="id", type="integer"),)),
        ]
    )

    output = generate_type_definitions(schema)

    assert "  settings: Settings;\n" in output
    assert "  pages: Pages[];\n" in output


def test_legacy_singular_mode_drops_array_wrapping() -> None:
    output = generate_type_definitions(
        _blog_schema(), GenerationOptions(legacy_singular_mode=True)
    )

    assert "  blog_posts: BlogPosts;\n" in output
    assert "  authors: Authors;\n" in output


def test_presentational_fields_never_appear() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(
                name="pages",
                fields=(
                    Field(name="id", type="integer"),
                    Field(
                        name="notice",
                        type="alias",
                        interface="presentation-notice",
                        required=True,
                    ),
                    Field(
                        name="seo_group",
                        type="alias",
                        interface="group-detail",
                        relation=ManyRelation("missing"),
                    ),
                ),
            )
        ]
    )

    output = generate_type_definitions(schema)

    assert "notice" not in output
    assert "seo_group" not in output


def test_non_identifier_field_names_are_quoted() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(
                name="people",
                fields=(
                    Field(name="first-name", type="string"),
                    Field(name="last name", type="string", nullable=True),
                    Field(name="$meta", type="json"),
                ),
            )
        ]
    )

    output = generate_type_definitions(schema)

    assert '  "first-name": string;\n' in output
    assert '  "last name"?: string | null;\n' in output
    assert "  $meta: unknown;\n" in output


def test_empty_collection_renders_empty_record() -> None:
    output = generate_type_definitions(SchemaModel.from_collections([Collection(name="empty")]))

    assert output.startswith("export type Empty = {};\n\n")


def test_custom_directory_type_name() -> None:
    output = generate_type_definitions(
        _blog_schema(), GenerationOptions(directory_type_name="Schema")
    )

    assert "export type Schema = {\n" in output
    assert "CustomDirectusTypes" not in output


def test_computed_fields_are_appended_after_schema_fields() -> None:
    options = GenerationOptions(
        computed_fields={
            "authors": (
                ComputedField(name="visited_at", type_expression="string | null"),
                ComputedField(name="score", type_expression="number", optional=True),
            )
        }
    )

    output = generate_type_definitions(_blog_schema(), options)

    assert (
        "export type Authors = {\n"
        "  id: number;\n"
        "  visited_at: string | null;\n"
        "  score?: number;\n"
        "};\n"
    ) in output


def test_computed_fields_for_unknown_collection_are_rejected() -> None:
    options = GenerationOptions(
        computed_fields={"stations": (ComputedField(name="voted_at", type_expression="string"),)}
    )

    with pytest.raises(SchemaInconsistencyError, match="stations.voted_at"):
        generate_type_definitions(_blog_schema(), options)


def test_inconsistent_schema_produces_no_output() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(
                name="posts",
                fields=(Field(name="tags", type="alias", relation=ManyRelation("tags")),),
            )
        ]
    )

    with pytest.raises(SchemaInconsistencyError, match="posts.tags"):
        generate_type_definitions(schema)


def test_switching_intersection_mode_only_changes_relation_members() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(
                name="posts",
                fields=(
                    Field(name="id", type="integer", primary_key=True),
                    Field(name="title", type="string", nullable=True),
                    Field(
                        name="author",
                        type="integer",
                        nullable=True,
                        relation=OneRelation("posts"),
                    ),
                    Field(name="item", type="string", relation=AnyRelation(("posts",))),
                ),
            )
        ]
    )

    union_lines = generate_type_definitions(schema).splitlines()
    intersection_lines = generate_type_definitions(
        schema, GenerationOptions(use_intersection_types=True)
    ).splitlines()

    changed = [
        (before, after)
        for before, after in zip(union_lines, intersection_lines, strict=True)
        if before != after
    ]
    assert changed == [
        ("  author?: number | Posts | null;", "  author?: (number & Posts) | null;")
    ]


def test_generation_is_deterministic_and_does_not_mutate_schema() -> None:
    schema = SchemaModel.from_collections(
        [
            Collection(
                name="posts",
                fields=(
                    Field(name="id", type="integer"),
                    Field(
                        name="labels",
                        type="json",
                        interface="tags",
                        options=InterfaceOptions(choices=(Choice("a"), Choice("b"))),
                    ),
                ),
            )
        ]
    )
    snapshot = dict(schema)

    first = generate_type_definitions(schema)
    second = generate_type_definitions(schema)
    generate_type_definitions(schema, GenerationOptions(use_intersection_types=True))

    assert first == second
    assert dict(schema) == snapshot
    assert '  labels: ("a" | "b")[];\n' in first

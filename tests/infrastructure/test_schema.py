"""Tests for the graphql-core schema front-end."""

from __future__ import annotations

from pathlib import Path

import pytest
from graphql import build_schema

from gqlts.domain.descriptors import ListType, NamedType, NonNullType, scalar
from gqlts.infrastructure.schema import (
    SchemaError,
    descriptor_from_graphql,
    exportable_types,
    get_composite_type,
    load_schema,
    parse_type_reference,
)


@pytest.fixture
def schema(schema_file: Path):
    return load_schema(schema_file)


class TestLoadSchema:
    def test_loads_types(self, schema) -> None:
        assert schema.get_type("User") is not None
        assert schema.get_type("Money") is not None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaError) as exc_info:
            load_schema(tmp_path / "nope.graphql")
        assert exc_info.value.code == "SCHEMA_ERROR"
        assert "not found" in str(exc_info.value)

    def test_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.graphql"
        path.write_text("type User {", encoding="utf-8")
        with pytest.raises(SchemaError, match="Invalid schema"):
            load_schema(path)

    def test_unknown_type_in_sdl(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.graphql"
        path.write_text("type Query { me: Missing }", encoding="utf-8")
        with pytest.raises(SchemaError):
            load_schema(path)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.graphql"
        path.write_bytes(b"\xff\xfe\x00type")
        with pytest.raises(SchemaError) as exc_info:
            load_schema(path)
        assert exc_info.value.code == "SCHEMA_ERROR"
        assert "Cannot read schema" in str(exc_info.value)


class TestDescriptorFromGraphql:
    def test_field_shapes(self, schema) -> None:
        user = schema.get_type("User")
        assert descriptor_from_graphql(user.fields["id"].type) == NonNullType(scalar("ID"))
        assert descriptor_from_graphql(user.fields["friends"].type) == ListType(NamedType("User"))
        assert descriptor_from_graphql(user.fields["tags"].type) == NonNullType(
            ListType(NonNullType(scalar("String")))
        )

    def test_custom_scalar_is_scalar(self, schema) -> None:
        user = schema.get_type("User")
        assert descriptor_from_graphql(user.fields["createdAt"].type) == scalar("DateTime")

    def test_enum_is_named_non_scalar(self, schema) -> None:
        user = schema.get_type("User")
        assert descriptor_from_graphql(user.fields["role"].type) == NamedType("Role")

    def test_union(self, schema) -> None:
        query = schema.get_type("Query")
        assert descriptor_from_graphql(query.fields["search"].type) == NonNullType(
            ListType(NonNullType(NamedType("SearchResult")))
        )


class TestParseTypeReference:
    def test_without_schema(self) -> None:
        assert parse_type_reference("[User!]!") == NonNullType(
            ListType(NonNullType(NamedType("User")))
        )

    def test_builtin_scalar_without_schema(self) -> None:
        assert parse_type_reference("Int") == scalar("Int")

    def test_extra_scalars(self) -> None:
        assert parse_type_reference("DateTime!", extra_scalars=["DateTime"]) == NonNullType(
            scalar("DateTime")
        )

    def test_unknown_name_is_object_without_schema(self) -> None:
        assert parse_type_reference("DateTime") == NamedType("DateTime")

    def test_schema_decides_scalar(self, schema) -> None:
        assert parse_type_reference("Money", schema) == scalar("Money")
        assert parse_type_reference("[Role]", schema) == ListType(NamedType("Role"))

    def test_unknown_name_with_schema(self, schema) -> None:
        with pytest.raises(SchemaError) as exc_info:
            parse_type_reference("Nope", schema)
        assert exc_info.value.code == "UNKNOWN_TYPE"

    @pytest.mark.parametrize("text", ["[User", "User!!", "", "[]"])
    def test_syntax_errors(self, text: str) -> None:
        with pytest.raises(SchemaError) as exc_info:
            parse_type_reference(text)
        assert exc_info.value.code == "INVALID_TYPE_REFERENCE"


class TestCompositeTypes:
    def test_get_composite(self, schema) -> None:
        assert get_composite_type(schema, "Node").name == "Node"

    def test_get_composite_unknown(self, schema) -> None:
        with pytest.raises(SchemaError) as exc_info:
            get_composite_type(schema, "Nope")
        assert exc_info.value.code == "UNKNOWN_TYPE"

    @pytest.mark.parametrize("name", ["Role", "Money", "SearchResult", "String"])
    def test_get_composite_rejects_leaf_and_union(self, schema, name: str) -> None:
        with pytest.raises(SchemaError) as exc_info:
            get_composite_type(schema, name)
        assert exc_info.value.code == "NOT_A_COMPOSITE_TYPE"


class TestExportableTypes:
    def test_all_declared_types(self, schema) -> None:
        names = [t.name for t in exportable_types(schema)]
        assert names == [
            "CreateUserInput",
            "Node",
            "Post",
            "Query",
            "Role",
            "SearchResult",
            "User",
        ]

    def test_introspection_types_excluded(self) -> None:
        schema = build_schema("type Query { ok: Boolean }")
        assert [t.name for t in exportable_types(schema)] == ["Query"]

    def test_closure_follows_fields(self, schema) -> None:
        names = [t.name for t in exportable_types(schema, [schema.get_type("Post")])]
        assert names == ["Post", "Role", "User"]

    def test_closure_follows_union_members(self, schema) -> None:
        names = [t.name for t in exportable_types(schema, [schema.get_type("Query")])]
        assert names == ["Post", "Query", "Role", "SearchResult", "User"]

    def test_closure_skips_scalars(self, schema) -> None:
        roots = [schema.get_type("CreateUserInput")]
        assert [t.name for t in exportable_types(schema, roots)] == ["CreateUserInput", "Role"]

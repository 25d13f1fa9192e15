"""Schema front-end — SDL files and type references to descriptors.

Everything graphql-core specific lives here.  The rest of the package
sees only :mod:`gqlts.domain.descriptors`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from graphql import (
    GraphQLError,
    GraphQLList,
    GraphQLNonNull,
    GraphQLSchema,
    build_schema,
    get_named_type,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)
from graphql.language import ListTypeNode, NamedTypeNode, NonNullTypeNode, parse_type

from gqlts.domain.descriptors import ListType, NamedType, NonNullType

if TYPE_CHECKING:
    from graphql import (
        GraphQLInputObjectType,
        GraphQLInterfaceType,
        GraphQLNamedType,
        GraphQLObjectType,
        GraphQLType,
    )
    from graphql.language import TypeNode

    from gqlts.domain.descriptors import TypeDescriptor

    CompositeType = GraphQLObjectType | GraphQLInterfaceType | GraphQLInputObjectType

logger = logging.getLogger(__name__)

BUILTIN_SCALARS: frozenset[str] = frozenset({"String", "Int", "Float", "Boolean", "ID"})


class SchemaError(Exception):
    """A schema or type reference could not be loaded or resolved.

    Attributes:
        code: Machine-readable error code carried into ``ServiceError``.
    """

    def __init__(self, message: str, *, code: str = "SCHEMA_ERROR") -> None:
        super().__init__(message)
        self.code = code


def load_schema(path: Path) -> GraphQLSchema:
    """Build a schema from the SDL file at *path*."""
    if not path.is_file():
        raise SchemaError(f"Schema file not found: {path}")
    try:
        sdl = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Cannot read schema {path}: {exc}") from exc
    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError) as exc:
        raise SchemaError(f"Invalid schema in {path}: {exc}") from exc
    logger.debug("Loaded schema %s (%d types)", path, len(schema.type_map))
    return schema


def descriptor_from_graphql(type_: GraphQLType) -> TypeDescriptor:
    """Convert a graphql-core type object into a descriptor."""
    if is_non_null_type(type_):
        assert isinstance(type_, GraphQLNonNull)
        return NonNullType(descriptor_from_graphql(type_.of_type))
    if is_list_type(type_):
        assert isinstance(type_, GraphQLList)
        return ListType(descriptor_from_graphql(type_.of_type))
    return NamedType(type_.name, is_scalar=is_scalar_type(type_))  # type: ignore[union-attr]


def parse_type_reference(
    text: str,
    schema: GraphQLSchema | None = None,
    extra_scalars: Iterable[str] = (),
) -> TypeDescriptor:
    """Parse GraphQL type-reference syntax such as ``[User!]!``.

    With a *schema*, named types must exist in it and their kind decides
    whether they are scalars.  Without one, built-in scalars and
    *extra_scalars* are scalars and every other name is treated as an
    object type.
    """
    try:
        node = parse_type(text)
    except GraphQLError as exc:
        raise SchemaError(
            f"Invalid type reference {text!r}: {exc.message}", code="INVALID_TYPE_REFERENCE"
        ) from exc
    scalars = BUILTIN_SCALARS | frozenset(extra_scalars)
    return _descriptor_from_node(node, schema, scalars)


def _descriptor_from_node(
    node: TypeNode, schema: GraphQLSchema | None, scalars: frozenset[str]
) -> TypeDescriptor:
    if isinstance(node, NonNullTypeNode):
        return NonNullType(_descriptor_from_node(node.type, schema, scalars))
    if isinstance(node, ListTypeNode):
        return ListType(_descriptor_from_node(node.type, schema, scalars))
    assert isinstance(node, NamedTypeNode)
    name = node.name.value
    if schema is None:
        return NamedType(name, is_scalar=name in scalars)
    named = schema.get_type(name)
    if named is None:
        raise SchemaError(f"Unknown type: {name}", code="UNKNOWN_TYPE")
    return NamedType(name, is_scalar=is_scalar_type(named))


def get_composite_type(schema: GraphQLSchema, name: str) -> CompositeType:
    """Look up an object, interface, or input object type by *name*."""
    named = schema.get_type(name)
    if named is None:
        raise SchemaError(f"Unknown type: {name}", code="UNKNOWN_TYPE")
    if not _is_composite(named):
        raise SchemaError(
            f"{name} has no fields (object, interface, or input type expected)",
            code="NOT_A_COMPOSITE_TYPE",
        )
    return named  # type: ignore[return-value]


def _is_composite(type_: GraphQLType) -> bool:
    return is_object_type(type_) or is_interface_type(type_) or is_input_object_type(type_)


def exportable_types(
    schema: GraphQLSchema, roots: Iterable[GraphQLNamedType] | None = None
) -> list[GraphQLNamedType]:
    """Types that need a TypeScript declaration, sorted by name.

    Composite, enum, and union types qualify.  With *roots*, only those
    types and everything their fields or union members reach are returned,
    so every declaration a generated file refers to is generated too.
    Without *roots*, every user-defined qualifying type is returned.
    """
    if roots is None:
        found = [
            t
            for t in schema.type_map.values()
            if _is_declared(t) and not is_introspection_type(t)
        ]
        return sorted(found, key=lambda t: t.name)

    seen: dict[str, GraphQLNamedType] = {}
    pending = list(roots)
    while pending:
        type_ = pending.pop()
        if type_.name in seen or not _is_declared(type_):
            continue
        seen[type_.name] = type_
        if is_union_type(type_):
            pending.extend(type_.types)  # type: ignore[attr-defined]
        elif _is_composite(type_):
            pending.extend(
                get_named_type(field.type)
                for field in type_.fields.values()  # type: ignore[attr-defined]
            )
    return sorted(seen.values(), key=lambda t: t.name)


def _is_declared(type_: GraphQLType) -> bool:
    return _is_composite(type_) or is_enum_type(type_) or is_union_type(type_)

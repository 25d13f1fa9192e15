"""TypeScript type expressions produced by the type mapper.

The set of shapes is closed: ``TypeExpression`` enumerates every variant
and consumers dispatch on it with ``isinstance``.  Nodes are frozen so
they compare by value and can be shared between trees.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PrimitiveKind(StrEnum):
    """TypeScript primitive keywords reachable from GraphQL built-in scalars."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class PrimitiveKeyword:
    kind: PrimitiveKind


@dataclass(frozen=True)
class ArrayOf:
    """``T[]``, or ``ReadonlyArray<T>`` when *read_only* is set."""

    element: TypeExpression
    read_only: bool = False


@dataclass(frozen=True)
class TypeReference:
    name: str


@dataclass(frozen=True)
class UnionOf:
    """Ordered union; member order is preserved when printed."""

    members: tuple[TypeExpression, ...]


@dataclass(frozen=True)
class AnyType:
    pass


@dataclass(frozen=True)
class NullKeyword:
    pass


TypeExpression = PrimitiveKeyword | ArrayOf | TypeReference | UnionOf | AnyType | NullKeyword


def referenced_names(expr: TypeExpression) -> set[str]:
    """Names of every ``TypeReference`` inside *expr*."""
    if isinstance(expr, TypeReference):
        return {expr.name}
    if isinstance(expr, ArrayOf):
        return referenced_names(expr.element)
    if isinstance(expr, UnionOf):
        names: set[str] = set()
        for member in expr.members:
            names |= referenced_names(member)
        return names
    return set()

"""Serialize TypeScript type expressions to source text.

The only precedence rule TypeScript needs here: a union used as the
element of ``T[]`` must be parenthesized, otherwise ``A | null[]`` would
read as ``A | (null[])``.  Generic arguments need no parentheses, so
``ReadonlyArray<Foo | null>`` is printed bare rather than as
``ReadonlyArray<(Foo | null)>``; the two are the same type.

Generated files are ES modules: each declaration is exported, and
references to sibling declarations are pulled in with ``import type``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING

from gqlts.domain.expressions import (
    AnyType,
    ArrayOf,
    NullKeyword,
    PrimitiveKeyword,
    TypeReference,
    UnionOf,
)

if TYPE_CHECKING:
    from gqlts.domain.expressions import TypeExpression

INDENT = "  "


def print_type(expr: TypeExpression) -> str:
    """Render *expr* as TypeScript type syntax."""
    if isinstance(expr, PrimitiveKeyword):
        return str(expr.kind)
    if isinstance(expr, TypeReference):
        return expr.name
    if isinstance(expr, AnyType):
        return "any"
    if isinstance(expr, NullKeyword):
        return "null"
    if isinstance(expr, UnionOf):
        return " | ".join(print_type(member) for member in expr.members)
    if isinstance(expr, ArrayOf):
        element = print_type(expr.element)
        if expr.read_only:
            return f"ReadonlyArray<{element}>"
        if isinstance(expr.element, UnionOf):
            element = f"({element})"
        return f"{element}[]"
    raise TypeError(f"Not a type expression: {expr!r}")


def print_interface(name: str, fields: Iterable[tuple[str, TypeExpression]]) -> str:
    """Render an exported interface declaration, one property per line.

    Field order is preserved.  An interface without fields renders as
    ``export interface Name {}``.
    """
    lines = [f"{INDENT}{field_name}: {print_type(expr)};" for field_name, expr in fields]
    if not lines:
        return f"export interface {name} {{}}\n"
    body = "\n".join(lines)
    return f"export interface {name} {{\n{body}\n}}\n"


def print_imports(names: Iterable[str]) -> str:
    """Type-only imports of sibling ``./<Name>`` modules, sorted by name.

    Returns an empty string when there is nothing to import, otherwise the
    import lines followed by a blank separator line.
    """
    lines = [f'import type {{ {name} }} from "./{name}";' for name in sorted(set(names))]
    if not lines:
        return ""
    return "\n".join(lines) + "\n\n"


def print_type_alias(name: str, expr: TypeExpression) -> str:
    """``export type Name = T;``"""
    return f"export type {name} = {print_type(expr)};\n"


def print_enum(name: str, values: Iterable[str]) -> str:
    """A GraphQL enum as a union of its value names as string literals."""
    literals = " | ".join(json.dumps(value) for value in values)
    return f"export type {name} = {literals or 'never'};\n"

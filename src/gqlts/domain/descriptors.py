"""GraphQL type references as plain, immutable descriptors.

A descriptor is the already-parsed shape of a field or argument type:
a named type wrapped in any number of List / NonNull modifiers.
``[User!]`` becomes ``ListType(NonNullType(NamedType("User")))``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NamedType:
    """A scalar, enum, object, interface, union, or input type, by name."""

    name: str
    is_scalar: bool = False


@dataclass(frozen=True)
class ListType:
    """List modifier around another descriptor."""

    of_type: TypeDescriptor


@dataclass(frozen=True)
class NonNullType:
    """NonNull modifier around another descriptor."""

    of_type: TypeDescriptor


TypeDescriptor = NamedType | ListType | NonNullType


def scalar(name: str) -> NamedType:
    """Shorthand for a scalar named type."""
    return NamedType(name, is_scalar=True)


def describe(descriptor: TypeDescriptor) -> str:
    """Render a descriptor back into GraphQL type-reference syntax.

    Examples:
        >>> describe(NonNullType(ListType(NamedType("User"))))
        '[User]!'
    """
    if isinstance(descriptor, NonNullType):
        return f"{describe(descriptor.of_type)}!"
    if isinstance(descriptor, ListType):
        return f"[{describe(descriptor.of_type)}]"
    return descriptor.name


def named_type(descriptor: TypeDescriptor) -> NamedType:
    """Strip every List / NonNull modifier and return the innermost named type."""
    while not isinstance(descriptor, NamedType):
        descriptor = descriptor.of_type
    return descriptor

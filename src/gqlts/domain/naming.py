"""Identifier casing rules for generated TypeScript names."""

from __future__ import annotations


def capitalize(s: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the tail is not lower-cased.

    Examples:
        >>> capitalize("id")
        'Id'
        >>> capitalize("userProfile")
        'UserProfile'
        >>> capitalize("")
        ''
    """
    return s[:1].upper() + s[1:]


def interface_name(name: str, prefix: str | None) -> str:
    """Name of the generated interface for GraphQL type *name*.

    With a prefix the name becomes ``{prefix}J{Name}``; without one the
    GraphQL name is used as-is.
    """
    if prefix:
        return f"{prefix}J{capitalize(name)}"
    return name

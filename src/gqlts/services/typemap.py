"""TypeMapper — GraphQL type descriptors to TypeScript type expressions.

Nullability is the outer concern: every GraphQL type that is not wrapped
in NonNull becomes ``T | null``.  List elements keep their own
nullability, so ``[User]`` maps to ``(User | null)[]``.

The mapper is configured once from :class:`CodegenOptions` and is pure
afterwards; a single instance may be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING

from gqlts.domain.descriptors import ListType, NamedType, NonNullType, named_type
from gqlts.domain.expressions import (
    AnyType,
    ArrayOf,
    NullKeyword,
    PrimitiveKeyword,
    PrimitiveKind,
    TypeReference,
    UnionOf,
)
from gqlts.domain.naming import interface_name

if TYPE_CHECKING:
    from gqlts.config.models import CodegenOptions
    from gqlts.domain.descriptors import TypeDescriptor
    from gqlts.domain.expressions import TypeExpression

logger = logging.getLogger(__name__)

DEFAULT_FILE_EXTENSION = "ts"

SCALAR_TABLE: MappingProxyType[str, PrimitiveKeyword] = MappingProxyType(
    {
        "String": PrimitiveKeyword(PrimitiveKind.STRING),
        "Int": PrimitiveKeyword(PrimitiveKind.NUMBER),
        "Float": PrimitiveKeyword(PrimitiveKind.NUMBER),
        "Boolean": PrimitiveKeyword(PrimitiveKind.BOOLEAN),
        "ID": PrimitiveKeyword(PrimitiveKind.STRING),
    }
)


def _readonly_array(element: TypeExpression) -> ArrayOf:
    return ArrayOf(element, read_only=True)


def _mutable_array(element: TypeExpression) -> ArrayOf:
    return ArrayOf(element, read_only=False)


class TypeMapper:
    """Translate descriptors using a fixed set of codegen options.

    Usage::

        mapper = make_type_mapper(CodegenOptions(use_read_only_types=True))
        mapper(ListType(NonNullType(scalar("ID"))))
        # UnionOf((ArrayOf(PrimitiveKeyword(STRING), read_only=True), NullKeyword()))
    """

    def __init__(self, options: CodegenOptions) -> None:
        self._options = options
        self._wrap_array: Callable[[TypeExpression], ArrayOf] = (
            _readonly_array if options.use_read_only_types else _mutable_array
        )

    @property
    def options(self) -> CodegenOptions:
        return self._options

    def __call__(
        self, descriptor: TypeDescriptor, override_name: str | None = None
    ) -> TypeExpression:
        return self.translate(descriptor, override_name)

    def translate(
        self, descriptor: TypeDescriptor, override_name: str | None = None
    ) -> TypeExpression:
        """Translate *descriptor*, adding ``| null`` unless it is NonNull.

        *override_name* replaces the GraphQL name: for scalars it is the
        key looked up in :data:`SCALAR_TABLE`, for other named types it
        becomes the referenced TypeScript name verbatim.
        """
        if isinstance(descriptor, NonNullType):
            return self.translate_non_nullable(descriptor.of_type, override_name)
        base = self.translate_non_nullable(descriptor, override_name)
        return UnionOf((base, NullKeyword()))

    def translate_non_nullable(
        self, descriptor: TypeDescriptor, override_name: str | None = None
    ) -> TypeExpression:
        """Translate *descriptor* as if it could never be null."""
        if isinstance(descriptor, ListType):
            return self._wrap_array(self.translate(descriptor.of_type, override_name))
        if isinstance(descriptor, NonNullType):
            # NonNull inside NonNull is not valid GraphQL; treat the inner type as the base.
            return self.translate_non_nullable(descriptor.of_type, override_name)
        if descriptor.is_scalar:
            return self._scalar(descriptor, override_name)
        return self._named(descriptor, override_name)

    def _scalar(self, descriptor: NamedType, override_name: str | None) -> TypeExpression:
        builtin = SCALAR_TABLE.get(override_name or descriptor.name)
        if builtin is not None:
            return builtin
        if self._options.passthrough_custom_scalars:
            prefix = self._options.custom_scalars_prefix or ""
            return TypeReference(prefix + descriptor.name)
        logger.debug("Custom scalar %s has no TypeScript mapping; using any", descriptor.name)
        return AnyType()

    def _named(self, descriptor: NamedType, override_name: str | None) -> TypeReference:
        if override_name:
            return TypeReference(override_name)
        return TypeReference(interface_name(descriptor.name, self._options.ts_interface_prefix))


def make_type_mapper(options: CodegenOptions) -> TypeMapper:
    """Build a :class:`TypeMapper` bound to *options*."""
    return TypeMapper(options)


def unmapped_scalar(
    descriptor: TypeDescriptor,
    options: CodegenOptions,
    override_name: str | None = None,
) -> str | None:
    """Name of the custom scalar inside *descriptor* that would map to ``any``.

    None when the innermost type is not a scalar, resolves to a built-in
    (directly or through *override_name*), or when scalar passthrough is
    enabled.
    """
    inner = named_type(descriptor)
    if not inner.is_scalar or (override_name or inner.name) in SCALAR_TABLE:
        return None
    if options.passthrough_custom_scalars:
        return None
    return inner.name

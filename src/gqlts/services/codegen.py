"""CodegenService — type references, field tables, and TypeScript modules.

Thin orchestration over the schema front-end, the type mapper, and the
printer.  Schema problems come back as ``ok=False`` results; custom
scalars that degrade to ``any`` come back as warnings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from graphql import is_enum_type, is_union_type

from gqlts.domain.descriptors import NamedType, describe
from gqlts.domain.expressions import UnionOf, referenced_names
from gqlts.domain.naming import interface_name
from gqlts.infrastructure.schema import (
    SchemaError,
    descriptor_from_graphql,
    exportable_types,
    get_composite_type,
    parse_type_reference,
)
from gqlts.output.printer import (
    print_enum,
    print_imports,
    print_interface,
    print_type,
    print_type_alias,
)
from gqlts.services.base import BaseService
from gqlts.services.result import ServiceResult
from gqlts.services.typemap import DEFAULT_FILE_EXTENSION, unmapped_scalar

if TYPE_CHECKING:
    from graphql import GraphQLNamedType

    from gqlts.domain.descriptors import TypeDescriptor
    from gqlts.domain.expressions import TypeExpression
    from gqlts.infrastructure.schema import CompositeType

logger = logging.getLogger(__name__)


def _scalar_warning(name: str) -> str:
    return f"Custom scalar '{name}' mapped to 'any'"


class CodegenService(BaseService):
    """Translate GraphQL types to TypeScript using the configured options."""

    def translate(
        self,
        type_ref: str,
        *,
        schema_path: str | None = None,
        override_name: str | None = None,
        extra_scalars: Sequence[str] = (),
    ) -> ServiceResult:
        """Translate a single type reference such as ``[User!]!``.

        Without a schema, names not listed as scalars (built-in, in
        *extra_scalars*, or in ``[source] scalars``) are object types.
        """
        op = "translate"
        scalars = (*self._settings.source.scalars, *extra_scalars)
        try:
            schema = self._load_schema(schema_path)
            descriptor = parse_type_reference(type_ref, schema, scalars)
        except SchemaError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), type_ref=type_ref)

        expr = self._mapper(descriptor, override_name)
        warnings: list[str] = []
        self._collect_warning(descriptor, warnings, override_name)
        return ServiceResult(
            ok=True,
            op=op,
            data={"graphql": describe(descriptor), "typescript": print_type(expr)},
            warnings=warnings,
            meta=self._meta(),
        )

    def field_types(self, type_name: str, *, schema_path: str | None = None) -> ServiceResult:
        """Map every field of an object, interface, or input type."""
        op = "fields"
        try:
            schema = self._require_schema(schema_path)
            composite = get_composite_type(schema, type_name)
        except SchemaError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), type=type_name)

        warnings: list[str] = []
        fields: list[dict[str, Any]] = []
        for name, descriptor, expr in self._map_fields(composite, warnings):
            fields.append(
                {"name": name, "graphql": describe(descriptor), "typescript": print_type(expr)}
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"type": type_name, "fields": fields, "count": len(fields)},
            warnings=warnings,
            meta=self._meta(),
        )

    def export_interfaces(
        self,
        output_dir: Path,
        *,
        schema_path: str | None = None,
        type_names: Iterable[str] = (),
    ) -> ServiceResult:
        """Write one ``<Name>.ts`` module per declared schema type.

        Objects, interfaces and inputs become interfaces, unions become
        type aliases and enums become string-literal unions.  Named
        *type_names* are exported together with every type they reach, so
        each ``import type`` in the output resolves to a written file.
        Exports every user-defined type when *type_names* is empty.
        """
        op = "export_interfaces"
        try:
            schema = self._require_schema(schema_path)
            names = list(type_names)
            if names:
                roots = [get_composite_type(schema, name) for name in names]
                targets = exportable_types(schema, roots)
            else:
                targets = exportable_types(schema)
        except SchemaError as exc:
            return ServiceResult.failure(op, exc.code, str(exc))

        prefix = self._settings.codegen.ts_interface_prefix
        declared = {interface_name(t.name, prefix) for t in targets}
        warnings: list[str] = []
        files: list[str] = []
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for type_ in targets:
                ts_name = interface_name(type_.name, prefix)
                declaration, refs = self._declaration(type_, ts_name, warnings)
                imports = print_imports((refs & declared) - {ts_name})
                path = output_dir / f"{ts_name}.{DEFAULT_FILE_EXTENSION}"
                path.write_text(imports + declaration, encoding="utf-8")
                logger.debug("Wrote %s", path)
                files.append(str(path))
        except OSError as exc:
            return ServiceResult.failure(
                op,
                "OUTPUT_ERROR",
                f"Cannot write to {output_dir}: {exc}",
                output_dir=str(output_dir),
                files=files,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"output_dir": str(output_dir), "files": files, "count": len(files)},
            warnings=warnings,
            meta=self._meta(),
        )

    # ── Internals ─────────────────────────────────────────────────────

    def _map_fields(
        self, composite: CompositeType, warnings: list[str]
    ) -> list[tuple[str, TypeDescriptor, TypeExpression]]:
        mapped: list[tuple[str, TypeDescriptor, TypeExpression]] = []
        for name, field in composite.fields.items():
            descriptor = descriptor_from_graphql(field.type)
            self._collect_warning(descriptor, warnings)
            mapped.append((name, descriptor, self._mapper(descriptor)))
        return mapped

    def _collect_warning(
        self,
        descriptor: TypeDescriptor,
        warnings: list[str],
        override_name: str | None = None,
    ) -> None:
        name = unmapped_scalar(descriptor, self._settings.codegen, override_name)
        if name is None:
            return
        message = _scalar_warning(name)
        if message not in warnings:
            warnings.append(message)

    def _declaration(
        self, type_: GraphQLNamedType, ts_name: str, warnings: list[str]
    ) -> tuple[str, set[str]]:
        """Source text for *type_* and the names it refers to."""
        if is_enum_type(type_):
            return print_enum(ts_name, type_.values), set()  # type: ignore[attr-defined]
        if is_union_type(type_):
            expr = UnionOf(
                tuple(
                    self._mapper.translate_non_nullable(NamedType(member.name))
                    for member in type_.types  # type: ignore[attr-defined]
                )
            )
            return print_type_alias(ts_name, expr), referenced_names(expr)
        mapped = self._map_fields(type_, warnings)  # type: ignore[arg-type]
        fields = [(name, expr) for name, _, expr in mapped]
        refs: set[str] = set()
        for _, expr in fields:
            refs |= referenced_names(expr)
        return print_interface(ts_name, fields), refs

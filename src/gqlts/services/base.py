"""BaseService — shared foundation for gqlts services.

Every service receives the resolved :class:`GqltsSettings` and builds its
type mapper from the ``[codegen]`` options once, at construction time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gqlts.infrastructure.schema import SchemaError, load_schema
from gqlts.services.typemap import make_type_mapper

if TYPE_CHECKING:
    from graphql import GraphQLSchema

    from gqlts.config.settings import GqltsSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CodegenService(BaseService):
            def translate(self, type_ref: str) -> ServiceResult:
                expr = self._mapper(...)
    """

    def __init__(self, settings: GqltsSettings) -> None:
        self._settings = settings
        self._mapper = make_type_mapper(settings.codegen)

    def _load_schema(self, schema_path: str | None) -> GraphQLSchema | None:
        """Load the schema named on the CLI or in ``[source] path``.

        Returns None when neither names one.
        """
        path = self._settings.resolve_schema_path(schema_path)
        if path is None:
            return None
        return load_schema(path)

    def _require_schema(self, schema_path: str | None) -> GraphQLSchema:
        schema = self._load_schema(schema_path)
        if schema is None:
            raise SchemaError(
                "No schema given: pass --schema or set [source] path in gqlts.toml",
                code="NO_SCHEMA",
            )
        return schema

    def _meta(self) -> dict[str, object]:
        """Options in effect, attached to results for ``--verbose``."""
        return {"codegen": self._settings.codegen.model_dump(exclude_none=True)}

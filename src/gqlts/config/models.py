"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gqlts.toml only contains overrides.
An empty file (or no file at all) maps GraphQL types with stock options.
"""

from __future__ import annotations

from pydantic import BaseModel


class CodegenOptions(BaseModel):
    """[codegen] section — options consumed by the type mapper."""

    model_config = {"frozen": True}

    use_read_only_types: bool = False
    passthrough_custom_scalars: bool = False
    custom_scalars_prefix: str | None = None
    ts_interface_prefix: str | None = None


class SourceConfig(BaseModel):
    """[source] section — where GraphQL types come from."""

    model_config = {"frozen": True}

    path: str | None = None
    scalars: tuple[str, ...] = ()

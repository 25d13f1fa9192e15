"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gqlts.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gqlts.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render bare values for ``--quiet`` mode.

    ``translate`` prints only the TypeScript type, ``fields`` prints
    ``name: type`` lines, ``export_interfaces`` prints written paths.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "translate":
        return str(data.get("typescript", ""))
    if result.op == "fields":
        return "\n".join(f"{f['name']}: {f['typescript']}" for f in data.get("fields", []))
    if result.op == "export_interfaces":
        return "\n".join(str(p) for p in data.get("files", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="gqlts.ok"), Text(f"  {result.op}", style="gqlts.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="gqlts.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="gqlts.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gqlts.error")
    op = Text(f"  {result.op}", style="gqlts.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_translate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "graphql", result.data.get("graphql", ""), "gqlts.graphql")
    _field(console, "typescript", result.data.get("typescript", ""), "gqlts.ts")
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a type's fields as a GraphQL/TypeScript table."""
    fields = result.data.get("fields", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", no_wrap=True)
    table.add_column("GraphQL", style="gqlts.graphql")
    table.add_column("TypeScript", style="gqlts.ts")
    for f in fields:
        table.add_row(Text(str(f["name"])), Text(str(f["graphql"])), Text(str(f["typescript"])))

    console.print(Text(str(result.data.get("type", "")), style="bold"))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(fields))} fields")
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "output_dir", result.data.get("output_dir", ""), "gqlts.path")
    _field(console, "count", result.data.get("count", 0))
    if verbose:
        for path in result.data.get("files", []):
            console.print(Text(f"    {path}", style="gqlts.path"))
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data key."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Renderer] = {
    "translate": _render_translate,
    "fields": _render_fields,
    "export_interfaces": _render_export,
}

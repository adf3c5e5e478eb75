"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.  Record
values are always printed as :class:`Text`, never as markup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from git_drive.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from git_drive.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "trailers":
        return "\n".join(result.data.get("trailers", []))
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("alias", "")) for item in items)
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _line(console: Console, *parts: Text) -> None:
    console.print(*parts, sep="", soft_wrap=True)


def _status_line(console: Console, result: ServiceResult) -> None:
    _line(console, Text("OK", style="gd.ok"), Text(f"  {result.op}", style="gd.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "gd.alias" if key == "alias" else ""
    _line(console, Text(f"  {key}: ", style="gd.key"), Text(str(value), style=style))


def _entry(console: Console, item: dict[str, Any]) -> None:
    _line(
        console,
        Text(str(item["alias"]), style="gd.alias"),
        Text(f": {item['name']} "),
        Text(f"<{item['email']}>", style="gd.email"),
    )


# ── Renderers ─────────────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console) -> None:
    for item in result.data.get("items", []):
        _entry(console, item)


def _render_trailers(result: ServiceResult, console: Console) -> None:
    for trailer in result.data.get("trailers", []):
        _line(console, Text(trailer, style="gd.trailer"))


def _render_delete(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    deleted = result.data.get("deleted", [])
    _field(console, "deleted", ", ".join(deleted) if deleted else "nothing")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if value is None:
            continue
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console) -> None:
    message = result.error.message if result.error else "Unknown error"
    _line(
        console,
        Text("ERROR", style="gd.error"),
        Text(f"  {result.op}", style="gd.op"),
        Text(f" — {message}"),
    )
    if result.error is None:
        return
    for key, value in result.error.detail.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "list_navigators": _render_list,
    "list_drivers": _render_list,
    "trailers": _render_trailers,
    "delete_navigators": _render_delete,
    "delete_drivers": _render_delete,
}

"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

Container and group names are user data and may contain ``[``; they are
always wrapped in :class:`~rich.text.Text` so Rich never reads them as markup.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from merryctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from merryctl.services.result import ServiceResult


_PAST_TENSE = {"start": "Started", "stop": "Stopped"}


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "containers" in result.data:
        return "\n".join(result.data["containers"])
    if result.op == "list_groups":
        return "\n".join(g["name"] for g in result.data.get("groups", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="merry.ok")
    op = Text(f"  {result.op}", style="merry.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="merry.key")
    console.print(k, Text(str(value)), sep="", end="")
    console.print()


def _container_line(console: Console, name: str, status: str | None = None) -> None:
    line = Text("    - ")
    line.append(name, style="merry.container")
    if status:
        line.append(" ")
        line.append(f"[{status}]", style=style_for_status(status))
    console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="merry.error")
    op = Text(f"  {result.op}", style="merry.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err is None:
        return
    # Captured orchestrator output is shown verbatim even without --verbose.
    output = err.detail.get("output")
    if output:
        console.print(Text(str(output)))
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "output":
                console.print(Text(f"    {k}: {v}"))


# ── Group renderers ───────────────────────────────────────────────────


def _render_bulk(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render enable/disable results."""
    d = result.data
    _status_line(console, result)

    if d.get("message"):
        console.print(Text(f"  {d['message']}"))
    else:
        verb = _PAST_TENSE.get(d.get("action", ""), "Processed")
        groups = ", ".join(d.get("groups", []))
        console.print(Text(f"  {verb} {d.get('count', 0)} containers from groups: {groups}"))
        for name in d.get("containers", []):
            _container_line(console, name)

    if verbose:
        _field(console, "requested", ", ".join(d.get("requested", [])))


def _render_list_groups(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render every group with its containers and their run state."""
    console.print(Text("Container Groups:", style="merry.group"))
    console.print("================")

    groups = result.data.get("groups", [])
    if not groups:
        console.print()
        console.print(Text("  No groups configured"))
        return

    for group in groups:
        console.print()
        console.print(Text(f"{group['name'].upper()}:", style="merry.group"))
        console.print(Text(f"  Description: {group.get('description', '')}"))
        containers = group.get("containers", [])
        if not containers:
            console.print(Text("  Containers: None found"))
            continue
        console.print(Text(f"  Containers ({len(containers)}):"))
        for container in containers:
            _container_line(console, container["name"], container["status"])


# ── Fund renderer ─────────────────────────────────────────────────────


def _render_fund(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    if d.get("chain") == "bitcoin":
        console.print(Text(f"  Successfully submitted at {d.get('explorer_url', '')}"))
    else:
        console.print(
            Text(
                f"  Successfully funded address. TxHash: {d.get('tx_hash', '')}. "
                f"New Balance: {d.get('new_balance', '')} {d.get('unit', '')}."
            )
        )
    if verbose:
        for key in ("chain", "address"):
            _field(console, key, d.get(key, ""))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "enable": _render_bulk,
    "disable": _render_bulk,
    "list_groups": _render_list_groups,
    "fund": _render_fund,
}

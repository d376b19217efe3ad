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

from reachstat.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from reachstat.services.result import ServiceResult

NO_DATA = "no data"


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
    """Render a single line for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    d = result.data
    if result.op == "analyze":
        return " ".join(
            [
                str(d["pairs_found"]),
                format_percent(d["percent_connected"]),
                format_average(d["average_distance"]).replace(" ", "-"),
                str(d["longest_distance"]),
            ]
        )
    if result.op == "distance":
        return str(d["distance"]) if d["reachable"] else "unreachable"
    if result.op == "profile":
        return f"{d['diameter']} {format_percent(d['percent_connected'])}"
    return f"OK: {result.op}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_average(value: float | None) -> str:
    """Average distance, or ``no data`` when no pair was connected."""
    if value is None:
        return NO_DATA
    return f"{value:.4f}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="reach.ok")
    op = Text(f"  {result.op}", style="reach.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="reach.key")
    if key == "file":
        v = Text(str(value), style="reach.path")
    else:
        v = Text(str(value), style=style)
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"

    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{k}={v}" for k, v in annotations.items())
        line += f"  ({extras})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_adjacency_lines(console: Console, adjacency: dict[str, list[str]]) -> None:
    """Print ``node: n1 n2 ...`` for every source node."""
    for node, neighbors in adjacency.items():
        console.print(
            Text(f"    {node}", style="reach.node"),
            Text(": "),
            Text(" ".join(neighbors)),
            sep="",
        )


def _render_warnings_hint(console: Console, result: ServiceResult) -> None:
    if result.warnings:
        _field(console, "skipped_lines", len(result.warnings), style="reach.warning")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="reach.error")
    op = Text(f"  {result.op}", style="reach.op")
    console.print(label, op, Text(": "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── analyze ───────────────────────────────────────────────────────────


def _trial_table(trials: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Iteration", justify="right")
    table.add_column("Start", style="reach.node")
    table.add_column("Target", style="reach.node")
    table.add_column("Distance", justify="right")
    for trial in trials:
        dist = trial["distance"]
        outcome = Text(str(dist)) if dist is not None else Text("no path", "reach.unreachable")
        table.add_row(str(trial["iteration"]), trial["start"], trial["target"], outcome)
    return table


def _render_analyze(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "file", d["file"])
    _field(console, "nodes", d["nodes"])
    _field(console, "edges", d["edges"])
    _field(console, "iterations", d["iterations"])
    if verbose:
        _field(console, "max_node_bound", d["max_node_bound"])
        _field(console, "seed", d["seed"])
    _render_warnings_hint(console, result)

    console.print()
    _field(console, "pairs_found", d["pairs_found"], style="reach.metric")
    _field(
        console,
        "percent_connected",
        format_percent(d["percent_connected"]),
        style="reach.metric",
    )
    _field(
        console,
        "average_distance",
        format_average(d["average_distance"]),
        style="reach.metric",
    )
    _field(console, "longest_distance", d["longest_distance"], style="reach.metric")

    trials = d.get("trials")
    if trials is not None:
        console.print()
        console.print(_trial_table(trials))

    adjacency = d.get("adjacency")
    if adjacency is not None:
        console.print()
        console.print(Text("  adjacency:", style="reach.key"))
        _render_adjacency_lines(console, adjacency)

    if verbose:
        _render_meta(console, result)


# ── graph subcommands ─────────────────────────────────────────────────


def _render_distance(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "file", d["file"])
    _field(console, "start", d["start"], style="reach.node")
    _field(console, "target", d["target"], style="reach.node")
    if d["reachable"]:
        _field(console, "distance", d["distance"], style="reach.metric")
    else:
        _field(console, "distance", "unreachable", style="reach.unreachable")
    if verbose:
        _render_meta(console, result)


def _render_adjacency(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "file", d["file"])
    _field(console, "nodes", d["nodes"])
    _field(console, "edges", d["edges"])
    _render_warnings_hint(console, result)
    console.print(Text("  adjacency:", style="reach.key"))
    _render_adjacency_lines(console, d["adjacency"])
    if verbose:
        _render_meta(console, result)


def _render_profile(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "file", d["file"])
    for key in ("nodes", "source_nodes", "edges", "ordered_pairs", "reachable_pairs"):
        _field(console, key, d[key])
    _field(
        console,
        "percent_connected",
        format_percent(d["percent_connected"]),
        style="reach.metric",
    )
    _field(console, "diameter", d["diameter"], style="reach.metric")
    _render_warnings_hint(console, result)
    if verbose:
        _render_meta(console, result)


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "analyze": _render_analyze,
    "distance": _render_distance,
    "adjacency": _render_adjacency,
    "profile": _render_profile,
}

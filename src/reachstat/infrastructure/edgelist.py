"""Edge-list file reading.

Format: one directed edge per line, ``<from> <to>`` separated by
whitespace. Blank lines are ignored. Any other token count makes the
line malformed: it is skipped, reported, and loading continues.

INVARIANT: An unreadable file raises :class:`FileAccessError`. It never
degrades into an empty graph.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from reachstat.domain.graph import Edge, GraphStore

log = structlog.get_logger(__name__)


class FileAccessError(Exception):
    """The edge-list file could not be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class MalformedLine:
    """A skipped input line."""

    line_number: int  # 1-based
    text: str

    def describe(self) -> str:
        return f"line {self.line_number}: invalid edge {self.text!r}"


@dataclass(frozen=True)
class ParsedEdges:
    edges: list[Edge] = field(default_factory=list)
    malformed: list[MalformedLine] = field(default_factory=list)


@dataclass(frozen=True)
class LoadedGraph:
    """A graph read from disk, with the lines that were skipped."""

    path: Path
    graph: GraphStore
    malformed: list[MalformedLine] = field(default_factory=list)


def parse_edge_lines(lines: Iterable[str]) -> ParsedEdges:
    """Split edge-list text into edges and malformed lines."""
    parsed = ParsedEdges()
    for line_number, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if not tokens:
            continue
        if len(tokens) != 2:
            parsed.malformed.append(MalformedLine(line_number, raw.rstrip("\r\n")))
            continue
        parsed.edges.append((tokens[0], tokens[1]))
    return parsed


def read_edge_list(path: Path | str) -> LoadedGraph:
    """Read an edge-list file into a :class:`GraphStore`.

    Raises:
        FileAccessError: If the file is missing, unreadable, or not UTF-8 text.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            parsed = parse_edge_lines(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(path, str(exc)) from exc

    for bad in parsed.malformed:
        log.debug(
            "edgelist.malformed_line",
            file=str(path),
            line_number=bad.line_number,
            text=bad.text,
        )

    graph = GraphStore.from_edges(parsed.edges)
    log.debug(
        "edgelist.loaded",
        file=str(path),
        nodes=graph.node_count(),
        edges=graph.edge_count(),
        skipped=len(parsed.malformed),
    )
    return LoadedGraph(path=path, graph=graph, malformed=parsed.malformed)

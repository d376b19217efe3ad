"""Shared pytest fixtures for reachstat tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from reachstat.config.settings import ReachSettings
from reachstat.domain.graph import GraphStore
from reachstat.services.telemetry import _current_span, disable_telemetry

# Nine-node directed graph used throughout the suite.
# Every node reaches every other node except 0, which has no in-edges.
DIRECTED_EDGES: list[tuple[str, str]] = [
    ("0", "4"),
    ("1", "2"),
    ("1", "8"),
    ("2", "3"),
    ("3", "1"),
    ("3", "8"),
    ("4", "2"),
    ("5", "4"),
    ("6", "5"),
    ("7", "5"),
    ("7", "6"),
    ("8", "7"),
]
DIRECTED_DIAMETER = 6

# The same graph plus 8 -> 0, which makes it strongly connected.
CONNECTED_EDGES: list[tuple[str, str]] = [*DIRECTED_EDGES, ("8", "0")]
CONNECTED_DIAMETER = 6

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate tests from user config, logging handlers, and telemetry state."""
    for name in ("REACHSTAT_CONFIG", "REACHSTAT_SAMPLING__ITERATIONS", "REACHSTAT_SAMPLING__SEED"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    reach = logging.getLogger("reachstat")
    reach_level = reach.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    reach.setLevel(reach_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ReachSettings:
    """Default settings, discovered from an empty temp directory."""
    return ReachSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def directed_graph() -> GraphStore:
    return GraphStore.from_edges(DIRECTED_EDGES)


@pytest.fixture
def write_edges(tmp_path: Path) -> Callable[..., Path]:
    """Factory: write edge-list text to a file under tmp_path."""

    def _write(text: str, name: str = "graph.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def directed_file(write_edges: Callable[..., Path]) -> Path:
    lines = [f"{source} {target}" for source, target in DIRECTED_EDGES]
    return write_edges("\n".join(lines) + "\n", name="directed.txt")


@pytest.fixture
def connected_file(write_edges: Callable[..., Path]) -> Path:
    lines = [f"{source} {target}" for source, target in CONNECTED_EDGES]
    return write_edges("\n".join(lines) + "\n", name="directed_connected.txt")

"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from typing import Any

from reachstat.output.renderers import format_average, render_quiet, render_result
from reachstat.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _analyze_data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "file": "data/directed.txt",
        "nodes": 9,
        "edges": 12,
        "max_node_bound": 8,
        "iterations": 500,
        "seed": 7,
        "pairs_found": 440,
        "percent_connected": 88.0,
        "average_distance": 3.125,
        "longest_distance": 6,
    }
    data.update(overrides)
    return data


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("analyze", "FILE_ACCESS", "Cannot read x.txt"))
        assert "ERROR" in output
        assert "analyze" in output
        assert "Cannot read x.txt" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("analyze", "FILE_ACCESS", "Bad", reason="[Errno 2] No such file")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "[Errno 2] No such file" in output

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="test"))


# ── analyze ──────────────────────────────────────────────────────────


class TestAnalyzeRenderer:
    def test_summary_fields(self) -> None:
        output = render_result(_ok("analyze", **_analyze_data()))
        assert "OK" in output
        assert "data/directed.txt" in output
        assert "pairs_found: 440" in output
        assert "percent_connected: 88.00%" in output
        assert "average_distance: 3.1250" in output
        assert "longest_distance: 6" in output
        assert "seed" not in output

    def test_no_data_average(self) -> None:
        data = _analyze_data(pairs_found=0, percent_connected=0.0, average_distance=None)
        output = render_result(_ok("analyze", **data))
        assert "average_distance: no data" in output

    def test_trials_table(self) -> None:
        trials = [
            {"iteration": 1, "start": "2", "target": "6", "distance": 4},
            {"iteration": 2, "start": "2", "target": "0", "distance": None},
        ]
        output = render_result(_ok("analyze", **_analyze_data(trials=trials)))
        assert "Iteration" in output
        assert "no path" in output

    def test_adjacency_listing(self) -> None:
        adjacency = {"7": ["5", "6"], "0": ["4"]}
        output = render_result(_ok("analyze", **_analyze_data(adjacency=adjacency)))
        assert "adjacency:" in output
        assert "7: 5 6" in output
        assert "0: 4" in output

    def test_skipped_lines_hint(self) -> None:
        result = ServiceResult(
            ok=True,
            op="analyze",
            data=_analyze_data(),
            warnings=["g.txt: line 2: invalid edge '1 2 3'"],
        )
        assert "skipped_lines: 1" in render_result(result)

    def test_verbose_shows_bound_and_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="analyze",
            data=_analyze_data(),
            meta={
                "telemetry": {
                    "name": "AnalysisService.analyze",
                    "duration_ms": 1.5,
                    "children": [
                        {
                            "name": "sampling",
                            "duration_ms": 1.2,
                            "annotations": {"iterations": 500},
                        }
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "max_node_bound: 8" in output
        assert "seed: 7" in output
        assert "AnalysisService.analyze" in output
        assert "iterations=500" in output


# ── graph ops ─────────────────────────────────────────────────────────


class TestGraphRenderers:
    def test_distance_reachable(self) -> None:
        result = _ok("distance", file="g.txt", start="2", target="6", reachable=True, distance=4)
        assert "distance: 4" in render_result(result)

    def test_distance_unreachable(self) -> None:
        result = _ok(
            "distance", file="g.txt", start="2", target="0", reachable=False, distance=None
        )
        assert "distance: unreachable" in render_result(result)

    def test_adjacency(self) -> None:
        result = _ok("adjacency", file="g.txt", nodes=1, edges=2, adjacency={"1": ["2", "8"]})
        output = render_result(result)
        assert "nodes: 1" in output
        assert "1: 2 8" in output

    def test_profile(self) -> None:
        result = _ok(
            "profile",
            file="g.txt",
            nodes=9,
            source_nodes=9,
            edges=12,
            ordered_pairs=72,
            reachable_pairs=64,
            percent_connected=64 / 72 * 100,
            diameter=6,
        )
        output = render_result(result)
        assert "diameter: 6" in output
        assert "percent_connected: 88.89%" in output

    def test_field_lines_have_single_space_after_key(self) -> None:
        result = _ok("adjacency", file="g.txt", nodes=1, edges=2, adjacency={"1": ["2", "8"]})
        lines = render_result(result).splitlines()
        assert "  nodes: 1" in lines
        assert "  edges: 2" in lines
        assert not any(":  " in line for line in lines)

    def test_unknown_op_is_generic(self) -> None:
        output = render_result(_ok("mystery", answer=42))
        assert "mystery" in output
        assert "answer: 42" in output


# ── quiet mode ────────────────────────────────────────────────────────


class TestQuiet:
    def test_analyze(self) -> None:
        assert render_quiet(_ok("analyze", **_analyze_data())) == "440 88.00% 3.1250 6"

    def test_analyze_no_data(self) -> None:
        data = _analyze_data(pairs_found=0, percent_connected=0.0, average_distance=None)
        assert render_quiet(_ok("analyze", **data)) == "0 0.00% no-data 6"

    def test_distance(self) -> None:
        reachable = _ok("distance", reachable=True, distance=3)
        missing = _ok("distance", reachable=False, distance=None)
        assert render_quiet(reachable) == "3"
        assert render_quiet(missing) == "unreachable"

    def test_profile(self) -> None:
        assert render_quiet(_ok("profile", diameter=6, percent_connected=50.0)) == "6 50.00%"

    def test_error(self) -> None:
        assert render_quiet(_err("analyze", "FILE_ACCESS", "nope")) == "ERROR: analyze: nope"

    def test_other_ops(self) -> None:
        assert render_quiet(_ok("adjacency")) == "OK: adjacency"


def test_format_average() -> None:
    assert format_average(None) == "no data"
    assert format_average(2.0) == "2.0000"

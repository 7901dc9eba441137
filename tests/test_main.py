"""Tests for main.py"""

import pytest

from main import build_runs
from steps import Action


class TestBuildRuns:
    @pytest.mark.parametrize("algorithm", ["bfs", "dfs", "prim", "kruskal", "cycle", "cycle-entry"])
    def test_single_run(self, algorithm):
        runs = build_runs(algorithm, "A", "scan", False, 6)
        assert len(runs) == 1
        title, sequence = runs[0]
        assert title == algorithm
        assert sequence.ok

    def test_heap_prim_matches_scan(self):
        [(_, scan)] = build_runs("prim", "A", "scan", False, 6)
        [(_, heap)] = build_runs("prim", "A", "heap", False, 6)
        assert scan == heap

    def test_acyclic_list(self):
        [(_, sequence)] = build_runs("cycle", "A", "scan", True, 6)
        assert not sequence.outcome.cycle_found

    def test_unknown_start(self):
        [(_, sequence)] = build_runs("bfs", "Z", "scan", False, 6)
        assert sequence.final.action is Action.ERROR

    def test_buffer_demo(self):
        runs = build_runs("buffer", "A", "scan", False, 6)
        assert [title for title, _ in runs] == [
            "enqueue 10", "enqueue 20", "enqueue 30", "peek",
            "dequeue", "dequeue", "dequeue", "dequeue (empty)",
        ]
        assert [sequence.outcome for _, sequence in runs[4:7]] == [10, 20, 30]
        assert not runs[-1][1].ok

    def test_small_buffer_reports_full(self):
        runs = build_runs("buffer", "A", "scan", False, 2)
        assert runs[2][1].final.action is Action.ERROR

    def test_deque_demo(self):
        runs = build_runs("deque", "A", "scan", False, 6)
        assert [sequence.outcome for _, sequence in runs] == [5, 40, 5, 40]

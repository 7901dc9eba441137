"""Tests for linked/cycle.py"""

import math

import pytest

from constants import CYCLIC_LIST, LINEAR_LIST
from errors import ErrorKind
from linked import CycleResult, LinkedList, LinkedNode, delete, detect_cycle, find_cycle_entry
from steps import Action


def chain(n: int, back_to: int | None = None) -> list[LinkedNode]:
    """Nodes 1..n linked in order; the last one points at back_to."""
    nodes = [LinkedNode(i, i * 10, i + 1) for i in range(1, n)]
    nodes.append(LinkedNode(n, n * 10, back_to))
    return nodes


class TestDetectCycle:
    def test_sample_cycle(self):
        sequence = detect_cycle(CYCLIC_LIST, "1")
        result = sequence.outcome
        assert result == CycleResult(cycle_found=True, meeting_node="4", rounds=3)
        assert sequence.final.action is Action.MEET
        assert sequence.final.highlighted_nodes == {"4"}

    def test_sample_steps(self):
        sequence = detect_cycle(CYCLIC_LIST, "1")
        assert sequence.actions() == (
            Action.START, Action.MOVE, Action.MOVE, Action.MOVE, Action.MEET
        )
        positions = [(step.metrics["slow"], step.metrics["fast"]) for step in sequence[:4]]
        assert positions == [("1", "1"), ("2", "3"), ("3", "5"), ("4", "4")]
        assert sequence[1].highlighted_nodes == {"2", "3"}

    def test_linear_list(self):
        sequence = detect_cycle(LINEAR_LIST, "1")
        assert sequence.outcome == CycleResult(False, None, 2)
        assert sequence.final.action is Action.COMPLETE
        assert sequence.final.description == "Fast pointer reached end - No cycle!"

    @pytest.mark.parametrize("n", range(1, 12))
    def test_acyclic_chain_round_bound(self, n):
        result = detect_cycle(chain(n), 1).outcome
        assert not result.cycle_found
        assert result.rounds <= math.ceil(n / 2)

    @pytest.mark.parametrize("n, k", [(1, 1), (2, 1), (2, 2), (5, 3), (6, 1), (7, 7), (9, 4)])
    def test_cycle_starting_at_k(self, n, k):
        assert detect_cycle(chain(n, k), 1).outcome.cycle_found

    def test_accepts_mapping_and_linked_list(self):
        as_mapping = {node.id: node for node in CYCLIC_LIST}
        as_list = LinkedList.from_nodes(CYCLIC_LIST)
        expected = detect_cycle(CYCLIC_LIST, "1")
        assert detect_cycle(as_mapping, "1") == expected
        assert detect_cycle(as_list, "1") == expected

    def test_start_in_the_middle(self):
        assert detect_cycle(CYCLIC_LIST, "4").outcome.cycle_found
        assert not detect_cycle(LINEAR_LIST, "4").outcome.cycle_found


class TestErrors:
    def test_unknown_start(self):
        sequence = detect_cycle(CYCLIC_LIST, "9")
        assert len(sequence) == 1
        assert sequence.error is ErrorKind.UNKNOWN_START_NODE

    def test_dangling_next(self):
        nodes = [LinkedNode("1", 1, "2"), LinkedNode("2", 2, "7")]
        sequence = detect_cycle(nodes, "1")
        assert len(sequence) == 1
        assert sequence.error is ErrorKind.UNKNOWN_ELEMENT

    def test_duplicate_ids(self):
        nodes = [LinkedNode("1", 1, None), LinkedNode("1", 2, None)]
        assert detect_cycle(nodes, "1").error is ErrorKind.DUPLICATE_NODE


class TestFindCycleEntry:
    def test_sample_cycle(self):
        result = find_cycle_entry(CYCLIC_LIST, "1").outcome
        assert result.cycle_found
        assert result.entry == "3"
        assert result.length == 3
        assert result.meeting_node == "4"

    @pytest.mark.parametrize("n, k", [(1, 1), (4, 1), (5, 3), (8, 8), (10, 2), (10, 7)])
    def test_entry_and_length(self, n, k):
        result = find_cycle_entry(chain(n, k), 1).outcome
        assert result.entry == k
        assert result.length == n - k + 1

    def test_no_cycle(self):
        sequence = find_cycle_entry(LINEAR_LIST, "1")
        assert sequence.outcome.entry is None
        assert not sequence.outcome.cycle_found


class TestMetrics:
    def test_cycle_found_is_boolean(self):
        assert detect_cycle(CYCLIC_LIST, "1").final.metrics["cycle_found"] is True
        assert detect_cycle(LINEAR_LIST, "1").final.metrics["cycle_found"] is False
        assert find_cycle_entry(CYCLIC_LIST, "1").final.metrics["cycle_found"] is True

    def test_linked_list_after_delete_is_still_checked(self):
        trimmed = delete(LinkedList.from_nodes(CYCLIC_LIST), 4).outcome
        sequence = detect_cycle(trimmed, trimmed.head)
        assert sequence.ok
        assert sequence.outcome.cycle_found

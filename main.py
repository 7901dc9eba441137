"""
Run an algorithm over the sample inputs and show its steps.

Algorithms available:
- bfs, dfs: traversal of the sample graph from --start
- prim, kruskal: minimum spanning tree of the sample weighted graph
- cycle, cycle-entry: tortoise and hare over the sample linked list
- buffer: enqueue the sample values into a circular buffer, then drain it
- deque: add and remove at both ends of a deque
"""

import logging
from collections.abc import Callable

from constants import (
    CYCLIC_LIST,
    DEFAULT_BUFFER_CAPACITY,
    KRUSKAL_EDGES,
    LINEAR_LIST,
    LOG_FORMAT,
    PRIM_EDGES,
    SAMPLE_BUFFER_VALUES,
    SAMPLE_GRAPH_EDGES,
    SAMPLE_GRAPH_NODES,
    SAMPLE_MST_NODES,
    SAMPLE_QUEUE_VALUES,
    SAMPLE_START_NODE,
)
from graph import run_bfs, run_dfs, run_kruskal, run_prim
from linked import detect_cycle, find_cycle_entry
from steps import StepSequence
from structures import CircularBuffer, Deque
from utils.display import print_sequence

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def buffer_demo(capacity: int) -> list[tuple[str, StepSequence]]:
    buffer: CircularBuffer[int] = CircularBuffer(capacity)
    runs = [(f"enqueue {value}", buffer.enqueue(value)) for value in SAMPLE_BUFFER_VALUES]
    runs.append(("peek", buffer.peek()))
    while not buffer.is_empty:
        runs.append(("dequeue", buffer.dequeue()))
    runs.append(("dequeue (empty)", buffer.dequeue()))
    return runs


def deque_demo() -> list[tuple[str, StepSequence]]:
    deque: Deque[int] = Deque(SAMPLE_QUEUE_VALUES)
    return [
        ("add_front 5", deque.add_front(5)),
        ("add_rear 40", deque.add_rear(40)),
        ("remove_front", deque.remove_front()),
        ("remove_rear", deque.remove_rear()),
    ]


def build_runs(
    algorithm: str, start: str, selection: str, acyclic: bool, capacity: int
) -> list[tuple[str, StepSequence]]:
    linked = LINEAR_LIST if acyclic else CYCLIC_LIST
    head = linked[0].id
    single_runs: dict[str, Callable[[], StepSequence]] = {
        "bfs": lambda: run_bfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, start),
        "dfs": lambda: run_dfs(SAMPLE_GRAPH_NODES, SAMPLE_GRAPH_EDGES, start),
        "prim": lambda: run_prim(SAMPLE_MST_NODES, PRIM_EDGES, selection=selection),
        "kruskal": lambda: run_kruskal(SAMPLE_MST_NODES, KRUSKAL_EDGES),
        "cycle": lambda: detect_cycle(linked, head),
        "cycle-entry": lambda: find_cycle_entry(linked, head),
    }
    if algorithm in single_runs:
        return [(algorithm, single_runs[algorithm]())]
    if algorithm == "buffer":
        return buffer_demo(capacity)
    return deque_demo()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Show the steps of an algorithm run")
    parser.add_argument(
        "--algorithm",
        choices=["bfs", "dfs", "prim", "kruskal", "cycle", "cycle-entry", "buffer", "deque"],
        default="bfs",
        help="Algorithm or structure to run",
    )
    parser.add_argument("--start", default=SAMPLE_START_NODE, help="Traversal start node")
    parser.add_argument(
        "--selection",
        choices=["scan", "heap"],
        default="scan",
        help="Edge selection strategy for Prim",
    )
    parser.add_argument(
        "--acyclic", action="store_true", help="Use the linked list without a cycle"
    )
    parser.add_argument(
        "--capacity", type=int, default=DEFAULT_BUFFER_CAPACITY, help="Circular buffer capacity"
    )
    parser.add_argument(
        "--explore", action="store_true", help="Step through the run in a TUI"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    runs = build_runs(args.algorithm, args.start, args.selection, args.acyclic, args.capacity)
    logger.info(f"Running {args.algorithm}: {len(runs)} sequence(s)")

    for title, sequence in runs:
        if args.explore:
            from utils.io.step_explorer import run_explorer

            run_explorer(sequence, title)
        else:
            print_sequence(sequence, title)

"""
Breadth-first and depth-first traversal as step sequences.

Both engines build the neighbor lookup once from the edge list, so neighbor
order equals edge-list order and every run over the same input yields the
same steps. Nodes outside the start's component are never visited.

Steps:
    run_bfs - VISIT (current node), DISCOVER (edges to unvisited neighbors), ...
    run_dfs - VISIT on entry, TRAVERSE (connecting edge) before each descent, ...
    both    - a terminal COMPLETE step restating the visit order
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from errors import ErrorKind, InvalidGraphError
from graph.types import EdgeLike, Graph, GraphEdge, NodeLike
from localtypes import NodeId
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)


def _prepare(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike], start_id: NodeId
) -> Graph | StepSequence:
    """Validate the input, returning the graph or an error sequence."""
    try:
        graph = Graph.build(nodes, edges)
    except InvalidGraphError as error:
        logger.debug(f"Rejected graph: {error}")
        return error_sequence(error.kind, str(error))
    if start_id not in graph:
        return error_sequence(
            ErrorKind.UNKNOWN_START_NODE, f"Start node {start_id!r} does not exist"
        )
    return graph


def _complete(recorder: StepRecorder, name: str, order: list[NodeId]) -> StepSequence:
    visit_order = tuple(order)
    return recorder.finish(
        f"{name} completed! Visit order: {' → '.join(map(str, visit_order))}",
        metrics={"visit_order": visit_order, "visited": len(visit_order)},
        outcome=visit_order,
    )


def run_bfs(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike], start_id: NodeId
) -> StepSequence:
    """
    Breadth-first search from start_id.

    Each dequeued, unvisited node produces two steps: one highlighting the
    node itself, then one highlighting the edges towards its not-yet-visited
    neighbors, which are queued unless already waiting.

    Returns:
        The step sequence; its outcome is the visit order.
    """
    prepared = _prepare(nodes, edges, start_id)
    if isinstance(prepared, StepSequence):
        return prepared
    adjacency = prepared.neighbors()

    recorder = StepRecorder()
    queue: deque[NodeId] = deque([start_id])
    visited: set[NodeId] = set()
    order: list[NodeId] = []

    while queue:
        current = queue.popleft()
        if current in visited:
            continue

        visited.add(current)
        order.append(current)
        recorder.emit(
            f"Visiting node {current}",
            Action.VISIT,
            nodes=(current,),
            metrics={"visit_order": tuple(order), "queue": tuple(queue)},
        )

        frontier = [
            (neighbor, edge)
            for neighbor, edge in adjacency[current]
            if neighbor not in visited
        ]
        for neighbor, _ in frontier:
            if neighbor not in queue:
                queue.append(neighbor)

        if frontier:
            description = f"Discovered {', '.join(str(n) for n, _ in frontier)} from {current}"
        else:
            description = f"No unvisited neighbors of {current}"
        recorder.emit(
            description,
            Action.DISCOVER,
            nodes=(current,),
            edges=(edge.key for _, edge in frontier),
            metrics={
                "visit_order": tuple(order),
                "frontier": tuple(neighbor for neighbor, _ in frontier),
                "queue": tuple(queue),
            },
        )

    logger.debug(f"BFS from {start_id!r} visited {len(order)} node(s)")
    return _complete(recorder, "BFS", order)


def run_dfs(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike], start_id: NodeId
) -> StepSequence:
    """
    Depth-first search from start_id.

    Uses an explicit stack of (node, remaining neighbors) frames instead of
    recursion; the visit order and the steps are those of the recursive
    formulation: a VISIT step on entering a node, and a TRAVERSE step for
    the connecting edge before descending into each still-unvisited neighbor.

    Returns:
        The step sequence; its outcome is the visit order.
    """
    prepared = _prepare(nodes, edges, start_id)
    if isinstance(prepared, StepSequence):
        return prepared
    adjacency = prepared.neighbors()

    recorder = StepRecorder()
    visited: set[NodeId] = set()
    order: list[NodeId] = []

    def enter(node_id: NodeId) -> Iterator[tuple[NodeId, GraphEdge]]:
        visited.add(node_id)
        order.append(node_id)
        recorder.emit(
            f"Visiting node {node_id}",
            Action.VISIT,
            nodes=(node_id,),
            metrics={"visit_order": tuple(order), "depth": len(stack)},
        )
        return iter(adjacency[node_id])

    stack: list[tuple[NodeId, Iterator[tuple[NodeId, GraphEdge]]]] = []
    stack.append((start_id, enter(start_id)))

    while stack:
        node_id, remaining = stack[-1]
        for neighbor, edge in remaining:
            if neighbor in visited:
                continue
            recorder.emit(
                f"Following edge {node_id}–{neighbor}",
                Action.TRAVERSE,
                nodes=(node_id,),
                edges=(edge.key,),
                metrics={"visit_order": tuple(order), "depth": len(stack)},
            )
            stack.append((neighbor, enter(neighbor)))
            break
        else:
            stack.pop()

    logger.debug(f"DFS from {start_id!r} visited {len(order)} node(s)")
    return _complete(recorder, "DFS", order)


__all__ = ["run_bfs", "run_dfs"]

"""
Minimum spanning tree builders as step sequences.

Prim's algorithm grows a tree from the first node of the node list; Kruskal's
algorithm scans edges by ascending weight and joins components through a
Union-Find. When the graph is not connected both stop early and report a
forest ("disconnected"), which is a valid outcome rather than an error.

Complexity (V=nodes, E=edges):
- Prim, scan selection: O(V × E)
- Prim, heap selection: O(E log E)
- Kruskal: O(E log E) for the sort + O(E α(V)) for the unions
"""

import heapq
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from errors import InvalidGraphError
from graph.types import EdgeLike, Graph, GraphEdge, NodeLike
from localtypes import NodeId
from steps import Action, StepRecorder, StepSequence, error_sequence
from utils.union_find import UnionFind

logger = logging.getLogger(__name__)

type Selection = Literal["scan", "heap"]


@dataclass(frozen=True, slots=True)
class MSTResult:
    """
    Accepted edges of a minimum spanning tree (or forest).

    Attributes:
        edges: Accepted edges, in acceptance order.
        total_weight: Sum of the accepted weights.
        spanning: False when some node could not be reached.
    """

    edges: tuple[GraphEdge, ...]
    total_weight: float
    spanning: bool

    @property
    def status(self) -> str:
        return "spanning" if self.spanning else "disconnected"


def _weighted_graph(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> Graph | StepSequence:
    try:
        return Graph.build(nodes, edges, weighted=True)
    except InvalidGraphError as error:
        logger.debug(f"Rejected graph: {error}")
        return error_sequence(error.kind, str(error))


def _complete(
    recorder: StepRecorder, graph: Graph, tree: Sequence[GraphEdge], weight: float
) -> StepSequence:
    result = MSTResult(
        edges=tuple(tree),
        total_weight=weight,
        spanning=len(tree) == max(len(graph.nodes) - 1, 0),
    )
    if result.spanning:
        description = f"MST complete! Total weight: {weight:g}"
    else:
        description = (
            f"Graph is disconnected: forest of {len(tree)} edge(s), "
            f"total weight {weight:g}"
        )
    logger.debug(f"{description} ({', '.join(edge.label for edge in tree)})")
    return recorder.finish(
        description,
        edges=(edge.key for edge in tree),
        metrics={
            "total_weight": weight,
            "edge_count": len(tree),
            "accepted_edges": tuple(edge.key for edge in tree),
            "status": result.status,
        },
        outcome=result,
    )


# =============================================================================
# Prim
# =============================================================================


def _scan_min_crossing(
    edges: Sequence[GraphEdge], visited: set[NodeId]
) -> GraphEdge | None:
    """Lightest edge with exactly one visited endpoint, first one on ties."""
    best: GraphEdge | None = None
    for edge in edges:
        if (edge.source in visited) == (edge.target in visited):
            continue
        if best is None or edge.weight < best.weight:
            best = edge
    return best


class _CrossingHeap:
    """
    Lazy priority queue over the edges incident to the visited set.

    Entries are keyed by (weight, edge position) so ties resolve in edge-list
    order, matching the linear scan exactly. Edges whose endpoints are both
    visited are dropped when they surface.
    """

    def __init__(self, graph: Graph) -> None:
        self._edges = graph.edges
        self._incident: dict[NodeId, list[int]] = {node_id: [] for node_id in graph.node_ids}
        for position, edge in enumerate(graph.edges):
            self._incident[edge.source].append(position)
            self._incident[edge.target].append(position)
        self._heap: list[tuple[float, int]] = []

    def push_incident(self, node_id: NodeId) -> None:
        for position in self._incident[node_id]:
            heapq.heappush(self._heap, (self._edges[position].weight, position))

    def pop_crossing(self, visited: set[NodeId]) -> GraphEdge | None:
        while self._heap:
            _, position = self._heap[0]
            edge = self._edges[position]
            if (edge.source in visited) != (edge.target in visited):
                return edge
            heapq.heappop(self._heap)
        return None


def run_prim(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    *,
    selection: Selection = "scan",
) -> StepSequence:
    """
    Prim's algorithm from the first node of the node list.

    Each round picks the minimum-weight edge with exactly one endpoint in
    the tree (first in edge-list order on ties), emitting a CONSIDER step
    and then an ACCEPT step that pulls its far endpoint into the tree.

    Args:
        nodes: Node list; its first node seeds the tree.
        edges: Weighted edge list.
        selection: "scan" re-scans the edge list each round; "heap" keeps a
            lazy priority queue. Both produce the same steps.

    Returns:
        The step sequence; its outcome is an MSTResult.
    """
    prepared = _weighted_graph(nodes, edges)
    if isinstance(prepared, StepSequence):
        return prepared
    graph = prepared

    recorder = StepRecorder()
    if not graph.nodes:
        return _complete(recorder, graph, (), 0)

    start = graph.nodes[0].id
    visited: set[NodeId] = {start}
    tree: list[GraphEdge] = []
    weight: float = 0
    heap = _CrossingHeap(graph) if selection == "heap" else None
    if heap is not None:
        heap.push_incident(start)

    recorder.emit(
        f"Starting from node {start}",
        Action.START,
        nodes=(start,),
        metrics={"running_weight": weight, "visited": (start,)},
    )

    while len(visited) < len(graph.nodes):
        if heap is not None:
            edge = heap.pop_crossing(visited)
        else:
            edge = _scan_min_crossing(graph.edges, visited)
        if edge is None:
            break

        recorder.emit(
            f"Considering edge {edge.source}-{edge.target} with weight {edge.weight:g}",
            Action.CONSIDER,
            nodes=visited,
            edges=(edge.key,),
            metrics={"running_weight": weight, "accepted": len(tree)},
        )

        added = edge.target if edge.source in visited else edge.source
        visited.add(added)
        tree.append(edge)
        weight += edge.weight
        if heap is not None:
            heap.push_incident(added)

        recorder.emit(
            f"Added edge {edge.source}-{edge.target} to MST",
            Action.ACCEPT,
            nodes=visited,
            edges=(accepted.key for accepted in tree),
            metrics={
                "running_weight": weight,
                "accepted": len(tree),
                "visited": tuple(node_id for node_id in graph.node_ids if node_id in visited),
            },
        )

    return _complete(recorder, graph, tree, weight)


# =============================================================================
# Kruskal
# =============================================================================


def run_kruskal(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> StepSequence:
    """
    Kruskal's algorithm over a stable ascending sort of the edges.

    Every edge in sorted order gets a CONSIDER step followed by ACCEPT when
    it joins two components, or REJECT when it would close a cycle. The scan
    stops as soon as V-1 edges are accepted.

    Returns:
        The step sequence; its outcome is an MSTResult.
    """
    prepared = _weighted_graph(nodes, edges)
    if isinstance(prepared, StepSequence):
        return prepared
    graph = prepared

    recorder = StepRecorder()
    # sorted() is stable: equal weights keep their edge-list order
    ordered = sorted(graph.edges, key=lambda edge: edge.weight)
    components = UnionFind(graph.node_ids)
    target = max(len(graph.nodes) - 1, 0)
    tree: list[GraphEdge] = []
    weight: float = 0

    recorder.emit(
        "Sorting edges by weight",
        Action.SORT,
        metrics={
            "order": tuple(edge.key for edge in ordered),
            "components": components.component_count,
        },
    )

    for edge in ordered:
        if len(tree) == target:
            break

        recorder.emit(
            f"Considering edge {edge.source}-{edge.target} with weight {edge.weight:g}",
            Action.CONSIDER,
            nodes=edge.key,
            edges=(edge.key,),
            metrics={"running_weight": weight, "accepted": len(tree)},
        )

        if components.union(edge.source, edge.target):
            tree.append(edge)
            weight += edge.weight
            recorder.emit(
                f"Added edge {edge.source}-{edge.target} to MST (no cycle)",
                Action.ACCEPT,
                nodes=edge.key,
                edges=(accepted.key for accepted in tree),
                metrics={
                    "running_weight": weight,
                    "accepted": len(tree),
                    "components": components.component_count,
                },
            )
        else:
            recorder.emit(
                f"Rejected edge {edge.source}-{edge.target} (creates cycle)",
                Action.REJECT,
                nodes=edge.key,
                edges=(edge.key,),
                metrics={
                    "running_weight": weight,
                    "accepted": len(tree),
                    "components": components.component_count,
                },
            )

    return _complete(recorder, graph, tree, weight)


__all__ = ["MSTResult", "run_prim", "run_kruskal"]

"""
Graph model consumed by the traversal and MST engines.

Graphs are immutable values: building one validates the node and edge lists,
and editing one (add_node, add_edge) returns a new validated graph. Position
and other visual fields belong to the presentation layer and are not modeled.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType

from errors import ErrorKind, InvalidGraphError
from localtypes import EdgeKey, NodeId

type NodeLike = GraphNode | NodeId
type EdgeLike = GraphEdge | tuple[NodeId, NodeId] | tuple[NodeId, NodeId, float]


@dataclass(frozen=True, slots=True)
class GraphNode:
    """A node identified by `id`; `label` defaults to the id's text."""

    id: NodeId
    label: str = ""

    @property
    def display(self) -> str:
        return self.label or str(self.id)


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """
    An undirected edge between two node ids.

    Attributes:
        source: First endpoint, as supplied by the caller.
        target: Second endpoint.
        weight: Non-negative weight, required by the MST engines.
    """

    source: NodeId
    target: NodeId
    weight: float | None = None

    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target)

    @property
    def endpoints(self) -> frozenset[NodeId]:
        return frozenset((self.source, self.target))

    def touches(self, node_id: NodeId) -> bool:
        return node_id == self.source or node_id == self.target

    def other(self, node_id: NodeId) -> NodeId:
        """The endpoint opposite to node_id."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        raise ValueError(f"Node {node_id!r} is not an endpoint of {self.label}")

    @property
    def label(self) -> str:
        if self.weight is None:
            return f"{self.source}–{self.target}"
        if isinstance(self.weight, Real):
            return f"{self.source}–{self.target}({self.weight:g})"
        return f"{self.source}–{self.target}({self.weight!r})"


def _to_node(node: NodeLike) -> GraphNode:
    if isinstance(node, GraphNode):
        return node
    return GraphNode(node, str(node))


def _to_edge(edge: EdgeLike) -> GraphEdge:
    if isinstance(edge, GraphEdge):
        return edge
    match tuple(edge):
        case (source, target):
            return GraphEdge(source, target)
        case (source, target, weight):
            return GraphEdge(source, target, weight)
    raise InvalidGraphError(
        ErrorKind.UNKNOWN_ELEMENT,
        f"Edge {edge!r} must be (source, target) or (source, target, weight)",
    )


@dataclass(frozen=True, slots=True)
class Graph:
    """
    Validated node list plus undirected edge list.

    Invariants:
        - node ids are unique
        - every edge joins two distinct, known nodes
        - no two edges share the same unordered endpoint pair
        - when built as weighted, every edge has a non-negative weight

    Edge-list order is preserved: it decides every traversal and MST tie-break.
    """

    nodes: tuple[GraphNode, ...]
    edges: tuple[GraphEdge, ...]

    @classmethod
    def build(
        cls,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike],
        *,
        weighted: bool = False,
    ) -> "Graph":
        """
        Normalize and validate a node list and an edge list.

        Raises:
            InvalidGraphError: On duplicate nodes, self loops, unknown
                endpoints, parallel edges, or missing/negative weights.
        """
        graph_nodes = tuple(_to_node(node) for node in nodes)
        graph_edges = tuple(_to_edge(edge) for edge in edges)

        known: set[NodeId] = set()
        for node in graph_nodes:
            if node.id in known:
                raise InvalidGraphError(
                    ErrorKind.DUPLICATE_NODE, f"Node {node.id!r} appears twice"
                )
            known.add(node.id)

        seen_pairs: set[frozenset[NodeId]] = set()
        for edge in graph_edges:
            if edge.source == edge.target:
                raise InvalidGraphError(
                    ErrorKind.SELF_LOOP, f"Edge {edge.label} is a self loop"
                )
            for endpoint in edge.key:
                if endpoint not in known:
                    raise InvalidGraphError(
                        ErrorKind.UNKNOWN_ELEMENT,
                        f"Edge {edge.label} references unknown node {endpoint!r}",
                    )
            if edge.endpoints in seen_pairs:
                raise InvalidGraphError(
                    ErrorKind.DUPLICATE_EDGE,
                    f"Edge already exists between {edge.source} and {edge.target}",
                )
            seen_pairs.add(edge.endpoints)
            if weighted and not (isinstance(edge.weight, Real) and edge.weight >= 0):
                raise InvalidGraphError(
                    ErrorKind.INVALID_WEIGHT,
                    f"Edge {edge.label} needs a non-negative numeric weight",
                )

        return cls(graph_nodes, graph_edges)

    @property
    def node_ids(self) -> tuple[NodeId, ...]:
        return tuple(node.id for node in self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return any(node.id == node_id for node in self.nodes)

    def neighbors(self) -> Mapping[NodeId, tuple[tuple[NodeId, GraphEdge], ...]]:
        """
        Neighbor lookup built once from the edge list.

        Each node maps to (neighbor, edge) pairs in edge-list order, which
        fixes traversal tie-breaks independently of any hash ordering.
        """
        lookup: dict[NodeId, list[tuple[NodeId, GraphEdge]]] = {
            node.id: [] for node in self.nodes
        }
        for edge in self.edges:
            lookup[edge.source].append((edge.target, edge))
            lookup[edge.target].append((edge.source, edge))
        return MappingProxyType(
            {node_id: tuple(pairs) for node_id, pairs in lookup.items()}
        )

    def add_node(self, node_id: NodeId, label: str = "") -> "Graph":
        """Return a new graph with one more node."""
        node = GraphNode(node_id, label or str(node_id))
        return Graph.build(self.nodes + (node,), self.edges)

    def add_edge(
        self, source: NodeId, target: NodeId, weight: float | None = None
    ) -> "Graph":
        """Return a new graph with one more edge."""
        return Graph.build(self.nodes, self.edges + (GraphEdge(source, target, weight),))


__all__ = ["GraphNode", "GraphEdge", "Graph"]

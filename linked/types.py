"""
Singly-linked structures addressed by node id.

A linked structure is a flat mapping from id to node; `next` is a lookup key,
not an owning reference, so a chain may re-enter an earlier id and form a
cycle. Cycles are detected by linked.cycle, not prevented here.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from errors import ErrorKind, InvalidGraphError
from localtypes import NodeId


@dataclass(frozen=True, slots=True)
class LinkedNode:
    id: NodeId
    value: object
    next: NodeId | None = None


def index_nodes(nodes: Mapping[NodeId, LinkedNode] | Iterable[LinkedNode]) -> Mapping[NodeId, LinkedNode]:
    """
    Build a read-only id -> node mapping and check its references.

    Raises:
        InvalidGraphError: If an id repeats, a mapping key disagrees with its
            node's id, or a `next` names a missing node.
    """
    index: dict[NodeId, LinkedNode] = {}
    if isinstance(nodes, Mapping):
        for key, node in nodes.items():
            if key != node.id:
                raise InvalidGraphError(
                    ErrorKind.UNKNOWN_ELEMENT,
                    f"Key {key!r} holds node {node.id!r}",
                )
            index[key] = node
    else:
        for node in nodes:
            if node.id in index:
                raise InvalidGraphError(
                    ErrorKind.DUPLICATE_NODE, f"Node {node.id!r} appears twice"
                )
            index[node.id] = node

    for node in index.values():
        if node.next is not None and node.next not in index:
            raise InvalidGraphError(
                ErrorKind.UNKNOWN_ELEMENT,
                f"Node {node.id!r} points to unknown node {node.next!r}",
            )
    return MappingProxyType(index)


@dataclass(frozen=True)
class LinkedList:
    """
    Immutable singly-linked list.

    Construction checks every `next` and the head against `nodes`.

    Attributes:
        head: Id of the first node, None when the list is empty.
        nodes: Read-only id -> node mapping.
    """

    head: NodeId | None = None
    nodes: Mapping[NodeId, LinkedNode] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", index_nodes(self.nodes))
        if self.head is not None and self.head not in self.nodes:
            raise InvalidGraphError(
                ErrorKind.UNKNOWN_START_NODE, f"Head {self.head!r} does not exist"
            )

    @classmethod
    def from_nodes(
        cls, nodes: Iterable[LinkedNode], head: NodeId | None = None
    ) -> "LinkedList":
        """Wrap existing nodes; the head defaults to the first one given."""
        ordered = tuple(nodes)
        index = index_nodes(ordered)
        if head is None and ordered:
            head = ordered[0].id
        return cls(head, index)

    @classmethod
    def from_values(
        cls, values: Iterable[object], ids: Sequence[NodeId] | None = None
    ) -> "LinkedList":
        """
        Chain values in order. Ids default to "1", "2", ... as strings.

        Example:
            >>> LinkedList.from_values([10, 20, 30]).values()
            (10, 20, 30)
        """
        values = tuple(values)
        if ids is None:
            ids = tuple(str(position + 1) for position in range(len(values)))
        if len(ids) != len(values):
            raise ValueError(f"Got {len(ids)} ids for {len(values)} values")
        nodes = (
            LinkedNode(node_id, value, ids[position + 1] if position + 1 < len(ids) else None)
            for position, (node_id, value) in enumerate(zip(ids, values))
        )
        return cls.from_nodes(nodes)

    def chain(self) -> tuple[LinkedNode, ...]:
        """Nodes reachable from head, in order. Stops before any repeated id."""
        chain: list[LinkedNode] = []
        seen: set[NodeId] = set()
        current = self.head
        while current is not None and current not in seen:
            seen.add(current)
            node = self.nodes[current]
            chain.append(node)
            current = node.next
        return tuple(chain)

    def ids(self) -> tuple[NodeId, ...]:
        return tuple(node.id for node in self.chain())

    def values(self) -> tuple[object, ...]:
        return tuple(node.value for node in self.chain())

    def __len__(self) -> int:
        return len(self.chain())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes


__all__ = ["LinkedNode", "LinkedList", "index_nodes"]

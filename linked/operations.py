"""
Stepped editing and searching of a LinkedList.

The list is never changed in place: insert and delete return a sequence whose
outcome is the new list, and search returns the position of the first match
(or None when the value is absent, which is an outcome and not an error).
"""

import logging
from types import MappingProxyType

from errors import ErrorKind
from linked.types import LinkedList, LinkedNode
from localtypes import NodeId
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)


def _snapshot(lst: LinkedList) -> dict[str, object]:
    return {"values": lst.values(), "size": len(lst)}


def _relink(nodes: dict[NodeId, LinkedNode], head: NodeId | None) -> LinkedList:
    return LinkedList(head, MappingProxyType(nodes))


def insert(
    lst: LinkedList, value: object, node_id: NodeId, position: int = 0
) -> StepSequence:
    """
    Insert a new node holding value at position.

    Position 0 inserts at the head; a position at or past the end appends
    at the tail.

    Returns:
        The step sequence; its outcome is the new LinkedList.
    """
    if node_id in lst:
        return error_sequence(
            ErrorKind.DUPLICATE_NODE, f"Node {node_id!r} already exists", _snapshot(lst)
        )

    recorder = StepRecorder()
    chain = lst.chain()
    nodes = dict(lst.nodes)

    if position <= 0 or not chain:
        nodes[node_id] = LinkedNode(node_id, value, lst.head)
        result = _relink(nodes, node_id)
        description = f"Inserted {value} at the beginning"
        linked_to = lst.head
    else:
        previous = chain[min(position, len(chain)) - 1]
        recorder.emit(
            f"Walking to node {previous.id} at position {min(position, len(chain)) - 1}",
            Action.VISIT,
            nodes=(previous.id,),
            metrics=_snapshot(lst),
        )
        nodes[node_id] = LinkedNode(node_id, value, previous.next)
        nodes[previous.id] = LinkedNode(previous.id, previous.value, node_id)
        result = _relink(nodes, lst.head)
        if position >= len(chain):
            description = f"Inserted {value} at the end"
        else:
            description = f"Inserted {value} at position {position}"
        linked_to = previous.next

    logger.debug(f"{description} as node {node_id!r}")
    edges = [] if linked_to is None else [(node_id, linked_to)]
    return recorder.finish(
        description,
        Action.LINK,
        nodes=(node_id,),
        edges=edges,
        metrics=_snapshot(result),
        outcome=result,
    )


def delete(lst: LinkedList, value: object) -> StepSequence:
    """
    Remove the first node holding value.

    Returns:
        The step sequence; its outcome is the new LinkedList. Fails with
        EMPTY on an empty list and NOT_FOUND when no node holds value.
    """
    chain = lst.chain()
    if not chain:
        return error_sequence(ErrorKind.EMPTY, "List is empty", _snapshot(lst))

    position = next(
        (position for position, node in enumerate(chain) if node.value == value), None
    )
    if position is None:
        return error_sequence(
            ErrorKind.NOT_FOUND, f"Node with value {value} not found", _snapshot(lst)
        )

    recorder = StepRecorder()
    target = chain[position]
    recorder.emit(
        f"Deleting node with value {value}",
        Action.COMPARE,
        nodes=(target.id,),
        metrics={**_snapshot(lst), "position": position},
    )

    # Every node pointing at the target, including a cycle's back edge, skips it
    successor = None if target.next == target.id else target.next
    nodes = {
        node_id: node if node.next != target.id else LinkedNode(node_id, node.value, successor)
        for node_id, node in lst.nodes.items()
        if node_id != target.id
    }
    head = successor if position == 0 else lst.head
    result = _relink(nodes, head)

    logger.debug(f"Deleted node {target.id!r} at position {position}")
    return recorder.finish(
        f"Deleted node with value {value}",
        Action.REMOVE,
        nodes=(target.id,),
        metrics={**_snapshot(result), "position": position},
        outcome=result,
    )


def search(lst: LinkedList, value: object) -> StepSequence:
    """
    Walk the list from head comparing each node with value.

    Returns:
        The step sequence; its outcome is the position of the first match,
        or None when value is absent.
    """
    recorder = StepRecorder()
    for position, node in enumerate(lst.chain()):
        recorder.emit(
            f"Comparing node {node.id} ({node.value}) with {value}",
            Action.COMPARE,
            nodes=(node.id,),
            metrics={"position": position},
        )
        if node.value == value:
            return recorder.finish(
                f"Found {value} at position {position}",
                nodes=(node.id,),
                metrics={"position": position, "found": True},
                outcome=position,
            )
    return recorder.finish(
        f"Value {value} not found in the list",
        metrics={"position": -1, "found": False},
    )


__all__ = ["insert", "delete", "search"]

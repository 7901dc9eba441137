"""
Floyd's tortoise-and-hare cycle detection as step sequences.

Both pointers start at the head. Each round the slow pointer takes one `next`
hop and the fast pointer two; if fast runs off the end there is no cycle, if
the two land on the same node there is one.

    Idle -> Running -> CycleFound | NoCycle

detect_cycle      - the detection phase only
find_cycle_entry  - detection, then a lock-step walk from head and meeting
                    point that stops on the cycle's entry node
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from errors import ErrorKind, InvalidGraphError
from linked.types import LinkedList, LinkedNode, index_nodes
from localtypes import NodeId
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)

type LinkedInput = LinkedList | Mapping[NodeId, LinkedNode] | Iterable[LinkedNode]


@dataclass(frozen=True, slots=True)
class CycleResult:
    """
    Attributes:
        cycle_found: Whether the pointers met.
        meeting_node: Where they met, None without a cycle.
        rounds: Number of slow/fast rounds played.
        entry: First node of the cycle (find_cycle_entry only).
        length: Number of nodes on the cycle (find_cycle_entry only).
    """

    cycle_found: bool
    meeting_node: NodeId | None
    rounds: int
    entry: NodeId | None = None
    length: int | None = None


def _index(nodes: LinkedInput, start_id: NodeId) -> Mapping[NodeId, LinkedNode] | StepSequence:
    try:
        index = nodes.nodes if isinstance(nodes, LinkedList) else index_nodes(nodes)
    except InvalidGraphError as error:
        logger.debug(f"Rejected linked structure: {error}")
        return error_sequence(error.kind, str(error))
    if start_id not in index:
        return error_sequence(
            ErrorKind.UNKNOWN_START_NODE, f"Start node {start_id!r} does not exist"
        )
    return index


def _pointers(slow: NodeId, fast: NodeId, rounds: int) -> dict[str, object]:
    return {"slow": slow, "fast": fast, "round": rounds}


def _race(
    index: Mapping[NodeId, LinkedNode], start_id: NodeId, recorder: StepRecorder
) -> tuple[NodeId | None, int]:
    """Play the slow/fast rounds. Returns the meeting node (or None) and the round count."""
    slow = fast = start_id
    rounds = 0
    recorder.emit(
        "Initializing slow and fast pointers at head",
        Action.START,
        nodes=(start_id,),
        metrics=_pointers(slow, fast, rounds),
    )

    while True:
        first_hop = index[fast].next
        if first_hop is None:
            return None, rounds
        second_hop = index[first_hop].next
        if second_hop is None:
            return None, rounds

        slow = index[slow].next
        fast = second_hop
        rounds += 1
        recorder.emit(
            "Moving slow pointer by 1, fast pointer by 2",
            Action.MOVE,
            nodes=(slow, fast),
            metrics=_pointers(slow, fast, rounds),
        )
        if slow == fast:
            logger.debug(f"Pointers met at {slow!r} after {rounds} round(s)")
            return slow, rounds


def detect_cycle(nodes: LinkedInput, start_id: NodeId) -> StepSequence:
    """
    Run the tortoise-and-hare race from start_id.

    Args:
        nodes: A LinkedList, an id -> LinkedNode mapping, or LinkedNodes.
        start_id: Where both pointers start.

    Returns:
        The step sequence; its outcome is a CycleResult. It ends with a MEET
        step on the shared node when a cycle exists, otherwise with a
        COMPLETE step once the fast pointer reaches the end.
    """
    index = _index(nodes, start_id)
    if isinstance(index, StepSequence):
        return index

    recorder = StepRecorder()
    meeting, rounds = _race(index, start_id, recorder)
    if meeting is not None:
        return recorder.finish(
            "Pointers met - Cycle detected!",
            Action.MEET,
            nodes=(meeting,),
            metrics={"cycle_found": True, "meeting_node": meeting, "round": rounds},
            outcome=CycleResult(True, meeting, rounds),
        )
    return recorder.finish(
        "Fast pointer reached end - No cycle!",
        metrics={"cycle_found": False, "round": rounds},
        outcome=CycleResult(False, None, rounds),
    )


def find_cycle_entry(nodes: LinkedInput, start_id: NodeId) -> StepSequence:
    """
    Detect a cycle, then locate where it begins and how long it is.

    After the pointers meet, one restarts from start_id and both advance one
    hop at a time; they meet again on the cycle's entry node. A final lap
    from the entry counts the cycle length.

    Returns:
        The step sequence; its outcome is a CycleResult with entry and length
        filled in when a cycle exists.
    """
    index = _index(nodes, start_id)
    if isinstance(index, StepSequence):
        return index

    recorder = StepRecorder()
    meeting, rounds = _race(index, start_id, recorder)
    if meeting is None:
        return recorder.finish(
            "Fast pointer reached end - No cycle!",
            metrics={"cycle_found": False, "round": rounds},
            outcome=CycleResult(False, None, rounds),
        )

    recorder.emit(
        f"Pointers met at {meeting} - restarting one pointer from head",
        Action.MEET,
        nodes=(meeting, start_id),
        metrics={"head_pointer": start_id, "meet_pointer": meeting},
    )
    from_head, from_meeting = start_id, meeting
    while from_head != from_meeting:
        from_head = index[from_head].next
        from_meeting = index[from_meeting].next
        recorder.emit(
            "Moving both pointers by 1",
            Action.MOVE,
            nodes=(from_head, from_meeting),
            metrics={"head_pointer": from_head, "meet_pointer": from_meeting},
        )

    entry = from_head
    length = 1
    current = index[entry].next
    while current != entry:
        current = index[current].next
        length += 1

    logger.debug(f"Cycle enters at {entry!r}, length {length}")
    return recorder.finish(
        f"Cycle starts at node {entry} and spans {length} node(s)",
        Action.MEET,
        nodes=(entry,),
        metrics={"cycle_found": True, "entry": entry, "length": length},
        outcome=CycleResult(True, meeting, rounds, entry, length),
    )


__all__ = ["CycleResult", "detect_cycle", "find_cycle_entry"]

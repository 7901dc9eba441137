"""
Linked structures addressed by node id.

**Types** (types.py)
    - LinkedNode: id, value, next id
    - LinkedList: immutable list with a head and an id -> node mapping

**Cycle detection** (cycle.py)
    - detect_cycle(nodes, start_id): Floyd's tortoise and hare
    - find_cycle_entry(nodes, start_id): detection plus entry node and length

**Operations** (operations.py)
    - insert(lst, value, node_id, position)
    - delete(lst, value)
    - search(lst, value)
"""

from .cycle import CycleResult, detect_cycle, find_cycle_entry
from .operations import delete, insert, search
from .types import LinkedList, LinkedNode

__all__ = [
    # Types
    "LinkedNode",
    "LinkedList",
    # Cycle detection
    "CycleResult",
    "detect_cycle",
    "find_cycle_entry",
    # Operations
    "insert",
    "delete",
    "search",
]

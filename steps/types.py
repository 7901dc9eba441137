"""
Step records: the sole output unit of every engine.

A Step is a snapshot of algorithm progress. Highlight markers and counters
live here, keyed by id, rather than on the input structures, so the engines
never touch what they were given.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from errors import ErrorKind
from localtypes import EdgeKey, Metric, NodeId


class Action(Enum):
    """What a step shows happening."""

    START = "start"
    VISIT = "visit"
    DISCOVER = "discover"
    TRAVERSE = "traverse"
    SORT = "sort"
    CONSIDER = "consider"
    ACCEPT = "accept"
    REJECT = "reject"
    MOVE = "move"
    MEET = "meet"
    ADVANCE = "advance"
    WRITE = "write"
    CAPTURE = "capture"
    CLEAR = "clear"
    PEEK = "peek"
    RESET = "reset"
    ADD = "add"
    REMOVE = "remove"
    COMPARE = "compare"
    LINK = "link"
    COMPLETE = "complete"
    ERROR = "error"


def _empty_metrics() -> Mapping[str, Metric]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Step:
    """
    One discrete, immutable snapshot of algorithm progress.

    Attributes:
        index: Position of the step in its sequence, starting at 0.
        description: Human-readable account of the step.
        action: What the step shows happening.
        highlighted_nodes: Ids to highlight (node ids, or slot indices for buffers).
        highlighted_edges: Edge keys to highlight.
        metrics: Read-only counters and snapshots (running weight, visit order, ...).
        terminal: True only for the last step of a sequence.
        outcome: Result carried by the terminal step, if any.
        error: Set when the run or operation failed.
    """

    index: int
    description: str
    action: Action
    highlighted_nodes: frozenset[NodeId] = frozenset()
    highlighted_edges: frozenset[EdgeKey] = frozenset()
    metrics: Mapping[str, Metric] = field(default_factory=_empty_metrics)
    terminal: bool = False
    outcome: object = None
    error: ErrorKind | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


__all__ = ["Action", "Step"]

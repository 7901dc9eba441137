"""
Error taxonomy for the step-generation core.

Engines never raise for malformed input: validation raises one of the
exceptions below, and the engine boundary turns it into a sequence holding a
single terminal error step. Queue structures report FULL and EMPTY the same
way. Only programmer errors (unknown union-find elements, a non-positive
buffer capacity) escape as exceptions.
"""

from enum import Enum


class ErrorKind(Enum):
    """Reasons a run or an operation could not proceed."""

    UNKNOWN_START_NODE = "unknown_start_node"
    UNKNOWN_ELEMENT = "unknown_element"
    DUPLICATE_NODE = "duplicate_node"
    DUPLICATE_EDGE = "duplicate_edge"
    SELF_LOOP = "self_loop"
    INVALID_WEIGHT = "invalid_weight"
    FULL = "full"
    EMPTY = "empty"
    NOT_FOUND = "not_found"


class DSVizError(Exception):
    """Base class for errors carrying an ErrorKind."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidGraphError(DSVizError, ValueError):
    """Malformed structural input: graphs and linked lists."""


class UnknownElementError(DSVizError, KeyError):
    """Lookup of an id the structure was never told about."""

    def __init__(self, element: object) -> None:
        super().__init__(ErrorKind.UNKNOWN_ELEMENT, f"Unknown element: {element!r}")
        self.element = element

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


__all__ = ["ErrorKind", "DSVizError", "InvalidGraphError", "UnknownElementError"]

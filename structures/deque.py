"""
Unbounded double-ended queue.

Unlike CircularBuffer there is no capacity: this structure shows growth at
either end rather than wrap-around arithmetic. It is backed by
collections.deque, so insertion and removal at both ends are O(1).
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, Literal

from errors import ErrorKind
from localtypes import Metric, T
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)

type Side = Literal["front", "rear"]


class Deque(Generic[T]):
    """Double-ended queue whose operations each emit one terminal step."""

    def __init__(self, initial: Iterable[T] = ()) -> None:
        self._initial: tuple[T, ...] = tuple(initial)
        self._items: deque[T] = deque(self._initial)

    @classmethod
    def create(cls, initial: Iterable[T] | None = None) -> "Deque[T]":
        return cls(initial or ())

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def _metrics(self, side: Side | None) -> dict[str, Metric]:
        return {"side": side or "", "size": self.size, "items": self.items}

    def _edge_index(self, side: Side) -> int:
        return 0 if side == "front" else len(self._items) - 1

    def _add(self, value: T, side: Side) -> StepSequence:
        if side == "front":
            self._items.appendleft(value)
        else:
            self._items.append(value)
        return StepRecorder().finish(
            f"Added {value} to {side}",
            Action.ADD,
            nodes=(self._edge_index(side),),
            metrics=self._metrics(side),
            outcome=value,
        )

    def _remove(self, side: Side) -> StepSequence:
        if not self._items:
            logger.debug(f"Rejected removal from {side}: deque empty")
            return error_sequence(ErrorKind.EMPTY, "Deque is empty!", self._metrics(side))
        index = self._edge_index(side)
        value = self._items.popleft() if side == "front" else self._items.pop()
        return StepRecorder().finish(
            f"Removed {value} from {side}",
            Action.REMOVE,
            nodes=(index,),
            metrics=self._metrics(side),
            outcome=value,
        )

    def add_front(self, value: T) -> StepSequence:
        return self._add(value, "front")

    def add_rear(self, value: T) -> StepSequence:
        return self._add(value, "rear")

    def remove_front(self) -> StepSequence:
        return self._remove("front")

    def remove_rear(self) -> StepSequence:
        return self._remove("rear")

    def reset(self) -> StepSequence:
        """Restore the contents given at creation."""
        self._items = deque(self._initial)
        return StepRecorder().finish("Deque reset", Action.RESET, metrics=self._metrics(None))


__all__ = ["Deque"]

"""
Unbounded FIFO queue: values join at the rear and leave from the front.
"""

import logging
from collections import deque
from collections.abc import Iterable
from typing import Generic

from errors import ErrorKind
from localtypes import Metric, T
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)


class Queue(Generic[T]):
    def __init__(self, initial: Iterable[T] = ()) -> None:
        self._initial: tuple[T, ...] = tuple(initial)
        self._items: deque[T] = deque(self._initial)

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _metrics(self) -> dict[str, Metric]:
        # front is always index 0; rear is -1 when empty
        return {
            "front": 0,
            "rear": len(self._items) - 1,
            "size": self.size,
            "items": self.items,
        }

    def enqueue(self, value: T) -> StepSequence:
        self._items.append(value)
        return StepRecorder().finish(
            f"Enqueued {value} to the rear of the queue",
            Action.ADD,
            nodes=(len(self._items) - 1,),
            metrics=self._metrics(),
            outcome=value,
        )

    def dequeue(self) -> StepSequence:
        if not self._items:
            logger.debug("Rejected dequeue: queue empty")
            return error_sequence(ErrorKind.EMPTY, "Queue is empty!", self._metrics())
        recorder = StepRecorder()
        value = self._items[0]
        recorder.emit(
            f"Dequeuing {value} from front of queue",
            Action.CAPTURE,
            nodes=(0,),
            metrics=self._metrics(),
        )
        self._items.popleft()
        return recorder.finish(
            f"Dequeued {value} from the queue",
            Action.REMOVE,
            metrics=self._metrics(),
            outcome=value,
        )

    def peek(self) -> StepSequence:
        if not self._items:
            return error_sequence(ErrorKind.EMPTY, "Queue is empty!", self._metrics())
        value = self._items[0]
        return StepRecorder().finish(
            f"Front element is: {value}",
            Action.PEEK,
            nodes=(0,),
            metrics=self._metrics(),
            outcome=value,
        )

    def reset(self) -> StepSequence:
        """Restore the contents given at creation."""
        self._items = deque(self._initial)
        return StepRecorder().finish("Queue reset", Action.RESET, metrics=self._metrics())


__all__ = ["Queue"]

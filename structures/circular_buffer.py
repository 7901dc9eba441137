"""
Fixed-capacity FIFO queue with wrap-around indexing.

State is a slot array of length `capacity` plus `front` and `rear` indices,
both -1 while the buffer is empty:

    empty  <=> front == -1
    full   <=> not empty and (rear + 1) % capacity == front
    size    =  (rear - front + capacity) % capacity + 1 when not empty, else 0

Every operation returns a StepSequence describing the affected slot before
and after the change; FULL and EMPTY are reported as a single error step and
leave the buffer untouched.
"""

import logging
from typing import Generic

from constants import DEFAULT_BUFFER_CAPACITY
from errors import ErrorKind
from localtypes import Metric, T
from steps import Action, StepRecorder, StepSequence, error_sequence

logger = logging.getLogger(__name__)

EMPTY_INDEX = -1


class CircularBuffer(Generic[T]):
    """
    Ring-buffer queue of fixed capacity.

    Example:
        >>> buffer = CircularBuffer(6)
        >>> for value in (10, 20, 30):
        ...     _ = buffer.enqueue(value)
        >>> (buffer.front, buffer.rear, buffer.size)
        (0, 2, 3)
        >>> buffer.dequeue().outcome
        10
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._slots: list[T | None] = [None] * capacity
        self._front = EMPTY_INDEX
        self._rear = EMPTY_INDEX

    @classmethod
    def create(cls, capacity: int = DEFAULT_BUFFER_CAPACITY) -> "CircularBuffer[T]":
        return cls(capacity)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def front(self) -> int:
        return self._front

    @property
    def rear(self) -> int:
        return self._rear

    @property
    def is_empty(self) -> bool:
        return self._front == EMPTY_INDEX

    @property
    def is_full(self) -> bool:
        return not self.is_empty and (self._rear + 1) % self.capacity == self._front

    @property
    def size(self) -> int:
        if self.is_empty:
            return 0
        return (self._rear - self._front + self.capacity) % self.capacity + 1

    @property
    def slots(self) -> tuple[T | None, ...]:
        return tuple(self._slots)

    def __len__(self) -> int:
        return self.size

    def _metrics(self, **extra: Metric) -> dict[str, Metric]:
        return {
            "front": self._front,
            "rear": self._rear,
            "size": self.size,
            "capacity": self.capacity,
            "slots": self.slots,
            **extra,
        }

    def enqueue(self, value: T) -> StepSequence:
        """
        Store value after the current rear.

        Two steps: the rear index advancing onto its target slot, then the
        value being written there.
        """
        if self.is_full:
            logger.debug(f"Rejected enqueue of {value!r}: buffer full")
            return error_sequence(ErrorKind.FULL, "Queue is full!", self._metrics())

        previous_front, previous_rear = self._front, self._rear
        target = (self._rear + 1) % self.capacity
        if self.is_empty:
            self._front = target
        self._rear = target

        recorder = StepRecorder()
        recorder.emit(
            f"Enqueuing {value}: rear moves to slot {target}",
            Action.ADVANCE,
            nodes=(target,),
            metrics=self._metrics(
                previous_front=previous_front, previous_rear=previous_rear
            ),
        )
        self._slots[target] = value
        return recorder.finish(
            f"Enqueued {value}",
            Action.WRITE,
            nodes=(target,),
            metrics=self._metrics(
                previous_front=previous_front, previous_rear=previous_rear
            ),
            outcome=value,
        )

    def dequeue(self) -> StepSequence:
        """
        Remove the value at front.

        Two steps: the front slot being captured, then cleared with front
        advancing (or both indices resetting once the last value leaves).
        The terminal step's outcome is the removed value.
        """
        if self.is_empty:
            logger.debug("Rejected dequeue: buffer empty")
            return error_sequence(ErrorKind.EMPTY, "Queue is empty!", self._metrics())

        previous_front, previous_rear = self._front, self._rear
        value = self._slots[previous_front]

        recorder = StepRecorder()
        recorder.emit(
            f"Dequeuing {value} from slot {previous_front}",
            Action.CAPTURE,
            nodes=(previous_front,),
            metrics=self._metrics(),
        )

        self._slots[previous_front] = None
        if self._front == self._rear:
            self._front = self._rear = EMPTY_INDEX
        else:
            self._front = (self._front + 1) % self.capacity

        return recorder.finish(
            f"Dequeued {value}",
            Action.CLEAR,
            nodes=(previous_front,),
            metrics=self._metrics(
                previous_front=previous_front, previous_rear=previous_rear
            ),
            outcome=value,
        )

    def peek(self) -> StepSequence:
        """Report the value at front without removing it."""
        if self.is_empty:
            return error_sequence(ErrorKind.EMPTY, "Queue is empty!", self._metrics())
        value = self._slots[self._front]
        return StepRecorder().finish(
            f"Front element: {value}",
            Action.PEEK,
            nodes=(self._front,),
            metrics=self._metrics(),
            outcome=value,
        )

    def reset(self) -> StepSequence:
        """Return to the all-empty state."""
        self._slots = [None] * self.capacity
        self._front = self._rear = EMPTY_INDEX
        return StepRecorder().finish("Queue reset", Action.RESET, metrics=self._metrics())


__all__ = ["CircularBuffer", "EMPTY_INDEX"]

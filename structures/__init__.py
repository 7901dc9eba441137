"""
Queue structures whose operations return step sequences.

- CircularBuffer: fixed capacity, wrap-around front/rear indices
- Deque: unbounded, O(1) at both ends
- Queue: unbounded FIFO
"""

from .circular_buffer import EMPTY_INDEX, CircularBuffer
from .deque import Deque
from .queue import Queue

__all__ = ["CircularBuffer", "EMPTY_INDEX", "Deque", "Queue"]

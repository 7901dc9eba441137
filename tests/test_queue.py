"""Tests for structures/queue.py"""

from errors import ErrorKind
from steps import Action
from structures import Queue


class TestQueue:
    def test_fifo(self):
        queue: Queue[str] = Queue()
        for value in "abc":
            queue.enqueue(value)
        assert [queue.dequeue().outcome for _ in range(3)] == ["a", "b", "c"]

    def test_enqueue_step(self):
        sequence = Queue([1]).enqueue(2)
        assert sequence.final.action is Action.ADD
        assert sequence.final.highlighted_nodes == {1}
        assert sequence.final.metrics["rear"] == 1

    def test_dequeue_steps(self):
        queue = Queue([1, 2])
        sequence = queue.dequeue()
        assert sequence.actions() == (Action.CAPTURE, Action.REMOVE)
        assert sequence.final.metrics["items"] == (2,)

    def test_empty(self):
        queue: Queue[int] = Queue()
        assert queue.dequeue().error is ErrorKind.EMPTY
        assert queue.peek().error is ErrorKind.EMPTY
        assert queue.dequeue().final.metrics["rear"] == -1

    def test_peek_and_reset(self):
        queue = Queue([4, 5])
        assert queue.peek().outcome == 4
        queue.dequeue()
        queue.reset()
        assert queue.items == (4, 5)
        assert len(queue) == 2

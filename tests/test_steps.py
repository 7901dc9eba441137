"""Tests for steps/"""

import pytest

from errors import ErrorKind
from steps import Action, Step, StepRecorder, StepSequence, error_sequence


def make_sequence() -> StepSequence:
    recorder = StepRecorder()
    recorder.emit("first", Action.START, nodes=("A",))
    recorder.emit("second", Action.VISIT, nodes=("B",), edges=[("A", "B")])
    return recorder.finish("done", metrics={"count": 2}, outcome=("A", "B"))


class TestStepRecorder:
    def test_indices_follow_emission_order(self):
        sequence = make_sequence()
        assert [step.index for step in sequence] == [0, 1, 2]
        assert sequence.descriptions() == ("first", "second", "done")
        assert sequence.actions() == (Action.START, Action.VISIT, Action.COMPLETE)

    def test_only_the_last_step_is_terminal(self):
        sequence = make_sequence()
        assert [step.terminal for step in sequence] == [False, False, True]
        assert sequence.outcome == ("A", "B")
        assert sequence.ok
        assert sequence.error is None

    def test_highlights_are_frozen_sets(self):
        step = make_sequence()[1]
        assert step.highlighted_nodes == frozenset({"B"})
        assert step.highlighted_edges == frozenset({("A", "B")})

    def test_metrics_are_copied_and_read_only(self):
        recorder = StepRecorder()
        counters = {"count": 1}
        recorder.emit("step", Action.VISIT, metrics=counters)
        counters["count"] = 2
        sequence = recorder.finish("done")

        assert sequence[0].metrics["count"] == 1
        with pytest.raises(TypeError):
            sequence[0].metrics["count"] = 3  # type: ignore[index]

    def test_steps_are_immutable(self):
        step = make_sequence()[0]
        with pytest.raises(AttributeError):
            step.description = "changed"  # type: ignore[misc]


class TestStepSequence:
    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            StepSequence([])

    def test_rejects_missing_terminal(self):
        with pytest.raises(ValueError, match="terminal"):
            StepSequence([Step(0, "only", Action.VISIT)])

    def test_rejects_bad_indices(self):
        with pytest.raises(ValueError, match="index"):
            StepSequence([Step(1, "only", Action.COMPLETE, terminal=True)])

    def test_rejects_early_terminal(self):
        steps = [
            Step(0, "a", Action.COMPLETE, terminal=True),
            Step(1, "b", Action.COMPLETE, terminal=True),
        ]
        with pytest.raises(ValueError):
            StepSequence(steps)

    def test_sequence_protocol(self):
        sequence = make_sequence()
        assert len(sequence) == 3
        assert sequence[-1] is sequence.final
        assert len(sequence[:2]) == 2
        assert list(sequence) == list(sequence)  # replayable
        assert sequence == make_sequence()


class TestErrorSequence:
    def test_single_terminal_error_step(self):
        sequence = error_sequence(ErrorKind.FULL, "Queue is full!", {"size": 6})
        assert len(sequence) == 1
        assert sequence.final.terminal
        assert sequence.final.action is Action.ERROR
        assert sequence.error is ErrorKind.FULL
        assert sequence.final.failed
        assert not sequence.ok
        assert sequence.outcome is None
        assert sequence.final.metrics["size"] == 6


class TestStepCursor:
    def test_pulls_one_step_at_a_time(self):
        cursor = make_sequence().cursor()
        assert cursor.current is None
        assert cursor.position == -1
        assert cursor.advance().description == "first"
        assert cursor.advance().description == "second"
        assert cursor.advance().description == "done"
        assert cursor.done
        assert cursor.advance() is None

    def test_retreat_seek_rewind(self):
        cursor = make_sequence().cursor()
        assert cursor.retreat() is None
        assert cursor.seek(2).description == "done"
        assert cursor.retreat().description == "second"
        cursor.rewind()
        assert cursor.current is None
        with pytest.raises(IndexError):
            cursor.seek(3)

    def test_iterates_remaining_steps(self):
        cursor = make_sequence().cursor()
        cursor.advance()
        assert [step.description for step in cursor] == ["second", "done"]
        assert list(cursor) == []

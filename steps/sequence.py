"""
Step sequences: finite, ordered, replayable runs of immutable steps.

StepRecorder  - The only writer; engines emit steps through it
StepSequence  - Immutable result of a run, validated on construction
StepCursor    - Pull-based replay for a presentation layer
error_sequence(kind, description) - The single-terminal-error-step sequence
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import overload

from errors import ErrorKind
from localtypes import EdgeKey, Metric, NodeId
from steps.types import Action, Step


class StepSequence(Sequence[Step]):
    """
    Immutable, ordered list of steps ending in exactly one terminal step.

    Raises:
        ValueError: If the steps are empty, misnumbered, or the terminal
            step is missing or not last.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[Step]) -> None:
        self._steps: tuple[Step, ...] = tuple(steps)
        if not self._steps:
            raise ValueError("A step sequence needs at least one step")
        for position, step in enumerate(self._steps):
            if step.index != position:
                raise ValueError(
                    f"Step at position {position} has index {step.index}"
                )
            if step.terminal != (position == len(self._steps) - 1):
                raise ValueError("Exactly the last step must be terminal")

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Step, ...]: ...

    def __getitem__(self, index: int | slice) -> Step | tuple[Step, ...]:
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepSequence):
            return NotImplemented
        return self._steps == other._steps

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StepSequence({len(self._steps)} steps, final={self.final.action.value})"

    @property
    def final(self) -> Step:
        return self._steps[-1]

    @property
    def outcome(self) -> object:
        return self.final.outcome

    @property
    def error(self) -> ErrorKind | None:
        return self.final.error

    @property
    def ok(self) -> bool:
        return self.final.error is None

    def descriptions(self) -> tuple[str, ...]:
        return tuple(step.description for step in self._steps)

    def actions(self) -> tuple[Action, ...]:
        return tuple(step.action for step in self._steps)

    def cursor(self) -> "StepCursor":
        return StepCursor(self)


class StepCursor(Iterator[Step]):
    """
    Pulls steps one at a time from a sequence.

    The cursor starts before the first step; `advance` moves forward and
    returns the new current step, or None once the sequence is exhausted.
    Stopping early needs no cleanup.

    Example:
        >>> cursor = run_bfs(nodes, edges, "A").cursor()
        >>> while (step := cursor.advance()) is not None:
        ...     draw(step)
    """

    def __init__(self, sequence: StepSequence) -> None:
        self._sequence = sequence
        self._position = -1

    @property
    def position(self) -> int:
        """Index of the current step, -1 before the first pull."""
        return self._position

    @property
    def current(self) -> Step | None:
        if self._position < 0:
            return None
        return self._sequence[self._position]

    @property
    def done(self) -> bool:
        return self._position == len(self._sequence) - 1

    def advance(self) -> Step | None:
        if self.done:
            return None
        self._position += 1
        return self._sequence[self._position]

    def retreat(self) -> Step | None:
        if self._position <= 0:
            return None
        self._position -= 1
        return self._sequence[self._position]

    def seek(self, index: int) -> Step:
        if not 0 <= index < len(self._sequence):
            raise IndexError(f"Step {index} out of range")
        self._position = index
        return self._sequence[index]

    def rewind(self) -> None:
        self._position = -1

    def __next__(self) -> Step:
        step = self.advance()
        if step is None:
            raise StopIteration
        return step


class StepRecorder:
    """
    Accumulates steps during a run, numbering them in emission order.

    Metrics are copied into read-only mappings so later mutation of the
    engine's own counters cannot leak into recorded steps.
    """

    def __init__(self) -> None:
        self._steps: list[Step] = []

    def __len__(self) -> int:
        return len(self._steps)

    def _make(
        self,
        description: str,
        action: Action,
        nodes: Iterable[NodeId],
        edges: Iterable[EdgeKey],
        metrics: Mapping[str, Metric] | None,
        terminal: bool,
        outcome: object,
        error: ErrorKind | None,
    ) -> Step:
        return Step(
            index=len(self._steps),
            description=description,
            action=action,
            highlighted_nodes=frozenset(nodes),
            highlighted_edges=frozenset(edges),
            metrics=MappingProxyType(dict(metrics or {})),
            terminal=terminal,
            outcome=outcome,
            error=error,
        )

    def emit(
        self,
        description: str,
        action: Action,
        *,
        nodes: Iterable[NodeId] = (),
        edges: Iterable[EdgeKey] = (),
        metrics: Mapping[str, Metric] | None = None,
    ) -> Step:
        step = self._make(description, action, nodes, edges, metrics, False, None, None)
        self._steps.append(step)
        return step

    def finish(
        self,
        description: str,
        action: Action = Action.COMPLETE,
        *,
        nodes: Iterable[NodeId] = (),
        edges: Iterable[EdgeKey] = (),
        metrics: Mapping[str, Metric] | None = None,
        outcome: object = None,
        error: ErrorKind | None = None,
    ) -> StepSequence:
        """Append the terminal step and seal the run."""
        step = self._make(description, action, nodes, edges, metrics, True, outcome, error)
        self._steps.append(step)
        return StepSequence(self._steps)


def error_sequence(
    kind: ErrorKind,
    description: str,
    metrics: Mapping[str, Metric] | None = None,
) -> StepSequence:
    """A run that failed before producing any progress."""
    return StepRecorder().finish(
        description, Action.ERROR, metrics=metrics, error=kind
    )


__all__ = ["StepSequence", "StepCursor", "StepRecorder", "error_sequence"]

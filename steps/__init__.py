"""
Step abstraction shared by every engine.

**Types** (types.py)
    - Step: immutable snapshot of algorithm progress
    - Action: what a step shows happening

**Sequences** (sequence.py)
    - StepSequence: finite, ordered, replayable run of steps
    - StepRecorder: numbering writer used by the engines
    - StepCursor: pull-based replay for a presentation layer
    - error_sequence: single terminal error step
"""

from .sequence import StepCursor, StepRecorder, StepSequence, error_sequence
from .types import Action, Step

__all__ = [
    # Types
    "Action",
    "Step",
    # Sequences
    "StepSequence",
    "StepRecorder",
    "StepCursor",
    "error_sequence",
]

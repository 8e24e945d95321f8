# MIT License (see LICENSE)
"""
Timing metadata for elements revealed together.

The choreographer never waits or starts timers. It returns a delay and a
duration per element and leaves playback to the rendering layer.

Schedule for a batch [e0, e1, ...]:
    object elements        delay 0
    i-th other element     delay = lead_in + i * stagger
                           (lead_in becomes stagger when it is 0 and an
                           object element precedes)
    every element          duration = base_duration

With reduced motion every delay and every duration is exactly 0.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..config import EngineConfig
from ..constants import BASE_DURATION, LEAD_IN, STAGGER
from .ordering import OBJECT_STEP, SETUP_STEP
from .sequencer import StepSequencer

# Elements that stand for the object itself and are never staggered.
OBJECT_ELEMENTS: frozenset[str] = frozenset({OBJECT_STEP, SETUP_STEP})


@dataclass(frozen=True)
class ElementTiming:
    """Delay and duration (seconds) of one element's entrance."""
    element_id: str
    delay: float
    duration: float


class AnimationChoreographer:
    """
    Assigns strictly increasing delays to a reveal batch.

    Args:
        base_duration: Entrance duration of each element, seconds.
        stagger: Delay increment between consecutive elements, seconds (> 0).
        lead_in: Delay of the first non-object element, seconds.
    """

    def __init__(
        self,
        base_duration: float = BASE_DURATION,
        stagger: float = STAGGER,
        lead_in: float = LEAD_IN,
    ):
        if base_duration < 0:
            raise ValueError(f"base_duration must be non-negative, got {base_duration}")
        if stagger <= 0:
            raise ValueError(f"stagger must be positive, got {stagger}")
        if lead_in < 0:
            raise ValueError(f"lead_in must be non-negative, got {lead_in}")
        self.base_duration = float(base_duration)
        self.stagger = float(stagger)
        self.lead_in = float(lead_in)

    @classmethod
    def from_config(cls, config: EngineConfig) -> "AnimationChoreographer":
        return cls(config.base_duration, config.stagger, config.lead_in)

    def schedule(
        self,
        element_ids: Sequence[str],
        reduced_motion: bool = False,
        base_duration: float | None = None,
    ) -> list[ElementTiming]:
        """
        Timings for a batch of newly revealed elements, in input order.

        Args:
            element_ids: Elements revealed together, in pedagogical order.
            reduced_motion: Collapse every delay and duration to 0.
            base_duration: Per-call override of the entrance duration.
        """
        if reduced_motion:
            return [ElementTiming(e, 0.0, 0.0) for e in element_ids]

        duration = self.base_duration if base_duration is None else max(0.0, float(base_duration))
        timings: list[ElementTiming] = []
        start = self.lead_in
        i = 0
        for e in element_ids:
            if e in OBJECT_ELEMENTS:
                timings.append(ElementTiming(e, 0.0, duration))
                # Forces after the object never share its zero delay.
                if i == 0 and start == 0.0:
                    start = self.stagger
                continue
            timings.append(ElementTiming(e, start + i * self.stagger, duration))
            i += 1
        return timings

    def schedule_transition(
        self,
        sequencer: StepSequencer,
        previous_step: int,
        reduced_motion: bool = False,
    ) -> list[ElementTiming]:
        """
        Timings for everything revealed between previous_step and the
        sequencer's current step. A step with forces contributes its force
        names; a step without forces contributes its own id.
        """
        return self.schedule(reveal_batch(sequencer, previous_step), reduced_motion)


def reveal_batch(sequencer: StepSequencer, previous_step: int) -> list[str]:
    """Element ids newly revealed since previous_step, in step order."""
    elements: list[str] = []
    for d in sequencer.revealed_between(previous_step):
        if d.force_names:
            elements.extend(d.force_names)
        else:
            elements.append(d.id)
    return elements

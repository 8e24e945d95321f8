# MIT License (see LICENSE)
"""
Single current-step source for a diagram driven either externally or locally.

Override mode (a step override is supplied):
    current_step is the override, clamped into range. next()/prev()/go_to()
    only report the requested step to the driver through on_step_request;
    the displayed step changes when the driver supplies a new override.

Internal mode (no override):
    the adapter owns a StepSequencer and navigation moves it directly.

The mode follows the presence of the override on every update(). Switching
is silent and does not reconcile the two step values: the internal cursor is
left untouched while the driver is in control and resumes from where it was.
"""
from __future__ import annotations
import logging
from typing import Callable, Sequence

from ..types import DiagramStepState, StepDefinition, clamp_step
from .sequencer import StepSequencer

logger = logging.getLogger(__name__)

OVERRIDE = "override"
INTERNAL = "internal"

StepCallback = Callable[[int], None]


class DiagramStateAdapter:
    """
    Args:
        definitions: Step definitions of the diagram.
        step_override: Externally pushed visible step, or None.
        initial_step: Starting step of the internal cursor.
        on_step_request: Called with the requested step when navigation is
                         attempted in override mode.
        on_step_change: Called with the new step after an internal move that
                        changed it.
    """

    def __init__(
        self,
        definitions: Sequence[StepDefinition],
        step_override: int | None = None,
        initial_step: int = 0,
        on_step_request: StepCallback | None = None,
        on_step_change: StepCallback | None = None,
    ):
        self._internal = StepSequencer(definitions, initial_step)
        self._view: StepSequencer | None = None
        self.on_step_request = on_step_request
        self.on_step_change = on_step_change
        self.update(step_override)

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------

    def update(self, step_override: int | None = None) -> None:
        """Apply the driver's latest override value (None hands control back)."""
        was = self.mode
        if step_override is None:
            self._view = None
        else:
            clamped = clamp_step(step_override, self._internal.total_steps)
            if clamped != step_override:
                logger.debug("step override %s clamped to %s", step_override, clamped)
            self._view = StepSequencer(self._internal.definitions, clamped)
        if self.mode != was:
            logger.debug("step control switched %s -> %s", was, self.mode)

    @property
    def mode(self) -> str:
        return OVERRIDE if self._view is not None else INTERNAL

    @property
    def is_overridden(self) -> bool:
        return self._view is not None

    @property
    def sequencer(self) -> StepSequencer:
        """The sequencer whose cursor is currently displayed."""
        return self._view if self._view is not None else self._internal

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_step(self) -> int:
        return self.sequencer.current_step

    @property
    def total_steps(self) -> int:
        return self._internal.total_steps

    @property
    def state(self) -> DiagramStepState:
        return self.sequencer.state

    @property
    def definitions(self) -> tuple[StepDefinition, ...]:
        return self._internal.definitions

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> int:
        return self.go_to(self.current_step + 1)

    def prev(self) -> int:
        return self.go_to(self.current_step - 1)

    def go_to(self, step: int) -> int:
        """
        Navigate to `step` (clamped). Returns the displayed step afterwards,
        which in override mode is unchanged.
        """
        target = clamp_step(step, self.total_steps)
        if self._view is not None:
            logger.debug("step %s requested from driver", target)
            if self.on_step_request is not None:
                self.on_step_request(target)
            return self.current_step

        before = self._internal.current_step
        after = self._internal.go_to(target)
        if after != before and self.on_step_change is not None:
            self.on_step_change(after)
        return after

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def is_visible(self, step_id: str) -> bool:
        return self.sequencer.is_visible(step_id)

    def is_current(self, step_id: str) -> bool:
        return self.sequencer.is_current(step_id)

    def visible_force_names(self) -> list[str]:
        return self.sequencer.visible_force_names()

    def highlighted_force_names(self) -> list[str]:
        return self.sequencer.highlighted_force_names()

    def __repr__(self) -> str:
        return f"DiagramStateAdapter(mode={self.mode}, step={self.current_step}/{self.total_steps})"

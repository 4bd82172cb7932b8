# MIT License (see LICENSE)
"""
Side-by-side comparison of two pendulums that differ in one parameter.

Used to show what a single parameter does: both engines start from the
same base parameters and receive the same frame deltas, only the chosen
field differs.
"""
from __future__ import annotations
import logging

from .constants import DEFAULT_LENGTH_UNIT
from .engine import IntegrationEngine
from .parameter_info import parameter_info
from .params import ParameterStore
from .types import KinematicState, PendulumParameters

logger = logging.getLogger(__name__)


class ParameterComparison:
    """
    Runs a baseline engine and a variant engine in lockstep.

    Args:
        base: Parameters for the baseline (validated on the way in).
        field: Name of the PendulumParameters field that differs.
        value: Value of that field for the variant (validated). None uses the
               catalog comparison value for the field.
        length_unit: Unit of the length parameter for both engines.
        max_frame_delta: Cap applied to every frame delta before it reaches
                         the engines. None disables the cap.

    Raises:
        ValueError: If field is not a PendulumParameters field, or if
                    max_frame_delta is not positive.
    """

    def __init__(
        self,
        base: PendulumParameters,
        field: str,
        value: float | None = None,
        length_unit: str = DEFAULT_LENGTH_UNIT,
        max_frame_delta: float | None = 0.1,
    ) -> None:
        info = parameter_info(field)
        if max_frame_delta is not None and not max_frame_delta > 0:
            raise ValueError(f"max_frame_delta must be positive, got {max_frame_delta}")
        if value is None:
            value = info.comparison_value

        self.field = field
        self.info = info
        self.max_frame_delta = max_frame_delta
        self.baseline_store = ParameterStore(base)
        self.variant_store = ParameterStore(base)
        self.variant_store.set({field: value})
        self.baseline = IntegrationEngine(self.baseline_store, length_unit=length_unit)
        self.variant = IntegrationEngine(self.variant_store, length_unit=length_unit)
        logger.debug(
            "Comparing %s=%r against %s=%r.",
            field, getattr(self.baseline_store.params, field),
            field, getattr(self.variant_store.params, field),
        )

    @property
    def engines(self) -> tuple[IntegrationEngine, IntegrationEngine]:
        return self.baseline, self.variant

    @property
    def states(self) -> tuple[KinematicState, KinematicState]:
        return self.baseline.state, self.variant.state

    def set_value(self, value: float) -> None:
        """Change the variant's value and restart both pendulums."""
        self.variant_store.set({self.field: value})
        self.reset()

    def play(self) -> None:
        for e in self.engines:
            e.play()

    def pause(self) -> None:
        for e in self.engines:
            e.pause()

    def reset(self) -> None:
        for e in self.engines:
            e.reset()

    def advance(self, frame_delta: float) -> tuple[int, int]:
        """
        Advance both engines by the (capped) frame delta.

        Returns:
            Fixed steps taken by (baseline, variant).
        """
        if self.max_frame_delta is not None:
            frame_delta = min(frame_delta, self.max_frame_delta)
        return self.baseline.advance(frame_delta), self.variant.advance(frame_delta)

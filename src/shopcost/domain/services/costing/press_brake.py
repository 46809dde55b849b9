"""Press brake (F140) time calculation for sheet parts."""

from __future__ import annotations

import logging

from .config import PressBrakeParams
from .models import OperationTime

logger = logging.getLogger(__name__)


class PressBrakeCalculator:
    """Press brake setup and run hours.

    Setup grows with the longest bend line. Run time is the number of
    bend operations (one extra when the part flips) times a per-bend
    time chosen from weight and length tiers.
    """

    def __init__(self, params: PressBrakeParams | None = None) -> None:
        self.params = params or PressBrakeParams()

    def seconds_per_bend(self, weight_lb: float, length_in: float) -> float:
        """Select the per-bend time tier.

        Heavier parts always take the heavier tier; length only matters
        for light parts.
        """
        small, medium, large, heavy, extra_heavy = self.params.seconds_per_bend
        w_medium, w_heavy, w_extra = self.params.weight_thresholds
        l_medium, l_large = self.params.length_thresholds
        if weight_lb > w_extra:
            return extra_heavy
        if weight_lb > w_heavy:
            return heavy
        if weight_lb > w_medium or length_in > l_large:
            return large
        if length_in > l_medium:
            return medium
        return small

    def calculate(
        self,
        bend_count: int,
        longest_bend: float,
        weight_lb: float,
        part_length: float = 0.0,
        needs_flip: bool = False,
    ) -> OperationTime:
        """Calculate brake hours.

        Args:
            bend_count: Number of bends.
            longest_bend: Longest bend line in inches.
            weight_lb: Raw part weight in lb.
            part_length: Part length in inches; the longest bend is used when 0.
            needs_flip: Whether bends go both directions.

        Returns:
            OperationTime for the brake.
        """
        if bend_count < 0 or longest_bend < 0 or weight_lb < 0 or part_length < 0:
            raise ValueError("Press brake inputs must be non-negative")
        p = self.params
        setup_minutes = (longest_bend / 12.0) * p.setup_minutes_per_foot + p.setup_fixed_minutes

        length = part_length if part_length > 0 else longest_bend
        rate = self.seconds_per_bend(weight_lb, length)
        bend_ops = bend_count + (1 if needs_flip else 0)
        logger.debug(f"Brake: {bend_ops} ops at {rate:g} s (weight {weight_lb:.2f} lb)")
        return OperationTime(
            setup_hours=setup_minutes / 60.0,
            run_hours=bend_ops * rate / 3600.0,
            notes=f"{bend_ops} bend ops at {rate:g} s",
        )

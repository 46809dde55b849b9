"""Roll forming (F325) for large-radius sheet bends."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import RollFormingParams
from .models import OperationTime


@dataclass(frozen=True)
class RollFormingResult:
    """Roll forming outcome.

    Attributes:
        requires_roll_forming: True when the radius exceeds the brake limit.
        time: Setup and run hours; zero when not required.
    """

    requires_roll_forming: bool
    time: OperationTime


def arc_length(radius: float, angle_radians: float) -> float:
    """Arc length of a bend in inches."""
    return abs(radius * angle_radians)


class RollFormingCalculator:
    """Decide whether a bend must be roll formed and compute its hours."""

    def __init__(self, params: RollFormingParams | None = None) -> None:
        self.params = params or RollFormingParams()

    def calculate(self, max_radius: float, arc_length_in: float = 0.0) -> RollFormingResult:
        """Compute roll forming for the largest bend radius.

        Args:
            max_radius: Largest inside bend radius in inches.
            arc_length_in: Arc length in inches; a half circle of the
                radius is assumed when 0.

        Returns:
            RollFormingResult; zero time when the radius is at or below
            the minimum roll-forming radius.
        """
        if max_radius < 0 or arc_length_in < 0:
            raise ValueError("Roll forming inputs must be non-negative")
        p = self.params
        if max_radius <= p.min_radius:
            return RollFormingResult(requires_roll_forming=False, time=OperationTime())

        if arc_length_in <= 0:
            arc_length_in = arc_length(max_radius, math.pi)
        arc_feet = arc_length_in / 12.0
        run_minutes = (arc_feet / p.feet_per_minute) * 60.0
        return RollFormingResult(
            requires_roll_forming=True,
            time=OperationTime(
                setup_hours=p.setup_hours,
                run_hours=run_minutes / 60.0,
                notes=f'Roll forming required: radius {max_radius:.3f}" > {p.min_radius:g}"',
            ),
        )

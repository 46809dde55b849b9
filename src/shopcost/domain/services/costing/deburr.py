"""Deburr (F210) time calculation for sheet parts."""

from __future__ import annotations

from .config import DeburrParams
from .models import OperationTime


class DeburrCalculator:
    """Run-only deburr time from the cut perimeter."""

    def __init__(self, params: DeburrParams | None = None) -> None:
        self.params = params or DeburrParams()

    def calculate(self, cut_length: float) -> OperationTime:
        """Return deburr hours for a cut perimeter in inches.

        Raises:
            ValueError: If cut_length is negative.
        """
        if cut_length < 0:
            raise ValueError("cut_length must be non-negative")
        minutes = cut_length / self.params.inches_per_minute
        return OperationTime(setup_hours=0.0, run_hours=minutes / 60.0)

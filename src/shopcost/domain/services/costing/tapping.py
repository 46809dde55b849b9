"""Tapping and drilling (F220) time calculation."""

from __future__ import annotations

from .config import TappingParams
from .models import OperationTime


class TappingCalculator:
    """Tapping hours from setup and hole counts.

    Setup is ``setups x setup_per_setup + setup_fixed`` floored at
    ``min_setup``; run is ``holes x run_per_hole``. At least one setup
    is always charged.
    """

    def __init__(self, params: TappingParams | None = None) -> None:
        self.params = params or TappingParams()

    def calculate(self, hole_count: int, setups: int = 1) -> OperationTime:
        if hole_count < 0 or setups < 0:
            raise ValueError("Tapping counts must be non-negative")
        p = self.params
        setup = max(1, setups) * p.setup_per_setup + p.setup_fixed
        return OperationTime(
            setup_hours=max(p.min_setup, setup),
            run_hours=hole_count * p.run_per_hole,
            notes=f"{hole_count} holes, {max(1, setups)} setup(s)",
        )

"""Laser cutting (F115) speed lookup and time calculation.

Speed lookup follows a provider strategy so that tests and callers can
supply fixed speeds. The default provider reads a LaserSpeedTable and
falls back to flat feed rates when no row applies, so a part with a cut
length never prices at zero for lack of table data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .config import CostingConfig, LaserParams, LaserSpeedEntry, LaserSpeedTable
from .models import OperationTime

logger = logging.getLogger(__name__)

_CARBON_CODES = ("A36", "1018", "1020", "1045")
_ALUMINUM_CODES = ("6061", "5052", "3003", "5083")


@dataclass(frozen=True)
class LaserSpeed:
    """Feed rate and pierce time for one thickness/material."""

    feed_rate_ipm: float
    pierce_seconds: float
    source: str = "table"


class LaserSpeedProvider(ABC):
    """Abstract source of laser speeds."""

    @abstractmethod
    def get_speed(self, thickness: float, material: str) -> LaserSpeed:
        """Return the feed rate and pierce time for a part.

        Args:
            thickness: Sheet thickness in inches.
            material: Material code.

        Returns:
            LaserSpeed with a positive feed rate.
        """
        ...


def material_group(material: str) -> str:
    """Return the speed-table group for a material code.

    Returns one of "carbon_steel", "aluminum" or "stainless"; anything
    not recognized as carbon steel or aluminum cuts as stainless.
    """
    m = (material or "").upper()
    if any(code in m for code in _CARBON_CODES) or m == "CS":
        return "carbon_steel"
    if any(code in m for code in _ALUMINUM_CODES):
        return "aluminum"
    if m == "AL" or m.startswith("AL-") or m.endswith("-AL"):
        return "aluminum"
    return "stainless"


class TableLaserSpeedProvider(LaserSpeedProvider):
    """Laser speeds from a LaserSpeedTable.

    A row matches when its thickness is at or above the part thickness
    less the table tolerance; the thinnest such row wins, otherwise the
    thickest row is used. Per-material overrides are checked before the
    material-family groups.
    """

    def __init__(self, table: LaserSpeedTable, params: LaserParams | None = None) -> None:
        self.table = table
        self.params = params or LaserParams()

    def rows_for(self, material: str) -> tuple[LaserSpeedEntry, ...]:
        code = (material or "").upper()
        override = self.table.by_material.get(code)
        if override:
            return override
        return getattr(self.table, material_group(material))

    def get_speed(self, thickness: float, material: str) -> LaserSpeed:
        rows = self.rows_for(material)
        if not rows:
            return self.fallback_speed(material)

        threshold = thickness - self.table.thickness_tolerance
        for row in rows:
            if row.thickness >= threshold:
                return LaserSpeed(row.feed_rate_ipm, row.pierce_seconds)
        last = rows[-1]
        return LaserSpeed(last.feed_rate_ipm, last.pierce_seconds)

    def fallback_speed(self, material: str) -> LaserSpeed:
        m = (material or "").upper()
        if "AL" in m and "GALV" not in m:
            feed = self.params.fallback_ipm_aluminum
        else:
            feed = self.params.fallback_ipm_steel
        logger.debug(f"No laser speed rows for {material!r}, using flat {feed} IPM")
        return LaserSpeed(feed, self.params.fallback_pierce_seconds, source="fallback")


class LaserCalculator:
    """Compute F115 setup and run hours.

    Run time is pierce time plus cut time plus a share of the per-sheet
    load/unload time prorated by part weight over full sheet weight.
    Setup is a fixed time floored at the configured minimum.
    """

    def __init__(
        self,
        config: CostingConfig | None = None,
        speed_provider: LaserSpeedProvider | None = None,
    ) -> None:
        self.config = config or CostingConfig()
        self.speed_provider = speed_provider or TableLaserSpeedProvider(
            self.config.laser_speeds, self.config.laser
        )

    def sheet_weight(self, thickness: float, material: str) -> float:
        """Weight of a full standard sheet in lb."""
        density = self.config.densities.density_for(material)
        return thickness * self.config.sheet.area * density

    def calculate(
        self,
        cut_length: float,
        pierce_count: int,
        thickness: float,
        material: str,
        raw_weight_lb: float = 0.0,
    ) -> OperationTime:
        """Calculate laser hours for one part.

        Args:
            cut_length: Total cut length in inches.
            pierce_count: Number of pierces.
            thickness: Sheet thickness in inches.
            material: Material code.
            raw_weight_lb: Raw blank weight used to prorate sheet handling.

        Returns:
            OperationTime with the setup floor applied.

        Raises:
            ValueError: If any measurement is negative.
        """
        if cut_length < 0 or pierce_count < 0 or thickness < 0 or raw_weight_lb < 0:
            raise ValueError("Laser inputs must be non-negative")

        params = self.config.laser
        speed = self.speed_provider.get_speed(thickness, material)
        if speed.feed_rate_ipm <= 0:
            raise ValueError(f"Laser feed rate must be positive, got {speed.feed_rate_ipm}")

        pierce_seconds = pierce_count * max(0.0, speed.pierce_seconds)
        cut_minutes = cut_length / speed.feed_rate_ipm

        proportional_minutes = 0.0
        sheet_weight = self.sheet_weight(thickness, material)
        if sheet_weight > 0 and raw_weight_lb > 0:
            proportional_minutes = (raw_weight_lb / sheet_weight) * params.minutes_per_sheet

        setup_hours = max(params.min_setup_hours, params.setup_fixed_minutes / 60.0)
        run_hours = pierce_seconds / 3600.0 + (cut_minutes + proportional_minutes) / 60.0

        return OperationTime(
            setup_hours=setup_hours,
            run_hours=run_hours,
            notes=f"{speed.feed_rate_ipm:g} IPM, {speed.pierce_seconds:g} s/pierce ({speed.source})",
        )

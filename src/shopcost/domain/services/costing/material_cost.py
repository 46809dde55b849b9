"""Raw material weight and cost.

This module provides:
- MaterialCostCalculator: $/lb pricing with a nesting allowance
- Blank, tube and round bar stock weights
- RawWeightEstimator: raw sheet weight with a thickness scrap multiplier
- NestingEfficiencyEvaluator: flags parts that nest poorly in their bounding box
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from .config import CostingConfig, MaterialDensities
from .models import MaterialCostResult

logger = logging.getLogger(__name__)


# Thickness (exclusive lower bound, inches) -> raw weight multiplier.
# Covers kerf and skeleton loss that grows with plate thickness.
THICKNESS_MULTIPLIERS: tuple[tuple[float, float], ...] = (
    (1.2, 1.015),
    (0.9, 1.022),
    (0.82, 1.022),
    (0.7, 1.026),
    (0.59, 1.028),
    (0.43, 1.037),
    (0.34, 1.054),
    (0.29, 1.054),
    (0.23, 1.069),
    (0.1875, 1.096),
)


class MaterialCostCalculator:
    """Price raw material for a part.

    Adjusted weight is the raw weight divided by nesting efficiency;
    cost per piece is adjusted weight x $/lb.
    """

    def __init__(self, config: CostingConfig | None = None) -> None:
        self.config = config or CostingConfig()

    def calculate(
        self,
        material: str,
        weight_lb: float,
        quantity: int = 1,
        cost_per_lb: float | None = None,
    ) -> MaterialCostResult | None:
        """Calculate material cost.

        Args:
            material: Material code.
            weight_lb: Raw weight per piece in lb.
            quantity: Pieces; at least one piece is always priced.
            cost_per_lb: Override for the configured $/lb.

        Returns:
            MaterialCostResult, or None when the weight is zero or the
            material is blank.

        Raises:
            ValueError: If weight_lb or quantity is negative.
        """
        if weight_lb < 0 or quantity < 0:
            raise ValueError("weight_lb and quantity must be non-negative")
        if weight_lb == 0 or not (material or "").strip():
            return None

        price = cost_per_lb if cost_per_lb is not None else self.config.pricing.cost_per_lb(material)
        adjusted = weight_lb / self.config.nest_efficiency
        per_piece = adjusted * price
        qty = max(1, quantity)
        return MaterialCostResult(
            material=material,
            cost_per_lb=price,
            raw_weight_lb=weight_lb,
            adjusted_weight_lb=adjusted,
            cost_per_piece=per_piece,
            total_cost=per_piece * qty,
            quantity=qty,
        )


def blank_weight(length: float, width: float, thickness: float, material: str,
                 densities: MaterialDensities | None = None) -> float:
    """Weight of a rectangular sheet blank in lb."""
    densities = densities or MaterialDensities()
    return length * width * thickness * densities.density_for(material)


def tube_weight(outer_diameter: float, inner_diameter: float, length: float, material: str,
                densities: MaterialDensities | None = None) -> float:
    """Weight of round tube or pipe in lb."""
    densities = densities or MaterialDensities()
    volume = math.pi * length * (outer_diameter**2 - inner_diameter**2) / 4.0
    return volume * densities.density_for(material)


def round_bar_weight(diameter: float, length: float, material: str,
                     densities: MaterialDensities | None = None) -> float:
    """Weight of solid round bar in lb."""
    return tube_weight(diameter, 0.0, length, material, densities)


def thickness_multiplier(thickness: float) -> float:
    """Raw weight multiplier for a sheet thickness; 1.0 for thin gauge."""
    for min_thickness, multiplier in THICKNESS_MULTIPLIERS:
        if thickness > min_thickness:
            return multiplier
    return 1.0


class WeightCalcMode(str, Enum):
    """How raw sheet weight is estimated.

    Attributes:
        EFFICIENCY: Part mass divided by nesting efficiency.
        MANUAL: Blank length x width x thickness x density.
    """

    EFFICIENCY = "efficiency"
    MANUAL = "manual"


@dataclass(frozen=True)
class RawWeightEstimate:
    """Raw weight estimate for a sheet part.

    Attributes:
        raw_weight_lb: Raw stock weight including scrap.
        sheet_fraction: Raw weight as a fraction of a full standard sheet.
        weight_lb: Finished mass when known, otherwise the raw weight.
    """

    raw_weight_lb: float
    sheet_fraction: float
    weight_lb: float


class RawWeightEstimator:
    """Estimate raw sheet stock weight for a part."""

    def __init__(self, config: CostingConfig | None = None) -> None:
        self.config = config or CostingConfig()

    def estimate(
        self,
        material: str,
        thickness: float,
        mass_lb: float = 0.0,
        mode: WeightCalcMode = WeightCalcMode.EFFICIENCY,
        nest_efficiency_percent: float = 100.0,
        blank_length: float = 0.0,
        blank_width: float = 0.0,
    ) -> RawWeightEstimate:
        """Estimate raw weight and sheet usage.

        Args:
            material: Material code.
            thickness: Sheet thickness in inches.
            mass_lb: Finished part mass.
            mode: Estimation mode.
            nest_efficiency_percent: Nesting efficiency for EFFICIENCY mode;
                values <= 0 are treated as 100.
            blank_length: Blank length for MANUAL mode.
            blank_width: Blank width for MANUAL mode.

        Returns:
            RawWeightEstimate rounded to 4 places (weight to 3).
        """
        if thickness < 0 or mass_lb < 0 or blank_length < 0 or blank_width < 0:
            raise ValueError("Weight inputs must be non-negative")

        density = self.config.densities.density_for(material)
        multiplier = thickness_multiplier(thickness)

        if mode is WeightCalcMode.EFFICIENCY:
            efficiency = nest_efficiency_percent if nest_efficiency_percent > 0 else 100.0
            raw = (mass_lb / efficiency) * 100.0 * multiplier
        else:
            raw = thickness * blank_length * blank_width * density * multiplier

        sheet_lb = thickness * self.config.sheet.area * density
        fraction = raw / sheet_lb if sheet_lb > 0 else 0.0
        return RawWeightEstimate(
            raw_weight_lb=round(raw, 4),
            sheet_fraction=round(fraction, 4),
            weight_lb=round(mass_lb if mass_lb > 0 else raw, 3),
        )


@dataclass(frozen=True)
class NestingEvaluation:
    """Result of a bounding-box nesting check.

    Attributes:
        should_override: True when MANUAL weight mode is recommended.
        bbox_efficiency_percent: Part mass over bordered blank weight, percent.
        blank_weight_lb: Bordered blank weight.
        reason: Explanation of the decision.
    """

    should_override: bool
    bbox_efficiency_percent: float
    blank_weight_lb: float
    reason: str


class NestingEfficiencyEvaluator:
    """Flag parts whose bounding box is mostly scrap.

    Efficiency mode assumes the default nesting efficiency. A part that
    fills less than half of its bordered bounding rectangle uses much
    more stock than that, so MANUAL mode is recommended instead. Only
    parts still on the default settings are evaluated.
    """

    border: float = 0.25
    default_efficiency_percent: float = 80.0
    override_threshold_percent: float = 50.0

    def __init__(self, densities: MaterialDensities | None = None) -> None:
        self.densities = densities or MaterialDensities()

    def evaluate(
        self,
        material: str,
        mass_lb: float,
        bbox_length: float,
        bbox_width: float,
        thickness: float,
        mode: WeightCalcMode = WeightCalcMode.EFFICIENCY,
        nest_efficiency_percent: float = 80.0,
    ) -> NestingEvaluation:
        if min(mass_lb, bbox_length, bbox_width, thickness) <= 0:
            return NestingEvaluation(False, 0.0, 0.0, "Insufficient data for nesting evaluation")
        if (
            mode is not WeightCalcMode.EFFICIENCY
            or abs(nest_efficiency_percent - self.default_efficiency_percent) >= 0.01
        ):
            return NestingEvaluation(
                False, 0.0, 0.0, "Custom weight settings; skipping nesting evaluation"
            )

        blank_lb = blank_weight(
            bbox_length + self.border,
            bbox_width + self.border,
            thickness,
            material,
            self.densities,
        )
        efficiency = mass_lb / blank_lb * 100.0
        if efficiency < self.override_threshold_percent:
            logger.info(
                f"Bounding-box efficiency {efficiency:.1f}% below "
                f"{self.override_threshold_percent:.0f}%, recommending manual weight mode"
            )
            return NestingEvaluation(
                True,
                efficiency,
                blank_lb,
                f"Bounding-box efficiency {efficiency:.1f}% is below "
                f"{self.override_threshold_percent:.0f}%; use manual L x W weight",
            )
        return NestingEvaluation(
            False,
            efficiency,
            blank_lb,
            f"Bounding-box efficiency {efficiency:.1f}% meets "
            f"{self.override_threshold_percent:.0f}%",
        )

"""Work-center rules for tube, pipe, structural and solid bar stock.

All times are in hours. The rules are fixed shop thresholds rather than
configurable parameters; only the hourly rates come from configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcost.domain.value_objects import TubeMetrics, TubeShape, WorkCenter

from . import constants as c
from .models import OperationTime

# Round tube OD breakpoints (inches) and the saw setup for each band.
# Breakpoints sit 0.05" above nominal sizes to absorb metric round-off.
ROUND_OD_BANDS: tuple[tuple[float, WorkCenter, float], ...] = (
    (10.80, WorkCenter.N145, 0.25),
    (10.05, WorkCenter.F110, 1.0),
    (6.05, WorkCenter.F110, 0.5),
)
ROUND_DEFAULT_SETUP = 0.15
STRUCTURAL_SETUP = 0.25  # angle and channel
OTHER_SHAPE_SETUP = 0.15  # square, rectangle and the rest

SOLID_BAR_SETUP = 0.05
SOLID_BAR_SECONDS_PER_INCH_OD = 90.0
SOLID_BAR_FIXED_SECONDS = 15.0

TUBE_DEBURR_SETUP = 0.03
TUBE_DEBURR_INCHES_PER_HOUR = 3600.0
TUBE_BRAKE_SETUP = 0.2
TUBE_BRAKE_RUN_MEDIUM = 0.08
TUBE_BRAKE_RUN_HEAVY = 0.25


@dataclass(frozen=True)
class PrimaryRouting:
    """OP20 decision for a tube."""

    work_center: WorkCenter
    time: OperationTime


@dataclass(frozen=True)
class TubeRollFormResult:
    """F325 time for a tube plus whether the brake must follow."""

    time: OperationTime
    requires_press_brake: bool


def primary_routing(tube: TubeMetrics) -> PrimaryRouting:
    """Choose the OP20 work center and time for tube stock.

    Solid bar goes to the F300 bar saw with a diameter-based run time.
    Hollow round tube is banded by OD, with the largest sizes going to
    N145. Angle and channel take a longer saw setup than other shapes.
    Hollow-stock run time comes from the tube laser and is not modeled.
    """
    if tube.is_solid:
        run_seconds = tube.outer_diameter * SOLID_BAR_SECONDS_PER_INCH_OD + SOLID_BAR_FIXED_SECONDS
        return PrimaryRouting(
            WorkCenter.F300,
            OperationTime(SOLID_BAR_SETUP, run_seconds / 3600.0, notes="solid bar"),
        )

    if tube.shape in (TubeShape.ROUND, TubeShape.UNKNOWN):
        for min_od, work_center, setup in ROUND_OD_BANDS:
            if tube.outer_diameter > min_od:
                return PrimaryRouting(work_center, OperationTime(setup, 0.0))
        return PrimaryRouting(WorkCenter.F110, OperationTime(ROUND_DEFAULT_SETUP, 0.0))

    if tube.shape in (TubeShape.ANGLE, TubeShape.CHANNEL):
        return PrimaryRouting(WorkCenter.F110, OperationTime(STRUCTURAL_SETUP, 0.0))

    return PrimaryRouting(WorkCenter.F110, OperationTime(OTHER_SHAPE_SETUP, 0.0))


def roll_form(weight_lb: float, wall: float) -> TubeRollFormResult:
    """F325 hours for a tube; always applies.

    Run is 5 seconds per lb plus 5 minutes. Setup steps up at the medium
    and heavy weight limits, and heavy-wall tubes at or above the medium
    weight also need the press brake.
    """
    if weight_lb < 0 or wall < 0:
        raise ValueError("Tube weight and wall must be non-negative")
    run = weight_lb * (5.0 / 3600.0) + 5.0 / 60.0
    if weight_lb < c.TUBE_MEDIUM_WEIGHT_LB:
        setup = 0.25
    elif weight_lb < c.TUBE_HEAVY_WEIGHT_LB:
        setup = 0.375
    else:
        setup = 0.75
    requires_brake = weight_lb >= c.TUBE_MEDIUM_WEIGHT_LB and wall >= c.TUBE_HEAVY_WALL_IN
    return TubeRollFormResult(OperationTime(setup, run), requires_brake)


def press_brake(weight_lb: float, wall: float) -> OperationTime:
    """F140 hours for a heavy-wall tube."""
    if weight_lb < 0 or wall < 0:
        raise ValueError("Tube weight and wall must be non-negative")
    if wall < c.TUBE_HEAVY_WALL_IN or weight_lb < c.TUBE_MEDIUM_WEIGHT_LB:
        run = 0.0
    elif weight_lb < c.TUBE_HEAVY_WEIGHT_LB:
        run = TUBE_BRAKE_RUN_MEDIUM
    else:
        run = TUBE_BRAKE_RUN_HEAVY
    return OperationTime(TUBE_BRAKE_SETUP, run)


def deburr(length: float) -> OperationTime:
    """F210 hours for a tube of the given length in inches."""
    if length < 0:
        raise ValueError("Tube length must be non-negative")
    return OperationTime(TUBE_DEBURR_SETUP, length / TUBE_DEBURR_INCHES_PER_HOUR)

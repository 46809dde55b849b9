"""Guard-gated routing steps.

Each step pairs a guard with a calculator for one work center. A step
whose guard fails contributes nothing to the rollup. The sheet and tube
routes are ordered tuples of steps, so adding an operation means adding
a step rather than editing the engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shopcost.domain.value_objects import PartMetrics, TubeMetrics, WorkCenter

from . import tube_rules
from .config import CostingConfig
from .deburr import DeburrCalculator
from .laser import LaserCalculator
from .models import OperationResult
from .press_brake import PressBrakeCalculator
from .roll_forming import RollFormingCalculator
from .tapping import TappingCalculator


@dataclass(frozen=True)
class Calculators:
    """Calculator instances shared by the steps of one engine."""

    config: CostingConfig
    laser: LaserCalculator
    deburr: DeburrCalculator
    press_brake: PressBrakeCalculator
    tapping: TappingCalculator
    roll_forming: RollFormingCalculator

    @classmethod
    def from_config(
        cls, config: CostingConfig, laser: LaserCalculator | None = None
    ) -> Calculators:
        return cls(
            config=config,
            laser=laser or LaserCalculator(config),
            deburr=DeburrCalculator(config.deburr),
            press_brake=PressBrakeCalculator(config.press_brake),
            tapping=TappingCalculator(config.tapping),
            roll_forming=RollFormingCalculator(config.roll_forming),
        )


@dataclass(frozen=True)
class CostContext:
    """Inputs for one costing pass.

    Attributes:
        metrics: Classified part measurements.
        quantity: Quantity to price (at least 1).
        calculators: Calculators and configuration.
    """

    metrics: PartMetrics
    quantity: int
    calculators: Calculators

    @property
    def weight_lb(self) -> float:
        return self.metrics.weight_lb

    @property
    def tube(self) -> TubeMetrics:
        if self.metrics.tube is None:
            raise ValueError("Part has no tube metrics")
        return self.metrics.tube

    def rate(self, work_center: str) -> float:
        return self.calculators.config.rates.rate_for(work_center)


class OperationStep(ABC):
    """One routed operation: a guard plus a calculator.

    Attributes:
        work_center: Work center the step prices.
        is_primary: True for the OP20 step of a route.
    """

    work_center: WorkCenter
    is_primary: bool = False

    @abstractmethod
    def guard(self, ctx: CostContext) -> bool:
        """Return True when the operation applies to the part."""
        ...

    @abstractmethod
    def calculate(self, ctx: CostContext) -> OperationResult | None:
        """Price the operation; None when the calculator declines it."""
        ...

    def apply(self, ctx: CostContext) -> OperationResult | None:
        if not self.guard(ctx):
            return None
        return self.calculate(ctx)


class LaserCutStep(OperationStep):
    """OP20 laser cut for sheet and generic parts."""

    work_center = WorkCenter.F115
    is_primary = True

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.sheet.total_cut_length > 0 and ctx.metrics.thickness > 0

    def calculate(self, ctx: CostContext) -> OperationResult:
        m = ctx.metrics
        time = ctx.calculators.laser.calculate(
            cut_length=m.sheet.total_cut_length,
            pierce_count=m.sheet.pierce_count,
            thickness=m.thickness,
            material=m.material,
            raw_weight_lb=ctx.weight_lb,
        )
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F115"), ctx.quantity)


class DeburrStep(OperationStep):
    work_center = WorkCenter.F210

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.sheet.total_cut_length > 0

    def calculate(self, ctx: CostContext) -> OperationResult:
        time = ctx.calculators.deburr.calculate(ctx.metrics.sheet.total_cut_length)
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F210"), ctx.quantity)


class PressBrakeStep(OperationStep):
    work_center = WorkCenter.F140

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.sheet.bend_count > 0

    def calculate(self, ctx: CostContext) -> OperationResult:
        m = ctx.metrics
        time = ctx.calculators.press_brake.calculate(
            bend_count=m.sheet.bend_count,
            longest_bend=m.sheet.longest_bend,
            weight_lb=ctx.weight_lb,
            part_length=m.bbox_length,
            needs_flip=m.sheet.bends_both_directions,
        )
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F140"), ctx.quantity)


class TappingStep(OperationStep):
    work_center = WorkCenter.F220

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.sheet.tapped_hole_count > 0

    def calculate(self, ctx: CostContext) -> OperationResult:
        sheet = ctx.metrics.sheet
        time = ctx.calculators.tapping.calculate(sheet.tapped_hole_count, sheet.tap_setups)
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F220"), ctx.quantity)


class RollFormingStep(OperationStep):
    """Roll forming for sheet bends too large for the brake.

    The radius guard and the calculator's own requirement check are kept
    separate; the step only prices when the calculator requires it.
    """

    work_center = WorkCenter.F325

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.sheet.max_bend_radius > ctx.calculators.config.roll_forming.min_radius

    def calculate(self, ctx: CostContext) -> OperationResult | None:
        sheet = ctx.metrics.sheet
        result = ctx.calculators.roll_forming.calculate(sheet.max_bend_radius, sheet.arc_length)
        if not result.requires_roll_forming:
            return None
        return OperationResult.priced(
            self.work_center.value, result.time, ctx.rate("F325"), ctx.quantity
        )


class TubePrimaryStep(OperationStep):
    """OP20 saw or tube laser routing for tube stock."""

    work_center = WorkCenter.F110
    is_primary = True

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.tube is not None

    def calculate(self, ctx: CostContext) -> OperationResult:
        routing = tube_rules.primary_routing(ctx.tube)
        code = routing.work_center.value
        return OperationResult.priced(code, routing.time, ctx.rate(code), ctx.quantity)


class TubeRollFormStep(OperationStep):
    work_center = WorkCenter.F325

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.tube is not None

    def calculate(self, ctx: CostContext) -> OperationResult:
        result = tube_rules.roll_form(ctx.weight_lb, ctx.tube.wall_thickness)
        return OperationResult.priced(
            self.work_center.value, result.time, ctx.rate("F325"), ctx.quantity
        )


class TubePressBrakeStep(OperationStep):
    work_center = WorkCenter.F140

    def guard(self, ctx: CostContext) -> bool:
        if ctx.metrics.tube is None:
            return False
        return tube_rules.roll_form(ctx.weight_lb, ctx.tube.wall_thickness).requires_press_brake

    def calculate(self, ctx: CostContext) -> OperationResult:
        time = tube_rules.press_brake(ctx.weight_lb, ctx.tube.wall_thickness)
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F140"), ctx.quantity)


class TubeDeburrStep(OperationStep):
    work_center = WorkCenter.F210

    def guard(self, ctx: CostContext) -> bool:
        return ctx.metrics.tube is not None and ctx.tube.length > 0

    def calculate(self, ctx: CostContext) -> OperationResult:
        time = tube_rules.deburr(ctx.tube.length)
        return OperationResult.priced(self.work_center.value, time, ctx.rate("F210"), ctx.quantity)


SHEET_METAL_ROUTE: tuple[OperationStep, ...] = (
    LaserCutStep(),
    DeburrStep(),
    PressBrakeStep(),
    TappingStep(),
    RollFormingStep(),
)

TUBE_ROUTE: tuple[OperationStep, ...] = (
    TubePrimaryStep(),
    TubeRollFormStep(),
    TubePressBrakeStep(),
    TubeDeburrStep(),
)

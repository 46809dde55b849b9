"""Costing data models.

This module provides dataclasses for:
- OperationTime: Setup/run hours produced by a calculator
- OperationResult: A priced operation at one work center
- MaterialCostResult: Raw material cost for a part
- CostRollup: All operations and totals for one costing pass
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OperationTime:
    """Setup and run hours for one operation.

    Attributes:
        setup_hours: Fixed time per job.
        run_hours: Time per piece.
        notes: Calculator detail for reports, e.g. the speed row used.
    """

    setup_hours: float = 0.0
    run_hours: float = 0.0
    notes: str = ""

    def __post_init__(self) -> None:
        if self.setup_hours < 0 or self.run_hours < 0:
            raise ValueError("Operation hours must be non-negative")

    def price(self, rate: float, quantity: int) -> float:
        """Price the operation as (setup + run x quantity) x rate."""
        return (self.setup_hours + self.run_hours * max(1, quantity)) * rate


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one operation at a work center.

    Attributes:
        work_center: Work-center code, e.g. "F140".
        setup_hours: Setup hours per job.
        run_hours: Run hours per piece.
        rate: Hourly rate applied.
        price: Operation price for the full quantity.
        notes: Free-text detail.
    """

    work_center: str
    setup_hours: float = 0.0
    run_hours: float = 0.0
    rate: float = 0.0
    price: float = 0.0
    notes: str = ""

    @property
    def setup_minutes(self) -> float:
        return self.setup_hours * 60.0

    @property
    def run_minutes(self) -> float:
        return self.run_hours * 60.0

    @classmethod
    def priced(
        cls,
        work_center: str,
        time: OperationTime,
        rate: float,
        quantity: int,
    ) -> OperationResult:
        """Build a result from calculator hours at the given rate."""
        return cls(
            work_center=work_center,
            setup_hours=time.setup_hours,
            run_hours=time.run_hours,
            rate=rate,
            price=time.price(rate, quantity),
            notes=time.notes,
        )

    @classmethod
    def unpriced(cls, work_center: str, notes: str = "") -> OperationResult:
        """Build a zero-time, zero-price result (purchased parts)."""
        return cls(work_center=work_center, notes=notes)


@dataclass(frozen=True)
class MaterialCostResult:
    """Raw material cost for a part.

    Attributes:
        material: Material code priced.
        cost_per_lb: Price in $/lb.
        raw_weight_lb: Weight before nesting allowance.
        adjusted_weight_lb: Weight divided by nesting efficiency.
        cost_per_piece: adjusted_weight_lb x cost_per_lb.
        total_cost: cost_per_piece x quantity.
        quantity: Quantity used.
    """

    material: str
    cost_per_lb: float
    raw_weight_lb: float
    adjusted_weight_lb: float
    cost_per_piece: float
    total_cost: float
    quantity: int


@dataclass(frozen=True)
class CostRollup:
    """Complete routing and cost for one part.

    Attributes:
        primary: The OP20 operation, or None when no primary operation ran.
        operations: Every operation that passed its guard, in routing order.
            Includes the primary operation.
        material: Material cost, or None when weight or material is unknown.
        quantity: Quantity the prices are computed for.
    """

    primary: OperationResult | None = None
    operations: tuple[OperationResult, ...] = field(default_factory=tuple)
    material: MaterialCostResult | None = None
    quantity: int = 1

    @property
    def op20_work_center(self) -> str:
        """OP20 work-center code; empty when no primary operation ran."""
        return self.primary.work_center if self.primary else ""

    @property
    def total_material_cost(self) -> float:
        return self.material.total_cost if self.material else 0.0

    @property
    def total_processing_cost(self) -> float:
        return sum(op.price for op in self.operations)

    @property
    def total_cost(self) -> float:
        return self.total_material_cost + self.total_processing_cost

    def operation(self, work_center: str) -> OperationResult | None:
        """Return the operation routed to a work center, if any."""
        for op in self.operations:
            if op.work_center == work_center:
                return op
        return None

    def price_for(self, work_center: str) -> float:
        """Price at a work center; 0.0 when the operation did not run."""
        op = self.operation(work_center)
        return op.price if op else 0.0

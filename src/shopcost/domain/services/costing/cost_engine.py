"""CostingEngine facade.

This module provides the main entry point for routing and costing a
classified part. The engine holds only read-only configuration and
calculators, so one engine may cost parts from several threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shopcost.domain.value_objects import PartCategory, PartMetrics, WorkCenter

from .config import CostingConfig
from .laser import LaserCalculator, LaserSpeedProvider
from .material_cost import MaterialCostCalculator
from .models import CostRollup, MaterialCostResult, OperationResult
from .operations import (
    SHEET_METAL_ROUTE,
    TUBE_ROUTE,
    Calculators,
    CostContext,
    OperationStep,
)

if TYPE_CHECKING:
    from shopcost.domain.services.classification import Classification

logger = logging.getLogger(__name__)


class CostingEngine:
    """Route a classified part through its operations and roll up cost.

    Example:
        >>> engine = CostingEngine()
        >>> rollup = engine.estimate(metrics, classification, quantity=10)
        >>> rollup.op20_work_center, rollup.total_cost
    """

    def __init__(
        self,
        config: CostingConfig | None = None,
        speed_provider: LaserSpeedProvider | None = None,
        sheet_route: tuple[OperationStep, ...] = SHEET_METAL_ROUTE,
        tube_route: tuple[OperationStep, ...] = TUBE_ROUTE,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Costing configuration. Uses built-in defaults if None.
            speed_provider: Laser speed source. Uses the config's speed
                table if None.
            sheet_route: Steps for sheet-metal and generic parts.
            tube_route: Steps for tube parts.
        """
        self.config = config or CostingConfig()
        laser = LaserCalculator(self.config, speed_provider)
        self.calculators = Calculators.from_config(self.config, laser=laser)
        self.material_calculator = MaterialCostCalculator(self.config)
        self.sheet_route = sheet_route
        self.tube_route = tube_route

    def estimate(
        self,
        metrics: PartMetrics,
        classification: Classification | None = None,
        quantity: int | None = None,
    ) -> CostRollup:
        """Produce the routing and cost rollup for a part.

        Args:
            metrics: Part measurements, with geometry from classification merged in.
            classification: Classification result; None costs the part as generic.
            quantity: Quantity override; defaults to metrics.quantity.

        Returns:
            CostRollup with every operation that ran and the totals.

        Raises:
            ValueError: If a calculator rejects its inputs.
        """
        qty = max(1, quantity if quantity is not None and quantity > 0 else metrics.quantity)
        ctx = CostContext(metrics=metrics, quantity=qty, calculators=self.calculators)

        if metrics.is_purchased:
            code = WorkCenter.CUST if metrics.is_customer_supplied else WorkCenter.NPUR
            logger.debug(f"{metrics.name or 'part'}: purchased, OP20 {code.value}")
            purchased_op = OperationResult.unpriced(code.value, notes="purchased part")
            return CostRollup(
                primary=purchased_op,
                operations=(purchased_op,),
                material=self._material_cost(metrics, qty),
                quantity=qty,
            )

        category = classification.category if classification is not None else PartCategory.GENERIC
        if category is PartCategory.TUBE and metrics.tube is not None:
            route = self.tube_route
        else:
            route = self.sheet_route

        primary: OperationResult | None = None
        operations: list[OperationResult] = []
        for step in route:
            result = step.apply(ctx)
            if result is None:
                continue
            logger.debug(
                f"{metrics.name or 'part'}: {result.work_center} setup={result.setup_hours:.4f}h "
                f"run={result.run_hours:.4f}h price=${result.price:.2f}"
            )
            operations.append(result)
            if step.is_primary:
                primary = result

        return CostRollup(
            primary=primary,
            operations=tuple(operations),
            material=self._material_cost(metrics, qty),
            quantity=qty,
        )

    def _material_cost(self, metrics: PartMetrics, quantity: int) -> MaterialCostResult | None:
        return self.material_calculator.calculate(metrics.material, metrics.weight_lb, quantity)

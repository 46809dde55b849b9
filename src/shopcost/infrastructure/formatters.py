"""Output formatters for part cost results."""

from __future__ import annotations

import json
from typing import Any

from shopcost.application.services import PartCostResult
from shopcost.domain.services.costing import CostRollup, OperationResult


class CostReportFormatter:
    """Formats a part cost result as a routing table."""

    def format(self, result: PartCostResult) -> str:
        metrics = result.metrics
        rollup = result.rollup
        category = result.category.value if result.category is not None else "purchased"

        lines = [
            f"PART: {metrics.name or '(unnamed)'}",
            "=" * 72,
            f"Material:      {metrics.material or '-'}",
            f"Category:      {category}",
            f"Stock code:    {result.opti_material or '-'}",
            f"OP20:          {rollup.op20_work_center or '-'}",
            f"Quantity:      {rollup.quantity}",
        ]
        if result.classification is not None:
            lines.append(f"Reason:        {result.classification.reason}")
        if result.needs_review:
            lines.append("NEEDS REVIEW:  classification failed")

        lines.extend(self._format_operations(rollup))
        lines.extend(self._format_totals(rollup))
        return "\n".join(lines)

    def _format_operations(self, rollup: CostRollup) -> list[str]:
        lines = [
            "",
            "ROUTING",
            "-" * 72,
            f"{'WC':<6} {'Setup (h)':>10} {'Run (h)':>10} {'Rate':>9} {'Price':>11}  Notes",
            "-" * 72,
        ]
        if not rollup.operations:
            lines.append("No operations.")
        for op in rollup.operations:
            lines.append(
                f"{op.work_center:<6} {op.setup_hours:>10.4f} {op.run_hours:>10.4f} "
                f"{op.rate:>9.2f} {op.price:>11.2f}  {op.notes}"
            )
        return lines

    def _format_totals(self, rollup: CostRollup) -> list[str]:
        lines = ["-" * 72]
        if rollup.material is not None:
            material = rollup.material
            lines.append(
                f"Material: {material.adjusted_weight_lb:.3f} lb @ ${material.cost_per_lb:.2f}/lb "
                f"= ${material.cost_per_piece:.2f} ea"
            )
        lines.append(f"{'Material total:':<20} ${rollup.total_material_cost:>11.2f}")
        lines.append(f"{'Processing total:':<20} ${rollup.total_processing_cost:>11.2f}")
        lines.append(f"{'TOTAL:':<20} ${rollup.total_cost:>11.2f}")
        return lines


class JsonExporter:
    """Exports a part cost result as JSON."""

    def export(self, result: PartCostResult) -> str:
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: PartCostResult) -> dict[str, Any]:
        rollup = result.rollup
        classification = None
        if result.classification is not None:
            classification = {
                "category": result.classification.category.value,
                "reason": result.classification.reason,
                "needs_review": result.classification.needs_review,
            }

        material = None
        if rollup.material is not None:
            material = {
                "material": rollup.material.material,
                "cost_per_lb": rollup.material.cost_per_lb,
                "raw_weight_lb": rollup.material.raw_weight_lb,
                "adjusted_weight_lb": rollup.material.adjusted_weight_lb,
                "cost_per_piece": round(rollup.material.cost_per_piece, 4),
                "total_cost": round(rollup.material.total_cost, 4),
            }

        return {
            "part": result.metrics.name,
            "material": result.metrics.material,
            "classification": classification,
            "opti_material": result.opti_material,
            "op20": rollup.op20_work_center,
            "quantity": rollup.quantity,
            "operations": [self._format_operation(op) for op in rollup.operations],
            "material_cost": material,
            "total_material_cost": round(rollup.total_material_cost, 2),
            "total_processing_cost": round(rollup.total_processing_cost, 2),
            "total_cost": round(rollup.total_cost, 2),
        }

    def _format_operation(self, op: OperationResult) -> dict[str, Any]:
        data: dict[str, Any] = {
            "work_center": op.work_center,
            "setup_hours": round(op.setup_hours, 6),
            "run_hours": round(op.run_hours, 6),
            "rate": op.rate,
            "price": round(op.price, 4),
        }
        if op.notes:
            data["notes"] = op.notes
        return data

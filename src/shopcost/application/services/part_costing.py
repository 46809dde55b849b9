"""Part costing service.

Runs one costing pass for a part: classify it, merge the classified
geometry into its metrics, estimate raw sheet weight when none was
measured, route and cost it, and resolve its stock code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from shopcost.domain.services import (
    Classification,
    ClassificationConfig,
    ClassificationPipeline,
    CostingConfig,
    CostingEngine,
    CostRollup,
    GeometrySource,
    ProblemPartTracker,
    resolve_opti_material,
)
from shopcost.domain.services.costing import (
    LaserSpeedProvider,
    NestingEfficiencyEvaluator,
    RawWeightEstimator,
    WeightCalcMode,
)
from shopcost.domain.value_objects import PartCategory, PartMetrics, TubeMetrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartCostResult:
    """Everything one costing pass produced for a part.

    Attributes:
        metrics: Metrics after classified geometry was merged in.
        classification: Classification, or None for purchased parts.
        rollup: Routing and cost rollup.
        opti_material: Stock item code, when one could be resolved.
    """

    metrics: PartMetrics
    classification: Classification | None
    rollup: CostRollup
    opti_material: str | None = None

    @property
    def category(self) -> PartCategory | None:
        return self.classification.category if self.classification is not None else None

    @property
    def needs_review(self) -> bool:
        return self.classification is not None and self.classification.needs_review


def merge_classification(metrics: PartMetrics, classification: Classification) -> PartMetrics:
    """Copy geometry captured during classification into the metrics.

    Measured thickness wins over the sheet-metal thickness when both are
    present. Tube geometry replaces the tube measurements but keeps a known
    NPS and schedule.
    """
    if classification.sheet_metal is not None and metrics.thickness <= 0:
        metrics = replace(metrics, thickness=classification.sheet_metal.thickness)

    geometry = classification.tube
    if geometry is not None:
        known = metrics.tube or TubeMetrics()
        metrics = replace(
            metrics,
            tube=TubeMetrics(
                outer_diameter=geometry.outer_diameter,
                wall_thickness=geometry.wall_thickness,
                inner_diameter=geometry.inner_diameter,
                length=geometry.length,
                shape=geometry.shape,
                nps_text=known.nps_text,
                schedule_code=known.schedule_code,
            ),
        )
    return metrics


class PartCostingService:
    """Classify, route and cost parts with one configuration.

    The service holds read-only configuration and may be shared between
    threads. Failed classifications accumulate in ``tracker``.

    Example:
        >>> service = PartCostingService()
        >>> result = service.cost_part(metrics, source, quantity=10)
        >>> result.rollup.total_cost, result.opti_material
    """

    def __init__(
        self,
        config: CostingConfig | None = None,
        classification_config: ClassificationConfig | None = None,
        tracker: ProblemPartTracker | None = None,
        speed_provider: LaserSpeedProvider | None = None,
    ) -> None:
        self.tracker = tracker if tracker is not None else ProblemPartTracker()
        self.pipeline = ClassificationPipeline(config=classification_config, tracker=self.tracker)
        self.engine = CostingEngine(config, speed_provider=speed_provider)
        self.weight_estimator = RawWeightEstimator(self.engine.config)
        self.nesting = NestingEfficiencyEvaluator(self.engine.config.densities)

    def cost_part(
        self,
        metrics: PartMetrics,
        source: GeometrySource | None = None,
        quantity: int | None = None,
    ) -> PartCostResult:
        """Run one costing pass.

        Args:
            metrics: Measured part data.
            source: Geometry for classification. None classifies the part
                as generic.
            quantity: Quantity override; defaults to metrics.quantity.

        Returns:
            PartCostResult for this pass.

        Raises:
            ValueError: If a calculator rejects the part's measurements.
        """
        classification: Classification | None = None
        if metrics.is_purchased:
            logger.debug(f"{metrics.name or 'part'}: purchased, skipping classification")
        elif source is None:
            classification = Classification.generic("no geometry")
        else:
            classification = self.pipeline.classify(source, part_name=metrics.name)
            metrics = merge_classification(metrics, classification)

        if classification is not None and not (
            classification.category is PartCategory.TUBE and metrics.tube is not None
        ):
            metrics = self.with_raw_weight(metrics)

        rollup = self.engine.estimate(metrics, classification, quantity=quantity)

        opti_material = None
        if classification is not None:
            opti_material = resolve_opti_material(
                metrics.material,
                classification.category,
                thickness=metrics.thickness,
                tube=metrics.tube,
            )

        logger.info(
            f"{metrics.name or 'part'}: OP20 {rollup.op20_work_center or '-'} "
            f"total ${rollup.total_cost:.2f}"
        )
        return PartCostResult(
            metrics=metrics,
            classification=classification,
            rollup=rollup,
            opti_material=opti_material,
        )

    def with_raw_weight(self, metrics: PartMetrics) -> PartMetrics:
        """Fill in raw sheet weight for a part that has none.

        The raw weight is the part mass scaled by the thickness scrap
        multiplier. Parts that fill less than half of their bounding box
        are weighed as a full L x W blank instead. A precomputed raw weight
        is kept as-is. Nesting allowance is applied later when the material
        is priced, so the estimate itself assumes full efficiency.
        """
        if metrics.raw_weight_lb > 0 or metrics.thickness <= 0 or metrics.mass_lb <= 0:
            return metrics

        nesting = self.nesting.evaluate(
            metrics.material,
            metrics.mass_lb,
            metrics.bbox_length,
            metrics.bbox_width,
            metrics.thickness,
        )
        if nesting.should_override:
            estimate = self.weight_estimator.estimate(
                metrics.material,
                metrics.thickness,
                mass_lb=metrics.mass_lb,
                mode=WeightCalcMode.MANUAL,
                blank_length=metrics.bbox_length,
                blank_width=metrics.bbox_width,
            )
        else:
            estimate = self.weight_estimator.estimate(
                metrics.material, metrics.thickness, mass_lb=metrics.mass_lb
            )
        logger.debug(
            f"{metrics.name or 'part'}: raw weight {estimate.raw_weight_lb:.3f} lb "
            f"({nesting.reason})"
        )
        return replace(metrics, raw_weight_lb=estimate.raw_weight_lb)

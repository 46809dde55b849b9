"""Domain services for classification, costing and material resolution."""

from .costing import CostingConfig, CostingEngine, CostRollup, OperationResult
from .classification import (
    Classification,
    ClassificationConfig,
    ClassificationPipeline,
    GeometrySource,
    ProblemPartTracker,
    StaticGeometrySource,
)
from .materials import resolve_opti_material, to_short_code

__all__ = [
    "Classification",
    "ClassificationConfig",
    "ClassificationPipeline",
    "CostRollup",
    "CostingConfig",
    "CostingEngine",
    "GeometrySource",
    "OperationResult",
    "ProblemPartTracker",
    "StaticGeometrySource",
    "resolve_opti_material",
    "to_short_code",
]

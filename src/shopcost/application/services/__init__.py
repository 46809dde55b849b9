"""Application services."""

from .part_costing import PartCostingService, PartCostResult, merge_classification

__all__ = [
    "PartCostingService",
    "PartCostResult",
    "merge_classification",
]

"""Application layer - costing passes and file configuration."""

from .services import PartCostingService, PartCostResult

__all__ = [
    "PartCostingService",
    "PartCostResult",
]

"""Domain layer - part classification and costing."""

from .value_objects import (
    KG_TO_LB,
    M_TO_IN,
    PartCategory,
    PartMetrics,
    SheetMetrics,
    TubeMetrics,
    TubeShape,
    WorkCenter,
)

__all__ = [
    "KG_TO_LB",
    "M_TO_IN",
    "PartCategory",
    "PartMetrics",
    "SheetMetrics",
    "TubeMetrics",
    "TubeShape",
    "WorkCenter",
]

"""Part classification services.

This package provides:
- Classification models and the GeometrySource protocol
- Detectors for existing sheet metal, sheet-metal conversion and tube stock
- ClassificationPipeline, which runs the detectors in order
- ProblemPartTracker for parts that need manual review
"""

from __future__ import annotations

from .models import (
    Classification,
    ClassificationConfig,
    ConversionRejectedError,
    GeometrySource,
    SheetMetalConversion,
    SheetMetalParameters,
    StaticGeometrySource,
    TubeGeometry,
)
from .detectors import (
    DEFAULT_DETECTORS,
    Detector,
    ExistingFeaturesDetector,
    SheetMetalTrialDetector,
    TubeTrialDetector,
)
from .problem_parts import ProblemPart, ProblemPartTracker
from .pipeline import ClassificationPipeline

__all__ = [
    "Classification",
    "ClassificationConfig",
    "ConversionRejectedError",
    "GeometrySource",
    "SheetMetalConversion",
    "SheetMetalParameters",
    "StaticGeometrySource",
    "TubeGeometry",
    "DEFAULT_DETECTORS",
    "Detector",
    "ExistingFeaturesDetector",
    "SheetMetalTrialDetector",
    "TubeTrialDetector",
    "ProblemPart",
    "ProblemPartTracker",
    "ClassificationPipeline",
]

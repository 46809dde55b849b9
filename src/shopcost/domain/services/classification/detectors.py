"""Classification detectors.

Each detector is one state of the classification state machine. A
detector returns a Classification when it recognizes the part, or None
to let the next detector try. Expected rejections (a refused sheet-metal
conversion, tube geometry below the wall floor) are logged and return
None; anything else propagates to the pipeline.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from shopcost.domain.value_objects import TubeShape

from .models import (
    Classification,
    ClassificationConfig,
    ConversionRejectedError,
    GeometrySource,
    SheetMetalParameters,
    TubeGeometry,
)

logger = logging.getLogger(__name__)


class Detector(ABC):
    """Abstract base class for classification detectors."""

    name: str = "detector"

    @abstractmethod
    def detect(self, source: GeometrySource, config: ClassificationConfig) -> Classification | None:
        """Try to classify the part.

        Args:
            source: Geometry source for the part.
            config: Detector thresholds.

        Returns:
            Classification on success, None to fall through.
        """
        ...


class ExistingFeaturesDetector(Detector):
    """Fast path for parts that already carry sheet-metal features."""

    name = "existing_features"

    def detect(self, source: GeometrySource, config: ClassificationConfig) -> Classification | None:
        if not source.has_sheet_metal_features():
            return None
        parameters = source.existing_sheet_metal_parameters() or SheetMetalParameters(
            thickness=0.0, k_factor=config.default_k_factor
        )
        return Classification.sheet(parameters, reason="existing features")


class SheetMetalTrialDetector(Detector):
    """Try converting the part to sheet metal."""

    name = "sheet_metal_trial"

    def detect(self, source: GeometrySource, config: ClassificationConfig) -> Classification | None:
        try:
            conversion = source.try_convert_to_sheet_metal()
        except ConversionRejectedError as e:
            logger.info(f"Sheet metal conversion rejected: {e}")
            return None

        if not conversion.accepted:
            logger.info(
                f"Sheet metal conversion did not produce sheet metal"
                f"{': ' + conversion.message if conversion.message else ''}"
            )
            return None

        parameters = conversion.parameters
        if parameters.k_factor <= 0:
            parameters = SheetMetalParameters(
                thickness=parameters.thickness,
                bend_radius=parameters.bend_radius,
                k_factor=config.default_k_factor,
            )
        return Classification.sheet(parameters, reason="sheet metal conversion")


class TubeTrialDetector(Detector):
    """Accept extracted tube geometry that passes the validity checks."""

    name = "tube_trial"

    def detect(self, source: GeometrySource, config: ClassificationConfig) -> Classification | None:
        geometry = source.extract_tube_geometry()
        if geometry is None:
            logger.debug("No tube profile found")
            return None

        if self._is_round_bar(geometry, config):
            bar = TubeGeometry(
                outer_diameter=geometry.outer_diameter,
                wall_thickness=0.0,
                length=geometry.length,
                inner_diameter=0.0,
                shape=TubeShape.ROUND_BAR,
                axis=geometry.axis,
            )
            return Classification.tube_stock(bar, reason="round bar")

        if (
            geometry.outer_diameter > 0
            and geometry.wall_thickness >= config.min_wall
            and geometry.length > 0
        ):
            return Classification.tube_stock(geometry, reason="tube geometry")

        logger.info(
            f"Invalid tube geometry: OD={geometry.outer_diameter:.4f} "
            f"wall={geometry.wall_thickness:.4f} length={geometry.length:.4f}"
        )
        return None

    @staticmethod
    def _is_round_bar(geometry: TubeGeometry, config: ClassificationConfig) -> bool:
        if not config.accept_solid_round_bar:
            return False
        return (
            geometry.shape in (TubeShape.ROUND, TubeShape.ROUND_BAR)
            and geometry.wall_thickness == 0
            and geometry.outer_diameter > 0
            and geometry.length >= config.min_round_bar_length
        )


DEFAULT_DETECTORS: tuple[Detector, ...] = (
    ExistingFeaturesDetector(),
    SheetMetalTrialDetector(),
    TubeTrialDetector(),
)

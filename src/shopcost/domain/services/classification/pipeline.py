"""Classification pipeline.

Runs detectors in order and stops at the first that recognizes the
part. An unexpected error inside a detector ends classification with a
FAILED result carrying the error message; the pipeline never raises it.
"""

from __future__ import annotations

import logging

from .detectors import DEFAULT_DETECTORS, Detector
from .models import Classification, ClassificationConfig, GeometrySource
from .problem_parts import ProblemPartTracker

logger = logging.getLogger(__name__)


class ClassificationPipeline:
    """Ordered, short-circuiting part classifier.

    Example:
        >>> pipeline = ClassificationPipeline()
        >>> result = pipeline.classify(source, part_name="bracket.sldprt")
        >>> result.category
        <PartCategory.SHEET_METAL: 'sheet_metal'>
    """

    def __init__(
        self,
        detectors: tuple[Detector, ...] = DEFAULT_DETECTORS,
        config: ClassificationConfig | None = None,
        tracker: ProblemPartTracker | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            detectors: Detectors in evaluation order.
            config: Detector thresholds. Uses defaults if None.
            tracker: Receives parts whose classification failed. A private
                tracker is created if None.
        """
        self.detectors = detectors
        self.config = config or ClassificationConfig()
        self.tracker = tracker if tracker is not None else ProblemPartTracker()

    def classify(self, source: GeometrySource, part_name: str = "") -> Classification:
        """Classify one part.

        No retries are attempted; a caller wanting retries calls again
        and receives a new Classification.

        Args:
            source: Geometry source for the part.
            part_name: Identifier used in logs and the problem-part list.

        Returns:
            The first detector's Classification, GENERIC when none match,
            or FAILED when a detector raised.
        """
        label = part_name or "part"
        for detector in self.detectors:
            try:
                result = detector.detect(source, self.config)
            except Exception as e:
                reason = str(e) or type(e).__name__
                logger.warning(f"{label}: classification failed in {detector.name}: {reason}")
                self.tracker.add(label, f"Classification failed: {reason}")
                return Classification.failed(reason)
            if result is not None:
                logger.debug(f"{label}: {result.category.value} ({result.reason})")
                return result
            logger.debug(f"{label}: {detector.name} did not match")

        logger.debug(f"{label}: generic")
        return Classification.generic()

"""Unit tests for the classification pipeline.

These tests verify:
- Detector order and short-circuiting
- Rejected sheet-metal conversions fall through to tube detection
- Tube validity checks and optional round bar acceptance
- Detector exceptions become FAILED classifications and are tracked
"""

import threading

import pytest

from shopcost.domain.services.classification import (
    Classification,
    ClassificationConfig,
    ClassificationPipeline,
    Detector,
    ExistingFeaturesDetector,
    GeometrySource,
    ProblemPart,
    ProblemPartTracker,
    SheetMetalConversion,
    SheetMetalParameters,
    SheetMetalTrialDetector,
    StaticGeometrySource,
    TubeGeometry,
    TubeTrialDetector,
)
from shopcost.domain.value_objects import PartCategory, TubeShape

PARAMS = SheetMetalParameters(thickness=0.0747, bend_radius=0.06, k_factor=0.4)
TUBE = TubeGeometry(outer_diameter=2.0, wall_thickness=0.125, length=24.0)


class ExplodingSource(StaticGeometrySource):
    """Geometry source whose tube extraction fails unexpectedly."""

    def extract_tube_geometry(self) -> TubeGeometry | None:
        raise RuntimeError("profile sketch is corrupt")


class TestClassificationModel:
    """Tests for the Classification value object."""

    def test_sheet_requires_parameters(self) -> None:
        with pytest.raises(ValueError):
            Classification(PartCategory.SHEET_METAL, "missing")

    def test_tube_requires_geometry(self) -> None:
        with pytest.raises(ValueError):
            Classification(PartCategory.TUBE, "missing")

    def test_failed_routes_as_generic(self) -> None:
        failed = Classification.failed("boom")
        assert failed.routing_category is PartCategory.GENERIC
        assert failed.needs_review is True
        assert Classification.generic().needs_review is False

    def test_static_source_satisfies_protocol(self) -> None:
        assert isinstance(StaticGeometrySource(), GeometrySource)


class TestDetectors:
    """Tests for individual detectors."""

    def test_existing_features(self) -> None:
        source = StaticGeometrySource(sheet_metal_features=PARAMS)
        result = ExistingFeaturesDetector().detect(source, ClassificationConfig())
        assert result.category is PartCategory.SHEET_METAL
        assert result.reason == "existing features"
        assert result.sheet_metal == PARAMS

    def test_conversion_success(self) -> None:
        source = StaticGeometrySource(
            conversion=SheetMetalConversion(success=True, is_sheet_metal=True, parameters=PARAMS)
        )
        result = SheetMetalTrialDetector().detect(source, ClassificationConfig())
        assert result.category is PartCategory.SHEET_METAL
        assert result.reason == "sheet metal conversion"

    def test_missing_k_factor_uses_default(self) -> None:
        params = SheetMetalParameters(thickness=0.1, bend_radius=0.1, k_factor=0.0)
        source = StaticGeometrySource(
            conversion=SheetMetalConversion(success=True, is_sheet_metal=True, parameters=params)
        )
        result = SheetMetalTrialDetector().detect(source, ClassificationConfig(default_k_factor=0.33))
        assert result.sheet_metal.k_factor == pytest.approx(0.33)

    @pytest.mark.parametrize(
        "conversion",
        [
            SheetMetalConversion(success=False, message="no planar faces"),
            SheetMetalConversion(success=True, is_sheet_metal=False, parameters=PARAMS),
            SheetMetalConversion(success=True, is_sheet_metal=True, parameters=None),
        ],
    )
    def test_unaccepted_conversion_falls_through(self, conversion: SheetMetalConversion) -> None:
        source = StaticGeometrySource(conversion=conversion)
        assert SheetMetalTrialDetector().detect(source, ClassificationConfig()) is None

    def test_rejected_conversion_falls_through(self) -> None:
        source = StaticGeometrySource(reject_conversion=True)
        assert SheetMetalTrialDetector().detect(source, ClassificationConfig()) is None

    def test_valid_tube(self) -> None:
        result = TubeTrialDetector().detect(StaticGeometrySource(tube=TUBE), ClassificationConfig())
        assert result.category is PartCategory.TUBE
        assert result.tube == TUBE

    @pytest.mark.parametrize(
        "geometry",
        [
            TubeGeometry(outer_diameter=0.0, wall_thickness=0.125, length=24.0),
            TubeGeometry(outer_diameter=2.0, wall_thickness=0.01, length=24.0),
            TubeGeometry(outer_diameter=2.0, wall_thickness=0.125, length=0.0),
        ],
    )
    def test_invalid_tube_geometry(self, geometry: TubeGeometry) -> None:
        source = StaticGeometrySource(tube=geometry)
        assert TubeTrialDetector().detect(source, ClassificationConfig()) is None

    def test_wall_at_floor_is_accepted(self) -> None:
        geometry = TubeGeometry(outer_diameter=1.0, wall_thickness=0.015, length=10.0)
        result = TubeTrialDetector().detect(StaticGeometrySource(tube=geometry), ClassificationConfig())
        assert result is not None

    def test_round_bar_only_when_enabled(self) -> None:
        bar = TubeGeometry(outer_diameter=1.0, wall_thickness=0.0, length=12.0)
        source = StaticGeometrySource(tube=bar)

        assert TubeTrialDetector().detect(source, ClassificationConfig()) is None

        result = TubeTrialDetector().detect(
            source, ClassificationConfig(accept_solid_round_bar=True)
        )
        assert result.category is PartCategory.TUBE
        assert result.tube.shape is TubeShape.ROUND_BAR
        assert result.reason == "round bar"


class TestClassificationPipeline:
    """Tests for detector ordering and failure handling."""

    def test_existing_features_short_circuit(self) -> None:
        source = StaticGeometrySource(sheet_metal_features=PARAMS, tube=TUBE)
        result = ClassificationPipeline().classify(source)
        assert result.category is PartCategory.SHEET_METAL
        assert result.reason == "existing features"

    def test_rejected_conversion_then_tube(self) -> None:
        source = StaticGeometrySource(reject_conversion=True, tube=TUBE)
        result = ClassificationPipeline().classify(source)
        assert result.category is PartCategory.TUBE

    def test_fallback_is_generic(self) -> None:
        result = ClassificationPipeline().classify(StaticGeometrySource())
        assert result.category is PartCategory.GENERIC
        assert result.reason == "not sheet metal or tube"

    def test_detector_exception_becomes_failed(self) -> None:
        tracker = ProblemPartTracker()
        pipeline = ClassificationPipeline(tracker=tracker)

        result = pipeline.classify(ExplodingSource(), part_name="weldment.sldprt")

        assert result.category is PartCategory.FAILED
        assert result.reason == "profile sketch is corrupt"
        assert len(tracker) == 1
        assert tracker.all()[0].part == "weldment.sldprt"

    def test_injected_detectors(self) -> None:
        class AlwaysTube(Detector):
            name = "always_tube"

            def detect(self, source, config) -> Classification:
                return Classification.tube_stock(TUBE, reason="forced")

        pipeline = ClassificationPipeline(detectors=(AlwaysTube(), ExistingFeaturesDetector()))
        result = pipeline.classify(StaticGeometrySource(sheet_metal_features=PARAMS))
        assert result.reason == "forced"

    def test_each_call_returns_new_result(self) -> None:
        pipeline = ClassificationPipeline()
        source = StaticGeometrySource(tube=TUBE)
        first = pipeline.classify(source)
        second = pipeline.classify(source)
        assert first == second
        assert first is not second


class TestProblemPartTracker:
    """Tests for the problem-part list."""

    def test_blank_entries_rejected(self) -> None:
        tracker = ProblemPartTracker()
        assert tracker.add("", "reason") is False
        assert tracker.add("part", "  ") is False
        assert len(tracker) == 0

    def test_summary_sorted(self) -> None:
        tracker = ProblemPartTracker()
        tracker.add("b.sldprt", "second")
        tracker.add("A.sldprt", "first", configuration="Default")

        assert tracker.summary() == "A.sldprt [Default]: first\nb.sldprt: second"

    def test_empty_summary(self) -> None:
        assert ProblemPartTracker().summary() == "No problems found."

    def test_remove_and_clear(self) -> None:
        tracker = ProblemPartTracker()
        tracker.add("a", "x")
        tracker.add("b", "y")

        assert tracker.remove(ProblemPart("a", "x")) is True
        assert tracker.remove(ProblemPart("a", "x")) is False
        assert len(tracker) == 1
        tracker.clear()
        assert tracker.all() == []

    def test_concurrent_adds(self) -> None:
        tracker = ProblemPartTracker()

        def worker(n: int) -> None:
            for i in range(50):
                tracker.add(f"part-{n}-{i}", "failed")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(tracker) == 400

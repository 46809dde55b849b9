"""Unit tests for material weight and cost helpers."""

import math

import pytest

from shopcost.domain.services.costing import (
    CostingConfig,
    MaterialCostCalculator,
    NestingEfficiencyEvaluator,
    RawWeightEstimator,
    WeightCalcMode,
    blank_weight,
    round_bar_weight,
    thickness_multiplier,
    tube_weight,
)


class TestMaterialCostCalculator:
    """Tests for $/lb material pricing."""

    def test_cost_with_nesting_allowance(self) -> None:
        result = MaterialCostCalculator().calculate("304L", 10.0, quantity=5)
        assert result is not None
        assert result.cost_per_lb == pytest.approx(1.75)
        assert result.adjusted_weight_lb == pytest.approx(10.0 / 0.85)
        assert result.cost_per_piece == pytest.approx(10.0 / 0.85 * 1.75)
        assert result.total_cost == pytest.approx(5 * 10.0 / 0.85 * 1.75)

    def test_price_override(self) -> None:
        result = MaterialCostCalculator().calculate("304L", 1.0, cost_per_lb=4.0)
        assert result.cost_per_lb == 4.0

    def test_configured_nest_efficiency(self) -> None:
        calc = MaterialCostCalculator(CostingConfig(nest_efficiency=0.5))
        assert calc.calculate("A36", 1.0).adjusted_weight_lb == pytest.approx(2.0)

    @pytest.mark.parametrize("material,weight", [("304L", 0.0), ("", 5.0), ("   ", 5.0)])
    def test_skipped_without_weight_or_material(self, material: str, weight: float) -> None:
        assert MaterialCostCalculator().calculate(material, weight) is None

    def test_negative_weight_raises(self) -> None:
        with pytest.raises(ValueError):
            MaterialCostCalculator().calculate("304L", -1.0)


class TestStockWeights:
    """Tests for blank, tube and bar weight helpers."""

    def test_blank_weight(self) -> None:
        assert blank_weight(10.0, 20.0, 0.1, "A36") == pytest.approx(20.0 * 0.284)

    def test_tube_weight(self) -> None:
        expected = math.pi * 12.0 * (2.0**2 - 1.75**2) / 4.0 * 0.289
        assert tube_weight(2.0, 1.75, 12.0, "304L") == pytest.approx(expected)

    def test_round_bar_weight(self) -> None:
        expected = math.pi * 12.0 / 4.0 * 0.098
        assert round_bar_weight(1.0, 12.0, "6061") == pytest.approx(expected)

    @pytest.mark.parametrize(
        "thickness,expected",
        [(0.0747, 1.0), (0.1875, 1.0), (0.25, 1.069), (0.5, 1.037), (1.5, 1.015)],
    )
    def test_thickness_multiplier(self, thickness: float, expected: float) -> None:
        assert thickness_multiplier(thickness) == pytest.approx(expected)


class TestRawWeightEstimator:
    """Tests for raw sheet weight estimation."""

    def test_efficiency_mode(self) -> None:
        estimate = RawWeightEstimator().estimate(
            "304L", 0.25, mass_lb=10.0, nest_efficiency_percent=80.0
        )
        assert estimate.raw_weight_lb == pytest.approx(13.3625)
        assert estimate.sheet_fraction == pytest.approx(round(13.3625 / (0.25 * 7200 * 0.289), 4))
        assert estimate.weight_lb == pytest.approx(10.0)

    def test_manual_mode(self) -> None:
        estimate = RawWeightEstimator().estimate(
            "A36", 0.1, mode=WeightCalcMode.MANUAL, blank_length=10.0, blank_width=20.0
        )
        assert estimate.raw_weight_lb == pytest.approx(5.68)
        assert estimate.weight_lb == pytest.approx(5.68)

    def test_non_positive_efficiency_treated_as_full(self) -> None:
        estimate = RawWeightEstimator().estimate("304L", 0.1, mass_lb=4.0, nest_efficiency_percent=0)
        assert estimate.raw_weight_lb == pytest.approx(4.0)


class TestNestingEfficiencyEvaluator:
    """Tests for the bounding-box nesting check."""

    def test_poor_nesting_recommends_manual_mode(self) -> None:
        result = NestingEfficiencyEvaluator().evaluate("304L", 1.0, 20.0, 20.0, 0.1)
        assert result.should_override is True
        assert result.blank_weight_lb == pytest.approx(20.25 * 20.25 * 0.1 * 0.289)
        assert result.bbox_efficiency_percent < 50.0

    def test_good_nesting_keeps_efficiency_mode(self) -> None:
        result = NestingEfficiencyEvaluator().evaluate("304L", 10.0, 20.0, 20.0, 0.1)
        assert result.should_override is False
        assert result.bbox_efficiency_percent > 50.0

    def test_custom_settings_are_not_evaluated(self) -> None:
        evaluator = NestingEfficiencyEvaluator()
        manual = evaluator.evaluate("304L", 1.0, 20.0, 20.0, 0.1, mode=WeightCalcMode.MANUAL)
        custom = evaluator.evaluate("304L", 1.0, 20.0, 20.0, 0.1, nest_efficiency_percent=70.0)
        assert manual.should_override is False
        assert custom.should_override is False
        assert "Custom" in manual.reason

    def test_missing_data(self) -> None:
        result = NestingEfficiencyEvaluator().evaluate("304L", 0.0, 20.0, 20.0, 0.1)
        assert result.should_override is False
        assert "Insufficient" in result.reason

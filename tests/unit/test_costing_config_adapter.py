"""Unit tests for converting rates and part files into domain objects."""

from dataclasses import fields

import pytest

from shopcost.application.config import (
    ConfigError,
    config_to_classification_config,
    config_to_costing_config,
    load_config_from_dict,
    load_part_from_dict,
    part_to_geometry_source,
    part_to_metrics,
)
from shopcost.application.config.schemas import MaterialPricingSchema
from shopcost.domain.services.classification import ConversionRejectedError
from shopcost.domain.services.costing import CostingConfig, MaterialPricing
from shopcost.domain.value_objects import TubeShape


def _config(**sections):
    return load_config_from_dict({"schema_version": "1.0", **sections})


class TestConfigToCostingConfig:
    """Tests for config_to_costing_config."""

    def test_defaults_match_builtin_config(self) -> None:
        assert config_to_costing_config(_config()) == CostingConfig()

    def test_file_rates_merge_over_builtin_rates(self) -> None:
        costing = config_to_costing_config(_config(rates={"F115": 130.0}))
        assert costing.rates.rate_for("F115") == 130.0
        assert costing.rates.rate_for("F140") == 80.0

    def test_speed_rows_sorted_by_thickness(self) -> None:
        config = _config(
            laser={
                "speeds": {
                    "carbon_steel": [
                        {"thickness": 0.25, "feed_rate_ipm": 60.0},
                        {"thickness": 0.0598, "feed_rate_ipm": 240.0},
                    ],
                    "by_material": {"2205": [{"thickness": 0.1, "feed_rate_ipm": 90.0}]},
                }
            }
        )
        table = config_to_costing_config(config).laser_speeds
        assert [row.thickness for row in table.carbon_steel] == [0.0598, 0.25]
        assert "2205" in table.by_material
        assert not table.is_empty

    def test_laser_parameters_carried(self) -> None:
        costing = config_to_costing_config(_config(laser={"minutes_per_sheet": 7.5}))
        assert costing.laser.minutes_per_sheet == 7.5
        assert costing.laser_speeds.is_empty

    def test_zero_price_raises_config_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            config_to_costing_config(_config(pricing={"carbon_steel": 0.0}))
        assert exc_info.value.error_type == "validation"
        assert "carbon_steel" in exc_info.value.message

    def test_zero_rate_raises_config_error(self) -> None:
        """A zero rate would price the operation for free."""
        with pytest.raises(ConfigError) as exc_info:
            config_to_costing_config(_config(rates={"F325": 0.0}))
        assert exc_info.value.error_type == "validation"
        assert "F325" in exc_info.value.message

    def test_pricing_schema_matches_domain_fields(self) -> None:
        """Every file price reaches a price the engine uses."""
        domain = {f.name for f in fields(MaterialPricing)}
        assert set(MaterialPricingSchema.model_fields) == domain

    def test_unknown_pricing_key_rejected(self) -> None:
        with pytest.raises(ConfigError):
            _config(pricing={"default_cost_per_lb": 3.5})

    def test_short_tier_list_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            config_to_costing_config(_config(press_brake={"seconds_per_bend": [10.0, 30.0]}))


class TestConfigToClassificationConfig:
    """Tests for config_to_classification_config."""

    def test_thresholds_carried(self) -> None:
        config = _config(
            classification={"min_wall": 0.03, "accept_solid_round_bar": True}
        )
        classification = config_to_classification_config(config)
        assert classification.min_wall == 0.03
        assert classification.accept_solid_round_bar is True
        assert classification.default_k_factor == pytest.approx(0.44)


class TestPartToMetrics:
    """Tests for part_to_metrics."""

    def test_sheet_part(self) -> None:
        part = load_part_from_dict(
            {
                "name": "P1",
                "material": "A36",
                "thickness": 0.25,
                "mass_lb": 4.0,
                "quantity": 3,
                "bounding_box": {"length": 10.0, "width": 5.0},
                "sheet": {"total_cut_length": 30.0, "bend_count": 2},
            }
        )
        metrics = part_to_metrics(part)
        assert metrics.name == "P1"
        assert metrics.thickness == 0.25
        assert metrics.quantity == 3
        assert metrics.bbox_length == 10.0
        assert metrics.sheet.total_cut_length == 30.0
        assert metrics.sheet.bend_count == 2
        assert metrics.tube is None

    def test_tube_section_carried(self) -> None:
        part = load_part_from_dict(
            {
                "tube": {
                    "outer_diameter": 2.375,
                    "wall_thickness": 0.154,
                    "shape": "Round",
                    "nps_text": '2"',
                    "schedule_code": "40",
                }
            }
        )
        metrics = part_to_metrics(part)
        assert metrics.tube.outer_diameter == 2.375
        assert metrics.tube.nps_text == '2"'
        assert metrics.tube.schedule_code == "40"

    def test_purchase_flags(self) -> None:
        metrics = part_to_metrics(load_part_from_dict({"purchased": True, "purchase_subtype": "2"}))
        assert metrics.is_customer_supplied


class TestPartToGeometrySource:
    """Tests for part_to_geometry_source."""

    def test_existing_features(self) -> None:
        part = load_part_from_dict(
            {"sheet_metal": {"thickness": 0.1, "existing_features": True}}
        )
        source = part_to_geometry_source(part)
        assert source.has_sheet_metal_features()
        assert source.existing_sheet_metal_parameters().thickness == 0.1

    def test_conversion_result(self) -> None:
        part = load_part_from_dict({"sheet_metal": {"thickness": 0.1, "bend_radius": 0.1}})
        source = part_to_geometry_source(part)
        assert not source.has_sheet_metal_features()
        conversion = source.try_convert_to_sheet_metal()
        assert conversion.accepted
        assert conversion.parameters.bend_radius == 0.1

    def test_rejected_conversion_with_tube(self) -> None:
        part = load_part_from_dict(
            {
                "conversion_rejected": True,
                "tube": {"outer_diameter": 1.5, "wall_thickness": 0.065, "length": 20.0, "shape": "square"},
            }
        )
        source = part_to_geometry_source(part)
        with pytest.raises(ConversionRejectedError):
            source.try_convert_to_sheet_metal()
        tube = source.extract_tube_geometry()
        assert tube.shape is TubeShape.SQUARE
        assert tube.length == 20.0

    def test_no_geometry(self) -> None:
        source = part_to_geometry_source(load_part_from_dict({}))
        assert not source.try_convert_to_sheet_metal().accepted
        assert source.extract_tube_geometry() is None

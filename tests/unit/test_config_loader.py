"""Unit tests for rates file and part file loading.

These tests verify:
- Defaults for an otherwise empty rates file
- Schema version handling
- Unknown fields are rejected (extra="forbid")
- Loader error types for missing files, bad JSON and invalid values
- Part input schema parsing
"""

from pathlib import Path

import pytest

from shopcost.application.config import (
    SUPPORTED_VERSIONS,
    ConfigError,
    CostingConfiguration,
    load_config,
    load_config_from_dict,
    load_part,
    load_part_from_dict,
)
from shopcost.domain.value_objects import TubeShape

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


class TestCostingConfiguration:
    """Tests for the root rates file model."""

    def test_minimal_config_uses_defaults(self) -> None:
        config = load_config_from_dict({"schema_version": "1.0"})
        assert config.rates == {}
        assert config.pricing.stainless_304 == pytest.approx(1.75)
        assert config.press_brake.seconds_per_bend == [10.0, 30.0, 45.0, 200.0, 400.0]
        assert config.nest_efficiency == pytest.approx(0.85)
        assert config.classification.accept_solid_round_bar is False

    def test_rate_codes_are_uppercased(self) -> None:
        config = load_config_from_dict({"schema_version": "1.0", "rates": {" f115 ": 130.0}})
        assert config.rates == {"F115": 130.0}

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "rates": {"F115": -5.0}})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "rates"

    def test_supported_versions(self) -> None:
        for version in SUPPORTED_VERSIONS:
            assert CostingConfiguration(schema_version=version).schema_version == version

    def test_newer_minor_version_accepted(self) -> None:
        assert load_config_from_dict({"schema_version": "1.7"}).schema_version == "1.7"

    @pytest.mark.parametrize("version", ["2.0", "1", "v1.0"])
    def test_bad_versions_rejected(self, version: str) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"schema_version": version})

    def test_missing_version_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({})
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "pricing": {"titanium": 12.0}})
        assert exc_info.value.details[0]["path"] == "pricing.titanium"

    def test_nested_list_error_path(self) -> None:
        data = {
            "schema_version": "1.0",
            "laser": {"speeds": {"stainless": [{"thickness": 0.0, "feed_rate_ipm": 100.0}]}},
        }
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.details[0]["path"] == "laser.speeds.stainless[0].thickness"
        assert "laser.speeds.stainless[0].thickness" in str(exc_info.value)

    @pytest.mark.parametrize("efficiency", [0.0, 1.2])
    def test_nest_efficiency_range(self, efficiency: float) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"schema_version": "1.0", "nest_efficiency": efficiency})


class TestLoadConfig:
    """Tests for loading rates files from disk."""

    def test_valid_file(self) -> None:
        config = load_config(FIXTURES_PATH / "configs" / "rates_valid.json")
        assert config.rates["F115"] == 130.0
        assert len(config.laser.speeds.stainless) == 3

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "configs" / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] > 1

    def test_validation_error_carries_path(self) -> None:
        path = FIXTURES_PATH / "configs" / "unknown_field.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path
        assert exc_info.value.details[0]["path"] == "overhead_percent"


class TestPartInput:
    """Tests for part input files."""

    def test_sheet_part_file(self) -> None:
        part = load_part(FIXTURES_PATH / "parts" / "sheet_bracket.json")
        assert part.name == "BRACKET-01"
        assert part.quantity == 10
        assert part.sheet.bend_count == 4
        assert part.sheet_metal.thickness == pytest.approx(0.0747)
        assert part.tube is None

    def test_tube_shape_names_are_case_insensitive(self) -> None:
        part = load_part_from_dict(
            {"tube": {"outer_diameter": 1.0, "length": 12.0, "shape": "round bar"}}
        )
        assert part.tube.shape is TubeShape.ROUND_BAR

    def test_unknown_shape_maps_to_unknown(self) -> None:
        part = load_part_from_dict({"tube": {"outer_diameter": 1.0, "shape": "hexagon"}})
        assert part.tube.shape is TubeShape.UNKNOWN

    def test_negative_mass_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_part(FIXTURES_PATH / "parts" / "bad_part.json")
        assert exc_info.value.details[0]["path"] == "mass_lb"
        assert "Part validation failed" in exc_info.value.message

    def test_existing_features_cannot_be_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_part_from_dict(
                {
                    "conversion_rejected": True,
                    "sheet_metal": {"thickness": 0.1, "existing_features": True},
                }
            )

    def test_quantity_must_be_positive(self) -> None:
        with pytest.raises(ConfigError):
            load_part_from_dict({"quantity": 0})

"""Integration tests for the shopcost CLI.

These tests verify:
- estimate prints a routing report or JSON for a part file
- estimate honours --config and --quantity
- validate-config exit codes (0 valid, 1 errors, 2 warnings)
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from shopcost.cli.main import app

pytestmark = pytest.mark.integration

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
CONFIGS = FIXTURES_PATH / "configs"
PARTS = FIXTURES_PATH / "parts"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestEstimateCommand:
    """Tests for the estimate command."""

    def test_text_report(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["estimate", str(PARTS / "sheet_bracket.json")])

        assert result.exit_code == 0
        assert "PART: BRACKET-01" in result.output
        assert "S.304L14GA" in result.output
        assert "ROUTING" in result.output
        assert "TOTAL:" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["estimate", str(PARTS / "sheet_bracket.json"), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["part"] == "BRACKET-01"
        assert data["op20"] == "F115"
        assert data["quantity"] == 10
        assert data["classification"]["category"] == "sheet_metal"
        assert data["opti_material"] == "S.304L14GA"
        assert data["total_cost"] == pytest.approx(
            data["total_material_cost"] + data["total_processing_cost"], abs=0.02
        )

    def test_quantity_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["estimate", str(PARTS / "round_tube.json"), "-q", "4", "-f", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["quantity"] == 4
        assert data["op20"] == "F110"

    def test_config_rates_applied(self, runner: CliRunner) -> None:
        part = str(PARTS / "sheet_bracket.json")
        default = runner.invoke(app, ["estimate", part, "-f", "json"])
        custom = runner.invoke(
            app, ["estimate", part, "-f", "json", "--config", str(CONFIGS / "rates_valid.json")]
        )

        assert custom.exit_code == 0
        laser = next(op for op in json.loads(custom.stdout)["operations"] if op["work_center"] == "F115")
        assert laser["rate"] == 130.0
        assert json.loads(custom.stdout)["total_cost"] != json.loads(default.stdout)["total_cost"]

    def test_customer_supplied(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["estimate", str(PARTS / "customer_supplied.json")])

        assert result.exit_code == 0
        assert "CUST" in result.output
        assert "purchased" in result.output

    def test_invalid_part(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["estimate", str(PARTS / "bad_part.json")])

        assert result.exit_code == 1
        assert "mass_lb" in result.output

    def test_missing_part(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["estimate", str(PARTS / "nonexistent.json")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_invalid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "estimate",
                str(PARTS / "sheet_bracket.json"),
                "--config",
                str(CONFIGS / "rates_invalid.json"),
            ],
        )

        assert result.exit_code == 1
        assert "Invalid costing configuration" in result.output

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["estimate", str(PARTS / "sheet_bracket.json"), "--format", "xml"]
        )

        assert result.exit_code == 1
        assert "Unknown format" in result.output


class TestValidateConfigCommand:
    """Tests for the validate-config command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "rates_valid.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_warnings_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "rates_with_warnings.json")])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "rates.F115" in result.output
        assert "pricing.stainless_316" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_errors_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "rates_invalid.json")])

        assert result.exit_code == 1
        assert "rates.F140" in result.output
        assert "Expected 5 entries, got 3" in result.output
        assert "Validation failed" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "unknown_field.json")])

        assert result.exit_code == 1
        assert "overhead_percent" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate-config", str(CONFIGS / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

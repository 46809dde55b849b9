"""Pytest configuration and shared fixtures for shopcost tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from shopcost.domain.services import CostingEngine
from shopcost.domain.services.classification import (
    Classification,
    SheetMetalParameters,
    TubeGeometry,
)
from shopcost.domain.value_objects import PartMetrics, SheetMetrics, TubeMetrics

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests across layers")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Engine and part fixtures
# =============================================================================


@pytest.fixture
def engine() -> CostingEngine:
    """CostingEngine with the built-in shop configuration."""
    return CostingEngine()


@pytest.fixture
def sheet_part() -> PartMetrics:
    """A 14 ga stainless bracket that exercises every sheet operation."""
    return PartMetrics(
        name="BRACKET-01",
        material="304L",
        thickness=0.0747,
        mass_lb=2.0,
        bbox_length=12.0,
        bbox_width=6.0,
        sheet=SheetMetrics(
            total_cut_length=40.0,
            pierce_count=4,
            bend_count=4,
            longest_bend=12.0,
            tapped_hole_count=6,
            tap_setups=2,
            max_bend_radius=6.0,
        ),
    )


@pytest.fixture
def sheet_classification() -> Classification:
    return Classification.sheet(
        SheetMetalParameters(thickness=0.0747, bend_radius=0.0747, k_factor=0.44),
        reason="existing features",
    )


@pytest.fixture
def round_tube_part() -> PartMetrics:
    """2" OD x 0.125" wall round tube, 24" long."""
    return PartMetrics(
        name="TUBE-01",
        material="304L",
        mass_lb=5.0,
        tube=TubeMetrics(outer_diameter=2.0, wall_thickness=0.125, length=24.0),
    )


@pytest.fixture
def round_tube_classification() -> Classification:
    return Classification.tube_stock(
        TubeGeometry(outer_diameter=2.0, wall_thickness=0.125, length=24.0)
    )


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH

"""Unit tests for material codes, pipe schedules and stock codes."""

import pytest

from shopcost.domain.services.materials import (
    format_dim,
    is_stainless,
    resolve_opti_material,
    resolve_pipe_schedule,
    thickness_label,
    to_short_code,
)
from shopcost.domain.value_objects import PartCategory, TubeMetrics, TubeShape


class TestShortCodes:
    """Tests for material name mapping."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("AISI 304", "304L"),
            ("aisi 316", "316L"),
            ("Plain Carbon Steel", "CS"),
            ("6061-T6 (SS)", "6061"),
            ("304L", "304L"),
            ("aisi 4140", "4140"),
            ("inconel", "INCONEL"),
        ],
    )
    def test_to_short_code(self, name: str, expected: str) -> None:
        assert to_short_code(name) == expected

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_is_none(self, name: str | None) -> None:
        assert to_short_code(name) is None

    @pytest.mark.parametrize(
        "code,expected",
        [("304L", True), ("2205", True), ("AL6XN", True), ("3003", False), ("A36", False), (None, False)],
    )
    def test_is_stainless(self, code: str | None, expected: bool) -> None:
        assert is_stainless(code) is expected


class TestPipeSchedule:
    """Tests for OD/wall to NPS and schedule resolution."""

    def test_two_inch_schedule_40(self) -> None:
        pipe = resolve_pipe_schedule(2.375, 0.154)
        assert pipe.nps_text == '2"'
        assert pipe.schedule_code == "40"

    def test_tolerances(self) -> None:
        pipe = resolve_pipe_schedule(2.380, 0.150)
        assert pipe is not None
        assert pipe.schedule_code == "40"

    def test_sixteen_inch_half_wall_depends_on_material(self) -> None:
        assert resolve_pipe_schedule(16.0, 0.5, stainless=True).schedule_code == "80S"
        assert resolve_pipe_schedule(16.0, 0.5, stainless=False).schedule_code == "40"

    def test_non_standard_size(self) -> None:
        assert resolve_pipe_schedule(2.0, 0.125) is None


class TestLabels:
    """Tests for thickness labels and dimension formatting."""

    @pytest.mark.parametrize(
        "thickness,expected",
        [(0.0747, "14GA"), (0.1345, "10GA"), (0.25, ".25IN"), (0.375, "3/8"), (0.17, ".17IN")],
    )
    def test_thickness_label(self, thickness: float, expected: str) -> None:
        assert thickness_label(thickness) == expected

    @pytest.mark.parametrize(
        "inches,expected",
        [(2.0, '2"'), (0.06, '.060"'), (0.5, '.5"'), (0.125, '.125"'), (12.75, '12.75"')],
    )
    def test_format_dim(self, inches: float, expected: str) -> None:
        assert format_dim(inches) == expected


class TestResolveOptiMaterial:
    """Tests for stock item code generation."""

    def test_sheet(self) -> None:
        code = resolve_opti_material("AISI 304", PartCategory.SHEET_METAL, thickness=0.0747)
        assert code == "S.304L14GA"

    def test_sheet_without_thickness(self) -> None:
        assert resolve_opti_material("304L", PartCategory.SHEET_METAL) is None

    def test_pipe_from_measured_size(self) -> None:
        tube = TubeMetrics(outer_diameter=2.375, wall_thickness=0.154, length=24.0)
        assert resolve_opti_material("304L", PartCategory.TUBE, tube=tube) == 'P.304L2"SCH40'

    def test_pipe_from_known_schedule(self) -> None:
        tube = TubeMetrics(2.375, 0.218, length=24.0, nps_text='2"', schedule_code="80")
        assert resolve_opti_material("304L", PartCategory.TUBE, tube=tube) == 'P.304L2"SCH80'

    def test_round_tube(self) -> None:
        tube = TubeMetrics(outer_diameter=2.0, wall_thickness=0.125, length=24.0)
        assert resolve_opti_material("304L", PartCategory.TUBE, tube=tube) == 'T.304L2"ODX.125"'

    def test_square_tube(self) -> None:
        tube = TubeMetrics(2.0, 0.125, length=24.0, shape=TubeShape.SQUARE)
        assert resolve_opti_material("304L", PartCategory.TUBE, tube=tube) == 'T.304L2"SQX.125"'

    @pytest.mark.parametrize(
        "shape,prefix",
        [(TubeShape.ANGLE, "A."), (TubeShape.CHANNEL, "C."), (TubeShape.RECTANGLE, "T.")],
    )
    def test_structural_shapes(self, shape: TubeShape, prefix: str) -> None:
        tube = TubeMetrics(3.0, 0.25, inner_diameter=2.0, length=24.0, shape=shape)
        code = resolve_opti_material("A36", PartCategory.TUBE, tube=tube)
        assert code == f'{prefix}A363"X2"X.250"'

    def test_round_bar(self) -> None:
        tube = TubeMetrics(1.0, 0.0, length=12.0, shape=TubeShape.ROUND_BAR)
        assert resolve_opti_material("Plain Carbon Steel", PartCategory.TUBE, tube=tube) == 'R.CS1"'

    @pytest.mark.parametrize(
        "material,category",
        [("304L", PartCategory.GENERIC), ("304L", PartCategory.FAILED), ("", PartCategory.SHEET_METAL)],
    )
    def test_unresolvable(self, material: str, category: PartCategory) -> None:
        assert resolve_opti_material(material, category, thickness=0.1) is None

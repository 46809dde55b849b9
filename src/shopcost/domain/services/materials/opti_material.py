"""Stock item (OptiMaterial) code generation.

Codes identify the raw stock a part is cut from:

    Sheet:      S.{material}{gauge}          S.304L14GA, S.304L.25IN
    Pipe:       P.{material}{nps}SCH{sched}  P.304L2"SCH40
    Round tube: T.{material}{od}ODX{wall}    T.304L2"ODX.125"
    Square:     T.{material}{od}SQX{wall}
    Rectangle:  T.{material}{a}X{b}X{wall}
    Angle:      A.{material}{a}X{b}X{wall}
    Channel:    C.{material}{a}X{b}X{wall}
    I-beam:     T.{material}{a}X{b}X{wall}
    Round bar:  R.{material}{diameter}

Codes are derived from the current part data every time; nothing is
cached between passes.
"""

from __future__ import annotations

import math

from shopcost.domain.value_objects import PartCategory, TubeMetrics, TubeShape

from .codes import is_stainless, to_short_code
from .pipe_schedule import resolve_pipe_schedule

GAUGE_TOLERANCE = 0.008

# Stainless gauge thicknesses (inches), checked before THICKNESS_LABELS
STAINLESS_GAUGES: tuple[tuple[float, str], ...] = (
    (0.0187, "26GA"),
    (0.0217, "24GA"),
    (0.0250, "23GA"),
    (0.0299, "22GA"),
    (0.0359, "20GA"),
    (0.0478, "18GA"),
    (0.0598, "16GA"),
    (0.0747, "14GA"),
    (0.1046, "12GA"),
    (0.1196, "11GA"),
    (0.1345, "10GA"),
)

THICKNESS_LABELS: tuple[tuple[float, str], ...] = (
    (0.1875, "3/16"),
    (0.250, ".25IN"),
    (0.3125, "5/16"),
    (0.375, "3/8"),
    (0.500, ".5IN"),
    (0.625, "5/8"),
    (0.750, "3/4"),
    (1.000, "1IN"),
    (1.250, "1.25IN"),
    (1.500, "1.5IN"),
    (2.000, "2IN"),
)


def thickness_label(thickness: float) -> str:
    """Gauge or inch label for a sheet thickness.

    Examples:
        >>> thickness_label(0.0747)
        '14GA'
        >>> thickness_label(0.25)
        '.25IN'
        >>> thickness_label(0.17)
        '.17IN'
    """
    for table in (STAINLESS_GAUGES, THICKNESS_LABELS):
        for value, label in table:
            if abs(value - thickness) <= GAUGE_TOLERANCE:
                return label
    text = f"{thickness:.4g}"
    if thickness < 1.0 and text.startswith("0."):
        text = text[1:]
    return text + "IN"


def format_dim(inches: float) -> str:
    """Format a dimension with a trailing inch mark.

    Whole numbers print without decimals. Sub-inch values use three
    decimals with a double trailing zero trimmed and no leading zero.

    Examples:
        >>> format_dim(2.0)
        '2"'
        >>> format_dim(0.06)
        '.060"'
        >>> format_dim(0.5)
        '.5"'
        >>> format_dim(12.75)
        '12.75"'
    """
    if inches == math.floor(inches):
        return f'{int(inches)}"'
    if inches < 1.0:
        text = f"{inches:.3f}"
        if text.endswith("00"):
            text = text[:-2]
        if text.startswith("0."):
            text = text[1:]
    else:
        text = f"{inches:.4g}"
    return text + '"'


def _sheet_code(code: str, thickness: float) -> str | None:
    if thickness <= 0:
        return None
    return f"S.{code}{thickness_label(thickness)}"


def _tube_code(code: str, tube: TubeMetrics) -> str | None:
    od = tube.outer_diameter
    wall = tube.wall_thickness
    second = tube.inner_diameter if tube.inner_diameter > 0 else od
    shape = tube.shape

    if shape in (TubeShape.ROUND, TubeShape.UNKNOWN):
        nps, schedule = tube.nps_text, tube.schedule_code
        if not (nps and schedule) and od > 0 and wall > 0:
            pipe = resolve_pipe_schedule(od, wall, stainless=is_stainless(code))
            if pipe is not None:
                nps, schedule = pipe.nps_text, pipe.schedule_code
        if nps and schedule:
            return f"P.{code}{nps}SCH{schedule}"
        if od > 0 and wall > 0:
            return f"T.{code}{format_dim(od)}ODX{format_dim(wall)}"
        return None

    if shape is TubeShape.ROUND_BAR:
        return f"R.{code}{format_dim(od)}" if od > 0 else None

    if od <= 0 or wall <= 0:
        return None
    if shape is TubeShape.SQUARE:
        return f"T.{code}{format_dim(od)}SQX{format_dim(wall)}"
    prefixes = {
        TubeShape.ANGLE: "A.",
        TubeShape.RECTANGLE: "T.",
        TubeShape.CHANNEL: "C.",
        TubeShape.I_BEAM: "T.",
    }
    prefix = prefixes.get(shape)
    if prefix is None:
        return None
    return f"{prefix}{code}{format_dim(od)}X{format_dim(second)}X{format_dim(wall)}"


def resolve_opti_material(
    material: str | None,
    category: PartCategory,
    thickness: float = 0.0,
    tube: TubeMetrics | None = None,
) -> str | None:
    """Resolve the stock item code for a part.

    Args:
        material: Material name or short code.
        category: Classified category.
        thickness: Sheet thickness in inches.
        tube: Tube measurements for tube parts.

    Returns:
        Stock code, or None when the material, category or dimensions
        do not identify a stock item.
    """
    code = to_short_code(material)
    if not code:
        return None
    if category is PartCategory.SHEET_METAL:
        return _sheet_code(code, thickness)
    if category is PartCategory.TUBE and tube is not None:
        return _tube_code(code, tube)
    return None

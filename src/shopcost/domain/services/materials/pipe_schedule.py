"""Pipe schedule resolution from measured OD and wall."""

from __future__ import annotations

from dataclasses import dataclass

OD_TOLERANCE = 0.010
WALL_TOLERANCE = 0.005

# OD (inches) -> wall (inches) -> schedule code, searched in order
PIPE_SCHEDULES: dict[float, dict[float, str]] = {
    0.405: {0.049: "10", 0.068: "40", 0.095: "80"},
    0.540: {0.065: "10", 0.088: "40", 0.119: "80"},
    0.675: {0.065: "10", 0.091: "40", 0.126: "80"},
    0.840: {0.065: "5", 0.083: "10", 0.109: "40", 0.147: "80", 0.187: "160", 0.294: "XX"},
    1.050: {0.065: "5", 0.083: "10", 0.113: "40", 0.154: "80", 0.218: "160", 0.308: "XX"},
    1.315: {0.065: "5", 0.109: "10", 0.133: "40", 0.179: "80", 0.250: "160", 0.358: "XX"},
    1.660: {0.065: "5", 0.109: "10", 0.140: "40", 0.191: "80", 0.250: "160", 0.382: "XX"},
    1.900: {0.065: "5", 0.109: "10", 0.145: "40", 0.200: "80", 0.281: "160", 0.400: "XX"},
    2.375: {0.065: "5", 0.120: "10", 0.154: "40", 0.218: "80", 0.344: "160", 0.436: "XX"},
    2.875: {0.083: "5", 0.120: "10", 0.203: "40", 0.276: "80", 0.375: "160", 0.552: "XX"},
    3.500: {0.083: "5", 0.120: "10", 0.216: "40", 0.300: "80", 0.438: "160", 0.600: "XX"},
    4.000: {0.083: "5", 0.120: "10", 0.226: "40", 0.318: "80", 0.636: "XX"},
    4.500: {0.083: "5", 0.120: "10", 0.237: "40", 0.337: "80", 0.438: "120", 0.531: "160", 0.674: "XX"},
    5.000: {0.247: "STD", 0.120: "XX"},
    5.563: {0.109: "5", 0.134: "10", 0.258: "40", 0.375: "80", 0.500: "120", 0.625: "160", 0.750: "XX"},
    6.625: {0.109: "5", 0.134: "10", 0.280: "40", 0.432: "80", 0.562: "120", 0.718: "160", 0.864: "XX"},
    8.625: {0.109: "5", 0.148: "10", 0.322: "40", 0.500: "80", 0.718: "120", 0.906: "160", 0.875: "XX"},
    10.750: {0.134: "5", 0.165: "10", 0.365: "40", 0.500: "80S", 0.593: "80", 0.843: "120", 1.125: "160"},
    12.750: {0.156: "5", 0.180: "10", 0.375: "40S", 0.406: "40", 0.500: "80S", 0.687: "80", 1.000: "120", 1.312: "160"},
    14.000: {0.156: "5", 0.188: "10S", 0.250: "10", 0.375: "40S", 0.437: "40", 0.500: "80S", 0.750: "80", 1.093: "120", 1.406: "160"},
    16.000: {0.156: "5", 0.188: "10S", 0.250: "10", 0.375: "40S", 0.843: "80", 1.218: "120", 1.437: "160"},
    18.000: {0.165: "5", 0.188: "10S", 0.250: "10", 0.375: "40S", 0.562: "40", 0.500: "80S", 0.937: "80", 1.375: "120", 1.781: "160"},
    20.000: {0.188: "5", 0.218: "10S", 0.250: "10", 0.375: "40S", 0.593: "40", 0.500: "80S", 1.031: "80", 1.500: "120", 1.968: "160"},
    24.000: {0.218: "5", 0.250: "10", 0.375: "40S", 0.687: "40", 0.500: "80S", 1.218: "80", 1.812: "120", 2.343: "160"},
}

# Pipe OD (inches) -> nominal pipe size label
NPS_LABELS: dict[float, str] = {
    0.405: '.125"',
    0.540: '.25"',
    0.675: '.375"',
    0.840: '.5"',
    1.050: '.75"',
    1.315: '1"',
    1.660: '1.25"',
    1.900: '1.5"',
    2.375: '2"',
    2.875: '2.5"',
    3.500: '3"',
    4.000: '3.5"',
    4.500: '4"',
    5.563: '5"',
    6.625: '6"',
    8.625: '8"',
    10.750: '10"',
    12.750: '12"',
    14.000: '14"',
    16.000: '16"',
    18.000: '18"',
    20.000: '20"',
    24.000: '24"',
}


@dataclass(frozen=True)
class PipeSchedule:
    """A resolved pipe size."""

    outer_diameter: float
    nps_text: str
    schedule_code: str


def nps_label(outer_diameter: float) -> str:
    for od, label in NPS_LABELS.items():
        if abs(od - outer_diameter) < 1e-3:
            return label
    return f'{outer_diameter:.3f}'.rstrip("0").rstrip(".") + '"'


def resolve_pipe_schedule(
    outer_diameter: float, wall: float, stainless: bool = False
) -> PipeSchedule | None:
    """Match a measured OD and wall to a pipe size and schedule.

    Args:
        outer_diameter: Measured OD in inches.
        wall: Measured wall in inches.
        stainless: Whether the material is stainless; decides the 16"
            x 0.500" schedule (80S for stainless, 40 otherwise).

    Returns:
        PipeSchedule, or None when the OD/wall pair is not standard pipe.
    """
    for od, walls in PIPE_SCHEDULES.items():
        if abs(od - outer_diameter) > OD_TOLERANCE:
            continue
        for table_wall, schedule in walls.items():
            if abs(table_wall - wall) <= WALL_TOLERANCE:
                return PipeSchedule(od, nps_label(od), schedule)

    if abs(outer_diameter - 16.0) <= OD_TOLERANCE and abs(wall - 0.5) <= WALL_TOLERANCE:
        return PipeSchedule(16.0, nps_label(16.0), "80S" if stainless else "40")
    return None

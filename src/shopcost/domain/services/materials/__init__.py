"""Material code resolution.

This package provides:
- Material name to short code mapping
- Pipe schedule lookup from measured OD and wall
- Stock item (OptiMaterial) code generation
"""

from __future__ import annotations

from .codes import MATERIAL_CODES, SHORT_CODES, is_stainless, to_short_code
from .pipe_schedule import PipeSchedule, nps_label, resolve_pipe_schedule
from .opti_material import format_dim, resolve_opti_material, thickness_label

__all__ = [
    "MATERIAL_CODES",
    "SHORT_CODES",
    "is_stainless",
    "to_short_code",
    "PipeSchedule",
    "nps_label",
    "resolve_pipe_schedule",
    "format_dim",
    "resolve_opti_material",
    "thickness_label",
]

"""Value objects for the part costing domain.

All lengths are in inches and all weights in pounds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

KG_TO_LB = 2.20462
M_TO_IN = 39.3701


class PartCategory(str, Enum):
    """Manufacturing category assigned by the classification pipeline.

    Attributes:
        SHEET_METAL: Formed from flat stock; routed through laser and brake.
        TUBE: Tube, pipe, structural shape or solid bar stock.
        GENERIC: Neither sheet metal nor tube; costed on the sheet path.
        FAILED: Classification raised; routed as generic and flagged.
    """

    SHEET_METAL = "sheet_metal"
    TUBE = "tube"
    GENERIC = "generic"
    FAILED = "failed"


class TubeShape(str, Enum):
    """Cross-section shapes recognized for tube stock."""

    ROUND = "Round"
    SQUARE = "Square"
    RECTANGLE = "Rectangle"
    ANGLE = "Angle"
    CHANNEL = "Channel"
    ROUND_BAR = "Round Bar"
    I_BEAM = "I-Beam"
    UNKNOWN = "Unknown"

    @classmethod
    def from_name(cls, name: str | None) -> TubeShape:
        """Resolve a free-text shape name, case-insensitively.

        "Beam" is accepted as an alias of I-Beam. Unrecognized names map
        to UNKNOWN rather than raising.
        """
        if not name:
            return cls.UNKNOWN
        text = name.strip().lower()
        if text == "beam":
            return cls.I_BEAM
        for shape in cls:
            if shape.value.lower() == text:
                return shape
        return cls.UNKNOWN


class WorkCenter(str, Enum):
    """Shop work-center codes used for routing.

    Attributes:
        F115: Laser cutting.
        F110: Tube cutting saw.
        F140: Press brake.
        F145: CNC bending / large tube cutting rate.
        F210: Deburr.
        F220: Tapping and drilling.
        F300: Material handling and bar saw.
        F325: Roll forming.
        N145: Large-diameter tube cutting (billed at the F145 rate).
        NPUR: Purchased part, no processing.
        CUST: Customer-supplied part, no processing.
    """

    F115 = "F115"
    F110 = "F110"
    F140 = "F140"
    F145 = "F145"
    F155 = "F155"
    F210 = "F210"
    F220 = "F220"
    F300 = "F300"
    F325 = "F325"
    F385 = "F385"
    F400 = "F400"
    F500 = "F500"
    F525 = "F525"
    N145 = "N145"
    NPUR = "NPUR"
    CUST = "CUST"


@dataclass(frozen=True)
class SheetMetrics:
    """Flat-pattern measurements for a sheet-metal part.

    Attributes:
        total_cut_length: Total laser cut perimeter in inches.
        pierce_count: Number of laser pierces.
        bend_count: Number of press-brake bends.
        longest_bend: Longest bend line in inches.
        bends_both_directions: True when the part must be flipped on the brake.
        max_bend_radius: Largest inside bend radius in inches.
        arc_length: Arc length of the largest radius bend; 0 means derive it.
        tapped_hole_count: Number of tapped holes.
        tap_setups: Number of distinct tapping setups.
    """

    total_cut_length: float = 0.0
    pierce_count: int = 0
    bend_count: int = 0
    longest_bend: float = 0.0
    bends_both_directions: bool = False
    max_bend_radius: float = 0.0
    arc_length: float = 0.0
    tapped_hole_count: int = 0
    tap_setups: int = 0

    def __post_init__(self) -> None:
        if self.total_cut_length < 0:
            raise ValueError("total_cut_length must be non-negative")
        if self.pierce_count < 0:
            raise ValueError("pierce_count must be non-negative")
        if self.bend_count < 0:
            raise ValueError("bend_count must be non-negative")
        if self.longest_bend < 0:
            raise ValueError("longest_bend must be non-negative")
        if self.max_bend_radius < 0:
            raise ValueError("max_bend_radius must be non-negative")
        if self.tapped_hole_count < 0 or self.tap_setups < 0:
            raise ValueError("tapping counts must be non-negative")


@dataclass(frozen=True)
class TubeMetrics:
    """Cross-section and length of tube stock.

    Attributes:
        outer_diameter: Outside diameter (or largest outside dimension) in inches.
        wall_thickness: Wall thickness in inches; 0 for solid bar.
        inner_diameter: Inside diameter in inches, derived from OD and wall
            when 0. For angle, rectangle and channel stock this holds the
            second outside dimension instead.
        length: Cut length in inches.
        shape: Cross-section shape.
        nps_text: Nominal pipe size label, e.g. "2\"", when known.
        schedule_code: Pipe schedule, e.g. "40", when known.
    """

    outer_diameter: float = 0.0
    wall_thickness: float = 0.0
    inner_diameter: float = 0.0
    length: float = 0.0
    shape: TubeShape = TubeShape.ROUND
    nps_text: str = ""
    schedule_code: str = ""

    def __post_init__(self) -> None:
        if self.outer_diameter < 0 or self.wall_thickness < 0:
            raise ValueError("Tube dimensions must be non-negative")
        if self.inner_diameter < 0 or self.length < 0:
            raise ValueError("Tube dimensions must be non-negative")

    @property
    def effective_inner_diameter(self) -> float:
        """Inner diameter, derived from OD and wall when not given."""
        if self.inner_diameter > 0:
            return self.inner_diameter
        return max(0.0, self.outer_diameter - 2 * self.wall_thickness)

    @property
    def is_solid(self) -> bool:
        """True for solid bar stock (no measurable wall or bore)."""
        return self.wall_thickness < 0.001 or self.effective_inner_diameter < 0.001


@dataclass(frozen=True)
class PartMetrics:
    """Measurements of a single part, consumed read-only by the calculators.

    Attributes:
        name: Part identifier used in logs and reports.
        material: Material code, e.g. "304L", "A36", "6061".
        thickness: Sheet thickness in inches.
        mass_lb: Finished part mass in pounds.
        raw_weight_lb: Precomputed raw stock weight; preferred over mass when > 0.
        bbox_length: Bounding box length in inches.
        bbox_width: Bounding box width in inches.
        bbox_height: Bounding box height in inches.
        sheet: Sheet-metal measurements.
        tube: Tube measurements, when the part is tube stock.
        quantity: Parts per assembly / order quantity.
        is_purchased: True for bought-out parts.
        purchase_subtype: "2" marks a customer-supplied part.
    """

    name: str = ""
    material: str = ""
    thickness: float = 0.0
    mass_lb: float = 0.0
    raw_weight_lb: float = 0.0
    bbox_length: float = 0.0
    bbox_width: float = 0.0
    bbox_height: float = 0.0
    sheet: SheetMetrics = field(default_factory=SheetMetrics)
    tube: TubeMetrics | None = None
    quantity: int = 1
    is_purchased: bool = False
    purchase_subtype: str = ""

    def __post_init__(self) -> None:
        if self.thickness < 0:
            raise ValueError("thickness must be non-negative")
        if self.mass_lb < 0 or self.raw_weight_lb < 0:
            raise ValueError("weights must be non-negative")
        if self.bbox_length < 0 or self.bbox_width < 0 or self.bbox_height < 0:
            raise ValueError("bounding box dimensions must be non-negative")
        if self.quantity < 0:
            raise ValueError("quantity must be non-negative")

    @property
    def weight_lb(self) -> float:
        """Weight used for costing: raw weight if known, otherwise mass."""
        if self.raw_weight_lb > 0:
            return self.raw_weight_lb
        return self.mass_lb

    @property
    def is_customer_supplied(self) -> bool:
        return self.is_purchased and self.purchase_subtype.strip() == "2"

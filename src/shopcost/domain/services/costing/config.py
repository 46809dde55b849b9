"""Costing configuration.

This module provides the frozen configuration objects consumed by the
operation calculators and by CostingEngine. Every field defaults to the
shop's built-in value, so ``CostingConfig()`` is a complete configuration.
A configuration is built once and treated as read-only; reloading means
building a new CostingConfig and a new engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from . import constants as c

logger = logging.getLogger(__name__)


def _check_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive")


@dataclass(frozen=True)
class WorkCenterRates:
    """Hourly rates in $/hr per work center.

    The mapping is copied into a read-only view when the rates are built,
    so later changes to the caller's dict do not reach an engine.

    Attributes:
        rates: Mapping of work-center code to hourly rate.
    """

    rates: Mapping[str, float] = field(
        default_factory=lambda: dict(c.WORK_CENTER_RATES), hash=False
    )

    def __post_init__(self) -> None:
        for code, rate in self.rates.items():
            if rate <= 0:
                raise ValueError(f"Rate for {code} must be positive")
        object.__setattr__(
            self,
            "rates",
            MappingProxyType({code.strip().upper(): rate for code, rate in self.rates.items()}),
        )

    def rate_for(self, work_center: str) -> float:
        """Return the hourly rate billed for a work-center code.

        N145 bills at the F145 rate. F110 and any code without its own
        rate bill at the F300 rate.
        """
        code = (work_center or "").strip().upper()
        if code == "N145":
            code = "F145"
        if code in self.rates and code != "F110":
            return self.rates[code]
        return self.rates.get("F300", c.WORK_CENTER_RATES["F300"])


@dataclass(frozen=True)
class MaterialPricing:
    """Raw material prices in $/lb.

    Attributes:
        stainless_304: 304/309 and generic stainless.
        stainless_316: 316 stainless.
        carbon_steel: A36 and plain carbon steel; also the fallback price.
        aluminum_6061: 6061 aluminum.
        aluminum_5052: 5052 and generic aluminum.
        galvanized: Galvanized steel.
    """

    stainless_304: float = c.MATERIAL_PRICE_PER_LB["304"]
    stainless_316: float = c.MATERIAL_PRICE_PER_LB["316"]
    carbon_steel: float = c.MATERIAL_PRICE_PER_LB["CS"]
    aluminum_6061: float = c.MATERIAL_PRICE_PER_LB["6061"]
    aluminum_5052: float = c.MATERIAL_PRICE_PER_LB["5052"]
    galvanized: float = c.MATERIAL_PRICE_PER_LB["GALV"]

    def __post_init__(self) -> None:
        for name in (
            "stainless_304",
            "stainless_316",
            "carbon_steel",
            "aluminum_6061",
            "aluminum_5052",
            "galvanized",
        ):
            _check_positive(name, getattr(self, name))

    def cost_per_lb(self, material: str) -> float:
        """Look up $/lb by substring match on the material code.

        GALV is checked before the aluminum codes so that "GALV" does not
        match "AL". Unknown or blank codes price as carbon steel.
        """
        m = (material or "").upper()
        if not m.strip():
            return self.carbon_steel
        if "316" in m:
            return self.stainless_316
        if "304" in m or "309" in m or "SS" in m:
            return self.stainless_304
        if "GALV" in m or "GV" in m:
            return self.galvanized
        if "6061" in m:
            return self.aluminum_6061
        if "5052" in m or "AL" in m:
            return self.aluminum_5052
        if "A36" in m or "CS" in m or "CARBON" in m:
            return self.carbon_steel
        logger.debug(f"No price for material {material!r}, using carbon steel")
        return self.carbon_steel


@dataclass(frozen=True)
class MaterialDensities:
    """Material densities in lb/in^3."""

    stainless: float = c.DENSITY_STAINLESS
    carbon_steel: float = c.DENSITY_CARBON_STEEL
    aluminum: float = c.DENSITY_ALUMINUM

    def __post_init__(self) -> None:
        _check_positive("stainless", self.stainless)
        _check_positive("carbon_steel", self.carbon_steel)
        _check_positive("aluminum", self.aluminum)

    def density_for(self, material: str) -> float:
        """Return density for a material code.

        Unknown materials use the stainless density and log a warning,
        since the result may be off by a factor of 2-3 for aluminum.
        """
        m = (material or "").upper()
        if "304" in m or "316" in m:
            return self.stainless
        if "A36" in m or "CS" in m or "CARBON" in m:
            return self.carbon_steel
        # GALV contains "AL" but is a coated carbon steel
        if "GALV" in m or "GV" in m:
            return self.carbon_steel
        if "6061" in m or "5052" in m or "AL" in m:
            return self.aluminum
        logger.warning(
            f"Unknown material {material!r}, using stainless density "
            f"({self.stainless} lb/in^3)"
        )
        return self.stainless


@dataclass(frozen=True)
class LaserSpeedEntry:
    """One row of a laser speed table."""

    thickness: float
    feed_rate_ipm: float
    pierce_seconds: float

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("thickness must be positive")
        if self.feed_rate_ipm <= 0:
            raise ValueError("feed_rate_ipm must be positive")
        if self.pierce_seconds < 0:
            raise ValueError("pierce_seconds must be non-negative")


@dataclass(frozen=True)
class LaserSpeedTable:
    """Laser feed and pierce data grouped by material family.

    Rows are kept sorted by thickness. ``by_material`` holds per-code
    overrides (e.g. "304L", "2205") which are checked before the groups.

    Attributes:
        stainless: Rows for stainless and unknown materials.
        carbon_steel: Rows for A36, CS and 10xx steels.
        aluminum: Rows for 6061, 5052, 3003, 5083 and "AL".
        by_material: Per-material overrides keyed by uppercase code.
        thickness_tolerance: Slack when matching a row to a part thickness.
    """

    stainless: tuple[LaserSpeedEntry, ...] = ()
    carbon_steel: tuple[LaserSpeedEntry, ...] = ()
    aluminum: tuple[LaserSpeedEntry, ...] = ()
    by_material: Mapping[str, tuple[LaserSpeedEntry, ...]] = field(
        default_factory=dict, hash=False
    )
    thickness_tolerance: float = c.LASER_THICKNESS_TOLERANCE

    def __post_init__(self) -> None:
        if self.thickness_tolerance < 0:
            raise ValueError("thickness_tolerance must be non-negative")
        # Sort rows so lookups can take the first match
        object.__setattr__(self, "stainless", _sorted_rows(self.stainless))
        object.__setattr__(self, "carbon_steel", _sorted_rows(self.carbon_steel))
        object.__setattr__(self, "aluminum", _sorted_rows(self.aluminum))
        object.__setattr__(
            self,
            "by_material",
            MappingProxyType(
                {code.upper(): _sorted_rows(rows) for code, rows in self.by_material.items()}
            ),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.stainless or self.carbon_steel or self.aluminum or self.by_material)


def _sorted_rows(rows: tuple[LaserSpeedEntry, ...] | list[LaserSpeedEntry]) -> tuple[LaserSpeedEntry, ...]:
    return tuple(sorted(rows, key=lambda r: r.thickness))


@dataclass(frozen=True)
class LaserParams:
    """Laser (F115) time parameters.

    Attributes:
        minutes_per_sheet: Load/unload minutes per full sheet, prorated by weight.
        setup_fixed_minutes: Fixed setup minutes per job.
        min_setup_hours: Setup floor in hours.
        fallback_ipm_steel: Feed rate when no table row exists (steel).
        fallback_ipm_aluminum: Feed rate when no table row exists (aluminum).
        fallback_pierce_seconds: Pierce time when no table row exists.
    """

    minutes_per_sheet: float = c.LASER_MINUTES_PER_SHEET
    setup_fixed_minutes: float = c.LASER_SETUP_FIXED_MINUTES
    min_setup_hours: float = c.LASER_MIN_SETUP_HOURS
    fallback_ipm_steel: float = c.LASER_FALLBACK_IPM_STEEL
    fallback_ipm_aluminum: float = c.LASER_FALLBACK_IPM_ALUMINUM
    fallback_pierce_seconds: float = c.LASER_FALLBACK_PIERCE_SECONDS

    def __post_init__(self) -> None:
        if self.minutes_per_sheet < 0 or self.setup_fixed_minutes < 0:
            raise ValueError("Laser minutes must be non-negative")
        _check_positive("min_setup_hours", self.min_setup_hours)
        _check_positive("fallback_ipm_steel", self.fallback_ipm_steel)
        _check_positive("fallback_ipm_aluminum", self.fallback_ipm_aluminum)
        if self.fallback_pierce_seconds < 0:
            raise ValueError("fallback_pierce_seconds must be non-negative")


@dataclass(frozen=True)
class PressBrakeParams:
    """Press brake (F140) parameters.

    Attributes:
        seconds_per_bend: Tier times (small, medium, large, heavy, extra heavy).
        weight_thresholds: Weight breakpoints in lb (medium, heavy, extra heavy).
        length_thresholds: Length breakpoints in inches (medium, large).
        setup_minutes_per_foot: Setup minutes per foot of longest bend.
        setup_fixed_minutes: Fixed setup minutes.
    """

    seconds_per_bend: tuple[float, ...] = c.BRAKE_SECONDS_PER_BEND
    weight_thresholds: tuple[float, ...] = c.BRAKE_WEIGHT_THRESHOLDS_LB
    length_thresholds: tuple[float, ...] = c.BRAKE_LENGTH_THRESHOLDS_IN
    setup_minutes_per_foot: float = c.BRAKE_SETUP_MINUTES_PER_FOOT
    setup_fixed_minutes: float = c.BRAKE_SETUP_FIXED_MINUTES

    def __post_init__(self) -> None:
        if len(self.seconds_per_bend) != 5:
            raise ValueError("seconds_per_bend must have 5 entries")
        if len(self.weight_thresholds) != 3:
            raise ValueError("weight_thresholds must have 3 entries")
        if len(self.length_thresholds) != 2:
            raise ValueError("length_thresholds must have 2 entries")
        if any(s <= 0 for s in self.seconds_per_bend):
            raise ValueError("seconds_per_bend entries must be positive")
        if self.setup_minutes_per_foot < 0 or self.setup_fixed_minutes < 0:
            raise ValueError("Setup minutes must be non-negative")


@dataclass(frozen=True)
class StandardSheetParams:
    """Full sheet size used to prorate sheet handling time."""

    width: float = c.STANDARD_SHEET_WIDTH
    length: float = c.STANDARD_SHEET_LENGTH

    def __post_init__(self) -> None:
        _check_positive("width", self.width)
        _check_positive("length", self.length)

    @property
    def area(self) -> float:
        return self.width * self.length


@dataclass(frozen=True)
class DeburrParams:
    """Deburr (F210) feed in inches of edge per minute."""

    inches_per_minute: float = c.DEBURR_INCHES_PER_MINUTE

    def __post_init__(self) -> None:
        _check_positive("inches_per_minute", self.inches_per_minute)


@dataclass(frozen=True)
class TappingParams:
    """Tapping (F220) parameters in hours."""

    setup_per_setup: float = c.TAP_SETUP_HOURS_PER_SETUP
    setup_fixed: float = c.TAP_SETUP_FIXED_HOURS
    min_setup: float = c.TAP_MIN_SETUP_HOURS
    run_per_hole: float = c.TAP_RUN_HOURS_PER_HOLE

    def __post_init__(self) -> None:
        if min(self.setup_per_setup, self.setup_fixed, self.min_setup, self.run_per_hole) < 0:
            raise ValueError("Tapping hours must be non-negative")


@dataclass(frozen=True)
class RollFormingParams:
    """Roll forming (F325) parameters for sheet parts.

    Attributes:
        setup_hours: Fixed setup per job.
        feet_per_minute: Forming feed.
        min_radius: Bend radius above which roll forming is required, inches.
    """

    setup_hours: float = c.ROLL_SETUP_HOURS
    feet_per_minute: float = c.ROLL_FEET_PER_MINUTE
    min_radius: float = c.ROLL_MIN_RADIUS_IN

    def __post_init__(self) -> None:
        if self.setup_hours < 0:
            raise ValueError("setup_hours must be non-negative")
        _check_positive("feet_per_minute", self.feet_per_minute)
        if self.min_radius < 0:
            raise ValueError("min_radius must be non-negative")


@dataclass(frozen=True)
class CostingConfig:
    """Complete configuration for a costing pass.

    Attributes:
        rates: Work-center hourly rates.
        pricing: Material $/lb.
        densities: Material densities.
        laser: Laser time parameters.
        laser_speeds: Laser feed/pierce table; empty uses the fallback speeds.
        press_brake: Press brake tiers and setup.
        sheet: Standard sheet size.
        deburr: Deburr feed.
        tapping: Tapping hours.
        roll_forming: Roll forming parameters.
        nest_efficiency: Sheet utilization; material weight is divided by it.
    """

    rates: WorkCenterRates = field(default_factory=WorkCenterRates)
    pricing: MaterialPricing = field(default_factory=MaterialPricing)
    densities: MaterialDensities = field(default_factory=MaterialDensities)
    laser: LaserParams = field(default_factory=LaserParams)
    laser_speeds: LaserSpeedTable = field(default_factory=LaserSpeedTable)
    press_brake: PressBrakeParams = field(default_factory=PressBrakeParams)
    sheet: StandardSheetParams = field(default_factory=StandardSheetParams)
    deburr: DeburrParams = field(default_factory=DeburrParams)
    tapping: TappingParams = field(default_factory=TappingParams)
    roll_forming: RollFormingParams = field(default_factory=RollFormingParams)
    nest_efficiency: float = c.DEFAULT_NEST_EFFICIENCY

    def __post_init__(self) -> None:
        if self.nest_efficiency <= 0 or self.nest_efficiency > 1:
            raise ValueError("nest_efficiency must be between 0 and 1")

    @classmethod
    def defaults(cls) -> CostingConfig:
        """Return the built-in shop configuration."""
        return cls()

"""Costing configuration schemas.

This module contains the rate file sections: material pricing and
densities, laser speeds, per-operation parameters and classification
thresholds. Defaults match the shop's built-in values. Advisory range
checks (zero prices, unusually high rates, press brake tier counts) are
left to the validator so they are reported together with line paths.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from shopcost.domain.services.costing import constants as c


class MaterialPricingSchema(BaseModel):
    """Raw material prices in $/lb."""

    model_config = ConfigDict(extra="forbid")

    stainless_304: float = Field(default=c.MATERIAL_PRICE_PER_LB["304"])
    stainless_316: float = Field(default=c.MATERIAL_PRICE_PER_LB["316"])
    carbon_steel: float = Field(default=c.MATERIAL_PRICE_PER_LB["CS"])
    aluminum_6061: float = Field(default=c.MATERIAL_PRICE_PER_LB["6061"])
    aluminum_5052: float = Field(default=c.MATERIAL_PRICE_PER_LB["5052"])
    galvanized: float = Field(default=c.MATERIAL_PRICE_PER_LB["GALV"])


class MaterialDensitiesSchema(BaseModel):
    """Material densities in lb/in^3."""

    model_config = ConfigDict(extra="forbid")

    stainless: float = c.DENSITY_STAINLESS
    carbon_steel: float = c.DENSITY_CARBON_STEEL
    aluminum: float = c.DENSITY_ALUMINUM


class LaserSpeedEntrySchema(BaseModel):
    """One laser speed row.

    Attributes:
        thickness: Sheet thickness in inches
        feed_rate_ipm: Cutting feed in inches per minute
        pierce_seconds: Seconds per pierce
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(..., gt=0)
    feed_rate_ipm: float = Field(..., gt=0)
    pierce_seconds: float = Field(default=0.0, ge=0)


class LaserSpeedTableSchema(BaseModel):
    """Laser speed rows grouped by material family.

    Attributes:
        stainless: Rows for stainless and unrecognized materials
        carbon_steel: Rows for A36, CS and 10xx steels
        aluminum: Rows for aluminum alloys
        by_material: Per-material rows keyed by material code
        thickness_tolerance: Slack when matching a row to a part thickness
    """

    model_config = ConfigDict(extra="forbid")

    stainless: list[LaserSpeedEntrySchema] = Field(default_factory=list)
    carbon_steel: list[LaserSpeedEntrySchema] = Field(default_factory=list)
    aluminum: list[LaserSpeedEntrySchema] = Field(default_factory=list)
    by_material: dict[str, list[LaserSpeedEntrySchema]] = Field(default_factory=dict)
    thickness_tolerance: float = Field(default=c.LASER_THICKNESS_TOLERANCE, ge=0)


class LaserSchema(BaseModel):
    """Laser (F115) time parameters."""

    model_config = ConfigDict(extra="forbid")

    minutes_per_sheet: float = Field(default=c.LASER_MINUTES_PER_SHEET, ge=0)
    setup_fixed_minutes: float = Field(default=c.LASER_SETUP_FIXED_MINUTES, ge=0)
    min_setup_hours: float = Field(default=c.LASER_MIN_SETUP_HOURS, gt=0)
    fallback_ipm_steel: float = Field(default=c.LASER_FALLBACK_IPM_STEEL, gt=0)
    fallback_ipm_aluminum: float = Field(default=c.LASER_FALLBACK_IPM_ALUMINUM, gt=0)
    fallback_pierce_seconds: float = Field(
        default=c.LASER_FALLBACK_PIERCE_SECONDS, ge=0
    )
    speeds: LaserSpeedTableSchema = Field(
        default_factory=LaserSpeedTableSchema,
        description="Feed and pierce table; empty uses the fallback speeds",
    )


class PressBrakeSchema(BaseModel):
    """Press brake (F140) tiers and setup.

    Tier lists are plain lists here; their lengths are checked by the
    validator.
    """

    model_config = ConfigDict(extra="forbid")

    seconds_per_bend: list[float] = Field(
        default_factory=lambda: list(c.BRAKE_SECONDS_PER_BEND),
        description="Small, medium, large, heavy, extra heavy",
    )
    weight_thresholds: list[float] = Field(
        default_factory=lambda: list(c.BRAKE_WEIGHT_THRESHOLDS_LB),
        description="Medium, heavy and extra heavy limits in lb",
    )
    length_thresholds: list[float] = Field(
        default_factory=lambda: list(c.BRAKE_LENGTH_THRESHOLDS_IN),
        description="Medium and large limits in inches",
    )
    setup_minutes_per_foot: float = Field(default=c.BRAKE_SETUP_MINUTES_PER_FOOT, ge=0)
    setup_fixed_minutes: float = Field(default=c.BRAKE_SETUP_FIXED_MINUTES, ge=0)


class StandardSheetSchema(BaseModel):
    """Full sheet size in inches."""

    model_config = ConfigDict(extra="forbid")

    width: float = c.STANDARD_SHEET_WIDTH
    length: float = c.STANDARD_SHEET_LENGTH


class DeburrSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inches_per_minute: float = Field(default=c.DEBURR_INCHES_PER_MINUTE, gt=0)


class TappingSchema(BaseModel):
    """Tapping (F220) hours."""

    model_config = ConfigDict(extra="forbid")

    setup_per_setup: float = Field(default=c.TAP_SETUP_HOURS_PER_SETUP, ge=0)
    setup_fixed: float = Field(default=c.TAP_SETUP_FIXED_HOURS, ge=0)
    min_setup: float = Field(default=c.TAP_MIN_SETUP_HOURS, ge=0)
    run_per_hole: float = Field(default=c.TAP_RUN_HOURS_PER_HOLE, ge=0)


class RollFormingSchema(BaseModel):
    """Roll forming (F325) parameters."""

    model_config = ConfigDict(extra="forbid")

    setup_hours: float = Field(default=c.ROLL_SETUP_HOURS, ge=0)
    feet_per_minute: float = Field(default=c.ROLL_FEET_PER_MINUTE, gt=0)
    min_radius: float = Field(default=c.ROLL_MIN_RADIUS_IN, ge=0)


class ClassificationSchema(BaseModel):
    """Classification thresholds.

    Attributes:
        min_wall: Minimum tube wall in inches
        default_k_factor: K-factor used when a conversion reports none
        accept_solid_round_bar: Accept zero-wall round stock as round bar
        min_round_bar_length: Minimum round bar length in inches
    """

    model_config = ConfigDict(extra="forbid")

    min_wall: float = Field(default=c.TUBE_MIN_WALL_IN, ge=0)
    default_k_factor: float = Field(default=c.DEFAULT_K_FACTOR, gt=0, le=1)
    accept_solid_round_bar: bool = False
    min_round_bar_length: float = Field(default=0.5, ge=0)

"""Root configuration schema.

This module contains CostingConfiguration, the top-level model of a rates
file.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from shopcost.application.config.schemas.base import check_schema_version
from shopcost.application.config.schemas.costing_schema import (
    ClassificationSchema,
    DeburrSchema,
    LaserSchema,
    MaterialDensitiesSchema,
    MaterialPricingSchema,
    PressBrakeSchema,
    RollFormingSchema,
    StandardSheetSchema,
    TappingSchema,
)
from shopcost.domain.services.costing.constants import DEFAULT_NEST_EFFICIENCY


class CostingConfiguration(BaseModel):
    """Root model for a shop rates file.

    Every section is optional and defaults to the built-in shop values.
    Rates given in the file are merged over the built-in rates.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        rates: Hourly rate per work-center code in $/hr
        pricing: Raw material prices in $/lb
        densities: Material densities in lb/in^3
        laser: Laser parameters and speed table
        press_brake: Press brake tiers and setup
        sheet: Standard sheet size
        deburr: Deburr feed
        tapping: Tapping hours
        roll_forming: Roll forming parameters
        classification: Classification thresholds
        nest_efficiency: Sheet utilization (0, 1]

    Example:
        >>> config = CostingConfiguration(
        ...     schema_version="1.0",
        ...     rates={"F115": 135.0},
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    rates: dict[str, float] = Field(default_factory=dict)
    pricing: MaterialPricingSchema = Field(default_factory=MaterialPricingSchema)
    densities: MaterialDensitiesSchema = Field(default_factory=MaterialDensitiesSchema)
    laser: LaserSchema = Field(default_factory=LaserSchema)
    press_brake: PressBrakeSchema = Field(default_factory=PressBrakeSchema)
    sheet: StandardSheetSchema = Field(default_factory=StandardSheetSchema)
    deburr: DeburrSchema = Field(default_factory=DeburrSchema)
    tapping: TappingSchema = Field(default_factory=TappingSchema)
    roll_forming: RollFormingSchema = Field(default_factory=RollFormingSchema)
    classification: ClassificationSchema = Field(default_factory=ClassificationSchema)
    nest_efficiency: float = Field(default=DEFAULT_NEST_EFFICIENCY, gt=0, le=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        return check_schema_version(v)

    @field_validator("rates")
    @classmethod
    def normalize_rate_codes(cls, v: dict[str, float]) -> dict[str, float]:
        """Upper-case work-center codes and reject negative rates."""
        normalized: dict[str, float] = {}
        for code, rate in v.items():
            if rate < 0:
                raise ValueError(f"Rate for {code} must be non-negative")
            normalized[code.strip().upper()] = rate
        return normalized

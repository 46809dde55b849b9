"""Part input schemas.

This module contains the models for a part JSON file: the measurements a
CAD extraction produced for one part, plus the geometry the classifier
will probe (existing sheet-metal features, a conversion result, a tube
profile).
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from shopcost.application.config.schemas.base import BoundingBoxConfig, TubeShapeConfig


class SheetInputSchema(BaseModel):
    """Flat-pattern measurements.

    Attributes:
        total_cut_length: Laser cut perimeter in inches
        pierce_count: Number of pierces
        bend_count: Number of bends
        longest_bend: Longest bend line in inches
        bends_both_directions: Part must be flipped on the brake
        max_bend_radius: Largest inside bend radius in inches
        arc_length: Arc length of the largest radius bend (0 derives it)
        tapped_hole_count: Number of tapped holes
        tap_setups: Distinct tapping setups
    """

    model_config = ConfigDict(extra="forbid")

    total_cut_length: float = Field(default=0.0, ge=0)
    pierce_count: int = Field(default=0, ge=0)
    bend_count: int = Field(default=0, ge=0)
    longest_bend: float = Field(default=0.0, ge=0)
    bends_both_directions: bool = False
    max_bend_radius: float = Field(default=0.0, ge=0)
    arc_length: float = Field(default=0.0, ge=0)
    tapped_hole_count: int = Field(default=0, ge=0)
    tap_setups: int = Field(default=0, ge=0)


class SheetMetalInputSchema(BaseModel):
    """Sheet-metal parameters the geometry source reports.

    With ``existing_features`` true the part already carries sheet-metal
    features. Otherwise the values are what a conversion would yield.
    """

    model_config = ConfigDict(extra="forbid")

    thickness: float = Field(..., gt=0)
    bend_radius: float = Field(default=0.0, ge=0)
    k_factor: float = Field(default=0.0, ge=0, le=1, description="0 uses the default")
    existing_features: bool = False


class TubeInputSchema(BaseModel):
    """Tube profile the geometry source reports."""

    model_config = ConfigDict(extra="forbid")

    outer_diameter: float = Field(..., ge=0)
    wall_thickness: float = Field(default=0.0, ge=0)
    inner_diameter: float = Field(default=0.0, ge=0)
    length: float = Field(default=0.0, ge=0)
    shape: TubeShapeConfig = TubeShapeConfig.ROUND
    nps_text: str = ""
    schedule_code: str = ""

    @field_validator("shape", mode="before")
    @classmethod
    def parse_shape(cls, v: object) -> object:
        """Accept shape names case-insensitively ("round bar", "beam")."""
        if isinstance(v, str):
            return TubeShapeConfig.from_name(v)
        return v


class PartInputSchema(BaseModel):
    """One part to classify and cost.

    Example:
        >>> PartInputSchema(
        ...     name="BRACKET-01",
        ...     material="304L",
        ...     thickness=0.0747,
        ...     mass_lb=2.4,
        ...     sheet=SheetInputSchema(total_cut_length=40.0, bend_count=2),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    material: str = ""
    thickness: float = Field(default=0.0, ge=0)
    mass_lb: float = Field(default=0.0, ge=0)
    raw_weight_lb: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=1, ge=1)
    purchased: bool = False
    purchase_subtype: str = ""
    bounding_box: BoundingBoxConfig = Field(default_factory=BoundingBoxConfig)
    sheet: SheetInputSchema = Field(default_factory=SheetInputSchema)
    sheet_metal: SheetMetalInputSchema | None = Field(
        default=None, description="Sheet-metal features or conversion result"
    )
    conversion_rejected: bool = Field(
        default=False, description="Geometry source refuses sheet-metal conversion"
    )
    tube: TubeInputSchema | None = Field(default=None, description="Tube profile")

    @model_validator(mode="after")
    def validate_sheet_metal_source(self) -> "PartInputSchema":
        """Existing features cannot also be a rejected conversion."""
        if self.conversion_rejected and self.sheet_metal and self.sheet_metal.existing_features:
            raise ValueError(
                "'conversion_rejected' cannot be combined with existing sheet metal features"
            )
        return self

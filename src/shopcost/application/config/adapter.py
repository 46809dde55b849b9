"""Adapters from validated schemas to domain objects.

This module converts a CostingConfiguration into the frozen domain
configuration used by CostingEngine and ClassificationPipeline, and a
PartInputSchema into PartMetrics plus a StaticGeometrySource for the
classifier.
"""

from shopcost.application.config.loader import ConfigError
from shopcost.application.config.schemas import (
    CostingConfiguration,
    LaserSpeedEntrySchema,
    PartInputSchema,
)
from shopcost.domain.services.classification import (
    ClassificationConfig,
    SheetMetalConversion,
    SheetMetalParameters,
    StaticGeometrySource,
    TubeGeometry,
)
from shopcost.domain.services.costing import (
    CostingConfig,
    DeburrParams,
    LaserParams,
    LaserSpeedEntry,
    LaserSpeedTable,
    MaterialDensities,
    MaterialPricing,
    PressBrakeParams,
    RollFormingParams,
    StandardSheetParams,
    TappingParams,
    WorkCenterRates,
)
from shopcost.domain.services.costing.constants import WORK_CENTER_RATES
from shopcost.domain.value_objects import PartMetrics, SheetMetrics, TubeMetrics


def _speed_rows(rows: list[LaserSpeedEntrySchema]) -> tuple[LaserSpeedEntry, ...]:
    return tuple(
        LaserSpeedEntry(
            thickness=row.thickness,
            feed_rate_ipm=row.feed_rate_ipm,
            pierce_seconds=row.pierce_seconds,
        )
        for row in rows
    )


def config_to_costing_config(config: CostingConfiguration) -> CostingConfig:
    """Build the domain CostingConfig from a validated rates file.

    Rates in the file override the built-in rates code by code; codes the
    file does not mention keep their built-in values.

    Args:
        config: A validated CostingConfiguration

    Returns:
        A frozen CostingConfig

    Raises:
        ConfigError: If a value passes the schema but is rejected by the
            domain (for example a zero price or a short press brake tier list).

    Example:
        >>> config = load_config(Path("rates.json"))
        >>> engine = CostingEngine(config_to_costing_config(config))
    """
    rates = dict(WORK_CENTER_RATES)
    rates.update(config.rates)

    speeds = config.laser.speeds
    try:
        return CostingConfig(
            rates=WorkCenterRates(rates=rates),
            pricing=MaterialPricing(**config.pricing.model_dump()),
            densities=MaterialDensities(**config.densities.model_dump()),
            laser=LaserParams(**config.laser.model_dump(exclude={"speeds"})),
            laser_speeds=LaserSpeedTable(
                stainless=_speed_rows(speeds.stainless),
                carbon_steel=_speed_rows(speeds.carbon_steel),
                aluminum=_speed_rows(speeds.aluminum),
                by_material={
                    code: _speed_rows(rows) for code, rows in speeds.by_material.items()
                },
                thickness_tolerance=speeds.thickness_tolerance,
            ),
            press_brake=PressBrakeParams(
                seconds_per_bend=tuple(config.press_brake.seconds_per_bend),
                weight_thresholds=tuple(config.press_brake.weight_thresholds),
                length_thresholds=tuple(config.press_brake.length_thresholds),
                setup_minutes_per_foot=config.press_brake.setup_minutes_per_foot,
                setup_fixed_minutes=config.press_brake.setup_fixed_minutes,
            ),
            sheet=StandardSheetParams(**config.sheet.model_dump()),
            deburr=DeburrParams(**config.deburr.model_dump()),
            tapping=TappingParams(**config.tapping.model_dump()),
            roll_forming=RollFormingParams(**config.roll_forming.model_dump()),
            nest_efficiency=config.nest_efficiency,
        )
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid costing configuration: {e}",
            error_type="validation",
        ) from e


def config_to_classification_config(config: CostingConfiguration) -> ClassificationConfig:
    section = config.classification
    return ClassificationConfig(
        min_wall=section.min_wall,
        default_k_factor=section.default_k_factor,
        accept_solid_round_bar=section.accept_solid_round_bar,
        min_round_bar_length=section.min_round_bar_length,
    )


def part_to_metrics(part: PartInputSchema) -> PartMetrics:
    """Convert a part input file into PartMetrics.

    The tube section, when present, is carried into the metrics so that
    material resolution can use a known NPS and schedule even before the
    classifier has run.
    """
    tube = None
    if part.tube is not None:
        tube = TubeMetrics(
            outer_diameter=part.tube.outer_diameter,
            wall_thickness=part.tube.wall_thickness,
            inner_diameter=part.tube.inner_diameter,
            length=part.tube.length,
            shape=part.tube.shape,
            nps_text=part.tube.nps_text,
            schedule_code=part.tube.schedule_code,
        )

    return PartMetrics(
        name=part.name,
        material=part.material,
        thickness=part.thickness,
        mass_lb=part.mass_lb,
        raw_weight_lb=part.raw_weight_lb,
        bbox_length=part.bounding_box.length,
        bbox_width=part.bounding_box.width,
        bbox_height=part.bounding_box.height,
        sheet=SheetMetrics(**part.sheet.model_dump()),
        tube=tube,
        quantity=part.quantity,
        is_purchased=part.purchased,
        purchase_subtype=part.purchase_subtype,
    )


def part_to_geometry_source(part: PartInputSchema) -> StaticGeometrySource:
    """Build the geometry source the classifier probes for this part.

    A ``sheet_metal`` section with ``existing_features`` becomes existing
    features; without it, it becomes a successful conversion result.
    """
    existing = None
    conversion = None
    if part.sheet_metal is not None:
        parameters = SheetMetalParameters(
            thickness=part.sheet_metal.thickness,
            bend_radius=part.sheet_metal.bend_radius,
            k_factor=part.sheet_metal.k_factor,
        )
        if part.sheet_metal.existing_features:
            existing = parameters
        else:
            conversion = SheetMetalConversion(
                success=True, is_sheet_metal=True, parameters=parameters
            )

    tube = None
    if part.tube is not None:
        tube = TubeGeometry(
            outer_diameter=part.tube.outer_diameter,
            wall_thickness=part.tube.wall_thickness,
            length=part.tube.length,
            inner_diameter=part.tube.inner_diameter,
            shape=part.tube.shape,
        )

    return StaticGeometrySource(
        sheet_metal_features=existing,
        conversion=conversion,
        tube=tube,
        reject_conversion=part.conversion_rejected,
    )

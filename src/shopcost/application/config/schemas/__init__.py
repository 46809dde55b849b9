"""Configuration schema models for shop rates and part input files.

The schemas are organized into the following modules:
- base.py: Version constants, enum aliases and shared models
- costing_schema.py: Pricing, density and per-operation sections
- part_schema.py: Part input file models
- root.py: Root rates file model
"""

from shopcost.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    BoundingBoxConfig as BoundingBoxConfig,
    TubeShapeConfig as TubeShapeConfig,
    check_schema_version as check_schema_version,
)
from shopcost.application.config.schemas.costing_schema import (
    ClassificationSchema as ClassificationSchema,
    DeburrSchema as DeburrSchema,
    LaserSchema as LaserSchema,
    LaserSpeedEntrySchema as LaserSpeedEntrySchema,
    LaserSpeedTableSchema as LaserSpeedTableSchema,
    MaterialDensitiesSchema as MaterialDensitiesSchema,
    MaterialPricingSchema as MaterialPricingSchema,
    PressBrakeSchema as PressBrakeSchema,
    RollFormingSchema as RollFormingSchema,
    StandardSheetSchema as StandardSheetSchema,
    TappingSchema as TappingSchema,
)
from shopcost.application.config.schemas.part_schema import (
    PartInputSchema as PartInputSchema,
    SheetInputSchema as SheetInputSchema,
    SheetMetalInputSchema as SheetMetalInputSchema,
    TubeInputSchema as TubeInputSchema,
)
from shopcost.application.config.schemas.root import (
    CostingConfiguration as CostingConfiguration,
)

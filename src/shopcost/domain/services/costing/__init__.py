"""Routing and cost calculation services.

This package provides:
- Configuration for rates, prices, densities and process parameters
- One calculator per shop operation
- Guard-gated routing steps for sheet and tube parts
- CostingEngine, which rolls operations and material into a part cost
"""

from __future__ import annotations

from .config import (
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
from .models import CostRollup, MaterialCostResult, OperationResult, OperationTime
from .laser import (
    LaserCalculator,
    LaserSpeed,
    LaserSpeedProvider,
    TableLaserSpeedProvider,
    material_group,
)
from .deburr import DeburrCalculator
from .press_brake import PressBrakeCalculator
from .tapping import TappingCalculator
from .roll_forming import RollFormingCalculator, RollFormingResult, arc_length
from .material_cost import (
    MaterialCostCalculator,
    NestingEfficiencyEvaluator,
    NestingEvaluation,
    RawWeightEstimate,
    RawWeightEstimator,
    WeightCalcMode,
    blank_weight,
    round_bar_weight,
    thickness_multiplier,
    tube_weight,
)
from .operations import (
    SHEET_METAL_ROUTE,
    TUBE_ROUTE,
    Calculators,
    CostContext,
    OperationStep,
)
from .cost_engine import CostingEngine

__all__ = [
    # Config
    "CostingConfig",
    "DeburrParams",
    "LaserParams",
    "LaserSpeedEntry",
    "LaserSpeedTable",
    "MaterialDensities",
    "MaterialPricing",
    "PressBrakeParams",
    "RollFormingParams",
    "StandardSheetParams",
    "TappingParams",
    "WorkCenterRates",
    # Models
    "CostRollup",
    "MaterialCostResult",
    "OperationResult",
    "OperationTime",
    # Calculators
    "LaserCalculator",
    "LaserSpeed",
    "LaserSpeedProvider",
    "TableLaserSpeedProvider",
    "material_group",
    "DeburrCalculator",
    "PressBrakeCalculator",
    "TappingCalculator",
    "RollFormingCalculator",
    "RollFormingResult",
    "arc_length",
    "MaterialCostCalculator",
    "NestingEfficiencyEvaluator",
    "NestingEvaluation",
    "RawWeightEstimate",
    "RawWeightEstimator",
    "WeightCalcMode",
    "blank_weight",
    "round_bar_weight",
    "thickness_multiplier",
    "tube_weight",
    # Routing
    "SHEET_METAL_ROUTE",
    "TUBE_ROUTE",
    "Calculators",
    "CostContext",
    "OperationStep",
    "CostingEngine",
]

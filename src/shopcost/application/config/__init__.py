"""Rates and part file configuration.

This package provides:
- Pydantic schemas for rates files and part input files
- Loaders with structured ConfigError reporting
- Adapters from schemas to domain configuration and part metrics
- Advisory validation of rates files
"""

from shopcost.application.config.adapter import (
    config_to_classification_config,
    config_to_costing_config,
    part_to_geometry_source,
    part_to_metrics,
)
from shopcost.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_part,
    load_part_from_dict,
)
from shopcost.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CostingConfiguration,
    PartInputSchema,
)
from shopcost.application.config.validator import DEFAULT_VALIDATORS, validate_costing_config
from shopcost.application.config.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    # Schemas
    "SUPPORTED_VERSIONS",
    "CostingConfiguration",
    "PartInputSchema",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_part",
    "load_part_from_dict",
    # Adapter
    "config_to_costing_config",
    "config_to_classification_config",
    "part_to_metrics",
    "part_to_geometry_source",
    # Validation
    "DEFAULT_VALIDATORS",
    "validate_costing_config",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]

"""Rates file validation entry point.

Schema validation (types, required fields, basic ranges) happens in the
loader. This module runs the advisory validators over an already loaded
configuration and merges their findings.
"""

import logging

from shopcost.application.config.schemas import CostingConfiguration
from shopcost.application.config.validators import (
    ProcessValidator,
    RatesValidator,
    ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_VALIDATORS = (RatesValidator(), ProcessValidator())


def validate_costing_config(
    config: CostingConfiguration,
    validators: tuple = DEFAULT_VALIDATORS,
) -> ValidationResult:
    """Run every validator against a loaded rates file.

    Args:
        config: A CostingConfiguration returned by the loader
        validators: Validators to run, in order

    Returns:
        Merged ValidationResult; check ``exit_code`` for the CLI status.
    """
    result = ValidationResult()
    for validator in validators:
        logger.debug(f"Running validator '{validator.name}'")
        result.merge(validator.validate(config))
    return result

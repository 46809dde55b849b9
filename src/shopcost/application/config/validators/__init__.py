"""Validators for shop rates files.

- RatesValidator: hourly rates and material prices
- ProcessValidator: densities, sheet size, press brake tiers
"""

from .base import ValidationError, ValidationResult, ValidationWarning
from .process import ProcessValidator
from .rates import RatesValidator

__all__ = [
    # Base classes
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    # Validators
    "RatesValidator",
    "ProcessValidator",
]

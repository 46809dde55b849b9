"""Process parameter checks for rates files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ValidationResult

if TYPE_CHECKING:
    from shopcost.application.config.schemas import CostingConfiguration

# Expected press brake tier list lengths
BRAKE_TIER_COUNTS = {
    "seconds_per_bend": 5,
    "weight_thresholds": 3,
    "length_thresholds": 2,
}


class ProcessValidator:
    """Check densities, sheet size and press brake tiers."""

    @property
    def name(self) -> str:
        return "process"

    def validate(self, config: CostingConfiguration) -> ValidationResult:
        result = ValidationResult()

        brake = config.press_brake
        for field_name, expected in BRAKE_TIER_COUNTS.items():
            values = getattr(brake, field_name)
            path = f"press_brake.{field_name}"
            if len(values) != expected:
                result.add_error(
                    path,
                    f"Expected {expected} entries, got {len(values)}",
                    values,
                )
            elif any(v <= 0 for v in values):
                result.add_error(path, "Entries must be positive", values)
            elif list(values) != sorted(values):
                result.add_warning(
                    path,
                    "Entries are not in ascending order",
                    suggestion="Tiers are checked from smallest to largest",
                )

        for name, density in config.densities.model_dump().items():
            if density <= 0:
                result.add_error(f"densities.{name}", "Density must be positive", density)

        if config.sheet.width <= 0:
            result.add_error("sheet.width", "Sheet width must be positive", config.sheet.width)
        if config.sheet.length <= 0:
            result.add_error("sheet.length", "Sheet length must be positive", config.sheet.length)

        return result

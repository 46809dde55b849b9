"""Rate and price sanity checks for rates files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopcost.domain.value_objects import WorkCenter

from .base import ValidationResult

if TYPE_CHECKING:
    from shopcost.application.config.schemas import CostingConfiguration

MAX_REASONABLE_RATE = 1000.0  # $/hr
MAX_REASONABLE_PRICE = 100.0  # $/lb

_KNOWN_RATE_CODES = frozenset(wc.value for wc in WorkCenter) | {"ENG"}


class RatesValidator:
    """Check hourly rates and material prices.

    - A rate or price of zero is an error; it would cost parts for free.
    - A rate above $1000/hr or a price above $100/lb is a warning.
    - A rate for an unrecognized work-center code is a warning, since
      routing will never look it up.
    """

    @property
    def name(self) -> str:
        return "rates"

    def validate(self, config: CostingConfiguration) -> ValidationResult:
        result = ValidationResult()

        for code, rate in sorted(config.rates.items()):
            path = f"rates.{code}"
            if rate <= 0:
                result.add_error(path, f"Rate for {code} must be positive", rate)
            elif rate > MAX_REASONABLE_RATE:
                result.add_warning(
                    path,
                    f"Rate for {code} seems high: ${rate:.2f}/hr",
                    suggestion="Check the rate is per hour, not per job",
                )
            if code not in _KNOWN_RATE_CODES:
                result.add_warning(
                    path,
                    f"Unknown work center code '{code}'",
                    suggestion=f"Known codes: {', '.join(sorted(_KNOWN_RATE_CODES))}",
                )

        for name, price in config.pricing.model_dump().items():
            path = f"pricing.{name}"
            if price <= 0:
                result.add_error(path, "Material price must be positive", price)
            elif price > MAX_REASONABLE_PRICE:
                result.add_warning(path, f"Material price seems high: ${price:.2f}/lb")

        return result

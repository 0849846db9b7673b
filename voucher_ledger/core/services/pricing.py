"""
Automatic sell price derivation.

A fixed markup is added to the cost price and the result is rounded to the
nearest rounding step. A remainder exactly at the threshold rounds down, so
with the defaults 10500 becomes 10000 while 10501 becomes 11000.
"""

from dataclasses import dataclass

from voucher_ledger.config.settings import PricingSettings

DEFAULT_MARKUP = 3000
DEFAULT_ROUNDING_STEP = 1000
DEFAULT_ROUND_UP_THRESHOLD = 500


@dataclass(frozen=True)
class PricingRule:
    """Pure cost to sell price rule."""

    markup: int = DEFAULT_MARKUP
    rounding_step: int = DEFAULT_ROUNDING_STEP
    round_up_threshold: int = DEFAULT_ROUND_UP_THRESHOLD

    @classmethod
    def from_settings(cls, settings: PricingSettings) -> "PricingRule":
        return cls(
            markup=settings.markup,
            rounding_step=settings.rounding_step,
            round_up_threshold=settings.round_up_threshold,
        )

    def derive(self, cost_price: int) -> int:
        """Derive the sell price for a cost price. Non-positive cost yields 0."""
        if cost_price <= 0:
            return 0

        raw = cost_price + self.markup
        base = (raw // self.rounding_step) * self.rounding_step
        remainder = raw % self.rounding_step

        if remainder > self.round_up_threshold:
            return base + self.rounding_step
        return base


_default_rule = PricingRule()


def calculate_auto_sell_price(cost_price: int) -> int:
    """Derive a sell price using the default rule."""
    return _default_rule.derive(cost_price)

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bookstore.models import to_money

DEFAULT_INITIAL_CASH = Decimal("1000.00")
DEFAULT_LOYALTY_RATE = Decimal("0.10")


@dataclass(slots=True)
class LedgerConfig:
    """
    Runtime settings for the store.

    strict_validation switches on intake checks (negative quantities or
    prices, empty titles). Off by default: the store accepts whatever the
    console hands it.
    """

    initial_cash: Decimal = field(default=DEFAULT_INITIAL_CASH)
    loyalty_rate: Decimal = field(default=DEFAULT_LOYALTY_RATE)
    strict_validation: bool = False

    def __post_init__(self) -> None:
        try:
            self.initial_cash = to_money(self.initial_cash)
            self.loyalty_rate = to_money(self.loyalty_rate)
        except InvalidOperation as e:
            raise ValueError(f"Invalid numeric setting: {e}") from e
        if not self.initial_cash.is_finite() or not self.loyalty_rate.is_finite():
            raise ValueError("initial_cash and loyalty_rate must be finite")
        if not Decimal("0") <= self.loyalty_rate <= Decimal("1"):
            raise ValueError(f"loyalty_rate must be within [0, 1], got {self.loyalty_rate}")

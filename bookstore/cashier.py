from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Tuple

from bookstore.models import to_money

logger = logging.getLogger(__name__)

PAYMENT = "payment"
BOOK_INTAKE = "book_intake"
MAGAZINE_INTAKE = "magazine_intake"


@dataclass(frozen=True, slots=True)
class CashMovement:
    kind: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class CashSnapshot:
    store_cash: Decimal
    customer_payments: Decimal
    total: Decimal


class CashRegister:
    """
    Store cash drawer.

    store_cash only goes down (stock purchased into inventory),
    customer_payments only goes up (sales). Neither is ever assigned
    directly after construction; every change is recorded as a movement.
    """

    def __init__(self, initial_cash: Any = Decimal("1000.00")) -> None:
        self.store_cash: Decimal = to_money(initial_cash)
        self.customer_payments: Decimal = Decimal("0")
        self._movements: List[CashMovement] = []

    @property
    def movements(self) -> Tuple[CashMovement, ...]:
        return tuple(self._movements)

    def _record(self, kind: str, amount: Decimal) -> None:
        self._movements.append(CashMovement(kind=kind, amount=amount))

    def receive_payment(self, amount: Any) -> None:
        amount = to_money(amount)
        self.customer_payments += amount
        self._record(PAYMENT, amount)
        logger.info(f"payment received: {amount} (payments={self.customer_payments})")

    def debit_for_book_intake(self, amount: Any) -> None:
        amount = to_money(amount)
        self.store_cash -= amount
        self._record(BOOK_INTAKE, amount)
        logger.info(f"cash reduced for book purchase: {amount} (store_cash={self.store_cash})")

    def debit_for_magazine_intake(self, amount: Any) -> None:
        amount = to_money(amount)
        self.store_cash -= amount
        self._record(MAGAZINE_INTAKE, amount)
        logger.info(f"cash reduced for magazine purchase: {amount} (store_cash={self.store_cash})")

    def snapshot(self) -> CashSnapshot:
        return CashSnapshot(
            store_cash=self.store_cash,
            customer_payments=self.customer_payments,
            total=self.store_cash + self.customer_payments,
        )

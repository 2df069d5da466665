"""Tests for CashRegister bookkeeping."""
from decimal import Decimal

import pytest

from bookstore.cashier import BOOK_INTAKE, MAGAZINE_INTAKE, PAYMENT, CashMovement, CashRegister, CashSnapshot
from bookstore.config import LedgerConfig


def test_fresh_register_snapshot():
    snap = CashRegister().snapshot()
    assert snap == CashSnapshot(store_cash=Decimal("1000.00"), customer_payments=Decimal("0"), total=Decimal("1000.00"))


def test_movements_update_the_right_side(register):
    register.debit_for_book_intake(Decimal("50.00"))
    register.debit_for_magazine_intake("6.50")
    register.receive_payment(9.0)

    snap = register.snapshot()
    assert snap.store_cash == Decimal("943.50")
    assert snap.customer_payments == Decimal("9.0")
    assert snap.total == Decimal("952.50")

    assert register.movements == (
        CashMovement(BOOK_INTAKE, Decimal("50.00")),
        CashMovement(MAGAZINE_INTAKE, Decimal("6.50")),
        CashMovement(PAYMENT, Decimal("9.0")),
    )


def test_negative_payment_is_accepted(register):
    register.receive_payment(Decimal("-5"))
    assert register.customer_payments == Decimal("-5")


def test_movements_are_read_only(register):
    register.receive_payment(1)
    movements = register.movements
    assert isinstance(movements, tuple)
    with pytest.raises(AttributeError):
        movements.append(CashMovement(PAYMENT, Decimal("1")))  # type: ignore[attr-defined]


def test_config_defaults():
    config = LedgerConfig()
    assert config.initial_cash == Decimal("1000.00")
    assert config.loyalty_rate == Decimal("0.10")
    assert config.strict_validation is False


def test_config_converts_numbers():
    config = LedgerConfig(initial_cash=250, loyalty_rate=0.2)
    assert config.initial_cash == Decimal("250")
    assert config.loyalty_rate == Decimal("0.2")


@pytest.mark.parametrize("rate", ["1.5", "-0.1", "abc", "NaN"])
def test_config_rejects_bad_loyalty_rate(rate):
    with pytest.raises(ValueError):
        LedgerConfig(loyalty_rate=rate)

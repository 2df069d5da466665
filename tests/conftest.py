"""Pytest fixtures for the in-memory store."""

from decimal import Decimal

import pytest

from bookstore.cashier import CashRegister
from bookstore.config import LedgerConfig
from bookstore.ledger import StoreLedger
from bookstore.models import Book, Customer, Magazine


@pytest.fixture
def register() -> CashRegister:
    return CashRegister(Decimal("1000.00"))


@pytest.fixture
def ledger(register) -> StoreLedger:
    return StoreLedger(register)


@pytest.fixture
def strict_ledger(register) -> StoreLedger:
    return StoreLedger(register, LedgerConfig(strict_validation=True))


@pytest.fixture
def seeded_ledger(ledger) -> StoreLedger:
    ledger.add_book(Book.create("Dune", "Herbert", 1965, 5, Decimal("10.00")))
    ledger.add_book(Book.create("Emma", "Austen", 1815, 1, Decimal("8.00")))
    ledger.add_book(Book.create("Ulysses", "Joyce", 1922, 0, Decimal("15.00")))  # Out of stock

    ledger.add_magazine(Magazine.create("Wired", "Conde Nast", 2023, 3, "Tech", Decimal("6.00")))
    ledger.add_magazine(Magazine.create("Empty", "Nobody", 2020, 0, "Misc", Decimal("2.00")))  # Out of stock

    ledger.register_customer(Customer(id=1, name="Alice"))
    ledger.register_customer(Customer(id=2, name="Bob"))

    return ledger

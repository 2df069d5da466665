from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Sequence

from bookstore.cashier import CashRegister, CashSnapshot
from bookstore.config import LedgerConfig
from bookstore.customers import CustomerRegistry, ListView
from bookstore.models import Book, Customer, Magazine, NotFound, OutOfStock, SaleOutcome, Sold, StockItem

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class BookstoreError(Exception):
    pass


class InvalidIntakeError(BookstoreError, ValueError):
    pass


@dataclass(frozen=True, slots=True)
class InventoryListing:
    books: ListView
    magazines: ListView


@dataclass(frozen=True, slots=True)
class IntakeCounts:
    books: int
    magazines: int


class StoreLedger:
    """
    Inventory, customers and cash flow of one store, all in memory.

    The ledger owns the book/magazine lists and the customer registry.
    The cash register is borrowed: whoever builds the ledger keeps its own
    reference and sees every movement immediately.

    Matching rules:
    - intake merges on (title, author, year), exact comparison
    - sales match on (title, year) only; the first entry in insertion order wins
    """

    def __init__(self, register: CashRegister, config: Optional[LedgerConfig] = None) -> None:
        self.register = register
        self.config = config or LedgerConfig()

        self.books: List[Book] = []
        self.magazines: List[Magazine] = []
        self.customers = CustomerRegistry()

        self._book_intakes = 0
        self._magazine_intakes = 0

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    # Intake

    def _validate(self, item: StockItem) -> None:
        if not self.config.strict_validation:
            return
        if not item.title:
            raise InvalidIntakeError("Title must not be empty")
        if item.stock < 0:
            raise InvalidIntakeError(f"Stock for '{item.title}' must be >= 0, got {item.stock}")
        if item.price < 0:
            raise InvalidIntakeError(f"Price for '{item.title}' must be >= 0, got {item.price}")

    @staticmethod
    def _find_same(items: Sequence[StockItem], candidate: StockItem) -> Optional[StockItem]:
        key = candidate.publication.key()
        for existing in items:
            if existing.publication.key() == key:
                return existing
        return None

    def add_book(self, candidate: Book) -> Book:
        self._validate(candidate)
        self._book_intakes += 1
        cost = candidate.unit_price * candidate.copies

        existing = self._find_same(self.books, candidate)
        if existing is not None:
            existing.copies += candidate.copies
            self.log(f"[book='{existing.title}'] copies updated: +{candidate.copies} (copies={existing.copies})")
            self.register.debit_for_book_intake(cost)
            return existing

        # store a copy: the candidate stays the caller's
        entry = replace(candidate)
        self.books.append(entry)
        self.register.debit_for_book_intake(cost)
        self.log(f"[book='{entry.title}'] book added: copies={entry.copies} cost={cost}")
        return entry

    def add_magazine(self, candidate: Magazine) -> Magazine:
        self._validate(candidate)
        self._magazine_intakes += 1
        # flat debit per intake, not scaled by issue count
        cost = candidate.subscription_cost

        existing = self._find_same(self.magazines, candidate)
        if existing is not None:
            existing.issue_number += candidate.issue_number
            self.log(
                f"[magazine='{existing.title}'] issue number updated: +{candidate.issue_number} "
                f"(issue_number={existing.issue_number})"
            )
            self.register.debit_for_magazine_intake(cost)
            return existing

        entry = replace(candidate)
        self.magazines.append(entry)
        self.register.debit_for_magazine_intake(cost)
        self.log(f"[magazine='{entry.title}'] magazine added: issue_number={entry.issue_number} cost={cost}")
        return entry

    # Sales

    def _price_for(self, base: Decimal, is_loyalty_customer: bool) -> tuple[Decimal, Decimal]:
        discount = self.config.loyalty_rate * base if is_loyalty_customer else Decimal("0")
        discount = discount.quantize(CENT)
        final_price = (base - discount).quantize(CENT)
        return final_price, discount

    @staticmethod
    def _find_for_sale(items: Sequence[StockItem], title: str, year: int) -> Optional[StockItem]:
        for item in items:
            if item.title == title and item.year == year:
                return item
        return None

    def sell_book(self, title: str, year: int, is_loyalty_customer: bool) -> SaleOutcome:
        book = self._find_for_sale(self.books, title, year)
        if book is None:
            self.log(f"[book='{title}' year={year}] not in inventory")
            return NotFound(title=title, year=year)
        if book.copies <= 0:
            self.log(f"[book='{title}' year={year}] out of stock")
            return OutOfStock(title=title, year=year)

        book.copies -= 1
        final_price, discount = self._price_for(book.unit_price, is_loyalty_customer)
        self.register.receive_payment(final_price)
        self.log(
            f"[book='{title}' year={year}] sold: price={final_price} discount={discount} "
            f"loyalty={is_loyalty_customer} (copies={book.copies})"
        )
        return Sold(item=book, final_price=final_price, discount=discount)

    def sell_magazine(self, title: str, year: int, is_loyalty_customer: bool) -> SaleOutcome:
        magazine = self._find_for_sale(self.magazines, title, year)
        if magazine is None:
            self.log(f"[magazine='{title}' year={year}] not in inventory")
            return NotFound(title=title, year=year)
        if magazine.issue_number <= 0:
            self.log(f"[magazine='{title}' year={year}] out of stock")
            return OutOfStock(title=title, year=year)

        magazine.issue_number -= 1
        final_price, discount = self._price_for(magazine.subscription_cost, is_loyalty_customer)
        self.register.receive_payment(final_price)
        self.log(
            f"[magazine='{title}' year={year}] sold: price={final_price} discount={discount} "
            f"loyalty={is_loyalty_customer} (issue_number={magazine.issue_number})"
        )
        return Sold(item=magazine, final_price=final_price, discount=discount)

    # Customers & reporting

    def register_customer(self, customer: Customer) -> None:
        self.customers.register(customer)
        self.log(f"[customer={customer.id}] registered: {customer.name}")

    def list_customers(self) -> ListView:
        return self.customers.list_all()

    def list_inventory(self) -> InventoryListing:
        return InventoryListing(
            books=ListView(self.books, Book.info),
            magazines=ListView(self.magazines, Magazine.info),
        )

    def cash_snapshot(self) -> CashSnapshot:
        return self.register.snapshot()

    def intake_counts(self) -> IntakeCounts:
        return IntakeCounts(books=self._book_intakes, magazines=self._magazine_intakes)

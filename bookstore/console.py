from __future__ import annotations

import builtins
import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from bookstore.ledger import InvalidIntakeError, StoreLedger
from bookstore.models import Book, Customer, Magazine, NotFound, OutOfStock, SaleOutcome, Sold

logger = logging.getLogger(__name__)

MENU = """Menu:
1. Enter details for a book
2. Enter details for a magazine
3. Display total number of books and magazines
4. Display inventory
5. Sell publication to customer
6. Display cashier information
7. Register a customer
8. Display registered customers
9. Exit"""

SEPARATOR = "----------------------"


class EndOfInput(Exception):
    pass


class StoreConsole:
    """
    Text menu over a StoreLedger.

    Reads through `input` and writes through `output` so tests can drive it
    with scripted answers. Running out of input ends the session.
    """

    def __init__(
        self,
        ledger: StoreLedger,
        input: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.ledger = ledger
        self._input = input or builtins.input
        self._output = output or builtins.print

    # Prompt helpers

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError as e:
            raise EndOfInput() from e

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._ask(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._output(f"'{raw}' is not a whole number, try again.")

    def _ask_money(self, prompt: str) -> Decimal:
        while True:
            raw = self._ask(prompt).strip()
            try:
                value = Decimal(raw)
            except InvalidOperation:
                value = None
            if value is not None and value.is_finite():
                return value
            self._output(f"'{raw}' is not an amount, try again.")

    # Menu actions

    def enter_book(self) -> None:
        title = self._ask("Enter the title of the book: ")
        author = self._ask("Enter the author of the book: ")
        year = self._ask_int("Enter the publication year of the book: ")
        copies = self._ask_int("Enter the number of copies: ")
        price = self._ask_money("Enter the price per copy: $")
        before = len(self.ledger.books)
        try:
            self.ledger.add_book(Book.create(title, author, year, copies, price))
        except InvalidIntakeError as e:
            self._output(f"Book rejected: {e}")
            return
        if len(self.ledger.books) > before:
            self._output("Book added to inventory.")
        else:
            self._output("Number of copies updated for existing book.")

    def enter_magazine(self) -> None:
        title = self._ask("Enter the title of the magazine: ")
        author = self._ask("Enter the author of the magazine: ")
        year = self._ask_int("Enter the publication year of the magazine: ")
        issue = self._ask_int("Enter the issue number of the magazine: ")
        genre = self._ask("Enter the genre of the magazine: ")
        cost = self._ask_money("Enter the monthly subscription cost of the magazine: $")
        before = len(self.ledger.magazines)
        try:
            self.ledger.add_magazine(Magazine.create(title, author, year, issue, genre, cost))
        except InvalidIntakeError as e:
            self._output(f"Magazine rejected: {e}")
            return
        if len(self.ledger.magazines) > before:
            self._output("Magazine added to inventory.")
        else:
            self._output("Issue number updated for existing magazine.")

    def show_counts(self) -> None:
        counts = self.ledger.intake_counts()
        self._output(f"Total Number of Books: {counts.books}")
        self._output(f"Total Number of Magazines: {counts.magazines}")

    def show_inventory(self) -> None:
        listing = self.ledger.list_inventory()
        self._output("Book Inventory:")
        for info in listing.books:
            self._output(f"Title: {info['title']}")
            self._output(f"Author: {info['author']}")
            self._output(f"Publication Year: {info['year']}")
            self._output(f"Number of Copies: {info['copies']}")
            self._output(f"Price per Copy: ${info['unit_price']}")
            self._output(SEPARATOR)
        self._output("Magazine Inventory:")
        for info in listing.magazines:
            self._output(f"Title: {info['title']}")
            self._output(f"Author: {info['author']}")
            self._output(f"Publication Year: {info['year']}")
            self._output(f"Issue Number: {info['issue_number']}")
            self._output(f"Genre: {info['genre']}")
            self._output(f"Monthly Subscription Cost: ${info['subscription_cost']}")
            self._output(SEPARATOR)

    def _ask_loyalty(self) -> bool:
        answer = self._ask("Is the customer old or new? (Enter 'o' for old, 'n' for new): ").strip().lower()
        if answer == "o":
            return True
        if answer != "n":
            self._output("Invalid customer type. Assuming the customer is new.")
        return False

    def _report_sale(self, kind: str, outcome: SaleOutcome) -> None:
        if isinstance(outcome, Sold):
            self._output(f"{kind.capitalize()} sold to customer: {outcome.item.title} ({outcome.item.year})")
            self._output(f"Discount Applied: ${outcome.discount}")
            self._output(f"Payment received: ${outcome.final_price}")
        elif isinstance(outcome, OutOfStock):
            self._output(f"Sorry, the requested {kind} is out of stock.")
        elif isinstance(outcome, NotFound):
            self._output(f"Sorry, the requested {kind} is not in the inventory.")

    def sell(self) -> None:
        kind = self._ask("Is the customer buying a book or a magazine? (Enter 'b' for book, 'm' for magazine): ").strip().lower()
        if kind not in ("b", "m"):
            self._output("Invalid publication type.")
            return
        loyal = self._ask_loyalty()
        if kind == "b":
            title = self._ask("Enter the requested book title: ")
            year = self._ask_int("Enter the requested publication year: ")
            self._report_sale("book", self.ledger.sell_book(title, year, loyal))
        else:
            if loyal:
                rate = float(self.ledger.config.loyalty_rate * 100)
                self._output(f"Since you are an old customer, you get a {rate:g}% discount.")
            title = self._ask("Enter the requested magazine title: ")
            year = self._ask_int("Enter the requested publication year: ")
            self._report_sale("magazine", self.ledger.sell_magazine(title, year, loyal))

    def show_cash(self) -> None:
        snap = self.ledger.cash_snapshot()
        self._output("Cashier Information:")
        self._output(f"Initial Money: ${snap.store_cash}")
        self._output(f"Money Paid by Customer: ${snap.customer_payments}")
        self._output(f"Total Money: ${snap.total}")

    def register_customer(self) -> None:
        customer_id = self._ask_int("Enter customer ID: ")
        name = self._ask("Enter customer name: ")
        self.ledger.register_customer(Customer(id=customer_id, name=name))

    def show_customers(self) -> None:
        self._output("Registered Customers:")
        for customer in self.ledger.list_customers():
            self._output(f"Customer ID: {customer.id}, Customer Name: {customer.name}")

    # Loop

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the session should end."""
        actions = {
            "1": self.enter_book,
            "2": self.enter_magazine,
            "3": self.show_counts,
            "4": self.show_inventory,
            "5": self.sell,
            "6": self.show_cash,
            "7": self.register_customer,
            "8": self.show_customers,
        }
        if choice == "9":
            return False
        action: Optional[Callable[[], None]] = actions.get(choice)
        if action is None:
            self._output("Invalid choice. Please enter a valid option.")
            return True
        action()
        return True

    def run(self) -> None:
        try:
            while True:
                self._output(MENU)
                if not self.handle(self._ask("Enter your choice: ").strip()):
                    break
        except EndOfInput:
            logger.info("input closed, leaving menu")

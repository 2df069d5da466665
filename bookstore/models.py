from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Union


def to_money(value: Any) -> Decimal:
    """int/float/str -> Decimal through str(): 10.0 becomes Decimal("10.0")."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True, slots=True)
class Publication:
    title: str
    author: str
    year: int

    def key(self) -> tuple[str, str, int]:
        return (self.title, self.author, self.year)

    def info(self) -> Dict[str, Any]:
        return {"title": self.title, "author": self.author, "year": self.year}


@dataclass(slots=True)
class Book:
    publication: Publication
    copies: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        self.unit_price = to_money(self.unit_price)

    @classmethod
    def create(cls, title: str, author: str, year: int, copies: int, unit_price: Any) -> Book:
        return cls(Publication(title, author, year), copies, unit_price)

    @property
    def title(self) -> str:
        return self.publication.title

    @property
    def author(self) -> str:
        return self.publication.author

    @property
    def year(self) -> int:
        return self.publication.year

    @property
    def stock(self) -> int:
        return self.copies

    @property
    def price(self) -> Decimal:
        return self.unit_price

    def info(self) -> Dict[str, Any]:
        return {**self.publication.info(), "copies": self.copies, "unit_price": self.unit_price}


@dataclass(slots=True)
class Magazine:
    """
    Magazine stock entry.

    issue_number doubles as the stock gauge: intake of an identical
    publication adds the incoming issue number to it, each sale takes one off.
    """

    publication: Publication
    issue_number: int
    genre: str
    subscription_cost: Decimal

    def __post_init__(self) -> None:
        self.subscription_cost = to_money(self.subscription_cost)

    @classmethod
    def create(
        cls, title: str, author: str, year: int, issue_number: int, genre: str, subscription_cost: Any
    ) -> Magazine:
        return cls(Publication(title, author, year), issue_number, genre, subscription_cost)

    @property
    def title(self) -> str:
        return self.publication.title

    @property
    def author(self) -> str:
        return self.publication.author

    @property
    def year(self) -> int:
        return self.publication.year

    @property
    def stock(self) -> int:
        return self.issue_number

    @property
    def price(self) -> Decimal:
        return self.subscription_cost

    def info(self) -> Dict[str, Any]:
        return {
            **self.publication.info(),
            "issue_number": self.issue_number,
            "genre": self.genre,
            "subscription_cost": self.subscription_cost,
        }


StockItem = Union[Book, Magazine]


@dataclass(frozen=True, slots=True)
class Customer:
    id: int
    name: str


# Sale outcomes: returned as values, never raised.


@dataclass(frozen=True, slots=True)
class Sold:
    # entries are mutable; hash on the price fields only
    item: StockItem = field(hash=False)
    final_price: Decimal
    discount: Decimal


@dataclass(frozen=True, slots=True)
class OutOfStock:
    title: str
    year: int


@dataclass(frozen=True, slots=True)
class NotFound:
    title: str
    year: int


SaleOutcome = Union[Sold, OutOfStock, NotFound]

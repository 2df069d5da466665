from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, Optional

from bookstore.models import Customer


class ListView(Sequence):
    """
    Read-only, lazy view over a list owned by someone else.

    Items are projected through `transform` on access, so iterating twice
    reflects the current state of the underlying list both times.
    """

    def __init__(self, items: List[Any], transform: Optional[Callable[[Any], Any]] = None) -> None:
        self._items = items
        self._transform = transform

    def _project(self, item: Any) -> Any:
        return item if self._transform is None else self._transform(item)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._project(item) for item in self._items[index]]
        return self._project(self._items[index])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        for item in self._items:
            yield self._project(item)

    def __repr__(self) -> str:
        return f"ListView({list(self)!r})"


class CustomerRegistry:
    def __init__(self) -> None:
        self._customers: List[Customer] = []

    def register(self, customer: Customer) -> None:
        # duplicates (same id or name) are allowed
        self._customers.append(customer)

    def list_all(self) -> ListView:
        return ListView(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

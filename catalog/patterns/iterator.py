"""
Iterator examples.

Provide a way to access the elements of an aggregate object sequentially
without exposing its underlying representation.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


class Aggregate(ABC):
    @abstractmethod
    def create_iterator(self) -> "ItemIterator":
        """Create an iterator positioned before the first item."""


class ItemIterator(ABC):
    """Explicit cursor with first/next/is_done/current_item."""

    @abstractmethod
    def first(self) -> Optional[str]: ...

    @abstractmethod
    def next(self) -> Optional[str]: ...

    @abstractmethod
    def is_done(self) -> bool: ...

    @abstractmethod
    def current_item(self) -> Optional[str]: ...


class ConcreteAggregate(Aggregate):
    def __init__(self) -> None:
        self._items: List[str] = []

    def create_iterator(self) -> "ConcreteIterator":
        return ConcreteIterator(self)

    def append(self, item: str) -> None:
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]


class ConcreteIterator(ItemIterator):
    def __init__(self, aggregate: ConcreteAggregate) -> None:
        self._aggregate = aggregate
        self._current = 0

    def first(self) -> Optional[str]:
        self._current = 0
        return self.current_item()

    def next(self) -> Optional[str]:
        self._current += 1
        return self.current_item()

    def is_done(self) -> bool:
        return self._current >= len(self._aggregate)

    def current_item(self) -> Optional[str]:
        if self.is_done():
            return None
        return self._aggregate[self._current]


@example("iterator/aggregate-walk", Category.BEHAVIORAL, title="Aggregate walk")
def aggregate_walk(out: Transcript, entropy: EntropySource) -> None:
    """Walk a collection with an explicit cursor object."""
    aggregate = ConcreteAggregate()
    for item in ("Item A", "Item B", "Item C", "Item D", "Bob"):
        aggregate.append(item)

    iterator = aggregate.create_iterator()

    out.write("Iterating over collection:")
    item = iterator.first()
    while item is not None:
        out.write(item)
        item = iterator.next()


class ValueCollection:
    """Aggregate that hands out a fresh iterator every time it is iterated."""

    def __init__(self, values: List[str]) -> None:
        self._values = list(values)

    def __iter__(self) -> "ValueCollectionIterator":
        return ValueCollectionIterator(self._values)


class ValueCollectionIterator:
    """Iterator over a ValueCollection; exhausted after one pass."""

    def __init__(self, values: List[str]) -> None:
        self._values = values
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._index >= len(self._values):
            raise StopIteration
        value = self._values[self._index]
        self._index += 1
        return value


@example("iterator/iteration-protocol", Category.BEHAVIORAL, title="Iteration protocol")
def iteration_protocol(out: Transcript, entropy: EntropySource) -> None:
    """The same traversal expressed through Python's own iterator protocol."""
    collection = ValueCollection([str(n) for n in range(1, 10)] + ["Bob"])

    out.write("Walking the collection:")
    for value in collection:
        out.write(value)

    out.write()
    out.write("Walking it again with a fresh iterator:")
    out.write(", ".join(collection))

    iterator = iter(collection)
    next(iterator)
    out.write()
    out.write(f"Remaining after one step: {len(list(iterator))}")
    out.write(f"Exhausted iterator yields: {list(iterator)}")

"""
Bridge examples.

Decouple an abstraction from its implementation so that the two can vary
independently.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Implementors ---


class Implementor(ABC):
    def __init__(self, out: Transcript) -> None:
        self.out = out

    @abstractmethod
    def operation(self) -> None: ...


class ConcreteImplementorA(Implementor):
    def operation(self) -> None:
        self.out.write("ConcreteImplementorA Operation")


class ConcreteImplementorB(Implementor):
    def operation(self) -> None:
        self.out.write("ConcreteImplementorB Operation")


class Abstraction:
    def __init__(self) -> None:
        self.implementor: Optional[Implementor] = None

    def operation(self) -> None:
        if self.implementor is not None:
            self.implementor.operation()


class RefinedAbstraction(Abstraction):
    pass


@example("bridge/implementors", Category.STRUCTURAL, title="Implementors")
def implementors(out: Transcript, entropy: EntropySource) -> None:
    """One abstraction, switched between two implementations at run time."""
    ab = RefinedAbstraction()

    ab.implementor = ConcreteImplementorA(out)
    ab.operation()

    ab.implementor = ConcreteImplementorB(out)
    ab.operation()


# --- Customer data ---


class DataObject(ABC):
    """Implementor: cursor-style access to a list of records."""

    @abstractmethod
    def next_record(self) -> None: ...

    @abstractmethod
    def prior_record(self) -> None: ...

    @abstractmethod
    def add_record(self, name: str) -> None: ...

    @abstractmethod
    def delete_record(self, name: str) -> None: ...

    @abstractmethod
    def show_record(self) -> None: ...

    @abstractmethod
    def show_all_records(self) -> None: ...


class CustomerData(DataObject):
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._customers: List[str] = [
            "Jim Jones",
            "Samual Jackson",
            "Allen Good",
            "Ann Stills",
            "Lisa Giolani",
        ]
        self._current = 0

    def next_record(self) -> None:
        if self._current < len(self._customers) - 1:
            self._current += 1

    def prior_record(self) -> None:
        if self._current > 0:
            self._current -= 1

    def add_record(self, name: str) -> None:
        self._customers.append(name)

    def delete_record(self, name: str) -> None:
        self._customers.remove(name)

    def show_record(self) -> None:
        self.out.write(self._customers[self._current])

    def show_all_records(self) -> None:
        for customer in self._customers:
            self.out.write(f" {customer}")


class CustomersBase:
    """Abstraction: forwards every operation to its data object."""

    def __init__(self, out: Transcript, group: str, data: DataObject) -> None:
        self.out = out
        self.group = group
        self.data = data

    def next(self) -> None:
        self.data.next_record()

    def prior(self) -> None:
        self.data.prior_record()

    def add(self, name: str) -> None:
        self.data.add_record(name)

    def delete(self, name: str) -> None:
        self.data.delete_record(name)

    def show(self) -> None:
        self.data.show_record()

    def show_all(self) -> None:
        self.out.write(f"Customer Group: {self.group}")
        self.data.show_all_records()


class Customers(CustomersBase):
    """Refined abstraction framing the full listing."""

    def show_all(self) -> None:
        self.out.write()
        self.out.write("------------------------")
        super().show_all()
        self.out.write("------------------------")


@example("bridge/customer-data", Category.STRUCTURAL, title="Customer data")
def customer_data(out: Transcript, entropy: EntropySource) -> None:
    """A customer list whose storage is a swappable implementation object."""
    customers = Customers(out, "Chicago", CustomerData(out))

    customers.show()
    customers.next()
    customers.show()
    customers.next()
    customers.show()
    customers.add("Henry Velasquez")
    customers.add("Mikhail Jacques")
    customers.next()
    customers.show()
    customers.add("Tom Jerry")

    customers.show_all()

"""
Prototype examples.

Specify the kinds of objects to create using a prototypical instance, and
create new objects by copying this prototype.
"""

# pylint: disable=too-few-public-methods, unused-argument

import copy
from abc import ABC, abstractmethod
from typing import Dict

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Clone ids ---


class Prototype(ABC):
    def __init__(self, prototype_id: str) -> None:
        self.id = prototype_id

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return a copy of this object."""


class ConcretePrototype1(Prototype):
    def clone(self) -> "Prototype":
        return copy.copy(self)


class ConcretePrototype2(Prototype):
    def clone(self) -> "Prototype":
        return copy.copy(self)


@example("prototype/clone-ids", Category.CREATIONAL, title="Clone ids")
def clone_ids(out: Transcript, entropy: EntropySource) -> None:
    """New instances are made by cloning existing ones."""
    for prototype in (ConcretePrototype1("I"), ConcretePrototype2("II")):
        clone = prototype.clone()
        out.write(f"Cloned: {clone.id}")


# --- Employees ---


class Employee(ABC):
    def __init__(self, name: str, role: str) -> None:
        self.name = name
        self.role = role

    def clone(self) -> "Employee":
        return copy.copy(self)

    @abstractmethod
    def details(self) -> str: ...


class Developer(Employee):
    def __init__(self, name: str, language: str) -> None:
        super().__init__(name, "Software Engineer")
        self.language = language

    def details(self) -> str:
        return f"Name: {self.name}\nRole: {self.role}\nLanguage: {self.language}\n"


class Typist(Employee):
    def __init__(self, name: str, words_per_minute: int) -> None:
        super().__init__(name, "Typist")
        self.words_per_minute = words_per_minute

    def details(self) -> str:
        return f"Name: {self.name}\nRole: {self.role}\nWords per minute: {self.words_per_minute}\n"


@example("prototype/employees", Category.CREATIONAL, title="Employees")
def employees(out: Transcript, entropy: EntropySource) -> None:
    """Copy an employee record and change only what differs."""
    developer = Developer("Michael", "C#")
    developer_copy = developer.clone()
    developer_copy.name = "Bob"

    out.write(developer.details())
    out.write(developer_copy.details())

    typist = Typist("Tom", 150)
    typist_copy = typist.clone()
    typist_copy.name = "Jerry"
    typist_copy.words_per_minute = 110

    out.write(typist.details())
    out.write(typist_copy.details())


# --- Shallow and deep copies ---


class Language:
    """Second-level object, shared by shallow copies."""

    def __init__(self, data: str) -> None:
        self.data = data

    def __str__(self) -> str:
        return self.data


class Country:
    def __init__(self, name: str, capital: str, language: str) -> None:
        self.name = name
        self.capital = capital
        self.language = Language(language)

    def shallow_copy(self) -> "Country":
        return copy.copy(self)

    def deep_copy(self) -> "Country":
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"{self.name:<9}\t{self.capital:<8}\t->{self.language}"


class PrototypeManager:
    def __init__(self) -> None:
        self.prototypes: Dict[str, Country] = {
            "Italy": Country("Italy", "Rome", "Italian"),
            "Germany": Country("Germany", "Berlin", "German"),
            "Australia": Country("Australia", "Canberra", "English"),
        }


@example("prototype/shallow-deep", Category.CREATIONAL, title="Shallow and deep copies")
def shallow_deep(out: Transcript, entropy: EntropySource) -> None:
    """A shallow clone shares nested objects with its prototype; a deep clone does not."""
    rule = "=" * 57
    manager = PrototypeManager()

    def report(title: str, prototype: Country, clone: Country) -> None:
        out.write(f"\n{title}")
        out.write(f"Prototype\t{prototype}\nClone\t\t{clone}")

    out.write(f"List of available prototypes\n{rule}")
    for name in ("Italy", "Germany", "Australia"):
        out.write(f"Prototype\t{manager.prototypes[name]}")

    australia = manager.prototypes["Australia"]
    shallow = australia.shallow_copy()
    report(f"\nShallow cloning Australia\n{rule}", australia, shallow)

    shallow.capital = "Sydney"
    report("Altered Clone's shallow state, prototype unaffected", australia, shallow)

    shallow.language.data = "Chinese"
    report("Altering Clone's deep state, prototype affected", australia, shallow)

    germany = manager.prototypes["Germany"]
    deep = germany.deep_copy()
    report(f"\nDeep cloning Germany\n{rule}", germany, deep)

    deep.capital = "Munich"
    report("Altering Clone's shallow state, prototype unaffected", germany, deep)

    deep.language.data = "Turkish"
    report("Altering Clone's deep state, prototype unaffected", germany, deep)

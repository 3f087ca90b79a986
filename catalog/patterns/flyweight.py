"""
Flyweight examples.

Use sharing to support large numbers of fine-grained objects efficiently.
Intrinsic state lives in the shared flyweight; extrinsic state is passed in
by the client on every call.
"""

# pylint: disable=too-few-public-methods, unused-argument

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Type

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Characters ---


class Character(ABC):
    """Glyph with shared metrics; point size is supplied per display."""

    symbol = ""
    width = 0
    height = 100
    ascent = 0
    descent = 0

    def display(self, out: Transcript, point_size: int) -> None:
        out.write(f"{self.symbol} (point size {point_size})")


class CharacterA(Character):
    symbol, width, ascent = "A", 120, 70


class CharacterB(Character):
    symbol, width, ascent = "B", 140, 72


class CharacterZ(Character):
    symbol, width, ascent = "Z", 100, 68


class CharacterFactory:
    """Creates each glyph once; unknown symbols map to None."""

    _glyphs: Dict[str, Type[Character]] = {
        "A": CharacterA,
        "B": CharacterB,
        "Z": CharacterZ,
    }

    def __init__(self) -> None:
        self._characters: Dict[str, Optional[Character]] = {}

    def get_character(self, key: str) -> Optional[Character]:
        if key not in self._characters:
            glyph = self._glyphs.get(key)
            self._characters[key] = glyph() if glyph is not None else None
        return self._characters[key]

    @property
    def created(self) -> int:
        return sum(1 for character in self._characters.values() if character is not None)


@example("flyweight/characters", Category.STRUCTURAL, title="Characters")
def characters(out: Transcript, entropy: EntropySource) -> None:
    """A document reuses one object per distinct character."""
    factory = CharacterFactory()
    point_size = 10

    for key in "ADAZZBBZBR":
        character = factory.get_character(key)
        if character is not None:
            point_size += 1
            character.display(out, point_size)

    out.write(f"Character objects created: {factory.created}")


# --- Money drop ---


class MoneyType(Enum):
    METALLIC = "Metallic"
    PAPER = "Paper"


class Money:
    """Shared graphical object; the value is extrinsic."""

    def __init__(self, money_type: MoneyType) -> None:
        self.money_type = money_type

    def display_falling(self, out: Transcript, value: int) -> None:
        out.write(
            f"Displaying a graphical object of {self.money_type.value} currency "
            f"of value ${value} falling from sky."
        )


class MoneyFactory:
    def __init__(self) -> None:
        self._objects: Dict[MoneyType, Money] = {}
        self.objects_count = 0

    def get_money_to_display(self, money_type: MoneyType) -> Money:
        if money_type not in self._objects:
            self._objects[money_type] = Money(money_type)
            self.objects_count += 1
        return self._objects[money_type]


@example("flyweight/money-drop", Category.STRUCTURAL, title="Money drop")
def money_drop(out: Transcript, entropy: EntropySource) -> None:
    """Thousands of falling notes and coins drawn with two shared objects."""
    target = 10000
    denominations = [1, 5, 10, 20, 50, 100]
    factory = MoneyFactory()
    total = 0

    while total <= target:
        value = entropy.choice(denominations)
        money_type = MoneyType.METALLIC if value in (1, 5) else MoneyType.PAPER
        factory.get_money_to_display(money_type).display_falling(out, value)
        total += value

    out.write(f"Total number of objects created is: {factory.objects_count}")


# --- Coffee flavours ---


@dataclass(frozen=True)
class CoffeeFlavour:
    flavour: str


class FlavourFactory(ABC):
    @abstractmethod
    def get_flavour(self, flavour: str) -> CoffeeFlavour: ...

    @property
    @abstractmethod
    def cached(self) -> int:
        """Number of flavour objects held by the factory."""


class ReducedMemoryFootprint(FlavourFactory):
    """Check-then-lock cache; the lock guards insertion only."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache: Dict[str, CoffeeFlavour] = {}

    def get_flavour(self, flavour: str) -> CoffeeFlavour:
        cached = self._cache.get(flavour)
        if cached is not None:
            return cached
        with self._lock:
            if flavour not in self._cache:
                self._cache[flavour] = CoffeeFlavour(flavour)
            return self._cache[flavour]

    @property
    def cached(self) -> int:
        return len(self._cache)


class MinimumMemoryFootprint(FlavourFactory):
    """Cache built on dict.setdefault, atomic for a single key."""

    def __init__(self) -> None:
        self._cache: Dict[str, CoffeeFlavour] = {}

    def get_flavour(self, flavour: str) -> CoffeeFlavour:
        return self._cache.setdefault(flavour, CoffeeFlavour(flavour))

    @property
    def cached(self) -> int:
        return len(self._cache)


@example("flyweight/coffee-flavours", Category.STRUCTURAL, title="Coffee flavours")
def coffee_flavours(out: Transcript, entropy: EntropySource) -> None:
    """Coffee orders share flavour objects from two differently synchronised caches."""
    orders: List[str] = [
        "Cappuccino",
        "Frappe",
        "Espresso",
        "Cappuccino",
        "Frappe",
        "Cappuccino",
        "Xpresso",
        "Frappe",
    ]

    for factory in (ReducedMemoryFootprint(), MinimumMemoryFootprint()):
        served = [factory.get_flavour(order) for order in orders]
        shared = all(f is factory.get_flavour(f.flavour) for f in served)

        out.write(type(factory).__name__)
        out.write(f"  orders served: {len(served)}")
        out.write(f"  flavour objects: {factory.cached}")
        out.write(f"  orders share cached objects: {shared}")

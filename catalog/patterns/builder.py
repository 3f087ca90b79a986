"""
Builder example.

Separate the construction of a complex object from its representation so
that the same construction process can create different representations.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


class Pizza:
    def __init__(self) -> None:
        self.name = ""
        self.dough = ""
        self.sauce = ""
        self.topping = ""

    def describe(self) -> str:
        return (
            f"{self.name} pizza with {self.dough} dough, {self.sauce} sauce "
            f"and {self.topping} topping."
        )


class PizzaBuilder(ABC):
    """Builds one kind of pizza, step by step."""

    def __init__(self) -> None:
        self.pizza = Pizza()

    def create_new_pizza(self) -> None:
        self.pizza = Pizza()

    @abstractmethod
    def build_name(self) -> None: ...

    @abstractmethod
    def build_dough(self) -> None: ...

    @abstractmethod
    def build_sauce(self) -> None: ...

    @abstractmethod
    def build_topping(self) -> None: ...


class SpicyPizzaBuilder(PizzaBuilder):
    def build_name(self) -> None:
        self.pizza.name = "Spicy"

    def build_dough(self) -> None:
        self.pizza.dough = "pan baked"

    def build_sauce(self) -> None:
        self.pizza.sauce = "hot"

    def build_topping(self) -> None:
        self.pizza.topping = "pepperoni + salami"


class IsraeliPizzaBuilder(PizzaBuilder):
    def build_name(self) -> None:
        self.pizza.name = "Israeli"

    def build_dough(self) -> None:
        self.pizza.dough = "oven baked"

    def build_sauce(self) -> None:
        self.pizza.sauce = "tomato"

    def build_topping(self) -> None:
        self.pizza.topping = "olives + onion"


class HawaiianPizzaBuilder(PizzaBuilder):
    def build_name(self) -> None:
        self.pizza.name = "Hawaiian"

    def build_dough(self) -> None:
        self.pizza.dough = "cross"

    def build_sauce(self) -> None:
        self.pizza.sauce = "mild"

    def build_topping(self) -> None:
        self.pizza.topping = "ham + pineapple"


class Cook:
    """Director: runs the construction steps in a fixed order."""

    def __init__(self) -> None:
        self._builder: Optional[PizzaBuilder] = None

    def set_pizza_builder(self, builder: PizzaBuilder) -> None:
        self._builder = builder

    def construct_pizza(self) -> Pizza:
        if self._builder is None:
            raise RuntimeError("No pizza builder set")
        self._builder.create_new_pizza()
        self._builder.build_name()
        self._builder.build_dough()
        self._builder.build_sauce()
        self._builder.build_topping()
        return self._builder.pizza


@example("builder/pizza-cook", Category.CREATIONAL, title="Pizza cook")
def pizza_cook(out: Transcript, entropy: EntropySource) -> None:
    """A cook follows the same steps while each builder decides what goes on the pizza."""
    cook = Cook()
    for builder in (SpicyPizzaBuilder(), IsraeliPizzaBuilder(), HawaiianPizzaBuilder()):
        cook.set_pizza_builder(builder)
        pizza = cook.construct_pizza()
        out.write(f"{pizza.describe()}\n")

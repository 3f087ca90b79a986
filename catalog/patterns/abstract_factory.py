"""
Abstract Factory examples.

Provide an interface for creating families of related or dependent objects
without specifying their concrete classes.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Type

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Product families ---


class AbstractProductA(ABC):
    def __init__(self, out: Transcript) -> None:
        self.out = out

    @abstractmethod
    def interact(self, b: "AbstractProductB") -> None: ...


class AbstractProductB(ABC):
    def __init__(self, out: Transcript) -> None:
        self.out = out

    @abstractmethod
    def interact(self, a: AbstractProductA) -> None: ...


class _Product:
    def _interact(self, out: Transcript, other: object) -> None:
        out.write(f"{type(self).__name__} interacts with {type(other).__name__}")


class ProductA1(AbstractProductA, _Product):
    def interact(self, b: AbstractProductB) -> None:
        self._interact(self.out, b)


class ProductA2(AbstractProductA, _Product):
    def interact(self, b: AbstractProductB) -> None:
        self._interact(self.out, b)


class ProductB1(AbstractProductB, _Product):
    def interact(self, a: AbstractProductA) -> None:
        self._interact(self.out, a)


class ProductB2(AbstractProductB, _Product):
    def interact(self, a: AbstractProductA) -> None:
        self._interact(self.out, a)


class AbstractFactory(ABC):
    def __init__(self, out: Transcript) -> None:
        self.out = out

    @abstractmethod
    def create_product_a(self) -> AbstractProductA: ...

    @abstractmethod
    def create_product_b(self) -> AbstractProductB: ...


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ProductA1(self.out)

    def create_product_b(self) -> AbstractProductB:
        return ProductB1(self.out)


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ProductA2(self.out)

    def create_product_b(self) -> AbstractProductB:
        return ProductB2(self.out)


class Client:
    """Works with a product family through the abstract interfaces only."""

    def __init__(self, factory: AbstractFactory) -> None:
        self._product_a = factory.create_product_a()
        self._product_b = factory.create_product_b()

    def run(self) -> None:
        self._product_a.interact(self._product_b)
        self._product_b.interact(self._product_a)


@example(
    "abstract-factory/product-families",
    Category.CREATIONAL,
    title="Product families",
)
def product_families(out: Transcript, entropy: EntropySource) -> None:
    """Each factory builds a matching pair of products that work together."""
    for factory in (ConcreteFactory1(out), ConcreteFactory2(out)):
        Client(factory).run()


# --- Phone vendors ---


class Vendor(Enum):
    SAMSUNG = "SAMSUNG"
    HTC = "HTC"
    NOKIA = "NOKIA"
    APPLE = "APPLE"


class Phone:
    name = ""


class SmartPhone(Phone):
    pass


class DumbPhone(Phone):
    pass


class GalaxyS5(SmartPhone):
    name = "GalaxyS5"


class Primo(DumbPhone):
    name = "Primo"


class Titan(SmartPhone):
    name = "Titan"


class Genie(DumbPhone):
    name = "Genie"


class Lumia(SmartPhone):
    name = "Lumia"


class Asha(DumbPhone):
    name = "Asha"


class IPhone6(SmartPhone):
    name = "iPhone6"


class IPhone(DumbPhone):
    name = "iPhone"


class PhoneFactory(ABC):
    @abstractmethod
    def smart_phone(self) -> SmartPhone: ...

    @abstractmethod
    def dumb_phone(self) -> DumbPhone: ...


class SamsungFactory(PhoneFactory):
    def smart_phone(self) -> SmartPhone:
        return GalaxyS5()

    def dumb_phone(self) -> DumbPhone:
        return Primo()


class HTCFactory(PhoneFactory):
    def smart_phone(self) -> SmartPhone:
        return Titan()

    def dumb_phone(self) -> DumbPhone:
        return Genie()


class NokiaFactory(PhoneFactory):
    def smart_phone(self) -> SmartPhone:
        return Lumia()

    def dumb_phone(self) -> DumbPhone:
        return Asha()


class AppleFactory(PhoneFactory):
    def smart_phone(self) -> SmartPhone:
        return IPhone6()

    def dumb_phone(self) -> DumbPhone:
        return IPhone()


PHONE_FACTORIES: Dict[Vendor, Type[PhoneFactory]] = {
    Vendor.SAMSUNG: SamsungFactory,
    Vendor.HTC: HTCFactory,
    Vendor.NOKIA: NokiaFactory,
    Vendor.APPLE: AppleFactory,
}


class PhoneCatalog:
    def __init__(self, out: Transcript, vendor: Vendor) -> None:
        self.out = out
        self.vendor = vendor
        self._factory = PHONE_FACTORIES[vendor]()

    def check_products(self) -> None:
        self.out.write(
            f"{self.vendor.value}:\n"
            f"Smart Phone: {self._factory.smart_phone().name}\n"
            f"Dumb Phone: {self._factory.dumb_phone().name}\n"
        )


@example(
    "abstract-factory/phone-vendors",
    Category.CREATIONAL,
    title="Phone vendors",
)
def phone_vendors(out: Transcript, entropy: EntropySource) -> None:
    """Each manufacturer's factory supplies its own smart and basic phone models."""
    for vendor in Vendor:
        PhoneCatalog(out, vendor).check_products()

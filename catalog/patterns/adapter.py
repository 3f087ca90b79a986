"""
Adapter examples.

Convert the interface of a class into another interface clients expect.
Adapter lets classes work together that couldn't otherwise because of
incompatible interfaces.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import List

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Target request ---


class Target:
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def request(self) -> None:
        self.out.write("Called Target request()")


class Adaptee:
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def specific_request(self) -> None:
        self.out.write("Called specific_request()")


class Adapter(Target):
    """Object adapter: forwards request() to a wrapped Adaptee."""

    def __init__(self, out: Transcript) -> None:
        super().__init__(out)
        self._adaptee = Adaptee(out)

    def request(self) -> None:
        self._adaptee.specific_request()


@example("adapter/target-request", Category.STRUCTURAL, title="Target request")
def target_request(out: Transcript, entropy: EntropySource) -> None:
    """A client calls the interface it knows; the adapter translates the call."""
    target: Target = Adapter(out)
    target.request()


# --- Vendor products ---


class ProductSource(ABC):
    @abstractmethod
    def get_products(self) -> List[str]:
        """Return the product names to display."""


class VendorCatalog:
    """Third-party code with its own method name and return shape."""

    def get_list_of_products(self) -> List[str]:
        return [
            "Books",
            "Gadgets",
            "Widgets",
            "Television",
            "Gaming Consoles",
            "Musical Instruments",
            "Tools",
        ]


class VendorAdapter(ProductSource):
    def get_products(self) -> List[str]:
        return VendorCatalog().get_list_of_products()


@example("adapter/vendor-products", Category.STRUCTURAL, title="Vendor products")
def vendor_products(out: Transcript, entropy: EntropySource) -> None:
    """A shopping portal lists a vendor's products through an adapter."""
    source: ProductSource = VendorAdapter()
    for product in source.get_products():
        out.write(product)

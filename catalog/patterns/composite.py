"""
Composite examples.

Compose objects into tree structures to represent part-whole hierarchies.
Composite lets clients treat individual objects and compositions of objects
uniformly.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import List

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Tree ---


class Component(ABC):
    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name

    @abstractmethod
    def add(self, component: "Component") -> None: ...

    @abstractmethod
    def remove(self, component: "Component") -> None: ...

    @abstractmethod
    def display(self, depth: int) -> None: ...


class Composite(Component):
    def __init__(self, out: Transcript, name: str) -> None:
        super().__init__(out, name)
        self._children: List[Component] = []

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        self._children.remove(component)

    def display(self, depth: int) -> None:
        self.out.write("-" * depth + self.name)
        for child in self._children:
            child.display(depth + 2)


class Leaf(Component):
    def add(self, component: Component) -> None:
        self.out.write("Cannot add to a leaf")

    def remove(self, component: Component) -> None:
        self.out.write("Cannot remove from a leaf")

    def display(self, depth: int) -> None:
        self.out.write("-" * depth + self.name)


@example("composite/tree", Category.STRUCTURAL, title="Tree")
def tree(out: Transcript, entropy: EntropySource) -> None:
    """Leaves and branches share one interface, so the tree displays recursively."""
    root = Composite(out, "root")
    root.add(Leaf(out, "Leaf A"))
    root.add(Leaf(out, "Leaf B"))

    comp1 = Composite(out, "Composite X")
    comp1.add(Leaf(out, "Leaf XA"))
    comp1.add(Leaf(out, "Leaf XB"))
    root.add(comp1)

    comp2 = Composite(out, "Composite Y")
    comp2.add(Leaf(out, "Leaf YA"))
    comp2.add(Leaf(out, "Leaf YB"))
    root.add(comp2)

    comp3 = Composite(out, "Composite Z")
    comp3.add(Leaf(out, "Leaf ZA"))
    comp3.add(Leaf(out, "Leaf ZB"))
    comp2.add(comp3)

    root.add(Leaf(out, "Leaf C"))

    leaf = Leaf(out, "Leaf D")
    root.add(leaf)
    root.remove(leaf)

    root.display(1)


# --- Drawing ---


class DrawingElement(ABC):
    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name

    def add(self, element: "DrawingElement") -> None:
        self.out.write(f"Cannot add to a {type(self).__name__}")

    def remove(self, element: "DrawingElement") -> None:
        self.out.write(f"Cannot remove from a {type(self).__name__}")

    @abstractmethod
    def display(self, indent: int) -> None: ...


class PrimitiveElement(DrawingElement):
    def display(self, indent: int) -> None:
        self.out.write("-" * indent + " " + self.name)


class CompositeElement(DrawingElement):
    def __init__(self, out: Transcript, name: str) -> None:
        super().__init__(out, name)
        self._elements: List[DrawingElement] = []

    def add(self, element: DrawingElement) -> None:
        self._elements.append(element)

    def remove(self, element: DrawingElement) -> None:
        self._elements.remove(element)

    def display(self, indent: int) -> None:
        self.out.write("-" * indent + "+ " + self.name)
        for element in self._elements:
            element.display(indent + 2)


@example("composite/drawing", Category.STRUCTURAL, title="Drawing")
def drawing(out: Transcript, entropy: EntropySource) -> None:
    """A picture made of primitive shapes and nested groups of shapes."""
    root = CompositeElement(out, "Picture")
    root.add(PrimitiveElement(out, "Red Line"))
    root.add(PrimitiveElement(out, "Blue Circle"))
    root.add(PrimitiveElement(out, "Green Box"))

    comp1 = CompositeElement(out, "Two Circles")
    comp1.add(PrimitiveElement(out, "Black Circle"))
    comp1.add(PrimitiveElement(out, "White Circle"))
    root.add(comp1)

    comp2 = CompositeElement(out, "Two Squares")
    comp2.add(PrimitiveElement(out, "Red Square"))
    comp2.add(PrimitiveElement(out, "Blue Square"))
    root.add(comp2)

    root.add(PrimitiveElement(out, "Green Line"))

    yellow = PrimitiveElement(out, "Yellow Line")
    root.add(yellow)
    root.remove(yellow)

    root.display(1)

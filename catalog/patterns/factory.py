"""
Factory Method examples.

Define an interface for creating an object, but let subclasses decide which
class to instantiate.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import List

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Creators ---


class Product(ABC):
    pass


class ConcreteProductA(Product):
    pass


class ConcreteProductB(Product):
    pass


class Creator(ABC):
    @abstractmethod
    def factory_method(self) -> Product:
        """Create the product this creator is responsible for."""


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


@example("factory/creators", Category.CREATIONAL, title="Creators")
def creators(out: Transcript, entropy: EntropySource) -> None:
    """Each creator subclass decides which product to instantiate."""
    for creator in (ConcreteCreatorA(), ConcreteCreatorB()):
        product = creator.factory_method()
        out.write(f"Created {type(product).__name__}")


# --- Documents ---


class Page:
    pass


class SkillsPage(Page):
    pass


class EducationPage(Page):
    pass


class ExperiencePage(Page):
    pass


class IntroductionPage(Page):
    pass


class ResultsPage(Page):
    pass


class ConclusionPage(Page):
    pass


class SummaryPage(Page):
    pass


class BibliographyPage(Page):
    pass


class Document(ABC):
    """Creator whose constructor calls the factory method."""

    def __init__(self) -> None:
        self.pages: List[Page] = []
        self.create_pages()

    @abstractmethod
    def create_pages(self) -> None:
        """Fill in the pages for this kind of document."""


class Resume(Document):
    def create_pages(self) -> None:
        self.pages.extend([SkillsPage(), EducationPage(), ExperiencePage()])


class Report(Document):
    def create_pages(self) -> None:
        self.pages.extend(
            [
                IntroductionPage(),
                ResultsPage(),
                ConclusionPage(),
                SummaryPage(),
                BibliographyPage(),
            ]
        )


@example("factory/documents", Category.CREATIONAL, title="Documents")
def documents(out: Transcript, entropy: EntropySource) -> None:
    """Documents build their own pages through an overridable factory method."""
    for document in (Resume(), Report()):
        out.write(f"\n{type(document).__name__}--")
        for page in document.pages:
            out.write(f" {type(page).__name__}")

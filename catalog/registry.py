"""
Example registry.

This module provides an ordered, read-only-after-startup registry of
examples, and the loader that builds the default catalog registry once per
process.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from catalog.errors import DuplicateIdError, NotFoundError, RegistryFrozenError
from catalog.example import Category, Example, declared_examples
from catalog.observability.logging import get_logger

_logger = get_logger("registry")


class ExampleView:
    """Lazy, restartable view over registry entries.

    Every iteration walks the entries again in registration order, applying
    the optional category filter.
    """

    def __init__(self, entries: Dict[str, Example], category: Optional[Category]) -> None:
        self._entries = entries
        self._category = category

    def __iter__(self) -> Iterator[Example]:
        for entry in self._entries.values():
            if self._category is None or entry.category is self._category:
                yield entry

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def ids(self) -> List[str]:
        """Ids in the view, in order."""
        return [entry.id for entry in self]


class ExampleRegistry:
    """Registry for examples, keyed by id.

    Usage:
        registry = ExampleRegistry()
        registry.register(some_example)
        registry.freeze()

        for entry in registry.list(Category.STRUCTURAL):
            ...
    """

    def __init__(self) -> None:
        """Initialize an empty, writable registry."""
        self._entries: Dict[str, Example] = {}
        self._frozen = False

    @classmethod
    def from_examples(cls, examples: Iterable[Example]) -> "ExampleRegistry":
        """Build a frozen registry from examples, in order.

        Raises:
            DuplicateIdError: If two examples share an id
        """
        registry = cls()
        for entry in examples:
            registry.register(entry)
        registry.freeze()
        return registry

    def register(self, entry: Example) -> None:
        """Register an example.

        Args:
            entry: The example to add

        Raises:
            DuplicateIdError: If the id is already registered
            RegistryFrozenError: If the registry has been frozen
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{entry.id}': registry is frozen")
        if entry.id in self._entries:
            raise DuplicateIdError(entry.id)
        self._entries[entry.id] = entry
        _logger.debug("Registered example", example_id=entry.id, category=entry.category.value)

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """Check if the registry is read-only."""
        return self._frozen

    def get(self, example_id: str) -> Example:
        """Get an example by id.

        Raises:
            NotFoundError: If no example has this id
        """
        try:
            return self._entries[example_id]
        except KeyError:
            raise NotFoundError(example_id) from None

    def list(self, category: Optional[Category] = None) -> ExampleView:
        """Get the examples in registration order.

        Args:
            category: Only include examples of this family

        Returns:
            A restartable view of the matching examples
        """
        return ExampleView(self._entries, category)

    def ids(self) -> List[str]:
        """Get all registered ids in registration order."""
        return list(self._entries.keys())

    def categories(self) -> List[Category]:
        """Get the categories present, in first-seen order."""
        seen: List[Category] = []
        for entry in self._entries.values():
            if entry.category not in seen:
                seen.append(entry.category)
        return seen

    def __contains__(self, example_id: object) -> bool:
        return example_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"ExampleRegistry(examples={len(self._entries)}, {state})"


_default_registry: Optional[ExampleRegistry] = None


def load_catalog() -> ExampleRegistry:
    """Build a frozen registry holding every pattern example in the catalog.

    Importing catalog.patterns declares the examples; the registry is then
    built from the declarations in order.
    """
    # pylint: disable=import-outside-toplevel, unused-import
    import catalog.patterns  # noqa: F401

    registry = ExampleRegistry.from_examples(declared_examples())
    _logger.info(
        "Catalog loaded",
        extra={"examples": len(registry), "categories": [c.value for c in registry.categories()]},
    )
    return registry


def default_registry() -> ExampleRegistry:
    """Get the process-wide catalog registry, building it on first use."""
    global _default_registry  # pylint: disable=global-statement
    if _default_registry is None:
        _default_registry = load_catalog()
    return _default_registry

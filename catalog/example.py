"""
Example declaration.

This module provides the Example unit the runner executes, the Transcript
each run writes its output lines into, and a decorator for declaring
example bodies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from catalog.entropy import DEFAULT_SEED, EntropySource


class Category(Enum):
    """Pattern families of the classical GoF taxonomy."""

    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Resolve a category from its value or name (case-insensitive).

        Raises:
            ValueError: If the value names no category
        """
        if isinstance(value, Category):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown category '{value}' (expected one of: {names})") from None


class Transcript:
    """Ordered output lines captured from a single example run."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def write(self, text: str = "") -> None:
        """Append text, one line per newline-separated segment.

        Args:
            text: Text to append; an empty string appends a blank line
        """
        self._lines.extend(str(text).split("\n"))

    @property
    def lines(self) -> Tuple[str, ...]:
        """The lines written so far."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


ExampleBody = Callable[[Transcript, EntropySource], None]


@dataclass(frozen=True)
class Example:
    """A single runnable demonstration.

    Attributes:
        id: Stable identifier, unique across a registry
        category: Pattern family the example belongs to
        body: Callable that writes the demonstration into a transcript
        title: Short human-readable title
        description: Longer description of what the example shows
    """

    id: str
    category: Category
    body: ExampleBody
    title: str = ""
    description: str = ""

    @property
    def pattern(self) -> str:
        """Pattern part of the id (text before the first '/')."""
        return self.id.split("/", 1)[0]

    def run(
        self,
        entropy: Optional[EntropySource] = None,
        transcript: Optional[Transcript] = None,
    ) -> Tuple[str, ...]:
        """Execute the example and return its output lines.

        Args:
            entropy: Source of randomness; defaults to one seeded with DEFAULT_SEED
            transcript: Transcript to write into; lines written before an
                exception stay readable on it

        Returns:
            The captured output lines
        """
        if transcript is None:
            transcript = Transcript()
        self.body(transcript, entropy or EntropySource(DEFAULT_SEED))
        return transcript.lines


# Examples declared with @example, in declaration order
_DECLARED_EXAMPLES: List[Example] = []


def example(
    example_id: str,
    category: Category,
    title: str = "",
    description: str = "",
) -> Callable[[ExampleBody], ExampleBody]:
    """Decorator to declare a function as a catalog example.

    Usage:
        @example("strategy/algorithms", Category.BEHAVIORAL, title="Strategies")
        def algorithms(out: Transcript, entropy: EntropySource) -> None:
            ...

    Args:
        example_id: Stable example identifier
        category: Pattern family
        title: Short title (defaults to the function name)
        description: Description (defaults to the function docstring)

    Returns:
        Decorator function
    """

    def decorator(func: ExampleBody) -> ExampleBody:
        doc = (func.__doc__ or "").strip()
        _DECLARED_EXAMPLES.append(
            Example(
                id=example_id,
                category=category,
                body=func,
                title=title or func.__name__.replace("_", " "),
                description=description or doc,
            )
        )

        # Return the original function (not wrapped)
        return func

    return decorator


def declared_examples() -> List[Example]:
    """Get every example declared so far, in declaration order."""
    return list(_DECLARED_EXAMPLES)

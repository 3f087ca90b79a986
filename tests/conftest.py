"""
Shared pytest fixtures for the catalog tests.

This module provides:
- Small hand-built registries with known output
- An isolated hook registry per test
- Helpers for building examples from plain line lists
"""

import threading
from typing import Callable, Iterable, List

import pytest

from catalog.entropy import EntropySource
from catalog.example import Category, Example, Transcript
from catalog.observability.hooks import EventData, EventHookRegistry
from catalog.patterns.chain_of_responsibility import (
    DaycareTeacher,
    Request,
    ResponsibilityLevel,
)
from catalog.registry import ExampleRegistry


def printing(*lines: str) -> Callable[[Transcript, EntropySource], None]:
    """Build an example body that writes the given lines."""

    def body(out: Transcript, entropy: EntropySource) -> None:
        for line in lines:
            out.write(line)

    return body


def make_example(
    example_id: str,
    body: Callable[[Transcript, EntropySource], None],
    category: Category = Category.BEHAVIORAL,
) -> Example:
    return Example(id=example_id, category=category, body=body, title=example_id)


def build_registry(examples: Iterable[Example]) -> ExampleRegistry:
    return ExampleRegistry.from_examples(examples)


def _teacher_without_boss(out: Transcript, entropy: EntropySource) -> None:
    teacher = DaycareTeacher(out, "Tom")
    teacher.process_request(Request(ResponsibilityLevel.HIGH, "Field trip"))


def _random_numbers(out: Transcript, entropy: EntropySource) -> None:
    for _ in range(5):
        out.write(str(entropy.randint(1, 1000)))


@pytest.fixture
def abc_registry() -> ExampleRegistry:
    """Registry with a -> ["hello"], b -> ["x", "y"], c -> []."""
    return build_registry(
        [
            make_example("a", printing("hello")),
            make_example("b", printing("x", "y"), Category.CREATIONAL),
            make_example("c", printing(), Category.STRUCTURAL),
        ]
    )


@pytest.fixture
def failing_registry() -> ExampleRegistry:
    """Registry whose middle example raises MissingSuccessorError."""
    return build_registry(
        [
            make_example("first", printing("one")),
            make_example("daycare/no-boss", _teacher_without_boss),
            make_example("last", printing("three")),
        ]
    )


@pytest.fixture
def random_registry() -> ExampleRegistry:
    """Registry of examples whose output depends on the entropy source."""
    return build_registry(
        [make_example(f"random/{n}", _random_numbers) for n in range(6)]
    )


@pytest.fixture
def hooks() -> EventHookRegistry:
    """Isolated hook registry."""
    return EventHookRegistry()


@pytest.fixture
def recorded_events(hooks: EventHookRegistry) -> List[EventData]:
    """Every event triggered on the hooks fixture, in order."""
    events: List[EventData] = []
    lock = threading.Lock()

    def record(data: EventData) -> None:
        with lock:
            events.append(data)

    hooks.on_all(record)
    return events

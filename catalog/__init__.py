"""
Catalog of design pattern examples.

This package provides a registry of runnable pattern demonstrations, a
runner that executes them in isolation and compares their output against
fixtures, and reporters for the results.
"""

from catalog.config import RunnerConfig
from catalog.entropy import EntropySource
from catalog.errors import (
    CatalogError,
    DuplicateIdError,
    ExampleExecutionError,
    ExampleTimeoutError,
    FixtureFormatError,
    NotFoundError,
    RegistryFrozenError,
)
from catalog.example import Category, Example, Transcript, example
from catalog.fixtures import dump_fixtures, load_fixtures
from catalog.observability import (
    CatalogLogger,
    EventHookRegistry,
    RunEvent,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from catalog.registry import ExampleRegistry, default_registry, load_catalog
from catalog.results import RunResult, RunStatus
from catalog.runner import Runner

__all__ = [
    # Core components
    "Category",
    "EntropySource",
    "Example",
    "ExampleRegistry",
    "Runner",
    "RunnerConfig",
    "RunResult",
    "RunStatus",
    "Transcript",
    "default_registry",
    "dump_fixtures",
    "example",
    "load_catalog",
    "load_fixtures",
    # Errors
    "CatalogError",
    "DuplicateIdError",
    "ExampleExecutionError",
    "ExampleTimeoutError",
    "FixtureFormatError",
    "NotFoundError",
    "RegistryFrozenError",
    # Observability
    "CatalogLogger",
    "EventHookRegistry",
    "RunEvent",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]

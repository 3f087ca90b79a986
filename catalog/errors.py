"""
Exception types for the pattern catalog.

Registry construction failures are fatal; everything raised while an example
runs is caught at the runner boundary and turned into a result.
"""

import traceback
from typing import Optional, Sequence, Tuple


class CatalogError(Exception):
    """Base class for catalog errors."""


class DuplicateIdError(CatalogError, ValueError):
    """Raised when an example id is registered twice."""

    def __init__(self, example_id: str) -> None:
        super().__init__(f"Example '{example_id}' is already registered")
        self.example_id = example_id


class NotFoundError(CatalogError, KeyError):
    """Raised when an example id is not in the registry."""

    def __init__(self, example_id: str) -> None:
        super().__init__(example_id)
        self.example_id = example_id

    def __str__(self) -> str:
        return f"Example '{self.example_id}' not found"


class RegistryFrozenError(CatalogError, RuntimeError):
    """Raised when registering into a registry that has been frozen."""


class ExampleExecutionError(CatalogError):
    """Wraps an exception raised from inside an example body.

    Attributes:
        example_id: Id of the example that failed
        detail: Formatted traceback of the original exception
        partial_output: Lines the example wrote before raising
    """

    def __init__(
        self,
        example_id: str,
        cause: BaseException,
        partial_output: Sequence[str] = (),
    ) -> None:
        super().__init__(f"Example '{example_id}' raised {type(cause).__name__}: {cause}")
        self.example_id = example_id
        self.__cause__ = cause
        self.detail = "".join(
            traceback.format_exception(type(cause), cause, cause.__traceback__)
        )
        self.partial_output: Tuple[str, ...] = tuple(partial_output)


class ExampleTimeoutError(CatalogError, TimeoutError):
    """Raised when an example exceeds its wall-clock budget."""

    def __init__(
        self,
        example_id: str,
        timeout_seconds: Optional[float],
        partial_output: Sequence[str] = (),
    ) -> None:
        super().__init__(
            f"Example '{example_id}' exceeded its time budget of {timeout_seconds}s"
        )
        self.example_id = example_id
        self.timeout_seconds = timeout_seconds
        self.partial_output: Tuple[str, ...] = tuple(partial_output)


class FixtureFormatError(CatalogError, ValueError):
    """Raised when a fixture file is not a mapping of id -> list of lines."""

"""
Run results.

This module contains the immutable records the runner produces for every
example it touches and hands to reporters.
"""

import difflib
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class RunStatus(Enum):
    """Outcome of running one example."""

    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RunResult:
    """Finalized outcome of a single example invocation.

    Attributes:
        example_id: Id that was requested
        status: Outcome of the run
        captured_output: Lines the example produced; for ERRORED, those written before it failed
        expected_output: Fixture lines it was compared against, if any
        error_detail: Traceback or message; set for ERRORED and NOT_FOUND
        duration_ms: Wall-clock time spent running the example
        seed: Seed of the entropy source handed to the example
    """

    example_id: str
    status: RunStatus
    captured_output: Tuple[str, ...] = ()
    expected_output: Optional[Tuple[str, ...]] = None
    error_detail: Optional[str] = None
    duration_ms: float = 0.0
    seed: Optional[int] = None

    @property
    def ok(self) -> bool:
        """True when the example passed."""
        return self.status is RunStatus.PASSED

    @property
    def missing_fixture(self) -> bool:
        """True when comparison was requested but no fixture entry existed."""
        return self.status is RunStatus.FAILED and self.expected_output is None

    def diff(self, context: int = 2) -> List[str]:
        """Unified diff between the expected and captured output.

        Returns:
            Diff lines, empty if there is nothing to compare
        """
        if self.expected_output is None:
            return []
        return list(
            difflib.unified_diff(
                list(self.expected_output),
                list(self.captured_output),
                fromfile=f"{self.example_id} (expected)",
                tofile=f"{self.example_id} (captured)",
                n=context,
                lineterm="",
            )
        )

    def to_dict(self) -> Dict[str, object]:
        """Convert the result to a JSON-friendly dictionary."""
        return {
            "example_id": self.example_id,
            "status": self.status.value,
            "captured_output": list(self.captured_output),
            "expected_output": (
                list(self.expected_output) if self.expected_output is not None else None
            ),
            "error_detail": self.error_detail,
            "duration_ms": round(self.duration_ms, 2),
            "seed": self.seed,
        }


def summarize(results: Iterable[RunResult]) -> Dict[str, int]:
    """Count results by status.

    Returns:
        Dictionary of status value -> count, including a "total" key
    """
    counts = {status.value: 0 for status in RunStatus}
    total = 0
    for result in results:
        counts[result.status.value] += 1
        total += 1
    counts["total"] = total
    return counts

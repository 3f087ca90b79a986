"""
Reporters for run results.

Reporters only ever see finalized RunResults; they have no access to the
registry or to live examples.
"""

import json
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Sequence

import click

from catalog.results import RunResult, RunStatus, summarize

Writer = Callable[[str], None]

_LABELS = {
    RunStatus.PASSED: ("PASS", "green"),
    RunStatus.FAILED: ("FAIL", "red"),
    RunStatus.ERRORED: ("ERROR", "red"),
    RunStatus.NOT_FOUND: ("MISSING", "yellow"),
}

# Exit codes shared by the CLI commands
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERRORED = 2
EXIT_NOT_FOUND = 3


class Reporter(ABC):
    """Abstract base class for result reporters."""

    # pylint: disable=too-few-public-methods

    def __init__(self, write: Writer = click.echo) -> None:
        """Initialize the reporter.

        Args:
            write: Callable that emits one line of report output
        """
        self._write = write

    @abstractmethod
    def report(self, results: Sequence[RunResult]) -> None:
        """Render the results.

        Args:
            results: Finalized results, in registration order
        """


class TextReporter(Reporter):
    """Pass/fail list followed by a one-line summary."""

    def __init__(
        self,
        write: Writer = click.echo,
        show_diff: bool = True,
        show_output: bool = False,
        color: bool = False,
        max_error_lines: int = 6,
    ) -> None:
        """Initialize the reporter.

        Args:
            write: Callable that emits one line of report output
            show_diff: Print a unified diff for failed results
            show_output: Print the captured output of every result
            color: Style status labels with ANSI colors
            max_error_lines: Trailing traceback lines shown for errors
        """
        super().__init__(write)
        self._show_diff = show_diff
        self._show_output = show_output
        self._color = color
        self._max_error_lines = max_error_lines

    def _label(self, status: RunStatus) -> str:
        text, color = _LABELS[status]
        label = f"{text:<7}"
        return click.style(label, fg=color, bold=True) if self._color else label

    def report(self, results: Sequence[RunResult]) -> None:
        for result in results:
            line = f"{self._label(result.status)} {result.example_id}"
            if result.status is not RunStatus.NOT_FOUND:
                line += f" ({result.duration_ms:.1f} ms)"
            if result.missing_fixture:
                line += " - no fixture entry"
            self._write(line)

            if self._show_output:
                for output_line in result.captured_output:
                    self._write(f"    | {output_line}")

            if result.status is RunStatus.FAILED and self._show_diff:
                for diff_line in result.diff():
                    self._write(f"    {diff_line}")

            if result.error_detail and result.status is RunStatus.ERRORED:
                tail = result.error_detail.rstrip().splitlines()[-self._max_error_lines :]
                for detail_line in tail:
                    self._write(f"    {detail_line}")

        self._write(format_summary(results))


class JsonReporter(Reporter):
    """Single JSON document with every result and the status counts."""

    def __init__(self, write: Writer = click.echo, indent: int = 2) -> None:
        super().__init__(write)
        self._indent = indent

    def report(self, results: Sequence[RunResult]) -> None:
        document = {
            "summary": summarize(results),
            "results": [result.to_dict() for result in results],
        }
        self._write(json.dumps(document, indent=self._indent))


def format_summary(results: Iterable[RunResult]) -> str:
    """One-line summary of a batch."""
    counts = summarize(results)
    parts: List[str] = [
        f"{counts['passed']} passed",
        f"{counts['failed']} failed",
        f"{counts['errored']} errored",
    ]
    if counts["not_found"]:
        parts.append(f"{counts['not_found']} not found")
    return f"{counts['total']} examples: " + ", ".join(parts)


def exit_code_for(results: Iterable[RunResult]) -> int:
    """Process exit code for a set of results.

    Returns:
        3 if any id was not found, else 2 if any errored, else 1 if any
        failed, else 0
    """
    statuses = {result.status for result in results}
    if RunStatus.NOT_FOUND in statuses:
        return EXIT_NOT_FOUND
    if RunStatus.ERRORED in statuses:
        return EXIT_ERRORED
    if RunStatus.FAILED in statuses:
        return EXIT_FAILED
    return EXIT_OK

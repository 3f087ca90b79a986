"""
Runner for executing catalog examples.

This module provides a Runner that executes one or all registered examples,
captures their output, compares it against optional fixtures, and turns
every example failure into a result instead of an exception.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import concurrent.futures
import threading
import time
import uuid
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from catalog.config import RunnerConfig
from catalog.entropy import EntropySource
from catalog.errors import ExampleExecutionError, ExampleTimeoutError, NotFoundError
from catalog.example import Category, Example, Transcript
from catalog.observability.hooks import (
    EventHookRegistry,
    RunEvent,
    default_hook_registry,
)
from catalog.observability.logging import CatalogLogger, get_logger
from catalog.registry import ExampleRegistry
from catalog.results import RunResult, RunStatus, summarize

Fixtures = Mapping[str, Sequence[str]]


class Runner:
    """Executes examples from a registry and reports one result per example.

    The runner is the isolation boundary: nothing an example raises escapes
    run_one or run_all.

    Usage:
        runner = Runner(load_catalog(), RunnerConfig(seed=7))

        result = runner.run_one("strategy/algorithms")
        results = runner.run_all(fixtures=load_fixtures("fixtures.yaml"))
    """

    def __init__(
        self,
        registry: ExampleRegistry,
        config: Optional[RunnerConfig] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Registry to pull examples from
            config: Runner settings (defaults to RunnerConfig())
            hook_registry: Event hook registry for observability
            session_id: Session identifier for logging/tracing
        """
        self._registry = registry
        self._config = config or RunnerConfig()
        self._hooks = hook_registry or default_hook_registry
        self.session_id = session_id or str(uuid.uuid4())
        self._cancel_event = threading.Event()

        self._logger: CatalogLogger = get_logger(
            name="runner",
            session_id=self.session_id,
        )

    @property
    def config(self) -> RunnerConfig:
        """Get the runner configuration."""
        return self._config

    def cancel(self) -> None:
        """Ask a running run_all to stop after the example in progress."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._cancel_event.is_set()

    def run_one(
        self,
        example_id: str,
        seed: Optional[int] = None,
        expected: Optional[Sequence[str]] = None,
        fixtures: Optional[Fixtures] = None,
    ) -> RunResult:
        """Run a single example.

        Args:
            example_id: Id of the example to run
            seed: Entropy seed (defaults to the configured seed)
            expected: Lines the output must equal for the run to pass
            fixtures: Fixture map to take the expected lines from; when
                given, an id with no entry fails

        Returns:
            The result; NOT_FOUND for unknown ids
        """
        seed = self._config.seed if seed is None else seed

        try:
            entry = self._registry.get(example_id)
        except NotFoundError as e:
            self._hooks.trigger(
                RunEvent.EXAMPLE_NOT_FOUND,
                example_id=example_id,
                session_id=self.session_id,
            )
            self._logger.warning(str(e), example_id=example_id)
            return RunResult(
                example_id=example_id,
                status=RunStatus.NOT_FOUND,
                error_detail=str(e),
                seed=seed,
            )

        compare = expected is not None or fixtures is not None
        if expected is None and fixtures is not None:
            expected = fixtures.get(example_id)

        return self._execute(entry, seed, expected, compare)

    def run_all(
        self,
        seed: Optional[int] = None,
        fixtures: Optional[Fixtures] = None,
        category: Optional[Category] = None,
    ) -> List[RunResult]:
        """Run every registered example in registration order.

        With max_workers > 1 the examples run on a thread pool; results are
        still returned in registration order. A call to cancel() stops the
        batch after the example in progress and returns what completed.

        Args:
            seed: Entropy seed for every example (defaults to the configured seed)
            fixtures: Expected output per example id; when given, examples
                pass only if their output matches their entry exactly
            category: Only run examples of this family

        Returns:
            One result per executed example, in registration order
        """
        seed = self._config.seed if seed is None else seed
        entries = list(self._registry.list(category))
        workers = self._config.max_workers
        pattern = "parallel" if workers > 1 and len(entries) > 1 else "sequential"
        start_time = time.perf_counter()

        self._cancel_event.clear()

        if fixtures is not None:
            unknown = sorted(set(fixtures) - set(self._registry.ids()))
            if unknown:
                self._logger.warning(
                    "Fixture entries without a registered example are ignored",
                    extra={"ids": unknown},
                )

        self._hooks.trigger(
            RunEvent.RUN_START,
            session_id=self.session_id,
            examples=len(entries),
            mode=pattern,
            seed=seed,
        )
        self._logger.info(
            f"Starting {pattern} run",
            extra={"examples": len(entries), "seed": seed, "workers": workers},
        )

        if pattern == "parallel":
            results = self._run_parallel(entries, seed, fixtures, workers)
        else:
            results = self._run_sequential(entries, seed, fixtures)

        duration_ms = (time.perf_counter() - start_time) * 1000
        counts = summarize(results)

        if self.cancelled and len(results) < len(entries):
            self._hooks.trigger(
                RunEvent.RUN_CANCELLED,
                session_id=self.session_id,
                duration_ms=duration_ms,
                completed=len(results),
                skipped=len(entries) - len(results),
            )
            self._logger.warning(
                "Run cancelled",
                duration_ms=duration_ms,
                extra={"completed": len(results), "skipped": len(entries) - len(results)},
            )

        self._hooks.trigger(
            RunEvent.RUN_END,
            session_id=self.session_id,
            duration_ms=duration_ms,
            counts=counts,
        )
        self._logger.info(f"Completed {pattern} run", duration_ms=duration_ms, extra=counts)

        return results

    def _run_sequential(
        self,
        entries: List[Example],
        seed: int,
        fixtures: Optional[Fixtures],
    ) -> List[RunResult]:
        results: List[RunResult] = []
        for entry in entries:
            results.append(self._execute_from_fixtures(entry, seed, fixtures))
            if self._cancel_event.is_set():
                break
        return results

    def _run_parallel(
        self,
        entries: List[Example],
        seed: int,
        fixtures: Optional[Fixtures],
        workers: int,
    ) -> List[RunResult]:
        completed: Dict[int, RunResult] = {}

        with concurrent.futures.ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="catalog-runner"
        ) as executor:
            futures = {
                executor.submit(self._execute_from_fixtures, entry, seed, fixtures): index
                for index, entry in enumerate(entries)
            }

            for future in concurrent.futures.as_completed(futures):
                completed[futures[future]] = future.result()
                if self._cancel_event.is_set():
                    for pending in futures:
                        pending.cancel()
                    break

        # Pick up examples that finished while the pool was draining
        for future, index in futures.items():
            if index not in completed and future.done() and not future.cancelled():
                completed[index] = future.result()

        return [completed[index] for index in sorted(completed)]

    def _execute_from_fixtures(
        self,
        entry: Example,
        seed: int,
        fixtures: Optional[Fixtures],
    ) -> RunResult:
        if fixtures is None:
            return self._execute(entry, seed, None, compare=False)
        return self._execute(entry, seed, fixtures.get(entry.id), compare=True)

    def _execute(
        self,
        entry: Example,
        seed: int,
        expected: Optional[Sequence[str]],
        compare: bool,
    ) -> RunResult:
        """Run one example and build its result."""
        logger = self._logger.with_context(example_id=entry.id)
        expected_lines = tuple(expected) if expected is not None else None

        self._hooks.trigger(
            RunEvent.EXAMPLE_START,
            example_id=entry.id,
            session_id=self.session_id,
            category=entry.category.value,
            seed=seed,
        )
        logger.debug("Running example", category=entry.category.value)

        start_time = time.perf_counter()
        try:
            captured = self._invoke(entry, seed)
        except (ExampleExecutionError, ExampleTimeoutError) as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            detail = e.detail if isinstance(e, ExampleExecutionError) else str(e)

            self._hooks.trigger(
                RunEvent.EXAMPLE_ERROR,
                example_id=entry.id,
                session_id=self.session_id,
                error=e,
                duration_ms=duration_ms,
            )
            logger.error(str(e), duration_ms=duration_ms)

            return RunResult(
                example_id=entry.id,
                status=RunStatus.ERRORED,
                captured_output=e.partial_output,
                expected_output=expected_lines,
                error_detail=detail,
                duration_ms=duration_ms,
                seed=seed,
            )

        duration_ms = (time.perf_counter() - start_time) * 1000

        if compare and captured != expected_lines:
            status = RunStatus.FAILED
        else:
            status = RunStatus.PASSED

        self._hooks.trigger(
            RunEvent.EXAMPLE_END,
            example_id=entry.id,
            session_id=self.session_id,
            duration_ms=duration_ms,
            status=status.value,
            lines=len(captured),
        )
        if status is RunStatus.FAILED:
            logger.warning("Output does not match fixture", duration_ms=duration_ms)
        else:
            logger.debug("Example finished", duration_ms=duration_ms)

        return RunResult(
            example_id=entry.id,
            status=status,
            captured_output=captured,
            expected_output=expected_lines,
            duration_ms=duration_ms,
            seed=seed,
        )

    def _invoke(self, entry: Example, seed: int) -> Tuple[str, ...]:
        """Call the example, enforcing the configured time budget."""
        timeout = self._config.timeout_seconds
        if timeout is None:
            return _call_example(entry, seed, Transcript())

        transcript = Transcript()
        lines: List[Tuple[str, ...]] = []
        errors: List[ExampleExecutionError] = []

        def target() -> None:
            try:
                lines.append(_call_example(entry, seed, transcript))
            except ExampleExecutionError as e:
                errors.append(e)

        # A stuck example cannot be interrupted; as a daemon it never blocks
        # interpreter exit
        worker = threading.Thread(
            target=target, name=f"catalog-example-{entry.id}", daemon=True
        )
        worker.start()
        worker.join(timeout)

        if worker.is_alive():
            raise ExampleTimeoutError(entry.id, timeout, partial_output=transcript.lines)
        if errors:
            raise errors[0]
        return lines[0]


def _call_example(entry: Example, seed: int, transcript: Transcript) -> Tuple[str, ...]:
    """Run an example with a freshly seeded entropy source."""
    try:
        return entry.run(EntropySource(seed), transcript)
    except Exception as e:  # pylint: disable=broad-exception-caught
        raise ExampleExecutionError(entry.id, e, partial_output=transcript.lines) from e

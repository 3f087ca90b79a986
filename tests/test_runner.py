"""Tests for the example runner."""

import subprocess
import sys
import threading
import time
from pathlib import Path

import pytest

from catalog.config import RunnerConfig
from catalog.example import Category
from catalog.observability.hooks import RunEvent
from catalog.results import RunStatus, summarize
from catalog.runner import Runner

from tests.conftest import build_registry, make_example, printing

PROJECT_ROOT = Path(__file__).resolve().parents[1]

STUCK_EXAMPLE_SCRIPT = """
import time

from catalog.config import RunnerConfig
from catalog.example import Category, Example
from catalog.registry import ExampleRegistry
from catalog.runner import Runner


def stuck(out, entropy):
    time.sleep(30)


registry = ExampleRegistry.from_examples([Example("stuck", Category.BEHAVIORAL, stuck)])
result = Runner(registry, RunnerConfig(timeout_seconds=0.2)).run_one("stuck")
print(result.status.value)
"""


class TestRunOne:
    def test_passed_without_expectation(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one("b")

        assert result.status is RunStatus.PASSED
        assert result.captured_output == ("x", "y")
        assert result.expected_output is None
        assert result.error_detail is None
        assert result.seed == 42

    def test_empty_output_passes(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one("c")

        assert result.ok
        assert result.captured_output == ()

    def test_unknown_id_is_not_found(self, abc_registry, hooks, recorded_events):
        result = Runner(abc_registry, hook_registry=hooks).run_one("nope")

        assert result.status is RunStatus.NOT_FOUND
        assert result.captured_output == ()
        assert "nope" in result.error_detail
        assert [e.event for e in recorded_events] == [RunEvent.EXAMPLE_NOT_FOUND]

    def test_expected_lines_match(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one("b", expected=["x", "y"])
        assert result.status is RunStatus.PASSED

    def test_single_character_difference_fails(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one("b", expected=["x", "z"])

        assert result.status is RunStatus.FAILED
        assert result.expected_output == ("x", "z")
        assert result.captured_output == ("x", "y")
        assert "-z" in result.diff()
        assert "+y" in result.diff()

    def test_trailing_whitespace_is_significant(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one("a", expected=["hello "])
        assert result.status is RunStatus.FAILED

    def test_fixture_map_without_entry_fails(self, abc_registry, hooks):
        result = Runner(abc_registry, hook_registry=hooks).run_one(
            "a", fixtures={"b": ("x", "y")}
        )

        assert result.status is RunStatus.FAILED
        assert result.missing_fixture
        assert result.expected_output is None

    def test_missing_successor_is_reported_as_errored(self, failing_registry, hooks):
        result = Runner(failing_registry, hook_registry=hooks).run_one("daycare/no-boss")

        assert result.status is RunStatus.ERRORED
        assert "MissingSuccessorError" in result.error_detail
        assert "No boss assigned." in result.error_detail
        assert result.captured_output == ()

    def test_output_before_error_is_kept(self, hooks):
        def half_done(out, entropy):
            out.write("before")
            raise RuntimeError("halfway")

        registry = build_registry([make_example("half", half_done)])

        result = Runner(registry, hook_registry=hooks).run_one("half")

        assert result.status is RunStatus.ERRORED
        assert result.captured_output == ("before",)
        assert "halfway" in result.error_detail

    def test_explicit_seed_overrides_config(self, random_registry, hooks):
        runner = Runner(random_registry, RunnerConfig(seed=1), hook_registry=hooks)

        assert runner.run_one("random/0").seed == 1
        assert runner.run_one("random/0", seed=99).seed == 99
        assert (
            runner.run_one("random/0", seed=99).captured_output
            == Runner(random_registry, RunnerConfig(seed=99), hook_registry=hooks)
            .run_one("random/0")
            .captured_output
        )


class TestRunAll:
    def test_results_in_registration_order(self, abc_registry, hooks):
        results = Runner(abc_registry, hook_registry=hooks).run_all()

        assert [r.example_id for r in results] == ["a", "b", "c"]
        assert [r.captured_output for r in results] == [("hello",), ("x", "y"), ()]
        assert all(r.ok for r in results)

    def test_errored_example_does_not_stop_batch(self, failing_registry, hooks):
        results = Runner(failing_registry, hook_registry=hooks).run_all()

        assert [r.status for r in results] == [
            RunStatus.PASSED,
            RunStatus.ERRORED,
            RunStatus.PASSED,
        ]
        assert results[2].captured_output == ("three",)

    def test_fixtures_pass_and_fail(self, abc_registry, hooks):
        fixtures = {"a": ("hello",), "b": ("x", "Y"), "c": ()}
        results = Runner(abc_registry, hook_registry=hooks).run_all(fixtures=fixtures)

        assert [r.status for r in results] == [
            RunStatus.PASSED,
            RunStatus.FAILED,
            RunStatus.PASSED,
        ]

    def test_unknown_fixture_ids_are_ignored(self, abc_registry, hooks):
        fixtures = {"a": ("hello",), "b": ("x", "y"), "c": (), "zzz": ("?",)}
        results = Runner(abc_registry, hook_registry=hooks).run_all(fixtures=fixtures)

        assert [r.example_id for r in results] == ["a", "b", "c"]
        assert all(r.ok for r in results)

    def test_category_filter(self, abc_registry, hooks):
        results = Runner(abc_registry, hook_registry=hooks).run_all(
            category=Category.CREATIONAL
        )
        assert [r.example_id for r in results] == ["b"]

    def test_empty_registry(self, hooks):
        results = Runner(build_registry([]), hook_registry=hooks).run_all()
        assert results == []

    def test_same_seed_reproduces_output(self, random_registry, hooks):
        config = RunnerConfig(seed=42)
        first = Runner(random_registry, config, hook_registry=hooks).run_all()
        second = Runner(random_registry, config, hook_registry=hooks).run_all()

        assert [r.captured_output for r in first] == [r.captured_output for r in second]

    def test_each_example_gets_a_fresh_source(self, random_registry, hooks):
        results = Runner(random_registry, hook_registry=hooks).run_all()

        # Same body and seed in every example, so every trace is identical
        assert len({r.captured_output for r in results}) == 1

    def test_parallel_run_keeps_registration_order(self, hooks):
        def sleeper(name, delay):
            def body(out, entropy):
                time.sleep(delay)
                out.write(name)

            return body

        registry = build_registry(
            [
                make_example("slow", sleeper("slow", 0.15)),
                make_example("medium", sleeper("medium", 0.05)),
                make_example("fast", sleeper("fast", 0.0)),
            ]
        )
        results = Runner(registry, RunnerConfig(max_workers=3), hook_registry=hooks).run_all()

        assert [r.example_id for r in results] == ["slow", "medium", "fast"]
        assert [r.captured_output for r in results] == [("slow",), ("medium",), ("fast",)]

    def test_parallel_matches_sequential(self, random_registry, hooks):
        sequential = Runner(random_registry, hook_registry=hooks).run_all()
        parallel = Runner(
            random_registry, RunnerConfig(max_workers=4), hook_registry=hooks
        ).run_all()

        assert [(r.example_id, r.captured_output) for r in sequential] == [
            (r.example_id, r.captured_output) for r in parallel
        ]

    def test_counts(self, failing_registry, hooks):
        counts = summarize(Runner(failing_registry, hook_registry=hooks).run_all())
        assert counts == {"passed": 2, "failed": 0, "errored": 1, "not_found": 0, "total": 3}


class TestCancellation:
    def test_cancel_stops_after_current_example(self, abc_registry, hooks, recorded_events):
        runner = Runner(abc_registry, hook_registry=hooks)
        hooks.on(RunEvent.EXAMPLE_END, lambda data: runner.cancel())

        results = runner.run_all()

        assert [r.example_id for r in results] == ["a"]
        assert runner.cancelled
        events = [e.event for e in recorded_events]
        assert RunEvent.RUN_CANCELLED in events
        assert events[-1] is RunEvent.RUN_END

    def test_parallel_cancel_returns_completed_prefix(self, hooks, recorded_events):
        def napping(name):
            def body(out, entropy):
                time.sleep(0.05)
                out.write(name)

            return body

        ids = [f"nap/{n}" for n in range(8)]
        registry = build_registry([make_example(i, napping(i)) for i in ids])
        runner = Runner(registry, RunnerConfig(max_workers=2), hook_registry=hooks)
        hooks.on(RunEvent.EXAMPLE_END, lambda data: runner.cancel())

        results = runner.run_all()

        got = [r.example_id for r in results]
        assert 0 < len(got) < len(ids)
        assert got == [i for i in ids if i in got]
        assert all(r.ok for r in results)
        assert [r.captured_output for r in results] == [(i,) for i in got]
        assert RunEvent.RUN_CANCELLED in [e.event for e in recorded_events]

    def test_new_run_clears_cancellation(self, abc_registry, hooks):
        runner = Runner(abc_registry, hook_registry=hooks)
        runner.cancel()

        assert len(runner.run_all()) == 3


class TestTimeout:
    def test_slow_example_errors_and_batch_continues(self, hooks):
        release = threading.Event()

        def stuck(out, entropy):
            release.wait(5)

        registry = build_registry(
            [make_example("stuck", stuck), make_example("after", printing("done"))]
        )
        runner = Runner(registry, RunnerConfig(timeout_seconds=0.05), hook_registry=hooks)

        try:
            results = runner.run_all()
        finally:
            release.set()

        assert results[0].status is RunStatus.ERRORED
        assert "time budget" in results[0].error_detail
        assert results[1].status is RunStatus.PASSED

    def test_timeout_keeps_output_written_so_far(self, hooks):
        release = threading.Event()

        def stalls(out, entropy):
            out.write("started")
            release.wait(5)

        registry = build_registry([make_example("stalls", stalls)])
        runner = Runner(registry, RunnerConfig(timeout_seconds=0.1), hook_registry=hooks)

        try:
            result = runner.run_one("stalls")
        finally:
            release.set()

        assert result.status is RunStatus.ERRORED
        assert result.captured_output == ("started",)

    def test_stuck_example_does_not_block_interpreter_exit(self):
        completed = subprocess.run(
            [sys.executable, "-c", STUCK_EXAMPLE_SCRIPT],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            timeout=15,
            check=False,
        )

        assert completed.returncode == 0, completed.stderr
        assert completed.stdout.strip() == "errored"

    def test_fast_example_within_budget(self, abc_registry, hooks):
        runner = Runner(abc_registry, RunnerConfig(timeout_seconds=5), hook_registry=hooks)
        assert runner.run_one("a").ok


class TestEvents:
    def test_event_sequence_for_batch(self, abc_registry, hooks, recorded_events):
        Runner(abc_registry, hook_registry=hooks, session_id="s-1").run_all()

        events = [e.event for e in recorded_events]
        assert events[0] is RunEvent.RUN_START
        assert events[-1] is RunEvent.RUN_END
        assert events.count(RunEvent.EXAMPLE_START) == 3
        assert events.count(RunEvent.EXAMPLE_END) == 3
        assert all(e.session_id == "s-1" for e in recorded_events)

    def test_error_event_carries_exception(self, failing_registry, hooks, recorded_events):
        Runner(failing_registry, hook_registry=hooks).run_all()

        errors = [e for e in recorded_events if e.event is RunEvent.EXAMPLE_ERROR]
        assert len(errors) == 1
        assert errors[0].example_id == "daycare/no-boss"
        assert errors[0].error is not None

    def test_run_end_carries_counts(self, abc_registry, hooks, recorded_events):
        Runner(abc_registry, hook_registry=hooks).run_all()

        end = recorded_events[-1]
        assert end.data["counts"]["passed"] == 3

    def test_failing_hook_does_not_break_run(self, abc_registry, hooks):
        def broken(data):
            raise IndexError("hook failure")

        hooks.on(RunEvent.EXAMPLE_START, broken)
        results = Runner(abc_registry, hook_registry=hooks).run_all()

        assert all(r.ok for r in results)


@pytest.mark.parametrize("workers", [1, 3])
def test_error_isolation_with_workers(failing_registry, hooks, workers):
    results = Runner(
        failing_registry, RunnerConfig(max_workers=workers), hook_registry=hooks
    ).run_all()

    assert [r.example_id for r in results] == ["first", "daycare/no-boss", "last"]
    assert results[1].status is RunStatus.ERRORED

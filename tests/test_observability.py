"""Tests for structured logging and event hooks."""

import io
import json
import logging

import pytest

from catalog.observability.hooks import EventData, EventHookRegistry, RunEvent
from catalog.observability.logging import (
    ROOT_LOGGER_NAME,
    LogLevel,
    configure_logging,
    get_logger,
)


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()


class TestEventHookRegistry:
    def test_specific_and_global_hooks(self, hooks):
        seen = []
        hooks.on(RunEvent.EXAMPLE_END, lambda d: seen.append(("end", d.example_id)))
        hooks.on_all(lambda d: seen.append(("all", d.event)))

        hooks.trigger(RunEvent.EXAMPLE_END, example_id="a")
        hooks.trigger(RunEvent.RUN_START)

        assert seen == [
            ("end", "a"),
            ("all", RunEvent.EXAMPLE_END),
            ("all", RunEvent.RUN_START),
        ]

    def test_unknown_kwargs_go_to_data(self, hooks, recorded_events):
        hooks.trigger(RunEvent.EXAMPLE_END, example_id="a", duration_ms=1.5, lines=3)

        event = recorded_events[0]
        assert event.example_id == "a"
        assert event.duration_ms == 1.5
        assert event.data == {"lines": 3}

    def test_duplicate_subscription_is_ignored(self, hooks):
        calls = []

        def callback(data):
            calls.append(data)

        hooks.on(RunEvent.RUN_END, callback)
        hooks.on(RunEvent.RUN_END, callback)
        hooks.trigger(RunEvent.RUN_END)

        assert len(calls) == 1

    def test_off_and_clear(self, hooks):
        calls = []

        def callback(data):
            calls.append(data)

        hooks.on(RunEvent.RUN_END, callback)
        hooks.off(RunEvent.RUN_END, callback)
        hooks.on_all(callback)
        hooks.clear()
        hooks.trigger(RunEvent.RUN_END)

        assert calls == []
        assert hooks.list_hooks() == {"_global": 0}

    def test_disable(self, hooks, recorded_events):
        hooks.disable()
        hooks.trigger(RunEvent.RUN_START)
        assert not hooks.is_enabled
        assert recorded_events == []

        hooks.enable()
        hooks.trigger(RunEvent.RUN_START)
        assert len(recorded_events) == 1

    def test_failing_callback_is_contained(self, hooks, recorded_events):
        def broken(data):
            raise KeyError("missing")

        hooks.on(RunEvent.CUSTOM, broken)
        hooks.trigger(RunEvent.CUSTOM)

        assert len(recorded_events) == 1

    @pytest.mark.parametrize("error", [IndexError("index"), ZeroDivisionError(), OSError("io")])
    def test_any_callback_exception_is_contained(self, hooks, recorded_events, error):
        def broken(data):
            raise error

        hooks.on(RunEvent.CUSTOM, broken)
        hooks.trigger(RunEvent.CUSTOM)

        assert len(recorded_events) == 1

    def test_list_hooks(self):
        registry = EventHookRegistry()
        registry.on(RunEvent.EXAMPLE_START, print)

        assert registry.list_hooks(RunEvent.EXAMPLE_START) == {"example_start": 1}


class TestEventData:
    def test_to_dict_omits_empty_fields(self):
        data = EventData(event=RunEvent.RUN_START).to_dict()
        assert set(data) == {"event", "timestamp"}

    def test_to_dict_with_error(self):
        data = EventData(
            event=RunEvent.EXAMPLE_ERROR,
            example_id="a",
            error=ValueError("bad"),
            duration_ms=0.0,
        ).to_dict()

        assert data["error"] == "bad"
        assert data["duration_ms"] == 0.0


class TestLogging:
    def test_human_readable_output(self, log_stream):
        configure_logging(level="INFO", use_colors=False, stream=log_stream)

        get_logger("runner", session_id="1234567890").info(
            "Example finished", example_id="a", duration_ms=3.14159
        )

        line = log_stream.getvalue().strip()
        assert "INFO" in line
        assert "example=a" in line
        assert "session=12345678" in line
        assert "duration=3.14ms" in line
        assert line.endswith("Example finished")

    def test_json_output(self, log_stream):
        configure_logging(level=LogLevel.DEBUG, json_format=True, stream=log_stream)

        get_logger("registry").debug(
            "Registered example", example_id="a", category="structural", extra={"n": 1}
        )

        record = json.loads(log_stream.getvalue())
        assert record["level"] == "DEBUG"
        assert record["logger"] == "catalog.registry"
        assert record["example"] == "a"
        assert record["category"] == "structural"
        assert record["data"] == {"n": 1}

    def test_level_filters_records(self, log_stream):
        configure_logging(level="WARNING", use_colors=False, stream=log_stream)

        logger = get_logger("runner")
        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in log_stream.getvalue()
        assert "shown" in log_stream.getvalue()

    def test_with_context_keeps_name_and_session(self):
        logger = get_logger("runner", session_id="s").with_context(example_id="a")

        assert logger.name == "catalog.runner"

    def test_log_file_is_json(self, log_stream, tmp_path):
        log_file = tmp_path / "logs" / "catalog.log"
        configure_logging(level="INFO", log_file=log_file, stream=log_stream)

        get_logger("cli").info("Fixtures recorded")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert record["message"] == "Fixtures recorded"

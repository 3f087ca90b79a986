"""
Run lifecycle hooks.

External code subscribes callbacks to the events a Runner emits (batch
start/end, each example's start, end, error or lookup miss) to collect
metrics, stream progress or write audit trails. A callback that raises is
logged and skipped; it never changes the outcome of a run.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from catalog.observability.logging import get_logger

_logger = get_logger("hooks")


class RunEvent(Enum):
    """Points in a run where hooks are called."""

    RUN_START = "run_start"
    RUN_END = "run_end"
    RUN_CANCELLED = "run_cancelled"

    EXAMPLE_START = "example_start"
    EXAMPLE_END = "example_end"
    EXAMPLE_ERROR = "example_error"
    EXAMPLE_NOT_FOUND = "example_not_found"

    # Free for integrations to trigger themselves
    CUSTOM = "custom"


@dataclass
class EventData:
    """Payload handed to every hook callback.

    Attributes:
        event: Which event fired
        timestamp: When it fired
        example_id: Example concerned, for example-level events
        session_id: Runner session that emitted the event
        data: Event-specific values (counts, status, seed, ...)
        error: Exception behind an EXAMPLE_ERROR
        duration_ms: Elapsed time, for events that close a unit of work
    """

    event: RunEvent
    timestamp: datetime = field(default_factory=datetime.now)
    example_id: Optional[str] = None
    session_id: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None
    duration_ms: Optional[float] = None

    @classmethod
    def build(cls, event: RunEvent, **kwargs: Any) -> "EventData":
        """Create a payload, moving keywords that are not fields into data."""
        own = {f.name for f in fields(cls)} - {"event", "timestamp", "data"}
        payload = {key: value for key, value in kwargs.items() if key in own}
        extra = {key: value for key, value in kwargs.items() if key not in own}
        return cls(event=event, data=extra, **payload)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; unset fields are left out."""
        result: Dict[str, Any] = {
            "event": self.event.value,
            "timestamp": self.timestamp.isoformat(),
        }
        optional = {
            "example_id": self.example_id,
            "session_id": self.session_id,
            "data": self.data or None,
            "error": str(self.error) if self.error else None,
            "duration_ms": self.duration_ms,
        }
        result.update({key: value for key, value in optional.items() if value is not None})
        return result


HookCallback = Callable[[EventData], None]


class EventHookRegistry:
    """Subscriptions from events to callbacks.

    Usage:
        hooks = EventHookRegistry()
        hooks.on(RunEvent.EXAMPLE_ERROR, alert)
        hooks.on_all(progress_bar.update)

        runner = Runner(load_catalog(), hook_registry=hooks)
    """

    def __init__(self) -> None:
        # None holds callbacks subscribed to every event
        self._subscribers: Dict[Optional[RunEvent], List[HookCallback]] = {}
        self._enabled = True

    def _add(self, key: Optional[RunEvent], callback: HookCallback) -> None:
        callbacks = self._subscribers.setdefault(key, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def _remove(self, key: Optional[RunEvent], callback: HookCallback) -> None:
        callbacks = self._subscribers.get(key, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def on(self, event: RunEvent, callback: HookCallback) -> None:
        """Call callback whenever event fires. Subscribing twice has no effect."""
        self._add(event, callback)

    def on_all(self, callback: HookCallback) -> None:
        """Call callback for every event."""
        self._add(None, callback)

    def off(self, event: RunEvent, callback: HookCallback) -> None:
        self._remove(event, callback)

    def off_all(self, callback: HookCallback) -> None:
        self._remove(None, callback)

    def clear(self, event: Optional[RunEvent] = None) -> None:
        """Drop the callbacks of one event, or every subscription when event is None."""
        if event is None:
            self._subscribers.clear()
        else:
            self._subscribers[event] = []

    def trigger(
        self,
        event: RunEvent,
        data: Optional[EventData] = None,
        **kwargs: Any,
    ) -> None:
        """Fire an event.

        Callbacks for the specific event run first, then the catch-all ones.

        Args:
            event: Event to fire
            data: Prepared payload; built from kwargs when omitted
            **kwargs: example_id, session_id, error and duration_ms fill the
                matching EventData fields; anything else lands in data
        """
        if not self._enabled:
            return

        payload = data if data is not None else EventData.build(event, **kwargs)
        callbacks = [*self._subscribers.get(event, []), *self._subscribers.get(None, [])]

        for callback in callbacks:
            try:
                callback(payload)
            except Exception as e:  # pylint: disable=broad-exception-caught
                name = getattr(callback, "__name__", repr(callback))
                _logger.warning(
                    f"Hook {name} failed on {event.value}: {e}",
                    example_id=payload.example_id,
                )

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        """Stop calling callbacks until enable() is called."""
        self._enabled = False

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def list_hooks(self, event: Optional[RunEvent] = None) -> Dict[str, int]:
        """Count subscriptions.

        Returns:
            {event value: count} for the given event, or for every event with
            subscriptions plus "_global" for catch-all callbacks
        """
        if event is not None:
            return {event.value: len(self._subscribers.get(event, []))}

        counts = {key.value: len(cbs) for key, cbs in self._subscribers.items() if key is not None}
        counts["_global"] = len(self._subscribers.get(None, []))
        return counts


# Used by runners created without an explicit registry
default_hook_registry = EventHookRegistry()

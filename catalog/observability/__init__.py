"""Logging and run lifecycle hooks for the pattern catalog."""

from .hooks import (
    EventData,
    EventHookRegistry,
    RunEvent,
    default_hook_registry,
)
from .logging import CatalogLogger, LogLevel, configure_logging, get_logger

__all__ = [
    "CatalogLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "EventData",
    "EventHookRegistry",
    "RunEvent",
    "default_hook_registry",
]

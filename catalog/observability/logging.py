"""
Structured logging for the pattern catalog.

Every record emitted during a run can carry the run session, the example
being executed, its pattern family and a duration. Two formatters render
that context: a JSON one for machines and a single-line one for terminals.
Console output goes to stderr so stdout stays reserved for example output
and reports.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import IO, Any, Dict, Optional, Tuple, Union

ROOT_LOGGER_NAME = "catalog"

# (record attribute, JSON key) for the context fields CatalogLogger attaches
_CONTEXT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("example_id", "example"),
    ("session_id", "session_id"),
    ("category", "category"),
    ("duration_ms", "duration_ms"),
)


class LogLevel(Enum):
    """Log levels accepted by configure_logging and the CLI."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the catalog context attached to a record, keyed for JSON output."""
    context: Dict[str, Any] = {}
    for attribute, key in _CONTEXT_FIELDS:
        value = getattr(record, attribute, None)
        if value is not None and value != "":
            context[key] = value
    return context


class StructuredFormatter(logging.Formatter):
    """Renders each record as one JSON object."""

    def __init__(self, include_timestamp: bool = True, pretty: bool = False) -> None:
        super().__init__()
        self._include_timestamp = include_timestamp
        self._indent = 2 if pretty else None

    def format(self, record: logging.LogRecord) -> str:
        document: Dict[str, Any] = {}
        if self._include_timestamp:
            document["timestamp"] = self.formatTime(record, "%Y-%m-%dT%H:%M:%S")
        document["level"] = record.levelname
        document["logger"] = record.name
        document["message"] = record.getMessage()
        document.update(record_context(record))

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            document["data"] = extra_data
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)

        return json.dumps(document, indent=self._indent, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Single-line records: time, level, bracketed context, message.

    Example:
        2024-05-01 10:00:00 | WARNING  | [example=flyweight/characters] Output does not match fixture
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def _level(self, record: logging.LogRecord) -> str:
        label = f"{record.levelname:<8}"
        if not self._use_colors:
            return label
        return f"{self.LEVEL_COLORS.get(record.levelno, '')}{label}{self.RESET}"

    @staticmethod
    def _context(record: logging.LogRecord) -> str:
        parts = []
        for key, value in record_context(record).items():
            if key == "example":
                parts.append(f"example={value}")
            elif key == "session_id":
                # Short prefix is enough to tell sessions apart in a terminal
                parts.append(f"session={str(value)[:8]}")
            elif key == "duration_ms":
                parts.append(f"duration={value}ms")
            else:
                parts.append(f"{key}={value}")
        return f" [{', '.join(parts)}]" if parts else ""

    def format(self, record: logging.LogRecord) -> str:
        line = (
            f"{self.formatTime(record, '%Y-%m-%d %H:%M:%S')} | {self._level(record)} |"
            f"{self._context(record)} {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class CatalogLogger:
    """Wrapper over a stdlib logger that stamps catalog context on every record.

    Usage:
        logger = CatalogLogger("runner", session_id=runner.session_id)
        logger.info("Example finished", example_id="strategy/algorithms", duration_ms=1.2)

        per_example = logger.with_context(example_id="composite/tree")
        per_example.warning("Output does not match fixture")
    """

    def __init__(
        self,
        name: str,
        session_id: Optional[str] = None,
        example_id: Optional[str] = None,
    ) -> None:
        """Initialize the catalog logger.

        Args:
            name: Logger name, nested under the "catalog" logger
            session_id: Run session the records belong to
            example_id: Example the records are about
        """
        self._name = name
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        self._session_id = session_id
        self._example_id = example_id

    @property
    def name(self) -> str:
        """Full name of the underlying logger."""
        return self._logger.name

    def _log(
        self,
        level: int,
        message: str,
        example_id: Optional[str] = None,
        category: Optional[str] = None,
        duration_ms: Optional[float] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        fields: Dict[str, Any] = {
            "example_id": example_id or self._example_id,
            "session_id": self._session_id,
            "category": category,
            "duration_ms": round(duration_ms, 2) if duration_ms is not None else None,
            "extra_data": extra,
        }
        self._logger.log(
            level,
            message,
            extra={key: value for key, value in fields.items() if value is not None},
            exc_info=exc_info,
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def with_context(
        self,
        example_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> "CatalogLogger":
        """Derive a logger for the same name with context added or replaced."""
        return CatalogLogger(
            self._name,
            session_id=session_id or self._session_id,
            example_id=example_id or self._example_id,
        )


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    use_colors: bool = True,
    pretty_json: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Install handlers on the "catalog" logger, replacing any from earlier calls.

    Args:
        level: Minimum level, as a LogLevel or its name
        log_file: Also append records to this file, always as JSON
        json_format: Render console records as JSON instead of text
        use_colors: Color the level in text output
        pretty_json: Indent JSON console records
        stream: Console stream (defaults to sys.stderr)
    """
    if isinstance(level, str):
        level = LogLevel[level.upper()]

    catalog_logger = logging.getLogger(ROOT_LOGGER_NAME)
    catalog_logger.setLevel(level.value)
    for handler in list(catalog_logger.handlers):
        catalog_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(
        StructuredFormatter(pretty=pretty_json)
        if json_format
        else HumanReadableFormatter(use_colors=use_colors)
    )
    catalog_logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        catalog_logger.addHandler(file_handler)


def get_logger(
    name: str,
    session_id: Optional[str] = None,
    example_id: Optional[str] = None,
) -> CatalogLogger:
    """Get a catalog logger for a component (e.g. "runner", "registry")."""
    return CatalogLogger(name, session_id=session_id, example_id=example_id)

"""
Command-line interface for the pattern catalog.

Commands:
    list      List registered examples
    show      Print the output of one example
    run       Run one example, optionally against a fixture file
    run-all   Run every example and report pass/fail
    record    Run the catalog and write its output as a fixture file
"""

import signal
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence, Tuple

import click

from catalog.config import RunnerConfig
from catalog.errors import FixtureFormatError
from catalog.example import Category
from catalog.fixtures import dump_fixtures, load_fixtures
from catalog.observability.hooks import EventHookRegistry
from catalog.observability.logging import LogLevel, configure_logging, get_logger
from catalog.registry import ExampleRegistry, default_registry
from catalog.reporter import (
    EXIT_ERRORED,
    EXIT_NOT_FOUND,
    EXIT_OK,
    JsonReporter,
    Reporter,
    TextReporter,
    exit_code_for,
)
from catalog.results import RunStatus
from catalog.runner import Runner

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Unreadable config or fixture files
EXIT_BAD_INPUT = 4

# record interrupted before every example ran
EXIT_CANCELLED = 130

_logger = get_logger("cli")


class BadInputError(click.ClickException):
    """A config or fixture file could not be used."""

    exit_code = EXIT_BAD_INPUT


@dataclass
class CliContext:
    """Objects shared by every command.

    Tests pass a prepared instance as the click context object to run the
    commands against a hand-built registry.
    """

    registry: Optional[ExampleRegistry] = None
    config: RunnerConfig = field(default_factory=RunnerConfig)
    hook_registry: Optional[EventHookRegistry] = None

    def runner(self, **overrides: object) -> Runner:
        registry = self.registry if self.registry is not None else default_registry()
        return Runner(registry, self.config.merged(**overrides), self.hook_registry)


def _parse_category(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Category]:
    # pylint: disable=unused-argument
    if value is None:
        return None
    return Category.parse(value)


category_option = click.option(
    "--category",
    type=click.Choice([c.value for c in Category], case_sensitive=False),
    callback=_parse_category,
    help="Only include examples of this pattern family.",
)


def _load_config(config_path: Optional[Path]) -> RunnerConfig:
    try:
        if config_path is not None:
            return RunnerConfig.from_yaml(config_path)
        return RunnerConfig.from_env()
    except (OSError, ValueError) as e:
        raise BadInputError(f"Invalid configuration: {e}") from e


def _load_fixture_map(path: Optional[str]) -> Optional[Dict[str, Tuple[str, ...]]]:
    if path is None:
        return None
    try:
        return load_fixtures(path)
    except (OSError, FixtureFormatError) as e:
        raise BadInputError(f"Cannot read fixtures: {e}") from e


@contextmanager
def _cancel_on_interrupt(runner: Runner) -> Iterator[None]:
    """Turn Ctrl-C into a cooperative cancel of the runner."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handle(signum: int, frame: object) -> None:  # pylint: disable=unused-argument
        click.echo("Cancelling after the current example...", err=True)
        runner.cancel()

    previous = signal.signal(signal.SIGINT, handle)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def _reporter(output_format: str) -> Reporter:
    if output_format == "json":
        return JsonReporter()
    return TextReporter(color=sys.stdout.isatty())


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML runner configuration (replaces CATALOG_* environment settings).",
)
@click.option("--seed", type=int, help="Seed for every example's entropy source.")
@click.option(
    "--log-level",
    type=click.Choice([level.name for level in LogLevel], case_sensitive=False),
    help="Minimum level for log records written to stderr.",
)
@click.option("--json-logs", is_flag=True, default=False, help="Emit log records as JSON.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    seed: Optional[int],
    log_level: Optional[str],
    json_logs: bool,
) -> None:
    """Run and check the design pattern example catalog."""
    if ctx.obj is None:
        ctx.obj = CliContext(config=_load_config(config_path))

    obj: CliContext = ctx.obj
    obj.config = obj.config.merged(
        seed=seed,
        log_level=log_level.upper() if log_level else None,
        json_logs=json_logs or None,
    )

    configure_logging(
        level=obj.config.log_level,
        json_format=obj.config.json_logs,
        use_colors=sys.stderr.isatty(),
    )


@cli.command("list")
@category_option
@click.pass_obj
def list_cmd(obj: CliContext, category: Optional[Category]) -> None:
    """List registered examples in registration order."""
    registry = obj.registry if obj.registry is not None else default_registry()
    entries = list(registry.list(category))
    width = max((len(entry.id) for entry in entries), default=0)

    for entry in entries:
        click.echo(f"{entry.id:<{width}}  {entry.category.value:<11}  {entry.title}")


@cli.command("show")
@click.argument("example_id")
@click.pass_context
def show_cmd(ctx: click.Context, example_id: str) -> None:
    """Print the output of EXAMPLE_ID."""
    obj: CliContext = ctx.obj
    result = obj.runner().run_one(example_id)

    if result.status is RunStatus.NOT_FOUND:
        click.echo(result.error_detail, err=True)
        ctx.exit(EXIT_NOT_FOUND)

    for line in result.captured_output:
        click.echo(line)

    if result.status is RunStatus.ERRORED:
        click.echo(result.error_detail, err=True)
        ctx.exit(EXIT_ERRORED)


@cli.command("run")
@click.argument("example_id")
@click.option(
    "--fixtures",
    "fixtures_path",
    type=click.Path(dir_okay=False),
    help="Fixture file to compare the output against.",
)
@click.option(
    "--output/--no-output",
    default=True,
    help="Print the captured output under the result line.",
)
@click.pass_context
def run_cmd(
    ctx: click.Context,
    example_id: str,
    fixtures_path: Optional[str],
    output: bool,
) -> None:
    """Run EXAMPLE_ID and report its result."""
    obj: CliContext = ctx.obj
    fixtures = _load_fixture_map(fixtures_path or obj.config.fixtures_path)

    result = obj.runner().run_one(example_id, fixtures=fixtures)

    TextReporter(show_output=output, color=sys.stdout.isatty()).report([result])
    ctx.exit(exit_code_for([result]))


@cli.command("run-all")
@click.option(
    "--fixtures",
    "fixtures_path",
    type=click.Path(dir_okay=False),
    help="Fixture file to compare every example against.",
)
@click.option("--workers", type=click.IntRange(min=1), help="Examples to run in parallel.")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    help="Per-example time budget in seconds.",
)
@category_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.pass_context
def run_all_cmd(
    ctx: click.Context,
    fixtures_path: Optional[str],
    workers: Optional[int],
    timeout: Optional[float],
    category: Optional[Category],
    output_format: str,
) -> None:
    """Run every example and report pass/fail for each."""
    obj: CliContext = ctx.obj
    fixtures = _load_fixture_map(fixtures_path or obj.config.fixtures_path)
    runner = obj.runner(max_workers=workers, timeout_seconds=timeout)

    with _cancel_on_interrupt(runner):
        results = runner.run_all(fixtures=fixtures, category=category)

    _reporter(output_format).report(results)
    ctx.exit(exit_code_for(results))


@cli.command("record")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@category_option
@click.pass_context
def record_cmd(ctx: click.Context, path: Path, category: Optional[Category]) -> None:
    """Run the catalog and write its output to the fixture file PATH.

    A cancelled run writes nothing, so PATH keeps its previous contents.
    """
    obj: CliContext = ctx.obj
    runner = obj.runner()

    with _cancel_on_interrupt(runner):
        results = runner.run_all(category=category)

    if runner.cancelled:
        _logger.warning(
            "Recording cancelled", extra={"path": str(path), "completed": len(results)}
        )
        click.echo(f"Recording cancelled; {path} left unchanged", err=True)
        ctx.exit(EXIT_CANCELLED)

    written = dump_fixtures(results, path)
    _logger.info("Fixtures recorded", extra={"path": str(path), "examples": written})

    skipped = [result for result in results if result.status is RunStatus.ERRORED]
    for result in skipped:
        click.echo(f"Skipped {result.example_id}: example errored", err=True)

    click.echo(f"Recorded {written} examples to {path}")
    ctx.exit(EXIT_ERRORED if skipped else EXIT_OK)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point used by the `gof-catalog` console script."""
    cli.main(args=list(argv) if argv is not None else None, prog_name="gof-catalog")

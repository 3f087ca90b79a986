"""
Fixture files for regression comparison.

A fixture file is a YAML mapping from example id to the ordered list of
output lines that example is expected to produce.
"""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

import yaml

from catalog.errors import FixtureFormatError
from catalog.results import RunResult, RunStatus


def parse_fixtures(data: Any, source: str = "<fixtures>") -> Dict[str, Tuple[str, ...]]:
    """Validate loaded YAML data and convert it to a fixture map.

    Args:
        data: Object produced by yaml.safe_load
        source: Name used in error messages

    Returns:
        Dictionary of example id -> expected lines

    Raises:
        FixtureFormatError: If the data is not a mapping of string lists
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FixtureFormatError(
            f"{source}: expected a mapping of example id to lines, got {type(data).__name__}"
        )

    fixtures: Dict[str, Tuple[str, ...]] = {}
    for example_id, lines in data.items():
        if not isinstance(example_id, str):
            raise FixtureFormatError(f"{source}: example id {example_id!r} is not a string")
        if lines is None:
            lines = []
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise FixtureFormatError(f"{source}: entry '{example_id}' must be a list of strings")
        fixtures[example_id] = tuple(lines)

    return fixtures


def load_fixtures(path: Path | str) -> Dict[str, Tuple[str, ...]]:
    """Load a fixture file.

    Args:
        path: Path to the YAML fixture file

    Returns:
        Dictionary of example id -> expected lines

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read (a directory, no permission)
        FixtureFormatError: If the file is not UTF-8 YAML of the expected shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Fixture file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise FixtureFormatError(f"{path}: invalid YAML: {e}") from e

    return parse_fixtures(data, source=str(path))


def dump_fixtures(results: Iterable[RunResult], path: Path | str) -> int:
    """Write the captured output of results as a fixture file.

    Results that errored or were not found are left out. The file is
    written to a sibling temporary file first and moved into place, so an
    existing fixture file is never left half-written.

    Args:
        results: Results to record
        path: Path where the YAML file will be saved

    Returns:
        Number of entries written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    entries: Dict[str, list] = {}
    for result in results:
        if result.status in (RunStatus.ERRORED, RunStatus.NOT_FOUND):
            continue
        entries[result.example_id] = list(result.captured_output)

    tmp_path = path.with_name(f"{path.name}.tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                entries,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                width=4096,
            )
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    return len(entries)

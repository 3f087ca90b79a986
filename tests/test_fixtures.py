"""Tests for fixture file loading and recording."""

import pytest
import yaml

from catalog.errors import FixtureFormatError
from catalog.fixtures import dump_fixtures, load_fixtures, parse_fixtures
from catalog.results import RunResult, RunStatus
from catalog.runner import Runner


class TestParseFixtures:
    def test_mapping_of_lines(self):
        fixtures = parse_fixtures({"a": ["one", ""], "b": []})
        assert fixtures == {"a": ("one", ""), "b": ()}

    def test_null_document_is_empty(self):
        assert parse_fixtures(None) == {}

    def test_null_entry_is_empty_output(self):
        assert parse_fixtures({"a": None}) == {"a": ()}

    @pytest.mark.parametrize(
        "data",
        [
            ["a", "b"],
            {"a": "one line"},
            {"a": [1, 2]},
            {1: ["x"]},
        ],
    )
    def test_malformed_data(self, data):
        with pytest.raises(FixtureFormatError):
            parse_fixtures(data)


class TestLoadFixtures:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fixtures(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("a: [unclosed\n", encoding="utf-8")

        with pytest.raises(FixtureFormatError, match="invalid YAML"):
            load_fixtures(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes("a:\n  - caf\u00e9\n".encode("latin-1"))

        with pytest.raises(FixtureFormatError, match="invalid YAML"):
            load_fixtures(path)

    def test_directory_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_fixtures(tmp_path)

    def test_whitespace_is_preserved(self, tmp_path):
        path = tmp_path / "fixtures.yaml"
        path.write_text(
            yaml.safe_dump({"a": ["  indented", "trailing ", ""]}), encoding="utf-8"
        )

        assert load_fixtures(path) == {"a": ("  indented", "trailing ", "")}


class TestDumpFixtures:
    def test_recorded_fixtures_pass_on_replay(self, abc_registry, hooks, tmp_path):
        path = tmp_path / "nested" / "fixtures.yaml"
        runner = Runner(abc_registry, hook_registry=hooks)

        written = dump_fixtures(runner.run_all(), path)
        replay = runner.run_all(fixtures=load_fixtures(path))

        assert written == 3
        assert all(result.ok for result in replay)

    def test_errored_and_missing_results_are_skipped(self, tmp_path):
        path = tmp_path / "fixtures.yaml"
        results = [
            RunResult("ok", RunStatus.PASSED, captured_output=("line",)),
            RunResult("bad", RunStatus.ERRORED, error_detail="boom"),
            RunResult("gone", RunStatus.NOT_FOUND, error_detail="not found"),
        ]

        assert dump_fixtures(results, path) == 1
        assert load_fixtures(path) == {"ok": ("line",)}

    def test_entries_keep_result_order(self, tmp_path):
        path = tmp_path / "fixtures.yaml"
        results = [
            RunResult("z", RunStatus.PASSED, captured_output=("1",)),
            RunResult("a", RunStatus.PASSED, captured_output=("2",)),
        ]
        dump_fixtures(results, path)

        assert list(load_fixtures(path)) == ["z", "a"]

    def test_overwrite_leaves_no_temporary_file(self, tmp_path):
        path = tmp_path / "fixtures.yaml"
        path.write_text("old: [entry]\n", encoding="utf-8")

        dump_fixtures([RunResult("new", RunStatus.PASSED, captured_output=("1",))], path)

        assert load_fixtures(path) == {"new": ("1",)}
        assert [p.name for p in tmp_path.iterdir()] == ["fixtures.yaml"]

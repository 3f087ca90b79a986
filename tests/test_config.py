"""Tests for runner configuration."""

import pytest

from catalog.config import RunnerConfig


class TestRunnerConfig:
    def test_defaults(self):
        config = RunnerConfig()

        assert config.seed == 42
        assert config.max_workers == 1
        assert config.timeout_seconds is None
        assert config.log_level == "WARNING"
        assert config.json_logs is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_workers": 0},
            {"timeout_seconds": 0},
            {"timeout_seconds": -1.5},
            {"log_level": "VERBOSE"},
            {"seed": "7"},
            {"seed": True},
            {"max_workers": "three"},
            {"max_workers": 2.5},
            {"timeout_seconds": "fast"},
            {"fixtures_path": 3},
            {"log_level": 10},
            {"json_logs": "yes"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            RunnerConfig(**kwargs)

    def test_merged_skips_none(self):
        config = RunnerConfig(seed=7, max_workers=2).merged(seed=None, max_workers=4)

        assert config.seed == 7
        assert config.max_workers == 4

    def test_merged_validates(self):
        with pytest.raises(ValueError):
            RunnerConfig().merged(max_workers=0)


class TestFromEnv:
    def test_reads_prefixed_variables(self):
        config = RunnerConfig.from_env(
            {
                "CATALOG_SEED": "7",
                "CATALOG_MAX_WORKERS": "3",
                "CATALOG_TIMEOUT": "2.5",
                "CATALOG_FIXTURES": "fixtures.yaml",
                "CATALOG_LOG_LEVEL": "debug",
                "CATALOG_JSON_LOGS": "yes",
                "SEED": "1000",
            }
        )

        assert config == RunnerConfig(
            seed=7,
            max_workers=3,
            timeout_seconds=2.5,
            fixtures_path="fixtures.yaml",
            log_level="DEBUG",
            json_logs=True,
        )

    def test_empty_values_are_ignored(self):
        assert RunnerConfig.from_env({"CATALOG_SEED": ""}) == RunnerConfig()

    def test_bad_number(self):
        with pytest.raises(ValueError):
            RunnerConfig.from_env({"CATALOG_MAX_WORKERS": "many"})

    def test_reads_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("CATALOG_SEED=11\nCATALOG_MAX_WORKERS=2\n", encoding="utf-8")
        monkeypatch.delenv("CATALOG_SEED", raising=False)
        monkeypatch.setenv("CATALOG_MAX_WORKERS", "5")

        config = RunnerConfig.from_env(env_file=env_file)

        assert config.seed == 11
        assert config.max_workers == 5


class TestYaml:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "config" / "runner.yaml"
        config = RunnerConfig(seed=3, max_workers=2, timeout_seconds=1.0)

        config.to_yaml(path)

        assert RunnerConfig.from_yaml(path) == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "runner.yaml"
        path.write_text("seed: 9\n", encoding="utf-8")

        assert RunnerConfig.from_yaml(path) == RunnerConfig(seed=9)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "runner.yaml"
        path.write_text("", encoding="utf-8")

        assert RunnerConfig.from_yaml(path) == RunnerConfig()

    def test_unknown_keys(self, tmp_path):
        path = tmp_path / "runner.yaml"
        path.write_text("seed: 1\nmodel: llama3\n", encoding="utf-8")

        with pytest.raises(ValueError, match="model"):
            RunnerConfig.from_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RunnerConfig.from_yaml(tmp_path / "absent.yaml")

    def test_integer_timeout_is_accepted(self):
        assert RunnerConfig(timeout_seconds=5).timeout_seconds == 5

    @pytest.mark.parametrize(
        "text",
        [
            "seed: [1\n",
            "max_workers: three\n",
            "- seed\n- 1\n",
            "just a string\n",
        ],
    )
    def test_bad_documents_raise_value_error(self, tmp_path, text):
        path = tmp_path / "runner.yaml"
        path.write_text(text, encoding="utf-8")

        with pytest.raises(ValueError):
            RunnerConfig.from_yaml(path)

    def test_invalid_yaml_names_the_file(self, tmp_path):
        path = tmp_path / "runner.yaml"
        path.write_text("seed: [1\n", encoding="utf-8")

        with pytest.raises(ValueError, match="invalid YAML"):
            RunnerConfig.from_yaml(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "runner.yaml"
        path.write_bytes(b"seed: \xff\xfe\n")

        with pytest.raises(ValueError, match="invalid YAML"):
            RunnerConfig.from_yaml(path)

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            RunnerConfig.from_dict(["seed", 1])

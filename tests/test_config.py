import argparse
import os
import tempfile

import yaml

from function_times.config import Config, load_config, load_yaml_config


def _args(**kwargs):
    defaults = {"workers": None, "output": None, "verbose": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_missing_file(self):
        assert load_yaml_config("/nonexistent/path/config.yml") == {}

    def test_loads_mapping(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            yaml.dump({"workers": 3, "output": "json"}, f)
            path = f.name
        try:
            assert load_yaml_config(path) == {"workers": 3, "output": "json"}
        finally:
            os.unlink(path)

    def test_invalid_yaml_uses_defaults(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.write("workers: [1, 2\n")
            path = f.name
        try:
            assert load_yaml_config(path) == {}
        finally:
            os.unlink(path)

    def test_non_mapping_uses_defaults(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False) as f:
            f.write("- a\n- b\n")
            path = f.name
        try:
            assert load_yaml_config(path) == {}
        finally:
            os.unlink(path)


class TestLoadConfig:
    def test_defaults(self, monkeypatch):
        for var in ("FUNCTION_TIMES_WORKERS", "FUNCTION_TIMES_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        config = load_config(_args(), {})
        assert config == Config()
        assert config.workers == 1
        assert config.output == "text"

    def test_yaml_values(self, monkeypatch):
        monkeypatch.delenv("FUNCTION_TIMES_WORKERS", raising=False)
        config = load_config(_args(), {"workers": 2, "output": "json"})
        assert config.workers == 2
        assert config.output == "json"

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("FUNCTION_TIMES_WORKERS", "6")
        monkeypatch.setenv("FUNCTION_TIMES_LOG_LEVEL", "info")
        config = load_config(_args(), {"workers": 2, "log_level": "ERROR"})
        assert config.workers == 6
        assert config.log_level == "INFO"

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("FUNCTION_TIMES_WORKERS", "6")
        config = load_config(_args(workers=3, output="json", verbose=True), {"output": "text"})
        assert config.workers == 3
        assert config.output == "json"
        assert config.log_level == "DEBUG"

    def test_workers_at_least_one(self, monkeypatch):
        monkeypatch.delenv("FUNCTION_TIMES_WORKERS", raising=False)
        assert load_config(_args(workers=0), {}).workers == 1

    def test_invalid_env_workers_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUNCTION_TIMES_WORKERS", "many")
        assert load_config(_args(), {"workers": 4}).workers == 1

    def test_invalid_yaml_workers_falls_back(self, monkeypatch):
        monkeypatch.delenv("FUNCTION_TIMES_WORKERS", raising=False)
        assert load_config(_args(), {"workers": [2]}).workers == 1

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUNCTION_TIMES_LOG_LEVEL", "LOUD")
        assert load_config(_args(), {}).log_level == "WARNING"

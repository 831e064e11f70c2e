"""Tests for configuration loading."""

import json

import pytest

from ai_testing_agent.config import Config, load_config
from ai_testing_agent.core.errors import ConfigError
from ai_testing_agent.core.types import ReportFormat, TestFramework


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


class TestLoadConfig:
    """Reading .ai-testing-agent.json."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(cwd=tmp_path)

        assert config == Config()
        assert config.default_model == "gpt-4"
        assert config.output_path == "./output"
        assert config.test_defaults.framework == TestFramework.JEST
        assert config.api_keys.openai is None

    def test_camel_case_file(self, tmp_path):
        (tmp_path / ".ai-testing-agent.json").write_text(json.dumps({
            "apiKeys": {"openai": "sk-file"},
            "defaultModel": "gpt-4o",
            "outputPath": "./reports",
            "maxConcurrency": 2,
            "agents": {"fast": {"type": "openai", "model": "gpt-4o-mini", "temperature": 0}},
            "testDefaults": {
                "framework": "playwright",
                "coverage": 90,
                "reporting": {"formats": ["json", "xml"], "includeTimestamp": False},
            },
        }), encoding="utf-8")

        config = load_config(cwd=tmp_path)

        assert config.api_keys.openai == "sk-file"
        assert config.default_model == "gpt-4o"
        assert config.output_path == "./reports"
        assert config.max_concurrency == 2
        assert config.agents["fast"].model == "gpt-4o-mini"
        assert config.test_defaults.framework == TestFramework.PLAYWRIGHT
        assert config.test_defaults.coverage == 90
        assert config.test_defaults.reporting.formats == [ReportFormat.JSON, ReportFormat.XML]
        assert config.test_defaults.reporting.include_timestamp is False

    def test_snake_case_keys_accepted(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"default_model": "gpt-4o", "output_path": "out"}), encoding="utf-8")

        config = load_config("custom.json", cwd=tmp_path)

        assert config.default_model == "gpt-4o"
        assert config.output_path == "out"

    def test_env_key_fills_missing_key(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        assert load_config(cwd=tmp_path).api_keys.openai == "sk-env"

    def test_file_key_wins_over_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        (tmp_path / ".ai-testing-agent.json").write_text(
            json.dumps({"apiKeys": {"openai": "sk-file"}}), encoding="utf-8"
        )

        assert load_config(cwd=tmp_path).api_keys.openai == "sk-file"

    def test_invalid_json(self, tmp_path):
        (tmp_path / ".ai-testing-agent.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load config"):
            load_config(cwd=tmp_path)

    @pytest.mark.parametrize("content", [
        {"testDefaults": {"framework": "jasmine"}},
        {"testDefaults": {"reporting": {"formats": ["html"]}}},
        {"agents": {"x": {"model": "gpt-4"}}},
    ])
    def test_invalid_values(self, tmp_path, content):
        (tmp_path / ".ai-testing-agent.json").write_text(json.dumps(content), encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(cwd=tmp_path)

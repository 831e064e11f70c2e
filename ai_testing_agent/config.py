"""
Configuration loading.

Settings live in a JSON file (``.ai-testing-agent.json`` by default).
Keys may be camelCase or snake_case. A missing file yields defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .constants import DEFAULT_AI_MODEL, DEFAULT_CONFIG_FILENAME, DEFAULT_OUTPUT_PATH
from .core.errors import ConfigError
from .core.types import ReportFormat, TestFramework

logger = logging.getLogger(__name__)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiKeys(_ConfigModel):
    openai: str | None = None
    anthropic: str | None = None
    google: str | None = None


class AgentSettings(_ConfigModel):
    """One entry of the ``agents`` table; unknown keys are kept."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    type: str
    model: str | None = None


class ReportingDefaults(_ConfigModel):
    formats: list[ReportFormat] = Field(default_factory=list)
    include_timestamp: bool = True


class TestDefaults(_ConfigModel):
    framework: TestFramework = TestFramework.JEST
    coverage: float = 80
    max_retries: int = 3
    timeout: int = 5000
    reporting: ReportingDefaults = Field(default_factory=ReportingDefaults)


class Config(_ConfigModel):
    """Top-level settings."""

    api_keys: ApiKeys = Field(default_factory=ApiKeys)
    agents: dict[str, AgentSettings] = Field(default_factory=dict)
    default_model: str = DEFAULT_AI_MODEL
    test_defaults: TestDefaults = Field(default_factory=TestDefaults)
    output_path: str = DEFAULT_OUTPUT_PATH
    max_concurrency: int = 5


def load_config(
    config_path: str | Path | None = None,
    cwd: str | Path | None = None
) -> Config:
    """
    Load and validate the configuration file.

    Args:
        config_path: File path, relative paths resolve against ``cwd``
        cwd: Base directory (default: process working directory)

    Returns:
        Validated Config; OPENAI_API_KEY fills a missing OpenAI key

    Raises:
        ConfigError: If the file is unreadable, not JSON, or fails validation
    """
    base = Path(cwd) if cwd else Path.cwd()
    config_file = base / (config_path or DEFAULT_CONFIG_FILENAME)

    if not config_file.exists():
        logger.warning(f"Config file not found at {config_file}, using defaults")
        config = Config()
    else:
        try:
            raw = json.loads(config_file.read_text(encoding="utf-8"))
            config = Config.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Error loading config from {config_file}: {e}")
            raise ConfigError(f"Failed to load config: {e}") from e

    if not config.api_keys.openai and os.getenv("OPENAI_API_KEY"):
        config.api_keys.openai = os.getenv("OPENAI_API_KEY")

    return config

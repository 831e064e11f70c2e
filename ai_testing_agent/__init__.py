"""
AI Testing Agent

LLM-driven test generation and execution for JavaScript/TypeScript code.
Scan, Generate, Run, Report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

__version__ = "0.1.0"

from .config import Config, load_config
from .core import AgentManager, ConfigError, TestManager

logger = logging.getLogger(__name__)


@dataclass
class AgentContext:
    """Everything ``initialize_agent`` wires together."""
    agent_manager: AgentManager
    test_manager: TestManager
    config: Config


async def initialize_agent(
    config_path: str | Path | None = None,
    project_root: str | Path | None = None
) -> AgentContext:
    """
    Load configuration, initialize agents and build a TestManager.

    Raises:
        ConfigError: If the configuration cannot be loaded
    """
    config = load_config(config_path, cwd=project_root)

    agent_manager = AgentManager(config)
    await agent_manager.initialize()

    test_manager = TestManager(agent_manager, config, project_root=project_root)

    return AgentContext(
        agent_manager=agent_manager,
        test_manager=test_manager,
        config=config,
    )


__all__ = [
    "__version__",
    "initialize_agent",
    "AgentContext",
    "Config",
    "ConfigError",
    "load_config",
]

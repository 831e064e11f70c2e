"""Registry of initialized agents, built from configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import NoAgentAvailableError
from .base import Agent
from .openai_agent import OpenAIAgent

if TYPE_CHECKING:
    from ...config import Config

logger = logging.getLogger(__name__)


class AgentManager:
    """
    Builds and holds agents.

    Agents are kept in registration order; the first one is the default.
    """

    def __init__(self, config: Config):
        self._agents: dict[str, Agent] = {}
        self._config = config

    async def initialize(self) -> None:
        """Register the default OpenAI agent and every configured agent."""
        logger.info("Initializing agents")

        api_key = self._config.api_keys.openai

        if api_key:
            agent = OpenAIAgent("openai-default")
            await agent.init({"api_key": api_key, "model": self._config.default_model})
            self.register_agent(agent)
            logger.info("OpenAI agent initialized")
        else:
            logger.warning("OpenAI API key not found, skipping agent initialization")

        for agent_id, settings in self._config.agents.items():
            if settings.type != "openai":
                logger.warning(f"Unsupported agent type '{settings.type}' for {agent_id}, skipping")
                continue

            agent = OpenAIAgent(agent_id)
            try:
                await agent.init({
                    "api_key": api_key,
                    "model": settings.model or self._config.default_model,
                })
            except ValueError as e:
                logger.error(f"Failed to initialize agent {agent_id}: {e}")
                continue

            self.register_agent(agent)
            logger.info(f"Custom OpenAI agent {agent_id} initialized")

    def get_agent(self, agent_id: str) -> Agent | None:
        return self._agents.get(agent_id)

    def get_default_agent(self) -> Agent:
        """Return the first registered agent."""
        if not self._agents:
            raise NoAgentAvailableError("No agents available")
        return next(iter(self._agents.values()))

    def get_all_agents(self) -> list[Agent]:
        return list(self._agents.values())

    def register_agent(self, agent: Agent) -> None:
        self._agents[agent.id] = agent

    def unregister_agent(self, agent_id: str) -> bool:
        return self._agents.pop(agent_id, None) is not None

"""
Base interface for LLM agents.
Allows swapping the OpenAI agent for another provider.
"""

from abc import ABC, abstractmethod
from typing import Any


class Agent(ABC):
    """An LLM-backed worker registered with the AgentManager."""

    id: str
    name: str
    capabilities: list[str]

    @abstractmethod
    async def init(self, config: dict[str, Any]) -> None:
        """Prepare the agent (credentials, model)."""
        pass

    @abstractmethod
    async def execute_task(self, task: str, inputs: dict[str, Any]) -> dict[str, Any]:
        """Run a named task."""
        pass

    @abstractmethod
    async def generate_completion(self, prompt: str, **options: Any) -> str:
        """Single prompt in, raw completion text out."""
        pass

    @abstractmethod
    async def generate_embedding(self, text: str) -> list[float]:
        """Embedding vector for a text."""
        pass

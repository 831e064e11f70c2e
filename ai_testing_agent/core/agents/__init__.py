"""Agents - LLM client wrappers and their registry."""

from .base import Agent
from .manager import AgentManager
from .openai_agent import OpenAIAgent

__all__ = [
    "Agent",
    "AgentManager",
    "OpenAIAgent",
]

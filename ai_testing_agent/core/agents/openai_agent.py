"""OpenAI-backed agent: chat completions, embeddings and a few canned tasks."""

from __future__ import annotations

import json
import logging
from typing import Any

from openai import AsyncOpenAI

from ...constants import AI_MAX_TOKENS, AI_TEMPERATURE, DEFAULT_AI_MODEL, EMBEDDING_MODEL
from ..errors import GenerationError
from .base import Agent

logger = logging.getLogger(__name__)


class OpenAIAgent(Agent):
    """Agent wrapping the OpenAI chat and embedding endpoints."""

    def __init__(self, agent_id: str = "openai-default"):
        self.id = agent_id
        self.name = "OpenAI Agent"
        self.capabilities = ["code-generation", "test-generation", "code-analysis"]
        self.model = DEFAULT_AI_MODEL
        self.client: AsyncOpenAI | None = None

    async def init(self, config: dict[str, Any]) -> None:
        """Create the client (``api_key`` required, ``model`` optional)."""

        if not config.get("api_key"):
            raise ValueError("OpenAI API key is required")

        self.client = AsyncOpenAI(api_key=config["api_key"])

        if config.get("model"):
            self.model = config["model"]

        logger.info(f"OpenAI Agent initialized with model: {self.model}")

    def is_available(self) -> bool:
        """Check if the client has been initialized."""
        return self.client is not None

    async def execute_task(self, task: str, inputs: dict[str, Any]) -> dict[str, Any]:
        logger.info(f"Executing task: {task}")

        if task == "generate-test":
            return await self._generate_test(inputs.get("code", ""), inputs.get("test_type", "unit"))
        if task == "analyze-code":
            return await self._analyze_code(inputs.get("code", ""))
        if task == "suggest-improvements":
            return await self._suggest_improvements(inputs.get("code", ""), inputs.get("test_results"))

        raise ValueError(f"Unknown task: {task}")

    async def generate_completion(self, prompt: str, **options: Any) -> str:
        """
        Send one user prompt and return the reply text.

        Args:
            prompt: User message
            **options: model, temperature, max_tokens overrides

        Returns:
            Reply content ('' when the API returns none)

        Raises:
            GenerationError: If the client is missing or the API call fails
        """
        client = self._require_client()

        try:
            response = await client.chat.completions.create(
                model=options.get("model") or self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=options.get("temperature", AI_TEMPERATURE),
                max_tokens=options.get("max_tokens", AI_MAX_TOKENS),
            )
        except Exception as e:
            logger.error("Error generating completion", exc_info=True)
            raise GenerationError(f"Failed to generate completion: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def generate_embedding(self, text: str) -> list[float]:
        client = self._require_client()

        try:
            response = await client.embeddings.create(model=EMBEDDING_MODEL, input=text)
        except Exception as e:
            logger.error("Error generating embedding", exc_info=True)
            raise GenerationError(f"Failed to generate embedding: {e}") from e

        return list(response.data[0].embedding)

    # -------------------------------------------------------------------------
    # Tasks
    # -------------------------------------------------------------------------

    async def _generate_test(self, code: str, test_type: str) -> dict[str, Any]:
        prompt = f"""Generate a comprehensive {test_type} test for the following code:

```
{code}
```

The test should:
1. Cover all main functionality
2. Include edge cases
3. Follow best practices for testing
4. Use jest as the testing framework

Return the test code only, without explanations.
"""
        return {"test_code": await self.generate_completion(prompt)}

    async def _analyze_code(self, code: str) -> dict[str, Any]:
        prompt = f"""Analyze the following code for testability, potential bugs, and code quality issues:

```
{code}
```

Provide a structured JSON output with the following sections:
1. complexity (numeric score 1-10)
2. testability (numeric score 1-10)
3. potentialIssues (array of issues)
4. testingRecommendations (array of recommendations)
"""
        return self._parse_json_reply(await self.generate_completion(prompt), "analysis")

    async def _suggest_improvements(self, code: str, test_results: Any) -> dict[str, Any]:
        prompt = f"""Review the following code and its test results, then suggest improvements:

Code:
```
{code}
```

Test Results:
```
{json.dumps(test_results, indent=2, default=str)}
```

Provide a structured JSON output with the following sections:
1. codeImprovements (array of suggested code changes)
2. testImprovements (array of suggested test improvements)
3. priorityIssues (array of high-priority issues to address)
"""
        return self._parse_json_reply(await self.generate_completion(prompt), "suggestions")

    @staticmethod
    def _parse_json_reply(text: str, what: str) -> dict[str, Any]:
        """Decode a JSON reply; keep the raw text when the model ignored the format."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.error(f"Error parsing {what}: {text!r}")
            return {"error": f"Failed to parse {what}", "raw_response": text}

        if not isinstance(data, dict):
            return {"error": f"Failed to parse {what}", "raw_response": text}
        return data

    def _require_client(self) -> AsyncOpenAI:
        if self.client is None:
            raise GenerationError("OpenAI agent is not initialized")
        return self.client

"""AI test generator: LLM-proposed test cases rendered as framework test code."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..agents.base import Agent
from ..errors import AgentError, GenerationError
from ..scanner import ParsedModule, parse_file
from ..types import TestCase, TestConfig, TestFramework

logger = logging.getLogger(__name__)

FRAMEWORK_EXAMPLES: dict[TestFramework, str] = {
    TestFramework.JEST: """describe('Example suite', () => {
  test('should do something', () => {
    expect(1 + 1).toBe(2);
  });
});""",
    TestFramework.MOCHA: """describe('Example suite', function() {
  it('should do something', function() {
    expect(1 + 1).to.equal(2);
  });
});""",
    TestFramework.CYPRESS: """describe('Example suite', () => {
  it('should do something', () => {
    expect(1 + 1).to.equal(2);
  });
});""",
    TestFramework.PLAYWRIGHT: """test.describe('Example suite', () => {
  test('should do something', async ({ page }) => {
    expect(1 + 1).toBe(2);
  });
});""",
}


class AITestGenerator:
    """Scan a source file, ask the LLM for test cases, then for test code."""

    def __init__(self, agent: Agent):
        self.agent = agent

    def analyze_code(self, source_path: str | Path) -> ParsedModule:
        """Scan the source file for declarations."""
        logger.info(f"Analyzing code at {source_path}")

        try:
            return parse_file(source_path)
        except AgentError as e:
            raise GenerationError(f"Failed to analyze code: {e}") from e

    async def generate_test_cases(
        self,
        analysis: ParsedModule,
        config: TestConfig
    ) -> list[TestCase]:
        """Ask the LLM for a JSON array of test cases covering the file."""
        logger.info(f"Generating test cases for {analysis.file_path}")

        try:
            source = Path(analysis.file_path).read_text(encoding="utf-8")
            reply = await self.agent.generate_completion(
                self._build_test_case_prompt(analysis, source, config)
            )
        except (OSError, AgentError) as e:
            raise GenerationError(f"Failed to generate test cases: {e}") from e

        return self._parse_test_cases(reply)

    async def convert_to_test_code(
        self,
        test_cases: list[TestCase],
        framework: TestFramework
    ) -> str:
        """Ask the LLM to write the test cases as a test file for ``framework``."""
        framework = TestFramework(framework)
        logger.info(f"Converting test cases to {framework.value} code")

        try:
            reply = await self.agent.generate_completion(
                self._build_conversion_prompt(test_cases, framework)
            )
        except AgentError as e:
            raise GenerationError(f"Failed to convert to test code: {e}") from e

        return _strip_code_fence(reply)

    # -------------------------------------------------------------------------
    # Prompts
    # -------------------------------------------------------------------------

    def _build_test_case_prompt(
        self,
        analysis: ParsedModule,
        source: str,
        config: TestConfig
    ) -> str:
        declared = [f.name for f in analysis.functions] + [c.name for c in analysis.classes]

        return f"""Generate test cases for the following {config.type.value} test:

File: {Path(analysis.file_path).name}
Declarations: {", ".join(declared) or "(none found)"}

Code:
```typescript
{source}
```

Return a JSON array of test cases, where each test case has:
1. id: string
2. description: string
3. input: object with input parameters
4. expectedOutput: expected results

Focus on thorough coverage, edge cases, and negative testing.
"""

    def _build_conversion_prompt(
        self,
        test_cases: list[TestCase],
        framework: TestFramework
    ) -> str:
        cases_json = json.dumps([c.to_dict() for c in test_cases], indent=2, default=str)

        return f"""Convert these test cases to {framework.value} test code:

Test Cases:
```json
{cases_json}
```

Framework: {framework.value}

Example structure for this framework:
```typescript
{FRAMEWORK_EXAMPLES[framework]}
```

Return only the complete test file code in TypeScript.
"""

    # -------------------------------------------------------------------------
    # Reply parsing
    # -------------------------------------------------------------------------

    def _parse_test_cases(self, reply: str) -> list[TestCase]:
        text = _strip_code_fence(reply)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing test cases JSON: {reply!r}")
            raise GenerationError(f"Failed to generate test cases: Failed to parse test cases: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error(f"Test cases reply is not a JSON array of objects: {reply!r}")
            raise GenerationError(
                "Failed to generate test cases: Failed to parse test cases: expected a JSON array of objects"
            )

        return [TestCase.from_dict(item) for item in data]


def _strip_code_fence(text: str) -> str:
    """Return the body of the first Markdown code block, or the text itself."""
    if "```" not in text:
        return text.strip()

    start = text.find("```") + 3
    # Skip the language tag line
    newline = text.find("\n", start)
    if newline == -1:
        return text.strip()
    start = newline + 1

    end = text.find("```", start)
    if end == -1:
        return text[start:].strip()
    return text[start:end].strip()

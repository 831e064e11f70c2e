"""Tests for the AI test generator."""

import json

import pytest

from ai_testing_agent.core.errors import GenerationError
from ai_testing_agent.core.generators import AITestGenerator
from ai_testing_agent.core.scanner import parse_file
from ai_testing_agent.core.types import TestConfig as RunConfig
from ai_testing_agent.core.types import TestCase, TestFramework, TestType


CASES = [
    {"id": "tc1", "description": "adds positives", "input": {"a": 1, "b": 2}, "expectedOutput": 3},
    {"id": "tc2", "description": "adds negatives", "input": {"a": -1, "b": -2}, "expected_output": -3},
]


@pytest.fixture
def source_file(tmp_path):
    source = tmp_path / "calc.ts"
    source.write_text(
        "export function add(a: number, b: number): number { return a + b; }\n",
        encoding="utf-8",
    )
    return source


@pytest.fixture
def run_config(source_file):
    return RunConfig(
        type=TestType.UNIT,
        framework=TestFramework.JEST,
        source_path=str(source_file),
        test_path=str(source_file.with_name("calc.test.ts")),
    )


class TestAnalyzeCode:
    """Scanning the source file."""

    def test_scans_declarations(self, fake_agent, source_file):
        analysis = AITestGenerator(fake_agent).analyze_code(source_file)

        assert [f.name for f in analysis.functions] == ["add"]

    def test_missing_file(self, fake_agent, tmp_path):
        with pytest.raises(GenerationError, match="Failed to analyze code"):
            AITestGenerator(fake_agent).analyze_code(tmp_path / "missing.ts")


class TestGenerateTestCases:
    """Asking the LLM for test cases."""

    @pytest.mark.asyncio
    async def test_parses_json_array(self, fake_agent, source_file, run_config):
        fake_agent.generate_completion.return_value = json.dumps(CASES)

        cases = await AITestGenerator(fake_agent).generate_test_cases(parse_file(source_file), run_config)

        assert [c.id for c in cases] == ["tc1", "tc2"]
        assert cases[0].expected_output == 3
        assert cases[1].expected_output == -3
        assert cases[0].input == {"a": 1, "b": 2}

    @pytest.mark.asyncio
    async def test_prompt_includes_source_and_type(self, fake_agent, source_file, run_config):
        fake_agent.generate_completion.return_value = "[]"

        await AITestGenerator(fake_agent).generate_test_cases(parse_file(source_file), run_config)

        prompt = fake_agent.generate_completion.call_args.args[0]
        assert "unit test" in prompt
        assert "return a + b;" in prompt
        assert "Declarations: add" in prompt

    @pytest.mark.asyncio
    async def test_fenced_reply_accepted(self, fake_agent, source_file, run_config):
        fake_agent.generate_completion.return_value = "Here you go:\n```json\n" + json.dumps(CASES) + "\n```"

        cases = await AITestGenerator(fake_agent).generate_test_cases(parse_file(source_file), run_config)

        assert len(cases) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", ["not json", '{"id": "tc1"}', "[1, 2]"])
    async def test_bad_reply_raises(self, fake_agent, source_file, run_config, reply):
        fake_agent.generate_completion.return_value = reply

        with pytest.raises(GenerationError, match="Failed to generate test cases"):
            await AITestGenerator(fake_agent).generate_test_cases(parse_file(source_file), run_config)

    @pytest.mark.asyncio
    async def test_agent_failure_wrapped(self, fake_agent, source_file, run_config):
        fake_agent.generate_completion.side_effect = GenerationError("quota exceeded")

        with pytest.raises(GenerationError, match="Failed to generate test cases: quota exceeded"):
            await AITestGenerator(fake_agent).generate_test_cases(parse_file(source_file), run_config)


class TestConvertToTestCode:
    """Rendering test cases as framework code."""

    @pytest.mark.asyncio
    async def test_strips_code_fence(self, fake_agent):
        fake_agent.generate_completion.return_value = (
            "```typescript\nimport { add } from './calc';\ntest('adds', () => {});\n```"
        )

        code = await AITestGenerator(fake_agent).convert_to_test_code(
            [TestCase.from_dict(CASES[0])], TestFramework.JEST
        )

        assert code == "import { add } from './calc';\ntest('adds', () => {});"

    @pytest.mark.asyncio
    async def test_unfenced_reply_returned_stripped(self, fake_agent):
        fake_agent.generate_completion.return_value = "  test('x', () => {});\n"

        code = await AITestGenerator(fake_agent).convert_to_test_code([], "jest")

        assert code == "test('x', () => {});"

    @pytest.mark.asyncio
    async def test_prompt_uses_framework_example(self, fake_agent):
        fake_agent.generate_completion.return_value = ""

        await AITestGenerator(fake_agent).convert_to_test_code([], TestFramework.PLAYWRIGHT)

        prompt = fake_agent.generate_completion.call_args.args[0]
        assert "Framework: playwright" in prompt
        assert "test.describe(" in prompt

    @pytest.mark.asyncio
    async def test_unknown_framework(self, fake_agent):
        with pytest.raises(ValueError):
            await AITestGenerator(fake_agent).convert_to_test_code([], "jasmine")

"""Shared fixtures: fake runner processes and a scripted LLM agent."""

import json
import sys
import textwrap
from unittest.mock import AsyncMock, Mock

import pytest

from ai_testing_agent.config import ApiKeys, Config
from ai_testing_agent.core.agents import AgentManager


JEST_OUTPUT = {
    "numTotalTests": 2,
    "testResults": [
        {
            "name": "/project/test/calc.test.ts",
            "assertionResults": [
                {
                    "fullName": "Calculator adds numbers",
                    "title": "adds numbers",
                    "status": "passed",
                    "failureMessages": [],
                    "duration": 10,
                },
                {
                    "fullName": "Calculator divides by zero",
                    "title": "divides by zero",
                    "status": "failed",
                    "failureMessages": ["boom"],
                    "duration": 5,
                },
            ],
        }
    ],
}

PLAYWRIGHT_OUTPUT = {
    "suites": [
        {
            "title": "A",
            "specs": [],
            "suites": [
                {
                    "title": "B",
                    "specs": [
                        {
                            "title": "t1",
                            "tests": [{"status": "expected", "duration": 120, "errors": []}],
                        }
                    ],
                }
            ],
        }
    ]
}


@pytest.fixture
def fake_runner_command(tmp_path):
    """
    Build a command that behaves like a test runner binary.

    The returned factory writes a small Python script printing ``stdout`` /
    ``stderr`` and exiting with ``exit_code``; pass the result as a runner's
    ``command``.
    """
    counter = {"n": 0}

    def factory(stdout: str = "", exit_code: int = 0, stderr: str = "") -> tuple[str, ...]:
        counter["n"] += 1
        script = tmp_path / f"fake_runner_{counter['n']}.py"
        script.write_text(textwrap.dedent(f"""
            import sys
            sys.stdout.write({stdout!r})
            sys.stderr.write({stderr!r})
            sys.exit({exit_code})
        """), encoding="utf-8")
        return (sys.executable, str(script))

    return factory


@pytest.fixture
def jest_json() -> str:
    return json.dumps(JEST_OUTPUT)


@pytest.fixture
def playwright_json() -> str:
    return json.dumps(PLAYWRIGHT_OUTPUT)


@pytest.fixture
def fake_agent():
    """Agent stand-in whose completions are scripted per test."""
    agent = Mock()
    agent.id = "fake-agent"
    agent.name = "Fake Agent"
    agent.capabilities = ["test-generation"]
    agent.generate_completion = AsyncMock(return_value="")
    return agent


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(api_keys=ApiKeys(), output_path=str(tmp_path / "reports"))


@pytest.fixture
def agent_manager(config, fake_agent) -> AgentManager:
    manager = AgentManager(config)
    manager.register_agent(fake_agent)
    return manager

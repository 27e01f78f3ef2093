"""
Shared fixtures for agent loop tests.
"""

from typing import Any, List

import pytest

from agno_core.tools import EchoTool, Tool, ToolRegistry

ECHO_CALL = '{"action":"call_tool","name":"echo","arguments":{"text":"ping"}}'
FINAL = '{"action":"respond","content":"Echo complete."}'


class RecordingTool(Tool):
    """Echo-like tool that remembers every input it was called with."""

    def __init__(self, name: str = "recorder", result: Any = None):
        self.name = name
        self.description = "Records calls"
        self.result = result
        self.calls: List[Any] = []

    async def call(self, input: Any) -> Any:
        self.calls.append(input)
        return input if self.result is None else self.result


class FailingTool(Tool):
    """Tool that always raises."""

    name = "broken"
    description = "Always fails"

    def __init__(self):
        self.calls = 0

    async def call(self, input: Any) -> Any:
        self.calls += 1
        raise RuntimeError("disk on fire")


@pytest.fixture
def echo_registry():
    return ToolRegistry().register(EchoTool())


@pytest.fixture
def recording_tool():
    return RecordingTool(name="echo")


@pytest.fixture
def recording_registry(recording_tool):
    return ToolRegistry().register(recording_tool)

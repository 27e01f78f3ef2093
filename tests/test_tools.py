"""
Tests for tool implementations and the executor.
"""

import asyncio

import pytest

from agno_core.errors import ToolExecutionError, ToolNotFoundError
from agno_core.tools import EchoTool, FunctionTool, ToolExecutor, ToolRegistry

from conftest import FailingTool, RecordingTool


@pytest.mark.asyncio
async def test_echo_returns_input_unchanged():
    payload = {"text": "ping", "nested": {"list": [1, 2, {"x": None}]}}
    assert await EchoTool().call(payload) is payload


@pytest.mark.asyncio
async def test_function_tool_passes_dict_as_kwargs():
    tool = FunctionTool("add", "Add", lambda a, b: a + b)
    assert await tool.call({"a": 2, "b": 3}) == 5


@pytest.mark.asyncio
async def test_function_tool_passes_other_values_positionally():
    tool = FunctionTool("count", "Count items", len)
    assert await tool.call([1, 2, 3]) == 3


@pytest.mark.asyncio
async def test_function_tool_awaits_coroutines():
    async def shout(text):
        return text.upper()

    assert await FunctionTool("shout", "Shout", shout).call({"text": "hi"}) == "HI"


def test_function_tool_requires_name():
    with pytest.raises(ValueError):
        FunctionTool("", "nameless", print)


class TestToolExecutor:

    @pytest.mark.asyncio
    async def test_execute_passes_arguments_unmodified(self):
        tool = RecordingTool(name="rec")
        executor = ToolExecutor(ToolRegistry().register(tool))
        arguments = {"text": "ping"}

        assert await executor.execute("rec", arguments) == {"text": "ping"}
        assert tool.calls == [arguments]
        assert tool.calls[0] is arguments

    @pytest.mark.asyncio
    async def test_execute_missing_tool(self):
        executor = ToolExecutor(ToolRegistry())
        with pytest.raises(ToolNotFoundError):
            await executor.execute("ghost", {})

    @pytest.mark.asyncio
    async def test_execute_wraps_tool_errors(self):
        executor = ToolExecutor(ToolRegistry().register(FailingTool()))

        with pytest.raises(ToolExecutionError) as exc_info:
            await executor.execute("broken", {})

        assert exc_info.value.name == "broken"
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_execute_times_out(self):
        async def slow():
            await asyncio.sleep(5)

        registry = ToolRegistry().register_function("slow", "Sleeps", slow)
        executor = ToolExecutor(registry, default_timeout=0.05)

        with pytest.raises(ToolExecutionError, match="timed out"):
            await executor.execute("slow", {})

    @pytest.mark.asyncio
    async def test_tool_timeout_error_keeps_its_cause(self):
        async def upstream():
            raise TimeoutError("upstream socket timed out")

        registry = ToolRegistry().register_function("fetch", "Fetches", upstream)
        executor = ToolExecutor(registry, default_timeout=30.0)

        with pytest.raises(ToolExecutionError) as exc_info:
            await executor.execute("fetch", {})

        assert isinstance(exc_info.value.cause, TimeoutError)
        assert str(exc_info.value.cause) == "upstream socket timed out"
        assert "timed out after" not in str(exc_info.value)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            ("plain", "plain"),
            ({"text": "ping"}, '{"text": "ping"}'),
            ([1, 2], "[1, 2]"),
            (3, "3"),
        ],
    )
    def test_format_output(self, value, expected):
        assert ToolExecutor.format_output(value) == expected

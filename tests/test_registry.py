"""
Tests for tool registry
"""

import logging

import pytest

from agno_core.errors import ToolNotFoundError
from agno_core.tools import EchoTool, FunctionTool, ToolRegistry

from conftest import RecordingTool


class TestToolRegistry:

    def test_registry_init(self):
        registry = ToolRegistry()
        assert len(registry) == 0
        assert registry.get_tools() == []

    def test_register_and_resolve(self):
        registry = ToolRegistry()
        tool = EchoTool()

        assert registry.register(tool) is registry
        assert registry.resolve("echo") is tool
        assert "echo" in registry

    def test_resolve_missing(self):
        with pytest.raises(ToolNotFoundError) as exc_info:
            ToolRegistry().resolve("nope")
        assert exc_info.value.name == "nope"

    def test_get_missing_returns_none(self):
        assert ToolRegistry().get("nope") is None

    def test_duplicate_name_last_write_wins(self, caplog):
        registry = ToolRegistry()
        first = RecordingTool(name="dup")
        second = RecordingTool(name="dup")

        registry.register(first)
        with caplog.at_level(logging.WARNING, logger="agno_core.tools.registry"):
            registry.register(second)

        assert registry.resolve("dup") is second
        assert len(registry) == 1
        assert "already registered" in caplog.text

    def test_register_requires_name(self):
        with pytest.raises(ValueError):
            ToolRegistry().register(RecordingTool(name=""))

    def test_register_function(self):
        registry = ToolRegistry().register_function("add", "Add numbers", lambda a, b: a + b)

        tool = registry.resolve("add")
        assert isinstance(tool, FunctionTool)
        assert tool.description == "Add numbers"

    def test_unregister(self):
        registry = ToolRegistry().register(EchoTool())

        assert registry.unregister("echo") is True
        assert registry.unregister("echo") is False
        assert "echo" not in registry

    def test_names_and_describe(self):
        registry = ToolRegistry().register(EchoTool()).register(RecordingTool(name="rec"))

        assert registry.names() == ["echo", "rec"]
        assert registry.describe() == (
            "- echo: Echoes the inbound JSON back to the caller\n- rec: Records calls"
        )

    def test_resolve_does_not_touch_tool(self):
        tool = RecordingTool(name="rec")
        registry = ToolRegistry().register(tool)

        registry.resolve("rec")
        assert tool.calls == []
        assert tool.name == "rec"

    def test_membership(self):
        registry = ToolRegistry().register(EchoTool())
        assert "echo" in registry
        assert "ghost" not in registry

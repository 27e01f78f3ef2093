"""
Tool registry – stores tools by unique name.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..errors import ToolNotFoundError
from .base import FunctionTool, Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry mapping tool names to :class:`Tool` instances.

    Registering a name twice replaces the earlier tool and logs a warning.
    The registry is meant to be filled before the agent runs; registering
    while a run is dispatching is not supported.

    Example::

        registry = ToolRegistry()
        registry.register(EchoTool())
        registry.register_function(
            name="add",
            description="Add two numbers",
            function=lambda a, b: a + b,
        )
        tool = registry.resolve("echo")
    """

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, tool: Tool) -> "ToolRegistry":
        if not tool.name:
            raise ValueError(f"{tool!r} has no name")
        if tool.name in self._tools:
            logger.warning(f"Tool '{tool.name}' already registered, overwriting")
        self._tools[tool.name] = tool
        return self

    def register_function(
        self,
        name: str,
        description: str,
        function: Callable[..., Any],
    ) -> "ToolRegistry":
        """Register a plain or async function as a tool."""
        return self.register(FunctionTool(name=name, description=description, function=function))

    def unregister(self, name: str) -> bool:
        if name not in self._tools:
            return False
        del self._tools[name]
        return True

    # ── Lookup ───────────────────────────────────────────────────

    def resolve(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def get_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def names(self) -> List[str]:
        return list(self._tools)

    def describe(self) -> str:
        """One ``- name: description`` line per tool, for prompts."""
        return "\n".join(f"- {tool.name}: {tool.description}" for tool in self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

"""
agno_core – a tool-calling agent loop.

A language model's completion is read as a directive: either call a named
tool with arguments, or respond with the final answer. The agent loops until
it gets an answer, an error, or hits its iteration cap.

Usage::

    import asyncio
    from agno_core import Agent, StubModel, ToolRegistry
    from agno_core.tools import EchoTool

    model = StubModel([
        '{"action":"call_tool","name":"echo","arguments":{"text":"ping"}}',
        '{"action":"respond","content":"Echo complete."}',
    ])
    agent = Agent(model).with_tools(ToolRegistry().register(EchoTool()))
    print(asyncio.run(agent.respond("say ping")))
"""

__version__ = "0.1.0"

from .agent import Agent
from .config import AgentConfig, LLMConfig
from .directive import CallTool, Directive, Respond, parse_directive
from .errors import (
    AgentCancelledError,
    AgnoError,
    DirectiveParseError,
    LanguageModelError,
    LoopLimitExceededError,
    ToolExecutionError,
    ToolNotFoundError,
)
from .llm import LanguageModel, StubModel, create_language_model
from .models import AgentResponse, AgentState, ToolInvocation
from .sync import SyncAgent
from .tools import Tool, ToolRegistry

__all__ = [
    "Agent",
    "SyncAgent",
    "AgentConfig",
    "LLMConfig",
    "AgentResponse",
    "AgentState",
    "ToolInvocation",
    "CallTool",
    "Respond",
    "Directive",
    "parse_directive",
    "LanguageModel",
    "StubModel",
    "create_language_model",
    "Tool",
    "ToolRegistry",
    "AgnoError",
    "LanguageModelError",
    "DirectiveParseError",
    "ToolNotFoundError",
    "ToolExecutionError",
    "LoopLimitExceededError",
    "AgentCancelledError",
]

"""
Exception hierarchy for the agent loop.

Every failure surfaced by ``Agent.respond`` is an :class:`AgnoError`, so callers
can catch the whole family or a single stage.
"""

from typing import Any, Optional


class AgnoError(Exception):
    """Base class for all agent loop errors."""


class LanguageModelError(AgnoError):
    """The language model could not produce a completion."""


class DirectiveParseError(AgnoError):
    """A completion was not a valid directive."""

    def __init__(self, message: str, field: Optional[str] = None, raw: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.raw = raw


class ToolNotFoundError(AgnoError):
    """A directive named a tool that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Tool not found: {name}")
        self.name = name


class ToolExecutionError(AgnoError):
    """A tool was found but raised or timed out while running."""

    def __init__(self, name: str, cause: Any):
        super().__init__(f"Tool '{name}' failed: {cause}")
        self.name = name
        self.cause = cause


class LoopLimitExceededError(AgnoError):
    """The iteration cap was reached without a final answer."""

    def __init__(self, limit: int):
        super().__init__(f"No final answer after {limit} iterations")
        self.limit = limit


class AgentCancelledError(AgnoError):
    """The caller cancelled the run between iterations."""

    def __init__(self, iterations: int):
        super().__init__(f"Agent run cancelled after {iterations} iterations")
        self.iterations = iterations

"""
Data models for the agent loop.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class AgentState(str, Enum):
    AWAITING_MODEL = "awaiting_model"
    PARSING_DIRECTIVE = "parsing_directive"
    DISPATCHING = "dispatching"
    RESPONDING = "responding"
    FAILED = "failed"


@dataclass
class ToolInvocation:
    """One tool dispatch made during a run."""

    name: str
    arguments: Any
    output: Any = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "arguments": self.arguments,
            "output": self.output,
            "error": self.error,
        }


@dataclass
class AgentResponse:
    """Detailed result of a successful run."""

    content: str
    iterations: int = 0
    tool_calls_made: List[ToolInvocation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "iterations": self.iterations,
            "tool_calls": [tc.to_dict() for tc in self.tool_calls_made],
        }

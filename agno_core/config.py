"""
Configuration classes for the agent loop and its providers.
"""

import os
from dataclasses import dataclass
from typing import Optional

TOOL_ERROR_POLICIES = ("raise", "observe")

_API_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}

_API_BASE_ENV = {
    "openai": "OPENAI_BASE_URL",
    "anthropic": "ANTHROPIC_BASE_URL",
}

DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "anthropic": "claude-sonnet-4-20250514",
}


@dataclass
class LLMConfig:
    """Configuration for connecting to an LLM provider."""

    provider_type: str  # "openai", "anthropic"
    api_key: str
    model_name: str
    api_base: Optional[str] = None
    temperature: float = 0.0
    max_tokens: int = 1024

    def __post_init__(self):
        if not self.provider_type:
            raise ValueError("provider_type is required")
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.model_name:
            raise ValueError("model_name is required")

    @classmethod
    def from_env(cls, provider: Optional[str] = None) -> "LLMConfig":
        """Build a config from ``AGNO_*`` and provider-specific variables.

        ``.env`` loading is left to the caller (the CLI does it).
        """
        provider = (provider or os.getenv("AGNO_PROVIDER") or "openai").strip().lower()
        if provider not in _API_KEY_ENV:
            raise ValueError(
                f"Unknown LLM provider: {provider}. Available: {', '.join(_API_KEY_ENV)}"
            )
        return cls(
            provider_type=provider,
            api_key=os.getenv(_API_KEY_ENV[provider], ""),
            model_name=os.getenv("AGNO_MODEL") or DEFAULT_MODELS[provider],
            api_base=os.getenv(_API_BASE_ENV[provider]) or None,
        )


@dataclass
class AgentConfig:
    """Configuration for agent execution behavior."""

    max_iterations: int = 10
    tool_timeout: float = 30.0
    # "raise": a failing tool aborts the run with ToolExecutionError.
    # "observe": the error is shown to the model and the loop continues.
    tool_error_policy: str = "raise"

    def __post_init__(self):
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.tool_timeout <= 0:
            raise ValueError("tool_timeout must be positive")
        if self.tool_error_policy not in TOOL_ERROR_POLICIES:
            raise ValueError(
                f"tool_error_policy must be one of {TOOL_ERROR_POLICIES}, "
                f"got {self.tool_error_policy!r}"
            )

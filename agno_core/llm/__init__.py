"""
Language model layer.

Quick start::

    from agno_core.llm import create_language_model

    llm = create_language_model("openai", api_key="sk-...", model="gpt-4o")
    text = await llm.complete("Say hello as a respond directive.")
"""

from typing import Optional

from ..config import DEFAULT_MODELS, LLMConfig
from .base import LanguageModel, StubModel
from .services import AnthropicService, OpenAIService


def create_language_model(
    provider: str,
    api_key: str,
    model: Optional[str] = None,
    api_base: Optional[str] = None,
    **kwargs,
) -> LanguageModel:
    """Factory: create a language model by provider name.

    Args:
        provider: ``"openai"`` or ``"anthropic"``.
        api_key: API key for the provider.
        model: Model identifier (uses provider default when *None*).
        api_base: Optional custom API base URL.

    Returns:
        A ready-to-use :class:`LanguageModel` instance.
    """
    provider = provider.lower()

    if provider == "openai":
        return OpenAIService(
            api_key=api_key, model=model or DEFAULT_MODELS["openai"], api_base=api_base, **kwargs
        )
    elif provider == "anthropic":
        return AnthropicService(
            api_key=api_key,
            model=model or DEFAULT_MODELS["anthropic"],
            api_base=api_base,
            **kwargs,
        )
    else:
        raise ValueError(
            f"Unknown LLM provider: {provider}. Available: openai, anthropic"
        )


def create_language_model_from_config(config: LLMConfig, **kwargs) -> LanguageModel:
    return create_language_model(
        provider=config.provider_type,
        api_key=config.api_key,
        model=config.model_name,
        api_base=config.api_base,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        **kwargs,
    )


__all__ = [
    "create_language_model",
    "create_language_model_from_config",
    "LanguageModel",
    "StubModel",
    "OpenAIService",
    "AnthropicService",
]

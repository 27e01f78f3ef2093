from .openai import OpenAIService
from .anthropic import AnthropicService

__all__ = ["OpenAIService", "AnthropicService"]

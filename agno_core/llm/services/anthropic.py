"""
Anthropic messages language model.
"""

import logging
from typing import Any, Dict, List, Optional

from ...config import LLMConfig
from ...errors import LanguageModelError
from ..base import LanguageModel

logger = logging.getLogger(__name__)

try:
    import anthropic

    ANTHROPIC_AVAILABLE = True
except ImportError:
    ANTHROPIC_AVAILABLE = False


class AnthropicService(LanguageModel):
    """Anthropic Claude messages API used as a plain text completer."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        api_base: Optional[str] = None,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 1024,
        client: Any = None,
    ):
        if not api_key and client is None:
            raise ValueError("api_key is required")
        self.model = model
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens

        if client is not None:
            self.client = client
            return
        if not ANTHROPIC_AVAILABLE:
            raise ImportError("anthropic package required. Run: pip install anthropic")

        client_kwargs: Dict[str, Any] = {"api_key": api_key}
        if api_base:
            client_kwargs["base_url"] = api_base
        self.client = anthropic.AsyncAnthropic(**client_kwargs)

    @classmethod
    def from_config(cls, config: LLMConfig, **kwargs) -> "AnthropicService":
        return cls(
            api_key=config.api_key,
            model=config.model_name,
            api_base=config.api_base,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **kwargs,
        )

    @staticmethod
    def _extract_text(content_blocks: List[Any]) -> Optional[str]:
        parts = [
            block.text
            for block in content_blocks
            if getattr(block, "type", None) == "text"
        ]
        return "".join(parts) if parts else None

    async def complete(self, prompt: str) -> str:
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        if self.system_prompt:
            params["system"] = self.system_prompt

        try:
            response = await self.client.messages.create(**params)
        except Exception as e:
            logger.error(f"Anthropic request failed: {e}")
            raise LanguageModelError(f"Anthropic request failed: {e}") from e

        content = self._extract_text(response.content)
        if content is None:
            raise LanguageModelError("Anthropic returned no text content")
        return content

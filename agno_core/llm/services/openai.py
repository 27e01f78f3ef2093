"""
OpenAI chat-completion language model.
"""

import logging
from typing import Any, Dict, List, Optional

from ...config import LLMConfig
from ...errors import LanguageModelError
from ..base import LanguageModel

logger = logging.getLogger(__name__)

try:
    from openai import AsyncOpenAI

    OPENAI_AVAILABLE = True
except ImportError:
    OPENAI_AVAILABLE = False


class OpenAIService(LanguageModel):
    """
    OpenAI chat completions used as a plain text completer.

    The prompt is sent as a single user message. With ``json_mode`` enabled
    (the default) the API is asked for a JSON object, which keeps completions
    inside the directive format.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        api_base: Optional[str] = None,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 1024,
        json_mode: bool = True,
        organization: Optional[str] = None,
        client: Any = None,
    ):
        if not api_key and client is None:
            raise ValueError("api_key is required")
        self.model = model
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.json_mode = json_mode

        if client is not None:
            self.client = client
            return
        if not OPENAI_AVAILABLE:
            raise ImportError("openai package required. Run: pip install openai")

        client_kwargs: Dict[str, Any] = {"api_key": api_key}
        if api_base:
            client_kwargs["base_url"] = api_base
        if organization:
            client_kwargs["organization"] = organization
        self.client = AsyncOpenAI(**client_kwargs)

    @classmethod
    def from_config(cls, config: LLMConfig, **kwargs) -> "OpenAIService":
        return cls(
            api_key=config.api_key,
            model=config.model_name,
            api_base=config.api_base,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **kwargs,
        )

    def _to_api_messages(self, prompt: str) -> List[Dict[str, str]]:
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    async def complete(self, prompt: str) -> str:
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": self._to_api_messages(prompt),
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        if self.json_mode:
            params["response_format"] = {"type": "json_object"}

        try:
            response = await self.client.chat.completions.create(**params)
        except Exception as e:
            logger.error(f"OpenAI request failed: {e}")
            raise LanguageModelError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise LanguageModelError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LanguageModelError("OpenAI returned an empty completion")
        return content

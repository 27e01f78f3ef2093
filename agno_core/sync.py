"""
Blocking adapter around :class:`Agent`.

For callers that are not running an event loop (scripts, notebooks without
top-level await, foreign runtimes). The adapter owns a private event loop and
re-raises the agent's own exceptions unchanged.
"""

import asyncio
import logging
import threading
from typing import Optional

from .agent import Agent
from .config import AgentConfig, LLMConfig
from .llm import create_language_model_from_config
from .llm.base import LanguageModel
from .tools import ToolRegistry

logger = logging.getLogger(__name__)


class SyncAgent:
    """
    Synchronous facade: ``run`` blocks until the loop finishes.

    Example::

        with SyncAgent(model=StubModel([...]), tools=registry) as agent:
            print(agent.run("say ping"))

    When ``model`` is omitted an OpenAI model is built from the environment
    (see :meth:`LLMConfig.from_env`). Calls are serialized; a second thread
    waits for the first run to finish.
    """

    def __init__(
        self,
        model: Optional[LanguageModel] = None,
        description: Optional[str] = None,
        tools: Optional[ToolRegistry] = None,
        config: Optional[AgentConfig] = None,
    ):
        if model is None:
            model = create_language_model_from_config(LLMConfig.from_env("openai"))
        self.agent = Agent(model, tools=tools, system_prompt=description or "", config=config)
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()

    def run(self, message: str) -> str:
        """Get the response as a string."""
        with self._lock:
            if self._loop.is_closed():
                raise RuntimeError("SyncAgent is closed")
            return self._loop.run_until_complete(self.agent.respond(message))

    def print_response(self, message: str) -> None:
        """Get the response from the model and print it."""
        print(self.run(message))

    def close(self) -> None:
        with self._lock:
            if not self._loop.is_closed():
                self._loop.close()
                logger.debug("SyncAgent event loop closed")

    def __enter__(self) -> "SyncAgent":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

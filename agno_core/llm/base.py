"""
Language model abstraction and a deterministic scripted model.

Defines the single-method :class:`LanguageModel` contract that the agent loop
depends on, and :class:`StubModel`, which replays pre-scripted completions.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, List

from ..errors import LanguageModelError

logger = logging.getLogger(__name__)


class LanguageModel(ABC):
    """
    Minimal abstraction around a text completion provider.

    Implementations must raise :class:`LanguageModelError` on failure and be
    safe to call repeatedly. Stateful implementations that may be shared
    between agents serialize access themselves.
    """

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        ...


class StubModel(LanguageModel):
    """
    A deterministic model used for tests and demos.

    Each call to :meth:`complete` returns the next scripted response, whatever
    the prompt says. Once the script is exhausted every call fails.

    Example::

        model = StubModel([
            '{"action":"respond","content":"hi"}',
        ])
        await model.complete("anything")  # -> '{"action":"respond",...}'
        await model.complete("anything")  # raises LanguageModelError
    """

    def __init__(self, responses: Iterable[str]):
        self._responses = deque(responses)
        self._lock = threading.Lock()
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        with self._lock:
            self.prompts.append(prompt)
            if not self._responses:
                raise LanguageModelError("StubModel ran out of scripted responses")
            response = self._responses.popleft()
        logger.debug(f"StubModel returning scripted response ({len(self._responses)} left)")
        return response

    @property
    def remaining(self) -> int:
        with self._lock:
            return len(self._responses)

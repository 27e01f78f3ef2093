"""
Tool contract and a callable-backed implementation.
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable


class Tool(ABC):
    """
    A named capability the agent can dispatch to.

    Subclasses expose ``name`` and ``description`` and implement :meth:`call`.
    Input and output are JSON-like values (dicts, lists, scalars).
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    async def call(self, input: Any) -> Any:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionTool(Tool):
    """
    Wrap a plain or async function as a :class:`Tool`.

    Dict input is passed as keyword arguments, anything else as a single
    positional argument. Synchronous functions run in a worker thread so a
    slow tool does not block the event loop.
    """

    def __init__(self, name: str, description: str, function: Callable[..., Any]):
        if not name:
            raise ValueError("tool name is required")
        self.name = name
        self.description = description
        self.function = function

    async def call(self, input: Any) -> Any:
        if isinstance(input, dict):
            args, kwargs = (), input
        else:
            args, kwargs = (input,), {}

        if inspect.iscoroutinefunction(self.function):
            return await self.function(*args, **kwargs)
        return await asyncio.to_thread(self.function, *args, **kwargs)

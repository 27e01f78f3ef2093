"""
Tool executor – resolves and runs tool calls with a timeout.
"""

import asyncio
import json
import logging
from typing import Any, Optional

from ..errors import ToolExecutionError
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Runs a tool by name, turning its failures into :class:`ToolExecutionError`.

    Resolution errors (:class:`ToolNotFoundError`) are raised before anything
    is invoked. Task cancellation is never converted.

    Example::

        executor = ToolExecutor(registry)
        output = await executor.execute("echo", {"text": "ping"})
    """

    def __init__(self, registry: ToolRegistry, default_timeout: float = 30.0):
        self.registry = registry
        self.default_timeout = default_timeout

    async def execute(self, name: str, arguments: Any, timeout: Optional[float] = None) -> Any:
        timeout = timeout or self.default_timeout
        tool = self.registry.resolve(name)

        logger.debug(f"Dispatching tool '{name}'")
        task = asyncio.ensure_future(tool.call(arguments))
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if not done:
            # Only the executor's own budget counts as a timeout; a tool raising
            # TimeoutError itself keeps its exception as the cause.
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
            raise ToolExecutionError(name, f"timed out after {timeout}s")

        try:
            return task.result()
        except Exception as e:
            logger.debug(f"Tool '{name}' raised {type(e).__name__}: {e}")
            raise ToolExecutionError(name, e) from e

    @staticmethod
    def format_output(result: Any) -> str:
        """Serialize a tool result for the transcript."""
        if result is None:
            return "null"
        if isinstance(result, str):
            return result
        try:
            return json.dumps(result, default=str)
        except (TypeError, ValueError):
            return str(result)

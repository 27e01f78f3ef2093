from typing import Any

from .base import Tool


class EchoTool(Tool):
    """Returns its input unchanged."""

    name = "echo"
    description = "Echoes the inbound JSON back to the caller"

    async def call(self, input: Any) -> Any:
        return input

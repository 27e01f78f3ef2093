from .base import FunctionTool, Tool
from .echo import EchoTool
from .executor import ToolExecutor
from .registry import ToolRegistry

__all__ = ["Tool", "FunctionTool", "EchoTool", "ToolExecutor", "ToolRegistry"]

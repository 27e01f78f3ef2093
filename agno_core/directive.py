"""
Directive protocol between the agent loop and the language model.

Every completion must be a single JSON object in one of two shapes::

    {"action": "call_tool", "name": "<tool-name>", "arguments": {...}}
    {"action": "respond", "content": "<text>"}
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from .errors import DirectiveParseError

CALL_TOOL = "call_tool"
RESPOND = "respond"


@dataclass(frozen=True)
class CallTool:
    """Ask the agent to invoke a registered tool."""

    name: str
    arguments: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"action": CALL_TOOL, "name": self.name, "arguments": self.arguments}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


@dataclass(frozen=True)
class Respond:
    """Final answer for the user."""

    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"action": RESPOND, "content": self.content}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


Directive = Union[CallTool, Respond]


def _strip_code_fence(text: str) -> str:
    # Models often wrap JSON in ```json ... ``` even when told not to.
    if not text.startswith("```"):
        return text
    body = text[len("```"):]
    if body.startswith("json"):
        body = body[len("json"):]
    if body.endswith("```"):
        body = body[: -len("```")]
    return body.strip()


def _require_str(obj: Dict[str, Any], field: str, raw: str) -> str:
    if field not in obj:
        raise DirectiveParseError(f"Directive missing required field '{field}'", field=field, raw=raw)
    value = obj[field]
    if not isinstance(value, str):
        raise DirectiveParseError(
            f"Directive field '{field}' must be a string, got {type(value).__name__}",
            field=field,
            raw=raw,
        )
    return value


def parse_directive(text: str) -> Directive:
    """Decode a model completion into a :class:`CallTool` or :class:`Respond`.

    Raises:
        DirectiveParseError: if the text is not a JSON object, the ``action``
            field is missing or unknown, or a required field is missing.
    """
    if not isinstance(text, str):
        raise DirectiveParseError(f"Completion must be text, got {type(text).__name__}")

    raw = text.strip()
    try:
        obj = json.loads(_strip_code_fence(raw))
    except (json.JSONDecodeError, RecursionError) as e:
        raise DirectiveParseError(f"Completion is not valid JSON: {raw[:200]!r}", raw=text) from e
    if not isinstance(obj, dict):
        raise DirectiveParseError(f"Completion is not a JSON object: {raw[:200]!r}", raw=text)

    action = _require_str(obj, "action", text)
    if action == CALL_TOOL:
        name = _require_str(obj, "name", text)
        if "arguments" not in obj:
            raise DirectiveParseError(
                "Directive missing required field 'arguments'", field="arguments", raw=text
            )
        return CallTool(name=name, arguments=obj["arguments"])
    if action == RESPOND:
        return Respond(content=_require_str(obj, "content", text))

    raise DirectiveParseError(f"Unknown directive action: {action!r}", field="action", raw=text)

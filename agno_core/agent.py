"""
Agent – the tool-calling loop.

Each iteration:
1. Sends the working transcript to the language model
2. Parses the completion as a directive
3. Either returns the final answer or runs the requested tool
4. Appends the tool output as an observation and loops
"""

import asyncio
import logging
from typing import List, Optional

from .config import AgentConfig
from .directive import CallTool, Respond, parse_directive
from .errors import AgentCancelledError, AgnoError, LoopLimitExceededError, ToolExecutionError
from .llm.base import LanguageModel
from .models import AgentResponse, AgentState, ToolInvocation
from .tools import ToolExecutor, ToolRegistry

logger = logging.getLogger(__name__)

PROTOCOL_INSTRUCTIONS = """\
Reply with exactly one JSON object and nothing else.
To call a tool:
{"action":"call_tool","name":"<tool-name>","arguments":{...}}
To give your final answer:
{"action":"respond","content":"<text>"}"""


class Agent:
    """
    Drives a language model and a tool registry until a final answer.

    Example::

        from agno_core import Agent, StubModel, ToolRegistry
        from agno_core.tools import EchoTool

        model = StubModel([
            '{"action":"call_tool","name":"echo","arguments":{"text":"ping"}}',
            '{"action":"respond","content":"Echo complete."}',
        ])
        tools = ToolRegistry().register(EchoTool())
        agent = Agent(model).with_tools(tools)
        reply = await agent.respond("say ping")  # "Echo complete."

    The agent keeps no state between calls, so concurrent ``respond`` calls
    are fine as long as the model and tools allow it.
    """

    def __init__(
        self,
        model: LanguageModel,
        tools: Optional[ToolRegistry] = None,
        system_prompt: str = "",
        config: Optional[AgentConfig] = None,
        name: str = "agent",
    ):
        self.model = model
        self.tools = tools if tools is not None else ToolRegistry()
        self.system_prompt = system_prompt
        self.config = config or AgentConfig()
        self.name = name

    # ── Builders ─────────────────────────────────────────────────

    def with_tools(self, tools: ToolRegistry) -> "Agent":
        self.tools = tools
        return self

    def with_system_prompt(self, system_prompt: str) -> "Agent":
        self.system_prompt = system_prompt
        return self

    # ── Main entry points ────────────────────────────────────────

    async def respond(self, message: str, cancel_event: Optional[asyncio.Event] = None) -> str:
        """Run the loop for one user message and return the final answer."""
        response = await self.run(message, cancel_event)
        return response.content

    async def run(
        self, message: str, cancel_event: Optional[asyncio.Event] = None
    ) -> AgentResponse:
        """
        Run the loop for one user message.

        Args:
            message: User input.
            cancel_event: Optional event; when set, the run stops before the
                next iteration with :class:`AgentCancelledError`.

        Returns:
            AgentResponse with the final content and the tool calls made.

        Raises:
            AgnoError: the subclass names the stage that failed.
        """
        executor = ToolExecutor(self.tools, default_timeout=self.config.tool_timeout)
        transcript: List[str] = [f"User: {message}"]
        tool_calls_made: List[ToolInvocation] = []
        state = AgentState.AWAITING_MODEL
        iterations = 0

        try:
            while iterations < self.config.max_iterations:
                if cancel_event is not None and cancel_event.is_set():
                    raise AgentCancelledError(iterations)
                iterations += 1

                state = self._transition(state, AgentState.AWAITING_MODEL)
                completion = await self.model.complete(self._render_prompt(transcript))

                state = self._transition(state, AgentState.PARSING_DIRECTIVE)
                directive = parse_directive(completion)

                if isinstance(directive, Respond):
                    state = self._transition(state, AgentState.RESPONDING)
                    return AgentResponse(
                        content=directive.content,
                        iterations=iterations,
                        tool_calls_made=tool_calls_made,
                    )

                if not isinstance(directive, CallTool):
                    raise TypeError(f"Unhandled directive: {directive!r}")
                state = self._transition(state, AgentState.DISPATCHING)
                transcript.append(f"Assistant: {directive.to_json()}")
                invocation = ToolInvocation(name=directive.name, arguments=directive.arguments)
                tool_calls_made.append(invocation)
                try:
                    invocation.output = await executor.execute(directive.name, directive.arguments)
                except ToolExecutionError as e:
                    invocation.error = str(e.cause)
                    if self.config.tool_error_policy != "observe":
                        raise
                    transcript.append(f"Observation from {directive.name} (error): {e.cause}")
                    continue
                transcript.append(
                    f"Observation from {directive.name}: {executor.format_output(invocation.output)}"
                )

            raise LoopLimitExceededError(self.config.max_iterations)

        except AgnoError as e:
            self._transition(state, AgentState.FAILED)
            logger.error(f"Agent '{self.name}' failed: {e}")
            raise

    # ── Helpers ──────────────────────────────────────────────────

    def _transition(self, current: AgentState, target: AgentState) -> AgentState:
        logger.debug(f"Agent '{self.name}': {current.value} -> {target.value}")
        return target

    def _render_prompt(self, transcript: List[str]) -> str:
        sections = []
        if self.system_prompt:
            sections.append(self.system_prompt)
        if len(self.tools) > 0:
            sections.append("You can use the following tools:\n" + self.tools.describe())
        sections.append(PROTOCOL_INSTRUCTIONS)
        sections.append("Conversation:\n" + "\n".join(transcript))
        return "\n\n".join(sections)

"""
Tests for the blocking adapter.
"""

import pytest

from agno_core import StubModel, SyncAgent
from agno_core.errors import LanguageModelError, ToolNotFoundError
from agno_core.directive import CallTool

from conftest import ECHO_CALL, FINAL


def test_run_matches_async_respond(echo_registry):
    with SyncAgent(model=StubModel([ECHO_CALL, FINAL]), tools=echo_registry) as agent:
        assert agent.run("say ping") == "Echo complete."


def test_description_becomes_system_prompt():
    model = StubModel([FINAL])
    with SyncAgent(model=model, description="You are a parrot.") as agent:
        agent.run("hi")
    assert model.prompts[0].startswith("You are a parrot.")


def test_errors_keep_their_type(echo_registry):
    missing = CallTool(name="ghost", arguments={}).to_json()
    with SyncAgent(model=StubModel([missing]), tools=echo_registry) as agent:
        with pytest.raises(ToolNotFoundError):
            agent.run("boo")
        with pytest.raises(LanguageModelError):
            agent.run("again")


def test_print_response(capsys):
    with SyncAgent(model=StubModel([FINAL])) as agent:
        agent.print_response("hi")
    assert capsys.readouterr().out == "Echo complete.\n"


def test_closed_agent_refuses_to_run():
    agent = SyncAgent(model=StubModel([FINAL]))
    agent.close()
    agent.close()
    with pytest.raises(RuntimeError, match="closed"):
        agent.run("hi")


def test_default_model_needs_credentials(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ValueError):
        SyncAgent()

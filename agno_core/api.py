from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException

from .agent import Agent
from .errors import (
    AgnoError,
    DirectiveParseError,
    LanguageModelError,
    LoopLimitExceededError,
    ToolExecutionError,
    ToolNotFoundError,
)

# Failures caused by the model (or its provider) are upstream errors.
_ERROR_STATUS = {
    LanguageModelError: 502,
    DirectiveParseError: 502,
    ToolNotFoundError: 502,
    ToolExecutionError: 500,
    LoopLimitExceededError: 508,
}


def _status_for(error: AgnoError) -> int:
    for error_type, status in _ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status
    return 500


def create_app(agent: Agent) -> FastAPI:
    app = FastAPI(title="Agno Agent API")

    @app.get("/health", summary="Health check")
    async def health() -> Dict[str, str]:
        return {"status": "healthy"}

    @app.get("/tools", summary="List registered tools")
    async def tools() -> List[Dict[str, str]]:
        return [{"name": t.name, "description": t.description} for t in agent.tools.get_tools()]

    @app.post("/respond", summary="Run the agent on one message")
    async def respond(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
        message = payload.get("message")
        if not isinstance(message, str) or not message.strip():
            raise HTTPException(status_code=400, detail="message must be a non-empty string")
        try:
            response = await agent.run(message)
        except AgnoError as e:
            raise HTTPException(
                status_code=_status_for(e),
                detail={"error": type(e).__name__, "message": str(e)},
            ) from e
        return response.to_dict()

    return app

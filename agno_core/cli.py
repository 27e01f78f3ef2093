#!/usr/bin/env python3
"""
Command line entry point.

    agno echo                      # scripted demo, no network
    agno ask "What is 2+2?"        # real provider, credentials from env/.env
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from .agent import Agent
from .config import AgentConfig, LLMConfig
from .directive import CallTool, Respond
from .errors import AgnoError
from .llm import StubModel, create_language_model_from_config
from .tools import EchoTool, ToolRegistry


def _echo_demo() -> str:
    # The stub model produces two directives:
    # 1. Ask to call the `echo` tool with a JSON payload.
    # 2. Respond with the final assistant message.
    scripted = [
        CallTool(name="echo", arguments={"text": "ping"}).to_json(),
        Respond(content="Echo complete.").to_json(),
    ]
    agent = Agent(StubModel(scripted)).with_tools(ToolRegistry().register(EchoTool()))
    return asyncio.run(agent.respond("say ping"))


def _ask(args: argparse.Namespace) -> str:
    config = LLMConfig.from_env(args.provider)
    if args.model:
        config.model_name = args.model
    logger.info(f"Provider: {config.provider_type}  Model: {config.model_name}")

    agent = Agent(
        create_language_model_from_config(config),
        tools=ToolRegistry().register(EchoTool()),
        system_prompt=args.system or "",
        config=AgentConfig(max_iterations=args.max_iterations),
    )
    return asyncio.run(agent.respond(args.message))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agno", description="Tool-calling agent loop")
    parser.add_argument("--env-file", default=".env", help="dotenv file to load")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("echo", help="Run the scripted echo demo")

    ask = sub.add_parser("ask", help="Ask a real provider")
    ask.add_argument("message")
    ask.add_argument("--provider", choices=["openai", "anthropic"], default=None)
    ask.add_argument("--model", default=None)
    ask.add_argument("--max-iterations", type=int, default=AgentConfig.max_iterations)
    ask.add_argument("--system", default=None, help="System prompt")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    env_file = Path(args.env_file)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    try:
        if args.command == "echo":
            reply = _echo_demo()
        else:
            reply = _ask(args)
    except AgnoError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    print(f"Agent reply: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

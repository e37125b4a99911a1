# =============================================================================
# agent/dj_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that talks to the user and calls the
#   Spotify tools.
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────────┐
#   │  Google ADK Agent            │
#   │  prompt (agent/prompt.py)    │
#   │  LLM via LiteLlm/OpenRouter  │
#   └──────────────┬───────────────┘
#                  │ MCP over stdio
#                  ▼
#   ┌──────────────────────────────┐
#   │  FastMCP Server              │
#   │  (tools/mcp_server.py)       │
#   └──────────────┬───────────────┘
#                  │ handle_spotify_request()
#                  ▼
#   ┌──────────────────────────────┐
#   │  core/ + spotipy             │
#   │  → Spotify Web API           │
#   └──────────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess (python -m tools.mcp_server)
#   and speaks MCP over its stdin/stdout.  The subprocess gets the SPOTIFY_*
#   variables forwarded explicitly, because the MCP stdio client only passes
#   a minimal environment to the processes it spawns.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_dj_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def _spotify_environment() -> dict[str, str]:
    """Environment for the tool server: PATH plus every SPOTIFY_* variable."""
    env = {k: v for k, v in os.environ.items() if k.startswith("SPOTIFY_")}
    env["PATH"] = os.environ.get("PATH", "")
    return env


def create_agent(model: str | None = None) -> Agent:
    """Create and configure the Spotify DJ agent.

    Args:
        model: LiteLlm model string.  Defaults to $AGENT_MODEL, then to
            GPT-4o through OpenRouter (reads OPENROUTER_API_KEY).

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    # "uv run" makes the subprocess use the project's .venv, where fastmcp
    # and spotipy are installed
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
            env=_spotify_environment(),
        ),
    )

    model_name = model or os.environ.get("AGENT_MODEL") or DEFAULT_MODEL

    agent = Agent(
        name="spotify_dj",
        model=LiteLlm(model=model_name),
        instruction=get_dj_prompt(),
        tools=[mcp_tools],
    )

    return agent

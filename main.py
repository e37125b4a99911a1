# =============================================================================
# main.py  —  Entry Point for the Spotify DJ Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python auth.py     # once, to sign in to Spotify
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/dj_agent.py)
#   2. The agent spawns the Spotify tool server (tools/mcp_server.py)
#   3. You type requests ("play some Miles Davis", "what's this song?")
#   4. The agent calls tools and prints what it did
#
# GOOGLE ADK CONCEPTS USED:
#   - Runner: Manages the agent's execution lifecycle
#   - SessionService: Keeps the conversation so follow-ups work
#     ("add that one to my Focus playlist")
#   - Event stream: Tool calls and text as the agent produces them
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load OPENROUTER_API_KEY and SPOTIFY_* from .env BEFORE creating the agent:
# LiteLlm reads the key at init, and the tool server inherits SPOTIFY_*.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.dj_agent import create_agent

APP_NAME = "spotify_dj"
USER_ID = "local_user"


async def run_agent():
    """Run the Spotify DJ agent interactively."""

    # =========================================================================
    # Step 1: Create the agent
    # =========================================================================
    print("=" * 70)
    print("  SPOTIFY DJ AGENT")
    print("  Powered by Google ADK + FastMCP + spotipy")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # =========================================================================
    # Step 2: Create a Runner and Session
    # =========================================================================
    # InMemorySessionService keeps the conversation in RAM for this run only.
    session_service = InMemorySessionService()

    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )

    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")

    # =========================================================================
    # Step 3: Interactive loop
    # =========================================================================
    print("💬 Ask for music, playback control, or playlist changes.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🎧 Agent is working...\n")
        print("-" * 70)

        # =====================================================================
        # Step 4: Stream the agent's response
        # =====================================================================
        # Tool calls are printed as they happen; the last text part is the
        # agent's answer.
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        call = part.function_call
                        args = ", ".join(f"{k}={v!r}" for k, v in (call.args or {}).items())
                        print(f"  🔧 {call.name}({args})")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())

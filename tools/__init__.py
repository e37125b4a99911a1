# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  mcp_server.py:
#     1. Declares each tool's name, description and input schema
#     2. Lets FastMCP validate arguments before anything else runs
#     3. Calls one core/ handler and returns its text
#     4. Turns error replies into MCP error results
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk to Spotify directly (core/spotify_client.py does)
#   - They do NOT format responses (core/formatting.py does)
#   - They do NOT know about Google ADK
# =============================================================================

# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# The controller owns very little data.  Spotify responses are kept as the
# plain dicts spotipy returns; the only shapes defined here are the ones this
# code produces itself:
#
#   SpotifyConfig → where the OAuth app credentials and token cache live
#   ToolReply     → what every tool handler hands back to the tools/ layer
#
# Both are request-scoped: nothing outlives a single tool call except the
# token cache file, which spotipy manages.
# =============================================================================

from dataclasses import dataclass


# -----------------------------------------------------------------------------
# SpotifyConfig — OAuth application settings
# -----------------------------------------------------------------------------
# Loaded from the environment by core/config.py.  The client id/secret come
# from the app registered at https://developer.spotify.com/dashboard and the
# redirect URI must match the one registered there exactly.
# -----------------------------------------------------------------------------
@dataclass
class SpotifyConfig:
    """Settings needed to authenticate against the Spotify Web API."""

    client_id: str
    client_secret: str
    redirect_uri: str = "http://127.0.0.1:8888/callback"
    token_cache_path: str = ".spotify_token_cache"   # JSON file written by spotipy


# -----------------------------------------------------------------------------
# ToolReply — one text content block, optionally flagged as an error
# -----------------------------------------------------------------------------
# The MCP result envelope is a list of content blocks.  Every tool in this
# project answers with exactly one text block, so the reply is just the text
# plus the error flag.  tools/mcp_server.py turns is_error=True into an MCP
# error result.
# -----------------------------------------------------------------------------
@dataclass
class ToolReply:
    """Text payload returned by a tool handler."""

    text: str
    is_error: bool = False

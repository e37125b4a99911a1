# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers every Spotify tool the agent can call.  Each tool is a thin
#   wrapper around a core/ handler. It declares the input schema, logs the
#   call, and hands the handler's text back over MCP.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "searchSpotify")
#   2. FastMCP validates the arguments against the type hints below
#      (Literal → enum, Field(ge=, le=) → bounds).  Invalid input is rejected
#      HERE, before any handler code runs.
#   3. The tool calls a core/ handler, which makes one Spotify request
#      through the dispatcher (core/spotify_client.py)
#   4. The handler's ToolReply becomes a single text content block;
#      an error reply is raised as ToolError so MCP flags it as an error
#
# TOOL NAMES:
#   Tools keep the camelCase names agents already know from other Spotify
#   MCP servers (playMusic, searchSpotify, ...).  Arguments are snake_case.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) Spawned by the ADK agent (agent/dj_agent.py) over stdio
#     c) From any MCP client config, e.g.
#          {"command": "uv", "args": ["run", "python", "-m", "tools.mcp_server"]}
# =============================================================================

import logging
import sys
from typing import Annotated, Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

# The tools layer depends on core/ and nothing else.
from core import library, player, playlists
from core.models import ToolReply

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because stdout IS the MCP transport.  A stray log line on
# stdout would corrupt the JSON-RPC stream and the agent would drop the
# connection.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for successful replies
#     - YELLOW for status messages
#     - RED for error replies
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Replies
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Error replies
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, reply: ToolReply) -> str:
    """Log the handler's reply and return its text.

    Error replies are logged in RED and raised as ToolError, which FastMCP
    sends back as a result with isError set and the same text.
    """
    # First line only: list replies can run to 50 lines
    first_line = reply.text.splitlines()[0] if reply.text else ""
    if reply.is_error:
        logging.info(f"{_RED}  ← {tool_name} error: {first_line}{_RESET}")
        raise ToolError(reply.text)
    logging.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return reply.text


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("spotify-controller")

ItemType = Literal["track", "album", "artist", "playlist"]
ListLimit = Annotated[int, Field(ge=1, le=50, description="Maximum number of items to return (1-50)")]

SEARCH_QUERY_HELP = " ".join([
    "Full Spotify search string combining:",
    "- free-text keywords (e.g. “remaster”),",
    "- field filters: artist:<name>, track:<name>, album:<name>,",
    "  year:<YYYY> or <YYYY-YYYY>, genre:<name>.",
    "The album, artist and year filters can be used for album and track types.",
    "The genre filter can only be used for track type.",
    "Special filter tag:hipster (bottom 10% popularity) can be used with track and album types.",
    "All separated by spaces. Example: \"tag:hipster artist:Queen remaster\".",
])


# =============================================================================
# PLAYBACK TOOLS
# =============================================================================
@mcp.tool(name="playMusic")
def play_music(
    uri: Annotated[Optional[str], Field(description="The Spotify URI to play (overrides type and id)")] = None,
    type: Annotated[Optional[ItemType], Field(description="The type of item to play")] = None,
    id: Annotated[Optional[str], Field(description="The Spotify ID of the item to play")] = None,
    device_id: Annotated[Optional[str], Field(description="The Spotify device ID to play on")] = None,
) -> str:
    """Start playing a Spotify track, album, artist, or playlist.

    Pass either a full `uri` (e.g. "spotify:album:4aawyAB9vmqN3uQ7FjRGTy")
    or both `type` and `id` as printed by the search and list tools.
    Requires Spotify Premium and an active device.
    """
    _log_request("playMusic", uri=uri, type=type, id=id, device_id=device_id)
    return _log_response("playMusic", player.play_music(uri=uri, type=type, id=id, device_id=device_id))


@mcp.tool(name="playbackAction")
def playback_action(
    action: Annotated[
        Literal["pause", "skipToNext", "skipToPrevious", "resume"],
        Field(description="The playback action to perform"),
    ],
    device_id: Annotated[Optional[str], Field(description="The Spotify device ID to perform the action on")] = None,
) -> str:
    """Perform a playback action (pause, resume, skip to next, skip to previous)."""
    _log_request("playbackAction", action=action, device_id=device_id)
    return _log_response("playbackAction", player.playback_action(action, device_id=device_id))


@mcp.tool(name="addToQueue")
def add_to_queue(
    uri: Annotated[Optional[str], Field(description="The Spotify URI to queue (overrides type and id)")] = None,
    type: Annotated[Optional[ItemType], Field(description="The type of item to queue")] = None,
    id: Annotated[Optional[str], Field(description="The Spotify ID of the item to queue")] = None,
    device_id: Annotated[Optional[str], Field(description="The Spotify device ID to add the item to")] = None,
) -> str:
    """Add a track, album, artist or playlist to the playback queue."""
    _log_request("addToQueue", uri=uri, type=type, id=id, device_id=device_id)
    return _log_response("addToQueue", player.add_to_queue(uri=uri, type=type, id=id, device_id=device_id))


# =============================================================================
# READ TOOLS
# =============================================================================
@mcp.tool(name="searchSpotify")
def search_spotify(
    query: Annotated[str, Field(description=SEARCH_QUERY_HELP)],
    type: Annotated[
        Literal["track", "album", "playlist"],
        Field(description="Which item type to return: track, album or playlist"),
    ],
    limit: Annotated[int, Field(ge=1, le=50, description="Max number of results to return (1-50)")] = 20,
    offset: Annotated[
        int,
        Field(
            ge=0,
            le=1000,
            description="The index of the first result to return. Use with limit to get the next page of search results (0-1000)",
        ),
    ] = 0,
) -> str:
    """Search Spotify by keyword and field filters (e.g. artist, track, playlist, tag:new, tag:hipster) and return items of the given type.

    WHEN TO CALL THIS: Before playing, queueing or adding anything the user
    named in words.  Use the IDs in the results for the follow-up call.
    """
    _log_request("searchSpotify", query=query, type=type, limit=limit, offset=offset)
    return _log_response("searchSpotify", library.search_spotify(query, type, limit=limit, offset=offset))


@mcp.tool(name="getNowPlaying")
def get_now_playing() -> str:
    """Get information about the currently playing track on Spotify."""
    _log_request("getNowPlaying")
    return _log_response("getNowPlaying", library.get_now_playing())


@mcp.tool(name="getUserPlaylists")
def get_user_playlists(limit: ListLimit = 50) -> str:
    """Get a list of the current user's playlists on Spotify."""
    _log_request("getUserPlaylists", limit=limit)
    return _log_response("getUserPlaylists", library.get_user_playlists(limit=limit))


@mcp.tool(name="getPlaylistTracks")
def get_playlist_tracks(
    playlist_id: Annotated[str, Field(description="The Spotify ID of the playlist")],
    limit: ListLimit = 50,
) -> str:
    """Get a list of tracks in a Spotify playlist."""
    _log_request("getPlaylistTracks", playlist_id=playlist_id, limit=limit)
    return _log_response("getPlaylistTracks", library.get_playlist_tracks(playlist_id, limit=limit))


@mcp.tool(name="getRecentlyPlayed")
def get_recently_played(limit: ListLimit = 50) -> str:
    """Get a list of recently played tracks on Spotify."""
    _log_request("getRecentlyPlayed", limit=limit)
    return _log_response("getRecentlyPlayed", library.get_recently_played(limit=limit))


@mcp.tool(name="getFollowedArtists")
def get_followed_artists(
    after: Annotated[
        Optional[str],
        Field(description="The last artist ID from the previous request. Cursor for pagination."),
    ] = None,
    limit: ListLimit = 50,
) -> str:
    """Get a list of artists the user is following on Spotify."""
    _log_request("getFollowedArtists", after=after, limit=limit)
    return _log_response("getFollowedArtists", library.get_followed_artists(after=after, limit=limit))


@mcp.tool(name="getUserTopItems")
def get_user_top_items(
    type: Annotated[Literal["artists", "tracks"], Field(description="The type of items to get top for")],
    time_range: Annotated[
        Literal["short_term", "medium_term", "long_term"],
        Field(description="Time range: short_term (~4 weeks), medium_term (~6 months) or long_term (~1 year)"),
    ] = "medium_term",
    limit: ListLimit = 50,
    offset: Annotated[int, Field(ge=0, description="The index of the first item to return. Defaults to 0.")] = 0,
) -> str:
    """Get a list of the user's top artists or tracks."""
    _log_request("getUserTopItems", type=type, time_range=time_range, limit=limit, offset=offset)
    return _log_response(
        "getUserTopItems",
        library.get_user_top_items(type, time_range=time_range, limit=limit, offset=offset),
    )


# =============================================================================
# PLAYLIST TOOLS (these change the user's library)
# =============================================================================
@mcp.tool(name="createPlaylist")
def create_playlist(
    name: Annotated[str, Field(description="The name of the playlist")],
    description: Annotated[Optional[str], Field(description="The description of the playlist")] = None,
    public: Annotated[bool, Field(description="Whether the playlist should be public")] = False,
) -> str:
    """Create a new playlist on Spotify."""
    _log_request("createPlaylist", name=name, description=description, public=public)
    return _log_response("createPlaylist", playlists.create_playlist(name, description=description, public=public))


@mcp.tool(name="addTracksToPlaylist")
def add_tracks_to_playlist(
    playlist_id: Annotated[str, Field(description="The Spotify ID of the playlist")],
    track_ids: Annotated[list[str], Field(description="Array of Spotify track IDs to add")],
    position: Annotated[Optional[int], Field(ge=0, description="Position to insert the tracks (0-based index)")] = None,
) -> str:
    """Add tracks to a Spotify playlist."""
    _log_request("addTracksToPlaylist", playlist_id=playlist_id, track_ids=track_ids, position=position)
    _log_status(f"{len(track_ids)} track ID(s) to add")
    return _log_response(
        "addTracksToPlaylist",
        playlists.add_tracks_to_playlist(playlist_id, track_ids, position=position),
    )


@mcp.tool(name="removeTracksFromPlaylist")
def remove_tracks_from_playlist(
    playlist_id: Annotated[str, Field(description="The Spotify ID of the playlist")],
    track_ids: Annotated[list[str], Field(description="Array of Spotify track IDs to remove")],
) -> str:
    """Remove tracks from a Spotify playlist."""
    _log_request("removeTracksFromPlaylist", playlist_id=playlist_id, track_ids=track_ids)
    _log_status(f"{len(track_ids)} track ID(s) to remove")
    return _log_response(
        "removeTracksFromPlaylist",
        playlists.remove_tracks_from_playlist(playlist_id, track_ids),
    )


# =============================================================================
# Server entry point
# =============================================================================
# Startup failures (bad environment, transport errors) are fatal: log them
# and exit non-zero so whoever spawned the server sees it died.
# =============================================================================
def main() -> None:
    load_dotenv()
    try:
        mcp.run()
    except Exception:
        logging.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()

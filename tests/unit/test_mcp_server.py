"""Unit tests for tools/mcp_server.py

These go through FastMCP's in-memory Client, so they exercise the real
registry, the real schema validation and the real error flag, with only
the Spotify client mocked.
"""
import asyncio

import pytest
from unittest.mock import patch
from fastmcp import Client
from fastmcp.exceptions import ToolError

from tools import mcp_server
from tools.mcp_server import mcp
from tests.unit.factories import TOOL_NAMES


def call_tool(name, arguments=None):
    """Call one tool through an in-memory MCP session and return the result."""
    async def _run():
        async with Client(mcp) as client:
            return await client.call_tool(name, arguments or {})
    return asyncio.run(_run())


def list_tools():
    async def _run():
        async with Client(mcp) as client:
            return await client.list_tools()
    return asyncio.run(_run())


def text_of(result):
    return result.content[0].text


class TestRegistry:

    def test_all_tools_registered(self):
        names = {tool.name for tool in list_tools()}
        assert names == TOOL_NAMES

    def test_search_schema_carries_bounds_and_enum(self):
        search = next(t for t in list_tools() if t.name == "searchSpotify")
        props = search.inputSchema["properties"]

        assert props["limit"]["minimum"] == 1
        assert props["limit"]["maximum"] == 50
        assert props["offset"]["minimum"] == 0
        assert props["offset"]["maximum"] == 1000
        assert props["type"]["enum"] == ["track", "album", "playlist"]
        assert set(search.inputSchema["required"]) == {"query", "type"}


class TestValidation:
    """Invalid input is rejected before any handler runs"""

    @pytest.mark.parametrize("arguments", [
        {"query": "q", "type": "track", "limit": 0},
        {"query": "q", "type": "track", "limit": 51},
        {"query": "q", "type": "track", "offset": -1},
        {"query": "q", "type": "track", "offset": 1001},
        {"query": "q", "type": "artist"},
        {"type": "track"},
    ])
    def test_search_rejects_out_of_range(self, arguments):
        with patch("core.library.search_spotify") as handler:
            with pytest.raises(ToolError):
                call_tool("searchSpotify", arguments)
            handler.assert_not_called()

    @pytest.mark.parametrize("tool, required", [
        ("getUserPlaylists", {}),
        ("getPlaylistTracks", {"playlist_id": "P1"}),
        ("getRecentlyPlayed", {}),
        ("getFollowedArtists", {}),
        ("getUserTopItems", {"type": "artists"}),
    ])
    def test_list_limits(self, tool, required, spotify):
        with pytest.raises(ToolError):
            call_tool(tool, {**required, "limit": 0})
        with pytest.raises(ToolError):
            call_tool(tool, {**required, "limit": 51})
        assert spotify.method_calls == []

    def test_top_items_offset_not_negative(self, spotify):
        with pytest.raises(ToolError):
            call_tool("getUserTopItems", {"type": "tracks", "offset": -1})
        assert spotify.method_calls == []

    def test_playback_action_enum(self, spotify):
        with pytest.raises(ToolError):
            call_tool("playbackAction", {"action": "shuffle"})
        assert spotify.method_calls == []

    def test_top_items_time_range_enum(self, spotify):
        with pytest.raises(ToolError):
            call_tool("getUserTopItems", {"type": "tracks", "time_range": "forever"})
        assert spotify.method_calls == []


class TestToolCalls:

    def test_add_tracks_scenario(self, spotify):
        result = call_tool("addTracksToPlaylist", {"playlist_id": "P1", "track_ids": ["t1", "t2"]})

        spotify.playlist_add_items.assert_called_once_with(
            "P1", ["spotify:track:t1", "spotify:track:t2"], position=None
        )
        assert "Successfully added 2 tracks to playlist (ID: P1)" in text_of(result)

    def test_play_track_scenario(self, spotify):
        call_tool("playMusic", {"type": "track", "id": "t1"})

        spotify.start_playback.assert_called_once_with(device_id=None, uris=["spotify:track:t1"])

    def test_now_playing_scenario(self, spotify):
        spotify.currently_playing.return_value = None

        result = call_tool("getNowPlaying")

        assert text_of(result) == "Nothing is currently playing on Spotify"

    def test_search_defaults(self, spotify):
        spotify.search.return_value = {"tracks": {"items": []}}

        result = call_tool("searchSpotify", {"query": "genre:jazz", "type": "track"})

        spotify.search.assert_called_once_with(q="genre:jazz", limit=20, offset=0, type="track")
        assert text_of(result) == 'No track results found for "genre:jazz"'

    def test_error_reply_sets_error_flag(self, spotify):
        with pytest.raises(ToolError, match="Must provide either a URI or both a type and ID"):
            call_tool("playMusic", {})
        spotify.start_playback.assert_not_called()

    def test_remote_failure_sets_error_flag(self, spotify):
        from spotipy.exceptions import SpotifyException
        spotify.add_to_queue.side_effect = SpotifyException(404, -1, "No active device found")

        with pytest.raises(ToolError, match="Error adding item to queue: No active device found"):
            call_tool("addToQueue", {"uri": "spotify:track:t1"})


class TestMain:

    def test_startup_failure_exits_with_status_1(self):
        with patch.object(mcp_server, "load_dotenv"), \
                patch.object(mcp_server.mcp, "run", side_effect=OSError("stdio closed")):
            with pytest.raises(SystemExit) as exc_info:
                mcp_server.main()

        assert exc_info.value.code == 1

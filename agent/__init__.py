# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent that drives the tool server.
#
# ARCHITECTURAL ROLE:
#   The agent turns requests like "put on something chill and add it to my
#   Focus playlist" into a sequence of tool calls:
#     1. searchSpotify to find candidates
#     2. playMusic / addToQueue with the IDs it found
#     3. getUserPlaylists + addTracksToPlaylist for the playlist edit
#
#   It owns no Spotify logic.  Everything it can do is whatever
#   tools/mcp_server.py exposes.
# =============================================================================

# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the Spotify-facing logic for the controller.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party dependency is spotipy, the Spotify Web
#   API client.  Every handler here returns a plain ToolReply, so the tools/
#   layer only has to register and log.
#
# MODULES:
#   config.py         → environment-driven settings (client id, token cache)
#   spotify_client.py → the request dispatcher (token refresh + error boundary)
#   formatting.py     → pure response-to-text helpers
#   player.py         → playback control (play, pause/skip, queue)
#   library.py        → read-only lookups (search, now playing, lists)
#   playlists.py      → playlist edits (create, add, remove)
# =============================================================================

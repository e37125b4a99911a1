# =============================================================================
# auth.py  —  One-time Spotify authorization
# =============================================================================
#
# HOW TO RUN:
#   uv run python auth.py
#
# WHAT HAPPENS:
#   1. Reads SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET / SPOTIFY_REDIRECT_URI
#      (environment or .env)
#   2. Opens the Spotify consent page in your browser
#   3. spotipy catches the redirect on SPOTIFY_REDIRECT_URI (or asks you to
#      paste the redirected URL) and exchanges the code for tokens
#   4. The tokens land in the token cache file, where the tool server picks
#      them up and refreshes them from then on
#
# The tool server can't do this itself: its stdin/stdout belong to MCP.
# =============================================================================

import sys

from dotenv import load_dotenv

load_dotenv()

import spotipy
from spotipy.oauth2 import SpotifyOauthError

from core.config import ConfigError, load_spotify_config
from core.spotify_client import build_auth_manager


def authorize() -> int:
    """Run the OAuth flow and report which account was authorized."""
    try:
        config = load_spotify_config()
    except ConfigError as e:
        print(f"❌ {e}")
        return 1

    print(f"🔑 Authorizing with redirect URI {config.redirect_uri}")
    auth_manager = build_auth_manager(config, open_browser=True)

    try:
        me = spotipy.Spotify(auth_manager=auth_manager).current_user()
    except SpotifyOauthError as e:
        print(f"❌ Authorization failed: {e}")
        return 1

    print(f"✅ Authorized as {me.get('display_name') or me['id']}")
    print(f"   Token cached at {config.token_cache_path}")
    return 0


if __name__ == "__main__":
    sys.exit(authorize())

# =============================================================================
# core/config.py  —  Environment-driven configuration
# =============================================================================
#
# ENVIRONMENT VARIABLES:
#   SPOTIFY_CLIENT_ID      (required)  OAuth app client id
#   SPOTIFY_CLIENT_SECRET  (required)  OAuth app client secret
#   SPOTIFY_REDIRECT_URI   (optional)  default http://127.0.0.1:8888/callback
#   SPOTIFY_TOKEN_CACHE    (optional)  default ./.spotify_token_cache, resolved
#                                      against the working directory
#
# The entry points (main.py, auth.py, tools/mcp_server.py) call load_dotenv()
# before anything reads these, so a .env file in the project root works too.
# =============================================================================

import os

from core.models import SpotifyConfig


DEFAULT_REDIRECT_URI = "http://127.0.0.1:8888/callback"
DEFAULT_TOKEN_CACHE = ".spotify_token_cache"


class ConfigError(RuntimeError):
    """Raised when required Spotify settings are missing."""


def load_spotify_config() -> SpotifyConfig:
    """Read the Spotify OAuth settings from the environment.

    Raises:
        ConfigError: If SPOTIFY_CLIENT_ID or SPOTIFY_CLIENT_SECRET is unset.
    """
    client_id = os.environ.get("SPOTIFY_CLIENT_ID", "").strip()
    client_secret = os.environ.get("SPOTIFY_CLIENT_SECRET", "").strip()

    missing = [
        name for name, value in (
            ("SPOTIFY_CLIENT_ID", client_id),
            ("SPOTIFY_CLIENT_SECRET", client_secret),
        )
        if not value
    ]
    if missing:
        raise ConfigError(
            f"Missing Spotify configuration: {', '.join(missing)}. "
            f"Set them in the environment or in a .env file."
        )

    return SpotifyConfig(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=os.environ.get("SPOTIFY_REDIRECT_URI") or DEFAULT_REDIRECT_URI,
        token_cache_path=os.path.abspath(
            os.environ.get("SPOTIFY_TOKEN_CACHE") or DEFAULT_TOKEN_CACHE
        ),
    )

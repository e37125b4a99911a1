# =============================================================================
# core/spotify_client.py  —  The Request Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every tool that talks to Spotify funnels through handle_spotify_request().
#   It is the ONLY place where the OAuth token is read, refreshed, or turned
#   into an API client.
#
# THE FLOW:
#   1. Load the OAuth app settings (core/config.py)
#   2. Read the cached token written by auth.py
#   3. Let spotipy validate it (an expired token is refreshed with the
#      refresh token and written back to the cache)
#   4. Build a spotipy.Spotify client and run the caller's operation ONCE
#   5. Re-raise any failure as a single SpotifyRequestError
#
# ERROR BOUNDARY:
#   reports_request_errors() wraps a tool handler and converts a
#   SpotifyRequestError into an error ToolReply:
#       "Error <doing something>: <message>"
#   Every handler in player.py, library.py and playlists.py carries it, so
#   remote failures are reported the same way by every tool.
#
# NOT HANDLED HERE:
#   No retries, no backoff, no caching of responses.  A failed call is
#   reported and the agent decides what to do next.
# =============================================================================

import functools
import inspect
import logging
from typing import Any, Callable, TypeVar

import requests
import spotipy
from spotipy.cache_handler import CacheFileHandler
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyOAuth, SpotifyOauthError

from core.config import ConfigError, load_spotify_config
from core.models import SpotifyConfig, ToolReply

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Scopes for every capability the tools expose.  A cached token only carries
# the scopes it was granted with: re-run auth.py after changing this list.
SPOTIFY_SCOPES = [
    "user-read-private",
    "user-read-email",
    "user-read-playback-state",
    "user-modify-playback-state",
    "user-read-currently-playing",
    "playlist-read-private",
    "playlist-read-collaborative",
    "playlist-modify-private",
    "playlist-modify-public",
    "user-read-recently-played",
    "user-follow-read",
    "user-top-read",
]


class SpotifyRequestError(Exception):
    """Any failure while talking to Spotify: config, auth, network or API."""


def build_auth_manager(config: SpotifyConfig, open_browser: bool = False) -> SpotifyOAuth:
    """Create the spotipy OAuth manager backed by the token cache file."""
    return SpotifyOAuth(
        client_id=config.client_id,
        client_secret=config.client_secret,
        redirect_uri=config.redirect_uri,
        scope=" ".join(SPOTIFY_SCOPES),
        cache_handler=CacheFileHandler(cache_path=config.token_cache_path),
        open_browser=open_browser,
    )


def get_spotify_client() -> spotipy.Spotify:
    """Return a Spotify client holding a valid, non-expired access token.

    The server runs over stdio, so it can never start the interactive OAuth
    flow itself.  If there is no cached token the caller is told to run
    auth.py instead.
    """
    config = load_spotify_config()
    auth_manager = build_auth_manager(config)

    cached = auth_manager.cache_handler.get_cached_token()
    if not cached:
        logger.warning(f"No cached Spotify token at {config.token_cache_path}")
        raise SpotifyRequestError(
            "Not authorized with Spotify. Run `python auth.py` once to sign in."
        )

    # validate_token() refreshes and re-caches the token when it has expired
    token_info = auth_manager.validate_token(cached)
    if not token_info:
        logger.warning("Cached Spotify token could not be refreshed")
        raise SpotifyRequestError(
            "Spotify token could not be refreshed. Run `python auth.py` again."
        )
    if token_info.get("access_token") != cached.get("access_token"):
        logger.info("Refreshed Spotify access token")

    return spotipy.Spotify(auth=token_info["access_token"])


def _describe(error: Exception) -> str:
    """Flatten an exception into a one-line message for the agent."""
    if isinstance(error, SpotifyException):
        return getattr(error, "msg", None) or str(error)
    return str(error)


def handle_spotify_request(operation: Callable[[spotipy.Spotify], T]) -> T:
    """Run one operation against the Spotify API with a fresh credential.

    Args:
        operation: A function that receives a ready spotipy.Spotify client
            and returns a result (or None for pure side effects).

    Returns:
        Whatever the operation returned.

    Raises:
        SpotifyRequestError: If the config is missing, the token cannot be
            refreshed, the network fails, or Spotify answers with an error.
    """
    try:
        client = get_spotify_client()
        return operation(client)
    except SpotifyRequestError:
        raise
    except (ConfigError, SpotifyOauthError, SpotifyException, requests.RequestException) as e:
        logger.warning(f"Spotify request failed: {_describe(e)}")
        raise SpotifyRequestError(_describe(e)) from e


def reports_request_errors(action: str) -> Callable[[Callable[..., ToolReply]], Callable[..., ToolReply]]:
    """Turn SpotifyRequestError into an error reply for a tool handler.

    `action` describes what the handler was doing and may reference the
    handler's arguments by name, e.g. "searching for {type}s".
    """

    def decorator(func: Callable[..., ToolReply]) -> Callable[..., ToolReply]:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> ToolReply:
            try:
                return func(*args, **kwargs)
            except SpotifyRequestError as e:
                bound = signature.bind(*args, **kwargs)
                bound.apply_defaults()
                doing = action.format(**bound.arguments)
                return ToolReply(f"Error {doing}: {e}", is_error=True)

        return wrapper

    return decorator

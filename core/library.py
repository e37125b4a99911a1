# =============================================================================
# core/library.py  —  Read-only lookups
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Search, "what's playing", and the user's own lists (playlists, playlist
#   contents, listening history, followed artists, top artists/tracks).
#
# OUTPUT SHAPE:
#   Every list read answers with a markdown header plus a 1-based numbered
#   list (see core/formatting.py).  An EMPTY result is not an error: each
#   handler has its own "you have none" sentence instead of an empty list,
#   so the agent can tell "nothing there" apart from "call failed".
#
# LIMITS:
#   The tools/ layer enforces 1-50 on every limit before a handler runs.
#   The defaults below mirror those in the tool signatures.
# =============================================================================

from typing import Optional

from core.formatting import (
    REMOVED_TRACK,
    album_line,
    artist_line,
    format_duration,
    format_numbered,
    is_track,
    join_artists,
    playable_track_line,
    playlist_line,
    playlist_summary_line,
    top_track_line,
    track_line,
)
from core.models import ToolReply
from core.spotify_client import handle_spotify_request, reports_request_errors

SEARCH_TYPES = ("track", "album", "playlist")
TOP_ITEM_TYPES = ("artists", "tracks")
TIME_RANGES = ("short_term", "medium_term", "long_term")

_SEARCH_RENDERERS = {
    "track": track_line,
    "album": album_line,
    "playlist": playlist_line,
}


# =============================================================================
# Search
# =============================================================================
@reports_request_errors("searching for {type}s")
def search_spotify(query: str, type: str, limit: int = 20, offset: int = 0) -> ToolReply:
    """Search Spotify and list items of one type.

    The query goes to Spotify verbatim, field filters included
    (artist:, track:, album:, year:, genre:, tag:hipster, tag:new).
    """
    results = handle_spotify_request(
        lambda sp: sp.search(q=query, limit=limit, offset=offset, type=type)
    )

    # Spotify pluralizes the result key: type=track → "tracks"
    items = ((results or {}).get(f"{type}s") or {}).get("items") or []
    render = _SEARCH_RENDERERS.get(type)
    if not items or render is None:
        return ToolReply(f'No {type} results found for "{query}"')

    listing = format_numbered(items, render, placeholder=f"[Unavailable {type}]")
    return ToolReply(f'# Search results for "{query}" (type: {type})\n\n{listing}')


# =============================================================================
# Now playing
# =============================================================================
@reports_request_errors("getting current track")
def get_now_playing() -> ToolReply:
    """Describe the track on the user's active device."""
    # Without additional_types Spotify reports a playing episode as item=null
    current = handle_spotify_request(
        lambda sp: sp.currently_playing(additional_types="episode")
    )

    if not current or not current.get("item"):
        return ToolReply("Nothing is currently playing on Spotify")

    item = current["item"]
    if not is_track(item):
        return ToolReply(
            "Currently playing item is not a track (might be a podcast episode)"
        )

    state = "Playing" if current.get("is_playing") else "Paused"
    progress = format_duration(current.get("progress_ms") or 0)
    duration = format_duration(item.get("duration_ms") or 0)

    return ToolReply(
        f"# Currently {state}\n\n"
        f'**Track**: "{item["name"]}"\n'
        f"**Artist**: {join_artists(item)}\n"
        f"**Album**: {item['album']['name']}\n"
        f"**Progress**: {progress} / {duration}\n"
        f"**ID**: {item['id']}"
    )


# =============================================================================
# The user's lists
# =============================================================================
@reports_request_errors("getting playlists")
def get_user_playlists(limit: int = 50) -> ToolReply:
    page = handle_spotify_request(lambda sp: sp.current_user_playlists(limit=limit))

    items = (page or {}).get("items") or []
    if not items:
        return ToolReply("You don't have any playlists on Spotify")

    listing = format_numbered(items, playlist_summary_line, placeholder="[Unavailable playlist]")
    return ToolReply(f"# Your Spotify Playlists\n\n{listing}")


@reports_request_errors("getting playlist tracks")
def get_playlist_tracks(playlist_id: str, limit: int = 50) -> ToolReply:
    page = handle_spotify_request(
        lambda sp: sp.playlist_items(playlist_id, limit=limit, additional_types=("track",))
    )

    items = (page or {}).get("items") or []
    if not items:
        return ToolReply("This playlist doesn't have any tracks")

    listing = format_numbered(
        items, lambda entry: playable_track_line(entry.get("track")), placeholder=REMOVED_TRACK
    )
    return ToolReply(f"# Tracks in Playlist\n\n{listing}")


@reports_request_errors("getting recently played tracks")
def get_recently_played(limit: int = 50) -> ToolReply:
    history = handle_spotify_request(
        lambda sp: sp.current_user_recently_played(limit=limit)
    )

    items = (history or {}).get("items") or []
    if not items:
        return ToolReply("You don't have any recently played tracks on Spotify")

    listing = format_numbered(
        items, lambda entry: playable_track_line(entry.get("track")), placeholder=REMOVED_TRACK
    )
    return ToolReply(f"# Recently Played Tracks\n\n{listing}")


@reports_request_errors("getting followed artists")
def get_followed_artists(after: Optional[str] = None, limit: int = 50) -> ToolReply:
    """List followed artists.  `after` is the last artist ID of the previous page."""
    page = handle_spotify_request(
        lambda sp: sp.current_user_followed_artists(limit=limit, after=after)
    )

    items = ((page or {}).get("artists") or {}).get("items") or []
    if not items:
        return ToolReply("User doesn't follow any artists on Spotify")

    listing = format_numbered(items, artist_line, placeholder="[Unavailable artist]")
    return ToolReply(f"# Artists You Follow\n\n{listing}")


@reports_request_errors("getting top {type}")
def get_user_top_items(
    type: str,
    time_range: str = "medium_term",
    limit: int = 50,
    offset: int = 0,
) -> ToolReply:
    """List the user's top artists or tracks over a time range."""
    if type == "artists":
        fetch = lambda sp: sp.current_user_top_artists(limit=limit, offset=offset, time_range=time_range)
        render = artist_line
    else:
        fetch = lambda sp: sp.current_user_top_tracks(limit=limit, offset=offset, time_range=time_range)
        render = top_track_line

    page = handle_spotify_request(fetch)

    items = (page or {}).get("items") or []
    if not items:
        return ToolReply(f"User doesn't have any top {type} on Spotify")

    listing = format_numbered(items, render)
    return ToolReply(f"# Top {type}\n\n{listing}")

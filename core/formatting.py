# =============================================================================
# core/formatting.py  —  Response-to-text helpers
# =============================================================================
#
# Spotify answers with deeply nested JSON.  The agent only needs a line per
# item: a number, a name, who made it, and the ID it can pass to the next
# tool call.  Every function here is pure (dict in, str out), so the tool
# handlers stay short and these can be tested without any mocking.
#
# LINE SHAPES:
#   track     → 1. "Song" by Artist A, Artist B (3:45) - ID: abc
#   album     → 1. "Album" by Artist - ID: abc
#   playlist  → 1. "Name" (description) by Owner - ID: abc
#   artist    → 1. "Artist" - ID: abc
# =============================================================================

from typing import Any, Callable, Iterable, Optional

ITEM_TYPES = ("track", "album", "artist", "playlist")

REMOVED_TRACK = "[Removed track]"
UNKNOWN_ITEM = "Unknown item"


def format_duration(ms: int) -> str:
    """Format a millisecond count as M:SS (125000 → "2:05").

    Partial seconds are dropped, not rounded.
    """
    minutes = ms // 60000
    seconds = (ms % 60000) // 1000
    return f"{minutes}:{seconds:02d}"


def pluralize(count: int, word: str) -> str:
    """Return "1 track" / "2 tracks"."""
    return f"{count} {word}{'' if count == 1 else 's'}"


def to_track_uri(track_id: str) -> str:
    return f"spotify:track:{track_id}"


def build_uri(uri: Optional[str], item_type: Optional[str], item_id: Optional[str]) -> Optional[str]:
    """Pick the URI to act on.

    An explicit uri wins.  Otherwise one is built from type + id, but only
    when BOTH are present.  Returns None when neither rule applies.
    """
    if uri:
        return uri
    if item_type and item_id:
        return f"spotify:{item_type}:{item_id}"
    return None


def uri_type(uri: str) -> Optional[str]:
    """Return the item type of a spotify:<type>:<id> URI, if it has one."""
    parts = uri.split(":")
    if len(parts) >= 3 and parts[0] == "spotify":
        return parts[1]
    return None


def join_artists(item: dict) -> str:
    return ", ".join(a.get("name", "Unknown") for a in item.get("artists") or [])


def is_track(item: Any) -> bool:
    """True for a track object (as opposed to a podcast episode or null)."""
    return (
        isinstance(item, dict)
        and item.get("type") == "track"
        and isinstance(item.get("artists"), list)
        and isinstance(item.get("album"), dict)
        and isinstance(item["album"].get("name"), str)
    )


# -----------------------------------------------------------------------------
# Line renderers (unnumbered; format_numbered adds the index)
# -----------------------------------------------------------------------------

def track_line(track: dict) -> str:
    duration = format_duration(track.get("duration_ms") or 0)
    return f'"{track["name"]}" by {join_artists(track)} ({duration}) - ID: {track["id"]}'


def playable_track_line(track: Any) -> str:
    """Track line for playlist/history entries, which may be removed or not a track."""
    if not track:
        return REMOVED_TRACK
    if is_track(track):
        return track_line(track)
    return UNKNOWN_ITEM


def album_line(album: dict) -> str:
    return f'"{album["name"]}" by {join_artists(album)} - ID: {album["id"]}'


def playlist_line(playlist: dict) -> str:
    name = playlist.get("name") or "Unknown Playlist"
    description = playlist.get("description") or "No description"
    owner = (playlist.get("owner") or {}).get("display_name") or "Unknown"
    return f'"{name}" ({description}) by {owner} - ID: {playlist.get("id")}'


def playlist_summary_line(playlist: dict) -> str:
    """One of the user's own playlists, with its track count."""
    total = (playlist.get("tracks") or {}).get("total") or 0
    return f'"{playlist["name"]}" ({pluralize(total, "track")}) - ID: {playlist["id"]}'


def artist_line(artist: dict) -> str:
    return f'"{artist["name"]}" - ID: {artist["id"]}'


def top_track_line(track: dict) -> str:
    if isinstance(track.get("artists"), list):
        return f'"{track["name"]}" by {join_artists(track)} - ID: {track["id"]}'
    return artist_line(track)


def format_numbered(
    items: Iterable[Any],
    render: Callable[[Any], str],
    placeholder: str = UNKNOWN_ITEM,
) -> str:
    """Render a 1-based numbered list, one line per item.

    Spotify sometimes returns null entries (deleted or region-locked items).
    They keep their number and show `placeholder` so the numbering still
    lines up with what Spotify returned.
    """
    lines = []
    for i, item in enumerate(items, start=1):
        lines.append(f"{i}. {render(item) if item is not None else placeholder}")
    return "\n".join(lines)

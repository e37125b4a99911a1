# =============================================================================
# core/player.py  —  Playback control
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Starts playback, pauses/resumes/skips, and adds items to the queue on
#   the user's active Spotify Connect device (or a specific device_id).
#
# URI RULES (shared by play_music and add_to_queue):
#   - An explicit uri always wins.
#   - Otherwise a uri is built as spotify:<type>:<id>, but only when BOTH
#     type and id were given.
#   - With neither, the handler answers with an error reply and Spotify is
#     never called.
#
# TRACKS vs CONTEXTS:
#   Spotify plays a single track from a `uris` list, while albums, artists
#   and playlists are started as a `context_uri`.  play_music picks the
#   right one from the type (or from the uri itself).
#
# NOTE: Playback endpoints require Spotify Premium and an active device.
#   Spotify's "No active device found" error comes back through the error
#   boundary like any other failure.
# =============================================================================

from typing import Optional

from core.formatting import build_uri, uri_type
from core.models import ToolReply
from core.spotify_client import handle_spotify_request, reports_request_errors

MISSING_TARGET = "Error: Must provide either a URI or both a type and ID"

PLAYBACK_ACTIONS = ("pause", "resume", "skipToNext", "skipToPrevious")


@reports_request_errors("starting playback")
def play_music(
    uri: Optional[str] = None,
    type: Optional[str] = None,
    id: Optional[str] = None,
    device_id: Optional[str] = None,
) -> ToolReply:
    """Start playing a track, album, artist or playlist."""
    spotify_uri = build_uri(uri, type, id)
    if spotify_uri is None:
        return ToolReply(MISSING_TARGET, is_error=True)

    is_track = type == "track" or uri_type(spotify_uri) == "track"

    def start(sp):
        if is_track:
            sp.start_playback(device_id=device_id or None, uris=[spotify_uri])
        else:
            sp.start_playback(device_id=device_id or None, context_uri=spotify_uri)

    handle_spotify_request(start)

    label = f"Started playing {type or 'music'}"
    return ToolReply(f"{label} (ID: {id})" if id else label)


@reports_request_errors("performing {action}")
def playback_action(action: str, device_id: Optional[str] = None) -> ToolReply:
    """Pause, resume, or skip forward/back."""
    device = device_id or None

    if action == "pause":
        handle_spotify_request(lambda sp: sp.pause_playback(device_id=device))
        return ToolReply("Playback paused")
    if action == "resume":
        handle_spotify_request(lambda sp: sp.start_playback(device_id=device))
        return ToolReply("Playback resumed")
    if action == "skipToNext":
        handle_spotify_request(lambda sp: sp.next_track(device_id=device))
        return ToolReply("Skipped to next track")
    if action == "skipToPrevious":
        handle_spotify_request(lambda sp: sp.previous_track(device_id=device))
        return ToolReply("Skipped to previous track")

    return ToolReply(
        f"Error: Unknown playback action '{action}'. "
        f"Use one of: {', '.join(PLAYBACK_ACTIONS)}",
        is_error=True,
    )


@reports_request_errors("adding item to queue")
def add_to_queue(
    uri: Optional[str] = None,
    type: Optional[str] = None,
    id: Optional[str] = None,
    device_id: Optional[str] = None,
) -> ToolReply:
    """Append a track (or other item) to the playback queue."""
    spotify_uri = build_uri(uri, type, id)
    if spotify_uri is None:
        return ToolReply(MISSING_TARGET, is_error=True)

    handle_spotify_request(
        lambda sp: sp.add_to_queue(spotify_uri, device_id=device_id or None)
    )
    return ToolReply(f"Added item {spotify_uri} to queue")

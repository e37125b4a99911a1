# =============================================================================
# core/playlists.py  —  Playlist edits
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Creates playlists and adds/removes tracks.  These are the only tools
#   that CHANGE the user's library, so the agent prompt asks it to confirm
#   with the user before calling them.
#
# TRACK IDS:
#   The agent works with bare track IDs (what the read tools print after
#   "ID:").  They are turned into spotify:track:<id> URIs here, keeping the
#   caller's order.  An empty ID list is answered locally and never sent.
# =============================================================================

from typing import Optional

from core.formatting import pluralize, to_track_uri
from core.models import ToolReply
from core.spotify_client import handle_spotify_request, reports_request_errors

NO_TRACK_IDS = "Error: No track IDs provided"


@reports_request_errors("creating playlist")
def create_playlist(name: str, description: Optional[str] = None, public: bool = False) -> ToolReply:
    """Create an empty playlist owned by the current user."""

    def create(sp):
        me = sp.current_user()
        return sp.user_playlist_create(
            me["id"],
            name,
            public=public,
            description=description or "",
        )

    playlist = handle_spotify_request(create)
    return ToolReply(f'Successfully created playlist "{name}"\nPlaylist ID: {playlist["id"]}')


@reports_request_errors("adding tracks to playlist")
def add_tracks_to_playlist(
    playlist_id: str,
    track_ids: list[str],
    position: Optional[int] = None,
) -> ToolReply:
    """Add tracks to a playlist, optionally at a 0-based position."""
    if not track_ids:
        return ToolReply(NO_TRACK_IDS, is_error=True)

    track_uris = [to_track_uri(track_id) for track_id in track_ids]
    handle_spotify_request(
        lambda sp: sp.playlist_add_items(playlist_id, track_uris, position=position)
    )

    return ToolReply(
        f"Successfully added {pluralize(len(track_ids), 'track')} to playlist (ID: {playlist_id})"
    )


@reports_request_errors("removing tracks from playlist")
def remove_tracks_from_playlist(playlist_id: str, track_ids: list[str]) -> ToolReply:
    """Remove every occurrence of the given tracks from a playlist."""
    if not track_ids:
        return ToolReply(NO_TRACK_IDS, is_error=True)

    track_uris = [to_track_uri(track_id) for track_id in track_ids]
    handle_spotify_request(
        lambda sp: sp.playlist_remove_all_occurrences_of_items(playlist_id, track_uris)
    )

    return ToolReply(
        f"Successfully removed {pluralize(len(track_ids), 'track')} from playlist (ID: {playlist_id})"
    )

"""Unit tests for core/player.py

The spotify fixture replaces the API client; these tests check which
spotipy call each handler makes and with which URIs.
"""
from spotipy.exceptions import SpotifyException

from core.player import add_to_queue, play_music, playback_action


class TestPlayMusic:

    def test_requires_uri_or_type_and_id(self, spotify):
        """Neither uri nor a full type/id pair → error, no API call"""
        reply = play_music()

        assert reply.is_error
        assert reply.text == "Error: Must provide either a URI or both a type and ID"
        spotify.start_playback.assert_not_called()

    def test_type_without_id_is_rejected(self, spotify):
        reply = play_music(type="album")

        assert reply.is_error
        spotify.start_playback.assert_not_called()

    def test_track_is_played_as_uri_list(self, spotify):
        reply = play_music(type="track", id="t1")

        spotify.start_playback.assert_called_once_with(device_id=None, uris=["spotify:track:t1"])
        assert not reply.is_error
        assert reply.text == "Started playing track (ID: t1)"

    def test_album_is_played_as_context(self, spotify):
        play_music(type="album", id="a1", device_id="kitchen")

        spotify.start_playback.assert_called_once_with(
            device_id="kitchen", context_uri="spotify:album:a1"
        )

    def test_explicit_uri_is_used_verbatim(self, spotify):
        reply = play_music(uri="spotify:playlist:p1")

        spotify.start_playback.assert_called_once_with(device_id=None, context_uri="spotify:playlist:p1")
        assert reply.text == "Started playing music"

    def test_explicit_track_uri_is_played_as_uri_list(self, spotify):
        play_music(uri="spotify:track:t7")

        spotify.start_playback.assert_called_once_with(device_id=None, uris=["spotify:track:t7"])

    def test_uri_overrides_type_and_id(self, spotify):
        play_music(uri="spotify:album:a1", type="album", id="other")

        spotify.start_playback.assert_called_once_with(device_id=None, context_uri="spotify:album:a1")

    def test_api_failure_is_reported(self, spotify):
        spotify.start_playback.side_effect = SpotifyException(
            404, -1, "Player command failed: No active device found"
        )

        reply = play_music(type="track", id="t1")

        assert reply.is_error
        assert reply.text == "Error starting playback: Player command failed: No active device found"


class TestPlaybackAction:

    def test_pause(self, spotify):
        reply = playback_action("pause")

        spotify.pause_playback.assert_called_once_with(device_id=None)
        assert reply.text == "Playback paused"

    def test_resume(self, spotify):
        reply = playback_action("resume", device_id="d1")

        spotify.start_playback.assert_called_once_with(device_id="d1")
        assert reply.text == "Playback resumed"

    def test_skip_to_next(self, spotify):
        reply = playback_action("skipToNext")

        spotify.next_track.assert_called_once_with(device_id=None)
        assert reply.text == "Skipped to next track"

    def test_skip_to_previous(self, spotify):
        reply = playback_action("skipToPrevious")

        spotify.previous_track.assert_called_once_with(device_id=None)
        assert reply.text == "Skipped to previous track"

    def test_unknown_action(self, spotify):
        reply = playback_action("shuffle")

        assert reply.is_error
        assert spotify.method_calls == []

    def test_failure_names_the_action(self, spotify):
        spotify.pause_playback.side_effect = SpotifyException(403, -1, "Premium required")

        reply = playback_action("pause")

        assert reply.is_error
        assert reply.text == "Error performing pause: Premium required"


class TestAddToQueue:

    def test_requires_uri_or_type_and_id(self, spotify):
        reply = add_to_queue(id="t1")

        assert reply.is_error
        assert "Must provide either a URI or both a type and ID" in reply.text
        spotify.add_to_queue.assert_not_called()

    def test_uri_only(self, spotify):
        reply = add_to_queue(uri="spotify:track:t1")

        spotify.add_to_queue.assert_called_once_with("spotify:track:t1", device_id=None)
        assert reply.text == "Added item spotify:track:t1 to queue"

    def test_type_and_id_are_synthesized(self, spotify):
        add_to_queue(type="track", id="t2", device_id="d1")

        spotify.add_to_queue.assert_called_once_with("spotify:track:t2", device_id="d1")

    def test_failure_is_reported(self, spotify):
        spotify.add_to_queue.side_effect = SpotifyException(404, -1, "No active device found")

        reply = add_to_queue(uri="spotify:track:t1")

        assert reply.text == "Error adding item to queue: No active device found"

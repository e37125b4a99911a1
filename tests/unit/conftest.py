"""Shared fixtures for unit tests.

No test talks to Spotify: the dispatcher's client factory is replaced by a
MagicMock standing in for spotipy.Spotify.
"""
import pytest
from unittest.mock import MagicMock, patch


@pytest.fixture
def spotify():
    """Patch the dispatcher so every request runs against a MagicMock client."""
    client = MagicMock(name="spotipy.Spotify")
    with patch("core.spotify_client.get_spotify_client", return_value=client):
        yield client

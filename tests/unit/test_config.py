"""Unit tests for core/config.py"""
import os

import pytest
from unittest.mock import patch

from core.config import DEFAULT_REDIRECT_URI, DEFAULT_TOKEN_CACHE, ConfigError, load_spotify_config


class TestLoadSpotifyConfig:

    def test_reads_environment(self):
        env = {
            "SPOTIFY_CLIENT_ID": "cid",
            "SPOTIFY_CLIENT_SECRET": "secret",
            "SPOTIFY_REDIRECT_URI": "http://localhost:9000/cb",
            "SPOTIFY_TOKEN_CACHE": "/tmp/cache",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_spotify_config()

        assert config.client_id == "cid"
        assert config.client_secret == "secret"
        assert config.redirect_uri == "http://localhost:9000/cb"
        assert config.token_cache_path == "/tmp/cache"

    def test_defaults(self, tmp_path, monkeypatch):
        """The token cache defaults to the working directory, not the install location"""
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {"SPOTIFY_CLIENT_ID": "cid", "SPOTIFY_CLIENT_SECRET": "s"}, clear=True):
            config = load_spotify_config()

        assert config.redirect_uri == DEFAULT_REDIRECT_URI
        assert config.token_cache_path == os.path.join(os.getcwd(), DEFAULT_TOKEN_CACHE)

    def test_relative_token_cache_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        env = {"SPOTIFY_CLIENT_ID": "cid", "SPOTIFY_CLIENT_SECRET": "s", "SPOTIFY_TOKEN_CACHE": "tokens/cache.json"}
        with patch.dict(os.environ, env, clear=True):
            config = load_spotify_config()

        assert os.path.isabs(config.token_cache_path)
        assert config.token_cache_path == os.path.join(os.getcwd(), "tokens", "cache.json")

    def test_missing_credentials_are_named(self):
        with patch.dict(os.environ, {"SPOTIFY_CLIENT_ID": "  "}, clear=True):
            with pytest.raises(ConfigError) as exc_info:
                load_spotify_config()

        message = str(exc_info.value)
        assert "SPOTIFY_CLIENT_ID" in message
        assert "SPOTIFY_CLIENT_SECRET" in message

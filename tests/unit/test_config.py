"""
Unit tests for settings.
"""

from pathlib import Path

import pytest
from pronscore.config import PronScoreSettings, configure, get_settings


class TestSettings:
    """Test PronScoreSettings."""

    def test_defaults(self):
        settings = PronScoreSettings()

        assert settings.similar_threshold == 0.8
        assert settings.max_tips == 3
        assert (settings.excellent_threshold, settings.good_threshold,
                settings.needs_practice_threshold) == (80, 60, 40)
        assert settings.alignment_strategy == "positional"
        assert settings.wit_ai_url == "https://api.wit.ai/speech"
        assert settings.wit_ai_token is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PRONSCORE_SIMILAR_THRESHOLD", "0.9")
        monkeypatch.setenv("PRONSCORE_ALIGNMENT_STRATEGY", "edit_distance")

        settings = PronScoreSettings()
        assert settings.similar_threshold == 0.9
        assert settings.alignment_strategy == "edit_distance"

    @pytest.mark.parametrize("name", ["WIT_AI_TOKEN", "PRONSCORE_WIT_AI_TOKEN"])
    def test_token_from_env(self, monkeypatch, name):
        monkeypatch.setenv(name, "secret")
        assert PronScoreSettings().wit_ai_token == "secret"

    def test_token_by_field_name(self):
        assert PronScoreSettings(wit_ai_token="abc").wit_ai_token == "abc"

    @pytest.mark.parametrize("kwargs", [
        {"similar_threshold": 1.5},
        {"max_tips": 4},
        {"max_tips": -1},
        {"alignment_strategy": "dtw"},
        {"excellent_threshold": 50},
        {"good_threshold": 30},
    ])
    def test_validation(self, kwargs):
        with pytest.raises(Exception):
            PronScoreSettings(**kwargs)

    def test_phrases_file_path(self):
        settings = PronScoreSettings(phrases_file="phrases.csv")
        assert settings.phrases_file == Path("phrases.csv")

    def test_log_level_case_insensitive(self):
        assert PronScoreSettings(log_level="debug").log_level == "DEBUG"


class TestDefaultSettings:
    """Test the cached default instance."""

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_configure_replaces_default(self):
        settings = configure(max_tips=1)
        assert get_settings() is settings
        assert get_settings().max_tips == 1

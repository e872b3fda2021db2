# tests/test_config.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

"""
Tests for timeout config parsing to verify it rejects invalid values.
"""

import os
from unittest.mock import patch

import pytest


def _env_with(name, value):
    return lambda key, default=None: value if key == name else os.environ.get(key, default)


@pytest.mark.parametrize("raw", ["abc", "0", "-5", ""])
def test_parse_timeout_rejects_invalid_values(raw):
    """Unparseable and non-positive values fall back to the default."""
    from config import _parse_timeout

    with patch("config.os.environ.get", side_effect=_env_with("FETCH_TIMEOUT", raw)):
        assert _parse_timeout("FETCH_TIMEOUT", 120.0) == 120.0


@pytest.mark.parametrize("raw,expected", [("1", 1.0), ("45", 45.0), ("2.5", 2.5)])
def test_parse_timeout_accepts_positive_values(raw, expected):
    from config import _parse_timeout

    with patch("config.os.environ.get", side_effect=_env_with("FETCH_TIMEOUT", raw)):
        assert _parse_timeout("FETCH_TIMEOUT", 120.0) == expected


def test_get_optional_str_strips_blank_values():
    from config import _get_optional_str

    with patch("config.os.environ.get", side_effect=_env_with("BOT_TOKEN", "   ")):
        assert _get_optional_str("BOT_TOKEN") is None
    with patch("config.os.environ.get", side_effect=_env_with("BOT_TOKEN", " 123:abc ")):
        assert _get_optional_str("BOT_TOKEN") == "123:abc"


def test_pipeline_settings_from_config_matches_module_values():
    import config
    from media.settings import PipelineSettings

    settings = PipelineSettings.from_config()
    assert settings.api_url == config.EXTRACTION_API_URL
    assert settings.fetch_timeout == config.FETCH_TIMEOUT
    assert settings.transcode_timeout == config.TRANSCODE_TIMEOUT


def test_pipeline_settings_read_config_at_call_time(monkeypatch):
    import config
    from media.settings import PipelineSettings

    monkeypatch.setattr(config, "FETCH_TIMEOUT", 42.0)
    monkeypatch.setattr(config, "EXTRACTION_API_URL", "https://other.test/api/")

    settings = PipelineSettings.from_config()
    assert settings.fetch_timeout == 42.0
    assert settings.api_url == "https://other.test/api/"

    # from_config is the only way to get config values
    with pytest.raises(TypeError):
        PipelineSettings()

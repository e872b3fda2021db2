# config.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import os

# Configuration constants loaded from environment variables

# State directory path (Telethon session and media scratch area)
STATE_DIRECTORY: str = os.environ.get("RELAY_BOT_STATE_DIR", "state")
MEDIA_SCRATCH_DIRECTORY: str = os.path.join(STATE_DIRECTORY, "media_scratch")


def _get_optional_str(env_name: str) -> str | None:
    """Return stripped environment variable value or None if unset/empty."""
    value = os.environ.get(env_name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


# Bot credentials
BOT_TOKEN: str | None = _get_optional_str("BOT_TOKEN")
TELEGRAM_API_ID: str | None = _get_optional_str("TELEGRAM_API_ID")
TELEGRAM_API_HASH: str | None = _get_optional_str("TELEGRAM_API_HASH")

LOG_LEVEL: str = os.environ.get("RELAY_BOT_LOG_LEVEL", "INFO").upper()


# Extraction API
EXTRACTION_API_URL: str = (
    _get_optional_str("EXTRACTION_API_URL") or "https://www.tikwm.com/api/"
)

# Browser identity sent to the extraction API and the media CDN.
# Both reject default HTTP client user agents.
BROWSER_USER_AGENT: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


def _parse_timeout(env_name: str, default: float) -> float:
    """Parse a timeout in seconds, falling back to default on bad or non-positive values."""
    try:
        value = float(os.environ.get(env_name, str(default)))
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


EXTRACTION_API_TIMEOUT: float = _parse_timeout("EXTRACTION_API_TIMEOUT", 30.0)
FETCH_TIMEOUT: float = _parse_timeout("FETCH_TIMEOUT", 120.0)
TRANSCODE_TIMEOUT: float = _parse_timeout("TRANSCODE_TIMEOUT", 300.0)


# Audio derivation
FFMPEG_BINARY: str | None = _get_optional_str("FFMPEG_BINARY")
AUDIO_BITRATE: str = "128k"


# Telegram limit on items per album
MEDIA_GROUP_LIMIT: int = 10

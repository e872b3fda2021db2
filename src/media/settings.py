# media/settings.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
from dataclasses import dataclass

import config


@dataclass(frozen=True)
class PipelineSettings:
    """Endpoints and limits used while resolving one link."""

    api_url: str
    api_timeout: float
    fetch_timeout: float
    transcode_timeout: float
    ffmpeg_binary: str | None

    @classmethod
    def from_config(cls) -> "PipelineSettings":
        return cls(
            api_url=config.EXTRACTION_API_URL,
            api_timeout=config.EXTRACTION_API_TIMEOUT,
            fetch_timeout=config.FETCH_TIMEOUT,
            transcode_timeout=config.TRANSCODE_TIMEOUT,
            ffmpeg_binary=config.FFMPEG_BINARY,
        )

# tests/conftest.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
from pathlib import Path

import httpx
import pytest

from media.settings import PipelineSettings


@pytest.fixture
def scratch_dir(tmp_path) -> Path:
    path = tmp_path / "media_scratch"
    path.mkdir()
    return path


@pytest.fixture
def settings() -> PipelineSettings:
    return PipelineSettings(
        api_url="https://extract.test/api/",
        api_timeout=5.0,
        fetch_timeout=5.0,
        transcode_timeout=5.0,
        ffmpeg_binary="ffmpeg-test",
    )


@pytest.fixture
def mock_http(monkeypatch):
    """
    Route every httpx.AsyncClient created by the code under test through
    httpx.MockTransport. Call the fixture with a handler(request) -> Response.
    """
    real_client = httpx.AsyncClient

    def install(handler):
        def factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)

    return install

# tests/test_remote_fetch.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Tests for streaming downloads to the scratch directory."""

import asyncio

import httpx
import pytest

from exceptions import DownloadError, StepTimeoutError
from media.remote_fetch import fetch_to_file


@pytest.mark.asyncio
async def test_fetch_writes_body_and_sends_browser_user_agent(mock_http, tmp_path):
    seen = {}
    body = b"\x00\x01video-bytes" * 10_000

    def handler(request):
        seen["user_agent"] = request.headers.get("user-agent")
        return httpx.Response(200, content=body)

    mock_http(handler)
    dest = tmp_path / "tiktok_abc.mp4"

    result = await fetch_to_file("https://cdn.test/v.mp4", dest, timeout=5.0)

    assert result == dest
    assert dest.read_bytes() == body
    assert "Mozilla" in seen["user_agent"]


@pytest.mark.asyncio
async def test_fetch_follows_redirects(mock_http, tmp_path):
    def handler(request):
        if request.url.path == "/short":
            return httpx.Response(302, headers={"Location": "https://cdn.test/final.jpg"})
        return httpx.Response(200, content=b"jpeg")

    mock_http(handler)
    dest = tmp_path / "img.jpg"

    await fetch_to_file("https://cdn.test/short", dest, timeout=5.0)

    assert dest.read_bytes() == b"jpeg"


@pytest.mark.asyncio
async def test_fetch_non_2xx_raises_and_leaves_no_file(mock_http, tmp_path):
    mock_http(lambda request: httpx.Response(404, content=b"not found"))
    dest = tmp_path / "missing.mp4"

    with pytest.raises(DownloadError) as exc_info:
        await fetch_to_file("https://cdn.test/missing.mp4", dest, timeout=5.0)

    assert "404" in str(exc_info.value)
    assert exc_info.value.url == "https://cdn.test/missing.mp4"
    assert not dest.exists()


@pytest.mark.asyncio
async def test_fetch_network_error_raises_download_error(mock_http, tmp_path):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    mock_http(handler)
    dest = tmp_path / "v.mp4"

    with pytest.raises(DownloadError):
        await fetch_to_file("https://cdn.test/v.mp4", dest, timeout=5.0)
    assert not dest.exists()


@pytest.mark.asyncio
async def test_fetch_timeout_raises_step_timeout(mock_http, tmp_path):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    mock_http(handler)
    dest = tmp_path / "v.mp4"

    with pytest.raises(StepTimeoutError) as exc_info:
        await fetch_to_file("https://cdn.test/v.mp4", dest, timeout=7.0)

    assert exc_info.value.step == "download"
    assert exc_info.value.seconds == 7.0
    assert not dest.exists()


@pytest.mark.asyncio
async def test_fetch_write_failure_raises_download_error(mock_http, tmp_path):
    mock_http(lambda request: httpx.Response(200, content=b"data"))
    dest = tmp_path / "no_such_dir" / "v.mp4"

    with pytest.raises(DownloadError):
        await fetch_to_file("https://cdn.test/v.mp4", dest, timeout=5.0)
    assert not dest.exists()


@pytest.mark.asyncio
async def test_fetch_slow_trickle_hits_overall_timeout(mock_http, tmp_path):
    # Each byte arrives well within the read timeout, the whole body does not
    async def trickle():
        for _ in range(8):
            await asyncio.sleep(0.3)
            yield b"x"

    mock_http(lambda request: httpx.Response(200, content=trickle()))
    dest = tmp_path / "slow.mp4"

    loop = asyncio.get_running_loop()
    started = loop.time()
    with pytest.raises(StepTimeoutError) as exc_info:
        await fetch_to_file("https://cdn.test/slow.mp4", dest, timeout=0.5)

    assert loop.time() - started < 1.5
    assert exc_info.value.step == "download"
    assert not dest.exists()


@pytest.mark.asyncio
async def test_fetch_cancelled_mid_transfer_removes_partial_file(mock_http, tmp_path):
    first_chunk_written = asyncio.Event()

    async def stalled_body():
        yield b"partial"
        first_chunk_written.set()
        await asyncio.sleep(30)
        yield b"never"

    mock_http(lambda request: httpx.Response(200, content=stalled_body()))
    dest = tmp_path / "cancelled.mp4"

    task = asyncio.create_task(fetch_to_file("https://cdn.test/v.mp4", dest, timeout=60.0))
    await first_chunk_written.wait()
    assert dest.exists()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert not dest.exists()

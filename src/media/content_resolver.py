# media/content_resolver.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Resolve a platform link into local media files.

The extraction API is asked for direct media URLs. Its answer is either a
photo gallery (an ordered list of image URLs) or a single video. Galleries
are downloaded image by image; videos are downloaded and an MP3 track is
derived from them.

If any step fails, every file this module created for the request is
removed before the error propagates. Callers only ever receive complete
results.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import httpx  # pyright: ignore[reportMissingImports]

from config import BROWSER_USER_AGENT
from exceptions import ResolutionError, StepTimeoutError

from .audio_extract import extract_audio
from .media_scratch import get_scratch_file, new_request_id, remove_scratch_files
from .media_types import (
    ExtractionPayload,
    GalleryLinks,
    GalleryResult,
    RetrievalResult,
    VideoLink,
    VideoResult,
)
from .remote_fetch import fetch_to_file
from .settings import PipelineSettings

logger = logging.getLogger(__name__)

LOOKUP_FAILED_MESSAGE = "Не удалось скачать видео"


async def request_extraction(url: str, settings: PipelineSettings) -> Any:
    """
    POST the link to the extraction API and return the decoded JSON body.

    Raises:
        ResolutionError: If the API is unreachable, answers non-2xx, or the body is not JSON
        StepTimeoutError: If the full exchange takes longer than settings.api_timeout
    """
    headers = {
        "Content-Type": "application/json",
        "User-Agent": BROWSER_USER_AGENT,
    }
    try:
        async with asyncio.timeout(settings.api_timeout):
            async with httpx.AsyncClient(follow_redirects=True, timeout=settings.api_timeout) as client:
                response = await client.post(
                    settings.api_url,
                    json={"url": url, "hd": 1},
                    headers=headers,
                )
    except (TimeoutError, httpx.TimeoutException) as e:
        raise StepTimeoutError("extraction API", settings.api_timeout) from e
    except httpx.HTTPError as e:
        logger.warning(f"[resolve] Extraction API request failed for {url}: {e}")
        raise ResolutionError(LOOKUP_FAILED_MESSAGE) from e

    if not response.is_success:
        logger.warning(f"[resolve] Extraction API answered HTTP {response.status_code} for {url}")
        raise ResolutionError(LOOKUP_FAILED_MESSAGE)

    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"[resolve] Extraction API returned non-JSON body for {url}")
        raise ResolutionError(LOOKUP_FAILED_MESSAGE) from e


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_extraction_payload(payload: Any, base_url: str | None = None) -> ExtractionPayload:
    """
    Interpret the extraction API body as a gallery or a single video.

    Missing or malformed fields raise ResolutionError rather than producing
    an empty result. Relative media URLs are resolved against base_url.
    """
    if not isinstance(payload, dict) or payload.get("code") != 0:
        raise ResolutionError(LOOKUP_FAILED_MESSAGE)

    data = payload.get("data")
    if not isinstance(data, dict) or not data:
        raise ResolutionError(LOOKUP_FAILED_MESSAGE)

    def absolute(link: str) -> str:
        return urljoin(base_url, link) if base_url else link

    images = data.get("images")
    if images:
        if not isinstance(images, list):
            raise ResolutionError(LOOKUP_FAILED_MESSAGE)
        urls = [_non_empty_str(item) for item in images]
        if any(u is None for u in urls):
            raise ResolutionError(LOOKUP_FAILED_MESSAGE)
        return GalleryLinks(urls=[absolute(u) for u in urls])

    video_url = _non_empty_str(data.get("hdplay")) or _non_empty_str(data.get("play"))
    if not video_url:
        raise ResolutionError(LOOKUP_FAILED_MESSAGE)
    return VideoLink(url=absolute(video_url))


async def _download_gallery(
    links: GalleryLinks,
    platform: str,
    scratch_dir: Path,
    settings: PipelineSettings,
) -> GalleryResult:
    request_id = new_request_id()
    images: list[Path] = []
    try:
        for index, image_url in enumerate(links.urls):
            image_path = get_scratch_file(scratch_dir, f"{platform}_{request_id}_{index}.jpg")
            # Registered before the fetch; a cancelled transfer leaves a partial file
            images.append(image_path)
            await fetch_to_file(image_url, image_path, timeout=settings.fetch_timeout)
    except BaseException:
        remove_scratch_files(images)
        raise

    logger.info(f"[resolve] Downloaded gallery of {len(images)} images ({request_id})")
    return GalleryResult(images=images)


async def _download_video(
    link: VideoLink,
    platform: str,
    scratch_dir: Path,
    settings: PipelineSettings,
) -> VideoResult:
    request_id = new_request_id()
    video_path = get_scratch_file(scratch_dir, f"{platform}_{request_id}.mp4")

    try:
        await fetch_to_file(link.url, video_path, timeout=settings.fetch_timeout)
        audio_path = await extract_audio(
            video_path,
            timeout=settings.transcode_timeout,
            ffmpeg_binary=settings.ffmpeg_binary,
        )
    except BaseException:
        remove_scratch_files([video_path])
        raise

    logger.info(f"[resolve] Downloaded video and derived audio ({request_id})")
    return VideoResult(video=video_path, audio=audio_path)


async def resolve_content(
    url: str,
    platform: str,
    scratch_dir: Path,
    settings: PipelineSettings,
) -> RetrievalResult:
    """
    Materialize the media behind a platform link in the scratch directory.

    Args:
        url: The link the user sent
        platform: Platform id from detect_platform (used in file names)
        scratch_dir: Directory for temporary files
        settings: API endpoint and step timeouts

    Returns:
        GalleryResult with every image in original order, or VideoResult
        with both the video and its derived audio track

    Raises:
        ResolutionError, DownloadError, TranscodeError, StepTimeoutError
    """
    payload = await request_extraction(url, settings)
    links = parse_extraction_payload(payload, base_url=settings.api_url)

    if isinstance(links, GalleryLinks):
        return await _download_gallery(links, platform, scratch_dir, settings)
    return await _download_video(links, platform, scratch_dir, settings)

# media/remote_fetch.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Stream remote files to local storage."""

import asyncio
import logging
from pathlib import Path

import httpx  # pyright: ignore[reportMissingImports]

from config import BROWSER_USER_AGENT
from exceptions import DownloadError, StepTimeoutError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


async def fetch_to_file(url: str, destination: Path, *, timeout: float) -> Path:
    """
    Download url into destination without holding the body in memory.

    Args:
        url: Remote file URL
        destination: Local path to write
        timeout: Limit in seconds for the whole transfer, from connect to last byte

    Returns:
        The destination path

    Raises:
        DownloadError: On non-2xx status, network failure or write failure
        StepTimeoutError: If the transfer takes longer than timeout

    On any failure, cancellation included, the destination is removed, so
    callers never see a partially written file.
    """
    headers = {"User-Agent": BROWSER_USER_AGENT}
    logger.debug(f"[fetch] {url} -> {destination}")

    try:
        async with asyncio.timeout(timeout):
            async with httpx.AsyncClient(follow_redirects=True, timeout=timeout) as client:
                async with client.stream("GET", url, headers=headers) as response:
                    if not response.is_success:
                        raise DownloadError(
                            f"Не удалось загрузить файл: HTTP {response.status_code}",
                            url=url,
                        )
                    with open(destination, "wb") as f:
                        async for chunk in response.aiter_bytes(_CHUNK_SIZE):
                            f.write(chunk)
    except DownloadError:
        destination.unlink(missing_ok=True)
        raise
    # TimeoutError is an OSError subclass and must be handled first
    except (TimeoutError, httpx.TimeoutException) as e:
        destination.unlink(missing_ok=True)
        raise StepTimeoutError("download", timeout) from e
    except httpx.HTTPError as e:
        destination.unlink(missing_ok=True)
        raise DownloadError(f"Не удалось загрузить файл: {type(e).__name__}", url=url) from e
    except OSError as e:
        destination.unlink(missing_ok=True)
        raise DownloadError(f"Не удалось сохранить файл: {e}", url=url) from e
    except BaseException:
        destination.unlink(missing_ok=True)
        raise

    logger.debug(f"[fetch] saved {destination.stat().st_size} bytes to {destination.name}")
    return destination

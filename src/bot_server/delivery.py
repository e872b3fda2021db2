# bot_server/delivery.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Per-link delivery pipeline.

One status message tracks progress for each link. It is edited as the
pipeline advances, deleted after a successful delivery, and rewritten with
the error text on failure so the user keeps the explanation.
"""
import logging
from enum import Enum

from config import MEDIA_GROUP_LIMIT
from exceptions import DeliveryError, RelayBotError, UnsupportedPlatformError
from media.content_resolver import resolve_content
from media.media_scratch import remove_scratch_files
from media.media_types import GalleryResult, RetrievalResult, VideoResult
from media.platform import require_platform
from utils.formatting import format_log_prefix

from .context import AppContext
from .transport import ChatTransport

logger = logging.getLogger(__name__)

UNSUPPORTED_LINK_TEXT = "Неподдерживаемая ссылка. Отправьте ссылку на TikTok."
STATUS_DOWNLOADING = "⏳ Скачиваю..."
STATUS_SENDING_PHOTOS = "📸 Отправляю фото..."
STATUS_SENDING_VIDEO = "📹 Отправляю видео..."
STATUS_SENDING_AUDIO = "🎵 Отправляю аудио..."
UNKNOWN_ERROR_TEXT = "Неизвестная ошибка"


class LinkOutcome(str, Enum):
    REJECTED = "rejected"
    FAILED = "failed"
    DONE = "done"


def format_error_status(error: BaseException) -> str:
    return f"❌ Ошибка: {str(error) or UNKNOWN_ERROR_TEXT}"


async def _report_failure(
    transport: ChatTransport, status_id: int, error: BaseException, log_prefix: str
) -> None:
    """Write the error into the status message. A failed edit is logged, not raised."""
    try:
        await transport.edit_text(status_id, format_error_status(error))
    except DeliveryError as e:
        logger.error(f"{log_prefix} Could not report failure to user: {e}")


async def _deliver_gallery(transport: ChatTransport, status_id: int, result: GalleryResult) -> None:
    await transport.edit_text(status_id, STATUS_SENDING_PHOTOS)
    # Images past the album limit are dropped
    await transport.send_photo_group(result.images[:MEDIA_GROUP_LIMIT])
    await transport.delete(status_id)


async def _deliver_video(transport: ChatTransport, status_id: int, result: VideoResult) -> None:
    await transport.edit_text(status_id, STATUS_SENDING_VIDEO)
    await transport.send_video(result.video)
    await transport.edit_text(status_id, STATUS_SENDING_AUDIO)
    await transport.send_audio(result.audio)
    await transport.delete(status_id)


async def _deliver(transport: ChatTransport, status_id: int, result: RetrievalResult) -> None:
    if isinstance(result, GalleryResult):
        await _deliver_gallery(transport, status_id, result)
    else:
        await _deliver_video(transport, status_id, result)


async def process_link(ctx: AppContext, transport: ChatTransport, url: str) -> LinkOutcome:
    """
    Run the full pipeline for one link: detect, resolve, deliver, clean up.

    Returns the terminal state reached. Raises only if the initial status
    message (or the rejection reply) cannot be sent, since there is then no
    message left to report the problem in.
    """
    log_prefix = format_log_prefix(transport.chat_id, url)

    try:
        platform = require_platform(url)
    except UnsupportedPlatformError:
        logger.info(f"{log_prefix} Unsupported link, rejecting")
        await transport.send_text(UNSUPPORTED_LINK_TEXT)
        return LinkOutcome.REJECTED

    status_id = await transport.send_text(STATUS_DOWNLOADING)

    try:
        result = await resolve_content(url, platform, ctx.scratch_dir, ctx.settings)
    except RelayBotError as e:
        logger.warning(f"{log_prefix} Resolution failed: {e}")
        await _report_failure(transport, status_id, e, log_prefix)
        return LinkOutcome.FAILED
    except Exception as e:
        logger.exception(f"{log_prefix} Unexpected error while resolving: {e}")
        await _report_failure(transport, status_id, e, log_prefix)
        return LinkOutcome.FAILED

    logger.info(f"{log_prefix} Resolved {result.kind} with {len(result.assets)} files")
    try:
        await _deliver(transport, status_id, result)
    except RelayBotError as e:
        logger.warning(f"{log_prefix} Delivery failed: {e}")
        await _report_failure(transport, status_id, e, log_prefix)
        return LinkOutcome.FAILED
    except Exception as e:
        logger.exception(f"{log_prefix} Unexpected error while delivering: {e}")
        await _report_failure(transport, status_id, e, log_prefix)
        return LinkOutcome.FAILED
    finally:
        remove_scratch_files(result.assets)

    logger.info(f"{log_prefix} Delivered {result.kind}")
    return LinkOutcome.DONE

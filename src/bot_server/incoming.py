# bot_server/incoming.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Incoming Telegram message handler."""
import logging
import re

from exceptions import DeliveryError
from utils import format_log_prefix, format_message_content_for_logging

from .context import AppContext
from .delivery import process_link
from .transport import ChatTransport

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://\S+")

GREETING_TEXT = "👋 Привет! Отправь мне ссылку на видео из TikTok"
NO_LINK_TEXT = "Пожалуйста, отправьте ссылку на TikTok."


def extract_urls(text: str) -> list[str]:
    """Return every http(s) link in text, in order of appearance."""
    return URL_PATTERN.findall(text or "")


def is_start_command(text: str) -> bool:
    command = text.strip().split(maxsplit=1)[0] if text.strip() else ""
    # Bot commands may carry the bot's username: /start@relay_bot
    return command.split("@", 1)[0] == "/start"


async def _reply(transport: ChatTransport, text: str, log_prefix: str) -> None:
    try:
        await transport.send_text(text)
    except DeliveryError as e:
        logger.error(f"{log_prefix} Failed to reply: {e}")


async def handle_incoming_message(ctx: AppContext, event):
    text = getattr(event, "raw_text", None) or ""
    if not text.strip():
        # photos, stickers and other non-text messages are ignored
        return

    chat_id = event.chat_id
    log_prefix = format_log_prefix(chat_id)
    logger.info(f"{log_prefix} Received: {format_message_content_for_logging(event.message)}")

    transport = ChatTransport(ctx.client, chat_id)

    if is_start_command(text):
        await _reply(transport, GREETING_TEXT, log_prefix)
        return

    urls = extract_urls(text)
    if not urls:
        await _reply(transport, NO_LINK_TEXT, log_prefix)
        return

    # Links are handled strictly one after another
    for url in urls:
        try:
            outcome = await process_link(ctx, transport, url)
            logger.info(f"{format_log_prefix(chat_id, url)} Finished: {outcome.value}")
        except Exception as e:
            logger.exception(f"{format_log_prefix(chat_id, url)} Pipeline aborted: {e}")

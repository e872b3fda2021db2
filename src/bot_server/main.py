# bot_server/main.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Bot entry point: startup checks, wiring, and the Telegram event loop."""
import asyncio
import logging
import signal
import sys
from pathlib import Path

from telethon import events  # pyright: ignore[reportMissingImports]

from config import (
    BOT_TOKEN,
    LOG_LEVEL,
    MEDIA_SCRATCH_DIRECTORY,
    TELEGRAM_API_HASH,
    TELEGRAM_API_ID,
)
from media.media_scratch import init_media_scratch
from media.settings import PipelineSettings
from telegram_util import get_bot_client

from .context import AppContext
from .incoming import handle_incoming_message

# Configure logging level from environment variable, default to INFO
log_level = getattr(logging, LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress verbose library messages
logging.getLogger("telethon").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


def check_credentials() -> None:
    """Exit the process with status 1 if required credentials are missing."""
    missing = []
    if not BOT_TOKEN:
        missing.append("BOT_TOKEN")
    if not TELEGRAM_API_ID:
        missing.append("TELEGRAM_API_ID")
    if not TELEGRAM_API_HASH:
        missing.append("TELEGRAM_API_HASH")

    if missing:
        for name in missing:
            logger.error(f"Startup check failed: {name} is not set (environment or .env file)")
        sys.exit(1)


def _install_signal_handlers(client) -> None:
    loop = asyncio.get_running_loop()

    def _stop(signame: str) -> None:
        logger.info(f"{signame} received, disconnecting")
        loop.create_task(client.disconnect())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _stop, sig.name)
        except NotImplementedError:
            # Windows event loops do not support signal handlers
            pass


async def main():
    check_credentials()

    scratch_dir = init_media_scratch(Path(MEDIA_SCRATCH_DIRECTORY))
    client = get_bot_client()
    ctx = AppContext(
        client=client,
        scratch_dir=scratch_dir,
        settings=PipelineSettings.from_config(),
    )

    @client.on(events.NewMessage(incoming=True))
    async def handle(event):
        await handle_incoming_message(ctx, event)

    await client.start(bot_token=BOT_TOKEN)
    me = await client.get_me()
    logger.info(f"Bot @{getattr(me, 'username', None)} is running")

    _install_signal_handlers(client)
    try:
        await client.run_until_disconnected()
    finally:
        if client.is_connected():
            await client.disconnect()
        logger.info("Bot stopped")

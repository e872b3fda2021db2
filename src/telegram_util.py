# telegram_util.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import logging
import os

from telethon import TelegramClient  # pyright: ignore[reportMissingImports]

from config import STATE_DIRECTORY, TELEGRAM_API_HASH, TELEGRAM_API_ID

logger = logging.getLogger(__name__)


def get_bot_client(session_name: str = "relay_bot") -> TelegramClient:
    """
    Return a Telethon client for the bot account.

    The client is not connected; call `await client.start(bot_token=...)`.
    """
    api_id = TELEGRAM_API_ID
    api_hash = TELEGRAM_API_HASH
    session_root = STATE_DIRECTORY

    if not all([api_id, api_hash, session_root]):
        raise RuntimeError(
            "Missing required environment variables: TELEGRAM_API_ID, TELEGRAM_API_HASH, RELAY_BOT_STATE_DIR"
        )

    session_dir = os.path.join(session_root, session_name)
    os.makedirs(session_dir, exist_ok=True)
    session_path = os.path.join(session_dir, "telegram.session")

    logger.info(f"Creating bot client with session at {session_path}")
    return TelegramClient(session_path, int(api_id), api_hash)

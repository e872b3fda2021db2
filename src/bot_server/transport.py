# bot_server/transport.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Chat operations used by the delivery pipeline, bound to one chat."""
import logging
from pathlib import Path
from typing import Any

from telethon.errors import RPCError  # pyright: ignore[reportMissingImports]

from exceptions import DeliveryError

logger = logging.getLogger(__name__)

# Errors Telethon raises for failed API calls, lost connections and bad input
_TRANSPORT_ERRORS = (RPCError, OSError, ValueError)


class ChatTransport:
    """
    Thin wrapper around a Telethon client for a single chat.

    Every operation raises DeliveryError when Telegram rejects it or the
    connection fails, so the pipeline deals with a single error kind.
    """

    def __init__(self, client: Any, chat_id: int):
        self.client = client
        self.chat_id = chat_id

    async def send_text(self, text: str) -> int:
        """Send a text message and return its message id."""
        try:
            message = await self.client.send_message(self.chat_id, text)
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось отправить сообщение: {e}") from e
        return message.id

    async def edit_text(self, message_id: int, text: str) -> None:
        try:
            await self.client.edit_message(self.chat_id, message_id, text)
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось изменить сообщение: {e}") from e

    async def delete(self, message_id: int) -> None:
        try:
            await self.client.delete_messages(self.chat_id, [message_id])
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось удалить сообщение: {e}") from e

    async def send_video(self, path: Path) -> None:
        try:
            await self.client.send_file(self.chat_id, file=str(path), supports_streaming=True)
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось отправить видео: {e}") from e

    async def send_audio(self, path: Path) -> None:
        try:
            await self.client.send_file(self.chat_id, file=str(path), voice_note=False)
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось отправить аудио: {e}") from e

    async def send_photo_group(self, paths: list[Path]) -> None:
        """Send photos as one album. Telegram accepts at most 10 items per album."""
        if not paths:
            return
        try:
            await self.client.send_file(self.chat_id, file=[str(p) for p in paths])
        except _TRANSPORT_ERRORS as e:
            raise DeliveryError(f"Не удалось отправить фото: {e}") from e

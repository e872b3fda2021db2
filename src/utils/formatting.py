# src/utils/formatting.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#


def format_log_prefix(chat_id: int | str | None, link: str | None = None) -> str:
    """
    Format a log prefix as [chat_id] or [chat_id->link].

    Long links are shortened so log lines stay readable.

    Examples:
        >>> format_log_prefix(123)
        "[123]"
        >>> format_log_prefix(123, "https://vt.tiktok.com/ZXYZ")
        "[123->https://vt.tiktok.com/ZXYZ]"
    """
    chat = "?" if chat_id is None else str(chat_id)
    if link is None:
        return f"[{chat}]"
    if len(link) > 40:
        link = link[:40] + "…"
    return f"[{chat}->{link}]"


def format_message_content_for_logging(message) -> str:
    """
    Format an inbound Telegram message for logging purposes.
    Returns the stripped text, or a placeholder for messages without text.
    """
    text_content = getattr(message, "text", None) or ""
    text_content = text_content.strip()
    if not text_content:
        return "‹media›"
    if len(text_content) > 200:
        return text_content[:200] + "…"
    return text_content

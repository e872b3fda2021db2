# utils/__init__.py
#
# Shared utility functions package.

from utils.formatting import format_log_prefix, format_message_content_for_logging

__all__ = [
    "format_log_prefix",
    "format_message_content_for_logging",
]

# src/exceptions.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Exception types for the link relay pipeline.

Every failure that can happen while handling one link derives from
RelayBotError. The message text is shown to the user as-is.
"""


class RelayBotError(Exception):
    """Base class for pipeline failures reported to the user."""


class UnsupportedPlatformError(RelayBotError):
    """The link does not belong to a supported platform."""


class ResolutionError(RelayBotError):
    """The extraction API was unreachable, refused the link, or returned an unusable payload."""


class DownloadError(RelayBotError):
    """
    A remote file could not be downloaded to local storage.

    Covers non-2xx HTTP status, network failures and filesystem write
    failures. The destination file is never left behind.
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class TranscodeError(RelayBotError):
    """Audio could not be derived from a video file."""


class DeliveryError(RelayBotError):
    """A chat transport operation (send, edit, delete) failed."""


class StepTimeoutError(RelayBotError):
    """
    A pipeline step exceeded its time limit.

    Args:
        step: Short name of the step that timed out (e.g. "download")
        seconds: The limit that was exceeded
    """

    def __init__(self, step: str, seconds: float):
        super().__init__(f"Превышено время ожидания ({step}, {seconds:g} с)")
        self.step = step
        self.seconds = seconds

# media/platform.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Classify links by source platform."""

from exceptions import UnsupportedPlatformError

TIKTOK = "tiktok"

# Canonical domain plus the short-link domains used by the share button
_PLATFORM_DOMAINS: dict[str, tuple[str, ...]] = {
    TIKTOK: ("tiktok.com", "vt.tiktok.com", "vm.tiktok.com"),
}


def detect_platform(text: str) -> str | None:
    """
    Return the platform id a link belongs to, or None if unsupported.

    Matching is a case-insensitive substring test on the known domains.
    """
    lowered = (text or "").lower()
    for platform, domains in _PLATFORM_DOMAINS.items():
        if any(domain in lowered for domain in domains):
            return platform
    return None


def require_platform(url: str) -> str:
    """Like detect_platform, but raises UnsupportedPlatformError for unknown links."""
    platform = detect_platform(url)
    if platform is None:
        raise UnsupportedPlatformError(f"Unsupported link: {url}")
    return platform

# tests/test_platform.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import pytest

from exceptions import UnsupportedPlatformError
from media.platform import TIKTOK, detect_platform, require_platform


@pytest.mark.parametrize(
    "text",
    [
        "https://www.tiktok.com/@someone/video/7300000000000000000",
        "https://vt.tiktok.com/ZXYZ/",
        "https://vm.tiktok.com/ZMabc/",
        "check this out https://vt.tiktok.com/ZXYZ out",
        "HTTPS://WWW.TIKTOK.COM/@loud/video/1",
        "tiktok.com",
    ],
)
def test_detects_tiktok_domains(text):
    assert detect_platform(text) == TIKTOK


@pytest.mark.parametrize(
    "text",
    [
        "https://www.youtube.com/watch?v=abc",
        "https://instagram.com/reel/xyz",
        "https://tiktok.example.org/video",
        "",
        "no link at all",
    ],
)
def test_rejects_other_strings(text):
    assert detect_platform(text) is None


def test_none_input_is_unsupported():
    assert detect_platform(None) is None


def test_require_platform_raises_for_unsupported_link():
    assert require_platform("https://vm.tiktok.com/ZMabc/") == TIKTOK
    with pytest.raises(UnsupportedPlatformError):
        require_platform("https://example.com/video")

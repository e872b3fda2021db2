# bot_server/context.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Process-wide state shared by all message handlers."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from media.settings import PipelineSettings


@dataclass(frozen=True)
class AppContext:
    """
    Built once at startup and passed to every handler.

    Only the contents of scratch_dir change after construction.
    """

    client: Any  # connected Telethon client
    scratch_dir: Path
    settings: PipelineSettings

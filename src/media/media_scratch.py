# src/media/media_scratch.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import logging
import secrets
import shutil
from collections.abc import Iterable
from pathlib import Path

from config import MEDIA_SCRATCH_DIRECTORY

logger = logging.getLogger(__name__)


def init_media_scratch(scratch_dir: Path | None = None) -> Path:
    """
    Initialize the media scratch directory.
    Clears any existing files to ensure a clean state on startup.
    """
    scratch_dir = Path(scratch_dir or MEDIA_SCRATCH_DIRECTORY)

    try:
        if scratch_dir.exists():
            logger.info(f"Clearing media scratch directory: {scratch_dir}")
            shutil.rmtree(scratch_dir)
    except OSError as e:
        logger.error(f"Failed to clear media scratch directory: {e}")

    scratch_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Initialized media scratch directory: {scratch_dir}")
    return scratch_dir


def new_request_id() -> str:
    """Random hex id used to namespace one request's files in the scratch directory."""
    return secrets.token_hex(8)


def get_scratch_file(scratch_dir: Path, filename: str) -> Path:
    """
    Get a path for a file in the scratch directory.
    Ensures the scratch directory exists.
    """
    if not scratch_dir.exists():
        scratch_dir.mkdir(parents=True, exist_ok=True)

    return scratch_dir / filename


def remove_scratch_files(paths: Iterable[Path]) -> None:
    """
    Delete scratch files. Missing files are ignored; other failures are
    logged so that the remaining files are still removed.
    """
    for path in paths:
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove scratch file {path}: {e}")

# media/audio_extract.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Audio extraction from downloaded videos.

Runs ffmpeg as a subprocess. The binary comes from FFMPEG_BINARY when set,
otherwise from the ffmpeg bundled with imageio-ffmpeg.
"""

import asyncio
import logging
from pathlib import Path

import imageio_ffmpeg  # pyright: ignore[reportMissingImports]

from config import AUDIO_BITRATE
from exceptions import StepTimeoutError, TranscodeError

logger = logging.getLogger(__name__)


def get_ffmpeg_binary(override: str | None = None) -> str:
    """Return the ffmpeg executable to run."""
    if override:
        return override
    try:
        return imageio_ffmpeg.get_ffmpeg_exe()
    except RuntimeError as e:
        raise TranscodeError(f"ffmpeg не найден: {e}") from e


def audio_path_for(video_path: Path) -> Path:
    """Audio output path: same directory and base name, .mp3 extension."""
    return video_path.with_suffix(".mp3")


def build_ffmpeg_command(ffmpeg: str, video_path: Path, audio_path: Path) -> list[str]:
    return [
        ffmpeg,
        "-y",
        "-i",
        str(video_path),
        "-vn",
        "-acodec",
        "libmp3lame",
        "-b:a",
        AUDIO_BITRATE,
        "-f",
        "mp3",
        str(audio_path),
    ]


async def extract_audio(
    video_path: Path,
    *,
    timeout: float,
    ffmpeg_binary: str | None = None,
) -> Path:
    """
    Derive an MP3 track from a video file.

    Args:
        video_path: Local video file
        timeout: Seconds to wait for ffmpeg before killing it
        ffmpeg_binary: Optional explicit ffmpeg executable

    Returns:
        Path to the .mp3 file next to the video

    Raises:
        TranscodeError: If ffmpeg cannot run, fails, or writes no audio
        StepTimeoutError: If ffmpeg does not finish within timeout
    """
    audio_path = audio_path_for(video_path)
    cmd = build_ffmpeg_command(get_ffmpeg_binary(ffmpeg_binary), video_path, audio_path)
    logger.debug(f"[audio] Running: {' '.join(cmd)}")

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise TranscodeError(f"Не удалось запустить ffmpeg: {e}") from e

    try:
        _, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError as e:
        try:
            proc.kill()
        except ProcessLookupError:
            pass  # exited between the timeout and the kill
        await proc.wait()
        audio_path.unlink(missing_ok=True)
        raise StepTimeoutError("ffmpeg", timeout) from e

    if proc.returncode != 0:
        audio_path.unlink(missing_ok=True)
        lines = (stderr or b"").decode("utf-8", errors="replace").strip().splitlines()
        last_line = lines[-1] if lines else ""
        logger.error(f"[audio] ffmpeg exited with {proc.returncode} for {video_path.name}: {last_line}")
        raise TranscodeError(
            f"Не удалось извлечь аудио (ffmpeg код {proc.returncode})"
        )

    if not audio_path.exists() or audio_path.stat().st_size == 0:
        audio_path.unlink(missing_ok=True)
        raise TranscodeError("Не удалось извлечь аудио: пустой файл")

    logger.info(f"[audio] Extracted {audio_path.name} ({audio_path.stat().st_size} bytes)")
    return audio_path

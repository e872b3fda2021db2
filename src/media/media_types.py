# media/media_types.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal


# --- extraction payload variants (remote URLs, nothing downloaded yet) ---


@dataclass(frozen=True)
class VideoLink:
    url: str  # best quality the API offered (hdplay, else play)


@dataclass(frozen=True)
class GalleryLinks:
    urls: list[str]  # original order, never empty


ExtractionPayload = VideoLink | GalleryLinks


# --- retrieval results (files materialized in the scratch directory) ---


@dataclass(frozen=True)
class VideoResult:
    video: Path
    audio: Path
    kind: Literal["video"] = field(default="video", init=False)

    @property
    def assets(self) -> list[Path]:
        return [self.video, self.audio]


@dataclass(frozen=True)
class GalleryResult:
    images: list[Path]
    kind: Literal["images"] = field(default="images", init=False)

    @property
    def assets(self) -> list[Path]:
        return list(self.images)


RetrievalResult = VideoResult | GalleryResult

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import gcd
from pathlib import Path


class Source(str, Enum):
    BOX_ART = "box-art"
    POSTER_ART = "poster-art"


@dataclass(frozen=True)
class SourceImages:
    box_art: Path
    poster_art: Path

    def path_for(self, source: Source) -> Path:
        if source is Source.BOX_ART:
            return self.box_art
        return self.poster_art


@dataclass(frozen=True)
class OutputSpec:
    source: Source
    width: int
    height: int
    filename: str
    note: str = ""

    @property
    def size_label(self) -> str:
        return f"{self.width}x{self.height}"


APP_ICON_SIZES = (32, 44, 71, 89, 107, 128, 142, 150, 284, 310)


def app_icon_filename(size: int) -> str:
    # 128 keeps the Tauri bundle name instead of the Square*Logo pattern
    if size == 128:
        return "128x128.png"
    return f"Square{size}x{size}Logo.png"


MANIFEST: tuple[OutputSpec, ...] = (
    OutputSpec(Source.BOX_ART, 1080, 1080, "box-art-1080.png", "Required for Microsoft Store"),
    OutputSpec(Source.BOX_ART, 2160, 2160, "box-art-2160.png", "High resolution"),
    OutputSpec(Source.POSTER_ART, 720, 1080, "poster-art-720.png", "Recommended for Microsoft Store"),
    OutputSpec(Source.POSTER_ART, 1440, 2160, "poster-art-1440.png", "High resolution"),
    OutputSpec(Source.BOX_ART, 300, 300, "StoreLogo.png", "Store logo"),
    *(
        OutputSpec(Source.BOX_ART, size, size, app_icon_filename(size), "App icon")
        for size in APP_ICON_SIZES
    ),
    OutputSpec(Source.BOX_ART, 512, 512, "icon.png", "Main app icon"),
)


def manifest_filenames(manifest: tuple[OutputSpec, ...] = MANIFEST) -> set[str]:
    return {spec.filename for spec in manifest}


def aspect_ratio(spec: OutputSpec) -> tuple[int, int]:
    """Reduced width:height ratio, e.g. (2, 3) for 720x1080."""
    d = gcd(spec.width, spec.height)
    return spec.width // d, spec.height // d

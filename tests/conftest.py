from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from logogen.manifest import SourceImages


def _write_png(path: Path, size: tuple[int, int]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, (200, 40, 40, 255)).save(path, format="PNG")
    return path


@pytest.fixture
def make_png() -> Callable[[Path, tuple[int, int]], Path]:
    return _write_png


@pytest.fixture
def sources(tmp_path: Path) -> SourceImages:
    # Raster stand-ins keep these tests independent of libcairo
    return SourceImages(
        box_art=_write_png(tmp_path / "src" / "box.png", (64, 64)),
        poster_art=_write_png(tmp_path / "src" / "poster.png", (40, 60)),
    )

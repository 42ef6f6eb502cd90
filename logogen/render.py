from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image

SVG_SUFFIXES = {".svg", ".svgz"}


def _render_svg(source: Path, width: int) -> Image.Image:
    # cairocffi loads libcairo at import time; a missing library must surface
    # as a failed export, not as an import error of this module.
    import cairosvg

    # Width only: CairoSVG keeps the drawing's own ratio and never letterboxes,
    # the caller stretches to the final height.
    data = cairosvg.svg2png(url=str(source), output_width=width)
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def _render_raster(source: Path) -> Image.Image:
    with Image.open(source) as img:
        return img.convert("RGBA")


def rasterize(source: Path, width: int, height: int) -> Image.Image:
    """Load `source` and return an image of exactly width x height.

    SVG sources are rendered by CairoSVG at the target width; anything else is
    opened with Pillow. The result is then stretched to the target size, so
    aspect ratio is not preserved for either kind of source.
    """
    source = Path(source)
    if not source.is_file():
        raise FileNotFoundError(f"Source image not found: {source}")

    if source.suffix.lower() in SVG_SUFFIXES:
        img = _render_svg(source, width)
    else:
        img = _render_raster(source)

    if img.size != (width, height):
        logging.debug("Resizing %s from %sx%s to %sx%s", source.name, *img.size, width, height)
        img = img.resize((width, height), Image.Resampling.LANCZOS)
    return img


def write_png(img: Image.Image, path: Path) -> int:
    """Encode as PNG, replacing any existing file. Returns bytes written."""
    img.save(path, format="PNG")
    return path.stat().st_size

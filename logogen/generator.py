from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from PIL import Image

from .manifest import MANIFEST, OutputSpec, SourceImages
from .render import rasterize, write_png

Renderer = Callable[[Path, int, int], Image.Image]


class ExportFailure(RuntimeError):
    """Reading a source, resizing or writing an output failed."""

    def __init__(self, message: str, spec: OutputSpec | None = None):
        super().__init__(message)
        self.spec = spec


@dataclass
class ExportResult:
    path: Path
    width: int
    height: int
    size_bytes: int


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportFailure(f"Cannot create output directory {path}: {e}") from e


def export_one(
    spec: OutputSpec, sources: SourceImages, output_dir: Path, render: Renderer = rasterize
) -> ExportResult:
    target = output_dir / spec.filename
    try:
        img = render(sources.path_for(spec.source), spec.width, spec.height)
        size = write_png(img, target)
    except Exception as e:
        raise ExportFailure(f"Failed to generate {spec.filename}: {e}", spec) from e
    return ExportResult(path=target, width=img.width, height=img.height, size_bytes=size)


def generate(
    sources: SourceImages,
    output_dir: Path,
    manifest: Sequence[OutputSpec] = MANIFEST,
    render: Renderer = rasterize,
) -> list[ExportResult]:
    """Render every manifest entry into `output_dir`, in order.

    Stops at the first failure and raises ExportFailure. Files written before
    the failure are left on disk; unrelated files in the directory are never
    touched.
    """
    output_dir = Path(output_dir)
    _ensure_dir(output_dir)

    results: list[ExportResult] = []
    for spec in manifest:
        logging.info("Generating %s (%s)...", spec.filename, spec.size_label)
        results.append(export_one(spec, sources, output_dir, render))
    return results

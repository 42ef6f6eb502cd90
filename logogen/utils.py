from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .generator import ExportResult
from .manifest import MANIFEST, OutputSpec


def human_bytes(n: int) -> str:
    step = 1024.0
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    v = float(n)
    while v >= step and i < len(units) - 1:
        v /= step
        i += 1
    return f"{v:.2f} {units[i]}"


def display_path(path: Path, base_dir: Path | None = None) -> str:
    """Path relative to base_dir when it lies inside it, else as given."""
    if base_dir is None:
        return str(path)
    try:
        return str(path.resolve().relative_to(base_dir.resolve()))
    except ValueError:
        return str(path)


def summary_lines(
    results: Sequence[ExportResult],
    output_dir: Path,
    base_dir: Path | None = None,
    manifest: Sequence[OutputSpec] = MANIFEST,
) -> list[str]:
    notes = {spec.filename: spec.note for spec in manifest}
    lines = [f"Files created in {display_path(output_dir, base_dir)}/:"]
    for res in results:
        line = f"  - {res.path.name} ({res.width}x{res.height}, {human_bytes(res.size_bytes)})"
        if notes.get(res.path.name):
            line += f" - {notes[res.path.name]}"
        lines.append(line)
    return lines

from pathlib import Path

import pytest
from PIL import Image

from logogen.generator import ExportFailure, generate
from logogen.manifest import MANIFEST, SourceImages, manifest_filenames


def _sizes(out_dir: Path) -> dict[str, tuple[int, int]]:
    sizes = {}
    for p in out_dir.glob("*.png"):
        with Image.open(p) as img:
            sizes[p.name] = img.size
    return sizes


def test_generate_creates_dir_and_all_outputs(tmp_path: Path, sources: SourceImages):
    out = tmp_path / "src-tauri" / "icons"
    assert not out.exists()

    results = generate(sources, out)

    assert len(results) == 16
    assert {p.name for p in out.iterdir()} == manifest_filenames()
    sizes = _sizes(out)
    for spec in MANIFEST:
        assert sizes[spec.filename] == (spec.width, spec.height)
    assert [r.path.name for r in results] == [s.filename for s in MANIFEST]


def test_generate_twice_same_files_and_dimensions(tmp_path: Path, sources: SourceImages):
    out = tmp_path / "icons"
    generate(sources, out)
    first = _sizes(out)
    generate(sources, out)
    assert _sizes(out) == first


def test_generate_leaves_unrelated_files(tmp_path: Path, sources: SourceImages):
    out = tmp_path / "icons"
    out.mkdir()
    keep = out / "icon.ico"
    keep.write_bytes(b"not touched")
    (out / "StoreLogo.png").write_bytes(b"old")

    generate(sources, out)

    assert keep.read_bytes() == b"not touched"
    with Image.open(out / "StoreLogo.png") as img:
        assert img.size == (300, 300)


def test_missing_box_art_aborts_before_any_output(tmp_path: Path, sources: SourceImages):
    out = tmp_path / "icons"
    broken = SourceImages(box_art=tmp_path / "missing.svg", poster_art=sources.poster_art)

    with pytest.raises(ExportFailure) as exc:
        generate(broken, out)

    assert exc.value.spec is MANIFEST[0]
    assert isinstance(exc.value.__cause__, FileNotFoundError)
    assert out.is_dir()
    assert list(out.iterdir()) == []


def test_missing_poster_art_keeps_earlier_outputs(tmp_path: Path, sources: SourceImages):
    out = tmp_path / "icons"
    broken = SourceImages(box_art=sources.box_art, poster_art=tmp_path / "missing.svg")

    with pytest.raises(ExportFailure) as exc:
        generate(broken, out)

    assert exc.value.spec.filename == "poster-art-720.png"
    assert {p.name for p in out.iterdir()} == {"box-art-1080.png", "box-art-2160.png"}


def test_render_error_stops_sequence(tmp_path: Path, sources: SourceImages):
    calls = []

    def render(path: Path, width: int, height: int) -> Image.Image:
        calls.append((width, height))
        if width == 300:
            raise ValueError("unsupported format")
        return Image.new("RGBA", (width, height))

    with pytest.raises(ExportFailure, match="StoreLogo.png"):
        generate(sources, tmp_path / "icons", render=render)
    assert calls[-1] == (300, 300)
    assert len(calls) == 5


def test_output_dir_cannot_be_created(tmp_path: Path, sources: SourceImages):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(ExportFailure) as exc:
        generate(sources, blocker / "icons")
    assert exc.value.spec is None

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from .manifest import SourceImages

DEFAULT_BOX_ART = "logo-box-art.svg"
DEFAULT_POSTER_ART = "logo-poster-art.svg"
DEFAULT_ICONS_DIR = "src-tauri/icons"

# Directory holding main.py and the logo sources
PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _under(base_dir: Path, raw: str) -> Path:
    p = Path(raw.strip()).expanduser()
    if p.is_absolute():
        return p.resolve()
    return (base_dir / p).resolve()


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_dir: Path
    box_art: Path
    poster_art: Path
    icons_dir: Path
    # Logging
    log_file: Path | None = None
    log_level: str = "INFO"
    log_max_bytes: int = 5 * 1024 * 1024
    log_backups: int = 5

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return (v or "INFO").upper()

    @field_validator("base_dir", "box_art", "poster_art", "icons_dir", mode="before")
    @classmethod
    def _ensure_path(cls, v: Path | str) -> Path:
        return Path(v).expanduser().resolve()

    @field_validator("log_file", mode="before")
    @classmethod
    def _ensure_log_path(cls, v: str | Path | None) -> Path | None:
        if not v:
            return None
        return Path(v).expanduser().resolve()

    @field_validator("log_max_bytes", "log_backups")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    def sources(self) -> SourceImages:
        return SourceImages(box_art=self.box_art, poster_art=self.poster_art)


def load_settings(default_base_dir: Path = PROJECT_ROOT) -> Settings:
    base_dir_raw = os.getenv("BASE_DIR", "").strip()
    base_dir = Path(base_dir_raw or default_base_dir).expanduser().resolve()

    box_art = _under(base_dir, os.getenv("BOX_ART_SVG", "") or DEFAULT_BOX_ART)
    poster_art = _under(base_dir, os.getenv("POSTER_ART_SVG", "") or DEFAULT_POSTER_ART)
    icons_dir = _under(base_dir, os.getenv("ICONS_DIR", "") or DEFAULT_ICONS_DIR)

    # Logging
    log_file_raw = os.getenv("LOG_FILE", "").strip()
    log_file = _under(base_dir, log_file_raw) if log_file_raw else None
    log_level = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()
    log_max_bytes = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
    log_backups = int(os.getenv("LOG_BACKUPS", "5"))

    return Settings(
        base_dir=base_dir,
        box_art=box_art,
        poster_art=poster_art,
        icons_dir=icons_dir,
        log_file=log_file,
        log_level=log_level,
        log_max_bytes=log_max_bytes,
        log_backups=log_backups,
    )

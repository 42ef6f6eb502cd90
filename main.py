from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv

from logogen.config import Settings, load_settings
from logogen.generator import ExportFailure, generate
from logogen.utils import summary_lines

INSTALL_HINT = "Make sure you have installed CairoSVG and Pillow: pip install cairosvg pillow"


def _setup_logging(settings: Settings) -> None:
    # Console always; optional rotating file
    log_format = "%(asctime)s %(levelname)s %(name)s %(message)s"
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=log_format)
    if settings.log_file:
        try:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                settings.log_file,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backups,
                encoding="utf-8",
            )
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter(log_format))
            root = logging.getLogger()
            root.addHandler(fh)
        except Exception:
            logging.exception("Failed to set up file logging")


def main() -> int:
    # Load .env if present
    load_dotenv()

    try:
        settings = load_settings(Path(__file__).resolve().parent)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logging.error("Invalid configuration: %s", e)
        return 2

    _setup_logging(settings)
    logging.info("Generating logos into %s", settings.icons_dir)

    try:
        results = generate(settings.sources(), settings.icons_dir)
    except ExportFailure as e:
        logging.exception("Error generating logos: %s", e)
        logging.error(INSTALL_HINT)
        return 1

    logging.info("All logos generated successfully!")
    for line in summary_lines(results, settings.icons_dir, settings.base_dir):
        logging.info(line)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

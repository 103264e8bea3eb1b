"""Configuration helpers for pocketnotes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = PROJECT_ROOT / ".env"
DEFAULT_DATA_DIR = Path("~/.pocketnotes")

# Load .env from the project root (if present) regardless of current working dir
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    data_dir: Path
    notes_dir: Path
    log_level: str
    log_file: Optional[Path]
    log_format: str

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


def _resolve_dir(raw_value: str | None, default: Path, base: Path | None = None) -> Path:
    if not raw_value:
        path = default.expanduser()
    else:
        path = Path(raw_value).expanduser()
    if not path.is_absolute() and base is not None:
        path = base / path
    return path.resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    data_dir = _resolve_dir(os.getenv("DATA_DIR"), DEFAULT_DATA_DIR, base=Path.cwd())
    data_dir.mkdir(parents=True, exist_ok=True)

    notes_dir = _resolve_dir(os.getenv("NOTES_DIR"), data_dir / "notes", base=data_dir)

    raw_log_file = os.getenv("LOG_FILE")
    if raw_log_file == "-":
        log_file = None
    else:
        log_file = _resolve_dir(raw_log_file, data_dir / "pocketnotes.log", base=data_dir)

    return Settings(
        data_dir=data_dir,
        notes_dir=notes_dir,
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        log_file=log_file,
        log_format=os.getenv("LOG_FORMAT", "text").lower(),
    )


__all__ = ["Settings", "get_settings", "PROJECT_ROOT"]

"""
Runtime settings read from the environment.
Game rules are constants in the modules that apply them, not settings.
"""
from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def log_level() -> str:
    return os.environ.get("FOOTBALL_TCG_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_dir() -> Path:
    raw = os.environ.get("FOOTBALL_TCG_LOG_DIR", "").strip()
    return Path(raw) if raw else PROJECT_ROOT / "logs"


def cors_origins() -> list[str]:
    raw = os.environ.get("FOOTBALL_TCG_CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]

"""
Settings -- environment-driven configuration for docforge.

Configuration via environment:
  DOCFORGE_DB_PATH=data/docforge.db      (SQLite file backing draft history)
  DOCFORGE_MAX_VERSIONS=10               (drafts kept per document)
  DOCFORGE_MAX_CONTENT_CHARS=1000000     (largest draft accepted by save)
  DOCFORGE_MAX_DOCUMENT_CHARS=200000     (scoring input is truncated past this)
  DOCFORGE_LOG_LEVEL=WARNING             (CLI log level)

Bad values fall back to the defaults with a warning instead of failing.

Keep this file under 100 lines.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data/docforge.db")
DEFAULT_MAX_VERSIONS = 10
DEFAULT_MAX_CONTENT_CHARS = 1_000_000
DEFAULT_MAX_DOCUMENT_CHARS = 200_000
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    db_path: Path = DEFAULT_DB_PATH
    max_versions: int = DEFAULT_MAX_VERSIONS
    max_content_chars: int = DEFAULT_MAX_CONTENT_CHARS
    max_document_chars: int = DEFAULT_MAX_DOCUMENT_CHARS
    log_level: str = DEFAULT_LOG_LEVEL


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"[Config] {name}={raw!r} is not an integer, using {default}")
        return default
    if value < 1:
        logger.warning(f"[Config] {name}={value} must be positive, using {default}")
        return default
    return value


def _env_log_level() -> str:
    level = os.environ.get("DOCFORGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"[Config] Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    db_path = os.environ.get("DOCFORGE_DB_PATH", "").strip()
    return Settings(
        db_path=Path(db_path) if db_path else DEFAULT_DB_PATH,
        max_versions=_env_int("DOCFORGE_MAX_VERSIONS", DEFAULT_MAX_VERSIONS),
        max_content_chars=_env_int("DOCFORGE_MAX_CONTENT_CHARS", DEFAULT_MAX_CONTENT_CHARS),
        max_document_chars=_env_int("DOCFORGE_MAX_DOCUMENT_CHARS", DEFAULT_MAX_DOCUMENT_CHARS),
        log_level=_env_log_level(),
    )

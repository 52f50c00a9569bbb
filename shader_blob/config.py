# ==================================================
# shader_blob/config.py
# ==================================================
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

# ───────────────────────── configuration ──────────────────────
LOG_LEVEL  = os.getenv("SHADER_BLOB_LOG_LEVEL",  "WARNING")
LOG_FORMAT = os.getenv("SHADER_BLOB_LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")
DIGESTS    = os.getenv("SHADER_BLOB_DIGESTS",    "0")

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level:  str  = "WARNING"
    log_format: str  = "%(levelname)s %(name)s: %(message)s"
    digests:    bool = False


def load_settings(environ: Optional[dict] = None) -> Settings:
    """Settings from ``environ``; without one, the values read at import."""
    if environ is None:
        return Settings(LOG_LEVEL.upper(), LOG_FORMAT, DIGESTS.lower() in _TRUE)
    return Settings(
        environ.get("SHADER_BLOB_LOG_LEVEL", Settings.log_level).upper(),
        environ.get("SHADER_BLOB_LOG_FORMAT", Settings.log_format),
        environ.get("SHADER_BLOB_DIGESTS", "0").lower() in _TRUE,
    )


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """Root logging setup for command-line use; the library itself never calls this."""
    name = (level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level {name!r}")
    logging.basicConfig(level=name, format=settings.log_format)

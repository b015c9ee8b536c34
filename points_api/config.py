# Purpose: Central place for the runtime settings of the Points Converter API.
# Everything here is read once at startup; nothing is reloaded while serving.

import os
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .errors import ConfigError

# --- Server ---
API_PREFIX = "/api/v1"
DEFAULT_PORT = 8080
HOST = "0.0.0.0"

# --- Dataset Location ---
# Order matters: the container layout wins over the local-dev checkout.
DATA_PATH_CANDIDATES: Tuple[Path, ...] = (
    Path("conversions.json"),                          # Docker image
    Path("..") / "public" / "data" / "conversions.json",  # Local dev (run from api/)
)

# --- CORS ---
ALLOWED_ORIGINS: Tuple[str, ...] = (
    "https://points-converter.com",  # Production frontend
    "http://localhost:5173",         # Vite dev server
    "http://localhost:4173",         # Vite preview server
)
ALLOWED_METHODS: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOWED_HEADERS: Tuple[str, ...] = ("Origin", "Content-Type", "Accept", "Authorization")
CORS_MAX_AGE = 12 * 60 * 60  # seconds


def get_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Reads the listen port from the PORT environment variable.

    Unset or empty falls back to DEFAULT_PORT. Anything that is not a
    decimal integer in 1-65535 is a ConfigError.
    """
    if environ is None:
        environ = os.environ

    raw = environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT

    if not (raw.isascii() and raw.isdigit()):
        raise ConfigError(f"PORT must be a decimal integer, got {raw!r}")

    port = int(raw)
    if not 1 <= port <= 65535:
        raise ConfigError(f"PORT out of range (1-65535): {port}")
    return port


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ
    return environ.get("LOG_LEVEL", "").strip().upper() or "INFO"

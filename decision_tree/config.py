"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PORT = 3000


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_port() -> int:
    raw = os.getenv("PORT", str(DEFAULT_PORT)).strip()
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid PORT={raw!r}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT


CONFIG = {
    "port": _env_port(),
    "host": os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
    # Trace incoming /execute payloads to stderr
    "log_requests": _env_flag("LOG_REQUESTS", "true"),
}


@dataclass
class AppConfig:
    """Typed configuration — mirrors the CONFIG dict."""

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    log_requests: bool = True

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=_env_port(),
            host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
            log_requests=_env_flag("LOG_REQUESTS", "true"),
        )

"""
HumanCheck Service Configuration

Reads settings for the HTTP service from environment variables
(optionally loaded from a .env file). The scoring pipeline itself
takes no configuration.

- HUMANCHECK_LOG_LEVEL: Root log level (default: INFO)
- HUMANCHECK_CORS_ORIGINS: Comma-separated allowed origins (default: *)
- HUMANCHECK_HOST: Bind address (default: 0.0.0.0)
- HUMANCHECK_PORT: Bind port (default: 8000)
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Service settings snapshot."""
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000


def _parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build a cached Settings instance from the environment.

    Call get_settings.cache_clear() after changing the environment.
    """
    load_dotenv()

    log_level = os.getenv("HUMANCHECK_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(f"Unknown HUMANCHECK_LOG_LEVEL={log_level!r}, falling back to INFO")
        log_level = "INFO"

    raw_port = os.getenv("HUMANCHECK_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError:
        logger.warning(f"Invalid HUMANCHECK_PORT={raw_port!r}, falling back to 8000")
        port = 8000

    return Settings(
        log_level=log_level,
        cors_origins=_parse_origins(os.getenv("HUMANCHECK_CORS_ORIGINS", "*")),
        host=os.getenv("HUMANCHECK_HOST", "0.0.0.0"),
        port=port,
    )

"""
Application Configuration

Settings are read from the environment (optionally from a `.env` file via
python-dotenv). Wizard limits and table names are module constants.

Environment variables:
- SUPABASE_URL / NEXT_PUBLIC_SUPABASE_URL: hosted catalog URL
- SUPABASE_KEY / SUPABASE_ANON_KEY: hosted catalog API key
- CONNECTOR_CATALOG_CSV: offline connector catalog (used when Supabase is not set)
- TERMINAL_CATALOG_CSV: offline terminal catalog
- CONNECTOR_GUIDE_LANGUAGE: default UI language
- CONNECTOR_GUIDE_LOG_LEVEL: logging level name
- CONNECTOR_GUIDE_QUERY_TIMEOUT: per-query timeout in seconds (empty = no timeout)

Usage:
    from connector_guide.config import load_settings, configure_logging

    settings = load_settings()
    configure_logging(settings.log_level)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from connector_guide.errors import ConfigurationError

# Wizard configuration
TOTAL_STEPS = 5
RESULTS_STEP = 5
MIN_POLE_COUNT = 2
MAX_POLE_COUNT = 12

# Catalog configuration
CONNECTORS_TABLE = "connectors"
TERMINALS_TABLE = "terminals"
DEFAULT_ORDER_FIELD = "model"

DEFAULT_LANGUAGE = "en"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    """Runtime settings resolved from the environment."""
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    catalog_csv: Optional[str] = None
    terminals_csv: Optional[str] = None
    default_language: str = DEFAULT_LANGUAGE
    log_level: str = "INFO"
    query_timeout_seconds: Optional[float] = None

    @property
    def has_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"CONNECTOR_GUIDE_QUERY_TIMEOUT must be a number, got {raw!r}")
    if timeout <= 0:
        raise ConfigurationError(f"CONNECTOR_GUIDE_QUERY_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a .env file. Values already present in the
            environment take precedence over the file.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value cannot be parsed
    """
    load_dotenv(env_file)

    return Settings(
        supabase_url=_first_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
        supabase_key=_first_env("SUPABASE_KEY", "SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        catalog_csv=_first_env("CONNECTOR_CATALOG_CSV"),
        terminals_csv=_first_env("TERMINAL_CATALOG_CSV"),
        default_language=_first_env("CONNECTOR_GUIDE_LANGUAGE") or DEFAULT_LANGUAGE,
        log_level=(_first_env("CONNECTOR_GUIDE_LOG_LEVEL") or "INFO").upper(),
        query_timeout_seconds=_parse_timeout(os.getenv("CONNECTOR_GUIDE_QUERY_TIMEOUT")),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

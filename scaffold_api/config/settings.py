"""Application configuration settings"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

VALID_DB_PROVIDERS = ("postgresql", "mysql", "sqlite")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading base-10 integer of a string.

    Trailing characters are ignored ("8080abc" -> 8080). Returns None when the
    string has no leading digits; callers decide what an unparsable value means.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _get(environ: Mapping[str, str], key: str, default: str) -> str:
    # Empty values count as absent
    return environ.get(key) or default


@dataclass(frozen=True)
class AppConfig:
    port: Optional[int]
    environment: str
    api_prefix: str
    log_level: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@dataclass(frozen=True)
class DatabaseConfig:
    url: str
    provider: str
    logging: bool
    connect_timeout: int


@dataclass(frozen=True)
class LoggingConfig:
    log_dir: str
    max_bytes: int
    backup_count: int
    log_format: str


def load_app_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    env = os.environ if environ is None else environ
    return AppConfig(
        port=parse_int(_get(env, "PORT", "4200")),
        environment=env.get("APP_ENV") or env.get("NODE_ENV") or "development",
        api_prefix=_get(env, "API_PREFIX", "v1"),
        log_level=_get(env, "LOG_LEVEL", "info"),
    )


def load_database_config(environ: Optional[Mapping[str, str]] = None) -> DatabaseConfig:
    env = os.environ if environ is None else environ
    provider = env.get("DATABASE_PROVIDER", "")
    timeout = parse_int(_get(env, "DATABASE_CONNECT_TIMEOUT", "10"))
    return DatabaseConfig(
        # Empty URL = let the Prisma schema resolve env("DATABASE_URL")
        url=env.get("DATABASE_URL", ""),
        provider=provider if provider in VALID_DB_PROVIDERS else "postgresql",
        logging=env.get("DATABASE_LOGGING", "false").lower() == "true",
        connect_timeout=timeout if timeout is not None else 10,
    )


def load_logging_config(environ: Optional[Mapping[str, str]] = None) -> LoggingConfig:
    env = os.environ if environ is None else environ
    # LOG_MAX_SIZE / LOG_MAX_FILES are the older names, still honoured
    max_bytes = parse_int(
        env.get("LOG_MAX_BYTES") or _get(env, "LOG_MAX_SIZE", str(10 * 1024 * 1024))
    )
    backup_count = parse_int(env.get("LOG_BACKUP_COUNT") or _get(env, "LOG_MAX_FILES", "7"))
    return LoggingConfig(
        log_dir=_get(env, "LOG_DIR", os.path.join(os.getcwd(), "logs")),
        max_bytes=max_bytes if max_bytes is not None else 10 * 1024 * 1024,
        backup_count=backup_count if backup_count is not None else 7,
        log_format=_get(
            env,
            "LOG_FORMAT",
            "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
        ),
    )


@lru_cache(maxsize=1)
def get_app_config() -> AppConfig:
    """Process-wide AppConfig, read once from the environment."""
    return load_app_config()


@lru_cache(maxsize=1)
def get_database_config() -> DatabaseConfig:
    return load_database_config()


@lru_cache(maxsize=1)
def get_logging_config() -> LoggingConfig:
    return load_logging_config()

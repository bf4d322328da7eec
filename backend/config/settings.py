"""
Runtime Configuration

All settings come from environment variables prefixed with USERS_API_ and are
read once at import time. Tests build their own Settings instance and inject it
through get_settings.
"""
import os
import logging
from dataclasses import dataclass, field
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = 'USERS_API_'
DATA_DIR = Path.home() / ".users-api"


def _split_csv(raw: str) -> tuple[str, ...]:
    """Split a comma-separated value, dropping blanks"""
    return tuple(item.strip() for item in raw.split(',') if item.strip())


def _parse_port(raw: str) -> int:
    """Parse a TCP port, rejecting anything outside 1-65535"""
    try:
        port = int(raw)
    except ValueError:
        port = 0
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid port: {raw!r}", missing_keys=[f"{ENV_PREFIX}PORT"])
    return port


@dataclass(frozen=True)
class Settings:
    """Resolved application settings"""

    database_url: str = f"sqlite:///{DATA_DIR / 'users.db'}"
    api_tokens: frozenset[str] = field(default_factory=frozenset)
    log_level: str = 'INFO'
    log_dir: Path | None = DATA_DIR / "logs"
    cors_origins: tuple[str, ...] = ('*',)
    host: str = '127.0.0.1'
    port: int = 8000


def load_settings(environ: dict | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance
    """
    env = os.environ if environ is None else environ

    def get(name: str, default: str | None = None) -> str | None:
        return env.get(f"{ENV_PREFIX}{name}", default)

    defaults = Settings()

    log_dir_raw = get('LOG_DIR')
    if log_dir_raw is None:
        log_dir = defaults.log_dir
    elif log_dir_raw.strip():
        log_dir = Path(log_dir_raw).expanduser()
    else:
        log_dir = None  # explicitly disabled

    tokens = frozenset(_split_csv(get('TOKENS', '')))
    if not tokens:
        logger.warning(f"{ENV_PREFIX}TOKENS is empty - every guarded route will answer 401")

    return Settings(
        database_url=get('DATABASE_URL', defaults.database_url),
        api_tokens=tokens,
        log_level=get('LOG_LEVEL', defaults.log_level).upper(),
        log_dir=log_dir,
        cors_origins=_split_csv(get('CORS_ORIGINS', '*')) or defaults.cors_origins,
        host=get('HOST', defaults.host),
        port=_parse_port(get('PORT', str(defaults.port))),
    )


# Global settings for module-level wiring (engine, logging)
settings = load_settings()


def get_settings() -> Settings:
    """Dependency provider for FastAPI routes"""
    return settings

from pathlib import Path
from sqlalchemy.engine import Engine, make_url
import logging

from database import engine, Base
import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(bind: Engine) -> None:
    """Create the parent directory of a file-backed SQLite database"""
    url = make_url(str(bind.url))
    if url.get_backend_name() != 'sqlite' or not url.database or url.database == ':memory:':
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def init_database(bind: Engine | None = None) -> None:
    """
    Create any missing tables.

    Args:
        bind: Engine to initialize (defaults to the application engine)
    """
    bind = bind or engine
    _ensure_sqlite_directory(bind)
    Base.metadata.create_all(bind)
    logger.info(f"Database ready: {bind.url.render_as_string(hide_password=True)}")

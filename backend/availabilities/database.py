import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings
from .models.events import Base

logger = logging.getLogger(__name__)


def make_engine(url: str) -> Engine:
    """Create an engine; SQLite gets thread-safe connect args."""
    if not url.startswith("sqlite"):
        return create_engine(url)

    # check_same_thread=False: sessions are used from FastAPI worker threads
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees its own empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = make_engine(settings.resolved_database_url)

# SessionLocal: основной способ работы с БД
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def migrate(bind: Engine | None = None) -> None:
    """Create the events table if it does not exist."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Schema ready: {', '.join(Base.metadata.tables)}")


# Dependency для FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

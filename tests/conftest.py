from datetime import datetime

import pytest
from sqlalchemy.orm import sessionmaker

from availabilities.database import make_engine, migrate
from availabilities.models.events import Events


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    migrate(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_event(db):
    def _add(starts_at: str, ends_at: str, kind: str, weekly_recurring=None) -> Events:
        obj = Events(
            starts_at=datetime.fromisoformat(starts_at),
            ends_at=datetime.fromisoformat(ends_at),
            kind=kind,
            weekly_recurring=weekly_recurring,
        )
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    return _add

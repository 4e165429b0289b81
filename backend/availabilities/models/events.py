from sqlalchemy import Boolean, Column, DateTime, Enum, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()
metadata = Base.metadata


class Events(Base):
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True)
    starts_at = Column(DateTime, nullable=False)
    ends_at = Column(DateTime, nullable=False)
    kind = Column(Enum('appointment', 'opening', name='event_kind'), nullable=False)
    weekly_recurring = Column(Boolean)

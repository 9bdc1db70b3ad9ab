"""SQLAlchemy ORM models: two single-row tables."""

from sqlalchemy import CheckConstraint, Column, Integer
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


SINGLE_ROW_ID = 1


class SettingsRecord(Base):
    """Interval lengths (seconds) and long-break cadence."""

    __tablename__ = "app_settings"
    __table_args__ = (CheckConstraint(f"id = {SINGLE_ROW_ID}", name="single_row"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    work_seconds = Column(Integer, nullable=False)
    short_break_seconds = Column(Integer, nullable=False)
    long_break_seconds = Column(Integer, nullable=False)
    long_break_every = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<SettingsRecord work={self.work_seconds} short={self.short_break_seconds} "
            f"long={self.long_break_seconds} every={self.long_break_every}>"
        )


class CounterRecord(Base):
    """Lifetime count of finished work periods."""

    __tablename__ = "app_counters"
    __table_args__ = (CheckConstraint(f"id = {SINGLE_ROW_ID}", name="single_row"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    completed_pomodoros = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<CounterRecord completed={self.completed_pomodoros}>"

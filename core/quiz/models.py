"""
SQLAlchemy ORM models for quiz persistence.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class MasteryStateEntry(Base):
    """
    One persisted mastery record, keyed by session key (e.g. "kanji-5").

    value holds the JSON payload {"wrong": [...], "correct": [...]}.
    """
    __tablename__ = 'mastery_state'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<MasteryStateEntry({self.key})>"

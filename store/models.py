"""Таблицы базы отзывов."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from .database import Base


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class FeedbackRecord(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    rating = Column(Integer, nullable=True)
    feedback_text = Column(Text, nullable=False)
    feedback_type = Column(String, nullable=False, default="regular", index=True)
    liked = Column(Boolean, nullable=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow, index=True)

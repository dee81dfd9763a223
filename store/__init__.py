"""Хранилище отзывов (SQLAlchemy).

Только добавление и выборка: записи не изменяются и не удаляются.
"""

from .database import Base, make_engine
from .repository import FeedbackStore, StoreError

__all__ = ["Base", "make_engine", "FeedbackStore", "StoreError"]

"""Хранилище отзывов: insert / query."""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.feedback import Feedback, FeedbackIn
from .database import init_db, make_engine, make_session_factory
from .models import FeedbackRecord

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Ошибка операции с хранилищем."""


class FeedbackStore:
    """Хранилище отзывов поверх SQLAlchemy."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session = make_session_factory(engine)
        init_db(engine)

    @classmethod
    def from_url(cls, url: str) -> "FeedbackStore":
        return cls(make_engine(url))

    def insert(self, feedback: FeedbackIn) -> Feedback:
        """Сохранить отзыв; id и created_at назначаются базой.

        Raises:
            StoreError: ошибка базы данных.
        """
        record = FeedbackRecord(**feedback.model_dump())
        try:
            with self._session() as db:
                db.add(record)
                db.commit()
                db.refresh(record)
                return Feedback.model_validate(record)
        except SQLAlchemyError as e:
            logger.exception("Error saving feedback")
            raise StoreError("Failed to save feedback") from e

    def query(self, limit: int | None = None) -> list[Feedback]:
        """Все отзывы, новые первыми.

        Raises:
            StoreError: ошибка базы данных.
        """
        try:
            with self._session() as db:
                q = db.query(FeedbackRecord).order_by(
                    FeedbackRecord.created_at.desc(), FeedbackRecord.id.desc()
                )
                if limit is not None:
                    q = q.limit(limit)
                return [Feedback.model_validate(r) for r in q.all()]
        except SQLAlchemyError as e:
            logger.exception("Error fetching feedback")
            raise StoreError("Failed to load feedback") from e

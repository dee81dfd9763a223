"""Отзывы пользователей: модели, статистика, фильтрация, экспорт CSV."""

import csv
from datetime import date, datetime
from typing import Iterable, Literal

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from core.errors import InvalidInput

FeedbackType = Literal["regular", "exit"]

CSV_HEADER = ("Date", "Name", "Email", "Type", "Rating", "Liked", "Feedback")

EXIT_LIKED_TEXT = "User liked the experience"
EXIT_DISLIKED_TEXT = "User did not like the experience"


class FeedbackBase(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str | None = None
    email: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    feedback_text: str = Field(min_length=1)
    feedback_type: FeedbackType = "regular"
    liked: bool | None = None

    @field_validator("name", "email", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("rating", mode="before")
    @classmethod
    def zero_rating_is_unrated(cls, v):
        """0 звёзд — оценка не поставлена."""
        if v in (0, "0", ""):
            return None
        return v


class FeedbackIn(FeedbackBase):
    """Новый отзыв (id и created_at назначает хранилище)."""

    @model_validator(mode="after")
    def regular_needs_name(self):
        if self.feedback_type == "regular" and not self.name:
            raise ValueError("name is required for regular feedback")
        return self


class Feedback(FeedbackBase):
    """Сохранённый отзыв."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class FeedbackStats(BaseModel):
    total: int = 0
    regular: int = 0
    exit: int = 0
    avg_rating: float = 0.0
    liked: int = 0
    disliked: int = 0


def build_feedback(form: dict) -> FeedbackIn:
    """Собрать отзыв из формы.

    Raises:
        InvalidInput: не заполнены имя или текст отзыва, оценка вне 1–5.
    """
    try:
        return FeedbackIn(**form)
    except ValidationError as e:
        fields = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
        raise InvalidInput(
            "Please provide your name and feedback.",
            fields=fields or ["name"],
            title="Missing Information",
        ) from e


def exit_feedback(liked: bool) -> FeedbackIn:
    """Отзыв при уходе со страницы («Before you go…»)."""
    return FeedbackIn(
        feedback_text=EXIT_LIKED_TEXT if liked else EXIT_DISLIKED_TEXT,
        feedback_type="exit",
        liked=liked,
    )


def feedback_stats(items: list[Feedback]) -> FeedbackStats:
    """Сводка для панели отзывов."""
    ratings = [f.rating for f in items if f.rating]
    return FeedbackStats(
        total=len(items),
        regular=sum(1 for f in items if f.feedback_type == "regular"),
        exit=sum(1 for f in items if f.feedback_type == "exit"),
        avg_rating=sum(ratings) / len(ratings) if ratings else 0.0,
        liked=sum(1 for f in items if f.liked is True),
        disliked=sum(1 for f in items if f.liked is False),
    )


def filter_feedback(
    items: Iterable[Feedback],
    search: str = "",
    feedback_type: str = "all",
    rating: str = "all",
) -> list[Feedback]:
    """Фильтр по тексту/имени (без учёта регистра), типу и оценке.

    rating: "all", "no-rating" или "1".."5".
    """
    needle = search.strip().lower()

    def matches(item: Feedback) -> bool:
        if needle:
            in_text = needle in item.feedback_text.lower()
            in_name = bool(item.name) and needle in item.name.lower()
            if not (in_text or in_name):
                return False
        if feedback_type != "all" and item.feedback_type != feedback_type:
            return False
        if rating == "no-rating":
            return not item.rating
        if rating != "all":
            return item.rating is not None and str(item.rating) == rating
        return True

    return [item for item in items if matches(item)]


def _liked_label(liked: bool | None) -> str:
    if liked is None:
        return ""
    return "Yes" if liked else "No"


def export_csv(items: Iterable[Feedback]) -> str:
    """CSV: заголовок + по строке на отзыв; все поля в кавычках, кавычки удваиваются."""
    df = pd.DataFrame(
        [
            (
                item.created_at.date().isoformat(),
                item.name or "",
                item.email or "",
                item.feedback_type,
                str(item.rating) if item.rating else "",
                _liked_label(item.liked),
                item.feedback_text,
            )
            for item in items
        ],
        columns=list(CSV_HEADER),
        dtype=str,
    )
    text = df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    return text.removesuffix("\n")


def export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"feedback-export-{today.isoformat()}.csv"

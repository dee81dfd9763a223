"""Подключение к базе данных."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def make_engine(url: str) -> Engine:
    """Создать engine; для файловой SQLite создаётся каталог базы."""
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        # Streamlit выполняет скрипт в разных потоках
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine):
    """Создать таблицы, если их нет."""
    from . import models  # noqa: F401  регистрация таблиц в Base.metadata

    Base.metadata.create_all(bind=engine)

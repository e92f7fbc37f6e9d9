from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


Base = declarative_base()

IN_MEMORY_URLS = {'sqlite://', 'sqlite:///:memory:'}


def create_db_engine(database_url: str) -> Engine:
    if database_url in IN_MEMORY_URLS:
        # One shared connection, otherwise every pooled connection gets its own empty database.
        return create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )

    if database_url.startswith('sqlite'):
        return create_engine(database_url, connect_args={'check_same_thread': False})

    return create_engine(database_url)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

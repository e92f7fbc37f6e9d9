"""Entity store for users, articles, civic alerts, jobs and fact checks.

``Storage`` owns its engine and session factory, so every app (and every
test) works against its own instance. With the default ``sqlite://`` URL
the data lives in one in-memory connection and disappears with the
process; pointing ``DATABASE_URL`` at a real database keeps the same
interface.

Listings never raise for an empty result. Point lookups return ``None``
when the id is unknown.
"""

import logging
import uuid
from datetime import datetime
from threading import RLock

from sqlalchemy.exc import IntegrityError

from backend import seed_data
from backend.database import Base, create_db_engine, create_session_factory, to_naive_utc, utcnow
from backend.models.article import Article
from backend.models.civic_alert import CivicAlert
from backend.models.fact_check import FactCheck
from backend.models.job import Job
from backend.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

USER_DEFAULTS = {
    'location': 'Kenya',
    'role': 'user',
    'articles_read': 0,
    'facts_checked': 0,
    'bookmarks_count': 0,
}
ARTICLE_DEFAULTS = {'verified': True}
CIVIC_ALERT_DEFAULTS = {'is_active': True}


class StorageError(Exception):
    """Base class for entity store failures."""


class DuplicateUserError(StorageError):
    """Raised when a username or email is already registered."""


class UserNotFoundError(StorageError):
    """Raised when a write references a user id that does not exist."""


def _new_id() -> str:
    return str(uuid.uuid4())


def _writable_values(model, data: dict, server_fields: set[str], defaults: dict | None = None) -> dict:
    allowed = {column.name for column in model.__table__.columns} - server_fields
    values = {}
    for key, value in data.items():
        if key not in allowed:
            continue
        values[key] = to_naive_utc(value) if isinstance(value, datetime) else value

    for key, default in (defaults or {}).items():
        if values.get(key) is None:
            values[key] = default

    return values


class Storage:
    def __init__(self, database_url: str = 'sqlite://', seed_sample_data: bool = True) -> None:
        self.engine = create_db_engine(database_url)
        self._session_factory = create_session_factory(self.engine)
        self._lock = RLock()

        Base.metadata.create_all(bind=self.engine)

        if seed_sample_data:
            self.seed()

    def close(self) -> None:
        self.engine.dispose()

    def seed(self, now: datetime | None = None) -> None:
        now = now or utcnow()
        rows = (
            [Article(id=_new_id(), created_at=now, **row) for row in seed_data.sample_articles(now)]
            + [CivicAlert(id=_new_id(), **row) for row in seed_data.sample_civic_alerts(now)]
            + [Job(id=_new_id(), **row) for row in seed_data.sample_jobs(now)]
        )

        with self._lock, self._session_factory() as db:
            db.add_all(rows)
            db.commit()

        logger.info('Seeded entity store with %d sample records.', len(rows))

    # Users

    def get_user(self, user_id: str) -> User | None:
        with self._lock, self._session_factory() as db:
            return db.get(User, user_id)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock, self._session_factory() as db:
            return db.query(User).filter(User.email == email).first()

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock, self._session_factory() as db:
            return db.query(User).filter(User.username == username).first()

    def create_user(self, data: dict) -> User:
        values = _writable_values(
            User,
            data,
            server_fields={'id', 'created_at', 'articles_read', 'facts_checked', 'bookmarks_count'},
            defaults=USER_DEFAULTS,
        )
        user = User(id=_new_id(), created_at=utcnow(), **values)

        with self._lock, self._session_factory() as db:
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateUserError('A user with that username or email already exists.') from exc

        return user

    def update_user(self, user_id: str, updates: dict) -> User | None:
        allowed = {column.name for column in User.__table__.columns} - {'id'}

        with self._lock, self._session_factory() as db:
            user = db.get(User, user_id)
            if user is None:
                return None

            for key, value in updates.items():
                if key in allowed:
                    setattr(user, key, value)

            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateUserError('A user with that username or email already exists.') from exc

            return user

    # Articles

    def get_articles(self, limit: int = DEFAULT_LIMIT, offset: int = 0, category: str | None = None) -> list[Article]:
        with self._lock, self._session_factory() as db:
            query = db.query(Article)
            if category:
                query = query.filter(Article.category == category)

            return query.order_by(Article.published_at.desc(), Article.id).offset(offset).limit(limit).all()

    def get_article(self, article_id: str) -> Article | None:
        with self._lock, self._session_factory() as db:
            return db.get(Article, article_id)

    def create_article(self, data: dict) -> Article:
        now = utcnow()
        values = _writable_values(
            Article,
            data,
            server_fields={'id', 'published_at', 'created_at'},
            defaults=ARTICLE_DEFAULTS,
        )
        article = Article(id=_new_id(), published_at=now, created_at=now, **values)

        with self._lock, self._session_factory() as db:
            db.add(article)
            db.commit()

        return article

    # Civic alerts

    def get_civic_alerts(self, limit: int = DEFAULT_LIMIT) -> list[CivicAlert]:
        with self._lock, self._session_factory() as db:
            return (
                db.query(CivicAlert)
                .filter(CivicAlert.is_active.is_(True))
                .order_by(CivicAlert.created_at.desc(), CivicAlert.id)
                .limit(limit)
                .all()
            )

    def create_civic_alert(self, data: dict) -> CivicAlert:
        values = _writable_values(
            CivicAlert,
            data,
            server_fields={'id', 'created_at'},
            defaults=CIVIC_ALERT_DEFAULTS,
        )
        alert = CivicAlert(id=_new_id(), created_at=utcnow(), **values)

        with self._lock, self._session_factory() as db:
            db.add(alert)
            db.commit()

        return alert

    # Jobs

    def get_jobs(self, limit: int = DEFAULT_LIMIT, job_type: str | None = None) -> list[Job]:
        with self._lock, self._session_factory() as db:
            query = db.query(Job)
            if job_type:
                query = query.filter(Job.type == job_type)

            return query.order_by(Job.posted_at.desc(), Job.id).limit(limit).all()

    def create_job(self, data: dict) -> Job:
        values = _writable_values(Job, data, server_fields={'id', 'posted_at'})
        job = Job(id=_new_id(), posted_at=utcnow(), **values)

        with self._lock, self._session_factory() as db:
            db.add(job)
            db.commit()

        return job

    # Fact checks

    def create_fact_check(self, data: dict) -> FactCheck:
        values = _writable_values(FactCheck, data, server_fields={'id', 'created_at'})

        confidence = values.get('confidence')
        if isinstance(confidence, bool) or not isinstance(confidence, int) or not 0 <= confidence <= 100:
            raise ValueError('Confidence must be an integer between 0 and 100.')

        fact_check = FactCheck(id=_new_id(), created_at=utcnow(), **values)

        with self._lock, self._session_factory() as db:
            user_id = values.get('user_id')
            if user_id is None or db.get(User, user_id) is None:
                raise UserNotFoundError('Fact checks must belong to an existing user.')

            db.add(fact_check)
            db.commit()

        return fact_check

    def get_fact_checks_by_user(self, user_id: str) -> list[FactCheck]:
        with self._lock, self._session_factory() as db:
            return (
                db.query(FactCheck)
                .filter(FactCheck.user_id == user_id)
                .order_by(FactCheck.created_at.desc(), FactCheck.id)
                .all()
            )

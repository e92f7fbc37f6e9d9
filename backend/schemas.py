"""Request and response bodies for the JSON API.

Attributes are snake_case in Python and camelCase on the wire.
"""

import re
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, field_validator, model_validator
from pydantic.alias_generators import to_camel

ROLES = ('user', 'admin')
DEFAULT_LOCATION = 'Kenya'
MIN_PASSWORD_LENGTH = 6
MIN_FACT_CHECK_LENGTH = 10
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError('Invalid email address')
    return normalized


def check_password_length(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    return value


# Requests

class RegisterRequest(CamelModel):
    username: str
    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str
    location: str | None = None
    role: str | None = None

    @field_validator('username')
    @classmethod
    def validate_username(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Username is required')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_length(value)

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('First and last name are required')
        return normalized

    @field_validator('location')
    @classmethod
    def validate_location(cls, value: str | None) -> str:
        if value is None or not value.strip():
            return DEFAULT_LOCATION
        return value.strip()

    @field_validator('role')
    @classmethod
    def validate_role(cls, value: str | None) -> str:
        normalized = (value or '').strip().lower() or 'user'
        if normalized not in ROLES:
            raise ValueError('Role must be one of: user, admin.')
        return normalized

    @model_validator(mode='after')
    def check_passwords_match(self) -> 'RegisterRequest':
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_length(value)


class FactCheckRequest(CamelModel):
    text: str

    @field_validator('text')
    @classmethod
    def validate_text(cls, value: str) -> str:
        if len(value) < MIN_FACT_CHECK_LENGTH:
            raise ValueError(f'Text must be at least {MIN_FACT_CHECK_LENGTH} characters long')
        return value


class ChatRequest(CamelModel):
    message: Any = None

    @model_validator(mode='after')
    def check_message(self) -> 'ChatRequest':
        if not isinstance(self.message, str) or not self.message:
            raise ValueError('Message is required')
        return self


class ArticleCreate(CamelModel):
    title: str
    excerpt: str
    content: str
    category: str
    source: str
    author: str | None = None
    image_url: str | None = None
    verified: bool = True


class CivicAlertCreate(CamelModel):
    title: str
    message: str
    type: str
    category: str
    action_text: str | None = None
    action_url: str | None = None
    is_active: bool = True


class JobCreate(CamelModel):
    title: str
    company: str
    location: str
    type: str
    description: str
    requirements: str
    salary: str | None = None
    application_url: str | None = None
    expires_at: datetime | None = None


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Stored timestamps are naive UTC; responses carry the zone.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


# Responses

class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    location: str | None = None
    role: str
    articles_read: int = 0
    facts_checked: int = 0
    bookmarks_count: int = 0


class ArticleResponse(CamelModel):
    id: str
    title: str
    excerpt: str
    content: str
    category: str
    source: str
    author: str | None = None
    image_url: str | None = None
    verified: bool
    published_at: UtcDatetime
    created_at: UtcDatetime


class CivicAlertResponse(CamelModel):
    id: str
    title: str
    message: str
    type: str
    category: str
    action_text: str | None = None
    action_url: str | None = None
    is_active: bool
    created_at: UtcDatetime


class JobResponse(CamelModel):
    id: str
    title: str
    company: str
    location: str
    type: str
    description: str
    requirements: str
    salary: str | None = None
    application_url: str | None = None
    posted_at: UtcDatetime
    expires_at: UtcDatetime | None = None


class FactCheckResponse(CamelModel):
    id: str
    user_id: str
    text: str
    result: str
    confidence: int
    explanation: str | None = None
    sources: Any = None
    created_at: UtcDatetime


class AuthResponse(CamelModel):
    token: str
    user: UserResponse


class UserEnvelope(CamelModel):
    user: UserResponse


class ArticleListResponse(CamelModel):
    articles: list[ArticleResponse]


class ArticleEnvelope(CamelModel):
    article: ArticleResponse


class CivicAlertListResponse(CamelModel):
    alerts: list[CivicAlertResponse]


class CivicAlertEnvelope(CamelModel):
    alert: CivicAlertResponse


class JobListResponse(CamelModel):
    jobs: list[JobResponse]


class JobEnvelope(CamelModel):
    job: JobResponse


class FactCheckEnvelope(CamelModel):
    fact_check: FactCheckResponse


class FactCheckListResponse(CamelModel):
    fact_checks: list[FactCheckResponse]


class ChatResponse(CamelModel):
    response: str

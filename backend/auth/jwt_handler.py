from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config


class MissingTokenError(Exception):
    """No bearer token was sent with the request."""


class InvalidTokenError(Exception):
    """The token is malformed, expired or signed with another key."""


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    issued_at = datetime.now(timezone.utc)
    payload = {"sub": subject, "exp": issued_at + timedelta(minutes=expire_minutes), "iat": issued_at}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])


def resolve_token(token: str | None) -> str:
    """Return the user id carried by ``token``."""
    if not token:
        raise MissingTokenError("Access token required")

    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as exc:
        raise InvalidTokenError("Invalid token") from exc

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise InvalidTokenError("Invalid token subject")
    return user_id

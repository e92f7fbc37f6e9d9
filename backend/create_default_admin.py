"""Provision the default administrator account.

Usage:
    DEFAULT_ADMIN_PASSWORD=... python -m backend.create_default_admin

Only useful against a persistent DATABASE_URL; the in-memory default is
provisioned by the API process itself at startup.
"""
import logging
import sys

from backend.auth import passwords
from backend.core import config
from backend.core.logging_config import setup_logging
from backend.models.user import User
from backend.schemas import normalize_email
from backend.storage import Storage

logger = logging.getLogger(__name__)


def provision_default_admin(storage: Storage, email: str, username: str, password: str) -> User:
    """Create the admin account unless a user with ``email`` already exists."""
    email = normalize_email(email)
    existing = storage.get_user_by_email(email)
    if existing is not None:
        logger.info('Admin user %s already exists.', email)
        return existing

    admin = storage.create_user(
        {
            'username': username,
            'email': email,
            'password': passwords.hash_password(password),
            'first_name': 'Admin',
            'last_name': 'User',
            'location': 'HQ',
            'role': 'admin',
        }
    )
    logger.info('Default admin created: %s', email)
    return admin


def main() -> None:
    setup_logging(config.LOG_LEVEL)
    if not config.DEFAULT_ADMIN_PASSWORD:
        print('DEFAULT_ADMIN_PASSWORD must be set.', file=sys.stderr)
        sys.exit(1)

    storage = Storage(config.DATABASE_URL, seed_sample_data=False)
    try:
        provision_default_admin(
            storage,
            email=config.DEFAULT_ADMIN_EMAIL,
            username=config.DEFAULT_ADMIN_USERNAME,
            password=config.DEFAULT_ADMIN_PASSWORD,
        )
    finally:
        storage.close()


if __name__ == "__main__":
    main()

from types import SimpleNamespace

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_user, require_admin


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_get_current_user_requires_a_token(storage) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=None, storage=storage)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Access token required'


def test_get_current_user_rejects_invalid_token(storage) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_credentials('garbage'), storage=storage)

    assert exception_info.value.status_code == 403
    assert exception_info.value.detail == 'Invalid token'


def test_get_current_user_rejects_token_for_missing_user(storage) -> None:
    token = jwt_handler.create_access_token(subject='deleted-user')

    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_credentials(token), storage=storage)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'User not found'


def test_get_current_user_resolves_user(storage) -> None:
    user = storage.create_user(
        {'username': 'kamau', 'email': 'kamau@example.com', 'password': 'x', 'first_name': 'J', 'last_name': 'Kamau'}
    )
    token = jwt_handler.create_access_token(subject=user.id)

    assert get_current_user(credentials=_credentials(token), storage=storage).id == user.id


def test_require_admin_rejects_regular_user() -> None:
    with pytest.raises(HTTPException) as exception_info:
        require_admin(current_user=SimpleNamespace(role='user'))

    assert exception_info.value.status_code == 403
    assert exception_info.value.detail == 'Admin access required'


def test_require_admin_passes_admin_through() -> None:
    admin = SimpleNamespace(role='admin')

    assert require_admin(current_user=admin) is admin

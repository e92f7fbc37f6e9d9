import os

os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret')

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from backend.create_default_admin import provision_default_admin  # noqa: E402
from backend.main import create_app  # noqa: E402
from backend.storage import Storage  # noqa: E402

ADMIN_EMAIL = 'admin@sauticheck.com'
ADMIN_PASSWORD = 'admin123'


def registration_payload(**overrides) -> dict:
    payload = {
        'username': 'wanjiku',
        'email': 'wanjiku@example.com',
        'password': 'secret123',
        'confirmPassword': 'secret123',
        'firstName': 'Jane',
        'lastName': 'Wanjiku',
    }
    payload.update(overrides)
    return payload


def bearer(token: str) -> dict:
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def storage():
    store = Storage('sqlite://')
    try:
        yield store
    finally:
        store.close()


@pytest.fixture
def client(storage):
    with TestClient(create_app(storage)) as test_client:
        yield test_client


@pytest.fixture
def user_token(client) -> str:
    response = client.post('/api/auth/register', json=registration_payload())
    assert response.status_code == 201
    return response.json()['token']


@pytest.fixture
def admin_token(client, storage) -> str:
    provision_default_admin(storage, email=ADMIN_EMAIL, username='admin', password=ADMIN_PASSWORD)
    response = client.post('/api/auth/login', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()['token']

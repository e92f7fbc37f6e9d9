import pytest


def _registration(**overrides) -> dict:
    payload = {
        'username': 'mwangi',
        'email': 'mwangi@example.com',
        'password': 'secret123',
        'confirmPassword': 'secret123',
        'firstName': 'James',
        'lastName': 'Mwangi',
    }
    payload.update(overrides)
    return payload


def test_register_returns_token_accepted_by_me(client) -> None:
    response = client.post('/api/auth/register', json=_registration(location='Nakuru'))

    assert response.status_code == 201
    body = response.json()
    assert body['user']['email'] == 'mwangi@example.com'
    assert body['user']['role'] == 'user'
    assert body['user']['location'] == 'Nakuru'
    assert body['user']['factsChecked'] == 0
    assert 'password' not in body['user']

    me = client.get('/api/auth/me', headers={'Authorization': f"Bearer {body['token']}"})

    assert me.status_code == 200
    assert me.json()['user']['email'] == 'mwangi@example.com'
    assert me.json()['user']['id'] == body['user']['id']


def test_register_defaults_location_to_kenya(client) -> None:
    response = client.post('/api/auth/register', json=_registration())

    assert response.json()['user']['location'] == 'Kenya'


def test_register_rejects_duplicate_email_without_mutating(client, storage) -> None:
    assert client.post('/api/auth/register', json=_registration()).status_code == 201

    for attempt in range(2):
        response = client.post('/api/auth/register', json=_registration(username=f'other{attempt}'))

        assert response.status_code == 400
        assert response.json() == {'message': 'User already exists'}
        assert storage.get_user_by_username(f'other{attempt}') is None


def test_register_rejects_duplicate_username(client) -> None:
    client.post('/api/auth/register', json=_registration())

    response = client.post('/api/auth/register', json=_registration(email='another@example.com'))

    assert response.status_code == 400
    assert response.json() == {'message': 'Username already taken'}


@pytest.mark.parametrize(
    ('overrides', 'message'),
    [
        ({'email': 'not-an-email'}, 'Invalid email address'),
        ({'password': 'abc', 'confirmPassword': 'abc'}, 'Password must be at least 6 characters'),
        ({'confirmPassword': 'different'}, "Passwords don't match"),
        ({'firstName': None}, 'Input should be a valid string'),
        ({'role': 'superuser'}, 'Role must be one of: user, admin.'),
        # Only the first violation is reported.
        ({'email': 'bad', 'password': 'abc'}, 'Invalid email address'),
    ],
)
def test_register_reports_first_validation_error(client, overrides: dict, message: str) -> None:
    response = client.post('/api/auth/register', json=_registration(**overrides))

    assert response.status_code == 400
    assert response.json() == {'message': message}


def test_register_reports_missing_field_by_wire_name(client) -> None:
    payload = _registration()
    del payload['lastName']

    response = client.post('/api/auth/register', json=payload)

    assert response.status_code == 400
    assert response.json() == {'message': 'lastName is required'}


def test_login_returns_token_for_valid_credentials(client) -> None:
    client.post('/api/auth/register', json=_registration())

    response = client.post('/api/auth/login', json={'email': 'MWANGI@example.com ', 'password': 'secret123'})

    assert response.status_code == 200
    assert response.json()['user']['username'] == 'mwangi'
    assert response.json()['token']


@pytest.mark.parametrize(
    'credentials',
    [
        {'email': 'mwangi@example.com', 'password': 'wrong-password'},
        {'email': 'nobody@example.com', 'password': 'secret123'},
    ],
)
def test_login_does_not_reveal_which_part_failed(client, credentials: dict) -> None:
    client.post('/api/auth/register', json=_registration())

    response = client.post('/api/auth/login', json=credentials)

    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid credentials'}


def test_login_validates_shape(client) -> None:
    response = client.post('/api/auth/login', json={'email': 'mwangi@example.com'})

    assert response.status_code == 400
    assert response.json() == {'message': 'password is required'}


def test_me_requires_token(client) -> None:
    response = client.get('/api/auth/me')

    assert response.status_code == 401
    assert response.json() == {'message': 'Access token required'}


def test_me_rejects_invalid_token(client) -> None:
    response = client.get('/api/auth/me', headers={'Authorization': 'Bearer not-a-token'})

    assert response.status_code == 403
    assert response.json() == {'message': 'Invalid token'}


def test_register_can_create_admin_role(client) -> None:
    response = client.post('/api/auth/register', json=_registration(role='admin'))

    assert response.status_code == 201
    assert response.json()['user']['role'] == 'admin'

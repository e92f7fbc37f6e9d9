import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from backend.auth import jwt_handler, passwords
from backend.auth.dependencies import get_current_user, get_storage
from backend.models.user import User
from backend.schemas import AuthResponse, LoginRequest, RegisterRequest, UserEnvelope, UserResponse
from backend.storage import DuplicateUserError, Storage

router = APIRouter(tags=['auth'])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid credentials'


def build_auth_response(user: User) -> AuthResponse:
    token = jwt_handler.create_access_token(subject=user.id)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post('/register', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, storage: Storage = Depends(get_storage)):
    try:
        if storage.get_user_by_email(data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='User already exists')

        if storage.get_user_by_username(data.username):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Username already taken')

        user = storage.create_user(
            {
                'username': data.username,
                'email': data.email,
                'password': passwords.hash_password(data.password),
                'first_name': data.first_name,
                'last_name': data.last_name,
                'location': data.location,
                'role': data.role,
            }
        )
    except DuplicateUserError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='User already exists') from exc
    except SQLAlchemyError as exc:
        logger.exception('Registration failed for %s', data.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Internal server error',
        ) from exc

    logger.info('Registered user %s with role %s', user.id, user.role)
    return build_auth_response(user)


@router.post('/login', response_model=AuthResponse)
def login(data: LoginRequest, storage: Storage = Depends(get_storage)):
    try:
        user = storage.get_user_by_email(data.email)
    except SQLAlchemyError as exc:
        logger.exception('Login lookup failed')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Internal server error',
        ) from exc

    # Same answer for an unknown email and a wrong password.
    if user is None or not passwords.verify_password(data.password, user.password):
        logger.warning('Rejected login attempt')
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info('User %s logged in', user.id)
    return build_auth_response(user)


@router.get('/me', response_model=UserEnvelope)
def me(current_user: User = Depends(get_current_user)):
    return UserEnvelope(user=UserResponse.model_validate(current_user))

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.auth import jwt_handler
from backend.models.user import User
from backend.storage import Storage

ADMIN_ROLE = "admin"

security = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    storage: Storage = Depends(get_storage),
) -> User:
    token = credentials.credentials if credentials else None
    try:
        user_id = jwt_handler.resolve_token(token)
    except jwt_handler.MissingTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required") from exc
    except jwt_handler.InvalidTokenError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token") from exc

    user = storage.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != ADMIN_ROLE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user

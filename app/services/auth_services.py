# app/services/auth_services.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from app.core.config import settings
from app.models.fortune_models import ErrorCode, FortuneActionError

logger = logging.getLogger(__name__)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode.update({"exp": expire, "type": "access"})
    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM
    )
    return encoded_jwt


def _extract_token(request: Request) -> Optional[str]:
    access_token = request.cookies.get("access_token")
    if access_token:
        return access_token

    authorization = request.headers.get("authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token
    return None


def get_optional_user_id(request: Request) -> Optional[str]:
    """Return the authenticated user id, or None when the caller is anonymous."""
    access_token = _extract_token(request)
    if not access_token:
        return None

    try:
        payload = jwt.decode(
            access_token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        if payload.get("type") != "access":
            raise JWTError("Invalid token type")
        user_id = payload.get("sub")
        if not user_id:
            raise JWTError("Invalid token payload")
        return str(user_id)
    except JWTError as e:
        logger.debug("Access token rejected: %s", e)
        return None


def require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise FortuneActionError(
            ErrorCode.UNAUTHORIZED, "You must be signed in to perform this action."
        )
    return user_id

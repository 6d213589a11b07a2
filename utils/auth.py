import logging
from datetime import datetime, UTC, timedelta
from typing import Any

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (토큰 없는 익명 요청도 통과시키고 라우트에서 판단)
security = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """토큰 디코딩 (만료/위조 시 401)"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("token is expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("invalid token")


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> dict[str, Any] | None:
    """토큰이 있으면 claims 반환, 없으면 None (익명)"""
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if not payload.get("sub"):
        raise UnauthorizedError("invalid token")
    return payload


def require_admin(user: dict[str, Any] | None = Depends(get_current_user)) -> dict[str, Any]:
    """관리자 전용 라우트 (아니면 401)"""
    if user is None:
        raise UnauthorizedError()

    if user.get("is_admin") is not True:
        logger.warning("Admin route denied for user %s", user.get("sub"))
        raise UnauthorizedError()
    return user

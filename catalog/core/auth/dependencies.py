"""
Authentication Dependencies
FastAPI Depends용 인증 의존성 (Bearer 토큰 → 호출자 역할 집합)
"""

from typing import FrozenSet, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .jwt_manager import JWTManager
from .roles import Role, parse_roles

# 토큰이 없으면 익명 호출자로 처리 (403 판단은 컨트롤러에서 수행)
security = HTTPBearer(auto_error=False)


async def get_current_roles(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> FrozenSet[Role]:
    """
    현재 호출자의 역할 집합 추출

    Args:
        credentials: HTTP Authorization Bearer 토큰 (없으면 None)

    Returns:
        FrozenSet[Role]: 호출자 역할 (익명이면 빈 집합)

    Raises:
        InvalidTokenException: 토큰이 유효하지 않은 경우 (401)
        TokenExpiredException: 토큰이 만료된 경우 (401)
    """
    if credentials is None:
        return frozenset()

    payload = JWTManager.verify_token(credentials.credentials, token_type="access")
    return parse_roles(payload.get("roles"))

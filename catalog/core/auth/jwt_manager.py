"""
JWT Manager
JWT 토큰 생성 및 검증
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, Iterable
from jose import JWTError, jwt, ExpiredSignatureError

from ..config import settings
from .exceptions import TokenExpiredException, InvalidTokenException


class JWTManager:
    """
    JWT 토큰 관리자

    호출자 식별자(sub)와 역할 목록(roles)을 담은 Access Token 생성/검증 담당
    """

    @staticmethod
    def create_access_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Access Token 생성

        Args:
            data: JWT payload에 포함할 데이터 (sub, roles 등)
            expires_delta: 만료 시간 (기본값: 설정에서 가져옴)

        Returns:
            str: 생성된 JWT 토큰
        """
        to_encode = data.copy()

        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)
        expire = datetime.now(timezone.utc) + expires_delta

        to_encode.update({"exp": expire, "type": "access"})

        return jwt.encode(
            to_encode,
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

    @staticmethod
    def create_role_token(
        subject: str,
        roles: Iterable[str],
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """호출자와 역할 목록으로 Access Token 생성"""
        return JWTManager.create_access_token(
            {"sub": subject, "roles": [str(getattr(r, "value", r)) for r in roles]},
            expires_delta=expires_delta,
        )

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        JWT 토큰 디코딩 및 서명/만료 검증

        Args:
            token: JWT 토큰 문자열

        Returns:
            Dict[str, Any]: 디코딩된 payload

        Raises:
            TokenExpiredException: 만료된 토큰
            InvalidTokenException: 서명 또는 형식이 잘못된 토큰
        """
        try:
            return jwt.decode(
                token,
                settings.jwt_secret_key,
                algorithms=[settings.jwt_algorithm],
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidTokenException()

    @staticmethod
    def verify_token(token: str, token_type: str = "access") -> Dict[str, Any]:
        """
        토큰 타입 검증 포함 디코딩

        Raises:
            InvalidTokenException: 토큰 타입이 일치하지 않는 경우
        """
        payload = JWTManager.decode_token(token)

        if payload.get("type") != token_type:
            raise InvalidTokenException()

        return payload

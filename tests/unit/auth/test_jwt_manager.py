"""
JWT Manager Unit Tests
JWT 토큰 생성 및 검증 테스트
"""

import pytest
from datetime import timedelta

from catalog.core.auth.exceptions import InvalidTokenException, TokenExpiredException
from catalog.core.auth.jwt_manager import JWTManager
from catalog.core.auth.roles import Role


class TestJWTManager:
    """JWT Manager 단위 테스트"""

    def test_create_access_token(self):
        """Access Token 생성 테스트"""
        token = JWTManager.create_access_token({"sub": "reader"})

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_role_token_carries_roles_claim(self):
        """역할 토큰에 roles 클레임이 포함되는지 테스트"""
        token = JWTManager.create_role_token("curator", [Role.ADMIN, "user"])

        payload = JWTManager.decode_token(token)

        assert payload["sub"] == "curator"
        assert payload["roles"] == ["admin", "user"]
        assert payload["type"] == "access"

    def test_verify_access_token(self):
        """Access Token 검증 테스트"""
        token = JWTManager.create_role_token("reader", ["user"])

        payload = JWTManager.verify_token(token, token_type="access")

        assert payload["sub"] == "reader"

    def test_verify_wrong_token_type(self):
        """토큰 타입 불일치 시 InvalidTokenException"""
        token = JWTManager.create_role_token("reader", ["user"])

        with pytest.raises(InvalidTokenException):
            JWTManager.verify_token(token, token_type="refresh")

    def test_decode_malformed_token(self):
        """형식이 잘못된 토큰 디코딩 테스트"""
        with pytest.raises(InvalidTokenException):
            JWTManager.decode_token("invalid.token.here")

    def test_decode_expired_token(self):
        """만료된 토큰 디코딩 테스트"""
        token = JWTManager.create_role_token(
            "reader", ["user"], expires_delta=timedelta(minutes=-1)
        )

        with pytest.raises(TokenExpiredException):
            JWTManager.decode_token(token)

"""
Exception Translation Unit Tests
도메인 예외 → (HTTP 상태 코드, 응답 본문) 변환 테스트
"""

import pytest

from catalog.core.auth.exceptions import InvalidTokenException, TokenExpiredException
from catalog.core.exceptions import (
    EntityNotFoundException,
    ErrorCode,
    ForbiddenException,
)
from catalog.core.exceptions.handlers import translate_exception
from catalog.features.resources.definition import MissingFieldsException


class TestTranslateException:
    """translate_exception 테스트"""

    def test_entity_not_found(self):
        """404 본문은 type/message 두 필드만 포함"""
        status_code, body = translate_exception(EntityNotFoundException("Movie", "0000000"))

        assert status_code == 404
        assert body == {
            "type": "EntityNotFoundException",
            "message": "Movie with id 0000000 not found",
        }

    def test_numeric_key_message(self):
        exc = EntityNotFoundException("Book", 7)

        assert exc.message == "Book with id 7 not found"
        assert exc.entity_type == "Book"
        assert exc.key == 7

    def test_forbidden_has_no_body(self):
        status_code, body = translate_exception(ForbiddenException(["admin"]))

        assert status_code == 403
        assert body is None

    @pytest.mark.parametrize(
        "exc, expected_code",
        [
            (InvalidTokenException(), "AUTH_004"),
            (TokenExpiredException(), "AUTH_003"),
        ],
    )
    def test_authentication_errors(self, exc, expected_code):
        """토큰 오류는 401 표준 에러 본문"""
        status_code, body = translate_exception(exc)

        assert status_code == 401
        assert body["error_code"] == expected_code
        assert body["status_code"] == 401

    def test_missing_fields(self):
        status_code, body = translate_exception(
            MissingFieldsException("Book", ("author", "genre"))
        )

        assert status_code == 400
        assert body["error_code"] == ErrorCode.VAL_INVALID_INPUT.value
        assert body["details"] == {"missing_fields": ["author", "genre"]}

    def test_unexpected_error(self):
        """예상치 못한 예외는 500 (내부 메시지 비노출)"""
        status_code, body = translate_exception(RuntimeError("connection reset"))

        assert status_code == 500
        assert body["error_code"] == "SYS_001"
        assert "connection reset" not in body["message"]

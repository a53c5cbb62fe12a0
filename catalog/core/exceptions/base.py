"""
Base Exception Classes
기본 예외 클래스 및 카탈로그 도메인 예외
"""

from typing import Any, Dict, Iterable, Optional
from fastapi import status

from .codes import ErrorCode


class AppException(Exception):
    """
    애플리케이션 기본 예외

    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            error_code: 에러 코드 (예: AUTH_004)
            message: 사용자 친화적 에러 메시지
            status_code: HTTP 상태 코드
            details: 추가 에러 정보 (선택사항)
        """
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code!r}, "
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class AuthenticationException(AppException):
    """
    인증 실패 예외 (401 Unauthorized)

    토큰이 없거나 검증에 실패한 경우 발생
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
        )


class AuthorizationException(AppException):
    """
    권한 부족 예외 (403 Forbidden)

    호출자의 역할로는 수행할 수 없는 작업인 경우 발생
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
        )


class ValidationException(AppException):
    """검증 실패 예외 (400 Bad Request)"""

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundException(AppException):
    """
    리소스 없음 예외 (404 Not Found)

    요청한 리소스를 찾을 수 없는 경우 발생
    """

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class InternalServerException(AppException):
    """서버 내부 오류 예외 (500 Internal Server Error)"""

    def __init__(
        self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


# ==================== Catalog Domain ====================


class EntityNotFoundException(NotFoundException):
    """
    키에 해당하는 레코드 없음

    응답 본문은 {"type": "EntityNotFoundException", "message": ...} 형식으로 고정
    """

    def __init__(self, entity_type: str, key: Any):
        self.entity_type = entity_type
        self.key = key
        super().__init__(
            error_code=ErrorCode.BIZ_ENTITY_NOT_FOUND,
            message=f"{entity_type} with id {key} not found",
            details={"entity_type": entity_type, "key": str(key)},
        )


class ForbiddenException(AuthorizationException):
    """요청한 작업에 필요한 역할이 없음 (본문 없는 403)"""

    def __init__(self, required_roles: Iterable[str], operation: Optional[str] = None):
        self.required_roles = tuple(sorted(str(role) for role in required_roles))
        self.operation = operation
        super().__init__(
            error_code=ErrorCode.AUTHZ_INSUFFICIENT_ROLE,
            message="요청한 작업을 수행할 권한이 없습니다",
            details={"required_roles": list(self.required_roles), "operation": operation},
        )

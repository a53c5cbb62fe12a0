"""
Error Code Definitions
에러 코드 정의
"""

from enum import Enum


class ErrorCode(str, Enum):
    """
    애플리케이션 에러 코드

    규칙:
    - AUTH_xxx: 인증 관련 에러 (401)
    - AUTHZ_xxx: 권한 관련 에러 (403)
    - VAL_xxx: 검증 관련 에러 (400, 422)
    - BIZ_xxx: 비즈니스 로직 에러 (404)
    - SYS_xxx: 시스템 에러 (500)
    """

    # ==================== Authentication (AUTH_xxx) ====================
    AUTH_TOKEN_EXPIRED = "AUTH_003"
    """토큰이 만료되었습니다"""

    AUTH_TOKEN_INVALID = "AUTH_004"
    """유효하지 않은 토큰입니다"""

    # ==================== Authorization (AUTHZ_xxx) ====================
    AUTHZ_FORBIDDEN = "AUTHZ_001"
    """접근 권한이 없습니다"""

    AUTHZ_INSUFFICIENT_ROLE = "AUTHZ_002"
    """필요한 역할(user/admin)이 없습니다"""

    # ==================== Validation (VAL_xxx) ====================
    VAL_INVALID_INPUT = "VAL_001"
    """입력 데이터가 유효하지 않습니다"""

    # ==================== Business Logic (BIZ_xxx) ====================
    BIZ_RESOURCE_NOT_FOUND = "BIZ_001"
    """리소스를 찾을 수 없습니다"""

    BIZ_ENTITY_NOT_FOUND = "BIZ_101"
    """요청한 키의 레코드가 존재하지 않습니다"""

    # ==================== System (SYS_xxx) ====================
    SYS_INTERNAL_ERROR = "SYS_001"
    """서버 내부 오류가 발생했습니다"""

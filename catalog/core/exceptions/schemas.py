"""
Error Response Schemas
에러 응답 스키마
"""

from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityNotFoundResponse(BaseModel):
    """
    레코드 없음 응답 (404)

    type/message 두 필드만 포함하는 고정 형식
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "EntityNotFoundException",
                "message": "Movie with id 0000000 not found",
            }
        }
    )

    type: str = Field(default="EntityNotFoundException", description="예외 타입")
    message: str = Field(..., description="<EntityType> with id <key> not found")


class ErrorDetail(BaseModel):
    """개별 에러 상세 정보"""

    field: Optional[str] = Field(None, description="에러 발생 필드명")
    message: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="세부 에러 코드")


class ErrorResponse(BaseModel):
    """
    표준 에러 응답

    404(레코드 없음)와 403을 제외한 API 에러는 이 형식으로 반환됩니다.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "AUTH_004",
                "message": "유효하지 않은 토큰입니다",
                "status_code": 401,
                "timestamp": "2026-01-01T00:00:00Z",
                "request_id": "3f2a0c6e8d8f4c1b9a1f5e4d3c2b1a09",
                "path": "/api/books/all",
            }
        }
    )

    error_code: str = Field(..., description="에러 코드 (예: AUTH_004)")
    message: str = Field(..., description="사용자 친화적 에러 메시지")
    status_code: int = Field(..., description="HTTP 상태 코드")
    timestamp: datetime = Field(default_factory=_utcnow, description="에러 발생 시각")
    request_id: Optional[str] = Field(None, description="요청 추적 ID")
    path: Optional[str] = Field(None, description="요청 경로")
    details: Optional[Dict[str, Any]] = Field(None, description="추가 에러 정보 (선택사항)")


class ValidationErrorResponse(BaseModel):
    """검증 에러 응답 (422)"""

    error_code: str = Field(default="VAL_001", description="에러 코드")
    message: str = Field(default="입력 데이터 검증 실패", description="에러 메시지")
    status_code: int = Field(default=422, description="HTTP 상태 코드")
    timestamp: datetime = Field(default_factory=_utcnow)
    request_id: Optional[str] = Field(None, description="요청 추적 ID")
    path: Optional[str] = Field(None, description="요청 경로")
    errors: List[ErrorDetail] = Field(..., description="검증 에러 목록")

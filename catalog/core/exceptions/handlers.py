"""
Global Exception Handlers
전역 예외 핸들러 (도메인 예외 → HTTP 응답 변환)
"""

import uuid
from typing import Any, Dict, Optional, Tuple

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.config import settings
from catalog.core.logging import get_logger
from .base import AppException, AuthorizationException, EntityNotFoundException
from .codes import ErrorCode
from .schemas import (
    EntityNotFoundResponse,
    ErrorDetail,
    ErrorResponse,
    ValidationErrorResponse,
)

logger = get_logger(__name__)


def _code(exc: AppException) -> str:
    """ErrorCode(Enum) 또는 문자열 에러 코드를 문자열 값으로 변환"""
    if isinstance(exc.error_code, ErrorCode):
        return exc.error_code.value
    return str(exc.error_code)


def translate_exception(exc: Exception) -> Tuple[int, Optional[Dict[str, Any]]]:
    """
    예외를 (HTTP 상태 코드, 응답 본문)으로 변환

    - EntityNotFoundException → 404 + {"type", "message"}
    - AuthorizationException → 403, 본문 없음
    - 그 외 AppException → 해당 상태 코드 + 표준 에러 본문
    - 예상치 못한 예외 → 500 + 표준 에러 본문 (재시도 없음)

    Args:
        exc: 변환할 예외

    Returns:
        Tuple[int, Optional[dict]]: 상태 코드와 본문 (본문이 없으면 None)
    """
    if isinstance(exc, EntityNotFoundException):
        body = EntityNotFoundResponse(message=exc.message)
        return status.HTTP_404_NOT_FOUND, body.model_dump()

    if isinstance(exc, AuthorizationException):
        return status.HTTP_403_FORBIDDEN, None

    if isinstance(exc, AppException):
        return exc.status_code, {
            "error_code": _code(exc),
            "message": exc.message,
            "status_code": exc.status_code,
            "details": exc.details or None,
        }

    details = {"error": str(exc), "type": type(exc).__name__} if settings.debug else None
    return status.HTTP_500_INTERNAL_SERVER_ERROR, {
        "error_code": ErrorCode.SYS_INTERNAL_ERROR.value,
        "message": "서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",
        "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "details": details,
    }


def _request_id(request: Request) -> str:
    """요청 추적 ID (CorrelationIdMiddleware 값 우선)"""
    return correlation_id.get() or getattr(request.state, "request_id", None) or uuid.uuid4().hex


def _standard_response(request: Request, status_code: int, body: Dict[str, Any]) -> JSONResponse:
    error_response = ErrorResponse(
        **body,
        request_id=_request_id(request),
        path=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code, content=error_response.model_dump(mode="json")
    )


async def entity_not_found_handler(
    request: Request, exc: EntityNotFoundException
) -> JSONResponse:
    """
    레코드 없음 예외 핸들러 (404)

    Args:
        request: FastAPI Request 객체
        exc: EntityNotFoundException 인스턴스

    Returns:
        JSONResponse: {"type": "EntityNotFoundException", "message": ...}
    """
    logger.warning(
        "Entity not found",
        entity_type=exc.entity_type,
        key=str(exc.key),
        path=request.url.path,
        method=request.method,
    )
    status_code, body = translate_exception(exc)
    return JSONResponse(status_code=status_code, content=body)


async def authorization_exception_handler(
    request: Request, exc: AuthorizationException
) -> Response:
    """권한 부족 예외 핸들러 (본문 없는 403)"""
    logger.warning(
        "Forbidden",
        error_code=_code(exc),
        path=request.url.path,
        method=request.method,
        details=exc.details,
    )
    status_code, _ = translate_exception(exc)
    return Response(status_code=status_code)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    커스텀 애플리케이션 예외 핸들러

    Args:
        request: FastAPI Request 객체
        exc: AppException 인스턴스

    Returns:
        JSONResponse: 표준 에러 응답
    """
    logger.error(
        f"AppException occurred: [{_code(exc)}] {exc.message}",
        status_code=exc.status_code,
        path=request.url.path,
        method=request.method,
        details=exc.details,
    )
    status_code, body = translate_exception(exc)
    return _standard_response(request, status_code, body)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Pydantic 검증 에러 핸들러 (422 Unprocessable Entity)

    필수 필드 누락, 잘못된 타입(예: 숫자 키에 문자열) 등을 처리
    """
    errors = []
    for error in exc.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(
            ErrorDetail(field=field_path, message=error["msg"], code=error.get("type", ""))
        )

    logger.warning(
        "Validation error occurred",
        path=request.url.path,
        method=request.method,
        validation_errors=[error.model_dump() for error in errors],
    )

    error_response = ValidationErrorResponse(
        error_code=ErrorCode.VAL_INVALID_INPUT.value,
        request_id=_request_id(request),
        path=str(request.url.path),
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    FastAPI/Starlette HTTP 예외 핸들러

    라우팅 실패(404, 405) 등 기본 HTTPException을 표준 포맷으로 변환
    """
    error_code_map = {
        400: ErrorCode.VAL_INVALID_INPUT,
        401: ErrorCode.AUTH_TOKEN_INVALID,
        403: ErrorCode.AUTHZ_FORBIDDEN,
        404: ErrorCode.BIZ_RESOURCE_NOT_FOUND,
    }
    error_code = error_code_map.get(exc.status_code, ErrorCode.SYS_INTERNAL_ERROR)

    logger.warning(
        f"HTTPException occurred: {exc.detail}",
        status_code=exc.status_code,
        path=request.url.path,
        method=request.method,
    )

    response = _standard_response(
        request,
        exc.status_code,
        {
            "error_code": error_code.value,
            "message": str(exc.detail),
            "status_code": exc.status_code,
        },
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    일반 예외 핸들러 (예상치 못한 모든 에러)

    저장소/전송 계층 오류를 500으로 응답하며 재시도하지 않음
    """
    logger.exception(
        f"Unexpected exception occurred: {exc}",
        path=request.url.path,
        method=request.method,
        exception_type=type(exc).__name__,
    )
    status_code, body = translate_exception(exc)
    return _standard_response(request, status_code, body)


def register_exception_handlers(app: FastAPI) -> None:
    """
    전역 예외 핸들러 등록

    Starlette는 예외 클래스의 MRO 순으로 핸들러를 찾으므로
    EntityNotFoundException / AuthorizationException이 AppException보다 우선한다.
    """
    app.add_exception_handler(EntityNotFoundException, entity_not_found_handler)
    app.add_exception_handler(AuthorizationException, authorization_exception_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

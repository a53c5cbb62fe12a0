"""
CORS Middleware
카탈로그 API의 Cross-Origin 요청 허용 정책
"""

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings


def _split(value: str) -> List[str]:
    """쉼표 구분 설정 값을 목록으로 변환 ("*"는 그대로 유지)"""
    if value.strip() == "*":
        return ["*"]
    return [item.strip() for item in value.split(",") if item.strip()]


def setup_cors(app: FastAPI) -> None:
    """
    CORS 미들웨어 등록

    Authorization(Bearer) 헤더를 보내는 브라우저 클라이언트를 위해
    설정된 origin만 허용하고, 응답의 X-Request-ID를 노출한다.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=_split(settings.cors_allow_methods),
        allow_headers=_split(settings.cors_allow_headers),
        expose_headers=["X-Request-ID"],
    )

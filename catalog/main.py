"""
Catalog Service - Main Application
도서/영화/회화 카탈로그 FastAPI 백엔드
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from catalog.api.router import RESOURCES, api_router
from catalog.core.config import settings
from catalog.core.database import Base, engine
from catalog.core.exceptions.handlers import register_exception_handlers
from catalog.core.logging import configure_logging, get_logger
from catalog.core.middleware import setup_cors, setup_request_id

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    Startup:
        - 로깅 초기화
        - (개발 모드) 테이블 생성

    Shutdown:
        - 데이터베이스 연결 종료
    """
    configure_logging()
    logger.info(
        f"{settings.app_title} starting",
        version=settings.app_version,
        environment=settings.app_env,
        debug=settings.debug,
    )

    # 프로덕션에서는 Alembic 사용
    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created", tables=sorted(Base.metadata.tables))

    yield

    await engine.dispose()
    logger.info(f"{settings.app_title} stopped")


tags_metadata = [
    {
        "name": definition.name,
        "description": (
            f"{definition.plural} 조회/등록/수정/삭제 API\n\n"
            f"- 조회: user 또는 admin 역할\n"
            f"- 등록/수정/삭제: admin 역할\n"
            f"- 키 파라미터: `{definition.key_field}`"
        ),
    }
    for definition in RESOURCES
] + [
    {"name": "Health", "description": "서비스 상태 확인 API"},
    {"name": "Root", "description": "API 루트 정보 및 메타데이터"},
]

# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)


# 미들웨어 설정
setup_cors(app)
setup_request_id(app)


# ==================== OpenAPI 커스터마이징 ====================


def custom_openapi():
    """
    OpenAPI 스키마 커스터마이징
    JWT Bearer 인증 스키마 추가
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=settings.app_title,
        version=settings.app_version,
        description=settings.app_description,
        routes=app.routes,
        tags=tags_metadata,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "roles 클레임(user/admin)을 포함한 JWT Access Token",
        }
    }
    openapi_schema["security"] = [{"BearerAuth": []}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


# ==================== Routers ====================

app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["Health"])
async def health_check():
    """
    헬스 체크 엔드포인트

    Returns:
        dict: 서비스 상태 정보
    """
    return {
        "status": "ok",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }


@app.head("/health", tags=["Health"])
async def health_check_head():
    """헬스 체크 HEAD 메서드"""
    return JSONResponse(content={"status": "ok"})


@app.get("/", tags=["Root"])
async def root():
    """
    루트 엔드포인트

    Returns:
        dict: API 정보
    """
    return {
        "service": settings.app_title,
        "version": settings.app_version,
        "status": "running",
        "resources": [f"/api/{definition.path}" for definition in RESOURCES],
        "docs": "/docs" if settings.debug else None,
    }


# ==================== Global Exception Handlers ====================

register_exception_handlers(app)

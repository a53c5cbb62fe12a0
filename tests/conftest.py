"""
Pytest Configuration and Fixtures
테스트용 Fixture 정의 (in-memory SQLite + ASGI 클라이언트)
"""

import os

# catalog 모듈 import 전에 테스트 DB/환경 지정
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")

from typing import AsyncGenerator, Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import catalog.domain.models  # noqa: F401
from catalog.core.auth.jwt_manager import JWTManager
from catalog.core.database.base import Base
from catalog.core.database.session import get_db
from catalog.main import app


@pytest.fixture
async def test_engine():
    """
    테스트용 in-memory 엔진 픽스처

    StaticPool로 단일 연결을 공유하여 세션 간 데이터가 보이도록 하고,
    테스트마다 테이블을 새로 생성한다.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker:
    """테스트용 세션 팩토리"""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 데이터베이스 세션 픽스처"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed(session_factory):
    """레코드를 별도 세션으로 저장(commit)하는 헬퍼"""

    async def _seed(*records) -> None:
        async with session_factory() as session:
            session.add_all(records)
            await session.commit()

    return _seed


@pytest.fixture
def fetch(session_factory):
    """별도 세션으로 저장소의 현재 레코드를 조회하는 헬퍼"""

    async def _fetch(model, key):
        async with session_factory() as session:
            return await session.get(model, key)

    return _fetch


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트용 HTTP 클라이언트 픽스처

    get_db를 테스트 세션으로 교체하며, 500 응답 검증을 위해
    앱 예외를 다시 던지지 않도록 설정
    """

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def _bearer(subject: str, roles) -> Dict[str, str]:
    token = JWTManager.create_role_token(subject, roles)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers() -> Dict[str, str]:
    """user 역할 호출자"""
    return _bearer("reader", ["user"])


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    """admin 역할 호출자 (user 역할 없이 admin만 보유)"""
    return _bearer("curator", ["admin"])

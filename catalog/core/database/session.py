"""
Database Session Management
비동기 SQLAlchemy 세션 관리
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from ..config import settings


def _engine_options() -> dict:
    """DB 드라이버별 엔진 옵션"""
    options = {"echo": settings.database_echo, "pool_pre_ping": True}
    if settings.database_url.startswith("sqlite"):
        return options
    if settings.app_env == "test":
        options["poolclass"] = NullPool
    else:
        options["pool_size"] = 10
        options["max_overflow"] = 20
    return options


# 비동기 엔진 생성
engine = create_async_engine(settings.database_url, **_engine_options())

# 비동기 세션 팩토리
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI Dependency로 사용되는 요청 단위 DB 세션 생성기

    요청이 정상 종료되면 commit, 예외 발생 시 rollback

    Usage:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()

    Yields:
        AsyncSession: 비동기 데이터베이스 세션
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

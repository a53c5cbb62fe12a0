"""
Alembic Migration Environment
books / movies / paintings 테이블 마이그레이션
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

import catalog.domain.models  # noqa: F401
from catalog.core.config import settings
from catalog.core.database.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Alembic은 동기 드라이버 URL 사용 (+asyncpg / +aiosqlite 제거)
DATABASE_URL = settings.database_url_sync


def run_migrations_offline() -> None:
    """DB 연결 없이 SQL 스크립트 출력 (alembic upgrade --sql)"""
    context.configure(
        url=DATABASE_URL,
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, target_metadata=Base.metadata)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

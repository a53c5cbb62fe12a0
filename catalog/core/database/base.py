"""
Database Base Class
카탈로그 ORM 모델의 공통 베이스 클래스
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# 정수 컬럼(INTEGER / BIGINT) 허용 범위
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

# Alembic autogenerate 시 제약조건 이름을 일정하게 유지
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """
    SQLAlchemy Base Class

    books, movies, paintings 모델이 이 클래스를 상속
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

"""
Movie Repository
영화 레코드 저장소
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.movie import Movie
from catalog.domain.repositories.base import SQLAlchemyRecordStore


class MovieRepository(SQLAlchemyRecordStore[Movie]):
    """영화 Record Store (같은 id로 생성하면 기존 레코드를 덮어씀)"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Movie)

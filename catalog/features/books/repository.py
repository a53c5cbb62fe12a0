"""
Book Repository
도서 레코드 저장소
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.book import Book
from catalog.domain.repositories.base import SQLAlchemyRecordStore


class BookRepository(SQLAlchemyRecordStore[Book]):
    """도서 Record Store (id는 DB IDENTITY로 할당)"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

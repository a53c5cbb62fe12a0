"""
Painting Repository
회화 레코드 저장소
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.models.painting import Painting
from catalog.domain.repositories.base import SQLAlchemyRecordStore


class PaintingRepository(SQLAlchemyRecordStore[Painting]):
    """회화 Record Store (키는 code)"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Painting)

"""
Base Repository Interface
레코드 저장소(Record Store) 추상 클래스 및 SQLAlchemy 구현
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class RecordStore(ABC, Generic[ModelType]):
    """
    Record Store Interface

    엔티티 타입별 키 기반 저장소. 영속 상태는 저장소만 소유하며,
    키 중복 처리(덮어쓰기/거부)도 저장소 구현이 결정한다.
    """

    @abstractmethod
    async def list(self) -> List[ModelType]:
        """저장된 모든 레코드 조회 (순서는 저장소 정의)"""

    @abstractmethod
    async def get_by_key(self, key: Any) -> Optional[ModelType]:
        """키로 단일 레코드 조회 (없으면 None)"""

    @abstractmethod
    async def save(self, record: ModelType) -> ModelType:
        """레코드 저장 (신규/갱신). 저장소가 할당한 키가 반영된 레코드 반환"""

    @abstractmethod
    async def delete(self, record: ModelType) -> None:
        """레코드 영구 삭제"""


class SQLAlchemyRecordStore(RecordStore[ModelType]):
    """
    SQLAlchemy 기반 Record Store

    요청 단위 AsyncSession을 주입받아 사용하며 commit은 세션 의존성(get_db)이 담당
    """

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        self.session = session
        self.model = model

    async def list(self) -> List[ModelType]:
        """모든 레코드 조회 (Primary Key 순)"""
        primary_key = self.model.__table__.primary_key.columns
        query = select(self.model).order_by(*primary_key)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_key(self, key: Any) -> Optional[ModelType]:
        """Primary Key로 단일 레코드 조회"""
        return await self.session.get(self.model, key)

    async def save(self, record: ModelType) -> ModelType:
        """
        레코드 저장

        merge를 사용하므로 호출자가 지정한 키가 이미 존재하면 덮어쓴다.
        키가 비어 있으면 flush 시점에 DB가 키를 할당한다.
        """
        merged = await self.session.merge(record)
        await self.session.flush()
        await self.session.refresh(merged)
        return merged

    async def delete(self, record: ModelType) -> None:
        """레코드 삭제"""
        await self.session.delete(record)
        await self.session.flush()

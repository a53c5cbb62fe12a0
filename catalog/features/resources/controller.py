"""
Resource Access Controller
엔티티 타입에 무관한 역할 검사 + 조회/생성/수정/삭제 엔진
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Generic, Iterable, List, Mapping

from catalog.core.auth.roles import READ_ROLES, WRITE_ROLES, Role, require_role
from catalog.core.exceptions import EntityNotFoundException
from catalog.core.logging import get_logger
from catalog.domain.repositories.base import ModelType, RecordStore
from .definition import EntityDefinition

logger = get_logger(__name__)


class Operation(str, Enum):
    """컨트롤러 작업 종류"""

    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# 작업별 허용 역할
ALLOWED_ROLES: Dict[Operation, FrozenSet[Role]] = {
    Operation.LIST: READ_ROLES,
    Operation.GET: READ_ROLES,
    Operation.CREATE: WRITE_ROLES,
    Operation.UPDATE: WRITE_ROLES,
    Operation.DELETE: WRITE_ROLES,
}


class ResourceAccessController(Generic[ModelType]):
    """
    리소스 접근 컨트롤러

    EntityDefinition과 Record Store를 생성자로 주입받는다.
    요청 사이에 상태를 보관하지 않으며, 필요한 상태는 매번 저장소에서 다시 조회한다.

    모든 작업은 호출자 역할 집합(roles)을 명시적 인자로 받아
    저장소 접근 전에 역할을 검사한다.
    """

    def __init__(self, definition: EntityDefinition, store: RecordStore[ModelType]):
        """
        Args:
            definition: 리소스 타입 기술자
            store: 해당 타입의 Record Store
        """
        self.definition = definition
        self.store = store

    def authorize(self, operation: Operation, roles: Iterable[Role]) -> None:
        """
        작업 수행 권한 검사

        Raises:
            ForbiddenException: 필요한 역할이 없는 경우 (저장소 미접근)
        """
        require_role(
            roles,
            ALLOWED_ROLES[operation],
            operation=f"{self.definition.path}:{operation.value}",
        )

    async def list_records(self, roles: Iterable[Role]) -> List[ModelType]:
        """
        전체 레코드 조회

        Returns:
            List: 저장소에 저장된 순서 그대로의 레코드 목록
        """
        self.authorize(Operation.LIST, roles)
        records = await self.store.list()
        logger.info("Listed records", entity=self.definition.name, count=len(records))
        return records

    async def get_record(self, key: Any, roles: Iterable[Role]) -> ModelType:
        """
        키로 단일 레코드 조회

        Raises:
            ForbiddenException: user/admin 역할 없음
            EntityNotFoundException: 키에 해당하는 레코드 없음
        """
        self.authorize(Operation.GET, roles)
        return await self._get_or_fail(key)

    async def create_record(
        self, fields: Mapping[str, Any], roles: Iterable[Role]
    ) -> ModelType:
        """
        레코드 생성 (존재 여부 검사 없는 무조건 저장)

        호출자 지정 키가 이미 존재하면 저장소 정책(덮어쓰기/거부)을 따른다.

        Args:
            fields: 데이터 필드 값 (호출자 지정 키 타입이면 식별 필드 포함)
            roles: 호출자 역할

        Returns:
            저장소가 반환한 레코드 (저장소 할당 키 반영)
        """
        self.authorize(Operation.CREATE, roles)
        record = self.definition.build_record(fields)
        saved = await self.store.save(record)
        logger.info(
            "Created record",
            entity=self.definition.name,
            key=str(self.definition.key_of(saved)),
        )
        return saved

    async def update_record(
        self, key: Any, fields: Mapping[str, Any], roles: Iterable[Role]
    ) -> ModelType:
        """
        레코드 전체 교체 수정

        모든 데이터 필드를 입력 값으로 덮어쓰며 식별 필드는 입력에 있어도 변경하지 않는다.
        레코드 존재 여부를 먼저 확인하므로 없는 키는 입력과 무관하게 404.

        Raises:
            ForbiddenException: admin 역할 없음
            EntityNotFoundException: 키에 해당하는 레코드 없음 (save 미호출)
            MissingFieldsException: 데이터 필드 누락 (save 미호출)
        """
        self.authorize(Operation.UPDATE, roles)
        record = await self._get_or_fail(key)
        values = self.definition.extract_data_fields(fields)

        for field, value in values.items():
            setattr(record, field, value)

        updated = await self.store.save(record)
        logger.info("Updated record", entity=self.definition.name, key=str(key))
        return updated

    async def delete_record(self, key: Any, roles: Iterable[Role]) -> Dict[str, str]:
        """
        레코드 삭제

        Returns:
            dict: {"message": "<EntityType> with id <key> deleted"}

        Raises:
            ForbiddenException: admin 역할 없음
            EntityNotFoundException: 키에 해당하는 레코드 없음 (delete 미호출)
        """
        self.authorize(Operation.DELETE, roles)
        record = await self._get_or_fail(key)
        await self.store.delete(record)
        logger.info("Deleted record", entity=self.definition.name, key=str(key))
        return {"message": f"{self.definition.name} with id {key} deleted"}

    async def _get_or_fail(self, key: Any) -> ModelType:
        record = await self.store.get_by_key(key)
        if record is None:
            raise EntityNotFoundException(self.definition.name, key)
        return record

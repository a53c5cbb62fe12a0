"""
Entity Definition
리소스 타입별 식별 필드와 데이터 필드 기술
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.database.base import Base
from catalog.core.exceptions import ErrorCode, ValidationException
from catalog.domain.repositories.base import RecordStore


class KeyAssignment(str, Enum):
    """식별 필드 값 할당 주체"""

    STORE = "store"    # 저장소가 자동 할당 (숫자 IDENTITY)
    CALLER = "caller"  # 생성 시 호출자가 지정 (문자열 코드)


class MissingFieldsException(ValidationException):
    """전체 교체에 필요한 데이터 필드 누락"""

    def __init__(self, entity_type: str, missing: Tuple[str, ...]):
        super().__init__(
            error_code=ErrorCode.VAL_INVALID_INPUT,
            message=f"{entity_type} requires fields: {', '.join(missing)}",
            details={"missing_fields": list(missing)},
        )


@dataclass(frozen=True)
class EntityDefinition:
    """
    리소스 타입 기술자

    Attributes:
        name: 엔티티 타입명 (메시지에 사용, 예: "Book")
        path: URL 경로 (예: "books" → /api/books)
        label: 단수 표기 (OpenAPI 요약, 예: "book")
        plural: 복수 표기 (OpenAPI 요약, 예: "books")
        model: ORM 모델 클래스
        key_field: 식별 필드명이자 조회 쿼리 파라미터명 ("id", "code")
        key_type: 식별 필드 타입 (int 또는 str)
        key_assignment: 식별 필드 할당 주체
        fields_schema: 데이터 필드 스키마 (필드 선언 순서 = 데이터 필드 순서)
        response_schema: 응답 스키마 (식별 필드 + 데이터 필드)
        store_factory: 세션으로 Record Store를 만드는 팩토리
        create_schema: 생성 요청 스키마 (호출자 지정 키인 경우 키 포함)
        key_bounds: 정수 식별 필드의 허용 범위 (ge, le), 컬럼 타입 범위와 일치
    """

    name: str
    path: str
    label: str
    plural: str
    model: Type[Base]
    key_field: str
    key_type: type
    key_assignment: KeyAssignment
    fields_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    store_factory: Callable[[AsyncSession], RecordStore]
    create_schema: Optional[Type[BaseModel]] = None
    key_bounds: Optional[Tuple[int, int]] = None

    @property
    def data_fields(self) -> Tuple[str, ...]:
        """데이터 필드명 (선언 순서, 식별 필드 제외)"""
        return tuple(
            field for field in self.fields_schema.model_fields if field != self.key_field
        )

    @property
    def key_constraints(self) -> Dict[str, int]:
        """식별 필드 쿼리 파라미터 검증 조건 (범위 밖 키는 422)"""
        if self.key_bounds is None:
            return {}
        low, high = self.key_bounds
        return {"ge": low, "le": high}

    @property
    def caller_assigns_key(self) -> bool:
        return self.key_assignment is KeyAssignment.CALLER

    @property
    def create_model(self) -> Type[BaseModel]:
        """생성 요청 스키마 (별도 지정이 없으면 데이터 필드 스키마)"""
        return self.create_schema or self.fields_schema

    def extract_data_fields(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        입력에서 데이터 필드 값만 추출 (식별 필드 및 알 수 없는 필드는 무시)

        Raises:
            MissingFieldsException: 데이터 필드가 하나라도 빠진 경우
        """
        missing = tuple(field for field in self.data_fields if field not in fields)
        if missing:
            raise MissingFieldsException(self.name, missing)
        return {field: fields[field] for field in self.data_fields}

    def build_record(self, fields: Mapping[str, Any]) -> Base:
        """
        생성 입력으로 새 레코드 구성

        호출자 지정 키면 입력의 키를 사용하고, 저장소 할당 키면 비워둔다.
        """
        values = self.extract_data_fields(fields)
        if self.caller_assigns_key:
            if fields.get(self.key_field) is None:
                raise MissingFieldsException(self.name, (self.key_field,))
            values[self.key_field] = fields[self.key_field]
        return self.model(**values)

    def key_of(self, record: Base) -> Any:
        """레코드의 식별 필드 값"""
        return getattr(record, self.key_field)

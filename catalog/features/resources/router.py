"""
Resource Router Factory
EntityDefinition으로부터 /api/{R} CRUD 라우터 생성
"""

from typing import Annotated, Callable, FrozenSet, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.auth.dependencies import get_current_roles
from catalog.core.auth.roles import Role
from catalog.core.database.session import get_db
from catalog.core.exceptions import EntityNotFoundResponse
from .controller import Operation, ResourceAccessController
from .definition import EntityDefinition
from .schemas import GenericMessage

_FORBIDDEN = {403: {"description": "필요한 역할(user/admin)이 없음 (본문 없음)"}}
_NOT_FOUND = {404: {"model": EntityNotFoundResponse, "description": "레코드 없음"}}


def controller_dependency(
    definition: EntityDefinition,
) -> Callable[..., ResourceAccessController]:
    """요청 단위 세션으로 Record Store와 컨트롤러를 구성하는 의존성 생성"""

    def get_controller(db: AsyncSession = Depends(get_db)) -> ResourceAccessController:
        return ResourceAccessController(definition, definition.store_factory(db))

    return get_controller


def authorized_controller(
    get_controller: Callable[..., ResourceAccessController],
    operation: Operation,
) -> Callable[..., ResourceAccessController]:
    """
    역할 검사를 통과한 컨트롤러 의존성 생성

    FastAPI는 하위 의존성을 요청 파라미터/본문 검증보다 먼저 해석하므로,
    권한 없는 호출자는 입력 검증 결과와 상관없이 403을 받는다.
    """

    async def dependency(
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = Depends(get_controller),
    ) -> ResourceAccessController:
        controller.authorize(operation, roles)
        return controller

    return dependency


def build_resource_router(definition: EntityDefinition) -> APIRouter:
    """
    리소스 라우터 생성

    - GET    /{path}/all              전체 조회 (user/admin)
    - GET    /{path}?{key}=...        단건 조회 (user/admin)
    - POST   /{path}/post?field=...   생성 (admin)
    - PUT    /{path}?{key}=...        전체 교체 수정, JSON 본문 (admin)
    - DELETE /{path}?{key}=...        삭제 (admin)

    Args:
        definition: 리소스 타입 기술자

    Returns:
        APIRouter: prefix가 /{path}인 라우터
    """
    router = APIRouter(prefix=f"/{definition.path}", tags=[definition.name])

    key_type = definition.key_type
    fields_schema = definition.fields_schema
    create_schema = definition.create_model
    response_schema = definition.response_schema
    key_description = f"{definition.name} {definition.key_field}"
    key_constraints = definition.key_constraints

    get_controller = controller_dependency(definition)

    def guarded(operation: Operation):
        return Depends(authorized_controller(get_controller, operation))

    @router.get(
        "/all",
        response_model=List[response_schema],
        summary=f"List all {definition.plural}",
        name=f"list_{definition.path}",
        responses=_FORBIDDEN,
    )
    async def list_records(
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = guarded(Operation.LIST),
    ):
        return await controller.list_records(roles)

    @router.get(
        "",
        response_model=response_schema,
        summary=f"Get a single {definition.label}",
        name=f"get_{definition.path}",
        responses={**_FORBIDDEN, **_NOT_FOUND},
    )
    async def get_record(
        key: key_type = Query(
            ..., alias=definition.key_field, description=key_description, **key_constraints
        ),
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = guarded(Operation.GET),
    ):
        return await controller.get_record(key, roles)

    @router.post(
        "/post",
        response_model=response_schema,
        summary=f"Create a new {definition.label}",
        name=f"create_{definition.path}",
        responses=_FORBIDDEN,
    )
    async def create_record(
        fields: Annotated[create_schema, Query()],
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = guarded(Operation.CREATE),
    ):
        return await controller.create_record(fields.model_dump(), roles)

    @router.put(
        "",
        response_model=response_schema,
        summary=f"Update a single {definition.label}",
        name=f"update_{definition.path}",
        responses={**_FORBIDDEN, **_NOT_FOUND},
    )
    async def update_record(
        incoming: fields_schema,
        key: key_type = Query(
            ..., alias=definition.key_field, description=key_description, **key_constraints
        ),
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = guarded(Operation.UPDATE),
    ):
        return await controller.update_record(key, incoming.model_dump(), roles)

    @router.delete(
        "",
        response_model=GenericMessage,
        summary=f"Delete a {definition.name}",
        name=f"delete_{definition.path}",
        responses={**_FORBIDDEN, **_NOT_FOUND},
    )
    async def delete_record(
        key: key_type = Query(
            ..., alias=definition.key_field, description=key_description, **key_constraints
        ),
        roles: FrozenSet[Role] = Depends(get_current_roles),
        controller: ResourceAccessController = guarded(Operation.DELETE),
    ):
        return await controller.delete_record(key, roles)

    return router

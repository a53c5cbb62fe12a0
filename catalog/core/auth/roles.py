"""
Role Definitions
호출자 역할 및 역할 검사
"""

from enum import Enum
from typing import FrozenSet, Iterable, Optional

from ..exceptions import ForbiddenException


class Role(str, Enum):
    """호출자 역할 (user: 조회, admin: 조회 + 변경)"""

    USER = "user"
    ADMIN = "admin"


# 조회(List/Get)는 user 또는 admin, 변경(Create/Update/Delete)은 admin만 허용
READ_ROLES: FrozenSet[Role] = frozenset({Role.USER, Role.ADMIN})
WRITE_ROLES: FrozenSet[Role] = frozenset({Role.ADMIN})

_ROLE_PREFIX = "ROLE_"


def parse_roles(raw_roles: Optional[Iterable[str]]) -> FrozenSet[Role]:
    """
    토큰 클레임의 역할 문자열 목록을 Role 집합으로 변환

    대소문자를 구분하지 않으며 "ROLE_ADMIN" 같은 접두사 형식도 허용.
    알 수 없는 역할은 무시한다.

    Args:
        raw_roles: 역할 문자열 목록 (None이면 익명)

    Returns:
        FrozenSet[Role]: 인식된 역할 집합
    """
    if not raw_roles:
        return frozenset()
    if isinstance(raw_roles, str):
        raw_roles = [raw_roles]

    roles = set()
    for raw in raw_roles:
        name = str(raw).strip()
        if name.upper().startswith(_ROLE_PREFIX):
            name = name[len(_ROLE_PREFIX):]
        try:
            roles.add(Role(name.lower()))
        except ValueError:
            continue
    return frozenset(roles)


def require_role(
    caller_roles: Iterable[Role],
    allowed: Iterable[Role],
    operation: Optional[str] = None,
) -> None:
    """
    호출자가 허용된 역할 중 하나 이상을 가지고 있는지 검사

    Raises:
        ForbiddenException: 허용된 역할이 하나도 없는 경우
    """
    allowed = frozenset(allowed)
    if allowed.isdisjoint(caller_roles):
        raise ForbiddenException(
            required_roles=[role.value for role in allowed], operation=operation
        )

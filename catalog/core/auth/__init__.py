"""
Authentication Module
JWT 검증 및 역할 기반 권한 관리
"""

from .jwt_manager import JWTManager
from .dependencies import get_current_roles
from .roles import Role, READ_ROLES, WRITE_ROLES, parse_roles, require_role

__all__ = [
    "JWTManager",
    "get_current_roles",
    "Role",
    "READ_ROLES",
    "WRITE_ROLES",
    "parse_roles",
    "require_role",
]

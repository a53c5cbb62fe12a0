"""
Generic Resource Module
엔티티 기술자 기반 역할 검사 CRUD 엔진
"""

from .definition import EntityDefinition, KeyAssignment, MissingFieldsException
from .controller import ALLOWED_ROLES, Operation, ResourceAccessController
from .router import build_resource_router

__all__ = [
    "EntityDefinition",
    "KeyAssignment",
    "MissingFieldsException",
    "ALLOWED_ROLES",
    "Operation",
    "ResourceAccessController",
    "build_resource_router",
]

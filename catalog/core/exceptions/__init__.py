"""
Core Exceptions Module
"""

from .base import (
    AppException,
    AuthenticationException,
    AuthorizationException,
    ValidationException,
    NotFoundException,
    InternalServerException,
    EntityNotFoundException,
    ForbiddenException,
)
from .codes import ErrorCode
from .schemas import (
    EntityNotFoundResponse,
    ErrorResponse,
    ErrorDetail,
    ValidationErrorResponse,
)

__all__ = [
    # Base Exceptions
    "AppException",
    "AuthenticationException",
    "AuthorizationException",
    "ValidationException",
    "NotFoundException",
    "InternalServerException",
    # Catalog Domain
    "EntityNotFoundException",
    "ForbiddenException",
    # Error Codes
    "ErrorCode",
    # Schemas
    "EntityNotFoundResponse",
    "ErrorResponse",
    "ErrorDetail",
    "ValidationErrorResponse",
]

"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection manager (motor)
- auth: Bearer JWT verification and FastAPI dependencies
- utils: Standard responses and API exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import JWTVerifier, create_auth_dependency
from common.utils import (
    success_response,
    error_response,
    APIException,
    UnauthorizedException,
    NotFoundException,
    ValidationException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "JWTVerifier",
    "create_auth_dependency",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "NotFoundException",
    "ValidationException",
    # Config
    "BaseAppSettings",
]

"""
Authentication module - bearer JWT verification.
"""

from common.auth.jwt_auth import JWTVerifier
from common.auth.dependencies import create_auth_dependency

__all__ = ["JWTVerifier", "create_auth_dependency"]

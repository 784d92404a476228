"""
FastAPI dependencies for Life Lag application.

Provides dependency injection for all services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import JWTVerifier, create_auth_dependency
from lifelag.services.checkin.checkin_service import CheckInService


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Auth
_jwt_verifier: Optional[JWTVerifier] = None

# Check-in
_checkin_service: Optional[CheckInService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_auth_services(jwt_secret: str, jwt_algorithm: str = "HS256") -> None:
    """Initialize auth services."""
    global _jwt_verifier

    _jwt_verifier = JWTVerifier(secret=jwt_secret, algorithm=jwt_algorithm)


def init_checkin_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize check-in services."""
    global _checkin_service

    _checkin_service = CheckInService(db=db)


def init_all_services(
    db: AsyncIOMotorDatabase,
    jwt_secret: str,
    jwt_algorithm: str = "HS256"
) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database
        jwt_secret: Secret for verifying bearer tokens
        jwt_algorithm: JWT signing algorithm
    """
    init_auth_services(jwt_secret, jwt_algorithm)
    init_checkin_services(db)


# ─────────────────────────────────────────────────────────────────
# Auth getters
# ─────────────────────────────────────────────────────────────────

def get_jwt_verifier() -> JWTVerifier:
    """Get JWT verifier instance."""
    if _jwt_verifier is None:
        raise RuntimeError("Auth services not initialized.")
    return _jwt_verifier


get_current_user_id = create_auth_dependency(get_jwt_verifier)


# ─────────────────────────────────────────────────────────────────
# Check-in getters
# ─────────────────────────────────────────────────────────────────

def get_checkin_service() -> CheckInService:
    """Get check-in service instance."""
    if _checkin_service is None:
        raise RuntimeError("Check-in services not initialized.")
    return _checkin_service

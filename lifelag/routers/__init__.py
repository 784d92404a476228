"""
Life Lag API Routers.

All routers are imported here for easy access.
"""

from lifelag.routers.checkin import router as checkin_router

__all__ = [
    "checkin_router",
]

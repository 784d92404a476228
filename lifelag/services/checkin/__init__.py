"""Check-in services."""

from lifelag.services.checkin.answers_validator import AnswersValidator
from lifelag.services.checkin.repository import CheckinRepository
from lifelag.services.checkin.checkin_service import CheckInService

__all__ = [
    "AnswersValidator",
    "CheckinRepository",
    "CheckInService",
]

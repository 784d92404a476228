"""
Check-in answers validation.

The engine assumes well-formed answers; this is where they get checked.
"""

from typing import Tuple, Optional, Dict, Any

from lifelag.engine.types import DIMENSIONS


class AnswersValidator:
    """
    Validates check-in answers: all six dimensions, integers from 1 to 5.
    """

    MIN_RATING = 1
    MAX_RATING = 5

    @classmethod
    def validate(cls, answers: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
        """
        Validate all answers are present and within the valid range.

        Args:
            answers: dict with dimension ratings

        Returns:
            tuple of (is_valid, error_message)
        """
        for dimension in DIMENSIONS:
            if dimension not in answers:
                return False, f"Missing required field: {dimension}"

            value = answers[dimension]

            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                return False, f"Field '{dimension}' must be an integer"

            if value < cls.MIN_RATING or value > cls.MAX_RATING:
                return False, f"Field '{dimension}' must be between {cls.MIN_RATING} and {cls.MAX_RATING}"

        return True, None

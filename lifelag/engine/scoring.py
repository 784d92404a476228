"""
Lag Score calculation.

Converts the six check-in answers into a Lag Score, a drift category and
the weakest dimension.
"""

import math

from lifelag.engine.types import Answers, DIMENSIONS


class ScoreEngine:
    """
    Scoring constants and calculations.

    Score formula:
        drift per answer = (5 - value) / 4
        score = round(mean(drift) * 100 * 0.8), clamped to 0-100
    """

    MAX_RATING = 5
    RATING_SPAN = 4
    SOFTENING_FACTOR = 0.8

    # (upper bound inclusive, category); anything past the last bound is critical
    CATEGORY_BOUNDS = [
        (19, "aligned"),
        (34, "mild"),
        (54, "moderate"),
        (74, "heavy"),
    ]

    @classmethod
    def lag_score(cls, answers: Answers) -> int:
        drift_values = [
            (cls.MAX_RATING - answers[dimension]) / cls.RATING_SPAN
            for dimension in DIMENSIONS
        ]

        average = sum(drift_values) / len(DIMENSIONS)
        raw_score = average * 100
        softened = raw_score * cls.SOFTENING_FACTOR

        # Half-up rounding; round() would use banker's rounding
        return int(math.floor(max(0.0, min(100.0, softened)) + 0.5))

    @classmethod
    def drift_category(cls, score: int) -> str:
        if score >= 0:
            for upper, category in cls.CATEGORY_BOUNDS:
                if score <= upper:
                    return category
        return "critical"


def calculate_lag_score(answers: Answers) -> int:
    """
    Calculate the Lag Score for a set of answers.

    Args:
        answers: dict with all six dimensions rated 1-5

    Returns:
        Integer score; 0 for all 5s, 80 for all 1s
    """
    return ScoreEngine.lag_score(answers)


def get_drift_category(score: int) -> str:
    """
    Map a Lag Score to its drift category.

    0-19 aligned, 20-34 mild, 35-54 moderate, 55-74 heavy, 75+ critical.
    Scores outside 0-100 fall through to critical.
    """
    return ScoreEngine.drift_category(score)


def get_weakest_dimension(answers: Answers) -> str:
    """
    Get the lowest-rated dimension.

    Ties go to the dimension that comes first in DIMENSIONS.
    """
    weakest = DIMENSIONS[0]
    for dimension in DIMENSIONS[1:]:
        if answers[dimension] < answers[weakest]:
            weakest = dimension
    return weakest

"""
Micro-goal suggestions.

Unlike Quick Pulse micro-adjustments, a micro-goal is picked at random from
a few phrasings per dimension. Pass an rng to make the choice reproducible.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from lifelag.engine.types import as_utc

MICRO_GOAL_SUGGESTIONS = {
    "energy": [
        "Protect one 30-minute rest block each day",
        "Reduce one high-energy activity by 50% this week",
        "Say no to one new commitment this week",
    ],
    "sleep": [
        "Go to bed within a 30-minute window for the next 3 nights",
        "Protect 7-8 hours of sleep for the next 5 nights",
        "Remove one evening activity to make room for sleep",
    ],
    "structure": [
        "Create a simple 3-item daily checklist for the next 5 days",
        "Set one non-negotiable start time for your day",
        "Establish one fixed anchor point in your day (same time, same activity)",
    ],
    "initiation": [
        "For one task each day, commit to just 5 minutes of starting it",
        "Pick one recurring task and start it at the same time each day",
        "Reduce one task's scope by 50% to make starting easier",
    ],
    "engagement": [
        "For one task this week, commit to completing it in smaller chunks",
        "Pick one task and set a 25-minute focused session to work on it",
        "Reduce expectations on one task by 50% to make follow-through achievable",
    ],
    "sustainability": [
        "Reduce effort on one activity by 20% this week",
        "Identify one area where you're overextending and reduce it by 30%",
        "Remove one source of ongoing effort for the next 7 days",
    ],
}


def generate_micro_goal_suggestion(
    weakest_dimension: str,
    rng: Optional[random.Random] = None
) -> str:
    options = MICRO_GOAL_SUGGESTIONS.get(weakest_dimension, MICRO_GOAL_SUGGESTIONS["energy"])
    return (rng or random).choice(options)


def get_current_week_start(now: Optional[datetime] = None) -> datetime:
    """Monday 00:00 of the week containing `now` (UTC by default)."""
    now = as_utc(now) or datetime.now(timezone.utc)
    monday = now - timedelta(days=now.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def is_current_week_goal(goal_created_at: datetime, now: Optional[datetime] = None) -> bool:
    return as_utc(goal_created_at) >= get_current_week_start(now)

"""
Reassurance messages.

get_reassurance_message() is the fixed one-liner per drift category.
pick_reassurance_message() varies the wording from larger pools, using
context (check-in count, streak, trend) and an injectable random source.
"""

import random
from typing import Optional, List

from lifelag.engine.types import MessageContext

DEFAULT_REASSURANCE = "This is maintenance, not measurement."

REASSURANCE_MESSAGES = {
    "aligned": "You're maintaining well.",
    "mild": "Small adjustments help.",
    "moderate": "This is a normal part of maintenance.",
    "heavy": "Focus on one thing. That's enough.",
    "critical": "Focus on one thing. That's enough.",
}

MESSAGE_POOL = {
    "aligned": [
        "You're maintaining well.",
        "You're in a good rhythm.",
        "Keep doing what's working.",
        "Your consistency is paying off.",
        "You're on track.",
        "This is sustainable.",
        "You've found your balance.",
        "You're managing well.",
        "Your approach is working.",
        "You're maintaining your baseline.",
        "This is steady progress.",
        "You're holding steady.",
        "Your routine is serving you.",
        "You're in a good place.",
        "This is maintenance, not measurement.",
        "You're doing the work.",
        "Your awareness is building.",
        "You're staying present to your needs.",
        "This is how maintenance looks.",
        "You're keeping things manageable.",
    ],
    "mild": [
        "Small adjustments help.",
        "Minor shifts make a difference.",
        "Tiny changes compound.",
        "Small tweaks are enough.",
        "Little adjustments matter.",
        "Subtle shifts can help.",
        "Minor course corrections work.",
        "Small steps forward count.",
        "Tiny improvements add up.",
        "Little changes are meaningful.",
        "Small shifts compound over time.",
        "Minor adjustments are sufficient.",
        "Tiny tweaks can help.",
        "Small changes make a difference.",
        "Little shifts are enough.",
        "Minor modifications help.",
        "Small adjustments compound.",
        "Tiny changes matter.",
        "Little tweaks can help.",
        "Small shifts are meaningful.",
    ],
    "moderate": [
        "This is a normal part of maintenance.",
        "Maintenance includes ups and downs.",
        "This is expected in the process.",
        "Variation is normal.",
        "This is part of the journey.",
        "Maintenance isn't linear.",
        "This is how it goes sometimes.",
        "Variation is part of the process.",
        "This is normal maintenance.",
        "Ups and downs are expected.",
        "This is part of staying aware.",
        "Maintenance includes fluctuations.",
        "This is normal in tracking.",
        "Variation is part of maintenance.",
        "This is expected variation.",
        "Maintenance has natural variation.",
        "This is part of the work.",
        "Ups and downs are normal.",
        "This is typical maintenance.",
        "Variation is expected.",
    ],
    "heavy": [
        "Focus on one thing. That's enough.",
        "One change at a time is enough.",
        "Pick one thing. That's sufficient.",
        "Start with the smallest step.",
        "Simplify where you can.",
        "Less is more right now.",
        "Do the minimum viable thing.",
        "Rest counts as progress.",
        "Protect your energy today.",
        "You don't need to fix everything.",
        "Choose the path of least resistance.",
        "Basics first. Everything else can wait.",
        "Lower the bar temporarily.",
        "Good enough is good enough.",
        "Reduce your expectations for now.",
        "One foot in front of the other.",
        "Just the next step. Nothing more.",
        "Prioritize ruthlessly.",
        "Let go of what's not essential.",
        "This is a time for simplicity.",
    ],
    "critical": [
        "Be gentle with yourself right now.",
        "This is data, not judgment.",
        "You showed up. That matters.",
        "Just notice. No fixing required today.",
        "Survival mode is valid.",
        "Take care of yourself first.",
        "This too is information.",
        "You're still here. That counts.",
        "Permission to do less granted.",
        "Self-compassion is the priority.",
        "This is temporary.",
        "Rest is productive right now.",
        "You don't have to solve this today.",
        "One breath at a time.",
        "Acknowledge where you are.",
        "This is awareness, not failure.",
        "Your wellbeing comes first.",
        "Showing up is the whole task.",
        "There's no wrong way to get through this.",
        "Just today. Just this moment.",
    ],
}

FIRST_CHECKIN_MESSAGES = [
    "You're building awareness. That's the first step.",
    "You're starting to notice patterns. That matters.",
    "Awareness is the foundation.",
    "You're learning what works for you.",
    "This is how you build the habit.",
]

LONG_TERM_MESSAGES = [
    "You've been tracking for a while. Patterns matter.",
    "Your data is telling a story.",
    "Long-term patterns are emerging.",
    "You're seeing the bigger picture now.",
    "Your consistency is building insights.",
]

HIGH_STREAK_MESSAGES = [
    "Your consistency is paying off.",
    "You're building momentum.",
    "Your routine is becoming automatic.",
    "You're making this a habit.",
    "Your consistency is the work.",
]

DECLINING_TREND_MESSAGES = [
    "Small shifts compound over time.",
    "Early detection helps.",
    "Noticing the shift is the first step.",
    "Awareness allows for adjustment.",
    "Catching drift early matters.",
]

LONG_TERM_CHECKIN_COUNT = 20
HIGH_STREAK_COUNT = 5


def get_reassurance_message(drift_category: str) -> str:
    """One-line reassurance for a drift category."""
    return REASSURANCE_MESSAGES.get(drift_category, DEFAULT_REASSURANCE)


def _candidate_messages(pool: List[str], context: Optional[MessageContext]) -> List[str]:
    candidates = list(pool)
    if context is None:
        return candidates

    if context.checkin_count == 1:
        candidates = FIRST_CHECKIN_MESSAGES + candidates
    elif context.checkin_count and context.checkin_count >= LONG_TERM_CHECKIN_COUNT:
        candidates = LONG_TERM_MESSAGES + candidates

    if context.streak_count and context.streak_count >= HIGH_STREAK_COUNT:
        candidates = HIGH_STREAK_MESSAGES + candidates

    if context.recent_trend == "declining":
        candidates = DECLINING_TREND_MESSAGES + candidates

    if context.previous_message:
        candidates = [m for m in candidates if m != context.previous_message]

    return candidates


def pick_reassurance_message(
    drift_category: str,
    context: Optional[MessageContext] = None,
    rng: Optional[random.Random] = None
) -> str:
    """
    Pick a varied reassurance message.

    Args:
        drift_category: Category of the current check-in
        context: Optional check-in count, streak, trend and last message shown
        rng: Random source, defaults to the module-level generator

    Returns:
        One message from the category pool plus any context pools,
        never equal to context.previous_message
    """
    pool = MESSAGE_POOL.get(drift_category)
    if not pool:
        return DEFAULT_REASSURANCE

    candidates = _candidate_messages(pool, context)
    if not candidates:
        return pool[0]

    return (rng or random).choice(candidates)

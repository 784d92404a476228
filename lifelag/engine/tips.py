"""
Weekly tip selection.

Static (weakest dimension x drift category) table, feedback scoring and
the repeated-weakness acknowledgement.
"""

from typing import Optional, Sequence, Dict

from lifelag.engine.types import Tip, TipFeedback

FEEDBACK_POINTS = {
    "helpful": 2,
    "didnt_try": 0,
    "not_relevant": -1,
}

REPEAT_WEAKNESS_COUNT = 2

LOAD_REDUCTION_TIP = Tip(
    focus="Immediate load reduction",
    constraint="Identify one recurring commitment or task you can pause or defer for the next 7 days",
    choice="Decide which one, and communicate the pause clearly to anyone affected",
)

SLEEP_RESTORATION_TIP = Tip(
    focus="Sleep restoration",
    constraint="Protect 7-9 hours of sleep for the next 3 nights, even if it means saying no to other commitments",
    choice="Choose which 3 nights this week, and what you'll postpone to make room",
)

TIPS: Dict[str, Dict[str, Tip]] = {
    "energy": {
        "aligned": Tip(
            focus="Energy maintenance",
            constraint="Keep your current rhythm for the next week",
            choice="Notice what's working and continue it",
        ),
        "mild": Tip(
            focus="Energy preservation",
            constraint="Protect one 30-minute block daily for rest or low-demand activity",
            choice="Choose the time of day that feels most important to protect",
        ),
        "moderate": Tip(
            focus="Energy restoration",
            constraint="Reduce one high-energy-demand activity this week by 50%",
            choice="Select which activity, and how you'll scale it back",
        ),
        "heavy": Tip(
            focus="Energy recovery",
            constraint="Remove one recurring commitment for the next 7 days",
            choice="Choose which one, and communicate the pause clearly",
        ),
    },
    "sleep": {
        "aligned": Tip(
            focus="Sleep maintenance",
            constraint="Keep your current sleep schedule for the next week",
            choice="Continue what's working",
        ),
        "mild": Tip(
            focus="Sleep consistency",
            constraint="Go to bed within a 30-minute window for the next 3 nights",
            choice="Choose your target bedtime",
        ),
        "moderate": Tip(
            focus="Sleep protection",
            constraint="Protect 7-8 hours of sleep for the next 5 nights, even if it means reducing evening activities",
            choice="Decide which evening activities you'll scale back",
        ),
        "heavy": Tip(
            focus="Sleep restoration",
            constraint="Prioritize 7-9 hours of sleep for the next 7 nights, adjusting other commitments as needed",
            choice="Identify what you'll adjust to make room",
        ),
    },
    "structure": {
        "aligned": Tip(
            focus="Structure maintenance",
            constraint="Continue your current daily structure",
            choice="Keep doing what works",
        ),
        "mild": Tip(
            focus="Structure reinforcement",
            constraint="Establish one fixed anchor point in your day (same time, same activity) for the next week",
            choice="Choose which anchor point works best for you",
        ),
        "moderate": Tip(
            focus="Structure rebuilding",
            constraint="Create a simple 3-item daily checklist for the next 5 days",
            choice="Decide what those 3 items will be",
        ),
        "heavy": Tip(
            focus="Structure recovery",
            constraint="Set one non-negotiable start time for your day, and protect it for the next week",
            choice="Choose the time and one thing you'll do at that time consistently",
        ),
    },
    "initiation": {
        "aligned": Tip(
            focus="Initiation maintenance",
            constraint="Keep your current approach to starting tasks",
            choice="Continue what's working",
        ),
        "mild": Tip(
            focus="Initiation support",
            constraint="For one task each day, commit to just 5 minutes of starting it",
            choice="Choose which task each day",
        ),
        "moderate": Tip(
            focus="Initiation practice",
            constraint="Pick one recurring task and start it at the same time each day for the next 5 days",
            choice="Select the task and time",
        ),
        "heavy": Tip(
            focus="Initiation recovery",
            constraint="Reduce one task's scope by 50% this week to make starting easier",
            choice="Choose which task and how you'll scale it back",
        ),
    },
    "engagement": {
        "aligned": Tip(
            focus="Engagement maintenance",
            constraint="Continue your current approach to staying engaged",
            choice="Keep doing what works",
        ),
        "mild": Tip(
            focus="Engagement support",
            constraint="For one task this week, commit to completing it in smaller chunks",
            choice="Choose the task and how you'll break it down",
        ),
        "moderate": Tip(
            focus="Engagement practice",
            constraint="Pick one task and set a 25-minute focused session to work on it",
            choice="Select the task and when you'll do it",
        ),
        "heavy": Tip(
            focus="Engagement recovery",
            constraint="Reduce expectations on one task by 50% to make follow-through achievable",
            choice="Choose which task and how you'll adjust expectations",
        ),
    },
    "sustainability": {
        "aligned": Tip(
            focus="Sustainability maintenance",
            constraint="Continue your current pace",
            choice="Keep what's working",
        ),
        "mild": Tip(
            focus="Sustainability support",
            constraint="Reduce effort on one activity by 20% this week",
            choice="Choose which activity and how you'll scale back",
        ),
        "moderate": Tip(
            focus="Sustainability practice",
            constraint="Identify one area where you're overextending and reduce it by 30% for the next 5 days",
            choice="Select the area and how you'll adjust",
        ),
        "heavy": Tip(
            focus="Sustainability recovery",
            constraint="Remove one source of ongoing effort for the next 7 days",
            choice="Choose which one and communicate the pause",
        ),
    },
}

DIMENSION_LABELS = {
    "energy": "Energy",
    "sleep": "Sleep consistency",
    "structure": "Daily structure",
    "initiation": "Task initiation",
    "engagement": "Engagement / follow-through",
    "sustainability": "Effort sustainability",
}


def calculate_tip_score(
    dimension: str,
    category: str,
    feedback_history: Sequence[TipFeedback]
) -> float:
    """
    Weighted feedback score for a tip.

    helpful=+2, didnt_try=0, not_relevant=-1. The newest feedback has
    weight 1, the next 1/2, then 1/3 and so on. Returns 0 with no feedback.
    """
    relevant = [
        f for f in feedback_history
        if f.dimension == dimension and f.category == category
    ]
    if not relevant:
        return 0.0

    relevant.sort(key=lambda f: f.created_at, reverse=True)

    total_score = 0.0
    total_weight = 0.0
    for index, feedback in enumerate(relevant):
        weight = 1 / (index + 1)
        total_score += FEEDBACK_POINTS.get(feedback.feedback, 0) * weight
        total_weight += weight

    return total_score / total_weight


def get_tip(
    weakest_dimension: str,
    category: str,
    feedback_history: Optional[Sequence[TipFeedback]] = None
) -> Tip:
    """
    Get the tip for a weakest dimension and drift category.

    Critical drift only gets sleep restoration (when sleep is weakest) or
    load reduction. Feedback history is accepted for personalization; with
    a single tip per combination it does not change the result yet.
    """
    if category == "critical":
        if weakest_dimension == "sleep":
            return SLEEP_RESTORATION_TIP
        return LOAD_REDUCTION_TIP

    tips_for_dimension = TIPS.get(weakest_dimension, TIPS["energy"])
    return tips_for_dimension.get(category, LOAD_REDUCTION_TIP)


def get_adaptive_tip_message(
    weakest_dimension: str,
    recent_weakest_dimensions: Sequence[str]
) -> Optional[str]:
    """Acknowledge a dimension that was weakest 2+ times recently."""
    if not recent_weakest_dimensions:
        return None

    occurrences = sum(1 for d in recent_weakest_dimensions if d == weakest_dimension)
    if occurrences < REPEAT_WEAKNESS_COUNT:
        return None

    label = DIMENSION_LABELS.get(weakest_dimension, weakest_dimension)
    return f"Since {label.lower()} has been your weakest dimension recently, consider focusing on it."

"""
Life Lag API.

Weekly check-in scoring, streaks, milestones and Quick Pulse suggestions.
"""

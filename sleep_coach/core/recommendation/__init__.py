"""
Recommendation module for sleep coaching.

This module turns schedule statistics and detected patterns into a
prioritized list of coaching insights.
"""

from sleep_coach.core.recommendation.insight_generator import generate_insights, get_primary_insight

__all__ = ['generate_insights', 'get_primary_insight']

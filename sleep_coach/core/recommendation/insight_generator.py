"""
Module for generating prioritized coaching insights from sleep history.
"""

import logging
import uuid
from typing import Callable, List, Optional, Sequence

from sleep_coach.config.coach_config import CoachConfig, DEFAULT_COACH_CONFIG
from sleep_coach.core.analysis.pattern_detection import (
    detect_consistent_streak,
    detect_trend,
    detect_weekend_pattern,
)
from sleep_coach.core.analysis.schedule_analysis import analyze_schedule
from sleep_coach.core.analysis.time_arithmetic import minutes_to_time
from sleep_coach.core.models.data_models import SleepEntry
from sleep_coach.core.models.output_models import (
    CoachInsight,
    InsightCategory,
    InsightPriority,
    PatternResult,
    PatternType,
    ScheduleStats,
)
from sleep_coach.utils.clock import Clock, system_clock
from sleep_coach.utils.constants import INSIGHT_TEMPLATES

logger = logging.getLogger(__name__)

IdFactory = Callable[[str], str]


def default_id_factory(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex}"


class _InsightFactory:
    """Stamps insights with a fresh id and the creation time of this pass"""

    def __init__(self, clock: Clock, id_factory: IdFactory):
        self.created_at = clock()
        self.id_factory = id_factory

    def build(self, prefix, **fields) -> CoachInsight:
        return CoachInsight(id=self.id_factory(prefix), created_at=self.created_at, **fields)


def generate_insights(
    entries: Sequence[SleepEntry],
    config: Optional[CoachConfig] = None,
    clock: Clock = system_clock,
    id_factory: Optional[IdFactory] = None,
) -> List[CoachInsight]:
    """
    Generate all applicable insights from sleep history.

    Args:
        entries: Sleep history snapshot to analyze
        config: Calibration constants (defaults if None)
        clock: Time source for the insight timestamps
        id_factory: Builds an insight id from a kind prefix

    Returns:
        list: Insights ordered by priority, rule order kept within a priority
    """
    config = config or DEFAULT_COACH_CONFIG
    factory = _InsightFactory(clock, id_factory or default_id_factory)

    # Insufficient data check
    if len(entries) < config.min_entries_for_analysis:
        return [_create_insufficient_data_insight(factory, len(entries), config)]

    stats = analyze_schedule(entries, config)
    if stats is None:
        return []

    insights = []

    # 1. Check schedule variance (high priority)
    variance_insight = _generate_variance_insight(factory, stats, config)
    if variance_insight:
        insights.append(variance_insight)

    # 2. Check weekend pattern
    weekend_pattern = detect_weekend_pattern(stats, config)
    if weekend_pattern:
        insights.append(_create_weekend_pattern_insight(factory, weekend_pattern, stats, config))

    # 3. Check trends
    trend = detect_trend(entries, config)
    if trend:
        insights.append(_create_trend_insight(factory, trend))

    # 4. Praise a consistent streak, but never alongside a variance warning
    streak = detect_consistent_streak(entries, config)
    if streak and not variance_insight:
        insights.append(_create_streak_insight(factory, streak))

    logger.debug(f"Generated {len(insights)} insights from {len(entries)} entries")
    return sort_by_priority(insights)


def get_primary_insight(
    entries: Sequence[SleepEntry],
    config: Optional[CoachConfig] = None,
    clock: Clock = system_clock,
    id_factory: Optional[IdFactory] = None,
) -> CoachInsight:
    """Get the single most important insight to display"""
    insights = generate_insights(entries, config, clock, id_factory)
    if insights:
        return insights[0]

    factory = _InsightFactory(clock, id_factory or default_id_factory)
    return _create_insufficient_data_insight(factory, len(entries), config or DEFAULT_COACH_CONFIG)


def sort_by_priority(insights: List[CoachInsight]) -> List[CoachInsight]:
    """Stable sort: high, medium, low, info"""
    return sorted(insights, key=lambda insight: insight.priority.rank)


def _generate_variance_insight(factory, stats: ScheduleStats, config: CoachConfig) -> Optional[CoachInsight]:
    avg_variance = (stats.bedtime_variance_minutes + stats.wakeup_variance_minutes) / 2
    thresholds = config.variance_thresholds

    if avg_variance <= thresholds.good:
        return None

    is_high = avg_variance > thresholds.poor

    return factory.build(
        'variance',
        category=InsightCategory.SCHEDULE_VARIANCE,
        priority=InsightPriority.HIGH if is_high else InsightPriority.MEDIUM,
        title=INSIGHT_TEMPLATES['variance_title'],
        message=INSIGHT_TEMPLATES['variance_high' if is_high else 'variance_moderate'],
        data={
            'bedtime_variance': stats.bedtime_variance_minutes,
            'wakeup_variance': stats.wakeup_variance_minutes,
            'suggested_bedtime': minutes_to_time(stats.avg_bedtime_minutes),
        },
        actionable=True,
    )


def _create_weekend_pattern_insight(factory, pattern: PatternResult, stats: ScheduleStats, config: CoachConfig) -> CoachInsight:
    direction = pattern.details['direction']
    diff = pattern.details['bedtime_diff_minutes']

    return factory.build(
        'weekend',
        category=InsightCategory.WEEKEND_PATTERN,
        priority=InsightPriority.HIGH if diff > config.variance_thresholds.poor else InsightPriority.MEDIUM,
        title=INSIGHT_TEMPLATES['weekend_title'],
        message=INSIGHT_TEMPLATES['weekend_later' if direction == 'later' else 'weekend_earlier'],
        data={
            'time_difference': diff,
            'weekday_bedtime': minutes_to_time(stats.weekday_avg_bedtime),
            'weekend_bedtime': minutes_to_time(stats.weekend_avg_bedtime),
        },
        actionable=True,
    )


def _create_trend_insight(factory, trend: PatternResult) -> CoachInsight:
    is_improving = trend.pattern == PatternType.IMPROVING

    return factory.build(
        'trend',
        category=InsightCategory.IMPROVING_TREND if is_improving else InsightCategory.DECLINING_TREND,
        priority=InsightPriority.INFO if is_improving else InsightPriority.MEDIUM,
        title=INSIGHT_TEMPLATES['trend_improving_title' if is_improving else 'trend_declining_title'],
        message=INSIGHT_TEMPLATES['trend_improving_message' if is_improving else 'trend_declining_message'],
        data={
            'current_score': trend.details['recent_score'],
            'previous_score': trend.details['previous_score'],
            'change': trend.details['improvement' if is_improving else 'decline'],
        },
        actionable=not is_improving,
    )


def _create_streak_insight(factory, streak: PatternResult) -> CoachInsight:
    return factory.build(
        'streak',
        category=InsightCategory.OPTIMAL_STREAK,
        priority=InsightPriority.INFO,
        title=INSIGHT_TEMPLATES['streak_title'],
        message=INSIGHT_TEMPLATES['streak_message'],
        data={
            'days': streak.details['days'],
            'score': streak.details['score'],
        },
        actionable=False,
    )


def _create_insufficient_data_insight(factory, current_count: int, config: CoachConfig) -> CoachInsight:
    return factory.build(
        'insufficient',
        category=InsightCategory.INSUFFICIENT_DATA,
        priority=InsightPriority.INFO,
        title=INSIGHT_TEMPLATES['insufficient_title'],
        message=INSIGHT_TEMPLATES['insufficient_message'],
        data={
            'current_entries': current_count,
            'required_entries': config.min_entries_for_analysis,
        },
        actionable=False,
        dismissible=False,
    )

"""
Pattern detection over sleep history.

Each detector is independent and returns a PatternResult, or None when the
pattern is absent or there is not enough data.
"""

import logging
import math
from typing import List, Optional, Sequence

from sleep_coach.config.coach_config import CoachConfig, DEFAULT_COACH_CONFIG
from sleep_coach.core.analysis.schedule_analysis import analyze_schedule
from sleep_coach.core.analysis.time_arithmetic import round_half_up
from sleep_coach.core.models.data_models import SleepEntry
from sleep_coach.core.models.output_models import PatternResult, PatternType, ScheduleStats

logger = logging.getLogger(__name__)


def detect_weekend_pattern(stats: ScheduleStats, config: Optional[CoachConfig] = None) -> Optional[PatternResult]:
    """Detect weekend vs weekday sleep pattern differences"""
    config = config or DEFAULT_COACH_CONFIG

    bedtime_diff = abs(stats.weekend_avg_bedtime - stats.weekday_avg_bedtime)
    wakeup_diff = abs(stats.weekend_avg_wakeup - stats.weekday_avg_wakeup)

    if bedtime_diff < config.weekend_shift_threshold and wakeup_diff < config.weekend_shift_threshold:
        return None

    is_later_on_weekend = stats.weekend_avg_bedtime > stats.weekday_avg_bedtime

    return PatternResult(
        pattern=PatternType.WEEKEND_SHIFT,
        confidence=min(1.0, max(bedtime_diff, wakeup_diff) / config.weekend_shift_confidence_span),
        details={
            'bedtime_diff_minutes': round_half_up(bedtime_diff),
            'wakeup_diff_minutes': round_half_up(wakeup_diff),
            'direction': 'later' if is_later_on_weekend else 'earlier',
        },
    )


def detect_trend(entries: Sequence[SleepEntry], config: Optional[CoachConfig] = None) -> Optional[PatternResult]:
    """
    Detect improving or declining consistency trends.

    Compares the consistency score of the most recent ~30% of entries with
    the score of the earlier entries.
    """
    config = config or DEFAULT_COACH_CONFIG

    if len(entries) < config.min_entries_for_trends:
        return None

    # Sort by date (newest first)
    newest_first = sorted(entries, key=lambda entry: entry.calendar_date, reverse=True)

    split_index = math.ceil(len(newest_first) * config.trend_recent_fraction)
    recent_entries = newest_first[:max(config.min_entries_for_analysis, split_index)]
    earlier_entries = newest_first[split_index:]

    if len(earlier_entries) < config.min_entries_for_analysis:
        return None

    recent_stats = analyze_schedule(recent_entries, config)
    earlier_stats = analyze_schedule(earlier_entries, config)
    if recent_stats is None or earlier_stats is None:
        return None

    score_diff = recent_stats.consistency_score - earlier_stats.consistency_score
    logger.debug(
        f"Trend: recent score {recent_stats.consistency_score} vs earlier "
        f"{earlier_stats.consistency_score} ({score_diff:+d})"
    )

    if abs(score_diff) < config.trend_threshold:
        return None

    improving = score_diff > 0
    details = {
        'recent_score': recent_stats.consistency_score,
        'previous_score': earlier_stats.consistency_score,
    }
    details['improvement' if improving else 'decline'] = abs(score_diff)

    return PatternResult(
        pattern=PatternType.IMPROVING if improving else PatternType.DECLINING,
        confidence=min(1.0, abs(score_diff) / config.trend_confidence_span),
        details=details,
    )


def detect_consistent_streak(entries: Sequence[SleepEntry], config: Optional[CoachConfig] = None) -> Optional[PatternResult]:
    """Detect a run of consistent sleep schedules"""
    config = config or DEFAULT_COACH_CONFIG

    if len(entries) < config.min_entries_for_patterns:
        return None

    stats = analyze_schedule(entries, config)
    if stats is None or stats.consistency_score < config.streak_score_threshold:
        return None

    return PatternResult(
        pattern=PatternType.CONSISTENT,
        confidence=stats.consistency_score / 100,
        details={
            'score': stats.consistency_score,
            'days': stats.data_points,
        },
    )


def detect_irregular_pattern(stats: ScheduleStats, config: Optional[CoachConfig] = None) -> Optional[PatternResult]:
    """Detect an irregular schedule (high average variance)"""
    config = config or DEFAULT_COACH_CONFIG

    avg_variance = (stats.bedtime_variance_minutes + stats.wakeup_variance_minutes) / 2
    if avg_variance < config.irregular_variance_threshold:
        return None

    return PatternResult(
        pattern=PatternType.IRREGULAR,
        confidence=min(1.0, avg_variance / config.variance_thresholds.very_poor),
        details={
            'bedtime_variance': stats.bedtime_variance_minutes,
            'wakeup_variance': stats.wakeup_variance_minutes,
            'avg_variance': round_half_up(avg_variance),
        },
    )


def detect_patterns(entries: Sequence[SleepEntry], config: Optional[CoachConfig] = None) -> List[PatternResult]:
    """Run every detector and collect the patterns that are present"""
    config = config or DEFAULT_COACH_CONFIG

    stats = analyze_schedule(entries, config)
    if stats is None:
        return []

    candidates = [
        detect_weekend_pattern(stats, config),
        detect_trend(entries, config),
        detect_consistent_streak(entries, config),
        detect_irregular_pattern(stats, config),
    ]
    return [pattern for pattern in candidates if pattern is not None]

"""
Module for calculating schedule statistics over a window of sleep history.
"""

import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from sleep_coach.config.coach_config import CoachConfig, DEFAULT_COACH_CONFIG
from sleep_coach.core.analysis.time_arithmetic import round_half_up, time_to_minutes
from sleep_coach.core.models.data_models import SleepEntry
from sleep_coach.core.models.output_models import ScheduleStats
from sleep_coach.utils.constants import WEEKEND_DAYS

logger = logging.getLogger(__name__)


def calculate_std_dev(values) -> float:
    """Population standard deviation; 0 for fewer than two values"""
    values = np.asarray(values, dtype=float)
    if len(values) < 2:
        return 0.0
    return float(np.std(values))


def calculate_average(values) -> float:
    """Mean of the values; 0 for an empty sequence"""
    values = np.asarray(values, dtype=float)
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def is_weekend(day) -> bool:
    """Check if a date falls on a Saturday or Sunday"""
    return pd.Timestamp(day).dayofweek in WEEKEND_DAYS


def entries_to_frame(entries: Sequence[SleepEntry]) -> pd.DataFrame:
    """
    Build a DataFrame of schedule minutes from sleep entries.

    Args:
        entries: Sleep entries in any order

    Returns:
        DataFrame: date, bedtime_minutes, wakeup_minutes and is_weekend columns
    """
    data = pd.DataFrame({
        'date': pd.to_datetime([entry.date for entry in entries], format='%Y-%m-%d'),
        'bedtime_minutes': [time_to_minutes(entry.bedtime) for entry in entries],
        'wakeup_minutes': [time_to_minutes(entry.wakeup_time) for entry in entries],
    })
    data['is_weekend'] = data['date'].dt.dayofweek.isin(WEEKEND_DAYS)
    return data


def calculate_consistency_score(bedtime_var, wakeup_var, weekend_diff, config: CoachConfig = DEFAULT_COACH_CONFIG) -> int:
    """
    Score consistency from 0-100 based on variance metrics.

    Lower variance and a smaller weekday/weekend bedtime gap give a higher
    score.
    """
    thresholds = config.variance_thresholds
    weights = config.scoring_weights

    # Convert variance to 0-1 score (lower variance = higher score)
    bedtime_score = max(0.0, 1 - bedtime_var / thresholds.very_poor)
    wakeup_score = max(0.0, 1 - wakeup_var / thresholds.very_poor)
    weekend_score = max(0.0, 1 - weekend_diff / (thresholds.poor * 2))

    weighted_score = (
        bedtime_score * weights.bedtime_variance
        + wakeup_score * weights.wakeup_variance
        + weekend_score * weights.weekend_consistency
    )

    return min(100, max(0, round_half_up(weighted_score * 100)))


def analyze_schedule(entries: Sequence[SleepEntry], config: Optional[CoachConfig] = None) -> Optional[ScheduleStats]:
    """
    Calculate schedule statistics for a set of sleep entries.

    Args:
        entries: Sleep entries to analyze
        config: Calibration constants (defaults if None)

    Returns:
        ScheduleStats, or None when there are too few entries to analyze
    """
    config = config or DEFAULT_COACH_CONFIG

    if len(entries) < config.min_entries_for_analysis:
        logger.debug(f"Not enough entries for schedule analysis ({len(entries)})")
        return None

    data = entries_to_frame(entries)
    weekday_data = data[~data['is_weekend']]
    weekend_data = data[data['is_weekend']]

    # Variance is reported as standard deviation in minutes
    bedtime_variance = calculate_std_dev(data['bedtime_minutes'])
    wakeup_variance = calculate_std_dev(data['wakeup_minutes'])

    avg_bedtime = calculate_average(data['bedtime_minutes'])
    avg_wakeup = calculate_average(data['wakeup_minutes'])

    # Missing weekday or weekend data falls back to the overall average
    weekday_avg_bedtime = calculate_average(weekday_data['bedtime_minutes']) if len(weekday_data) > 0 else avg_bedtime
    weekend_avg_bedtime = calculate_average(weekend_data['bedtime_minutes']) if len(weekend_data) > 0 else avg_bedtime
    weekday_avg_wakeup = calculate_average(weekday_data['wakeup_minutes']) if len(weekday_data) > 0 else avg_wakeup
    weekend_avg_wakeup = calculate_average(weekend_data['wakeup_minutes']) if len(weekend_data) > 0 else avg_wakeup

    weekend_bedtime_diff = abs(weekend_avg_bedtime - weekday_avg_bedtime)
    consistency_score = calculate_consistency_score(
        bedtime_variance, wakeup_variance, weekend_bedtime_diff, config
    )

    logger.debug(
        f"Schedule analysis over {len(data)} entries: bedtime sd {bedtime_variance:.1f}, "
        f"wake sd {wakeup_variance:.1f}, weekend gap {weekend_bedtime_diff:.1f}, score {consistency_score}"
    )

    return ScheduleStats(
        bedtime_variance_minutes=round_half_up(bedtime_variance),
        wakeup_variance_minutes=round_half_up(wakeup_variance),
        avg_bedtime_minutes=round_half_up(avg_bedtime),
        avg_wakeup_minutes=round_half_up(avg_wakeup),
        weekday_avg_bedtime=round_half_up(weekday_avg_bedtime),
        weekend_avg_bedtime=round_half_up(weekend_avg_bedtime),
        weekday_avg_wakeup=round_half_up(weekday_avg_wakeup),
        weekend_avg_wakeup=round_half_up(weekend_avg_wakeup),
        consistency_score=consistency_score,
        data_points=len(data),
    )

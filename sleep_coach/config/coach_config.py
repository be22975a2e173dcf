# sleep_coach/config/coach_config.py

import logging
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from sleep_coach.config.config_manager import ConfigManager
from sleep_coach.utils import constants

logger = logging.getLogger(__name__)


class VarianceThresholds(BaseModel):
    """Standard-deviation bands (minutes) used to grade schedule variance"""
    excellent: float = constants.VARIANCE_THRESHOLDS['excellent']
    good: float = constants.VARIANCE_THRESHOLDS['good']
    moderate: float = constants.VARIANCE_THRESHOLDS['moderate']
    poor: float = constants.VARIANCE_THRESHOLDS['poor']
    very_poor: float = Field(constants.VARIANCE_THRESHOLDS['very_poor'], gt=0)


class ScoringWeights(BaseModel):
    """Weights of the consistency score components (must sum to 1.0)"""
    bedtime_variance: float = Field(constants.SCORING_WEIGHTS['bedtime_variance'], ge=0.0, le=1.0)
    wakeup_variance: float = Field(constants.SCORING_WEIGHTS['wakeup_variance'], ge=0.0, le=1.0)
    weekend_consistency: float = Field(constants.SCORING_WEIGHTS['weekend_consistency'], ge=0.0, le=1.0)

    @model_validator(mode='after')
    def validate_total(self):
        total = self.bedtime_variance + self.wakeup_variance + self.weekend_consistency
        if abs(total - 1.0) > 0.001:
            raise ValueError(f'Scoring weights must sum to 1.0 (got {total:.3f})')
        return self


class CoachConfig(BaseModel):
    """
    Calibration constants for schedule analysis, pattern detection and
    insight generation. Defaults come from sleep_coach.utils.constants.
    """
    min_entries_for_analysis: int = Field(constants.MIN_ENTRIES_FOR_ANALYSIS, ge=1)
    min_entries_for_trends: int = Field(constants.MIN_ENTRIES_FOR_TRENDS, ge=2)
    min_entries_for_patterns: int = Field(constants.MIN_ENTRIES_FOR_PATTERNS, ge=1)
    variance_thresholds: VarianceThresholds = VarianceThresholds()
    weekend_shift_threshold: float = Field(constants.WEEKEND_SHIFT_THRESHOLD, gt=0)
    weekend_shift_confidence_span: float = Field(constants.WEEKEND_SHIFT_CONFIDENCE_SPAN, gt=0)
    scoring_weights: ScoringWeights = ScoringWeights()
    trend_threshold: float = Field(constants.TREND_THRESHOLD, gt=0)
    trend_confidence_span: float = Field(constants.TREND_CONFIDENCE_SPAN, gt=0)
    trend_recent_fraction: float = Field(constants.TREND_RECENT_FRACTION, gt=0.0, lt=1.0)
    streak_score_threshold: int = Field(constants.STREAK_SCORE_THRESHOLD, ge=0, le=100)
    irregular_variance_threshold: float = Field(constants.IRREGULAR_VARIANCE_THRESHOLD, gt=0)
    insight_window_days: int = Field(constants.INSIGHT_WINDOW_DAYS, ge=1)
    max_history_entries: int = Field(constants.MAX_HISTORY_ENTRIES, ge=1)


DEFAULT_COACH_CONFIG = CoachConfig()


def load_coach_config(config_manager: Optional[ConfigManager] = None) -> CoachConfig:
    """
    Build a CoachConfig from the ``coach`` section of the YAML configuration.

    Args:
        config_manager: ConfigManager to read from (packaged config.yaml if None)

    Returns:
        CoachConfig: Validated configuration, defaults for missing keys
    """
    manager = config_manager or ConfigManager()
    section = manager.get('coach', {}) or {}
    config = CoachConfig(**section)
    logger.info(f"Coach configuration loaded from {manager.config_path}")
    return config

# sleep_coach/core/models/output_models.py

from datetime import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field


class InsightCategory(str, Enum):
    SCHEDULE_VARIANCE = "schedule_variance"
    WEEKEND_PATTERN = "weekend_pattern"
    IMPROVING_TREND = "improving_trend"
    DECLINING_TREND = "declining_trend"
    OPTIMAL_STREAK = "optimal_streak"
    INSUFFICIENT_DATA = "insufficient_data"


class InsightPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER[self]


PRIORITY_ORDER = {
    InsightPriority.HIGH: 0,
    InsightPriority.MEDIUM: 1,
    InsightPriority.LOW: 2,
    InsightPriority.INFO: 3,
}


class PatternType(str, Enum):
    WEEKEND_SHIFT = "weekend_shift"
    IRREGULAR = "irregular"
    CONSISTENT = "consistent"
    IMPROVING = "improving"
    DECLINING = "declining"


class ScheduleStats(BaseModel):
    """Schedule statistics over a window of sleep history (minutes, rounded)"""
    bedtime_variance_minutes: int = Field(..., ge=0)
    wakeup_variance_minutes: int = Field(..., ge=0)
    avg_bedtime_minutes: int
    avg_wakeup_minutes: int
    weekday_avg_bedtime: int
    weekend_avg_bedtime: int
    weekday_avg_wakeup: int
    weekend_avg_wakeup: int
    consistency_score: int = Field(..., ge=0, le=100)
    data_points: int = Field(..., ge=0)


class PatternResult(BaseModel):
    """A detected behavioral pattern"""
    pattern: PatternType
    confidence: float = Field(..., ge=0.0, le=1.0)
    details: Dict[str, Any] = {}


class CoachInsight(BaseModel):
    """Prioritized, human-facing observation rendered by the UI"""
    id: str
    category: InsightCategory
    priority: InsightPriority
    title: str
    message: str
    data: Dict[str, Any] = {}
    actionable: bool
    dismissible: bool = True
    created_at: datetime

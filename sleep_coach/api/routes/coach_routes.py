# sleep_coach/api/routes/coach_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sleep_coach.api.dependencies import get_coach_service
from sleep_coach.core.models.output_models import CoachInsight, PatternResult, ScheduleStats
from sleep_coach.core.services.coach_service import CoachService

router = APIRouter(
    prefix="/coach",
    tags=["Coach"],
)


class CoachSummary(BaseModel):
    primary_insight: CoachInsight
    all_insights: List[CoachInsight]
    has_enough_data: bool
    consistency_score: Optional[int] = None


@router.get("/insights", response_model=CoachSummary)
async def get_insights(service: CoachService = Depends(get_coach_service)):
    """All insights for the recent window, highest priority first"""
    insights = service.get_insights()
    return CoachSummary(
        primary_insight=service.get_primary_insight(),
        all_insights=insights,
        has_enough_data=service.has_enough_data(),
        consistency_score=service.consistency_score(),
    )


@router.get("/insights/primary", response_model=CoachInsight)
async def get_primary_insight(service: CoachService = Depends(get_coach_service)):
    return service.get_primary_insight()


@router.get("/stats", response_model=Optional[ScheduleStats])
async def get_stats(service: CoachService = Depends(get_coach_service)):
    """Schedule statistics, null until enough nights are logged"""
    return service.get_schedule_stats()


@router.get("/patterns", response_model=List[PatternResult])
async def get_patterns(service: CoachService = Depends(get_coach_service)):
    return service.get_patterns()

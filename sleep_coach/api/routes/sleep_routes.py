# sleep_coach/api/routes/sleep_routes.py
from typing import List, Optional

from fastapi import APIRouter, Depends

from sleep_coach.api.dependencies import get_coach_service
from sleep_coach.core.calculation.sleep_cycle_calculator import (
    calculate_ideal_bedtimes,
    calculate_ideal_wakeup_times,
    calculate_sleep_cycles,
)
from sleep_coach.core.models.data_models import CamelModel, SleepCalculationInput, SleepEntry, SleepResults
from sleep_coach.core.services.coach_service import CoachService

router = APIRouter(
    prefix="/sleep",
    tags=["Sleep"],
)


class LogSleepRequest(CamelModel):
    bedtime: str
    wakeup_time: str
    date: Optional[str] = None


@router.post("/calculate", response_model=SleepResults)
async def calculate(payload: SleepCalculationInput):
    """Calculate cycles and ideal times for explicit latency and cycle length"""
    latency = payload.latency_minutes
    cycle_length = payload.cycle_length_minutes
    cycles = calculate_sleep_cycles(payload.bedtime, payload.wakeup_time, latency, cycle_length)

    return SleepResults(
        bedtime=payload.bedtime,
        wakeup_time=payload.wakeup_time,
        latency=latency,
        cycle_length=cycle_length,
        ideal_bedtimes=calculate_ideal_bedtimes(payload.wakeup_time, latency, cycle_length),
        ideal_wakeup_times=calculate_ideal_wakeup_times(payload.bedtime, latency, cycle_length),
        **cycles.model_dump(),
    )


@router.post("/log", response_model=SleepEntry, status_code=201)
async def log_sleep(payload: LogSleepRequest, service: CoachService = Depends(get_coach_service)):
    """Calculate a night with the stored settings and add it to history"""
    return service.log_sleep(payload.bedtime, payload.wakeup_time, payload.date)


@router.get("/history", response_model=List[SleepEntry])
async def get_history(service: CoachService = Depends(get_coach_service)):
    """Sleep history, newest first"""
    return service.history()


@router.delete("/history", status_code=204)
async def clear_history(service: CoachService = Depends(get_coach_service)):
    service.clear_history()

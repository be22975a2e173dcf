# sleep_coach/api/routes/reminder_routes.py
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from sleep_coach.api.dependencies import get_reminder_repository, get_reminder_service
from sleep_coach.core.models.data_models import CamelModel, Reminder, ReminderCreate
from sleep_coach.core.repositories.reminder_repository import (
    ReminderLimitError,
    ReminderNotFoundError,
    ReminderRepository,
)
from sleep_coach.core.services.reminder_service import ReminderService

router = APIRouter(
    prefix="/reminders",
    tags=["Reminders"],
    responses={404: {"description": "Reminder not found"}}
)


class ReminderUpdate(CamelModel):
    wake_up_time: Optional[str] = None
    days_of_week: Optional[List[int]] = None
    wind_down_minutes: Optional[int] = None
    enabled: Optional[bool] = None


class NextBedtime(BaseModel):
    next_bedtime: Optional[datetime] = None


class DispatchRequest(BaseModel):
    token: str


class DispatchResult(BaseModel):
    delivered: int


@router.get("", response_model=List[Reminder])
async def list_reminders(repository: ReminderRepository = Depends(get_reminder_repository)):
    return repository.list()


@router.post("", response_model=Reminder, status_code=201)
async def add_reminder(
    payload: ReminderCreate,
    repository: ReminderRepository = Depends(get_reminder_repository),
):
    try:
        return repository.add(payload)
    except ReminderLimitError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/next-bedtime", response_model=NextBedtime)
async def next_bedtime(service: ReminderService = Depends(get_reminder_service)):
    """Upcoming bedtime among today's active reminders, if any"""
    return NextBedtime(next_bedtime=service.next_bedtime())


@router.post("/dispatch", response_model=DispatchResult)
async def dispatch_due(payload: DispatchRequest, service: ReminderService = Depends(get_reminder_service)):
    """Send wind-down notifications for reminders due this minute"""
    return DispatchResult(delivered=service.dispatch_due(payload.token))


@router.put("/{reminder_id}", response_model=Reminder)
async def update_reminder(
    reminder_id: str,
    payload: ReminderUpdate,
    repository: ReminderRepository = Depends(get_reminder_repository),
):
    try:
        return repository.update(reminder_id, **payload.model_dump(exclude_unset=True))
    except ReminderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Reminder {reminder_id} not found")


@router.delete("/{reminder_id}", status_code=204)
async def remove_reminder(reminder_id: str, repository: ReminderRepository = Depends(get_reminder_repository)):
    try:
        repository.remove(reminder_id)
    except ReminderNotFoundError:
        raise HTTPException(status_code=404, detail=f"Reminder {reminder_id} not found")

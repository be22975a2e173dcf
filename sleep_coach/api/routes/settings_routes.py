# sleep_coach/api/routes/settings_routes.py
from typing import Optional

from fastapi import APIRouter, Depends

from sleep_coach.api.dependencies import get_settings_repository
from sleep_coach.core.models.data_models import CamelModel, Language, Settings
from sleep_coach.core.repositories.settings_repository import SettingsRepository

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


class SettingsUpdate(CamelModel):
    cycle_length: Optional[int] = None
    sleep_latency: Optional[int] = None
    language: Optional[Language] = None
    notifications_enabled: Optional[bool] = None


@router.get("", response_model=Settings)
async def get_settings(repository: SettingsRepository = Depends(get_settings_repository)):
    return repository.load()


@router.put("", response_model=Settings)
async def update_settings(
    payload: SettingsUpdate,
    repository: SettingsRepository = Depends(get_settings_repository),
):
    """Apply a partial settings update; omitted fields keep their values"""
    return repository.update(**payload.model_dump(exclude_unset=True))

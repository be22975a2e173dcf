# sleep_coach/core/models/data_models.py

from datetime import date as date_type, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sleep_coach.utils import constants
from sleep_coach.utils.data_validation import (
    validate_date_string,
    validate_days_of_week,
    validate_time_string,
)


class Language(str, Enum):
    PT_BR = "pt-BR"
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"


class CamelModel(BaseModel):
    """Base model that reads and writes the camelCase keys used in storage"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_storage(self):
        return self.model_dump(mode='json', by_alias=True)


# Settings Models
class Settings(CamelModel):
    cycle_length: int = Field(
        constants.DEFAULT_CYCLE_LENGTH,
        ge=constants.CYCLE_LENGTH_RANGE[0],
        le=constants.CYCLE_LENGTH_RANGE[1],
    )
    sleep_latency: int = Field(
        constants.DEFAULT_SLEEP_LATENCY,
        ge=constants.SLEEP_LATENCY_RANGE[0],
        le=constants.SLEEP_LATENCY_RANGE[1],
    )
    language: Language = Language(constants.DEFAULT_LANGUAGE)
    notifications_enabled: bool = False


# Sleep Data Models
class SleepEntryCreate(CamelModel):
    """A sleep entry before it is committed to history"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    date: str
    bedtime: str
    wakeup_time: str
    complete_cycles: int = Field(..., ge=0)
    partial_cycle: float = Field(..., ge=0.0, le=1.0)
    ideal_bedtime: str
    ideal_wakeup_time: str

    @field_validator('date')
    @classmethod
    def validate_date_format(cls, v):
        return validate_date_string(v)

    @field_validator('bedtime', 'wakeup_time', 'ideal_bedtime', 'ideal_wakeup_time')
    @classmethod
    def validate_time_format(cls, v, info):
        return validate_time_string(v, info.field_name)

    @property
    def calendar_date(self) -> date_type:
        return datetime.strptime(self.date, '%Y-%m-%d').date()


class SleepEntry(SleepEntryCreate):
    """One logged sleep session"""
    id: str


# Sleep Calculation Models
class SleepCalculationInput(CamelModel):
    bedtime: str
    wakeup_time: str
    latency_minutes: int = Field(
        constants.DEFAULT_SLEEP_LATENCY,
        ge=constants.SLEEP_LATENCY_RANGE[0],
        le=constants.SLEEP_LATENCY_RANGE[1],
    )
    cycle_length_minutes: int = Field(
        constants.DEFAULT_CYCLE_LENGTH,
        ge=constants.CYCLE_LENGTH_RANGE[0],
        le=constants.CYCLE_LENGTH_RANGE[1],
    )

    @field_validator('bedtime', 'wakeup_time')
    @classmethod
    def validate_time_format(cls, v, info):
        return validate_time_string(v, info.field_name)


class SleepCalculationResult(CamelModel):
    complete_cycles: int = Field(..., ge=0)
    partial_cycle: float = Field(..., ge=0.0, le=1.0)
    total_sleep_minutes: int = Field(..., ge=0)
    adjusted_bedtime: str


class SleepResults(SleepCalculationResult):
    """Full result of a calculation as shown to the user"""
    bedtime: str
    wakeup_time: str
    latency: int = Field(..., ge=0)
    cycle_length: int
    ideal_bedtimes: List[str] = []
    ideal_wakeup_times: List[str] = []

    def to_entry(self, entry_date: str) -> SleepEntryCreate:
        """History record for this calculation, using the best-aligned recommendations"""
        return SleepEntryCreate(
            date=entry_date,
            bedtime=self.bedtime,
            wakeup_time=self.wakeup_time,
            complete_cycles=self.complete_cycles,
            partial_cycle=self.partial_cycle,
            ideal_bedtime=self.ideal_bedtimes[0],
            ideal_wakeup_time=self.ideal_wakeup_times[0],
        )


# Reminder Models
class ReminderCreate(CamelModel):
    wake_up_time: str
    days_of_week: List[int] = Field(default_factory=lambda: list(constants.DEFAULT_REMINDER_DAYS))
    wind_down_minutes: int = Field(
        constants.DEFAULT_WIND_DOWN_MINUTES,
        ge=constants.WIND_DOWN_RANGE[0],
        le=constants.WIND_DOWN_RANGE[1],
    )
    enabled: bool = True

    @field_validator('wake_up_time')
    @classmethod
    def validate_wake_up_time(cls, v):
        return validate_time_string(v, 'wake up time')

    @field_validator('days_of_week')
    @classmethod
    def validate_days(cls, v):
        return validate_days_of_week(v)


class Reminder(ReminderCreate):
    id: str
    cloud_id: Optional[str] = None

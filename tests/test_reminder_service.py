from datetime import datetime

import pytest

from sleep_coach.core.models.data_models import ReminderCreate
from sleep_coach.core.repositories.reminder_repository import ReminderRepository
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.core.services.reminder_service import ReminderService, calculate_bedtime
from sleep_coach.utils.clock import day_of_week
from tests.conftest import RecordingSender


@pytest.fixture
def reminders(memory_store):
    return ReminderRepository(memory_store)


@pytest.fixture
def make_service(memory_store, reminders, clock_at):
    def _make(*now, sender=None):
        return ReminderService(reminders, SettingsRepository(memory_store), sender=sender, clock=clock_at(*now))
    return _make


def test_day_of_week_starts_on_sunday():
    assert day_of_week(datetime(2024, 1, 14)) == 0
    assert day_of_week(datetime(2024, 1, 15)) == 1
    assert day_of_week(datetime(2024, 1, 20)) == 6


def test_bedtime_for_tomorrow_morning():
    bedtime = calculate_bedtime('06:30', 5, 90, 15, datetime(2024, 1, 15, 20, 0))
    assert bedtime == datetime(2024, 1, 15, 22, 45)


def test_bedtime_for_wake_up_later_today():
    bedtime = calculate_bedtime('06:30', 5, 90, 15, datetime(2024, 1, 15, 3, 0))
    assert bedtime == datetime(2024, 1, 14, 22, 45)


def test_next_bedtime(make_service, reminders):
    reminders.add(ReminderCreate(wake_up_time='07:30'))
    reminders.add(ReminderCreate(wake_up_time='06:30'))

    assert make_service(2024, 1, 15, 20, 0).next_bedtime() == datetime(2024, 1, 15, 22, 45)


def test_next_bedtime_uses_settings(make_service, reminders, memory_store):
    SettingsRepository(memory_store).update(cycle_length=100)
    reminders.add(ReminderCreate(wake_up_time='06:30'))

    assert make_service(2024, 1, 15, 20, 0).next_bedtime() == datetime(2024, 1, 15, 21, 55)


def test_no_next_bedtime_when_notice_has_passed(make_service, reminders):
    reminders.add(ReminderCreate(wake_up_time='06:30'))
    assert make_service(2024, 1, 15, 22, 30).next_bedtime() is None


@pytest.mark.parametrize("reminder", [
    ReminderCreate(wake_up_time='06:30', days_of_week=[0, 6]),
    ReminderCreate(wake_up_time='06:30', enabled=False),
])
def test_inactive_reminders_are_ignored(make_service, reminders, reminder):
    reminders.add(reminder)
    assert make_service(2024, 1, 15, 20, 0).next_bedtime() is None


def test_due_reminders_match_the_minute(make_service, reminders):
    reminder = reminders.add(ReminderCreate(wake_up_time='06:30', wind_down_minutes=30))

    assert make_service(2024, 1, 15, 22, 15).due_reminders() == [reminder]
    assert make_service(2024, 1, 15, 22, 16).due_reminders() == []


def test_dispatch_due(make_service, reminders, recording_sender):
    reminder = reminders.add(ReminderCreate(wake_up_time='06:30'))

    delivered = make_service(2024, 1, 15, 22, 15, sender=recording_sender).dispatch_due('device-token-123')

    assert delivered == 1
    sent = recording_sender.sent[0]
    assert sent['token'] == 'device-token-123'
    assert '22:45' in sent['body']
    assert sent['data'] == {'type': 'sleep-reminder', 'bedtime': '22:45', 'reminderId': reminder.id}


def test_dispatch_failures_are_not_raised(make_service, reminders):
    reminders.add(ReminderCreate(wake_up_time='06:30'))

    failing = RecordingSender(error=RuntimeError('channel down'))
    assert make_service(2024, 1, 15, 22, 15, sender=failing).dispatch_due('device-token-123') == 0

    rejecting = RecordingSender(result=False)
    assert make_service(2024, 1, 15, 22, 15, sender=rejecting).dispatch_due('device-token-123') == 0


def test_nothing_dispatched_outside_the_minute(make_service, reminders, recording_sender):
    reminders.add(ReminderCreate(wake_up_time='06:30'))

    assert make_service(2024, 1, 15, 21, 0, sender=recording_sender).dispatch_due('device-token-123') == 0
    assert recording_sender.sent == []

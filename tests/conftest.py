from datetime import datetime

import pytest

from sleep_coach.core.models.data_models import SleepEntry
from sleep_coach.core.repositories.storage import InMemoryStore

# Monday
FIXED_NOW = datetime(2024, 1, 15, 12, 0)


@pytest.fixture
def make_entry():
    """Factory for history entries; only the schedule fields matter to the analysis"""
    def _make(date, bedtime='22:00', wakeup_time='06:00', entry_id=None):
        return SleepEntry(
            id=entry_id or f"entry-{date}",
            date=date,
            bedtime=bedtime,
            wakeup_time=wakeup_time,
            complete_cycles=5,
            partial_cycle=0.0,
            ideal_bedtime='22:15',
            ideal_wakeup_time='05:45',
        )
    return _make


@pytest.fixture
def make_entries(make_entry):
    """Build entries from (date, bedtime, wakeup_time) tuples"""
    def _make(schedule):
        return [make_entry(date, bedtime, wakeup_time) for date, bedtime, wakeup_time in schedule]
    return _make


@pytest.fixture
def clock_at():
    def _at(*args):
        moment = datetime(*args)
        return lambda: moment
    return _at


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store():
    return InMemoryStore()


class RecordingSender:
    """Notification channel that records what it was asked to send"""

    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.sent = []

    def send(self, token, title, body, data=None):
        if self.error:
            raise self.error
        self.sent.append({'token': token, 'title': title, 'body': body, 'data': data})
        return self.result


@pytest.fixture
def recording_sender():
    return RecordingSender()

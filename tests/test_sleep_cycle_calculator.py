from datetime import datetime

import pytest

from sleep_coach.core.calculation.sleep_cycle_calculator import (
    calculate_ideal_bedtimes,
    calculate_ideal_wakeup_times,
    calculate_sleep_cycles,
    calculate_sleep_results,
    should_send_bedtime_notification,
)
from sleep_coach.core.models.data_models import Settings
from sleep_coach.utils.data_validation import InvalidTimeFormatError, OutOfRangeError


def test_cycles_aligned_wake_time():
    result = calculate_sleep_cycles('22:00', '05:45')

    assert result.complete_cycles == 5
    assert result.partial_cycle == 0
    assert result.total_sleep_minutes == 450
    assert result.adjusted_bedtime == '22:00'


def test_cycles_with_partial_cycle():
    result = calculate_sleep_cycles('22:00', '07:00')

    assert result.total_sleep_minutes == 525
    assert result.complete_cycles == 5
    assert result.partial_cycle == pytest.approx(75 / 90)
    assert result.adjusted_bedtime == '23:15'


def test_total_sleep_is_never_negative():
    # Onset at 23:15 is after the wake time on the same day
    result = calculate_sleep_cycles('23:00', '23:05')
    assert result.total_sleep_minutes == 1430


def test_zero_sleep_when_waking_at_onset():
    result = calculate_sleep_cycles('22:00', '22:15')

    assert result.total_sleep_minutes == 0
    assert result.complete_cycles == 0
    assert result.partial_cycle == 0


def test_cycle_identity_holds():
    for bedtime, wakeup in [('21:10', '06:47'), ('01:00', '09:59'), ('23:45', '05:00')]:
        result = calculate_sleep_cycles(bedtime, wakeup, 20, 95)
        rebuilt = result.complete_cycles * 95 + result.partial_cycle * 95
        assert rebuilt == pytest.approx(result.total_sleep_minutes)
        assert 0 <= result.partial_cycle < 1


def test_single_digit_hours_are_accepted():
    assert calculate_sleep_cycles('7:30', '15:00').total_sleep_minutes == 435


@pytest.mark.parametrize("bedtime", ['25:00', '22:5', 'abc', '', None])
def test_invalid_time_is_rejected(bedtime):
    with pytest.raises(InvalidTimeFormatError):
        calculate_sleep_cycles(bedtime, '06:00')


@pytest.mark.parametrize("latency, cycle_length", [(61, 90), (-1, 90), (15, 59), (15, 151), (15.5, 90)])
def test_out_of_range_parameters_are_rejected(latency, cycle_length):
    with pytest.raises(OutOfRangeError):
        calculate_sleep_cycles('22:00', '06:00', latency, cycle_length)


def test_ideal_bedtimes_most_cycles_first():
    assert calculate_ideal_bedtimes('06:00') == ['23:45', '01:15', '02:45', '04:15']


def test_ideal_bedtimes_option_count():
    assert len(calculate_ideal_bedtimes('06:00', number_of_options=6)) == 6
    with pytest.raises(OutOfRangeError):
        calculate_ideal_bedtimes('06:00', number_of_options=0)


def test_ideal_wakeup_times_start_at_three_cycles():
    assert calculate_ideal_wakeup_times('22:00') == ['02:45', '04:15', '05:45', '07:15']


def test_sleep_results_use_settings():
    settings = Settings(cycle_length=100, sleep_latency=10)
    results = calculate_sleep_results('22:00', '6:00', settings)

    assert results.latency == 10
    assert results.cycle_length == 100
    assert results.wakeup_time == '06:00'
    assert results.complete_cycles == 4
    assert results.ideal_bedtimes[0] == '23:10'
    assert results.ideal_wakeup_times[0] == '03:10'

    entry = results.to_entry('2024-01-15')
    assert entry.ideal_bedtime == results.ideal_bedtimes[0]
    assert entry.ideal_wakeup_time == results.ideal_wakeup_times[0]


@pytest.mark.parametrize("now, expected", [
    (datetime(2024, 1, 15, 21, 45), True),
    (datetime(2024, 1, 15, 21, 30), True),
    (datetime(2024, 1, 15, 22, 0), False),
    (datetime(2024, 1, 15, 21, 0), False),
])
def test_bedtime_notification_window(now, expected):
    assert should_send_bedtime_notification('22:00', clock=lambda: now) is expected


def test_bedtime_notification_across_midnight():
    assert should_send_bedtime_notification('00:10', clock=lambda: datetime(2024, 1, 15, 23, 50))

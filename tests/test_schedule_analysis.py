import pytest

from sleep_coach.config.coach_config import CoachConfig
from sleep_coach.core.analysis.schedule_analysis import (
    analyze_schedule,
    calculate_consistency_score,
    calculate_std_dev,
    entries_to_frame,
    is_weekend,
)

# 2024-01-08 is a Monday, 2024-01-13/14 the following weekend
WEEK = ['2024-01-08', '2024-01-09', '2024-01-10', '2024-01-11', '2024-01-12', '2024-01-13', '2024-01-14']


def test_too_few_entries_returns_none(make_entries):
    entries = make_entries([('2024-01-08', '22:00', '06:00'), ('2024-01-09', '22:00', '06:00')])
    assert analyze_schedule(entries) is None


def test_minimum_sample_is_configurable(make_entries):
    entries = make_entries([('2024-01-08', '22:00', '06:00'), ('2024-01-09', '22:00', '06:00')])
    assert analyze_schedule(entries, CoachConfig(min_entries_for_analysis=2)) is not None


def test_identical_schedule_scores_100(make_entries):
    entries = make_entries([(date, '22:00', '06:00') for date in WEEK[:5]])
    stats = analyze_schedule(entries)

    assert stats.bedtime_variance_minutes == 0
    assert stats.wakeup_variance_minutes == 0
    assert stats.avg_bedtime_minutes == 1320
    assert stats.avg_wakeup_minutes == 360
    assert stats.consistency_score == 100
    assert stats.data_points == 5


def test_missing_weekend_falls_back_to_overall_average(make_entries):
    entries = make_entries([(date, '22:00', '06:00') for date in WEEK[:5]])
    stats = analyze_schedule(entries)

    assert stats.weekend_avg_bedtime == stats.avg_bedtime_minutes
    assert stats.weekend_avg_wakeup == stats.avg_wakeup_minutes


def test_weekday_and_weekend_averages(make_entries):
    schedule = [(date, '22:00', '06:00') for date in WEEK[:5]]
    schedule += [(date, '00:00', '08:00') for date in WEEK[5:]]
    stats = analyze_schedule(make_entries(schedule))

    assert stats.weekday_avg_bedtime == 1320
    assert stats.weekend_avg_bedtime == 1440
    assert stats.weekday_avg_wakeup == 360
    assert stats.weekend_avg_wakeup == 480
    assert stats.data_points == 7


def test_midnight_straddling_bedtimes(make_entries):
    entries = make_entries([
        ('2024-01-08', '23:30', '07:00'),
        ('2024-01-09', '00:30', '07:00'),
        ('2024-01-10', '00:00', '07:00'),
    ])
    stats = analyze_schedule(entries)

    assert stats.avg_bedtime_minutes == 1440
    assert stats.bedtime_variance_minutes == 24


def test_analysis_is_order_independent(make_entries):
    schedule = [(date, f"2{i % 4}:{i * 7 % 60:02d}", '06:30') for i, date in enumerate(WEEK)]
    forward = analyze_schedule(make_entries(schedule))
    backward = analyze_schedule(make_entries(list(reversed(schedule))))
    assert forward == backward


def test_consistency_score_bounds():
    assert calculate_consistency_score(0, 0, 0) == 100
    assert calculate_consistency_score(60, 60, 0) == 60
    assert calculate_consistency_score(120, 120, 180) == 0
    assert calculate_consistency_score(500, 500, 1000) == 0


def test_std_dev_is_population():
    assert calculate_std_dev([1]) == 0
    assert calculate_std_dev([]) == 0
    assert calculate_std_dev([10, 20]) == pytest.approx(5)


def test_weekend_detection():
    assert is_weekend('2024-01-13')
    assert is_weekend('2024-01-14')
    assert not is_weekend('2024-01-15')


def test_entries_to_frame(make_entries):
    data = entries_to_frame(make_entries([('2024-01-13', '00:15', '08:00')]))

    assert list(data.columns) == ['date', 'bedtime_minutes', 'wakeup_minutes', 'is_weekend']
    assert data.loc[0, 'bedtime_minutes'] == 1455
    assert bool(data.loc[0, 'is_weekend'])

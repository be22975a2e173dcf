from datetime import datetime

from sleep_coach.config.coach_config import CoachConfig
from sleep_coach.core.analysis.pattern_detection import detect_consistent_streak
from sleep_coach.core.models.output_models import InsightCategory, InsightPriority
from sleep_coach.core.recommendation.insight_generator import (
    generate_insights,
    get_primary_insight,
    sort_by_priority,
)

NOW = datetime(2024, 1, 15, 12, 0)
WEEK = [f"2024-01-{day:02d}" for day in range(8, 15)]


def clock():
    return NOW


def fixed_ids(prefix):
    return f"{prefix}-fixed"


def weekend_shift_schedule():
    schedule = [(date, '22:00', '06:00') for date in WEEK[:5]]
    schedule += [(date, '00:30', '08:30') for date in WEEK[5:]]
    return schedule


def test_no_entries_gives_insufficient_data():
    insights = generate_insights([], clock=clock)

    assert len(insights) == 1
    insight = insights[0]
    assert insight.category == InsightCategory.INSUFFICIENT_DATA
    assert insight.priority == InsightPriority.INFO
    assert insight.data == {'current_entries': 0, 'required_entries': 3}
    assert not insight.dismissible
    assert not insight.actionable
    assert insight.id.startswith('insufficient-')


def test_two_entries_gives_insufficient_data(make_entries):
    entries = make_entries([(date, '22:00', '06:00') for date in WEEK[:2]])
    insights = generate_insights(entries, clock=clock)

    assert [insight.category for insight in insights] == [InsightCategory.INSUFFICIENT_DATA]
    assert insights[0].data['current_entries'] == 2


def test_consistent_week_is_praised(make_entries):
    entries = make_entries([(date, '22:00', '06:00') for date in WEEK[:5]])
    insights = generate_insights(entries, clock=clock)

    assert len(insights) == 1
    assert insights[0].category == InsightCategory.OPTIMAL_STREAK
    assert insights[0].data == {'days': 5, 'score': 100}
    assert insights[0].dismissible


def test_streak_never_alongside_variance_warning(make_entries):
    dates = ['2024-01-01', '2024-01-02', '2024-01-03', '2024-01-04', '2024-01-05', '2024-01-08']
    schedule = [
        (date, '21:00' if i % 2 == 0 else '23:00', '06:00' if i % 2 == 0 else '08:00')
        for i, date in enumerate(dates)
    ]
    entries = make_entries(schedule)
    config = CoachConfig(streak_score_threshold=50)

    assert detect_consistent_streak(entries, config) is not None

    insights = generate_insights(entries, config, clock=clock)
    categories = [insight.category for insight in insights]
    assert InsightCategory.SCHEDULE_VARIANCE in categories
    assert InsightCategory.OPTIMAL_STREAK not in categories
    assert insights[0].priority == InsightPriority.MEDIUM
    assert insights[0].data['suggested_bedtime'] == '22:00'


def test_insights_are_ordered_by_priority(make_entries):
    insights = generate_insights(make_entries(weekend_shift_schedule()), clock=clock)

    assert [insight.category for insight in insights] == [
        InsightCategory.WEEKEND_PATTERN,
        InsightCategory.SCHEDULE_VARIANCE,
        InsightCategory.DECLINING_TREND,
    ]
    ranks = [insight.priority.rank for insight in insights]
    assert ranks == sorted(ranks)


def test_weekend_insight_data(make_entries):
    insights = generate_insights(make_entries(weekend_shift_schedule()), clock=clock)
    weekend = insights[0]

    assert weekend.priority == InsightPriority.HIGH
    assert weekend.data == {'time_difference': 150, 'weekday_bedtime': '22:00', 'weekend_bedtime': '00:30'}
    assert weekend.message.endswith('message_later')


def test_insights_are_deterministic_with_fixed_clock_and_ids(make_entries):
    entries = make_entries(weekend_shift_schedule())

    first = generate_insights(entries, clock=clock, id_factory=fixed_ids)
    second = generate_insights(entries, clock=clock, id_factory=fixed_ids)

    assert first == second
    assert all(insight.created_at == NOW for insight in first)


def test_insight_ids_are_unique(make_entries):
    insights = generate_insights(make_entries(weekend_shift_schedule()), clock=clock)
    assert len({insight.id for insight in insights}) == len(insights)


def test_primary_insight_is_first(make_entries):
    entries = make_entries(weekend_shift_schedule())
    primary = get_primary_insight(entries, clock=clock)
    assert primary.category == InsightCategory.WEEKEND_PATTERN


def test_primary_insight_falls_back_to_insufficient_data(make_entries):
    # Enough to analyze, nothing to report
    entries = make_entries([(date, '22:00', '06:00') for date in WEEK[:3]])

    assert generate_insights(entries, clock=clock) == []
    primary = get_primary_insight(entries, clock=clock)
    assert primary.category == InsightCategory.INSUFFICIENT_DATA
    assert primary.data['current_entries'] == 3


def test_sort_by_priority_is_stable(make_entries):
    insights = generate_insights(make_entries(weekend_shift_schedule()), clock=clock)
    reordered = sort_by_priority(list(reversed(insights)))

    assert [insight.priority for insight in reordered] == [
        InsightPriority.HIGH, InsightPriority.MEDIUM, InsightPriority.MEDIUM,
    ]
    # Equal priorities keep their incoming order
    assert reordered[1].category == InsightCategory.DECLINING_TREND

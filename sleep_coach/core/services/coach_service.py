# sleep_coach/core/services/coach_service.py
import logging
from datetime import timedelta
from typing import List, Optional

from sleep_coach.config.coach_config import CoachConfig, DEFAULT_COACH_CONFIG
from sleep_coach.core.analysis.pattern_detection import detect_patterns
from sleep_coach.core.analysis.schedule_analysis import analyze_schedule
from sleep_coach.core.calculation.sleep_cycle_calculator import calculate_sleep_results
from sleep_coach.core.models.data_models import SleepEntry, SleepResults
from sleep_coach.core.models.output_models import CoachInsight, PatternResult, ScheduleStats
from sleep_coach.core.recommendation.insight_generator import generate_insights, get_primary_insight
from sleep_coach.core.repositories.history_repository import HistoryRepository
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.utils.clock import Clock, system_clock
from sleep_coach.utils.data_validation import validate_date_string

logger = logging.getLogger(__name__)


class CoachService:
    """
    Application service tying the calculator and the analysis engine to the
    stored history and settings.

    Every query takes a fresh snapshot of the history, so results always
    reflect the latest entries.
    """

    def __init__(
        self,
        history_repository: HistoryRepository,
        settings_repository: SettingsRepository,
        config: Optional[CoachConfig] = None,
        clock: Clock = system_clock,
    ):
        self.history_repository = history_repository
        self.settings_repository = settings_repository
        self.config = config or DEFAULT_COACH_CONFIG
        self.clock = clock

    def calculate(self, bedtime, wakeup_time) -> SleepResults:
        """Calculate cycles and ideal times with the current settings"""
        return calculate_sleep_results(bedtime, wakeup_time, self.settings_repository.load())

    def log_sleep(self, bedtime, wakeup_time, date=None) -> SleepEntry:
        """Calculate a night of sleep and commit it to history"""
        entry_date = validate_date_string(date) if date else self.clock().date().isoformat()
        results = self.calculate(bedtime, wakeup_time)

        entry = self.history_repository.append(results.to_entry(entry_date))
        logger.info(
            f"Logged sleep for {entry_date}: {results.complete_cycles} cycles "
            f"({results.total_sleep_minutes} min)"
        )
        return entry

    def history(self) -> List[SleepEntry]:
        return self.history_repository.load()

    def clear_history(self):
        self.history_repository.clear()

    def recent_entries(self) -> List[SleepEntry]:
        """Entries dated within the coaching window relative to today"""
        cutoff = self.clock().date() - timedelta(days=self.config.insight_window_days)
        return [entry for entry in self.history_repository.load() if entry.calendar_date >= cutoff]

    def get_insights(self) -> List[CoachInsight]:
        return generate_insights(self.recent_entries(), self.config, self.clock)

    def get_primary_insight(self) -> CoachInsight:
        return get_primary_insight(self.recent_entries(), self.config, self.clock)

    def get_schedule_stats(self) -> Optional[ScheduleStats]:
        return analyze_schedule(self.recent_entries(), self.config)

    def get_patterns(self) -> List[PatternResult]:
        return detect_patterns(self.recent_entries(), self.config)

    def has_enough_data(self) -> bool:
        return len(self.recent_entries()) >= self.config.min_entries_for_analysis

    def consistency_score(self) -> Optional[int]:
        stats = self.get_schedule_stats()
        return stats.consistency_score if stats else None

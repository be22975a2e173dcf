"""
Sleep cycle calculation module.
"""

from sleep_coach.core.calculation.sleep_cycle_calculator import (
    calculate_ideal_bedtimes,
    calculate_ideal_wakeup_times,
    calculate_sleep_cycles,
    calculate_sleep_results,
    should_send_bedtime_notification,
)

__all__ = [
    'calculate_sleep_cycles', 'calculate_ideal_bedtimes', 'calculate_ideal_wakeup_times',
    'calculate_sleep_results', 'should_send_bedtime_notification',
]

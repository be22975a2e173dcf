"""
Sleep cycle calculator.

Computes completed and partial sleep cycles for a bedtime/wake time pair,
the cycle-aligned bedtime, and ranked lists of ideal bedtimes and wake-up
times for a given cycle length and sleep latency.
"""

import logging
from typing import List

from sleep_coach.core.analysis.time_arithmetic import clock_minutes, minutes_to_time
from sleep_coach.core.models.data_models import Settings, SleepCalculationResult, SleepResults
from sleep_coach.utils import constants
from sleep_coach.utils.clock import Clock, system_clock
from sleep_coach.utils.data_validation import (
    OutOfRangeError,
    validate_positive,
    validate_range,
    validate_time_string,
)

logger = logging.getLogger(__name__)


def _validate_parameters(latency_minutes, cycle_length_minutes):
    checks = (
        (latency_minutes, constants.SLEEP_LATENCY_RANGE, 'sleep latency'),
        (cycle_length_minutes, constants.CYCLE_LENGTH_RANGE, 'cycle length'),
    )
    for value, (minimum, maximum), name in checks:
        validate_range(value, minimum, maximum, field_name=name)
        if value != int(value):
            raise OutOfRangeError(f"Invalid {name} {value} (expected whole minutes)")
    return int(latency_minutes), int(cycle_length_minutes)


def calculate_sleep_cycles(
    bedtime: str,
    wakeup_time: str,
    latency_minutes: int = constants.DEFAULT_SLEEP_LATENCY,
    cycle_length_minutes: int = constants.DEFAULT_CYCLE_LENGTH,
) -> SleepCalculationResult:
    """
    Calculate complete and partial sleep cycles.

    The wake time is always taken to be at or after sleep onset, on the
    next day if needed.

    Args:
        bedtime: Time the user goes to bed (HH:MM)
        wakeup_time: Time the user wakes up (HH:MM)
        latency_minutes: Minutes needed to fall asleep
        cycle_length_minutes: Length of one sleep cycle

    Returns:
        SleepCalculationResult: Cycle breakdown and the cycle-aligned bedtime
    """
    bedtime = validate_time_string(bedtime, 'bedtime')
    wakeup_time = validate_time_string(wakeup_time, 'wake-up time')
    latency_minutes, cycle_length_minutes = _validate_parameters(latency_minutes, cycle_length_minutes)

    bedtime_minutes = clock_minutes(bedtime)
    sleep_onset = bedtime_minutes + latency_minutes

    # Forward difference from onset to wake, wrapped into a single day
    total_sleep_minutes = (clock_minutes(wakeup_time) - sleep_onset) % constants.MINUTES_PER_DAY

    complete_cycles = total_sleep_minutes // cycle_length_minutes
    remaining_minutes = total_sleep_minutes % cycle_length_minutes
    partial_cycle = remaining_minutes / cycle_length_minutes

    # Going to bed later by the leftover minutes yields whole cycles only
    adjusted_bedtime = minutes_to_time(bedtime_minutes + remaining_minutes)

    logger.debug(
        f"Sleep cycles for {bedtime}-{wakeup_time}: {complete_cycles} complete, "
        f"{partial_cycle:.3f} partial, {total_sleep_minutes} min"
    )

    return SleepCalculationResult(
        complete_cycles=complete_cycles,
        partial_cycle=partial_cycle,
        total_sleep_minutes=total_sleep_minutes,
        adjusted_bedtime=adjusted_bedtime,
    )


def calculate_ideal_bedtimes(
    wakeup_time: str,
    latency_minutes: int = constants.DEFAULT_SLEEP_LATENCY,
    cycle_length_minutes: int = constants.DEFAULT_CYCLE_LENGTH,
    number_of_options: int = constants.DEFAULT_NUMBER_OF_OPTIONS,
) -> List[str]:
    """
    Calculate ideal bedtimes for a given wake-up time.

    Returns:
        list: ``number_of_options`` times, the first for the most cycles and
        the last for a single cycle
    """
    wakeup_minutes = clock_minutes(validate_time_string(wakeup_time, 'wake-up time'))
    latency_minutes, cycle_length_minutes = _validate_parameters(latency_minutes, cycle_length_minutes)
    validate_positive(number_of_options, 'number of options')

    ideal_times = []
    for cycles in range(number_of_options, 0, -1):
        sleep_start = wakeup_minutes - cycles * cycle_length_minutes
        ideal_times.append(minutes_to_time(sleep_start - latency_minutes))

    return ideal_times


def calculate_ideal_wakeup_times(
    bedtime: str,
    latency_minutes: int = constants.DEFAULT_SLEEP_LATENCY,
    cycle_length_minutes: int = constants.DEFAULT_CYCLE_LENGTH,
    number_of_options: int = constants.DEFAULT_NUMBER_OF_OPTIONS,
) -> List[str]:
    """
    Calculate ideal wake-up times for a given bedtime.

    Options start at 3 cycles; waking after one or two cycles is never
    suggested.
    """
    bedtime_minutes = clock_minutes(validate_time_string(bedtime, 'bedtime'))
    latency_minutes, cycle_length_minutes = _validate_parameters(latency_minutes, cycle_length_minutes)
    validate_positive(number_of_options, 'number of options')

    sleep_onset = bedtime_minutes + latency_minutes
    first = constants.MIN_WAKEUP_CYCLES
    return [
        minutes_to_time(sleep_onset + cycles * cycle_length_minutes)
        for cycles in range(first, first + number_of_options)
    ]


def calculate_sleep_results(bedtime: str, wakeup_time: str, settings: Settings = None) -> SleepResults:
    """Run the full calculation for the results screen and the history writer"""
    settings = settings or Settings()
    latency = settings.sleep_latency
    cycle_length = settings.cycle_length

    cycles = calculate_sleep_cycles(bedtime, wakeup_time, latency, cycle_length)

    return SleepResults(
        bedtime=validate_time_string(bedtime, 'bedtime'),
        wakeup_time=validate_time_string(wakeup_time, 'wake-up time'),
        latency=latency,
        cycle_length=cycle_length,
        ideal_bedtimes=calculate_ideal_bedtimes(wakeup_time, latency, cycle_length),
        ideal_wakeup_times=calculate_ideal_wakeup_times(bedtime, latency, cycle_length),
        **cycles.model_dump(),
    )


def should_send_bedtime_notification(
    ideal_bedtime: str,
    lead_time_minutes: int = constants.BEDTIME_NOTIFICATION_LEAD_MINUTES,
    clock: Clock = system_clock,
) -> bool:
    """True when the ideal bedtime is coming up within the lead time"""
    now = clock()
    now_minutes = now.hour * 60 + now.minute
    bedtime_minutes = clock_minutes(validate_time_string(ideal_bedtime, 'ideal bedtime'))

    minutes_until_bedtime = (bedtime_minutes - now_minutes) % constants.MINUTES_PER_DAY
    return 0 < minutes_until_bedtime <= lead_time_minutes

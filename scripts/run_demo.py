#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Demo script for the Sleep Coach engine.

Generates a few weeks of synthetic sleep logs for a chosen sleeper profile,
feeds them through the coach service and prints the resulting schedule
statistics, detected patterns and coaching insights.
"""

import os
import sys
import argparse
import logging
import numpy as np
from datetime import datetime, timedelta

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from sleep_coach.config.coach_config import load_coach_config
from sleep_coach.config.config_manager import ConfigManager
from sleep_coach.core.analysis.time_arithmetic import minutes_to_time
from sleep_coach.core.repositories.history_repository import HistoryRepository
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.core.repositories.storage import InMemoryStore, JsonFileStore
from sleep_coach.core.services.coach_service import CoachService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Base bedtime/wake time (minutes after midnight) and jitter per profile
PROFILES = {
    'consistent': {'bedtime': 22 * 60 + 30, 'wakeup': 6 * 60 + 30, 'jitter': 10, 'weekend_shift': 0},
    'weekend_shift': {'bedtime': 22 * 60 + 30, 'wakeup': 6 * 60 + 30, 'jitter': 10, 'weekend_shift': 120},
    'irregular': {'bedtime': 23 * 60, 'wakeup': 7 * 60, 'jitter': 100, 'weekend_shift': 30},
    'improving': {'bedtime': 23 * 60, 'wakeup': 7 * 60, 'jitter': 90, 'weekend_shift': 0},
}


class Colors:
    """Terminal colors for output"""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


PRIORITY_COLORS = {
    'high': Colors.RED,
    'medium': Colors.YELLOW,
    'low': Colors.BLUE,
    'info': Colors.GREEN,
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Run the Sleep Coach demo')

    parser.add_argument(
        '--profile',
        type=str,
        choices=sorted(PROFILES),
        default='weekend_shift',
        help='Sleeper profile used to generate the history'
    )

    parser.add_argument(
        '--days',
        type=int,
        default=14,
        help='Number of nights to generate'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=42,
        help='Random seed'
    )

    parser.add_argument(
        '--store',
        type=str,
        default=None,
        help='Optional JSON file to persist the generated history'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to a configuration file'
    )

    return parser.parse_args()


def generate_nights(profile, days, rng):
    """Generate (date, bedtime, wakeup) tuples, oldest first"""
    params = PROFILES[profile]
    today = datetime.now().date()
    nights = []

    for day in range(days):
        night = today - timedelta(days=days - day - 1)
        jitter = params['jitter']

        # The improving sleeper tightens up over the period
        if profile == 'improving':
            jitter = max(5, int(jitter * (1 - day / max(days - 1, 1))))

        shift = params['weekend_shift'] if night.weekday() >= 5 else 0
        bedtime = params['bedtime'] + shift + int(rng.integers(-jitter, jitter + 1))
        wakeup = params['wakeup'] + shift + int(rng.integers(-jitter, jitter + 1))

        nights.append((night.isoformat(), minutes_to_time(bedtime), minutes_to_time(wakeup)))

    return nights


def print_section(title):
    print(f"\n{Colors.HEADER}{Colors.BOLD}{title}{Colors.ENDC}")
    print("-" * len(title))


def main():
    args = parse_args()
    rng = np.random.default_rng(args.seed)

    config_manager = ConfigManager(args.config)
    coach_config = load_coach_config(config_manager)

    store = JsonFileStore(args.store) if args.store else InMemoryStore()
    history = HistoryRepository(store, max_entries=coach_config.max_history_entries)
    service = CoachService(history, SettingsRepository(store), config=coach_config)

    logger.info(f"Generating {args.days} nights for profile '{args.profile}'")
    for night, bedtime, wakeup in generate_nights(args.profile, args.days, rng):
        service.log_sleep(bedtime, wakeup, night)

    print_section("Sleep history (latest 5)")
    for entry in service.history()[:5]:
        print(f"{entry.date}: {entry.bedtime} -> {entry.wakeup_time}  "
              f"{entry.complete_cycles} cycles (+{entry.partial_cycle:.0%})")

    print_section("Schedule statistics")
    stats = service.get_schedule_stats()
    if stats is None:
        print(f"{Colors.YELLOW}Not enough data yet{Colors.ENDC}")
    else:
        print(f"Average bedtime:   {minutes_to_time(stats.avg_bedtime_minutes)} "
              f"(+/- {stats.bedtime_variance_minutes} min)")
        print(f"Average wake-up:   {minutes_to_time(stats.avg_wakeup_minutes)} "
              f"(+/- {stats.wakeup_variance_minutes} min)")
        print(f"Consistency score: {Colors.BOLD}{stats.consistency_score}{Colors.ENDC}/100")

    print_section("Detected patterns")
    patterns = service.get_patterns()
    if not patterns:
        print("None")
    for pattern in patterns:
        print(f"{pattern.pattern.value} (confidence {pattern.confidence:.2f}): {pattern.details}")

    print_section("Coaching insights")
    for insight in service.get_insights():
        color = PRIORITY_COLORS.get(insight.priority.value, '')
        print(f"{color}[{insight.priority.value.upper()}]{Colors.ENDC} {insight.title}: {insight.message}")
        if insight.data:
            print(f"    {insight.data}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

# sleep_coach/core/services/reminder_service.py
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Protocol

from sleep_coach.core.analysis.time_arithmetic import clock_minutes
from sleep_coach.core.models.data_models import Reminder
from sleep_coach.core.repositories.reminder_repository import ReminderRepository
from sleep_coach.core.repositories.settings_repository import SettingsRepository
from sleep_coach.utils import constants
from sleep_coach.utils.clock import Clock, day_of_week, system_clock

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    """Push delivery channel (e.g. a cloud messaging service)"""

    def send(self, token: str, title: str, body: str, data: Optional[Dict[str, str]] = None) -> bool:
        ...


class LoggingNotificationSender:
    """Channel that only logs notifications, used when no push service is configured"""

    def send(self, token, title, body, data=None):
        logger.info(f"Notification for {token[:8]}...: {title} - {body} {data or {}}")
        return True


def calculate_bedtime(wake_up_time, cycles, cycle_length, sleep_latency, now: datetime) -> datetime:
    """
    Bedtime for the next occurrence of a wake-up time.

    The wake-up time is taken as today if still ahead of ``now``, otherwise
    tomorrow; the bedtime is ``cycles`` full cycles plus the sleep latency
    before it.
    """
    minutes = clock_minutes(wake_up_time)
    wake_up = now.replace(hour=minutes // 60, minute=minutes % 60, second=0, microsecond=0)
    if wake_up <= now:
        wake_up += timedelta(days=1)

    return wake_up - timedelta(minutes=cycles * cycle_length + sleep_latency)


class ReminderService:
    """Works out upcoming bedtimes and dispatches wind-down notifications"""

    def __init__(
        self,
        reminder_repository: ReminderRepository,
        settings_repository: SettingsRepository,
        sender: Optional[NotificationSender] = None,
        cycles=constants.DEFAULT_REMINDER_CYCLES,
        clock: Clock = system_clock,
    ):
        self.reminder_repository = reminder_repository
        self.settings_repository = settings_repository
        self.sender = sender or LoggingNotificationSender()
        self.cycles = cycles
        self.clock = clock

    def _active_today(self, now) -> List[Reminder]:
        today = day_of_week(now)
        return [
            reminder for reminder in self.reminder_repository.list()
            if reminder.enabled and today in reminder.days_of_week
        ]

    def bedtime_for(self, reminder: Reminder, now: datetime) -> datetime:
        settings = self.settings_repository.load()
        return calculate_bedtime(
            reminder.wake_up_time, self.cycles, settings.cycle_length, settings.sleep_latency, now
        )

    def notify_time_for(self, reminder: Reminder, now: datetime) -> datetime:
        return self.bedtime_for(reminder, now) - timedelta(minutes=reminder.wind_down_minutes)

    def next_bedtime(self) -> Optional[datetime]:
        """Earliest upcoming bedtime among today's reminders whose notice is still ahead"""
        now = self.clock()
        closest = None
        closest_notify = None

        for reminder in self._active_today(now):
            notify_time = self.notify_time_for(reminder, now)
            if notify_time > now and (closest_notify is None or notify_time < closest_notify):
                closest_notify = notify_time
                closest = self.bedtime_for(reminder, now)

        return closest

    def due_reminders(self) -> List[Reminder]:
        """Reminders whose wind-down notice falls on the current minute"""
        now = self.clock()
        due = []
        for reminder in self._active_today(now):
            notify_time = self.notify_time_for(reminder, now)
            if (notify_time.hour, notify_time.minute) == (now.hour, now.minute):
                due.append(reminder)
        return due

    def dispatch_due(self, token) -> int:
        """
        Send a wind-down notification for every due reminder.

        Channel failures are logged and never raised.

        Returns:
            int: Number of notifications delivered
        """
        now = self.clock()
        delivered = 0

        for reminder in self.due_reminders():
            bedtime = self.bedtime_for(reminder, now).strftime('%H:%M')
            title = constants.REMINDER_NOTIFICATION_TITLE
            body = constants.REMINDER_NOTIFICATION_BODY.format(bedtime=bedtime)
            data = {'type': 'sleep-reminder', 'bedtime': bedtime, 'reminderId': reminder.id}

            try:
                sent = self.sender.send(token, title, body, data)
            except Exception as e:
                logger.error(f"Failed to send reminder {reminder.id}: {e}")
                continue

            if sent:
                delivered += 1
            else:
                logger.warning(f"Notification channel rejected reminder {reminder.id}")

        if delivered:
            logger.info(f"Dispatched {delivered} bedtime reminder(s)")
        return delivered

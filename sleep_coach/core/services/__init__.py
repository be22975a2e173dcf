"""
Application services over the analysis engine and the repositories.
"""

from sleep_coach.core.services.coach_service import CoachService
from sleep_coach.core.services.reminder_service import (
    LoggingNotificationSender,
    NotificationSender,
    ReminderService,
    calculate_bedtime,
)

__all__ = ['CoachService', 'ReminderService', 'NotificationSender', 'LoggingNotificationSender', 'calculate_bedtime']

"""
Constants used throughout the Sleep Coach engine.
This includes analysis thresholds, scoring weights, default values and
storage keys. Tunable values are mirrored in CoachConfig and config.yaml.
"""

# Standard sleep cycle length and time to fall asleep (minutes)
DEFAULT_CYCLE_LENGTH = 90
DEFAULT_SLEEP_LATENCY = 15
DEFAULT_NUMBER_OF_OPTIONS = 4

# First cycle count offered as an ideal wake-up time
MIN_WAKEUP_CYCLES = 3

MINUTES_PER_DAY = 24 * 60

# Times before this hour belong to the night that started the previous evening
DAY_BOUNDARY_HOUR = 6

# Minimum data requirements
MIN_ENTRIES_FOR_ANALYSIS = 3
MIN_ENTRIES_FOR_TRENDS = 7
MIN_ENTRIES_FOR_PATTERNS = 5

# Variance thresholds (in minutes)
VARIANCE_THRESHOLDS = {
    'excellent': 15,
    'good': 30,
    'moderate': 60,
    'poor': 90,
    'very_poor': 120,
}

# Weekend pattern detection (in minutes)
WEEKEND_SHIFT_THRESHOLD = 45
WEEKEND_SHIFT_CONFIDENCE_SPAN = 90

# Consistency scoring weights (must sum to 1.0)
SCORING_WEIGHTS = {
    'bedtime_variance': 0.4,
    'wakeup_variance': 0.4,
    'weekend_consistency': 0.2,
}

# Days considered "weekend" (Monday = 0, as in date.weekday())
WEEKEND_DAYS = (5, 6)

# Trend detection
TREND_THRESHOLD = 10  # Score change of 10+ points
TREND_CONFIDENCE_SPAN = 30
TREND_RECENT_FRACTION = 0.3

STREAK_SCORE_THRESHOLD = 80
IRREGULAR_VARIANCE_THRESHOLD = 60

# Only recent history is relevant for coaching
INSIGHT_WINDOW_DAYS = 14

# History retention
MAX_HISTORY_ENTRIES = 100

# Settings ranges
CYCLE_LENGTH_RANGE = (60, 150)
SLEEP_LATENCY_RANGE = (0, 60)
DEFAULT_LANGUAGE = 'pt-BR'

# Reminders
WIND_DOWN_RANGE = (0, 120)
DEFAULT_WIND_DOWN_MINUTES = 30
DEFAULT_REMINDER_DAYS = [1, 2, 3, 4, 5]  # Monday-Friday, 0 = Sunday
DEFAULT_REMINDER_CYCLES = 5
MAX_REMINDERS_PER_TOKEN = 10
BEDTIME_NOTIFICATION_LEAD_MINUTES = 30

REMINDER_NOTIFICATION_TITLE = 'Time to wind down!'
REMINDER_NOTIFICATION_BODY = 'Start getting ready for bed. Ideal bedtime: {bedtime}'

# Storage keys
HISTORY_STORAGE_KEY = 'sleepHistory'
SETTINGS_STORAGE_KEY = 'settings'
REMINDERS_STORAGE_KEY = 'sleep-reminders'

# Message template keys rendered by the UI
INSIGHT_TEMPLATES = {
    'variance_title': 'coach.insights.variance.title',
    'variance_high': 'coach.insights.variance.message_high',
    'variance_moderate': 'coach.insights.variance.message_moderate',
    'weekend_title': 'coach.insights.weekend.title',
    'weekend_later': 'coach.insights.weekend.message_later',
    'weekend_earlier': 'coach.insights.weekend.message_earlier',
    'trend_improving_title': 'coach.insights.trend.improving_title',
    'trend_improving_message': 'coach.insights.trend.improving_message',
    'trend_declining_title': 'coach.insights.trend.declining_title',
    'trend_declining_message': 'coach.insights.trend.declining_message',
    'streak_title': 'coach.insights.streak.title',
    'streak_message': 'coach.insights.streak.message',
    'insufficient_title': 'coach.insights.insufficient.title',
    'insufficient_message': 'coach.insights.insufficient.message',
}

"""
Configuration module.

YAML-backed configuration access and the tunable calibration constants
of the analysis engine.
"""

from sleep_coach.config.config_manager import ConfigManager
from sleep_coach.config.coach_config import CoachConfig, DEFAULT_COACH_CONFIG, load_coach_config

__all__ = ['ConfigManager', 'CoachConfig', 'DEFAULT_COACH_CONFIG', 'load_coach_config']

# sleep_coach/config/config_manager.py
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.yaml'


class ConfigManager:
    """Central configuration manager"""
    
    def __init__(self, config_path=None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.config = self._load_config()
    
    def _load_config(self):
        """Load configuration from file"""
        with open(self.config_path, 'r') as file:
            config = yaml.safe_load(file) or {}
        logger.debug(f"Loaded configuration from {self.config_path}")
        return config
    
    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

"""
Configuration management for the court scheduler.
"""

import copy
import logging
import os
import yaml
from typing import Dict, Any

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "COURT_NOTIFICATIONS_API_KEY"


class ConfigManager:
    """Manages configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling gaps from the defaults."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            loaded = {}
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            loaded = {}

        config = ConfigManager.merge_config(ConfigManager.get_default_config(), loaded)

        api_key = os.environ.get(API_KEY_ENV_VAR)
        if api_key:
            config['notifications']['api_key'] = api_key

        return config

    @staticmethod
    def merge_config(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively overlay user settings on top of the defaults."""
        merged = copy.deepcopy(defaults)
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = ConfigManager.merge_config(merged[key], value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'database_path': 'court_bookings.db',
            'courts': [1, 2, 3],
            'time_slots': {
                'singles': ['5:00-6:00 PM', '6:00-7:00 PM'],
                'doubles': ['7:00-8:00 PM', '8:00-9:00 PM']
            },
            # weekday follows date.weekday(): Monday is 0, Sunday is 6
            'season': {
                'weekday': 6,
                'months': [9, 10, 11, 12, 1, 2, 3, 4]
            },
            'storage': {
                'key_prefix': 'tennis-bookings-'
            },
            'notifications': {
                'api_url': 'https://api.example.com/v1/notifications/email',
                'api_key': '',
                'from_address': 'Tennis Court Management <courts@example.com>',
                'timeout': 30,
                'max_workers': 4
            },
            'reports': {
                'output_directory': 'reports',
                'top_players': 5
            }
        }

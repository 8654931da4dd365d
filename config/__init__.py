"""
Configuration package for the court scheduler.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']

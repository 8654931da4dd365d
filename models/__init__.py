"""
Models package for the court scheduler.

This package contains all data models and dataclasses used throughout the system.
"""

from .booking import Booking, MatchType, MATCH_DURATION_HOURS, EXPECTED_PLAYERS
from .player_stat import PlayerStat, StatsSummary
from .notification import EmailTemplate, DispatchResult

__all__ = [
    'Booking', 'MatchType', 'MATCH_DURATION_HOURS', 'EXPECTED_PLAYERS',
    'PlayerStat', 'StatsSummary', 'EmailTemplate', 'DispatchResult'
]

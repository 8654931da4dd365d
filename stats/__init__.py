"""
Player statistics package for the court scheduler.
"""

from .player_stats import calculate_player_stats, summarize, top_players, StatisticsProcessor

__all__ = ['calculate_player_stats', 'summarize', 'top_players', 'StatisticsProcessor']

"""
Player statistics models for the court scheduler.
"""

from dataclasses import dataclass


@dataclass
class PlayerStat:
    """Aggregated activity of one player across all bookings."""
    name: str
    total_matches: int = 0
    singles_matches: int = 0
    doubles_matches: int = 0
    total_hours: int = 0
    favorite_court: int = 1
    last_played: str = ""


@dataclass(frozen=True)
class StatsSummary:
    """Overall figures derived from a ranked list of player statistics."""
    total_players: int
    total_matches: int
    total_hours: int
    avg_matches_per_player: str

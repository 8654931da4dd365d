"""
Player statistics aggregation for the court scheduler.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List
from models.booking import Booking, MatchType
from models.player_stat import PlayerStat, StatsSummary
from utils.date_utils import DateUtils

logger = logging.getLogger(__name__)


def calculate_player_stats(bookings: Iterable[Booking]) -> List[PlayerStat]:
    """
    Aggregate bookings into per-player statistics, ranked by total matches.

    Player names are compared after trimming; blank names are ignored.
    The input is not modified and every call builds fresh PlayerStat objects.
    """
    bookings = list(bookings)
    stats_by_player: Dict[str, PlayerStat] = {}

    for booking in bookings:
        match_duration = booking.duration_hours

        for player_name in booking.active_players:
            existing = stats_by_player.get(player_name)
            if existing is None:
                existing = PlayerStat(name=player_name, last_played=booking.date)
                stats_by_player[player_name] = existing

            existing.total_matches += 1
            existing.total_hours += match_duration

            if booking.type == MatchType.SINGLES:
                existing.singles_matches += 1
            else:
                existing.doubles_matches += 1

            if DateUtils.parse_date(booking.date) > DateUtils.parse_date(existing.last_played):
                existing.last_played = booking.date

    for player_name, stats in stats_by_player.items():
        stats.favorite_court = _favorite_court(player_name, bookings)

    # sorted() is stable, so equal totals keep their first-seen order
    return sorted(stats_by_player.values(), key=lambda s: s.total_matches, reverse=True)


def _favorite_court(player_name: str, bookings: List[Booking]) -> int:
    """Most booked court for a player; on a tie the court seen first wins."""
    court_counts: Dict[int, int] = {}
    for booking in bookings:
        if player_name in booking.active_players:
            court_counts[booking.court] = court_counts.get(booking.court, 0) + 1

    max_count = 0
    favorite_court = 1
    for court, count in court_counts.items():
        if count > max_count:
            max_count = count
            favorite_court = court

    return favorite_court


def summarize(player_stats: List[PlayerStat]) -> StatsSummary:
    """Overall totals shown alongside the ranking."""
    total_players = len(player_stats)
    total_matches = sum(p.total_matches for p in player_stats)
    total_hours = sum(p.total_hours for p in player_stats)
    avg_matches = "0"
    if total_players > 0:
        # One decimal place, exact halves round up
        average = Decimal(total_matches) / Decimal(total_players)
        avg_matches = str(average.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))

    return StatsSummary(
        total_players=total_players,
        total_matches=total_matches,
        total_hours=total_hours,
        avg_matches_per_player=avg_matches
    )


def top_players(player_stats: List[PlayerStat], limit: int = 5) -> List[PlayerStat]:
    return player_stats[:limit]


class StatisticsProcessor:
    """Computes player statistics from everything in a booking store."""

    def __init__(self, store):
        self.store = store
        self.player_stats: List[PlayerStat] = []

    def refresh(self) -> List[PlayerStat]:
        """Re-read all partitions and rebuild the ranking."""
        bookings = self.store.read_all()
        self.player_stats = calculate_player_stats(bookings)
        logger.info(f"Computed statistics for {len(self.player_stats)} players from {len(bookings)} bookings")
        return self.player_stats

    def get_summary(self) -> StatsSummary:
        return summarize(self.player_stats)

    def get_top_players(self, limit: int = 5) -> List[PlayerStat]:
        return top_players(self.player_stats, limit)

    def get_player(self, name: str):
        """Statistics for one player, or None if they never played."""
        for stats in self.player_stats:
            if stats.name == name.strip():
                return stats
        return None

"""
Report generator for the court scheduler.
"""

import os
import pandas as pd
import logging
from typing import Dict, List, Optional
from models.player_stat import PlayerStat, StatsSummary
from stats.player_stats import calculate_player_stats, summarize, top_players
from utils.date_utils import DateUtils

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generates statistics and schedule reports for the court scheduler."""

    def __init__(self, store, schedule_manager=None, top_player_limit: int = 5):
        self.store = store
        self.schedule_manager = schedule_manager
        self.top_player_limit = top_player_limit

    def _load_stats(self) -> List[PlayerStat]:
        return calculate_player_stats(self.store.read_all())

    def generate_player_stats_report(self, output_file: str) -> int:
        """
        Export the player ranking to CSV.
        Returns the number of players in the report.
        """
        player_stats = self._load_stats()

        if not player_stats:
            logger.warning("No player statistics available for report generation")
            return 0

        data = []
        for rank, player in enumerate(player_stats, 1):
            data.append({
                'Rank': rank,
                'Player': player.name,
                'Total Matches': player.total_matches,
                'Singles': player.singles_matches,
                'Doubles': player.doubles_matches,
                'Total Hours': player.total_hours,
                'Favorite Court': player.favorite_court,
                'Last Played': player.last_played
            })

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated player statistics report with {len(player_stats)} players: {output_file}")
        return len(player_stats)

    def generate_summary_report(self, output_file: str) -> int:
        """Export the overall totals. Returns the number of rows written."""
        summary = summarize(self._load_stats())

        data = [
            {'Metric': 'Total Players', 'Value': summary.total_players},
            {'Metric': 'Total Matches', 'Value': summary.total_matches},
            {'Metric': 'Total Hours', 'Value': f"{summary.total_hours}h"},
            {'Metric': 'Avg Matches', 'Value': summary.avg_matches_per_player}
        ]

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Generated summary report: {output_file}")
        return len(data)

    def generate_schedule_report(self, date: str, output_file: str) -> int:
        """Export the court grid of one date. Returns the number of bookings on it."""
        if self.schedule_manager is None:
            logger.warning("No schedule manager available - cannot generate schedule report")
            return 0

        rows = self.schedule_manager.day_grid(date)
        data = []
        for row in rows:
            entry = {'Time': row['time_slot'], 'Type': row['type'].capitalize()}
            for court in self.schedule_manager.courts:
                entry[f'Court {court}'] = row[court]
            data.append(entry)

        df = pd.DataFrame(data)
        df.to_csv(output_file, index=False, encoding='utf-8')

        bookings = len(self.store.read(date))
        logger.info(f"Generated schedule report for {date} with {bookings} bookings: {output_file}")
        return bookings

    def format_stats_text(self, player_stats: List[PlayerStat],
                          summary: Optional[StatsSummary] = None) -> str:
        """Plain-text statistics panel."""
        summary = summary or summarize(player_stats)

        lines = [
            "Player Statistics",
            "=================",
            f"Total Players: {summary.total_players}",
            f"Total Matches: {summary.total_matches}",
            f"Total Hours:   {summary.total_hours}h",
            f"Avg Matches:   {summary.avg_matches_per_player}",
            ""
        ]

        if not player_stats:
            lines.append("No player statistics available yet.")
            lines.append("Start booking matches to see player stats!")
            return "\n".join(lines)

        lines.append("Top Players")
        for rank, player in enumerate(top_players(player_stats, self.top_player_limit), 1):
            lines.append(
                f"{rank}. {player.name} - {player.total_matches} matches "
                f"(Court {player.favorite_court} • Last played {DateUtils.format_short_date(player.last_played)})"
            )

        lines.append("")
        lines.append("All Players")
        for player in player_stats:
            lines.append(
                f"{player.name}: {player.singles_matches} singles, {player.doubles_matches} doubles, "
                f"{player.total_hours}h, Court {player.favorite_court} - {player.total_matches} matches"
            )

        return "\n".join(lines)

    def generate_all_reports(self, output_directory: str = "reports", date: Optional[str] = None) -> Dict[str, int]:
        """Generate all available reports in the specified directory."""
        os.makedirs(output_directory, exist_ok=True)

        report_results = {}

        stats_report = os.path.join(output_directory, "player_statistics_report.csv")
        report_results['player_statistics'] = self.generate_player_stats_report(stats_report)

        summary_report = os.path.join(output_directory, "summary_report.csv")
        report_results['summary'] = self.generate_summary_report(summary_report)

        if date is not None:
            schedule_report = os.path.join(output_directory, f"schedule_{date}_report.csv")
            report_results[f'schedule_{date}'] = self.generate_schedule_report(date, schedule_report)

        logger.info(f"Generated all reports in directory: {output_directory}")
        return report_results

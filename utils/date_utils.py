"""
Date utilities for the court scheduler.
"""

from datetime import date, datetime


class DateUtils:
    """Utilities for parsing and displaying calendar dates."""

    @staticmethod
    def parse_date(date_str: str) -> date:
        """Parse an ISO calendar date (YYYY-MM-DD), ignoring any time part."""
        return datetime.strptime(date_str[:10], '%Y-%m-%d').date()

    @staticmethod
    def today() -> str:
        """Today's date as an ISO string."""
        return date.today().isoformat()

    @staticmethod
    def format_short_date(date_str: str) -> str:
        """Format as e.g. 'Jan 5, 2024'."""
        d = DateUtils.parse_date(date_str)
        return f"{d.strftime('%b')} {d.day}, {d.year}"

    @staticmethod
    def format_long_date(date_str: str) -> str:
        """Format as e.g. 'Friday, January 5, 2024'."""
        d = DateUtils.parse_date(date_str)
        return f"{d.strftime('%A')}, {d.strftime('%B')} {d.day}, {d.year}"

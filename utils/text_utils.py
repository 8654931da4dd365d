"""
Text processing utilities for the court scheduler.
"""

from typing import Iterable, List


class TextUtils:
    """Utilities for handling player name input."""

    @staticmethod
    def is_blank(text: str) -> bool:
        """True for None, empty or whitespace-only strings."""
        return not text or not text.strip()

    @staticmethod
    def clean_players(players: Iterable[str]) -> List[str]:
        """Trim player names and drop blank entries."""
        return [p.strip() for p in players if not TextUtils.is_blank(p)]

    @staticmethod
    def format_players(players: Iterable[str], match_type: str) -> str:
        """Join names the way a grid cell shows them."""
        separator = ' vs ' if match_type == 'singles' else ' & '
        return separator.join(TextUtils.clean_players(players))

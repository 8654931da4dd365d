"""
Booking data models for the court scheduler.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class MatchType(str, Enum):
    """Kind of match a time slot is reserved for."""
    SINGLES = "singles"
    DOUBLES = "doubles"


# Duration units per match; doubles slots count double
MATCH_DURATION_HOURS = {
    MatchType.SINGLES: 1,
    MatchType.DOUBLES: 2,
}

# Number of player fields offered when editing a slot
EXPECTED_PLAYERS = {
    MatchType.SINGLES: 2,
    MatchType.DOUBLES: 4,
}


@dataclass(frozen=True)
class Booking:
    """A reservation of one court for one time slot on one date."""
    id: str
    court: int
    time_slot: str
    players: List[str] = field(default_factory=list)
    type: MatchType = MatchType.SINGLES
    date: str = ""

    @property
    def active_players(self) -> List[str]:
        """Trimmed player names with blank entries dropped."""
        return [p.strip() for p in self.players if p and p.strip()]

    @property
    def duration_hours(self) -> int:
        return MATCH_DURATION_HOURS[self.type]

    @staticmethod
    def generate_id(court: int, time_slot: str) -> str:
        """Build an id from the cell and the current time in milliseconds."""
        return f"{court}-{time_slot}-{int(time.time() * 1000)}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Booking":
        """Create a booking from its stored JSON representation."""
        return cls(
            id=str(data['id']),
            court=int(data['court']),
            time_slot=data['timeSlot'],
            players=list(data.get('players', [])),
            type=MatchType(data['type']),
            date=data['date']
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored JSON representation."""
        return {
            'id': self.id,
            'court': self.court,
            'timeSlot': self.time_slot,
            'players': list(self.players),
            'type': self.type.value,
            'date': self.date
        }

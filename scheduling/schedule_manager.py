"""
Day schedule management for the court scheduler.
"""

import logging
from typing import Any, Dict, List, Optional
from models.booking import Booking, MatchType, EXPECTED_PLAYERS
from utils.date_utils import DateUtils
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Courts are only available on Sundays from September to April."
WRONG_WEEKDAY_HINT = " Please select a Sunday."
OFF_SEASON_HINT = " Please select a date during the tennis season (September - April)."


class BookingDateError(ValueError):
    """Raised when a booking change targets a date the courts are closed."""


class ScheduleManager:
    """Reads and edits the court grid of a single date."""

    def __init__(self, store, config: Dict[str, Any]):
        self.store = store
        self.config = config
        self.courts: List[int] = list(config.get('courts', [1, 2, 3]))
        self.time_slots: Dict[MatchType, List[str]] = {
            MatchType.SINGLES: list(config.get('time_slots', {}).get('singles', [])),
            MatchType.DOUBLES: list(config.get('time_slots', {}).get('doubles', []))
        }
        season = config.get('season', {})
        self.season_weekday = season.get('weekday', 6)
        self.season_months = set(season.get('months', [9, 10, 11, 12, 1, 2, 3, 4]))

    def is_valid_booking_date(self, date: str) -> bool:
        """Check the courts are open on the date (Sundays, September to April)."""
        day = DateUtils.parse_date(date)
        if day.weekday() != self.season_weekday:
            return False
        return day.month in self.season_months

    def availability_message(self, date: str) -> Optional[str]:
        """Explanation shown for a closed date, None when courts are open."""
        if self.is_valid_booking_date(date):
            return None
        day = DateUtils.parse_date(date)
        if day.weekday() != self.season_weekday:
            return UNAVAILABLE_MESSAGE + WRONG_WEEKDAY_HINT
        return UNAVAILABLE_MESSAGE + OFF_SEASON_HINT

    def all_time_slots(self) -> List[str]:
        return self.time_slots[MatchType.SINGLES] + self.time_slots[MatchType.DOUBLES]

    def slot_type(self, time_slot: str) -> MatchType:
        for match_type, slots in self.time_slots.items():
            if time_slot in slots:
                return match_type
        raise ValueError(f"Unknown time slot: {time_slot}")

    def get_bookings(self, date: str) -> List[Booking]:
        return self.store.read(date)

    def get_booking(self, date: str, court: int, time_slot: str) -> Optional[Booking]:
        for booking in self.store.read(date):
            if booking.court == court and booking.time_slot == time_slot:
                return booking
        return None

    def player_inputs(self, date: str, court: int, time_slot: str) -> List[str]:
        """Editable player fields for a cell, padded with blanks."""
        expected_length = EXPECTED_PLAYERS[self.slot_type(time_slot)]
        existing = self.get_booking(date, court, time_slot)
        players = list(existing.players) if existing else []
        while len(players) < expected_length:
            players.append('')
        return players

    def save_booking(self, date: str, court: int, time_slot: str, players: List[str]) -> Optional[Booking]:
        """
        Store the players entered for a cell.

        Blank names are dropped. When no names remain the cell is cleared and
        None is returned, otherwise the cell's booking is replaced by a new one.
        """
        self._check_bookable(date)
        match_type = self.slot_type(time_slot)
        self._check_court(court)

        filtered_players = TextUtils.clean_players(players)
        remaining = [b for b in self.store.read(date)
                     if not (b.court == court and b.time_slot == time_slot)]

        if not filtered_players:
            self.store.write(date, remaining)
            logger.info(f"Cleared court {court} at {time_slot} on {date}")
            return None

        booking = Booking(
            id=Booking.generate_id(court, time_slot),
            court=court,
            time_slot=time_slot,
            players=filtered_players,
            type=match_type,
            date=date
        )
        remaining.append(booking)
        self.store.write(date, remaining)
        logger.info(f"Booked court {court} at {time_slot} on {date}: "
                    f"{TextUtils.format_players(filtered_players, match_type.value)}")
        return booking

    def delete_booking(self, date: str, court: int, time_slot: str) -> bool:
        """Remove the booking in a cell. Returns True if one was removed."""
        self._check_bookable(date)
        bookings = self.store.read(date)
        remaining = [b for b in bookings
                     if not (b.court == court and b.time_slot == time_slot)]
        self.store.write(date, remaining)

        removed = len(remaining) < len(bookings)
        if removed:
            logger.info(f"Deleted booking on court {court} at {time_slot} on {date}")
        return removed

    def clear_all(self, date: str) -> int:
        """Remove every booking of a date. Returns the number removed."""
        self._check_bookable(date)
        removed = len(self.store.read(date))
        self.store.write(date, [])
        logger.info(f"Cleared {removed} bookings on {date}")
        return removed

    def day_grid(self, date: str) -> List[Dict[str, Any]]:
        """One row per time slot with the player label of each court."""
        bookings = {(b.court, b.time_slot): b for b in self.store.read(date)}
        rows = []
        for match_type in (MatchType.SINGLES, MatchType.DOUBLES):
            for time_slot in self.time_slots[match_type]:
                row = {'time_slot': time_slot, 'type': match_type.value}
                for court in self.courts:
                    booking = bookings.get((court, time_slot))
                    row[court] = TextUtils.format_players(booking.players, match_type.value) if booking else ''
                rows.append(row)
        return rows

    def _check_bookable(self, date: str) -> None:
        if not self.is_valid_booking_date(date):
            raise BookingDateError(self.availability_message(date))

    def _check_court(self, court: int) -> None:
        if court not in self.courts:
            raise ValueError(f"Unknown court: {court}")

"""
Date-partitioned booking storage for the court scheduler.

Every calendar date owns one partition holding the JSON list of its bookings,
stored under the key ``<key_prefix><date>``.
"""

import json
import sqlite3
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from models.booking import Booking

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "tennis-bookings-"


class BookingStore(ABC):
    """Interface of a store mapping a date to its ordered bookings."""

    def __init__(self, key_prefix: str = DEFAULT_KEY_PREFIX):
        self.key_prefix = key_prefix

    def partition_key(self, date: str) -> str:
        return f"{self.key_prefix}{date}"

    def read(self, date: str) -> List[Booking]:
        """Bookings stored for a date; empty when nothing is stored or the partition is unreadable."""
        payload = self._load(self.partition_key(date))
        if payload is None:
            return []
        return self._decode(payload, date)

    def write(self, date: str, bookings: List[Booking]) -> None:
        """Replace the partition for a date."""
        payload = json.dumps([b.to_dict() for b in bookings])
        self._save(self.partition_key(date), payload)
        logger.debug(f"Stored {len(bookings)} bookings for {date}")

    def delete(self, date: str) -> None:
        self._remove(self.partition_key(date))

    def dates(self) -> List[str]:
        """Dates that have a stored partition, in key order."""
        return [key[len(self.key_prefix):] for key in self._keys()
                if key.startswith(self.key_prefix)]

    def read_all(self) -> List[Booking]:
        """Union of every partition, in key order."""
        all_bookings = []
        for date in self.dates():
            all_bookings.extend(self.read(date))
        return all_bookings

    def _decode(self, payload: str, date: str) -> List[Booking]:
        try:
            return [Booking.from_dict(item) for item in json.loads(payload)]
        except (ValueError, TypeError, KeyError) as e:
            logger.error(f"Error reading bookings for {date}: {e}")
            return []

    @abstractmethod
    def _load(self, key: str) -> Optional[str]:
        """Raw payload stored under a key, or None when there is none."""

    @abstractmethod
    def _save(self, key: str, payload: str) -> None:
        pass

    @abstractmethod
    def _remove(self, key: str) -> None:
        pass

    @abstractmethod
    def _keys(self) -> List[str]:
        pass


class InMemoryBookingStore(BookingStore):
    """Booking store kept in a plain dict."""

    def __init__(self, key_prefix: str = DEFAULT_KEY_PREFIX):
        super().__init__(key_prefix)
        self._items: Dict[str, str] = {}

    def _load(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def _save(self, key: str, payload: str) -> None:
        self._items[key] = payload

    def _remove(self, key: str) -> None:
        self._items.pop(key, None)

    def _keys(self) -> List[str]:
        return sorted(self._items)


class SQLiteBookingStore(BookingStore):
    """Booking store backed by the booking_partitions table."""

    def __init__(self, database_manager):
        super().__init__(database_manager.key_prefix)
        self.db_manager = database_manager

    def _load(self, key: str) -> Optional[str]:
        try:
            with sqlite3.connect(self.db_manager.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "SELECT payload FROM booking_partitions WHERE partition_key = ?", (key,)
                )
                row = cursor.fetchone()
                return row[0] if row else None
        except sqlite3.Error as e:
            logger.error(f"Error loading partition {key}: {e}")
            return None

    def _save(self, key: str, payload: str) -> None:
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO booking_partitions (partition_key, payload, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(partition_key) DO UPDATE SET
                    payload = excluded.payload,
                    updated_at = CURRENT_TIMESTAMP
            """, (key, payload))
            conn.commit()

    def _remove(self, key: str) -> None:
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM booking_partitions WHERE partition_key = ?", (key,))
            conn.commit()
            if cursor.rowcount > 0:
                logger.info(f"Removed partition {key}")

    def _keys(self) -> List[str]:
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT partition_key FROM booking_partitions ORDER BY partition_key")
            return [row[0] for row in cursor.fetchall()]

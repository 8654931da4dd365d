"""
Core database management for the court scheduler.
"""

import json
import sqlite3
import logging
from typing import Dict
from config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages core database operations and initialization."""

    def __init__(self, db_path: str = None, config_file: str = "config.yaml"):
        self.config = ConfigManager.load_config(config_file)
        self.db_path = db_path or self.config.get('database_path', 'court_bookings.db')
        self.key_prefix = self.config.get('storage', {}).get('key_prefix', 'tennis-bookings-')
        self.init_database()

    def init_database(self) -> None:
        """Initialize the database with required tables."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            # One row per date partition, payload is the JSON list of bookings
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS booking_partitions (
                    partition_key TEXT PRIMARY KEY,
                    payload TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.commit()
            logger.info("Database initialized successfully")

    def get_database_stats(self) -> Dict[str, int]:
        """Get basic database statistics."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            cursor.execute(
                "SELECT payload FROM booking_partitions WHERE partition_key LIKE ?",
                (f"{self.key_prefix}%",)
            )
            rows = cursor.fetchall()

        total_bookings = 0
        for (payload,) in rows:
            try:
                total_bookings += len(json.loads(payload))
            except (ValueError, TypeError) as e:
                logger.warning(f"Skipping unreadable partition while counting bookings: {e}")

        return {
            'partitions': len(rows),
            'bookings': total_bookings
        }

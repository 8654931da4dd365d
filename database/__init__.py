"""
Database package for the court scheduler.
"""

from .database_manager import DatabaseManager
from .booking_store import BookingStore, InMemoryBookingStore, SQLiteBookingStore

__all__ = ['DatabaseManager', 'BookingStore', 'InMemoryBookingStore', 'SQLiteBookingStore']

"""
Scheduling package for the court scheduler.
"""

from .schedule_manager import ScheduleManager, BookingDateError

__all__ = ['ScheduleManager', 'BookingDateError']

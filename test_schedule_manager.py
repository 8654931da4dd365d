#!/usr/bin/env python3
"""
Tests for day schedule management.

This test file focuses on:
- Season and weekday availability
- Saving, replacing and clearing bookings in grid cells
- Player input padding
- Day grid rows used for presentation
"""

import unittest

from config.config_manager import ConfigManager
from database.booking_store import InMemoryBookingStore
from models.booking import MatchType
from scheduling.schedule_manager import ScheduleManager, BookingDateError

SUNDAY_IN_SEASON = '2024-01-07'
SUNDAY_OFF_SEASON = '2024-05-05'
MONDAY_IN_SEASON = '2024-01-08'


class TestBookingDates(unittest.TestCase):
    """Test cases for booking date validity."""

    def setUp(self):
        self.manager = ScheduleManager(InMemoryBookingStore(), ConfigManager.get_default_config())

    def test_sundays_in_season(self):
        self.assertTrue(self.manager.is_valid_booking_date(SUNDAY_IN_SEASON))
        self.assertTrue(self.manager.is_valid_booking_date('2023-09-03'))
        self.assertTrue(self.manager.is_valid_booking_date('2023-12-31'))
        self.assertTrue(self.manager.is_valid_booking_date('2024-04-28'))

    def test_other_weekdays_rejected(self):
        self.assertFalse(self.manager.is_valid_booking_date(MONDAY_IN_SEASON))
        self.assertFalse(self.manager.is_valid_booking_date('2024-01-06'))

    def test_off_season_rejected(self):
        self.assertFalse(self.manager.is_valid_booking_date(SUNDAY_OFF_SEASON))
        self.assertFalse(self.manager.is_valid_booking_date('2024-08-25'))

    def test_availability_messages(self):
        self.assertIsNone(self.manager.availability_message(SUNDAY_IN_SEASON))
        self.assertEqual(
            self.manager.availability_message(MONDAY_IN_SEASON),
            "Courts are only available on Sundays from September to April. Please select a Sunday."
        )
        self.assertEqual(
            self.manager.availability_message(SUNDAY_OFF_SEASON),
            "Courts are only available on Sundays from September to April."
            " Please select a date during the tennis season (September - April)."
        )


class TestScheduleManager(unittest.TestCase):
    """Test cases for editing the grid of one date."""

    def setUp(self):
        self.store = InMemoryBookingStore()
        self.manager = ScheduleManager(self.store, ConfigManager.get_default_config())

    def test_slot_types(self):
        self.assertEqual(self.manager.slot_type('5:00-6:00 PM'), MatchType.SINGLES)
        self.assertEqual(self.manager.slot_type('8:00-9:00 PM'), MatchType.DOUBLES)
        with self.assertRaises(ValueError):
            self.manager.slot_type('11:00-12:00 PM')

    def test_save_singles_booking(self):
        booking = self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.assertEqual(booking.type, MatchType.SINGLES)
        self.assertEqual(booking.date, SUNDAY_IN_SEASON)
        self.assertEqual(self.manager.get_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM'), booking)
        self.assertIsNone(self.manager.get_booking(SUNDAY_IN_SEASON, 2, '5:00-6:00 PM'))

    def test_save_drops_blank_players(self):
        booking = self.manager.save_booking(SUNDAY_IN_SEASON, 2, '7:00-8:00 PM', ['Alice', '', ' Bob ', '  '])
        self.assertEqual(booking.players, ['Alice', 'Bob'])
        self.assertEqual(booking.type, MatchType.DOUBLES)

    def test_save_replaces_cell(self):
        """Saving a booked cell keeps a single booking for it."""
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.manager.save_booking(SUNDAY_IN_SEASON, 2, '5:00-6:00 PM', ['Carol', 'Dave'])
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Erin'])

        bookings = self.store.read(SUNDAY_IN_SEASON)
        self.assertEqual(len(bookings), 2)
        self.assertEqual(self.manager.get_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM').players,
                         ['Alice', 'Erin'])

    def test_save_without_players_clears_cell(self):
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        result = self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['', '  '])
        self.assertIsNone(result)
        self.assertEqual(self.store.read(SUNDAY_IN_SEASON), [])

    def test_save_on_closed_date_rejected(self):
        with self.assertRaises(BookingDateError):
            self.manager.save_booking(MONDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.assertEqual(self.store.read(MONDAY_IN_SEASON), [])

    def test_save_unknown_court_rejected(self):
        with self.assertRaises(ValueError):
            self.manager.save_booking(SUNDAY_IN_SEASON, 7, '5:00-6:00 PM', ['Alice', 'Bob'])

    def test_player_inputs_padding(self):
        self.assertEqual(self.manager.player_inputs(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM'), ['', ''])
        self.assertEqual(self.manager.player_inputs(SUNDAY_IN_SEASON, 1, '7:00-8:00 PM'), ['', '', '', ''])

        self.manager.save_booking(SUNDAY_IN_SEASON, 3, '8:00-9:00 PM', ['Alice', 'Bob'])
        self.assertEqual(self.manager.player_inputs(SUNDAY_IN_SEASON, 3, '8:00-9:00 PM'),
                         ['Alice', 'Bob', '', ''])

    def test_delete_booking(self):
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.assertTrue(self.manager.delete_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM'))
        self.assertFalse(self.manager.delete_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM'))
        self.assertEqual(self.store.read(SUNDAY_IN_SEASON), [])

    def test_clear_all(self):
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.manager.save_booking(SUNDAY_IN_SEASON, 2, '7:00-8:00 PM', ['Carol', 'Dave'])
        self.manager.save_booking('2024-01-14', 2, '7:00-8:00 PM', ['Carol', 'Dave'])

        self.assertEqual(self.manager.clear_all(SUNDAY_IN_SEASON), 2)
        self.assertEqual(self.store.read(SUNDAY_IN_SEASON), [])
        self.assertEqual(len(self.store.read('2024-01-14')), 1)

    def test_clear_all_on_closed_date_rejected(self):
        with self.assertRaises(BookingDateError):
            self.manager.clear_all(SUNDAY_OFF_SEASON)

    def test_day_grid(self):
        self.manager.save_booking(SUNDAY_IN_SEASON, 1, '5:00-6:00 PM', ['Alice', 'Bob'])
        self.manager.save_booking(SUNDAY_IN_SEASON, 3, '7:00-8:00 PM', ['Carol', 'Dave', 'Erin', 'Frank'])

        grid = self.manager.day_grid(SUNDAY_IN_SEASON)
        self.assertEqual([row['time_slot'] for row in grid],
                         ['5:00-6:00 PM', '6:00-7:00 PM', '7:00-8:00 PM', '8:00-9:00 PM'])
        self.assertEqual(grid[0][1], 'Alice vs Bob')
        self.assertEqual(grid[0][2], '')
        self.assertEqual(grid[2][3], 'Carol & Dave & Erin & Frank')
        self.assertEqual(grid[2]['type'], 'doubles')

    def test_custom_season(self):
        """Season months and weekday come from configuration."""
        config = ConfigManager.merge_config(
            ConfigManager.get_default_config(),
            {'season': {'weekday': 5, 'months': [6, 7]}}
        )
        manager = ScheduleManager(self.store, config)
        self.assertTrue(manager.is_valid_booking_date('2024-07-06'))
        self.assertFalse(manager.is_valid_booking_date(SUNDAY_IN_SEASON))


if __name__ == '__main__':
    unittest.main()

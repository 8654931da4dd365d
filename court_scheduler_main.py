"""
Main application for the court scheduler.
"""

import argparse
import logging
import sys

from database.database_manager import DatabaseManager
from database.booking_store import SQLiteBookingStore
from scheduling.schedule_manager import ScheduleManager, BookingDateError
from stats.player_stats import StatisticsProcessor
from notifications.notification_sender import NotificationSender, build_confirmation_template
from reports.report_generator import ReportGenerator
from utils.date_utils import DateUtils

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tennis court scheduler")
    parser.add_argument("--config", default="config.yaml", help="Path to the YAML configuration file")
    parser.add_argument("--db", default=None, help="Override the database path from the configuration")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("stats", help="Show player statistics")

    schedule = subparsers.add_parser("schedule", help="Show the court grid of a date")
    schedule.add_argument("--date", default=None, help="Date (YYYY-MM-DD), defaults to today")

    book = subparsers.add_parser("book", help="Assign players to a court and time slot")
    book.add_argument("date")
    book.add_argument("court", type=int)
    book.add_argument("time_slot")
    book.add_argument("players", nargs="*")

    delete = subparsers.add_parser("delete", help="Remove the booking of a court and time slot")
    delete.add_argument("date")
    delete.add_argument("court", type=int)
    delete.add_argument("time_slot")

    clear = subparsers.add_parser("clear", help="Remove all bookings of a date")
    clear.add_argument("date")

    notify = subparsers.add_parser("notify", help="Email a booking confirmation")
    notify.add_argument("date")
    notify.add_argument("court", type=int)
    notify.add_argument("time_slot")
    notify.add_argument("emails", nargs="+")
    notify.add_argument("--subject", default=None)
    notify.add_argument("--message", default=None)

    reports = subparsers.add_parser("reports", help="Write CSV reports")
    reports.add_argument("--output", default=None, help="Output directory")
    reports.add_argument("--date", default=None, help="Also export the grid of this date")

    return parser


def main(argv=None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    command = args.command or "stats"

    try:
        db_manager = DatabaseManager(args.db, args.config)
        store = SQLiteBookingStore(db_manager)
        config = db_manager.config
        schedule_manager = ScheduleManager(store, config)
        report_generator = ReportGenerator(
            store, schedule_manager, config.get('reports', {}).get('top_players', 5)
        )
        logger.info(f"Using database {db_manager.db_path}")

        if command == "stats":
            processor = StatisticsProcessor(store)
            player_stats = processor.refresh()
            print(report_generator.format_stats_text(player_stats, processor.get_summary()))

        elif command == "schedule":
            date = args.date or DateUtils.today()
            print(DateUtils.format_long_date(date))
            message = schedule_manager.availability_message(date)
            if message:
                print(message)
            for row in schedule_manager.day_grid(date):
                cells = " | ".join(f"Court {court}: {row[court] or '-'}" for court in schedule_manager.courts)
                print(f"{row['time_slot']:<14} {row['type']:<8} {cells}")

        elif command == "book":
            booking = schedule_manager.save_booking(args.date, args.court, args.time_slot, args.players)
            print(f"Saved booking {booking.id}" if booking else "Booking removed (no players)")

        elif command == "delete":
            removed = schedule_manager.delete_booking(args.date, args.court, args.time_slot)
            print("Booking deleted" if removed else "No booking in that slot")

        elif command == "clear":
            removed = schedule_manager.clear_all(args.date)
            print(f"Removed {removed} bookings")

        elif command == "notify":
            booking = schedule_manager.get_booking(args.date, args.court, args.time_slot)
            if booking is None:
                print("No booking in that slot")
                return 1
            sender = NotificationSender(config)
            if args.subject is None and args.message is None:
                result = sender.send_booking_confirmation(booking, args.emails)
            else:
                template = build_confirmation_template(booking)
                result = sender.send_notifications(
                    args.emails,
                    args.subject if args.subject is not None else template.subject,
                    args.message if args.message is not None else template.message
                )
            print(result.message)
            return 0 if result.succeeded else 1

        elif command == "reports":
            output = args.output or config.get('reports', {}).get('output_directory', 'reports')
            report_results = report_generator.generate_all_reports(output, args.date)
            logger.info(f"Generated reports: {report_results}")

        return 0

    except (BookingDateError, ValueError) as e:
        print(e)
        return 1
    except Exception as e:
        logger.error(f"Error in court scheduler: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Booking confirmation emails sent through the external notification API.
"""

import re
import logging
import concurrent.futures
import requests
from typing import Any, Dict, Iterable, List
from models.booking import Booking, MatchType
from models.notification import DispatchResult, EmailTemplate
from utils.date_utils import DateUtils
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

SUCCESS_MESSAGE = "Email notifications sent successfully!"
NO_RECIPIENTS_MESSAGE = "Please enter at least one valid email address."
MISSING_CONTENT_MESSAGE = "Please fill in both subject and message."
DISPATCH_FAILED_MESSAGE = "Failed to send email notifications. Please try again."


class NotificationError(Exception):
    """Raised when the notification API does not accept a message."""


def is_valid_email(address: str) -> bool:
    """Shape check only: local-part@domain.tld without whitespace."""
    if TextUtils.is_blank(address):
        return False
    return EMAIL_PATTERN.match(address.strip()) is not None


def validate_recipients(addresses: Iterable[str]) -> List[str]:
    """Trimmed addresses that pass the shape check; the rest are dropped."""
    return [a.strip() for a in addresses if is_valid_email(a)]


def to_html(message: str) -> str:
    return message.replace('\n', '<br>')


def build_confirmation_template(booking: Booking) -> EmailTemplate:
    """Default subject and message for a booking confirmation."""
    match_label = 'Singles' if booking.type == MatchType.SINGLES else 'Doubles'
    players = ', '.join(booking.active_players)

    message = (
        "Hello,\n"
        "\n"
        "Your tennis match has been booked successfully!\n"
        "\n"
        "Match Details:\n"
        f"• Date: {DateUtils.format_long_date(booking.date)}\n"
        f"• Time: {booking.time_slot}\n"
        f"• Court: {booking.court}\n"
        f"• Match Type: {match_label}\n"
        f"• Players: {players}\n"
        "\n"
        "Please arrive 10 minutes before your scheduled time.\n"
        "\n"
        "Best regards,\n"
        "Tennis Court Management"
    )

    return EmailTemplate(
        subject=f"Tennis Match Booking Confirmation - {booking.date}",
        message=message
    )


class NotificationSender:
    """Sends notification emails, one API request per recipient."""

    def __init__(self, config: Dict[str, Any]):
        settings = config.get('notifications', {})
        self.api_url = settings.get('api_url')
        self.api_key = settings.get('api_key', '')
        self.from_address = settings.get('from_address')
        self.timeout = settings.get('timeout', 30)
        self.max_workers = max(1, int(settings.get('max_workers', 4)))

    def send(self, to: str, subject: str, message: str) -> None:
        """Send a single email. Raises NotificationError on any failure."""
        payload = {
            'to': to,
            'subject': subject,
            'html': to_html(message),
            'text': message
        }
        if self.from_address:
            payload['from'] = self.from_address

        headers = {}
        if self.api_key:
            headers['Authorization'] = f"Bearer {self.api_key}"

        # Sends run on pool threads, each with its own session
        try:
            with requests.Session() as session:
                response = session.post(self.api_url, json=payload, headers=headers, timeout=self.timeout)
                response.raise_for_status()
        except requests.RequestException as e:
            raise NotificationError(f"Could not send email to {to}: {e}") from e

    def send_notifications(self, addresses: Iterable[str], subject: str, message: str) -> DispatchResult:
        """
        Validate recipients and send the message to each of them concurrently.

        Every send is awaited before the result is built. A batch with any
        failed send is reported as an error carrying the failure count.
        """
        recipients = validate_recipients(addresses)

        if not recipients:
            return DispatchResult(status='error', message=NO_RECIPIENTS_MESSAGE)

        if TextUtils.is_blank(subject) or TextUtils.is_blank(message):
            return DispatchResult(status='error', message=MISSING_CONTENT_MESSAGE, requested=len(recipients))

        try:
            workers = min(self.max_workers, len(recipients))
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers,
                                                       thread_name_prefix="Notifications") as executor:
                futures = {executor.submit(self.send, to, subject, message): to for to in recipients}
                concurrent.futures.wait(futures)

            failed = 0
            for future, to in futures.items():
                error = future.exception()
                if error is not None:
                    failed += 1
                    logger.warning(f"Notification to {to} failed: {error}")
        except Exception as e:
            logger.error(f"Error dispatching notifications: {e}")
            return DispatchResult(status='error', message=DISPATCH_FAILED_MESSAGE, requested=len(recipients))

        sent = len(recipients) - failed
        if failed == 0:
            logger.info(f"Sent {sent} notification emails")
            return DispatchResult(status='success', message=SUCCESS_MESSAGE,
                                  requested=len(recipients), sent=sent)

        logger.error(f"Failed to send {failed} of {len(recipients)} notification emails")
        return DispatchResult(
            status='error',
            message=f"Failed to send {failed} out of {len(recipients)} emails.",
            requested=len(recipients),
            sent=sent,
            failed=failed
        )

    def send_booking_confirmation(self, booking: Booking, addresses: Iterable[str]) -> DispatchResult:
        """Send the default confirmation email for a booking."""
        template = build_confirmation_template(booking)
        return self.send_notifications(addresses, template.subject, template.message)

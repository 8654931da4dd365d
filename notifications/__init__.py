"""
Notifications package for the court scheduler.
"""

from .notification_sender import (
    NotificationSender, NotificationError, is_valid_email, validate_recipients,
    build_confirmation_template, to_html
)

__all__ = [
    'NotificationSender', 'NotificationError', 'is_valid_email', 'validate_recipients',
    'build_confirmation_template', 'to_html'
]

"""
Notification data models for the court scheduler.
"""

from dataclasses import dataclass


@dataclass
class EmailTemplate:
    """Subject and plain-text body of a notification email."""
    subject: str
    message: str


@dataclass(frozen=True)
class DispatchResult:
    """Aggregate outcome of sending one notification batch."""
    status: str
    message: str
    requested: int = 0
    sent: int = 0
    failed: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status == 'success'

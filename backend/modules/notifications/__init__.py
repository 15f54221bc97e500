"""
Notifications module.

Sends best-effort outbound messages (currently the signup welcome email).

Public API:
- INotificationSender: Interface for notification delivery
- EmailNotificationSender: SMTP implementation
- NotificationDeliveryError: Raised when the transport fails
"""

from .interfaces import INotificationSender
from .service import EmailNotificationSender
from .exceptions import NotificationDeliveryError

__all__ = [
    "INotificationSender",
    "EmailNotificationSender",
    "NotificationDeliveryError",
]

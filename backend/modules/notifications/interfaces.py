"""
Notifications module interface.

The auth module depends on INotificationSender, not on SMTP, so tests
can swap in a fake transport.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotificationSender(Protocol):
    """Interface for outbound user notifications."""

    async def send_welcome(self, email: str, username: str) -> None:
        """
        Send the welcome message for a newly registered account.

        Args:
            email: Recipient address
            username: The new account's username

        Raises:
            NotificationDeliveryError: If the transport fails
        """
        ...

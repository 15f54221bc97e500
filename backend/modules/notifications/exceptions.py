"""
Notifications module exceptions.
"""

from shared.exceptions import ExternalServiceError


class NotificationDeliveryError(ExternalServiceError):
    """Raised when a message could not be handed to the mail transport."""

    def __init__(self, recipient: str, original_error: str):
        super().__init__(
            f"Failed to deliver notification to {recipient}",
            service="smtp",
            code="NOTIFICATION_DELIVERY_FAILED",
            details={"recipient": recipient, "original_error": original_error},
        )

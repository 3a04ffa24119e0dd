"""Notification adapter that writes each notification as a log event.

Stands in for a real transport (e-mail, SMS). Every call is
recorded under the ``notification`` event key so it can be picked
up from the structured log stream.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.notification.notification_service import (
    NotificationService,
)

logger = structlog.get_logger(__name__)


class LoggingNotificationService(NotificationService):

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        logger.info(
            "Notification sent",
            notification="delay",
            product_name=product_name,
            lead_time=lead_time,
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.info(
            "Notification sent",
            notification="out_of_stock",
            product_name=product_name,
        )

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime | None
    ) -> None:
        logger.info(
            "Notification sent",
            notification="expiration",
            product_name=product_name,
            expiry_date=expiry_date.isoformat() if expiry_date else None,
        )

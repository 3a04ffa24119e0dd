"""Notification port: one-way calls fired when stock cannot be sold.

Calls are fire-and-forget from the caller's point of view: nothing is
returned and delivery is not confirmed. Adapter failures propagate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationService(ABC):

    @abstractmethod
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        """Tell the customer the product arrives in *lead_time* days."""

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        """Tell the customer the product cannot be supplied this season."""

    @abstractmethod
    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime | None
    ) -> None:
        """Tell the customer the remaining stock has expired."""

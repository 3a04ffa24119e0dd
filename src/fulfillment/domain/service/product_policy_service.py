"""Domain service: Product Policy Evaluator.

Decides, for one purchased unit, whether stock is decremented or a
notification is sent instead. The decision depends on the product's
lifecycle policy:

- NORMAL: sell from stock, otherwise announce the restock delay.
- SEASONAL: sell only inside the season window, otherwise decide
  between "out of stock for the season" and a restock delay.
- EXPIRABLE: sell only before the expiry date, otherwise write the
  remaining stock off and announce the expiration.

Every update is a plain read-modify-write computed from the product
snapshot passed in. There is no locking and no dedup: processing the
same snapshot twice writes the same decremented value twice, and two
concurrent requests for one product can lose an update.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import structlog

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import Product, ProductType, as_utc
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductPolicyService:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifications: NotificationService,
    ) -> None:
        self._product_repo = product_repo
        self._notifications = notifications
        self._policies: dict[ProductType, Callable[[Product, datetime], None]] = {
            ProductType.NORMAL: self._process_normal,
            ProductType.SEASONAL: self._process_seasonal,
            ProductType.EXPIRABLE: self._process_expirable,
        }

    def process_one_unit(self, product: Product, now: datetime | None = None) -> None:
        """Process the purchase of exactly one unit of *product*."""
        now = as_utc(now) if now is not None else _utcnow()
        policy = self._policies.get(product.type)
        if policy is None:
            raise ValidationError(
                f"No fulfillment policy for product type {product.type!r} "
                f"(product #{product.id})"
            )
        policy(product, now)

    # --- Policies -------------------------------------------------------------

    def _process_normal(self, product: Product, now: datetime) -> None:
        if product.in_stock:
            self._decrement_available(product)
            return

        if product.lead_time > 0:
            self.notify_delay(product.lead_time, product)
            return

        logger.debug(
            "No stock and no restock planned",
            product_id=product.id,
            product_type=product.type.value,
        )

    def _process_seasonal(self, product: Product, now: datetime) -> None:
        if product.is_within_season(now) and product.in_stock:
            self._decrement_available(product)
            return

        self.handle_seasonal_product(product, now)

    def _process_expirable(self, product: Product, now: datetime) -> None:
        if product.in_stock and product.is_not_expired(now):
            self._decrement_available(product)
            return

        self.handle_expired_product(product, now)

    # --- Fallback handlers ----------------------------------------------------

    def handle_seasonal_product(
        self, product: Product, now: datetime | None = None
    ) -> None:
        """Handle a seasonal product that cannot be sold right now."""
        now = as_utc(now) if now is not None else _utcnow()

        if product.restocks_after_season(now):
            logger.info(
                "Restock falls after season end",
                product_id=product.id,
                expected_restock_date=product.expected_restock_date(now).isoformat(),
                season_end_date=_iso(product.season_end_date),
            )
            self._notifications.send_out_of_stock_notification(product.name)
            self._product_repo.update(product.id, available=0)
            return

        if not product.has_season_started(now):
            logger.info(
                "Season not started",
                product_id=product.id,
                season_start_date=_iso(product.season_start_date),
            )
            self._notifications.send_out_of_stock_notification(product.name)
            # Rewritten unchanged so the row is still touched on this path.
            self._product_repo.update(
                product.id,
                available=product.available,
                lead_time=product.lead_time,
            )
            return

        self.notify_delay(product.lead_time, product)

    def handle_expired_product(
        self, product: Product, now: datetime | None = None
    ) -> None:
        """Write off the stock of an expired (or empty) perishable product."""
        now = as_utc(now) if now is not None else _utcnow()

        # Not reachable from process_one_unit, which already ruled this out.
        if product.in_stock and product.is_not_expired(now):
            self._decrement_available(product)
            return

        logger.info(
            "Product expired",
            product_id=product.id,
            expiry_date=_iso(product.expiry_date),
            written_off=product.available,
        )
        self._notifications.send_expiration_notification(
            product.name, product.expiry_date
        )
        self._product_repo.update(product.id, available=0)

    def notify_delay(self, lead_time: int, product: Product) -> None:
        """Persist the lead time and announce the restock delay."""
        self._product_repo.update(product.id, lead_time=lead_time)
        logger.info(
            "Restock delay",
            product_id=product.id,
            product_type=product.type.value,
            lead_time=lead_time,
        )
        self._notifications.send_delay_notification(lead_time, product.name)

    # --- Internal helpers -----------------------------------------------------

    def _decrement_available(self, product: Product) -> None:
        remaining = product.available - 1
        self._product_repo.update(product.id, available=remaining)
        logger.info(
            "Unit sold",
            product_id=product.id,
            product_type=product.type.value,
            available=remaining,
        )


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None

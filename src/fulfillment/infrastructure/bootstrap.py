"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fulfillment.domain.service.product_policy_service import ProductPolicyService
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.notification.logging_notification_service import (
    LoggingNotificationService,
)
from fulfillment.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from fulfillment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().data_dir / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def notification_service() -> LoggingNotificationService:
    return LoggingNotificationService()


def product_policy_service(
    product_repo: JsonProductRepository | None = None,
) -> ProductPolicyService:
    return ProductPolicyService(
        product_repo=product_repo or product_repository(),
        notifications=notification_service(),
    )

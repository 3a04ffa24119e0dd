"""Application service: Process Order use case.

Walks the order's units in sequence and hands each one to the
product policy service. The product is re-read from the repository
before every unit, so repeated units of the same product see the
stock left by the previous one.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.product_policy_service import ProductPolicyService

logger = structlog.get_logger(__name__)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        policy_service: ProductPolicyService,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._policy_service = policy_service

    def handle(self, order_id: int, now: datetime | None = None) -> int:
        """Process every unit of the order and return its ID."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        logger.info("Processing order", order_id=order_id, units=order.unit_count)

        for product_id in order.product_ids:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product #{product_id} referenced by order #{order_id} not found"
                )
            self._policy_service.process_one_unit(product, now)

        logger.info("Order processed", order_id=order_id)
        return order_id

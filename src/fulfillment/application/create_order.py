"""Application service: Create Order use case."""

from __future__ import annotations

from fulfillment.application.dto import OrderDTO
from fulfillment.application.show_order import to_order_dto
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.order import Order
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, product_ids: list[int]) -> OrderDTO:
        """Create an order with one entry per purchased unit.

        Every referenced product must exist at creation time.
        """
        names: dict[int, str] = {}
        for product_id in product_ids:
            if product_id in names:
                continue
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            names[product_id] = product.name

        order = Order.create(product_ids=product_ids)
        self._order_repo.save(order)

        return to_order_dto(order, names)

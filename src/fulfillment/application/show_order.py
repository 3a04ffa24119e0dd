"""Application service: Show Order use case (query)."""

from __future__ import annotations

from fulfillment.application.dto import OrderDTO, OrderLineDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.order import Order
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        names: dict[int, str] = {}
        for product_id in order.units_by_product():
            product = self._product_repo.get_by_id(product_id)
            # Products may have been removed from storage since ordering.
            names[product_id] = product.name if product is not None else "?"
        return to_order_dto(order, names)


def to_order_dto(order: Order, names: dict[int, str]) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        lines=[
            OrderLineDTO(
                product_id=product_id,
                product_name=names.get(product_id, "?"),
                units=units,
            )
            for product_id, units in order.units_by_product().items()
        ],
        unit_count=order.unit_count,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )

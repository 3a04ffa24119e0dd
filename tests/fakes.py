"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the JSON
repositories but keep everything in a dict. Like a real store they
hand out copies, so a product snapshot held by a test is never
changed behind its back. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.order import Order
from fulfillment.domain.model.product import Product
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        for order in orders or []:
            self.save(order)

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
        self._next_id = max(self._next_id, order.id + 1)
        self._store[order.id] = order


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self.updates: list[tuple[int, dict]] = []
        for p in products or []:
            self._store[p.id] = replace(p)

    def next_id(self) -> int:
        return max(self._store, default=0) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return replace(p)
        return None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        self._store[product.id] = replace(product)

    def update(self, product_id: int, **fields: object) -> None:
        if product_id not in self._store:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self.updates.append((product_id, dict(fields)))
        self._store[product_id] = replace(self._store[product_id], **fields)


class FakeNotificationService(NotificationService):
    """Records every notification for test assertions."""

    def __init__(self) -> None:
        self.delays: list[tuple[int, str]] = []
        self.out_of_stock: list[str] = []
        self.expirations: list[tuple[str, datetime | None]] = []

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        self.delays.append((lead_time, product_name))

    def send_out_of_stock_notification(self, product_name: str) -> None:
        self.out_of_stock.append(product_name)

    def send_expiration_notification(
        self, product_name: str, expiry_date: datetime | None
    ) -> None:
        self.expirations.append((product_name, expiry_date))

    @property
    def sent_count(self) -> int:
        return len(self.delays) + len(self.out_of_stock) + len(self.expirations)

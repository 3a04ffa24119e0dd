"""Order aggregate.

An order is a list of product references, one entry per purchased
unit. Fulfillment never changes the order itself; it only drives the
stock updates of the products it references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fulfillment.domain.exceptions import ValidationError


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__``
    is intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    product_ids: list[int]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_ids: list[int]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not product_ids:
            raise ValidationError("Order must contain at least one unit")

        return Order(id=None, product_ids=list(product_ids))

    @property
    def unit_count(self) -> int:
        return len(self.product_ids)

    def units_by_product(self) -> dict[int, int]:
        """Count purchased units per product, in first-seen order."""
        counts: dict[int, int] = {}
        for product_id in self.product_ids:
            counts[product_id] = counts.get(product_id, 0) + 1
        return counts

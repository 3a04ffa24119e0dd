"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        product_type: str,
        available: int,
        lead_time: int,
        expiry_date: datetime | None = None,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            type=ProductType.parse(product_type),
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
        )
        self._product_repo.save(product)
        return product

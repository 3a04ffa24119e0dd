"""Application service: List Products use case (query)."""

from __future__ import annotations

from datetime import datetime

from fulfillment.application.dto import ProductDTO
from fulfillment.domain.model.product import Product
from fulfillment.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id)
        return [self._to_dto(p) for p in products]

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        if product.season_start_date or product.season_end_date:
            season = (
                f"{_fmt(product.season_start_date)} .. {_fmt(product.season_end_date)}"
            )
        else:
            season = "-"
        return ProductDTO(
            id=product.id,
            name=product.name,
            type=product.type.value,
            available=product.available,
            lead_time=product.lead_time,
            expiry_date=_fmt(product.expiry_date),
            season=season,
        )


def _fmt(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "-"

"""Product aggregate.

Products pre-exist in storage. Purchases mutate ``available`` and
``lead_time`` in place; nothing in the fulfillment flow creates or
deletes a product.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from fulfillment.domain.exceptions import ValidationError


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"

    @staticmethod
    def parse(raw: object) -> ProductType:
        """Resolve a stored or user-supplied type tag."""
        known = ", ".join(t.value for t in ProductType)
        if not isinstance(raw, str):
            raise ValidationError(
                f"Unknown product type {raw!r} (expected one of {known})"
            )
        try:
            return ProductType(raw.strip().upper())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown product type {raw!r} (expected one of {known})"
            ) from exc


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Product:
    """A product together with its lifecycle policy inputs.

    ``expiry_date`` only matters for EXPIRABLE products and the season
    bounds only matter for SEASONAL ones. Missing dates are allowed;
    the predicates below simply evaluate to False for them. Naive dates
    are stored as UTC.
    """

    id: int
    name: str
    type: ProductType
    available: int
    lead_time: int
    expiry_date: datetime | None = None
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None

    def __post_init__(self) -> None:
        for attr in ("expiry_date", "season_start_date", "season_end_date"):
            value = getattr(self, attr)
            if value is not None:
                setattr(self, attr, as_utc(value))

        if self.available < 0:
            raise ValidationError(
                f"Available stock cannot be negative, got {self.available}"
            )
        if self.lead_time < 0:
            raise ValidationError(
                f"Lead time cannot be negative, got {self.lead_time}"
            )
        if (
            self.season_start_date is not None
            and self.season_end_date is not None
            and self.season_start_date > self.season_end_date
        ):
            raise ValidationError(
                f"Season for {self.name} starts after it ends "
                f"({self.season_start_date.isoformat()} > "
                f"{self.season_end_date.isoformat()})"
            )

    @property
    def in_stock(self) -> bool:
        return self.available > 0

    # --- Lifecycle predicates -------------------------------------------------

    def is_within_season(self, now: datetime) -> bool:
        """True only when *now* lies strictly inside the season window."""
        now = as_utc(now)
        if self.season_start_date is None or self.season_end_date is None:
            return False
        return self.season_start_date < now < self.season_end_date

    def has_season_started(self, now: datetime) -> bool:
        now = as_utc(now)
        if self.season_start_date is None:
            return True
        return self.season_start_date <= now

    def is_not_expired(self, now: datetime) -> bool:
        """A product expiring exactly at *now* counts as expired."""
        now = as_utc(now)
        if self.expiry_date is None:
            return False
        return self.expiry_date > now

    def expected_restock_date(self, now: datetime) -> datetime:
        return as_utc(now) + timedelta(days=self.lead_time)

    def restocks_after_season(self, now: datetime) -> bool:
        """True when the next restock lands after the season closes.

        A product without a season end has nowhere to sell the restocked
        units, so it is treated the same as a late restock.
        """
        if self.season_end_date is None:
            return True
        return self.expected_restock_date(now) > self.season_end_date

"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog row as displayed to the user."""

    id: int
    name: str
    type: str
    available: int
    lead_time: int
    expiry_date: str  # formatted date or "-"
    season: str  # "start .. end" or "-"


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: units ordered for one product."""

    product_id: int
    product_name: str
    units: int


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    lines: list[OrderLineDTO]
    unit_count: int
    created_at: str

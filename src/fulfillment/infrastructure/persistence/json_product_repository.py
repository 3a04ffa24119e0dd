"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from fulfillment.domain.exceptions import EntityNotFoundError, ValidationError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository

_PATCHABLE_FIELDS = {
    "name",
    "type",
    "available",
    "lead_time",
    "expiry_date",
    "season_start_date",
    "season_end_date",
}


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        records = self._load_raw()
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))

        self._persist_raw(records)

    def update(self, product_id: int, **fields: object) -> None:
        unknown = set(fields) - _PATCHABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot patch unknown product fields: {sorted(unknown)}")

        records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                # Only the patched keys are rewritten; the read-modify-write
                # of the whole file is not guarded against concurrent writers.
                raw.update(self._to_raw_fields(fields))
                self._persist_raw(records)
                return
        raise EntityNotFoundError(f"Product #{product_id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "type": product.type.value,
            "available": product.available,
            "lead_time": product.lead_time,
            "expiry_date": _dump_dt(product.expiry_date),
            "season_start_date": _dump_dt(product.season_start_date),
            "season_end_date": _dump_dt(product.season_end_date),
        }

    @staticmethod
    def _to_raw_fields(fields: dict[str, object]) -> dict:
        raw: dict[str, object] = {}
        for key, value in fields.items():
            if isinstance(value, ProductType):
                raw[key] = value.value
            elif isinstance(value, datetime):
                raw[key] = _dump_dt(value)
            else:
                raw[key] = value
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            type=ProductType.parse(raw["type"]),
            available=raw["available"],
            lead_time=raw.get("lead_time", 0),
            expiry_date=_load_dt(raw.get("expiry_date")),
            season_start_date=_load_dt(raw.get("season_start_date")),
            season_end_date=_load_dt(raw.get("season_end_date")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _dump_dt(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_dt(value: str | None) -> datetime | None:
    """Parse a stored ISO-8601 timestamp; naive values are taken as UTC."""
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid stored timestamp {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

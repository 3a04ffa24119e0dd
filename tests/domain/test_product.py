"""Unit tests for the Product aggregate and its lifecycle predicates."""

from datetime import datetime, timedelta, timezone

import pytest

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import Product, ProductType

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _seasonal(start=NOW - 2 * DAY, end=NOW + 10 * DAY, lead_time=5):
    return Product(
        id=1, name="Watermelon", type=ProductType.SEASONAL,
        available=3, lead_time=lead_time,
        season_start_date=start, season_end_date=end,
    )


def _expirable(expiry_date):
    return Product(
        id=1, name="Milk", type=ProductType.EXPIRABLE,
        available=3, lead_time=5, expiry_date=expiry_date,
    )


class TestProductValidation:

    def test_negative_available_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(id=1, name="Cable", type=ProductType.NORMAL, available=-1, lead_time=0)

    def test_negative_lead_time_rejected(self):
        with pytest.raises(ValidationError, match="Lead time"):
            Product(id=1, name="Cable", type=ProductType.NORMAL, available=0, lead_time=-3)

    def test_season_start_after_end_rejected(self):
        with pytest.raises(ValidationError, match="starts after it ends"):
            _seasonal(start=NOW + DAY, end=NOW)

    def test_naive_dates_stored_as_utc(self):
        product = _seasonal(start=datetime(2024, 6, 1), end=datetime(2024, 8, 31))
        assert product.season_start_date == datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert product.season_end_date.tzinfo is timezone.utc

    def test_single_instant_season_allowed(self):
        product = _seasonal(start=NOW, end=NOW)
        assert product.season_start_date == product.season_end_date


class TestProductTypeParse:

    def test_parse_is_case_insensitive(self):
        assert ProductType.parse(" seasonal ") is ProductType.SEASONAL

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValidationError, match="Unknown product type"):
            ProductType.parse("FROZEN")

    @pytest.mark.parametrize("raw", [None, 3])
    def test_non_string_tag_rejected(self, raw):
        with pytest.raises(ValidationError, match="Unknown product type"):
            ProductType.parse(raw)


class TestSeasonWindow:

    def test_now_inside_window(self):
        assert _seasonal().is_within_season(NOW) is True

    def test_exactly_at_start_is_out_of_season(self):
        assert _seasonal(start=NOW).is_within_season(NOW) is False

    def test_exactly_at_end_is_out_of_season(self):
        assert _seasonal(end=NOW).is_within_season(NOW) is False

    def test_missing_bound_is_out_of_season(self):
        assert _seasonal(start=None).is_within_season(NOW) is False
        assert _seasonal(end=None).is_within_season(NOW) is False

    def test_season_started(self):
        assert _seasonal(start=NOW + DAY).has_season_started(NOW) is False
        assert _seasonal(start=NOW).has_season_started(NOW) is True
        assert _seasonal(start=None).has_season_started(NOW) is True


class TestRestockDate:

    def test_expected_restock_adds_lead_time_days(self):
        assert _seasonal(lead_time=7).expected_restock_date(NOW) == NOW + 7 * DAY

    def test_restock_after_season_end(self):
        assert _seasonal(end=NOW + 3 * DAY, lead_time=5).restocks_after_season(NOW) is True

    def test_restock_exactly_at_season_end_is_in_time(self):
        assert _seasonal(end=NOW + 5 * DAY, lead_time=5).restocks_after_season(NOW) is False

    def test_missing_season_end_counts_as_late_restock(self):
        assert _seasonal(end=None).restocks_after_season(NOW) is True


class TestExpiry:

    def test_future_expiry_not_expired(self):
        assert _expirable(NOW + DAY).is_not_expired(NOW) is True

    def test_expiring_exactly_now_is_expired(self):
        assert _expirable(NOW).is_not_expired(NOW) is False

    def test_past_expiry_is_expired(self):
        assert _expirable(NOW - DAY).is_not_expired(NOW) is False

    def test_missing_expiry_is_expired(self):
        assert _expirable(None).is_not_expired(NOW) is False

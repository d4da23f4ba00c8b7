"""
Unit tests for record normalization.
"""

from product_scraper.models import PLACEHOLDER, ProductRecord
from product_scraper.processing import normalize_record, normalize_records


class TestNormalizer:
    """Test cases for normalize_records."""

    def test_fills_missing_fields(self):
        records = [
            {"name": "", "price": None, "url": "https://ebay.com/itm/1", "description": ""},
            {"url": "https://ebay.com/itm/2"},
        ]

        result = normalize_records(records)

        for record in result:
            assert record.name == PLACEHOLDER
            assert record.price == PLACEHOLDER
            assert record.description == PLACEHOLDER
        assert [r.url for r in result] == ["https://ebay.com/itm/1", "https://ebay.com/itm/2"]

    def test_complete_records_are_unchanged(self):
        records = [
            ProductRecord(name="Mouse", price="$5.00", url="https://ebay.com/itm/1", description="Wireless"),
            ProductRecord(name="Pad", price="$2.00", url="https://ebay.com/itm/2", description="Large"),
        ]

        result = normalize_records(records)

        assert result == records
        assert normalize_records(result) == result

    def test_preserves_order_and_length(self):
        records = [
            ProductRecord(name=f"n{i}", price="", url=f"u{i}", description="d")
            for i in range(10)
        ]

        result = normalize_records(records)

        assert [r.url for r in result] == [f"u{i}" for i in range(10)]
        assert all(r.price == PLACEHOLDER for r in result)

    def test_url_is_not_altered(self):
        record = normalize_record(
            {"name": "x", "price": "y", "url": "https://ebay.com/itm/1?hash=abc", "description": "z"}
        )
        assert record.url == "https://ebay.com/itm/1?hash=abc"

    def test_empty_input(self):
        assert normalize_records([]) == []

    def test_missing_url_becomes_empty_string(self):
        record = normalize_record({"name": "x", "price": "y", "url": None, "description": "z"})
        assert record.url == ""

    def test_non_string_values_are_coerced(self):
        record = normalize_record(
            {"name": "Lamp", "price": 12.5, "url": "https://ebay.com/itm/1", "description": 0}
        )
        assert record.price == "12.5"
        assert record.description == PLACEHOLDER

"""Tests for wire payload conversion."""

import pytest

from receipt_points.domain.entities import Item, Receipt
from receipt_points.domain.errors import ValidationError
from receipt_points.utils.payload import receipt_from_payload, receipt_to_payload


class TestReceiptFromPayload:
    """Tests for decoding payloads into candidate receipts."""

    def test_decodes_fields(self, target_payload):
        """Test that camelCase keys map onto entity fields."""
        receipt = receipt_from_payload(target_payload)

        assert receipt.id is None
        assert receipt.retailer == "Target"
        assert receipt.purchase_date == "2022-01-01"
        assert receipt.purchase_time == "13:01"
        assert receipt.total == "35.35"
        assert len(receipt.items) == 5
        assert receipt.items[-1] == Item(
            short_description="   Klarbrunn 12-PK 12 FL OZ  ", price="12.00"
        )

    def test_unknown_keys_ignored(self, target_payload):
        """Test that extra keys do not affect decoding."""
        target_payload["id"] = "client-id"
        target_payload["note"] = "extra"
        assert receipt_from_payload(target_payload).id is None

    def test_empty_items_decoded(self, target_payload):
        """Test that an empty item list is left for the validator to reject."""
        target_payload["items"] = []
        assert receipt_from_payload(target_payload).items == ()

    @pytest.mark.parametrize("key", ["retailer", "purchaseDate", "purchaseTime", "total", "items"])
    def test_missing_key(self, target_payload, key):
        """Test that every key is required."""
        del target_payload[key]
        with pytest.raises(ValidationError):
            receipt_from_payload(target_payload)

    def test_numeric_total_rejected(self, target_payload):
        """Test that amounts must be strings."""
        target_payload["total"] = 35.35
        with pytest.raises(ValidationError):
            receipt_from_payload(target_payload)

    def test_item_not_object(self, target_payload):
        """Test that each item must be an object."""
        target_payload["items"] = ["Pepsi"]
        with pytest.raises(ValidationError):
            receipt_from_payload(target_payload)

    def test_item_missing_price(self, target_payload):
        """Test that item keys are required."""
        del target_payload["items"][0]["price"]
        with pytest.raises(ValidationError):
            receipt_from_payload(target_payload)

    @pytest.mark.parametrize("payload", [None, [], "receipt", 42])
    def test_non_object_payload(self, payload):
        """Test that the payload must be a JSON object."""
        with pytest.raises(ValidationError):
            receipt_from_payload(payload)


class TestReceiptToPayload:
    """Tests for encoding receipts to their wire shape."""

    def test_encodes_without_id(self):
        """Test that the stored id is not part of the payload."""
        payload = receipt_to_payload(
            Receipt(
                id="r-1",
                retailer="Target",
                purchase_date="2022-01-02",
                purchase_time="13:13",
                total="1.25",
                items=(Item(short_description="Pepsi - 12-oz", price="1.25"),),
            )
        )
        assert payload == {
            "retailer": "Target",
            "purchaseDate": "2022-01-02",
            "purchaseTime": "13:13",
            "total": "1.25",
            "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}],
        }

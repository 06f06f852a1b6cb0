"""Conversion between wire-shaped receipt payloads and domain entities."""

from typing import Any

from receipt_points.domain.entities import Item, Receipt
from receipt_points.domain.errors import INVALID_RECEIPT, ValidationError


def _require_str(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValidationError(INVALID_RECEIPT)
    return value


def item_from_payload(payload: Any) -> Item:
    """Build a candidate Item from a decoded ``{"shortDescription", "price"}`` object."""
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_RECEIPT)
    return Item(
        short_description=_require_str(payload, "shortDescription"),
        price=_require_str(payload, "price"),
    )


def receipt_from_payload(payload: Any) -> Receipt:
    """Build a candidate Receipt from a decoded JSON object.

    Only the shape of the payload is checked here (keys present, strings
    where strings are expected). Field rules are left to the validator.
    Unknown keys are ignored.

    Args:
        payload: Decoded JSON value, e.g.::

            {
                "retailer": "Target",
                "purchaseDate": "2022-01-02",
                "purchaseTime": "13:13",
                "total": "1.25",
                "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}]
            }

    Returns:
        Receipt entity without an id

    Raises:
        ValidationError: If the payload is not an object of the expected shape
    """
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_RECEIPT)

    items = payload.get("items")
    if not isinstance(items, list):
        raise ValidationError(INVALID_RECEIPT)

    return Receipt(
        retailer=_require_str(payload, "retailer"),
        purchase_date=_require_str(payload, "purchaseDate"),
        purchase_time=_require_str(payload, "purchaseTime"),
        total=_require_str(payload, "total"),
        items=tuple(item_from_payload(item) for item in items),
    )


def receipt_to_payload(receipt: Receipt) -> dict[str, Any]:
    """Convert a Receipt back to its wire shape (the id is not included)."""
    return {
        "retailer": receipt.retailer,
        "purchaseDate": receipt.purchase_date,
        "purchaseTime": receipt.purchase_time,
        "total": receipt.total,
        "items": [
            {"shortDescription": item.short_description, "price": item.price}
            for item in receipt.items
        ],
    }

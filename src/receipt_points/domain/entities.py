"""Domain model entities for receipt-points.

These are pure data classes representing submitted receipts, independent of
the database schema. Each field declares its structural rules in the field
metadata so that the validator can check any entity without per-field code.

Numeric values (prices, totals) stay as fixed two-decimal strings here; only
the points calculator parses them.
"""

from dataclasses import dataclass, field
from typing import Optional

from receipt_points.domain.validation import MinCount, Pattern, rules

AMOUNT_PATTERN = r"^\d+\.\d{2}$"


@dataclass(frozen=True)
class Item:
    """Receipt line item domain entity."""

    short_description: str = field(metadata=rules(Pattern(r"^[\w\s\-]+$")))
    price: str = field(metadata=rules(Pattern(AMOUNT_PATTERN)))


@dataclass(frozen=True)
class Receipt:
    """Receipt domain entity.

    ``id`` is None until the receipt has been accepted for storage.
    """

    retailer: str = field(metadata=rules(Pattern(r"^[\w\s\-&]+$")))
    purchase_date: str = field(metadata=rules(Pattern(r"^\d{4}-\d{2}-\d{2}$")))
    purchase_time: str = field(metadata=rules(Pattern(r"^\d{2}:\d{2}$")))
    items: tuple[Item, ...] = field(metadata=rules(MinCount(1)))
    total: str = field(metadata=rules(Pattern(AMOUNT_PATTERN)))
    id: Optional[str] = None
